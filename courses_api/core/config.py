"""Application configuration from environment."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    app_name: str = "Courses REST API"
    debug: bool = False

    # Database
    database_url: str = "sqlite+aiosqlite:///./courses_api.db"

    # Server
    host: str = "127.0.0.1"
    port: int = 5000

    # Logging
    log_level: str = "INFO"
    enable_global_error_logging: bool = False

    # bcrypt cost factor (4..31)
    bcrypt_rounds: int = 12

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    return Settings()
