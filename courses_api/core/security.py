"""Password hashing and HTTP Basic credential extraction."""
from fastapi.security import HTTPBasic
from passlib.context import CryptContext

# bcrypt hard limit: 72 bytes (UTF-8)
MAX_PASSWORD_BYTES = 72

# auto_error=False: missing credentials are reported by the auth service, not FastAPI
basic_auth = HTTPBasic(auto_error=False)


def build_password_context(rounds: int = 12) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def verify_password(context: CryptContext, plain: str, hashed: str) -> bool:
    # bcrypt only sees the first 72 bytes; a longer secret can never be the stored one
    if len(plain.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return False
    return context.verify(plain, hashed)


def hash_password(context: CryptContext, password: str) -> str:
    return context.hash(password)
