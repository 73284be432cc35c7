"""Courses REST API - FastAPI app factory and entry point."""
import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from passlib.context import CryptContext
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from courses_api.core.config import Settings, get_settings
from courses_api.core.log import configure_logging
from courses_api.core.security import build_password_context
from courses_api.db.base import Base
from courses_api.db.session import build_engine, build_session_factory
from courses_api.routers import courses, users
from courses_api.routers.deps import AuthenticationError
from courses_api.services.results import ACCESS_DENIED

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND = "Route Not Found"


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Your connection to the database was successful!")
    except SQLAlchemyError:
        logger.exception("Database initialization failed. Check DATABASE_URL.")

    yield

    await engine.dispose()


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": {"message": message}}, status_code=status_code)


def _describe(error: dict) -> str:
    if error.get("type") == "json_invalid":
        return "Request body is not valid JSON"
    loc = error.get("loc") or ()
    field = loc[-1] if len(loc) > 1 else "body"
    return f'"{field}": {error.get("msg")}'


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request: Request, exc: AuthenticationError):
        return JSONResponse({"message": ACCESS_DENIED}, status_code=401)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse({"errors": [_describe(e) for e in exc.errors()]}, status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        # unknown path and wrong method both read as an unmatched route
        if exc.status_code in (404, 405):
            return _error(ROUTE_NOT_FOUND, 404)
        # malformed Basic header
        if exc.status_code == 401:
            return JSONResponse({"message": ACCESS_DENIED}, status_code=401)
        return _error(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def global_error_handler(request: Request, exc: Exception):
        if request.app.state.settings.enable_global_error_logging:
            logger.error("Global error handler: %s %s", request.method, request.url.path, exc_info=exc)
        status_code = getattr(exc, "status_code", None) or getattr(exc, "status", None) or 500
        return _error(str(exc), status_code)


def create_app(settings: Settings | None = None, pwd_context: CryptContext | None = None) -> FastAPI:
    """Build the application with its own engine, session factory and password context."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description="REST API for users and the courses they own",
        debug=settings.debug,
        lifespan=lifespan,
    )

    engine = build_engine(settings.database_url, echo=settings.debug)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.pwd_context = pwd_context or build_password_context(settings.bcrypt_rounds)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info("%s %s %s %.3f ms", request.method, request.url.path, response.status_code, elapsed_ms)
        return response

    register_exception_handlers(app)

    @app.get("/")
    async def root():
        return {"message": "Welcome to the REST API project!"}

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    app.include_router(users.router, prefix="/api")
    app.include_router(courses.router, prefix="/api")

    return app


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "courses_api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
