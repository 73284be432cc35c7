"""Shared FastAPI dependencies: repositories, password context, current user."""
from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPBasicCredentials
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from courses_api.core.security import basic_auth
from courses_api.db.repositories import CourseRepository, UserRepository
from courses_api.db.session import get_db
from courses_api.schemas.user import UserRecord
from courses_api.services.auth import authenticate
from courses_api.services.results import Err


class AuthenticationError(Exception):
    """Raised to short-circuit a protected route with 401."""

    status_code = 401


def get_user_repository(db: Annotated[AsyncSession, Depends(get_db)]) -> UserRepository:
    return UserRepository(db)


def get_course_repository(db: Annotated[AsyncSession, Depends(get_db)]) -> CourseRepository:
    return CourseRepository(db)


def get_pwd_context(request: Request) -> CryptContext:
    return request.app.state.pwd_context


async def get_current_user(
    credentials: Annotated[HTTPBasicCredentials | None, Depends(basic_auth)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
    pwd_context: Annotated[CryptContext, Depends(get_pwd_context)],
) -> UserRecord:
    result = await authenticate(credentials, users, pwd_context)
    if isinstance(result, Err):
        raise AuthenticationError(result.detail)
    return result.payload
