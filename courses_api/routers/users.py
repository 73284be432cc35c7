"""User routes: current user profile and registration."""
from typing import Annotated

from fastapi import APIRouter, Depends
from passlib.context import CryptContext

from courses_api.db.repositories import UserRepository
from courses_api.routers.deps import get_current_user, get_pwd_context, get_user_repository
from courses_api.schemas.user import UserCreateSchema, UserRecord
from courses_api.services import users as user_service
from courses_api.services.results import to_response

router = APIRouter(tags=["users"])


@router.get("/users")
async def read_current_user(current_user: Annotated[UserRecord, Depends(get_current_user)]):
    """Return the authenticated user (never the password)."""
    return to_response(user_service.get_profile(current_user))


@router.post("/users", status_code=201)
async def create_user(
    users: Annotated[UserRepository, Depends(get_user_repository)],
    pwd_context: Annotated[CryptContext, Depends(get_pwd_context)],
    body: UserCreateSchema | None = None,
):
    """Create a user; 201 with Location: /."""
    data = body.model_dump(by_alias=True, exclude_unset=True) if body else {}
    return to_response(await user_service.create_user(data, users, pwd_context))
