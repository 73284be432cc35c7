"""Course routes: public listing and lookup, owner-only changes."""
from typing import Annotated

from fastapi import APIRouter, Depends

from courses_api.db.repositories import CourseRepository, UserRepository
from courses_api.routers.deps import get_course_repository, get_current_user, get_user_repository
from courses_api.schemas.course import CourseInSchema
from courses_api.schemas.user import UserRecord
from courses_api.services import courses as course_service
from courses_api.services.results import to_response

router = APIRouter(tags=["courses"])


def _body(body: CourseInSchema | None) -> dict:
    return body.model_dump(by_alias=True, exclude_unset=True) if body else {}


@router.get("/courses")
async def list_courses(courses: Annotated[CourseRepository, Depends(get_course_repository)]):
    """All courses with their owners."""
    return to_response(await course_service.list_courses(courses))


@router.get("/courses/{course_id}")
async def get_course(
    course_id: int,
    courses: Annotated[CourseRepository, Depends(get_course_repository)],
):
    return to_response(await course_service.get_course(course_id, courses))


@router.post("/courses", status_code=201)
async def create_course(
    current_user: Annotated[UserRecord, Depends(get_current_user)],
    courses: Annotated[CourseRepository, Depends(get_course_repository)],
    users: Annotated[UserRepository, Depends(get_user_repository)],
    body: CourseInSchema | None = None,
):
    return to_response(await course_service.create_course(_body(body), current_user, courses, users))


@router.put("/courses/{course_id}", status_code=204)
async def update_course(
    course_id: int,
    current_user: Annotated[UserRecord, Depends(get_current_user)],
    courses: Annotated[CourseRepository, Depends(get_course_repository)],
    body: CourseInSchema | None = None,
):
    return to_response(await course_service.update_course(course_id, _body(body), current_user, courses))


@router.delete("/courses/{course_id}", status_code=204)
async def delete_course(
    course_id: int,
    current_user: Annotated[UserRecord, Depends(get_current_user)],
    courses: Annotated[CourseRepository, Depends(get_course_repository)],
):
    return to_response(await course_service.delete_course(course_id, current_user, courses))
