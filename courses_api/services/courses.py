"""Course handlers: public reads, owner-only writes."""
import logging
from typing import Any

from courses_api.db.repositories import CourseRepository, UserRepository
from courses_api.schemas.course import CourseEnvelopeSchema
from courses_api.schemas.user import UserRecord
from courses_api.services.results import Err, ErrorKind, Ok, Result
from courses_api.services.validation import COURSE_RULES, validate

logger = logging.getLogger(__name__)

COURSE_NOT_FOUND = "Course not exist"
NOT_COURSE_OWNER = "User has no course"
INVALID_OWNER = 'Please provide a valid "userId"'


OPTIONAL_FIELDS = {
    "estimatedTime": "estimated_time",
    "materialsNeeded": "materials_needed",
}


def _editable_fields(body: dict[str, Any]) -> dict[str, Any]:
    # optional fields left out of the body keep their stored value
    values = {"title": body["title"], "description": body["description"]}
    for name, column in OPTIONAL_FIELDS.items():
        if name in body:
            values[column] = body[name]
    return values


async def list_courses(courses: CourseRepository) -> Result:
    return Ok(await courses.find_all())


async def get_course(course_id: int, courses: CourseRepository) -> Result:
    course = await courses.find_by_pk(course_id)
    if course is None:
        return Err(ErrorKind.NOT_FOUND, COURSE_NOT_FOUND)
    return Ok(CourseEnvelopeSchema(course=course))


async def create_course(
    body: dict[str, Any],
    current_user: UserRecord,
    courses: CourseRepository,
    users: UserRepository,
) -> Result:
    errors = validate(COURSE_RULES, body)
    if errors:
        return Err(ErrorKind.VALIDATION, errors)

    # An explicit userId is honoured; otherwise the caller owns the course
    owner_id = body.get("userId")
    if owner_id is None:
        owner_id = current_user.id
    elif owner_id != current_user.id and await users.find_by_pk(owner_id) is None:
        return Err(ErrorKind.VALIDATION, [INVALID_OWNER])

    course = await courses.create({**_editable_fields(body), "user_id": owner_id})
    logger.info("User %s created course %s", current_user.id, course.id)
    return Ok(status_code=201, headers={"Location": f"/courses/{course.id}"})


async def _load_owned(course_id: int, current_user: UserRecord, courses: CourseRepository) -> Result:
    course = await courses.find_by_pk(course_id)
    if course is None:
        return Err(ErrorKind.NOT_FOUND, COURSE_NOT_FOUND)
    if course.user_id != current_user.id:
        logger.warning("User %s is not the owner of course %s", current_user.id, course_id)
        return Err(ErrorKind.AUTHORIZATION, NOT_COURSE_OWNER)
    return Ok(course)


async def update_course(
    course_id: int,
    body: dict[str, Any],
    current_user: UserRecord,
    courses: CourseRepository,
) -> Result:
    errors = validate(COURSE_RULES, body)
    if errors:
        return Err(ErrorKind.VALIDATION, errors)

    loaded = await _load_owned(course_id, current_user, courses)
    if isinstance(loaded, Err):
        return loaded

    await courses.update(course_id, _editable_fields(body))
    return Ok(status_code=204)


async def delete_course(course_id: int, current_user: UserRecord, courses: CourseRepository) -> Result:
    loaded = await _load_owned(course_id, current_user, courses)
    if isinstance(loaded, Err):
        return loaded

    await courses.destroy(course_id)
    logger.info("User %s deleted course %s", current_user.id, course_id)
    return Ok(status_code=204)
