from courses_api.schemas.course import CourseEnvelopeSchema, CourseInSchema, CourseOutSchema
from courses_api.schemas.user import UserCreateSchema, UserOutSchema, UserRecord

__all__ = [
    "CourseEnvelopeSchema",
    "CourseInSchema",
    "CourseOutSchema",
    "UserCreateSchema",
    "UserOutSchema",
    "UserRecord",
]
