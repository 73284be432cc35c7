"""Pydantic schemas for courses."""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from courses_api.schemas.user import UserOutSchema


class CourseInSchema(BaseModel):
    title: str | None = None
    description: str | None = None
    estimated_time: str | None = None
    materials_needed: str | None = None
    user_id: int | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CourseOutSchema(BaseModel):
    id: int
    title: str
    description: str
    estimated_time: str | None = None
    materials_needed: str | None = None
    user_id: int
    owner: UserOutSchema

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class CourseEnvelopeSchema(BaseModel):
    course: CourseOutSchema
