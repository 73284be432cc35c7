"""Pydantic schemas for users."""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class UserCreateSchema(BaseModel):
    # Presence is checked by services.validation so every failure can be reported
    first_name: str | None = None
    last_name: str | None = None
    email_address: str | None = None
    password: str | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class UserOutSchema(BaseModel):
    """Public user fields; also used as a course's owner."""

    id: int
    first_name: str
    last_name: str
    email_address: str

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class UserRecord(UserOutSchema):
    hashed_password: str

    def public(self) -> UserOutSchema:
        return UserOutSchema.model_validate(self.model_dump(exclude={"hashed_password"}))
