"""SQLAlchemy declarative base with every model registered on its metadata."""
from courses_api.db.session import Base

# Import all models so create_all can see them
from courses_api.models.course import Course  # noqa: F401
from courses_api.models.user import User  # noqa: F401

__all__ = ["Base", "User", "Course"]
