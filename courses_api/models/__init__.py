from courses_api.models.user import User
from courses_api.models.course import Course

__all__ = ["User", "Course"]
