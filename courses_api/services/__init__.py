from courses_api.services.results import Err, ErrorKind, Ok, to_response
from courses_api.services.validation import FieldRule, validate

__all__ = ["Err", "ErrorKind", "FieldRule", "Ok", "to_response", "validate"]
