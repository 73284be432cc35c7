"""User handlers: profile of the caller and account creation."""
import logging
from typing import Any

from passlib.context import CryptContext
from sqlalchemy.exc import IntegrityError

from courses_api.core.security import MAX_PASSWORD_BYTES, hash_password
from courses_api.db.repositories import UserRepository
from courses_api.schemas.user import UserRecord
from courses_api.services.results import Err, ErrorKind, Ok, Result
from courses_api.services.validation import USER_RULES, validate

logger = logging.getLogger(__name__)

EMAIL_IN_USE = "Email address already in use!"
PASSWORD_TOO_LONG = f'"password" must be at most {MAX_PASSWORD_BYTES} bytes'


def _normalize(body: dict[str, Any]) -> dict[str, Any]:
    email = body.get("emailAddress")
    if isinstance(email, str):
        return {**body, "emailAddress": email.strip()}
    return body


def get_profile(current_user: UserRecord) -> Result:
    return Ok(current_user.public())


async def create_user(body: dict[str, Any], users: UserRepository, pwd_context: CryptContext) -> Result:
    body = _normalize(body)
    errors = validate(USER_RULES, body)
    password = body.get("password") or ""
    if not errors and len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        errors.append(PASSWORD_TOO_LONG)
    if errors:
        return Err(ErrorKind.VALIDATION, errors)

    try:
        user = await users.create(
            {
                "first_name": body["firstName"],
                "last_name": body["lastName"],
                "email_address": body["emailAddress"],
                "hashed_password": hash_password(pwd_context, password),
            }
        )
    except IntegrityError:
        # email_address is the only unique column; NOT NULL is covered by validation
        logger.info("Rejected duplicate emailAddress: %s", body["emailAddress"])
        return Err(ErrorKind.VALIDATION, [EMAIL_IN_USE])

    logger.info("Created user %s", user.id)
    return Ok(status_code=201, headers={"Location": "/"})
