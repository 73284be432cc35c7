"""Basic-auth credential check against stored bcrypt hashes."""
import logging

from fastapi.security import HTTPBasicCredentials
from passlib.context import CryptContext

from courses_api.core.security import verify_password
from courses_api.db.repositories import UserRepository
from courses_api.services.results import Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)


async def authenticate(
    credentials: HTTPBasicCredentials | None,
    users: UserRepository,
    pwd_context: CryptContext,
) -> Result:
    """Ok(UserRecord) for a matching email + password, else Err(AUTHENTICATION, reason)."""
    if credentials is None:
        return _reject("Auth header not found")

    user = await users.find_by_email(credentials.username)
    if user is None:
        return _reject(f"User not found : {credentials.username}")

    if not verify_password(pwd_context, credentials.password, user.hashed_password):
        return _reject(f"Authentication failure: {user.email_address}")

    logger.info("Authentication successful for emailAddress: %s", user.email_address)
    return Ok(user)


def _reject(reason: str) -> Err:
    logger.warning(reason)
    return Err(ErrorKind.AUTHENTICATION, reason)
