"""Credential verification for login: look the user up and compare password hashes."""

import logging

from app.core.security import password_matches
from app.models.user import User
from app.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)


def verify_credentials(
    directory: UserDirectory, username: str, candidate_password: str
) -> User | None:
    """
    Return the matching user with its password hash cleared, or None.

    Unknown usernames and wrong passwords both return None. Directory errors are
    not caught: an unreachable database is not a failed login.
    """
    user = directory.find_by_username(username)
    if user is None or not password_matches(candidate_password, user.password_hash):
        logger.info("Credential check failed for username=%r", username)
        return None

    # Detach before clearing so the blanked hash is never flushed back.
    directory.session.expunge(user)
    user.password_hash = None
    return user
