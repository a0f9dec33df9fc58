"""
Authentication service.

Checks a username / password pair against the stored bcrypt hash and the
account's active flag.  Every failure is reported as ``False``; the log
line does not say which check failed.
"""

import logging
from functools import lru_cache
from typing import Optional

from sqlmodel import Session

from app.core.security import get_password_hash, verify_password
from app.db.repositories.user import UserRepository
from app.models.user import User

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    """Hash checked against when the username is unknown, so every failure costs one bcrypt round."""
    return get_password_hash("dummy-password")


class AuthenticationService:
    """Service for credential checks."""

    def __init__(self, session: Session):
        self.repository = UserRepository(session)

    def authenticate(self, username: str, password: str, require_active: bool = True) -> bool:
        """
        Verify a username / password pair.

        Args:
            username: Username to look up
            password: Plain text password
            require_active: Reject deactivated accounts

        Returns:
            True only if the user exists, is active (when required) and the
            password matches
        """
        return self.get_authenticated_user(username, password, require_active) is not None

    def authenticate_trainee(self, username: str, password: str, require_active: bool = True) -> bool:
        user = self.get_authenticated_user(username, password, require_active)
        return user is not None and user.trainee is not None

    def authenticate_trainer(self, username: str, password: str, require_active: bool = True) -> bool:
        user = self.get_authenticated_user(username, password, require_active)
        return user is not None and user.trainer is not None

    def get_authenticated_user(self, username: str, password: str, require_active: bool = True) -> Optional[User]:
        """Return the user when the credentials are valid, None otherwise."""
        user = self.repository.get_by_username(username) if username else None
        hashed = user.hashed_password if user is not None else _dummy_hash()
        password_ok = verify_password(password or "", hashed)

        if user is None or (require_active and not user.is_active) or not password_ok:
            logger.warning("Authentication failed for username: %s", username)
            return None

        logger.debug("Authenticated username: %s", username)
        return user
