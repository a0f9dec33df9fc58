"""
Shared service helpers.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


@contextmanager
def persistence_guard(session: Session, action: str) -> Iterator[None]:
    """Roll back and raise :class:`PersistenceError` when a write fails.

    Args:
        session: Session the write goes through
        action: Short description used in the log line and error message
    """
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception("Failed to %s", action)
        raise PersistenceError(f"Failed to {action}", e) from e
