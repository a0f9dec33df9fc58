"""
Database initialization.

Creates all tables and seeds the training type catalogue.
"""

import logging
from typing import Iterable, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from app.core.config import settings
import app.db.base  # noqa: F401
from app.services.training_type_service import TrainingTypeService

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None, training_types: Optional[Iterable[str]] = None) -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables
    - Inserts the default training types that are not present yet

    Args:
        bind: Engine to use, defaults to the application engine
        training_types: Type names to seed, defaults to settings.DEFAULT_TRAINING_TYPES
    """
    if bind is None:
        from app.db.session import engine as bind

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(bind)
    logger.info("Tables created successfully")

    names = settings.DEFAULT_TRAINING_TYPES if training_types is None else training_types
    with Session(bind) as session:
        created = TrainingTypeService(session).seed(names)
    logger.info("Seeded %d training type(s)", len(created))

    logger.info("Database initialization complete!")


if __name__ == "__main__":
    from app.core.logging_config import setup_logging

    setup_logging()
    init_db()
