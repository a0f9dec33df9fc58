"""
Training type service.

Read access to the training type catalogue plus idempotent seeding.
"""

import logging
from typing import Iterable, Optional

from sqlmodel import Session

from app.db.repositories.training_type import TrainingTypeRepository
from app.models.training_type import TrainingType
from app.services.base import is_blank, persistence_guard

logger = logging.getLogger(__name__)


class TrainingTypeService:
    """Service for training types."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = TrainingTypeRepository(session)

    def get_all(self) -> list[TrainingType]:
        return self.repository.get_all()

    def get_by_name(self, name: Optional[str]) -> Optional[TrainingType]:
        if is_blank(name):
            return None
        return self.repository.get_by_name(name)

    def seed(self, names: Iterable[str]) -> list[TrainingType]:
        """Create the named types that do not exist yet.

        Returns:
            Newly created types, in input order
        """
        created = []
        for name in names:
            if is_blank(name) or self.repository.get_by_name(name) is not None:
                continue
            with persistence_guard(self.session, f"create training type '{name}'"):
                created.append(self.repository.create(TrainingType(name=name.strip())))
            logger.info("Created training type: %s", name.strip())
        return created
