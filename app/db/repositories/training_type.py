"""
Training type repository.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.training_type import TrainingType


class TrainingTypeRepository:
    """Repository for TrainingType database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, training_type: TrainingType) -> TrainingType:
        self.session.add(training_type)
        self.session.commit()
        self.session.refresh(training_type)
        return training_type

    def get_by_name(self, name: str) -> Optional[TrainingType]:
        """Case-insensitive lookup of a trimmed type name."""
        statement = select(TrainingType).where(func.lower(TrainingType.name) == name.strip().lower())
        return self.session.exec(statement).first()

    def get_all(self) -> list[TrainingType]:
        statement = select(TrainingType).order_by(TrainingType.name)
        return list(self.session.exec(statement).all())
