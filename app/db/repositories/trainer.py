"""
Trainer repository.

Handles database operations for :class:`Trainer`.
"""

from typing import Iterable, Optional

from sqlmodel import Session, col, select

from app.models.trainer import Trainer
from app.models.user import User


class TrainerRepository:
    """Repository for Trainer database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, trainer: Trainer) -> Trainer:
        self.session.add(trainer)
        self.session.commit()
        self.session.refresh(trainer)
        return trainer

    def get_by_username(self, username: str) -> Optional[Trainer]:
        statement = select(Trainer).join(User, col(Trainer.user_id) == col(User.id)).where(User.username == username)
        return self.session.exec(statement).first()

    def get_by_usernames(self, usernames: Iterable[str]) -> list[Trainer]:
        statement = (select(Trainer).join(User, col(Trainer.user_id) == col(User.id))
                     .where(col(User.username).in_(list(usernames))))
        return list(self.session.exec(statement).all())

    def update(self, trainer: Trainer) -> Trainer:
        self.session.add(trainer)
        self.session.commit()
        self.session.refresh(trainer)
        return trainer

    def delete(self, trainer: Trainer) -> None:
        """Delete a trainer, its trainings, its trainee links and its user."""
        self.session.delete(trainer.user)
        self.session.commit()
