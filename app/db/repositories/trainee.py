"""
Trainee repository.

Handles database operations for :class:`Trainee`.  Lookups by username
always join through the owning :class:`User`.
"""

from typing import Optional

from sqlmodel import Session, col, select

from app.models.links import TraineeTrainerLink
from app.models.trainee import Trainee
from app.models.trainer import Trainer
from app.models.user import User


class TraineeRepository:
    """Repository for Trainee database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, trainee: Trainee) -> Trainee:
        """Persist a trainee together with its (new) user."""
        self.session.add(trainee)
        self.session.commit()
        self.session.refresh(trainee)
        return trainee

    def get_by_username(self, username: str) -> Optional[Trainee]:
        statement = select(Trainee).join(User, col(Trainee.user_id) == col(User.id)).where(User.username == username)
        return self.session.exec(statement).first()

    def get_unassigned_trainers(self, trainee: Trainee) -> list[Trainer]:
        """Active trainers not linked to ``trainee``, ordered by username."""
        assigned = select(TraineeTrainerLink.trainer_id).where(TraineeTrainerLink.trainee_id == trainee.id)
        statement = (select(Trainer).join(User, col(Trainer.user_id) == col(User.id))
                     .where(col(User.is_active).is_(True), col(Trainer.id).not_in(assigned))
                     .order_by(User.username))
        return list(self.session.exec(statement).all())

    def update(self, trainee: Trainee) -> Trainee:
        self.session.add(trainee)
        self.session.commit()
        self.session.refresh(trainee)
        return trainee

    def delete(self, trainee: Trainee) -> None:
        """Delete a trainee, its trainings, its trainer links and its user."""
        self.session.delete(trainee.user)
        self.session.commit()
