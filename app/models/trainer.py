"""
Trainer database model.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from app.models.links import TraineeTrainerLink

if TYPE_CHECKING:
    from app.models.trainee import Trainee
    from app.models.training import Training
    from app.models.training_type import TrainingType
    from app.models.user import User


class Trainer(SQLModel, table=True):
    """A coach offering one training type (its specialization)."""

    __tablename__ = "trainers"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, unique=True, index=True)
    specialization_id: int = Field(foreign_key="training_types.id", nullable=False, index=True)

    user: Optional["User"] = Relationship(back_populates="trainer")
    specialization: Optional["TrainingType"] = Relationship(back_populates="trainers")
    trainees: List["Trainee"] = Relationship(back_populates="trainers", link_model=TraineeTrainerLink)
    trainings: List["Training"] = Relationship(
        back_populates="trainer", sa_relationship_kwargs={"cascade": "all, delete-orphan"})
