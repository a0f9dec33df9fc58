"""
Trainee database model.
"""

import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

from app.models.links import TraineeTrainerLink

if TYPE_CHECKING:
    from app.models.trainer import Trainer
    from app.models.training import Training
    from app.models.user import User


class Trainee(SQLModel, table=True):
    """A gym member.

    Owns its trainings: removing a trainee removes them too.
    """

    __tablename__ = "trainees"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, unique=True, index=True)

    date_of_birth: Optional[datetime.date] = Field(default=None)
    address: Optional[str] = Field(default=None, max_length=255)

    user: Optional["User"] = Relationship(back_populates="trainee")
    trainers: List["Trainer"] = Relationship(back_populates="trainees", link_model=TraineeTrainerLink)
    trainings: List["Training"] = Relationship(
        back_populates="trainee", sa_relationship_kwargs={"cascade": "all, delete-orphan"})
