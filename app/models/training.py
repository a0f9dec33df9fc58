"""
Training database model.

A single scheduled session between one trainee and one trainer.
"""

import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel

from app.models.user import utc_now

if TYPE_CHECKING:
    from app.models.trainee import Trainee
    from app.models.trainer import Trainer
    from app.models.training_type import TrainingType


class Training(SQLModel, table=True):
    """A training session.

    Trainee, trainer and training type are all mandatory.
    """

    __tablename__ = "trainings"

    id: Optional[int] = Field(default=None, primary_key=True)
    trainee_id: int = Field(foreign_key="trainees.id", nullable=False, index=True)
    trainer_id: int = Field(foreign_key="trainers.id", nullable=False, index=True)
    training_type_id: int = Field(foreign_key="training_types.id", nullable=False, index=True)

    name: str = Field(max_length=255, nullable=False)
    date: datetime.date = Field(nullable=False, index=True)

    # Minutes
    duration: int = Field(nullable=False)

    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    trainee: Optional["Trainee"] = Relationship(back_populates="trainings")
    trainer: Optional["Trainer"] = Relationship(back_populates="trainings")
    training_type: Optional["TrainingType"] = Relationship(back_populates="trainings")
