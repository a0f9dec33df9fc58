"""
Association tables.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class TraineeTrainerLink(SQLModel, table=True):
    """Many-to-many link between trainees and the trainers they work with."""

    __tablename__ = "trainee_trainer"

    trainee_id: Optional[int] = Field(default=None, foreign_key="trainees.id", primary_key=True)
    trainer_id: Optional[int] = Field(default=None, foreign_key="trainers.id", primary_key=True)
