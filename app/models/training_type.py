"""
Training type database model.

Training types are a fixed catalogue (Yoga, Pilates, ...) seeded by
``init_db``.
"""

from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:
    from app.models.trainer import Trainer
    from app.models.training import Training


class TrainingType(SQLModel, table=True):
    __tablename__ = "training_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=100, nullable=False)

    trainers: List["Trainer"] = Relationship(back_populates="specialization")
    trainings: List["Training"] = Relationship(back_populates="training_type")
