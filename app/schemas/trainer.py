"""
Trainer API schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field

from app.models.trainee import Trainee
from app.models.trainer import Trainer
from app.schemas.user import Credentials, ProfileUpdateBase


class TrainerCreate(BaseModel):
    """Schema for trainer registration."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    specialization: str = Field(..., min_length=1, description="Training type name, e.g. 'Yoga'")


class TrainerUpdate(ProfileUpdateBase):
    """Schema for updating a trainer profile."""
    specialization: Optional[str] = None


class TraineeSummary(BaseModel):
    """Short trainee description embedded in trainer responses."""
    username: str
    first_name: str
    last_name: str

    @classmethod
    def from_trainee(cls, trainee: Trainee) -> "TraineeSummary":
        return cls(username=trainee.user.username, first_name=trainee.user.first_name,
                   last_name=trainee.user.last_name, )


class TrainerResponse(BaseModel):
    """Schema for trainer in API responses."""
    username: str
    first_name: str
    last_name: str
    is_active: bool
    specialization: str
    trainees: list[TraineeSummary]

    @classmethod
    def from_trainer(cls, trainer: Trainer) -> "TrainerResponse":
        user = trainer.user
        return cls(username=user.username, first_name=user.first_name, last_name=user.last_name,
                   is_active=user.is_active, specialization=trainer.specialization.name,
                   trainees=[TraineeSummary.from_trainee(t) for t in trainer.trainees], )


class TrainerRegistered(BaseModel):
    """Response to a successful registration."""
    profile: TrainerResponse
    credentials: Credentials
