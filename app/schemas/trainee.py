"""
Trainee API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from app.models.trainee import Trainee
from app.models.trainer import Trainer
from app.schemas.user import Credentials, ProfileUpdateBase


def _past_or_present(value: Optional[datetime.date]) -> Optional[datetime.date]:
    if value is not None and value > datetime.date.today():
        raise ValueError("date of birth cannot be in the future")
    return value


class TraineeCreate(BaseModel):
    """Schema for trainee registration."""
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: Optional[datetime.date] = None
    address: Optional[str] = Field(None, max_length=255)

    check_date_of_birth = field_validator("date_of_birth")(_past_or_present)


class TraineeUpdate(ProfileUpdateBase):
    """Schema for updating a trainee profile."""
    date_of_birth: Optional[datetime.date] = None
    address: Optional[str] = Field(None, max_length=255)

    check_date_of_birth = field_validator("date_of_birth")(_past_or_present)


class TrainerUsernames(BaseModel):
    """Full replacement of the trainers a trainee works with."""
    trainer_usernames: list[str]


class TrainerSummary(BaseModel):
    """Short trainer description embedded in trainee responses."""
    username: str
    first_name: str
    last_name: str
    specialization: str

    @classmethod
    def from_trainer(cls, trainer: Trainer) -> "TrainerSummary":
        return cls(username=trainer.user.username, first_name=trainer.user.first_name,
                   last_name=trainer.user.last_name, specialization=trainer.specialization.name, )


class TraineeResponse(BaseModel):
    """Schema for trainee in API responses."""
    username: str
    first_name: str
    last_name: str
    is_active: bool
    date_of_birth: Optional[datetime.date]
    address: Optional[str]
    trainers: list[TrainerSummary]

    @classmethod
    def from_trainee(cls, trainee: Trainee) -> "TraineeResponse":
        user = trainee.user
        return cls(username=user.username, first_name=user.first_name, last_name=user.last_name,
                   is_active=user.is_active, date_of_birth=trainee.date_of_birth, address=trainee.address,
                   trainers=[TrainerSummary.from_trainer(t) for t in trainee.trainers], )


class TraineeRegistered(BaseModel):
    """Response to a successful registration."""
    profile: TraineeResponse
    credentials: Credentials
