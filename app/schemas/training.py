"""
Training API schemas.
"""

import datetime

from pydantic import BaseModel, Field

from app.models.training import Training


class TrainingCreate(BaseModel):
    """Schema for booking a training; the trainee is the authenticated user."""

    trainer_username: str = Field(..., min_length=1)
    training_type_name: str = Field(..., min_length=1, description="Must match the trainer's specialization")
    name: str = Field(..., min_length=1, max_length=255)
    date: datetime.date = Field(..., description="Strictly after today")
    duration: int = Field(..., ge=1, le=600, description="Duration in minutes")


class TrainingResponse(BaseModel):
    """Schema for training in API responses."""

    id: int
    name: str
    date: datetime.date
    duration: int
    training_type: str
    trainee_username: str
    trainer_username: str

    @classmethod
    def from_training(cls, training: Training) -> "TrainingResponse":
        return cls(id=training.id, name=training.name, date=training.date, duration=training.duration,
                   training_type=training.training_type.name, trainee_username=training.trainee.user.username,
                   trainer_username=training.trainer.user.username, )
