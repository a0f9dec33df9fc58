"""Pydantic schemas for request/response validation."""

from app.schemas.user import ActiveStatusUpdate, Credentials, PasswordChange, UserResponse
from app.schemas.training_type import TrainingTypeResponse
from app.schemas.trainee import (
    TraineeCreate,
    TraineeUpdate,
    TraineeResponse,
    TraineeRegistered,
    TrainerSummary,
    TrainerUsernames,
)
from app.schemas.trainer import (
    TrainerCreate,
    TrainerUpdate,
    TrainerResponse,
    TrainerRegistered,
    TraineeSummary,
)
from app.schemas.training import TrainingCreate, TrainingResponse

__all__ = [
    "ActiveStatusUpdate",
    "Credentials",
    "PasswordChange",
    "UserResponse",
    "TrainingTypeResponse",
    "TraineeCreate",
    "TraineeUpdate",
    "TraineeResponse",
    "TraineeRegistered",
    "TrainerSummary",
    "TrainerUsernames",
    "TrainerCreate",
    "TrainerUpdate",
    "TrainerResponse",
    "TrainerRegistered",
    "TraineeSummary",
    "TrainingCreate",
    "TrainingResponse",
]
