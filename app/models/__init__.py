"""SQLModel database models."""

from app.models.links import TraineeTrainerLink
from app.models.user import User
from app.models.training_type import TrainingType
from app.models.trainee import Trainee
from app.models.trainer import Trainer
from app.models.training import Training

__all__ = [
    "TraineeTrainerLink",
    "User",
    "TrainingType",
    "Trainee",
    "Trainer",
    "Training",
]
