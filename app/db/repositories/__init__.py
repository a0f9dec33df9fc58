"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.trainee import TraineeRepository
from app.db.repositories.trainer import TrainerRepository
from app.db.repositories.training import TrainingRepository
from app.db.repositories.training_type import TrainingTypeRepository

__all__ = [
    "UserRepository",
    "TraineeRepository",
    "TrainerRepository",
    "TrainingRepository",
    "TrainingTypeRepository",
]
