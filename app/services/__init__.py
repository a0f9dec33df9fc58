"""Business logic services."""

from app.services.auth_service import AuthenticationService
from app.services.trainee_service import TraineeService
from app.services.trainer_service import TrainerService
from app.services.training_service import TrainingService
from app.services.training_type_service import TrainingTypeService

__all__ = [
    "AuthenticationService",
    "TraineeService",
    "TrainerService",
    "TrainingService",
    "TrainingTypeService",
]
