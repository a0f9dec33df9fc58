"""
Base database configuration.

Importing this module registers every table on ``SQLModel.metadata``.
"""

from app.models.links import TraineeTrainerLink  # noqa: F401
from app.models.user import User  # noqa: F401
from app.models.training_type import TrainingType  # noqa: F401
from app.models.trainee import Trainee  # noqa: F401
from app.models.trainer import Trainer  # noqa: F401
from app.models.training import Training  # noqa: F401
