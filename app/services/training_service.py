"""
Training service.

Books trainings.  The trainee books for itself; the trainer must offer the
requested training type and the date must lie strictly in the future.
Both rules are checked before anything is written.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from app.core.exceptions import BusinessRuleError
from app.db.repositories.trainee import TraineeRepository
from app.db.repositories.trainer import TrainerRepository
from app.db.repositories.training import TrainingRepository
from app.models.training import Training
from app.schemas.training import TrainingCreate
from app.services.auth_service import AuthenticationService
from app.services.base import persistence_guard

logger = logging.getLogger(__name__)


class TrainingService:
    """Service for training business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = TrainingRepository(session)
        self.trainee_repository = TraineeRepository(session)
        self.trainer_repository = TrainerRepository(session)
        self.auth = AuthenticationService(session)

    def add_training(self, trainee_username: str, password: str, data: TrainingCreate) -> Optional[Training]:
        """
        Book a training for the authenticated trainee.

        Args:
            trainee_username: Trainee booking the training
            password: Trainee password
            data: Trainer, type, name, date and duration

        Returns:
            The stored training, or None if authentication failed or the
            trainee or trainer does not exist

        Raises:
            BusinessRuleError: If the trainer does not offer the training type
                or the date is not after today
            PersistenceError: If the training could not be stored
        """
        logger.info("Adding training for trainee [%s] with trainer [%s] and type [%s] on [%s]", trainee_username,
                    data.trainer_username, data.training_type_name, data.date)

        if not self.auth.authenticate_trainee(trainee_username, password):
            return None

        trainee = self.trainee_repository.get_by_username(trainee_username)
        if trainee is None:
            logger.warning("Trainee not found: %s", trainee_username)
            return None

        trainer = self.trainer_repository.get_by_username(data.trainer_username)
        if trainer is None:
            logger.warning("Trainer not found: %s", data.trainer_username)
            return None

        training_type = trainer.specialization
        if training_type.name.strip().lower() != data.training_type_name.strip().lower():
            raise BusinessRuleError(
                f"Trainer '{data.trainer_username}' does not offer '{data.training_type_name}' "
                f"(specialization: '{training_type.name}')")

        if data.date <= datetime.date.today():
            raise BusinessRuleError(f"Training date must be in the future, got {data.date}")

        training = Training(trainee=trainee, trainer=trainer, training_type=training_type, name=data.name.strip(),
                            date=data.date, duration=data.duration, )
        if trainer not in trainee.trainers:
            trainee.trainers.append(trainer)

        with persistence_guard(self.session, f"add training for {trainee_username}"):
            training = self.repository.create(training)

        logger.info("Training created with ID [%s] for trainee [%s]", training.id, trainee_username)
        return training
