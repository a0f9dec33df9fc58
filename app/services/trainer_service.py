"""
Trainer service.

Profile management for trainers, mirroring :mod:`app.services.trainee_service`.
A trainer's specialization must name an existing training type.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from app.core.credentials import generate_password, generate_username
from app.core.security import get_password_hash
from app.db.repositories.trainer import TrainerRepository
from app.db.repositories.training import TrainingRepository
from app.db.repositories.training_type import TrainingTypeRepository
from app.db.repositories.user import UserRepository
from app.models.trainer import Trainer
from app.models.training import Training
from app.models.user import User, utc_now
from app.schemas.trainer import TrainerCreate, TrainerUpdate
from app.schemas.user import Credentials
from app.services.auth_service import AuthenticationService
from app.services.base import is_blank, persistence_guard

logger = logging.getLogger(__name__)


class TrainerService:
    """Service for trainer business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = TrainerRepository(session)
        self.user_repository = UserRepository(session)
        self.training_type_repository = TrainingTypeRepository(session)
        self.training_repository = TrainingRepository(session)
        self.auth = AuthenticationService(session)

    def create_profile(self, data: TrainerCreate) -> Optional[tuple[Trainer, Credentials]]:
        """Register a trainer and issue its credentials.

        Returns:
            Tuple of (trainer, credentials), or None if a name is blank or the
            specialization is not a known training type.

        Raises:
            PersistenceError: If the user or the profile could not be stored.
        """
        logger.info("Creating trainer profile for: %s %s", data.first_name, data.last_name)

        if is_blank(data.first_name) or is_blank(data.last_name) or is_blank(data.specialization):
            logger.warning("Validation failed: first name, last name and specialization are required")
            return None

        specialization = self.training_type_repository.get_by_name(data.specialization)
        if specialization is None:
            logger.warning("Validation failed: unknown training type '%s'", data.specialization)
            return None

        username = generate_username(data.first_name, data.last_name, self.user_repository.exists_by_username)
        password = generate_password()

        user = User(first_name=data.first_name.strip(), last_name=data.last_name.strip(), username=username,
                    hashed_password=get_password_hash(password), is_active=True, )
        trainer = Trainer(user=user, specialization=specialization)

        with persistence_guard(self.session, f"create trainer profile for {username}"):
            trainer = self.repository.create(trainer)

        logger.info("Created trainer profile for username: %s", username)
        return trainer, Credentials(username=username, password=password)

    def get_profile(self, username: str, password: str) -> Optional[Trainer]:
        logger.debug("Getting trainer profile for username: %s", username)
        if not self.auth.authenticate_trainer(username, password):
            return None
        return self.repository.get_by_username(username)

    def change_password(self, username: str, old_password: str, new_password: Optional[str]) -> bool:
        logger.info("Changing password for trainer username: %s", username)
        if not self.auth.authenticate_trainer(username, old_password):
            return False
        if is_blank(new_password):
            logger.warning("New password cannot be empty")
            return False

        trainer = self.repository.get_by_username(username)
        trainer.user.hashed_password = get_password_hash(new_password.strip())
        trainer.user.updated_at = utc_now()
        with persistence_guard(self.session, f"change password for {username}"):
            self.user_repository.update(trainer.user)

        logger.info("Changed password for trainer username: %s", username)
        return True

    def update_profile(self, username: str, password: str, data: TrainerUpdate) -> Optional[Trainer]:
        """Overwrite the supplied non-blank fields and save.

        Returns None when authentication fails or the new specialization is
        not a known training type.
        """
        logger.info("Updating trainer profile for username: %s", username)
        if not self.auth.authenticate_trainer(username, password):
            return None
        trainer = self.repository.get_by_username(username)
        user = trainer.user

        specialization = None
        if not is_blank(data.specialization):
            specialization = self.training_type_repository.get_by_name(data.specialization)
            if specialization is None:
                logger.warning("Validation failed: unknown training type '%s'", data.specialization)
                return None

        changed = False
        if not is_blank(data.first_name):
            user.first_name = data.first_name.strip()
            changed = True
        if not is_blank(data.last_name):
            user.last_name = data.last_name.strip()
            changed = True
        if data.is_active is not None:
            user.is_active = data.is_active
            changed = True
        if specialization is not None:
            trainer.specialization = specialization
            changed = True
        if changed:
            user.updated_at = utc_now()

        with persistence_guard(self.session, f"update trainer profile for {username}"):
            trainer = self.repository.update(trainer)

        logger.info("Updated trainer profile for username: %s", username)
        return trainer

    def set_active(self, username: str, password: str, active: bool) -> bool:
        """Activate or deactivate the trainer.

        Same rules as :meth:`TraineeService.set_active`.
        """
        logger.info("%s trainer with username: %s", "Activating" if active else "Deactivating", username)
        if not self.auth.authenticate_trainer(username, password, require_active=False):
            return False
        trainer = self.repository.get_by_username(username)

        if trainer.user.is_active == active:
            logger.warning("Trainer %s is already %s", username, "active" if active else "inactive")
            return False

        trainer.user.is_active = active
        trainer.user.updated_at = utc_now()
        with persistence_guard(self.session, f"update status of {username}"):
            self.user_repository.update(trainer.user)

        logger.info("Trainer %s %s", username, "activated" if active else "deactivated")
        return True

    def delete_profile(self, username: str, password: str) -> bool:
        """Delete the trainer, its trainings and its user."""
        logger.info("Deleting trainer profile for username: %s", username)
        if not self.auth.authenticate_trainer(username, password):
            return False
        trainer = self.repository.get_by_username(username)

        with persistence_guard(self.session, f"delete trainer profile for {username}"):
            self.repository.delete(trainer)

        logger.info("Deleted trainer profile for username: %s", username)
        return True

    def get_trainings(self, username: str, password: str, from_date: Optional[datetime.date] = None,
                      to_date: Optional[datetime.date] = None, trainee_name: Optional[str] = None,
                      training_type_name: Optional[str] = None, ) -> list[Training]:
        logger.info("Fetching trainings for trainer [%s] with criteria: from_date=%s, to_date=%s, "
                    "trainee_name=%s, training_type_name=%s", username, from_date, to_date, trainee_name,
                    training_type_name)
        if not self.auth.authenticate_trainer(username, password):
            return []

        trainings = self.training_repository.find_by_trainer_criteria(username, from_date, to_date, trainee_name,
                                                                      training_type_name)
        logger.info("Found %d training(s) for trainer [%s]", len(trainings), username)
        return trainings
