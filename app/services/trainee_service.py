"""
Trainee service.

Profile management for trainees.  Every operation except registration
authenticates the caller first.  Failed validation, unknown usernames and
failed authentication all come back as ``None`` / ``False`` / ``[]``;
database failures raise :class:`PersistenceError`.
"""

import datetime
import logging
from typing import Iterable, Optional

from sqlmodel import Session

from app.core.credentials import generate_password, generate_username
from app.core.exceptions import BusinessRuleError
from app.core.security import get_password_hash
from app.db.repositories.trainee import TraineeRepository
from app.db.repositories.trainer import TrainerRepository
from app.db.repositories.training import TrainingRepository
from app.db.repositories.user import UserRepository
from app.models.trainee import Trainee
from app.models.trainer import Trainer
from app.models.training import Training
from app.models.user import User, utc_now
from app.schemas.trainee import TraineeCreate, TraineeUpdate
from app.schemas.user import Credentials
from app.services.auth_service import AuthenticationService
from app.services.base import is_blank, persistence_guard

logger = logging.getLogger(__name__)


class TraineeService:
    """Service for trainee business logic."""

    def __init__(self, session: Session):
        self.session = session
        self.repository = TraineeRepository(session)
        self.user_repository = UserRepository(session)
        self.trainer_repository = TrainerRepository(session)
        self.training_repository = TrainingRepository(session)
        self.auth = AuthenticationService(session)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def create_profile(self, data: TraineeCreate) -> Optional[tuple[Trainee, Credentials]]:
        """Register a trainee and issue its credentials.

        Returns:
            Tuple of (trainee, credentials), or None if validation failed.

        Raises:
            PersistenceError: If the user or the profile could not be stored.
        """
        logger.info("Creating trainee profile for: %s %s", data.first_name, data.last_name)

        if is_blank(data.first_name) or is_blank(data.last_name):
            logger.warning("Validation failed: first name and last name are required")
            return None
        if data.date_of_birth is not None and data.date_of_birth > datetime.date.today():
            logger.warning("Validation failed: date of birth is in the future")
            return None

        username = generate_username(data.first_name, data.last_name, self.user_repository.exists_by_username)
        password = generate_password()

        user = User(first_name=data.first_name.strip(), last_name=data.last_name.strip(), username=username,
                    hashed_password=get_password_hash(password), is_active=True, )
        trainee = Trainee(date_of_birth=data.date_of_birth, address=data.address, user=user)

        with persistence_guard(self.session, f"create trainee profile for {username}"):
            trainee = self.repository.create(trainee)

        logger.info("Created trainee profile for username: %s", username)
        return trainee, Credentials(username=username, password=password)

    # ------------------------------------------------------------------
    # Authenticated operations
    # ------------------------------------------------------------------

    def get_profile(self, username: str, password: str) -> Optional[Trainee]:
        logger.debug("Getting trainee profile for username: %s", username)
        if not self.auth.authenticate_trainee(username, password):
            return None
        return self.repository.get_by_username(username)

    def change_password(self, username: str, old_password: str, new_password: Optional[str]) -> bool:
        logger.info("Changing password for trainee username: %s", username)
        if not self.auth.authenticate_trainee(username, old_password):
            return False
        if is_blank(new_password):
            logger.warning("New password cannot be empty")
            return False

        trainee = self.repository.get_by_username(username)
        trainee.user.hashed_password = get_password_hash(new_password.strip())
        trainee.user.updated_at = utc_now()
        with persistence_guard(self.session, f"change password for {username}"):
            self.user_repository.update(trainee.user)

        logger.info("Changed password for trainee username: %s", username)
        return True

    def update_profile(self, username: str, password: str, data: TraineeUpdate) -> Optional[Trainee]:
        """Overwrite the supplied non-blank fields and save.

        The profile is saved even when nothing was supplied.
        """
        logger.info("Updating trainee profile for username: %s", username)
        if not self.auth.authenticate_trainee(username, password):
            return None
        trainee = self.repository.get_by_username(username)
        user = trainee.user

        if data.date_of_birth is not None and data.date_of_birth > datetime.date.today():
            logger.warning("Validation failed: date of birth is in the future")
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
        if data.date_of_birth is not None:
            trainee.date_of_birth = data.date_of_birth
            changed = True
        if not is_blank(data.address):
            trainee.address = data.address.strip()
            changed = True
        if changed:
            user.updated_at = utc_now()

        with persistence_guard(self.session, f"update trainee profile for {username}"):
            trainee = self.repository.update(trainee)

        logger.info("Updated trainee profile for username: %s", username)
        return trainee

    def set_active(self, username: str, password: str, active: bool) -> bool:
        """Activate or deactivate the trainee.

        Deactivated users may still call this to reactivate themselves, so
        the credential check skips the active gate.  Asking for the state
        the profile is already in returns False and changes nothing.
        """
        logger.info("%s trainee with username: %s", "Activating" if active else "Deactivating", username)
        if not self.auth.authenticate_trainee(username, password, require_active=False):
            return False
        trainee = self.repository.get_by_username(username)

        if trainee.user.is_active == active:
            logger.warning("Trainee %s is already %s", username, "active" if active else "inactive")
            return False

        trainee.user.is_active = active
        trainee.user.updated_at = utc_now()
        with persistence_guard(self.session, f"update status of {username}"):
            self.user_repository.update(trainee.user)

        logger.info("Trainee %s %s", username, "activated" if active else "deactivated")
        return True

    def delete_profile(self, username: str, password: str) -> bool:
        """Delete the trainee, its trainings and its user."""
        logger.info("Deleting trainee profile for username: %s", username)
        if not self.auth.authenticate_trainee(username, password):
            return False
        trainee = self.repository.get_by_username(username)

        with persistence_guard(self.session, f"delete trainee profile for {username}"):
            self.repository.delete(trainee)

        logger.info("Deleted trainee profile and trainings for username: %s", username)
        return True

    # ------------------------------------------------------------------
    # Trainers
    # ------------------------------------------------------------------

    def get_unassigned_trainers(self, username: str, password: str) -> list[Trainer]:
        """Active trainers the trainee is not working with yet."""
        if not self.auth.authenticate_trainee(username, password):
            return []
        trainee = self.repository.get_by_username(username)
        trainers = self.repository.get_unassigned_trainers(trainee)
        logger.info("Found %d unassigned trainer(s) for trainee: %s", len(trainers), username)
        return trainers

    def update_trainers(self, username: str, password: str, trainer_usernames: Iterable[str]) -> Optional[Trainee]:
        """Replace the trainee's trainers with the named ones.

        Raises:
            BusinessRuleError: If a username does not belong to a trainer.
        """
        if not self.auth.authenticate_trainee(username, password):
            return None
        trainee = self.repository.get_by_username(username)

        wanted = {name.strip() for name in trainer_usernames if not is_blank(name)}
        trainers = self.trainer_repository.get_by_usernames(wanted)
        missing = wanted - {t.user.username for t in trainers}
        if missing:
            raise BusinessRuleError(f"Unknown trainer(s): {', '.join(sorted(missing))}")

        trainee.trainers = trainers
        with persistence_guard(self.session, f"update trainers of {username}"):
            trainee = self.repository.update(trainee)

        logger.info("Trainee %s now has %d trainer(s)", username, len(trainers))
        return trainee

    # ------------------------------------------------------------------
    # Trainings
    # ------------------------------------------------------------------

    def get_trainings(self, username: str, password: str, from_date: Optional[datetime.date] = None,
                      to_date: Optional[datetime.date] = None, trainer_name: Optional[str] = None,
                      training_type_name: Optional[str] = None, ) -> list[Training]:
        logger.info("Fetching trainings for trainee [%s] with criteria: from_date=%s, to_date=%s, "
                    "trainer_name=%s, training_type_name=%s", username, from_date, to_date, trainer_name,
                    training_type_name)
        if not self.auth.authenticate_trainee(username, password):
            return []

        trainings = self.training_repository.find_by_trainee_criteria(username, from_date, to_date, trainer_name,
                                                                      training_type_name)
        logger.info("Found %d training(s) for trainee [%s]", len(trainings), username)
        return trainings
