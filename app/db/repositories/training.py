"""
Training repository.

Handles database operations for :class:`Training`, including the
criteria queries that list a trainee's or a trainer's trainings.

Both criteria queries join Training to the trainee's user, the trainer's
user and the training type, anchor on one party's username and then add
optional filters.  Filters are kept as a list of SQLAlchemy expressions
and only the ones whose argument was supplied end up in the WHERE clause.
"""

import datetime
from typing import Any, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import aliased
from sqlmodel import Session, col, select

from app.models.trainee import Trainee
from app.models.trainer import Trainer
from app.models.training import Training
from app.models.training_type import TrainingType
from app.models.user import User

TraineeUser = aliased(User, name="trainee_user")
TrainerUser = aliased(User, name="trainer_user")


def _is_given(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def name_matches(user: Any, name: str) -> Any:
    """Case-insensitive substring match on first, last or "first last" name."""
    pattern = f"%{name.strip().lower()}%"
    full_name = user.first_name + " " + user.last_name
    return or_(func.lower(user.first_name).like(pattern),
               func.lower(user.last_name).like(pattern),
               func.lower(full_name).like(pattern))


def training_filters(from_date: Optional[datetime.date] = None, to_date: Optional[datetime.date] = None,
                     counterpart: Any = None, counterpart_name: Optional[str] = None,
                     training_type_name: Optional[str] = None) -> list[Any]:
    """
    Build the optional predicates of a training criteria query.

    Args:
        from_date: Inclusive lower bound on the training date
        to_date: Inclusive upper bound on the training date
        counterpart: Aliased User of the other party
        counterpart_name: Fuzzy name of the other party
        training_type_name: Exact (case-insensitive) training type name

    Returns:
        Predicates to AND together, possibly empty
    """
    filters: list[Any] = []
    if from_date is not None:
        filters.append(col(Training.date) >= from_date)
    if to_date is not None:
        filters.append(col(Training.date) <= to_date)
    if counterpart is not None and _is_given(counterpart_name):
        filters.append(name_matches(counterpart, counterpart_name))
    if _is_given(training_type_name):
        filters.append(func.lower(TrainingType.name) == training_type_name.strip().lower())
    return filters


class TrainingRepository:
    """Repository for Training database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, training: Training) -> Training:
        self.session.add(training)
        self.session.commit()
        self.session.refresh(training)
        return training

    # ------------------------------------------------------------------
    # Criteria queries
    # ------------------------------------------------------------------

    def find_by_trainee_criteria(self, trainee_username: Optional[str], from_date: Optional[datetime.date] = None,
                                 to_date: Optional[datetime.date] = None, trainer_name: Optional[str] = None,
                                 training_type_name: Optional[str] = None, ) -> list[Training]:
        """List a trainee's trainings, optionally filtered.

        ``trainer_name`` is matched against the trainer's names.  An empty
        ``trainee_username`` returns an empty list without querying.
        """
        if not trainee_username:
            return []
        filters = training_filters(from_date, to_date, TrainerUser, trainer_name, training_type_name)
        return self._find(TraineeUser.username == trainee_username, filters)

    def find_by_trainer_criteria(self, trainer_username: Optional[str], from_date: Optional[datetime.date] = None,
                                 to_date: Optional[datetime.date] = None, trainee_name: Optional[str] = None,
                                 training_type_name: Optional[str] = None, ) -> list[Training]:
        """List a trainer's trainings, optionally filtered.

        ``trainee_name`` is matched against the trainee's names.  An empty
        ``trainer_username`` returns an empty list without querying.
        """
        if not trainer_username:
            return []
        filters = training_filters(from_date, to_date, TraineeUser, trainee_name, training_type_name)
        return self._find(TrainerUser.username == trainer_username, filters)

    def _find(self, anchor: Any, filters: list[Any]) -> list[Training]:
        statement = (select(Training)
                     .join(Trainee, col(Training.trainee_id) == col(Trainee.id))
                     .join(TraineeUser, col(Trainee.user_id) == TraineeUser.id)
                     .join(Trainer, col(Training.trainer_id) == col(Trainer.id))
                     .join(TrainerUser, col(Trainer.user_id) == TrainerUser.id)
                     .join(TrainingType, col(Training.training_type_id) == col(TrainingType.id))
                     .where(anchor, *filters)
                     .order_by(Training.date, Training.id))
        return list(self.session.exec(statement).all())
