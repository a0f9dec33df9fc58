"""Shared fixtures.

Every test gets a fresh in-memory SQLite database.  Settings are pointed
at SQLite and cheap bcrypt rounds before anything from ``app`` is imported.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import datetime  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

import app.db.base  # noqa: E402,F401
from app.core.security import get_password_hash  # noqa: E402
from app.models import Trainee, Trainer, Training, TrainingType, User  # noqa: E402
from app.services.training_type_service import TrainingTypeService  # noqa: E402

PASSWORD = "secret-pass"


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def training_types(session) -> dict[str, TrainingType]:
    created = TrainingTypeService(session).seed(["Yoga", "Pilates", "Fitness"])
    return {t.name: t for t in created}


# ======================================================================
# Direct entity builders (bypass the services)
# ======================================================================


def make_user(first_name: str, last_name: str, username: str, is_active: bool = True) -> User:
    return User(first_name=first_name, last_name=last_name, username=username,
                hashed_password=get_password_hash(PASSWORD), is_active=is_active)


@pytest.fixture
def add_trainee(session):
    def _add(first_name: str, last_name: str, username: str, is_active: bool = True) -> Trainee:
        trainee = Trainee(user=make_user(first_name, last_name, username, is_active),
                          date_of_birth=datetime.date(1995, 5, 17), address="1 Main Street")
        session.add(trainee)
        session.commit()
        session.refresh(trainee)
        return trainee

    return _add


@pytest.fixture
def add_trainer(session):
    def _add(first_name: str, last_name: str, username: str, specialization: TrainingType,
             is_active: bool = True) -> Trainer:
        trainer = Trainer(user=make_user(first_name, last_name, username, is_active), specialization=specialization)
        session.add(trainer)
        session.commit()
        session.refresh(trainer)
        return trainer

    return _add


@pytest.fixture
def add_training(session):
    def _add(trainee: Trainee, trainer: Trainer, date: datetime.date, name: str = "Session",
             duration: int = 60) -> Training:
        training = Training(trainee=trainee, trainer=trainer, training_type=trainer.specialization, name=name,
                            date=date, duration=duration)
        session.add(training)
        session.commit()
        session.refresh(training)
        return training

    return _add


@pytest.fixture
def password() -> str:
    """Password of every user built by the fixtures above."""
    return PASSWORD
