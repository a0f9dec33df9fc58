"""Tests for booking trainings."""

import datetime

import pytest
from sqlmodel import select

from app.core.exceptions import BusinessRuleError
from app.models import Training
from app.schemas.training import TrainingCreate
from app.services.training_service import TrainingService

TOMORROW = datetime.date.today() + datetime.timedelta(days=1)


@pytest.fixture
def service(session):
    return TrainingService(session)


@pytest.fixture
def people(training_types, add_trainee, add_trainer):
    trainee = add_trainee("Tom", "Member", "tom.member")
    trainer = add_trainer("Alice", "Smith", "alice.smith", training_types["Yoga"])
    return trainee, trainer


def _booking(**overrides) -> TrainingCreate:
    data = {
        "trainer_username": "alice.smith",
        "training_type_name": "Yoga",
        "name": "Morning flow",
        "date": TOMORROW,
        "duration": 45,
    }
    data.update(overrides)
    return TrainingCreate(**data)


class TestAddTraining:
    def test_books_training(self, service, people, password):
        trainee, trainer = people
        training = service.add_training("tom.member", password, _booking())

        assert training.id is not None
        assert training.trainee.user.username == "tom.member"
        assert training.trainer.user.username == "alice.smith"
        assert training.training_type.name == "Yoga"
        assert training.duration == 45

    def test_links_trainer_to_trainee(self, service, people, password):
        trainee, trainer = people
        service.add_training("tom.member", password, _booking())
        assert [t.user.username for t in trainee.trainers] == ["alice.smith"]

    def test_type_match_is_case_insensitive(self, service, people, password):
        assert service.add_training("tom.member", password, _booking(training_type_name=" yoga ")) is not None

    def test_wrong_specialization(self, service, session, people, password):
        with pytest.raises(BusinessRuleError):
            service.add_training("tom.member", password, _booking(training_type_name="Pilates"))
        assert session.exec(select(Training)).all() == []

    @pytest.mark.parametrize("days_ago", [0, 1, 365])
    def test_date_not_in_future(self, service, session, people, password, days_ago):
        date = datetime.date.today() - datetime.timedelta(days=days_ago)
        with pytest.raises(BusinessRuleError):
            service.add_training("tom.member", password, _booking(date=date))
        assert session.exec(select(Training)).all() == []

    def test_unknown_trainer(self, service, people, password):
        assert service.add_training("tom.member", password, _booking(trainer_username="ghost")) is None

    def test_wrong_password(self, service, session, people):
        assert service.add_training("tom.member", "wrong", _booking()) is None
        assert session.exec(select(Training)).all() == []

    def test_trainer_cannot_book_as_trainee(self, service, people, password):
        assert service.add_training("alice.smith", password, _booking()) is None
