"""Tests for the trainer profile service."""

import datetime

import pytest
from sqlmodel import select

from app.models import Trainee, Trainer, Training, User
from app.schemas.trainer import TrainerCreate, TrainerUpdate
from app.services.trainer_service import TrainerService


@pytest.fixture
def service(session):
    return TrainerService(session)


@pytest.fixture
def registered(service, training_types):
    trainer, credentials = service.create_profile(
        TrainerCreate(first_name="Alice", last_name="Smith", specialization="Yoga"))
    return trainer, credentials


class TestCreateProfile:
    def test_issues_credentials(self, registered):
        trainer, credentials = registered
        assert credentials.username == "alice.smith"
        assert len(credentials.password) == 10
        assert trainer.specialization.name == "Yoga"

    def test_specialization_is_case_insensitive(self, service, training_types):
        trainer, _ = service.create_profile(TrainerCreate(first_name="Bob", last_name="Jones",
                                                          specialization=" pilates "))
        assert trainer.specialization.name == "Pilates"

    def test_unknown_specialization(self, service, session, training_types):
        assert service.create_profile(TrainerCreate(first_name="Bob", last_name="Jones",
                                                    specialization="Boxing")) is None
        assert session.exec(select(User)).all() == []

    @pytest.mark.parametrize("first_name, last_name, specialization",
                             [(" ", "Jones", "Yoga"), ("Bob", " ", "Yoga"), ("Bob", "Jones", "  ")])
    def test_blank_fields(self, service, training_types, first_name, last_name, specialization):
        data = TrainerCreate(first_name=first_name, last_name=last_name, specialization=specialization)
        assert service.create_profile(data) is None

    def test_username_shared_with_trainees(self, service, training_types, add_trainee):
        add_trainee("Alice", "Smith", "alice.smith")
        _, credentials = service.create_profile(TrainerCreate(first_name="Alice", last_name="Smith",
                                                              specialization="Yoga"))
        assert credentials.username == "alice.smith1"


class TestProfileOperations:
    def test_get_profile(self, service, registered):
        _, credentials = registered
        assert service.get_profile(credentials.username, credentials.password).user.last_name == "Smith"

    def test_get_profile_wrong_password(self, service, registered):
        _, credentials = registered
        assert service.get_profile(credentials.username, "nope") is None

    def test_change_password(self, service, registered):
        _, credentials = registered
        assert service.change_password(credentials.username, credentials.password, "Fresh12345")
        assert service.get_profile(credentials.username, "Fresh12345") is not None

    def test_update_specialization(self, service, registered):
        _, credentials = registered
        trainer = service.update_profile(credentials.username, credentials.password,
                                         TrainerUpdate(specialization="fitness", last_name="Smythe"))
        assert trainer.specialization.name == "Fitness"
        assert trainer.user.last_name == "Smythe"
        assert trainer.user.first_name == "Alice"

    def test_update_unknown_specialization(self, service, registered):
        _, credentials = registered
        assert service.update_profile(credentials.username, credentials.password,
                                      TrainerUpdate(specialization="Boxing")) is None
        assert service.get_profile(credentials.username, credentials.password).specialization.name == "Yoga"

    def test_empty_update_leaves_profile(self, service, registered):
        _, credentials = registered
        trainer = service.update_profile(credentials.username, credentials.password, TrainerUpdate())
        assert trainer.user.first_name == "Alice"
        assert trainer.specialization.name == "Yoga"

    def test_set_active_same_state(self, service, registered):
        _, credentials = registered
        assert service.set_active(credentials.username, credentials.password, True) is False

    def test_deactivate_and_reactivate(self, service, registered):
        _, credentials = registered
        assert service.set_active(credentials.username, credentials.password, False) is True
        assert service.get_profile(credentials.username, credentials.password) is None
        assert service.set_active(credentials.username, credentials.password, True) is True
        assert service.get_profile(credentials.username, credentials.password) is not None


class TestDeleteProfile:
    def test_removes_trainer_trainings_links_and_user(self, service, session, registered, add_trainee,
                                                      add_training):
        trainer, credentials = registered
        trainee = add_trainee("Tom", "Member", "tom.member")
        trainee.trainers.append(trainer)
        session.add(trainee)
        session.commit()
        add_training(trainee, trainer, datetime.date(2024, 6, 1))

        assert service.delete_profile(credentials.username, credentials.password) is True
        assert session.exec(select(Trainer)).all() == []
        assert session.exec(select(Training)).all() == []
        assert session.exec(select(User).where(User.username == "alice.smith")).first() is None

        remaining = session.exec(select(Trainee)).one()
        assert remaining.trainers == []

    def test_wrong_password(self, service, registered):
        _, credentials = registered
        assert service.delete_profile(credentials.username, "nope") is False


class TestGetTrainings:
    def test_filters_by_trainee_name(self, service, session, registered, add_trainee, add_training):
        trainer, credentials = registered
        tom = add_trainee("Tom", "Member", "tom.member")
        kim = add_trainee("Kim", "Lane", "kim.lane")
        t1 = add_training(tom, trainer, datetime.date(2024, 1, 10))
        add_training(kim, trainer, datetime.date(2024, 1, 11))

        result = service.get_trainings(credentials.username, credentials.password, trainee_name="tom member")
        assert [t.id for t in result] == [t1.id]

    def test_requires_authentication(self, service, registered):
        _, credentials = registered
        assert service.get_trainings(credentials.username, "nope") == []
