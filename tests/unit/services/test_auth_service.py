"""Tests for the credential check."""

import pytest

from app.services.auth_service import AuthenticationService


@pytest.fixture
def auth(session):
    return AuthenticationService(session)


@pytest.fixture
def people(training_types, add_trainee, add_trainer):
    add_trainee("Tom", "Active", "tom.active")
    add_trainee("Ina", "Idle", "ina.idle", is_active=False)
    add_trainer("Tess", "Coach", "tess.coach", training_types["Yoga"])


class TestAuthenticate:
    def test_valid_credentials(self, auth, people, password):
        assert auth.authenticate("tom.active", password) is True

    def test_unknown_username(self, auth, people, password):
        assert auth.authenticate("nobody", password) is False

    def test_wrong_password(self, auth, people, password):
        assert auth.authenticate("tom.active", password + "x") is False

    def test_password_is_case_sensitive(self, auth, people, password):
        assert auth.authenticate("tom.active", password.upper()) is False

    def test_inactive_user(self, auth, people, password):
        assert auth.authenticate("ina.idle", password) is False

    def test_inactive_user_allowed_when_not_required(self, auth, people, password):
        assert auth.authenticate("ina.idle", password, require_active=False) is True

    def test_blank_username(self, auth, people, password):
        assert auth.authenticate("", password) is False

    @pytest.mark.parametrize("username", ["nobody", "tom.active"])
    def test_every_failure_checks_a_hash(self, auth, people, monkeypatch, username):
        checked = []

        def fake_verify(plain, hashed):
            checked.append(hashed)
            return False

        monkeypatch.setattr("app.services.auth_service.verify_password", fake_verify)
        assert auth.authenticate(username, "wrong") is False
        assert len(checked) == 1

    def test_missing_password(self, auth, people):
        assert auth.authenticate("tom.active", None) is False


class TestProfileKind:
    def test_trainee_is_not_trainer(self, auth, people, password):
        assert auth.authenticate_trainee("tom.active", password) is True
        assert auth.authenticate_trainer("tom.active", password) is False

    def test_trainer_is_not_trainee(self, auth, people, password):
        assert auth.authenticate_trainer("tess.coach", password) is True
        assert auth.authenticate_trainee("tess.coach", password) is False

    def test_get_authenticated_user(self, auth, people, password):
        user = auth.get_authenticated_user("tess.coach", password)
        assert user is not None
        assert user.full_name == "Tess Coach"
