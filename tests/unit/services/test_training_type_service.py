"""Tests for the training type catalogue."""

from app.services.training_type_service import TrainingTypeService


class TestTrainingTypeService:
    def test_seed_creates_missing(self, session):
        service = TrainingTypeService(session)
        created = service.seed(["Yoga", "Pilates"])
        assert [t.name for t in created] == ["Yoga", "Pilates"]

    def test_seed_is_idempotent(self, session):
        service = TrainingTypeService(session)
        service.seed(["Yoga", "Pilates"])
        created = service.seed(["yoga", "Zumba", " ", "ZUMBA"])
        assert [t.name for t in created] == ["Zumba"]
        assert [t.name for t in service.get_all()] == ["Pilates", "Yoga", "Zumba"]

    def test_get_by_name(self, session, training_types):
        service = TrainingTypeService(session)
        assert service.get_by_name(" PILATES ").id == training_types["Pilates"].id
        assert service.get_by_name("Boxing") is None
        assert service.get_by_name("") is None
