from __future__ import annotations

from datetime import timezone

from src.tierlist.db.db_models import StateModel, utcnow
from src.tierlist.storage.state_store import StateStore
from src.tierlist.storage.unit_of_work import TransactionManager
from tests.helpers.tierlist import build_session_factory


def test_values_are_kept_as_native_json() -> None:
    transactions = TransactionManager(build_session_factory())
    state = StateStore()

    with transactions.begin() as uow:
        state.upsert(uow.session, "next_id", 7)
        state.upsert(uow.session, "config", {"admin_address": "tier1zzzzzz"})
        uow.commit()

    with transactions.begin() as uow:
        counter = uow.session.get(StateModel, "next_id")
        config = uow.session.get(StateModel, "config")
        assert counter is not None and counter.value == 7
        assert config is not None and config.value == {"admin_address": "tier1zzzzzz"}


def test_upsert_stamps_timezone_aware_time() -> None:
    transactions = TransactionManager(build_session_factory())
    state = StateStore()

    with transactions.begin() as uow:
        state.upsert(uow.session, "answer", 42)
        model = uow.session.get(StateModel, "answer")
        assert model is not None
        assert model.updated_at.tzinfo is timezone.utc
        uow.commit()


def test_utcnow_is_timezone_aware() -> None:
    assert utcnow().tzinfo is timezone.utc
