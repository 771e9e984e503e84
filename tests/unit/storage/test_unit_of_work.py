from __future__ import annotations

import pytest

from src.tierlist.storage.state_store import StateStore
from src.tierlist.storage.unit_of_work import TransactionManager, UnitOfWork
from tests.helpers.tierlist import build_session_factory


def test_commit_persists_writes() -> None:
    transactions = TransactionManager(build_session_factory())
    state = StateStore()

    with transactions.begin() as uow:
        state.upsert(uow.session, "answer", {"value": 42})
        uow.commit()

    with transactions.begin() as uow:
        assert state.read(uow.session, "answer") == {"value": 42}


def test_exception_rolls_back_every_write() -> None:
    transactions = TransactionManager(build_session_factory())
    state = StateStore()

    with pytest.raises(RuntimeError):
        with transactions.begin() as uow:
            state.upsert(uow.session, "first", 1)
            state.upsert(uow.session, "second", 2)
            raise RuntimeError("boom")

    with transactions.begin() as uow:
        assert state.read(uow.session, "first") is None
        assert state.read(uow.session, "second") is None


def test_units_of_work_can_be_reopened_after_failure() -> None:
    transactions = TransactionManager(build_session_factory())
    state = StateStore()

    with pytest.raises(ValueError):
        with transactions.begin():
            raise ValueError("first")

    with transactions.begin() as uow:
        state.upsert(uow.session, "key", "value")
        uow.commit()

    with transactions.begin() as uow:
        assert state.read(uow.session, "key") == "value"


def test_begin_hands_out_unit_of_work_contract() -> None:
    transactions = TransactionManager(build_session_factory())

    with transactions.begin() as uow:
        assert isinstance(uow, UnitOfWork)
        assert uow.session.is_active
