from __future__ import annotations

from src.tierlist.storage.id_allocator import NEXT_ID_KEY, IdAllocator
from src.tierlist.storage.state_store import StateStore
from src.tierlist.storage.unit_of_work import TransactionManager
from tests.helpers.tierlist import build_session_factory


def test_first_allocation_is_zero_and_counter_advances() -> None:
    transactions = TransactionManager(build_session_factory())
    ids = IdAllocator(StateStore())

    with transactions.begin() as uow:
        allocated = [ids.allocate(uow.session) for _ in range(3)]
        uow.commit()

    with transactions.begin() as uow:
        assert StateStore().read(uow.session, NEXT_ID_KEY) == 3

    assert allocated == [0, 1, 2]


def test_uncommitted_allocation_is_discarded() -> None:
    transactions = TransactionManager(build_session_factory())
    ids = IdAllocator(StateStore())

    with transactions.begin() as uow:
        ids.allocate(uow.session)

    with transactions.begin() as uow:
        assert ids.allocate(uow.session) == 0
