"""Persistence primitives shared by the catalog and ranking repositories."""

from .id_allocator import IdAllocator
from .pagination import PageLimits
from .record_store import RecordStore
from .state_store import StateStore
from .unit_of_work import SqlAlchemyUnitOfWork, TransactionManager, UnitOfWork

__all__ = [
    "IdAllocator",
    "PageLimits",
    "RecordStore",
    "SqlAlchemyUnitOfWork",
    "StateStore",
    "TransactionManager",
    "UnitOfWork",
]
