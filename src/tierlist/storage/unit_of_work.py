"""Transactional boundary shared by repositories and services.

Every catalog or ranking operation runs inside one unit of work. Units of work
are serialized by a process-wide lock, so an operation observes only state
committed by operations that finished before it started, and either all of
its writes commit or none do.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from sqlalchemy.orm import Session

from ..exceptions import handle_sqlalchemy_errors


@runtime_checkable
class UnitOfWork(Protocol):
    """What catalogs and repositories rely on from :meth:`TransactionManager.begin`.

    ``session`` is usable between ``__enter__`` and ``__exit__``; writes not
    passed through :meth:`commit` are discarded on exit.
    """

    session: Session

    def __enter__(self) -> UnitOfWork: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: object,
    ) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class SqlAlchemyUnitOfWork:
    """Unit of work over a single SQLAlchemy session.

    Anything not explicitly committed is rolled back on exit.
    """

    def __init__(self, session_factory: Callable[[], Session], lock: threading.RLock) -> None:
        self._session_factory = session_factory
        self._lock = lock
        self._committed = False
        self.session: Session

    def __enter__(self) -> SqlAlchemyUnitOfWork:
        self._lock.acquire()
        try:
            self.session = self._session_factory()
        except BaseException:
            self._lock.release()
            raise
        self._committed = False
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: object,
    ) -> None:
        try:
            if exc_type is not None or not self._committed:
                self.session.rollback()
        finally:
            self.session.close()
            self._lock.release()

    def commit(self) -> None:
        with handle_sqlalchemy_errors():
            self.session.commit()
        self._committed = True

    def rollback(self) -> None:
        self.session.rollback()
        self._committed = False


class TransactionManager:
    """Hand out units of work bound to one logical store."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory
        self._lock = threading.RLock()

    def begin(self) -> UnitOfWork:
        return SqlAlchemyUnitOfWork(self._session_factory, self._lock)
