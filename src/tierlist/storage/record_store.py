"""Ordered key/value records backed by the ``record`` table."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from sqlalchemy.orm import Session

from ..db.db_models import RecordModel, utcnow
from ..exceptions import handle_sqlalchemy_errors

V = TypeVar("V")


class RecordStore(Generic[V]):
    """Opaque persistence for one namespace of records.

    Keys are integers, optionally scoped by a string ``partition`` (the first
    component of a composite key). Range scans are ascending by key within a
    single partition.
    """

    def __init__(
        self,
        namespace: str,
        *,
        encode: Callable[[V], dict[str, Any]],
        decode: Callable[[dict[str, Any]], V],
    ) -> None:
        self.namespace = namespace
        self._encode = encode
        self._decode = decode

    def get(self, session: Session, key: int, *, partition: str = "") -> V | None:
        with handle_sqlalchemy_errors(entity=self.namespace):
            row = session.get(RecordModel, (self.namespace, partition, key))
        if row is None:
            return None
        return self._decode(row.value)

    def put(self, session: Session, key: int, value: V, *, partition: str = "") -> None:
        """Insert or overwrite the record stored under ``key``."""
        payload = self._encode(value)
        with handle_sqlalchemy_errors(entity=self.namespace):
            row = session.get(RecordModel, (self.namespace, partition, key))
            if row is None:
                row = RecordModel(namespace=self.namespace, partition=partition, key=key)
                session.add(row)
            row.value = payload
            row.updated_at = utcnow()
            session.flush()

    def delete(self, session: Session, key: int, *, partition: str = "") -> None:
        with handle_sqlalchemy_errors(entity=self.namespace):
            row = session.get(RecordModel, (self.namespace, partition, key))
            if row is not None:
                session.delete(row)
                session.flush()

    def range(
        self,
        session: Session,
        *,
        partition: str = "",
        start_after: int | None = None,
        limit: int | None = None,
    ) -> list[tuple[int, V]]:
        """Return ``(key, value)`` pairs in ascending key order.

        ``start_after`` is an exclusive lower bound.
        """
        with handle_sqlalchemy_errors(entity=self.namespace):
            query = (
                session.query(RecordModel)
                .filter(
                    RecordModel.namespace == self.namespace,
                    RecordModel.partition == partition,
                )
                .order_by(RecordModel.key)
            )
            if start_after is not None:
                query = query.filter(RecordModel.key > start_after)
            if limit is not None:
                query = query.limit(limit)
            rows = query.all()
        return [(row.key, self._decode(row.value)) for row in rows]
