"""Singleton values (config, counters, contract info) kept in the state table."""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from ..db.db_models import StateModel, utcnow
from ..exceptions import handle_sqlalchemy_errors


class StateStore:
    """JSON key-value wrapper backed by the state table."""

    def read(self, session: Session, key: str) -> Any | None:
        with handle_sqlalchemy_errors(entity="state"):
            model = session.get(StateModel, key)
        if model is None:
            return None
        return model.value

    def upsert(self, session: Session, key: str, value: Any) -> None:
        with handle_sqlalchemy_errors(entity="state"):
            model = session.get(StateModel, key)
            if model is None:
                model = StateModel(key=key)
                session.add(model)
            model.value = value
            model.updated_at = utcnow()
            session.flush()
