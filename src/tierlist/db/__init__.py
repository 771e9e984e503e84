"""Database models and bootstrap helpers."""

from .db_models import Base, RecordModel, StateModel, utcnow

__all__ = ["Base", "RecordModel", "StateModel", "utcnow"]
