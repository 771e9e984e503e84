"""Application configuration builder."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from .db.db_init import init_db
from .storage.pagination import DEFAULT_LIMIT, MAX_LIMIT, PageLimits


@dataclass(slots=True)
class AuthSettings:
    jwt_signing_key: str
    token_ttl_hours: int


@dataclass(slots=True)
class AppConfig:
    database_url: str
    engine: Engine
    session_factory: sessionmaker[Session]
    auth: AuthSettings
    admin_address: str | None = None
    address_prefix: str | None = None
    page_limits: PageLimits = field(default_factory=PageLimits)


def create_db_engine(database_url: str) -> Engine:
    """Create an engine; in-memory SQLite shares one connection across threads."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_engine(
            database_url,
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(database_url, future=True)


def load_config() -> AppConfig:
    """Load configuration from environment (SQLite by default)."""
    database_url = os.getenv("DATABASE_URL", "sqlite:///tierlist.db")
    engine = create_db_engine(database_url)
    session_factory: sessionmaker[Session] = sessionmaker(bind=engine, expire_on_commit=False)

    auth = AuthSettings(
        jwt_signing_key=os.getenv("JWT_SIGNING_KEY", ""),
        token_ttl_hours=int(os.getenv("TOKEN_TTL_HOURS", 24)),
    )
    page_limits = PageLimits(
        default=int(os.getenv("LIST_DEFAULT_LIMIT", DEFAULT_LIMIT)),
        maximum=int(os.getenv("LIST_MAX_LIMIT", MAX_LIMIT)),
    )

    init_db(engine)

    return AppConfig(
        database_url=database_url,
        engine=engine,
        session_factory=session_factory,
        auth=auth,
        admin_address=os.getenv("ADMIN_ADDRESS") or None,
        address_prefix=os.getenv("ADDRESS_PREFIX") or None,
        page_limits=page_limits,
    )
