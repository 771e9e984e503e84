from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SIGNING_KEY", "test-signing-key")
os.environ.setdefault("ADMIN_ADDRESS", "tier1zzzzzzzzzzzzzzzzzzzz")
os.environ.setdefault("TOKEN_TTL_HOURS", "1")
