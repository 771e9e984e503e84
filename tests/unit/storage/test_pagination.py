from __future__ import annotations

import pytest

from src.tierlist.storage.pagination import PageLimits


@pytest.mark.parametrize(
    ("limit", "expected"),
    [(None, 10), (0, 0), (5, 5), (100, 100), (10_000, 100), (-3, 0)],
)
def test_resolve_applies_default_and_cap(limit: int | None, expected: int) -> None:
    assert PageLimits().resolve(limit) == expected


def test_default_never_exceeds_maximum() -> None:
    assert PageLimits(default=50, maximum=20).resolve(None) == 20
