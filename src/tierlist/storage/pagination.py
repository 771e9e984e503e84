"""Page size rules shared by every list operation."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


@dataclass(frozen=True, slots=True)
class PageLimits:
    default: int = DEFAULT_LIMIT
    maximum: int = MAX_LIMIT

    def resolve(self, limit: int | None) -> int:
        """Apply the default to a missing limit and clamp to the maximum."""
        if limit is None:
            return min(self.default, self.maximum)
        return max(0, min(limit, self.maximum))
