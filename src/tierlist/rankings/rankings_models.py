"""Ranking domain dataclass and its persisted encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..templates.templates_models import Item

UNASSIGNED = ""


@dataclass(slots=True)
class Ranking:
    """One address's tier assignment for every item of one template.

    ``assignments`` holds ``(item, label)`` pairs; the empty label marks an
    unassigned item.
    """

    template_id: int
    assignments: list[tuple[Item, str]] = field(default_factory=list)

    def items(self) -> list[Item]:
        return [item for item, _ in self.assignments]


def ranking_to_record(ranking: Ranking) -> dict[str, Any]:
    return {
        "template_id": ranking.template_id,
        "assignments": [[item.to_record(), label] for item, label in ranking.assignments],
    }


def ranking_from_record(payload: dict[str, Any]) -> Ranking:
    return Ranking(
        template_id=int(payload["template_id"]),
        assignments=[
            (Item.from_record(item), str(label))
            for item, label in payload.get("assignments") or []
        ],
    )
