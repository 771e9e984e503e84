"""Template domain dataclasses and their persisted encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Item:
    name: str
    image_url: str | None = None

    def sort_key(self) -> tuple[str, bool, str]:
        """Total order over items: name, then image_url (absent sorts first)."""
        return (self.name, self.image_url is not None, self.image_url or "")

    def to_record(self) -> dict[str, Any]:
        return {"name": self.name, "image_url": self.image_url}

    @classmethod
    def from_record(cls, payload: dict[str, Any]) -> Item:
        return cls(name=payload["name"], image_url=payload.get("image_url"))


@dataclass(slots=True)
class Template:
    id: int
    title: str
    creator: str
    items: list[Item] = field(default_factory=list)


def template_to_record(template: Template) -> dict[str, Any]:
    return {
        "id": template.id,
        "title": template.title,
        "items": [item.to_record() for item in template.items],
        "creator": template.creator,
    }


def template_from_record(payload: dict[str, Any]) -> Template:
    return Template(
        id=int(payload["id"]),
        title=payload["title"],
        creator=payload["creator"],
        items=[Item.from_record(entry) for entry in payload.get("items") or []],
    )
