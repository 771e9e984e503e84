"""Pydantic schemas for template API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .templates_models import Item, Template

MAX_ID = 2**63 - 1


class ItemPayload(BaseModel):
    name: str
    image_url: str | None = None

    def to_domain(self) -> Item:
        return Item(name=self.name, image_url=self.image_url)

    @classmethod
    def from_domain(cls, item: Item) -> "ItemPayload":
        return cls(name=item.name, image_url=item.image_url)


class TemplatePayload(BaseModel):
    id: int
    title: str
    items: list[ItemPayload]
    creator: str

    @classmethod
    def from_domain(cls, template: Template) -> "TemplatePayload":
        return cls(
            id=template.id,
            title=template.title,
            items=[ItemPayload.from_domain(item) for item in template.items],
            creator=template.creator,
        )


class TemplateWriteRequest(BaseModel):
    title: str
    items: list[ItemPayload] = Field(default_factory=list)

    def domain_items(self) -> list[Item]:
        return [item.to_domain() for item in self.items]


class TemplateResponse(BaseModel):
    template: TemplatePayload | None = None


class TemplateActionResponse(BaseModel):
    action: str
    id: int
