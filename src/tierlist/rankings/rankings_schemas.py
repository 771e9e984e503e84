"""Pydantic schemas for ranking API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ..templates.templates_schemas import MAX_ID, ItemPayload
from .rankings_models import Ranking


class RankingPayload(BaseModel):
    template_id: int = Field(..., ge=0, le=MAX_ID)
    assignments: list[tuple[ItemPayload, str]] = Field(default_factory=list)

    def to_domain(self) -> Ranking:
        return Ranking(
            template_id=self.template_id,
            assignments=[(item.to_domain(), label) for item, label in self.assignments],
        )

    @classmethod
    def from_domain(cls, ranking: Ranking) -> "RankingPayload":
        return cls(
            template_id=ranking.template_id,
            assignments=[
                (ItemPayload.from_domain(item), label) for item, label in ranking.assignments
            ],
        )


class SaveRankingRequest(BaseModel):
    ranking: RankingPayload


class RankingResponse(BaseModel):
    ranking: RankingPayload | None = None


class RankingActionResponse(BaseModel):
    action: str
    template_id: int
    owner: str
