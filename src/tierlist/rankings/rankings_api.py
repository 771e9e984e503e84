"""Ranking routes: save under the caller address, read by owner."""

from __future__ import annotations

from collections.abc import Callable

from fastapi import APIRouter, Depends, Path, Query, Request

from ..auth.auth_dependencies import require_actor
from ..templates.templates_schemas import MAX_ID
from .rankings_repository import RankingRepository
from .rankings_schemas import (
    RankingActionResponse,
    RankingPayload,
    RankingResponse,
    SaveRankingRequest,
)

router = APIRouter(prefix="/api/rankings", tags=["rankings"])


def get_ranking_repo(request: Request) -> RankingRepository:
    try:
        return request.app.state.ranking_repo  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("RankingRepository is not configured") from exc


def get_address_validator(request: Request) -> Callable[[str], str]:
    try:
        return request.app.state.address_validator  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("Address validator is not configured") from exc


@router.put("")
def save_ranking(
    payload: SaveRankingRequest,
    actor: str = Depends(require_actor),
    rankings: RankingRepository = Depends(get_ranking_repo),
) -> RankingActionResponse:
    ranking = payload.ranking.to_domain()
    rankings.save(ranking, actor=actor)
    return RankingActionResponse(
        action="save_ranking", template_id=ranking.template_id, owner=actor
    )


@router.get("/{owner}")
def list_rankings_by_owner(
    owner: str,
    start_after: int | None = Query(default=None, ge=0, le=MAX_ID),
    limit: int | None = Query(default=None, ge=0),
    rankings: RankingRepository = Depends(get_ranking_repo),
    validate_address: Callable[[str], str] = Depends(get_address_validator),
) -> list[tuple[int, RankingPayload]]:
    validate_address(owner)
    return [
        (template_id, RankingPayload.from_domain(ranking))
        for template_id, ranking in rankings.list_by_owner(
            owner, start_after=start_after, limit=limit
        )
    ]


@router.get("/{owner}/{template_id}")
def fetch_ranking(
    owner: str,
    template_id: int = Path(..., ge=0, le=MAX_ID),
    rankings: RankingRepository = Depends(get_ranking_repo),
    validate_address: Callable[[str], str] = Depends(get_address_validator),
) -> RankingResponse:
    validate_address(owner)
    ranking = rankings.get(owner, template_id)
    if ranking is None:
        return RankingResponse(ranking=None)
    return RankingResponse(ranking=RankingPayload.from_domain(ranking))
