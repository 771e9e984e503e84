"""Template routes (CRUD, listing, blank rankings)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, Request, status

from ..auth.auth_dependencies import require_actor
from ..rankings.rankings_repository import RankingRepository
from ..rankings.rankings_schemas import RankingPayload, RankingResponse
from .templates_catalog import TemplateCatalog
from .templates_schemas import (
    MAX_ID,
    TemplateActionResponse,
    TemplatePayload,
    TemplateResponse,
    TemplateWriteRequest,
)

router = APIRouter(prefix="/api/templates", tags=["templates"])


def get_template_catalog(request: Request) -> TemplateCatalog:
    try:
        return request.app.state.template_catalog  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("TemplateCatalog is not configured") from exc


def get_ranking_repo(request: Request) -> RankingRepository:
    try:
        return request.app.state.ranking_repo  # type: ignore[attr-defined]
    except AttributeError as exc:  # pragma: no cover - defensive path
        raise RuntimeError("RankingRepository is not configured") from exc


@router.get("")
def list_templates(
    start_after: int | None = Query(default=None, ge=0, le=MAX_ID),
    limit: int | None = Query(default=None, ge=0),
    catalog: TemplateCatalog = Depends(get_template_catalog),
) -> list[tuple[int, TemplatePayload]]:
    return [
        (template_id, TemplatePayload.from_domain(template))
        for template_id, template in catalog.list(start_after=start_after, limit=limit)
    ]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_template(
    payload: TemplateWriteRequest,
    actor: str = Depends(require_actor),
    catalog: TemplateCatalog = Depends(get_template_catalog),
) -> TemplateActionResponse:
    template_id = catalog.create(payload.title, payload.domain_items(), creator=actor)
    return TemplateActionResponse(action="create_template", id=template_id)


@router.get("/{template_id}")
def fetch_template(
    template_id: int = Path(..., ge=0, le=MAX_ID),
    catalog: TemplateCatalog = Depends(get_template_catalog),
) -> TemplateResponse:
    template = catalog.get(template_id)
    if template is None:
        return TemplateResponse(template=None)
    return TemplateResponse(template=TemplatePayload.from_domain(template))


@router.put("/{template_id}")
def edit_template(
    payload: TemplateWriteRequest,
    template_id: int = Path(..., ge=0, le=MAX_ID),
    actor: str = Depends(require_actor),
    catalog: TemplateCatalog = Depends(get_template_catalog),
) -> TemplateActionResponse:
    catalog.edit(template_id, payload.title, payload.domain_items(), actor=actor)
    return TemplateActionResponse(action="edit_template", id=template_id)


@router.delete("/{template_id}")
def delete_template(
    template_id: int = Path(..., ge=0, le=MAX_ID),
    actor: str = Depends(require_actor),
    catalog: TemplateCatalog = Depends(get_template_catalog),
) -> TemplateActionResponse:
    catalog.delete(template_id, actor=actor)
    return TemplateActionResponse(action="delete_template", id=template_id)


@router.get("/{template_id}/blank-ranking")
def fetch_blank_ranking(
    template_id: int = Path(..., ge=0, le=MAX_ID),
    rankings: RankingRepository = Depends(get_ranking_repo),
) -> RankingResponse:
    ranking = rankings.blank_for(template_id)
    if ranking is None:
        return RankingResponse(ranking=None)
    return RankingResponse(ranking=RankingPayload.from_domain(ranking))
