"""Per-address rankings keyed by ``(owner, template_id)``."""

from __future__ import annotations

import structlog

from ..exceptions import InvalidRankingError, NotFoundError
from ..storage.pagination import PageLimits
from ..storage.record_store import RecordStore
from ..storage.unit_of_work import TransactionManager
from ..templates.templates_models import Template
from .rankings_models import Ranking, ranking_from_record, ranking_to_record
from .rankings_validator import blank_ranking, validate_ranking

logger = structlog.get_logger(__name__)

RANKINGS_NAMESPACE = "tierlists"


def build_ranking_store() -> RecordStore[Ranking]:
    return RecordStore(
        RANKINGS_NAMESPACE,
        encode=ranking_to_record,
        decode=ranking_from_record,
    )


class RankingRepository:
    """Store at most one ranking per owner and template.

    A ranking is checked against its template only when saved; later template
    edits or deletions leave stored rankings untouched.
    """

    def __init__(
        self,
        transactions: TransactionManager,
        store: RecordStore[Ranking],
        templates: RecordStore[Template],
        limits: PageLimits | None = None,
    ) -> None:
        self._transactions = transactions
        self._store = store
        self._templates = templates
        self._limits = limits or PageLimits()

    def save(self, ranking: Ranking, actor: str) -> None:
        """Validate ``ranking`` and store it under the caller's own key."""
        with self._transactions.begin() as uow:
            template = self._templates.get(uow.session, ranking.template_id)
            if template is None:
                logger.warning(
                    "ranking.save.template_missing",
                    template_id=ranking.template_id,
                    actor=actor,
                )
                raise NotFoundError(f"template '{ranking.template_id}' not found")
            if not validate_ranking(ranking, template):
                logger.warning(
                    "ranking.save.invalid",
                    template_id=ranking.template_id,
                    actor=actor,
                    submitted=len(ranking.assignments),
                    expected=len(template.items),
                )
                raise InvalidRankingError(
                    f"ranking items do not match template '{ranking.template_id}'"
                )
            self._store.put(uow.session, ranking.template_id, ranking, partition=actor)
            uow.commit()
        logger.info("ranking.saved", template_id=ranking.template_id, owner=actor)

    def get(self, owner: str, template_id: int) -> Ranking | None:
        with self._transactions.begin() as uow:
            return self._store.get(uow.session, template_id, partition=owner)

    def blank_for(self, template_id: int) -> Ranking | None:
        """Return an unassigned ranking for the template, if it exists."""
        with self._transactions.begin() as uow:
            template = self._templates.get(uow.session, template_id)
        if template is None:
            return None
        return blank_ranking(template)

    def list_by_owner(
        self,
        owner: str,
        start_after: int | None = None,
        limit: int | None = None,
    ) -> list[tuple[int, Ranking]]:
        with self._transactions.begin() as uow:
            return self._store.range(
                uow.session,
                partition=owner,
                start_after=start_after,
                limit=self._limits.resolve(limit),
            )
