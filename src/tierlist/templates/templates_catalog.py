"""Create, edit, delete and list tierlist templates."""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from sqlalchemy.orm import Session

from ..auth.authorization import check_template_permission
from ..exceptions import NotFoundError, UnauthorizedError, ensure_found
from ..instance.instance_service import InstanceService
from ..storage.id_allocator import IdAllocator
from ..storage.pagination import PageLimits
from ..storage.record_store import RecordStore
from ..storage.unit_of_work import TransactionManager
from .templates_models import Item, Template, template_from_record, template_to_record

logger = structlog.get_logger(__name__)

TEMPLATES_NAMESPACE = "tierlist_templates"


def build_template_store() -> RecordStore[Template]:
    return RecordStore(
        TEMPLATES_NAMESPACE,
        encode=template_to_record,
        decode=template_from_record,
    )


class TemplateCatalog:
    """Templates keyed by allocated id.

    Edits and deletes are allowed for the template creator and the instance
    admin only. A missing template is reported before any permission check.
    """

    def __init__(
        self,
        transactions: TransactionManager,
        store: RecordStore[Template],
        ids: IdAllocator,
        instance: InstanceService,
        limits: PageLimits | None = None,
    ) -> None:
        self._transactions = transactions
        self._store = store
        self._ids = ids
        self._instance = instance
        self._limits = limits or PageLimits()

    def create(self, title: str, items: Sequence[Item], creator: str) -> int:
        with self._transactions.begin() as uow:
            template_id = self._ids.allocate(uow.session)
            template = Template(id=template_id, title=title, creator=creator, items=list(items))
            self._store.put(uow.session, template_id, template)
            uow.commit()
        logger.info(
            "template.created",
            template_id=template_id,
            creator=creator,
            item_count=len(template.items),
        )
        return template_id

    def edit(self, template_id: int, title: str, items: Sequence[Item], actor: str) -> Template:
        with self._transactions.begin() as uow:
            existing = self._load_for_mutation(uow.session, template_id, actor, action="edit")
            updated = Template(
                id=existing.id,
                title=title,
                creator=existing.creator,
                items=list(items),
            )
            self._store.put(uow.session, template_id, updated)
            uow.commit()
        logger.info("template.edited", template_id=template_id, actor=actor)
        return updated

    def delete(self, template_id: int, actor: str) -> None:
        with self._transactions.begin() as uow:
            self._load_for_mutation(uow.session, template_id, actor, action="delete")
            self._store.delete(uow.session, template_id)
            uow.commit()
        logger.info("template.deleted", template_id=template_id, actor=actor)

    def get(self, template_id: int) -> Template | None:
        with self._transactions.begin() as uow:
            return self._store.get(uow.session, template_id)

    def list(
        self, start_after: int | None = None, limit: int | None = None
    ) -> list[tuple[int, Template]]:
        with self._transactions.begin() as uow:
            return self._store.range(
                uow.session,
                start_after=start_after,
                limit=self._limits.resolve(limit),
            )

    def _load_for_mutation(
        self, session: Session, template_id: int, actor: str, *, action: str
    ) -> Template:
        try:
            existing = ensure_found(
                self._store.get(session, template_id),
                entity="template",
                identifier=template_id,
            )
        except NotFoundError:
            logger.warning(f"template.{action}.not_found", template_id=template_id, actor=actor)
            raise
        config = self._instance.require_config_in(session)
        try:
            check_template_permission(actor, existing.creator, config.admin_address)
        except UnauthorizedError:
            logger.warning(
                f"template.{action}.denied",
                template_id=template_id,
                actor=actor,
                creator=existing.creator,
            )
            raise
        return existing
