"""Pure helpers for building and checking rankings against templates."""

from __future__ import annotations

from ..exceptions import NotFoundError
from ..templates.templates_models import Item, Template
from .rankings_models import UNASSIGNED, Ranking


def blank_ranking(template: Template) -> Ranking:
    """Return a ranking with every template item unassigned, in template order."""
    return Ranking(
        template_id=template.id,
        assignments=[(item, UNASSIGNED) for item in template.items],
    )


def validate_ranking(ranking: Ranking, template: Template) -> bool:
    """Check that ``ranking`` ranks exactly the items of ``template``.

    Order and tier labels are ignored; a missing item, an extra item or a
    different template id fails.
    """
    if ranking.template_id != template.id:
        return False
    submitted = sorted(ranking.items(), key=Item.sort_key)
    expected = sorted(template.items, key=Item.sort_key)
    return submitted == expected


def assign_tier(ranking: Ranking, item: Item, label: str) -> Ranking:
    """Return a copy of ``ranking`` with every entry for ``item`` set to ``label``."""
    return Ranking(
        template_id=ranking.template_id,
        assignments=[
            (entry, label if entry == item else current)
            for entry, current in ranking.assignments
        ],
    )


def tier_of(ranking: Ranking, item: Item) -> str:
    """Return the label of the first entry for ``item``."""
    for entry, label in ranking.assignments:
        if entry == item:
            return label
    raise NotFoundError(f"item '{item.name}' is not part of ranking for template {ranking.template_id}")
