from __future__ import annotations

import pytest

from src.tierlist.exceptions import NotFoundError, UnauthorizedError
from src.tierlist.storage.pagination import PageLimits
from src.tierlist.templates.templates_models import Item
from tests.helpers.tierlist import ADMIN, USER_1, USER_2, build_services, make_items


def test_create_assigns_sequential_ids_from_zero() -> None:
    services = build_services()

    first = services.catalog.create("T1", make_items(), creator=USER_1)
    second = services.catalog.create("T2", [], creator=USER_2)

    assert (first, second) == (0, 1)
    stored = services.catalog.get(0)
    assert stored is not None
    assert stored.title == "T1"
    assert stored.items == make_items()
    assert stored.creator == USER_1


def test_get_missing_template_returns_none() -> None:
    services = build_services()

    assert services.catalog.get(7) is None


def test_ids_are_not_reused_after_delete() -> None:
    services = build_services()
    template_id = services.catalog.create("T1", make_items(), creator=USER_1)
    services.catalog.delete(template_id, actor=USER_1)

    assert services.catalog.create("T2", make_items(), creator=USER_1) == template_id + 1


def test_creator_can_edit_template() -> None:
    services = build_services()
    template_id = services.catalog.create("T1", make_items(), creator=USER_1)

    services.catalog.edit(template_id, "Renamed", [Item(name="X")], actor=USER_1)

    stored = services.catalog.get(template_id)
    assert stored.title == "Renamed"
    assert stored.items == [Item(name="X")]
    assert stored.creator == USER_1


def test_admin_edit_preserves_creator() -> None:
    services = build_services()
    template_id = services.catalog.create("T1", make_items(), creator=USER_1)

    updated = services.catalog.edit(template_id, "By admin", make_items(), actor=ADMIN)

    assert updated.creator == USER_1
    assert services.catalog.get(template_id).creator == USER_1


def test_other_address_cannot_edit_or_delete() -> None:
    services = build_services()
    template_id = services.catalog.create("T1", make_items(), creator=USER_1)

    with pytest.raises(UnauthorizedError):
        services.catalog.edit(template_id, "Hijacked", [], actor=USER_2)
    with pytest.raises(UnauthorizedError):
        services.catalog.delete(template_id, actor=USER_2)

    stored = services.catalog.get(template_id)
    assert stored is not None
    assert stored.title == "T1"


def test_admin_can_delete_foreign_template() -> None:
    services = build_services()
    template_id = services.catalog.create("T1", make_items(), creator=USER_1)

    services.catalog.delete(template_id, actor=ADMIN)

    assert services.catalog.get(template_id) is None


def test_missing_template_reports_not_found_before_authorization() -> None:
    services = build_services()

    with pytest.raises(NotFoundError):
        services.catalog.edit(3, "T", [], actor=USER_2)
    with pytest.raises(NotFoundError):
        services.catalog.delete(3, actor=USER_2)


def test_list_is_ascending_and_honours_start_after() -> None:
    services = build_services()
    for index in range(5):
        services.catalog.create(f"T{index}", make_items(), creator=USER_1)

    page = services.catalog.list(start_after=1, limit=2)

    assert [template_id for template_id, _ in page] == [2, 3]
    assert [template.title for _, template in page] == ["T2", "T3"]
    assert [template_id for template_id, _ in services.catalog.list(start_after=4)] == []


def test_list_defaults_to_ten_entries() -> None:
    services = build_services()
    for index in range(12):
        services.catalog.create(f"T{index}", [], creator=USER_1)

    page = services.catalog.list()

    assert [template_id for template_id, _ in page] == list(range(10))


def test_list_clamps_large_limits() -> None:
    services = build_services(limits=PageLimits(default=2, maximum=3))
    for index in range(5):
        services.catalog.create(f"T{index}", [], creator=USER_1)

    assert len(services.catalog.list()) == 2
    assert len(services.catalog.list(limit=1000)) == 3


def test_edit_requires_initialized_instance() -> None:
    services = build_services(admin=None)
    template_id = services.catalog.create("T1", make_items(), creator=USER_1)

    with pytest.raises(NotFoundError):
        services.catalog.edit(template_id, "T", [], actor=USER_1)
