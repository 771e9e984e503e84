from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.tierlist.addresses.address_validator import AddressValidator
from src.tierlist.api.errors import install_error_handlers
from src.tierlist.auth.auth_dependencies import require_actor
from src.tierlist.rankings.rankings_api import router
from tests.helpers.tierlist import USER_1, USER_2, Services, build_services, make_items

RANKED = {
    "template_id": 0,
    "assignments": [
        [{"name": "A"}, "S"],
        [{"name": "B"}, "A"],
        [{"name": "C"}, "B"],
    ],
}


def build_client(services: Services, *, actor: str = USER_1) -> TestClient:
    app = FastAPI()
    install_error_handlers(app)
    app.include_router(router)
    app.state.ranking_repo = services.rankings
    app.state.address_validator = AddressValidator(prefix="tier")
    app.dependency_overrides[require_actor] = lambda: actor
    return TestClient(app)


def test_save_ranking_stores_under_caller() -> None:
    services = build_services()
    services.catalog.create("T1", make_items(), creator=USER_2)
    client = build_client(services, actor=USER_1)

    response = client.put("/api/rankings", json={"ranking": RANKED})

    assert response.status_code == 200
    assert response.json() == {"action": "save_ranking", "template_id": 0, "owner": USER_1}
    assert services.rankings.get(USER_1, 0) is not None


def test_invalid_ranking_maps_to_bad_request() -> None:
    services = build_services()
    services.catalog.create("T1", make_items(), creator=USER_1)
    client = build_client(services)
    short = {"template_id": 0, "assignments": RANKED["assignments"][:2]}

    response = client.put("/api/rankings", json={"ranking": short})

    assert response.status_code == 400
    assert response.json()["detail"]["failure_reason"] == "invalid_ranking"


def test_save_for_missing_template_maps_to_not_found() -> None:
    client = build_client(build_services())

    response = client.put("/api/rankings", json={"ranking": RANKED})

    assert response.status_code == 404


def test_fetch_and_list_rankings_by_owner() -> None:
    services = build_services()
    services.catalog.create("T1", make_items(), creator=USER_1)
    services.catalog.create("T2", make_items(), creator=USER_1)
    client = build_client(services)
    client.put("/api/rankings", json={"ranking": RANKED})
    client.put("/api/rankings", json={"ranking": {**RANKED, "template_id": 1}})

    fetched = client.get(f"/api/rankings/{USER_1}/0")
    missing = client.get(f"/api/rankings/{USER_2}/0")
    listed = client.get(f"/api/rankings/{USER_1}", params={"start_after": 0})

    assert fetched.json()["ranking"]["assignments"][0] == [{"name": "A", "image_url": None}, "S"]
    assert missing.json() == {"ranking": None}
    assert [entry[0] for entry in listed.json()] == [1]
    assert listed.json()[0][1]["template_id"] == 1


def test_malformed_owner_address_is_rejected() -> None:
    client = build_client(build_services())

    response = client.get("/api/rankings/not-an-address")

    assert response.status_code == 400
    assert response.json()["detail"]["failure_reason"] == "malformed_address"

    response = client.get("/api/rankings/cosmos1qypqxpq9qcrsszg2pvxq6rs0zqg3yyc5lzv7xu/0")
    assert response.status_code == 400
