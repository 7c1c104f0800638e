"""HTTP tests for /demo and /health with the SQL adapters replaced by fakes."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.adapters.persistence import database
from app.main import app


@pytest.fixture
def seeded(demo_repo, make_demo):
    for d in (
        make_demo(1, "Apple", "Red fruit", 3.0, "Fruit"),
        make_demo(2, "banana", "", 1.5, "Fruit"),
        make_demo(3, "Cherry", "", 7.0, "Fruit"),
    ):
        demo_repo.demos[d.id] = d
    return demo_repo


# ─── Create ─────────────────────────────────────────────────────────


def test_create_on_empty_store_assigns_sequential_ids(client, fake_session):
    r1 = client.post("/demo", json={"Name": "A", "Price": 10})
    assert r1.status_code == 201
    assert r1.json()["message"] == "Data added successfully"
    assert r1.json()["demo"] == {
        "id": 1, "Name": "A", "Description": "", "Price": 10, "Category": "",
    }

    r2 = client.post("/demo", json={"Name": "B"})
    assert r2.status_code == 201
    assert r2.json()["demo"]["id"] == 2
    assert fake_session.commits == 2


def test_create_coerces_types_and_drops_unknown_fields(client, demo_repo):
    r = client.post("/demo", json={"Name": 42, "Price": "12.5", "Color": "red"})
    assert r.status_code == 201
    demo = r.json()["demo"]
    assert demo["Name"] == "42"
    assert demo["Price"] == 12.5
    assert "Color" not in demo
    assert not hasattr(demo_repo.demos[1], "color")


def test_create_with_uncoercible_price_is_rejected(client, demo_repo):
    r = client.post("/demo", json={"Name": "A", "Price": "cheap"})
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid input"
    assert demo_repo.demos == {}


@pytest.mark.parametrize("price", ["Infinity", "-Infinity", "NaN"])
def test_create_with_non_finite_price_is_rejected(client, demo_repo, price):
    # Bare JSON literals; the string forms are covered by the PATCH test below.
    r = client.post(
        "/demo",
        content=f'{{"Name": "A", "Price": {price}}}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid input"
    assert demo_repo.demos == {}
    assert client.get("/demo").status_code == 200


def test_create_commit_failure_is_a_json_500(client, fake_session):
    fake_session.commit_error = ConnectionResetError("connection reset by peer")
    r = client.post("/demo", json={"Name": "A"})
    assert r.status_code == 500
    assert r.json()["error"] == "Server error"
    assert "unavailable" in r.json()["details"]


def test_create_fails_without_writing_when_allocation_fails(client, allocator, demo_repo, fake_session):
    allocator.unavailable = True
    r = client.post("/demo", json={"Name": "A"})
    assert r.status_code == 500
    assert r.json()["error"] == "Server error"
    assert "unavailable" in r.json()["details"]
    assert demo_repo.demos == {}
    assert fake_session.commits == 0


# ─── List ───────────────────────────────────────────────────────────


def test_list_returns_all(client, seeded):
    r = client.get("/demo")
    assert r.status_code == 200
    assert sorted(d["id"] for d in r.json()) == [1, 2, 3]


def test_list_search_is_case_insensitive(client, seeded):
    r = client.get("/demo", params={"search": "a"})
    assert r.status_code == 200
    assert sorted(d["Name"] for d in r.json()) == ["Apple", "banana"]


def test_list_search_without_matches_is_empty(client, seeded):
    assert client.get("/demo", params={"search": "zzz"}).json() == []


# ─── Update ─────────────────────────────────────────────────────────


def test_put_replaces_all_fields(client, seeded):
    r = client.put("/demo/1", json={"Name": "Green apple", "id": 77})
    assert r.status_code == 200
    assert r.json() == {
        "message": "Data updated successfully",
        "demo": {"id": 1, "Name": "Green apple", "Description": "", "Price": 0, "Category": ""},
    }


def test_patch_changes_only_supplied_fields(client, seeded):
    r = client.patch("/demo/1", json={"Price": 4.25})
    assert r.status_code == 200
    assert r.json()["demo"] == {
        "id": 1, "Name": "Apple", "Description": "Red fruit", "Price": 4.25, "Category": "Fruit",
    }


@pytest.mark.parametrize("price", ["NaN", "Infinity", "inf"])
def test_patch_with_non_finite_price_is_rejected(client, seeded, price):
    r = client.patch("/demo/1", json={"Price": price})
    assert r.status_code == 400
    assert seeded.demos[1].price == 3.0
    assert client.get("/demo").status_code == 200


@pytest.mark.parametrize("method", ["put", "patch"])
def test_update_missing_id_is_404(client, seeded, method):
    r = getattr(client, method)("/demo/99", json={"Name": "X"})
    assert r.status_code == 404
    assert r.json() == {"error": "Data not found"}


# ─── Delete ─────────────────────────────────────────────────────────


def test_delete_returns_removed_record(client, seeded):
    r = client.delete("/demo/2")
    assert r.status_code == 200
    assert r.json()["message"] == "Data deleted successfully"
    assert r.json()["demo"]["Name"] == "banana"
    assert 2 not in seeded.demos

    assert client.delete("/demo/2").status_code == 404


def test_delete_non_integer_id_is_400(client, seeded):
    assert client.delete("/demo/abc").status_code == 400


@pytest.mark.parametrize("method", ["put", "patch", "delete"])
@pytest.mark.parametrize("demo_id", ["9223372036854775808", "-9223372036854775809"])
def test_id_outside_bigint_range_is_400(client, seeded, method, demo_id):
    kwargs = {} if method == "delete" else {"json": {"Name": "X"}}
    r = getattr(client, method)(f"/demo/{demo_id}", **kwargs)
    assert r.status_code == 400
    assert r.json()["error"] == "Invalid input"


def test_largest_bigint_id_is_accepted_and_not_found(client, seeded):
    assert client.delete("/demo/9223372036854775807").status_code == 404


def test_batch_delete_ignores_unknown_ids(client, seeded):
    r = client.post("/demo/delete", json={"ids": [1, 42]})
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Data deleted successfully", "deleted": 1}
    assert set(seeded.demos) == {2, 3}


def test_batch_delete_none_matched_is_404(client, seeded):
    r = client.post("/demo/delete", json={"ids": [40, 41]})
    assert r.status_code == 404
    assert set(seeded.demos) == {1, 2, 3}


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"ids": []},
        {"ids": "1"},
        {"ids": [1, "x"]},
        {"ids": ["--1"]},
        {"ids": ["\u00b2"]},
        {"ids": [2**63]},
    ],
)
def test_batch_delete_invalid_ids_is_400(client, seeded, body):
    r = client.post("/demo/delete", json=body)
    assert r.status_code == 400
    assert "error" in r.json()
    assert set(seeded.demos) == {1, 2, 3}


# ─── Storage not configured ─────────────────────────────────────────


def test_data_routes_fail_with_500_without_database(monkeypatch):
    monkeypatch.setattr(database, "async_session_factory", None)
    app.dependency_overrides.clear()
    r = TestClient(app).get("/demo")
    assert r.status_code == 500
    assert r.json() == {"error": "Server error", "details": "DATABASE_URL is not configured"}


def test_health_reports_degraded_without_database(monkeypatch):
    monkeypatch.setattr(database, "engine", None)
    r = TestClient(app).get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "degraded"
    assert "DATABASE_URL" in r.json()["database"]
