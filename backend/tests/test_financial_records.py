import pytest


def _create_record(client, **overrides):
    payload = {
        "project_id": "proj-1",
        "association_id": "assoc-1",
        "record_date": "2025-03-01",
        "record_type": "income",
        "amount": 100,
    }
    payload.update(overrides)
    response = client.post("/financial-records", json=payload)
    assert response.status_code == 201, response.json()
    return response.json()


def test_create_and_fetch_record_by_either_identifier(client):
    created = _create_record(client, id="rec-100")

    assert created["id"] == "rec-100"
    assert created["_id"] != "rec-100"
    assert client.get("/financial-records/rec-100").json()["amount"] == 100
    assert client.get(f"/financial-records/{created['_id']}").json()["id"] == "rec-100"


def test_dashboard_summarises_records(client):
    _create_record(client, amount=100, record_type="income")
    _create_record(client, amount=-40, record_type="expense")
    _create_record(client, amount=500, project_id="proj-2")

    response = client.get("/financial-records/dashboard", params={"project_id": "proj-1"})

    assert response.status_code == 200, response.json()
    body = response.json()
    assert body["record_count"] == 2
    assert body["summary"]["total_amount"] == 60
    assert body["summary"]["total_income"] == 100
    assert body["summary"]["total_expense"] == -40
    assert body["summary"]["avg_amount"] == 30
    assert body["summary"]["min_amount"] == -40
    assert body["summary"]["max_amount"] == 100
    assert body["distribution"] == [
        {"record_type": "income", "total": 100},
        {"record_type": "expense", "total": -40},
    ]


def test_dashboard_date_range_is_inclusive(client):
    _create_record(client, record_date="2025-01-01", amount=1)
    _create_record(client, record_date="2025-01-31", amount=2)
    _create_record(client, record_date="2025-02-01", amount=4)

    body = client.get(
        "/financial-records/dashboard",
        params={"date_from": "2025-01-01", "date_to": "2025-01-31"},
    ).json()

    assert body["record_count"] == 2
    assert body["summary"]["total_amount"] == 3


def test_dashboard_rejects_inverted_date_range(client):
    response = client.get(
        "/financial-records/dashboard",
        params={"date_from": "2025-02-01", "date_to": "2025-01-01"},
    )

    assert response.status_code == 400


def test_dashboard_without_records_returns_zeros(client):
    body = client.get("/financial-records/dashboard").json()

    assert body["record_count"] == 0
    assert body["distribution"] == []
    assert body["summary"]["avg_amount"] == 0


def test_update_ignores_identity_fields(client):
    created = _create_record(client, id="rec-200")

    response = client.put(
        "/financial-records/rec-200",
        json={"_id": "000000000000000000000000", "archived": True, "amount": 75.5},
    )

    assert response.status_code == 200, response.json()
    body = response.json()
    assert body["_id"] == created["_id"]
    assert body["archived"] is False
    assert body["amount"] == pytest.approx(75.5)


def test_archive_excludes_from_listing_and_dashboard(client):
    kept = _create_record(client, amount=10)
    archived = _create_record(client, amount=1000)

    response = client.post(f"/financial-records/{archived['id']}/archive")
    assert response.status_code == 200
    assert response.json()["archived"] is True

    listing = client.get("/financial-records").json()
    assert [item["id"] for item in listing["items"]] == [kept["id"]]
    assert client.get("/financial-records/archived").json()["total"] == 1
    assert client.get("/financial-records/dashboard").json()["summary"]["total_amount"] == 10

    client.post(f"/financial-records/{archived['id']}/restore")
    assert client.get("/financial-records").json()["total"] == 2


def test_record_not_found(client):
    assert client.get("/financial-records/rec-missing").status_code == 404
    assert client.post("/financial-records/rec-missing/archive").status_code == 404
    assert client.put("/financial-records/rec-missing", json={"amount": 1}).status_code == 404


def test_create_requires_project(client):
    response = client.post(
        "/financial-records",
        json={"record_date": "2025-03-01", "record_type": "income", "amount": 1},
    )

    assert response.status_code == 422


def test_update_rejects_null_required_fields(client):
    created = _create_record(client, id="rec-200")

    for field in ("project_id", "record_date", "record_type", "amount"):
        response = client.put("/financial-records/rec-200", json={field: None})
        assert response.status_code == 422, field

    fetched = client.get("/financial-records/rec-200")
    assert fetched.status_code == 200
    assert fetched.json()["project_id"] == created["project_id"]

    cleared = client.put("/financial-records/rec-200", json={"note": None})
    assert cleared.status_code == 200, cleared.json()
