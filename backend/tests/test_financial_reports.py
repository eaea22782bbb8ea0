import random

import pytest

from backend.app import models
from backend.app.services import FinancialReportService


def _create_report(client, association, **overrides):
    payload = {
        "associationId": association.id,
        "period": "Q1-2025",
        "reportDate": "2025-03-31T00:00:00Z",
        "sales": 150000,
        "costs": 90000,
        "expenses": 5000,
    }
    payload.update(overrides)
    response = client.post("/financial-reports", json=payload)
    assert response.status_code == 201, response.json()
    return response.json()


def test_create_report_derives_every_computed_field(client, association):
    report = _create_report(client, association, profit=1, balance=2)

    assert report["associationName"] == "San Isidro Hog Raisers"
    assert report["profit"] == pytest.approx(60000)
    assert report["share80"] == pytest.approx(48000)
    assert report["assShare20"] == pytest.approx(12000)
    assert report["monitoring2"] == pytest.approx(1200)
    assert report["balance"] == pytest.approx(53800)
    assert report["_id"]
    assert report["id"] == report["_id"]


def test_manual_create_allows_repeated_periods(client, association):
    first = _create_report(client, association)
    second = _create_report(client, association)

    assert first["id"] != second["id"]
    listing = client.get("/financial-reports", params={"associationId": association.id})
    assert listing.json()["total"] == 2


def test_create_report_rejects_negative_inputs(client, association):
    response = client.post(
        "/financial-reports",
        json={"associationId": association.id, "period": "Q1-2025", "sales": -1},
    )

    assert response.status_code == 422


def test_create_report_for_unknown_association_is_not_found(client):
    response = client.post(
        "/financial-reports",
        json={
            "associationId": "assoc-unknown",
            "associationName": "Unknown Growers",
            "period": "Q1-2025",
            "sales": 10,
        },
    )

    assert response.status_code == 404


def test_report_filed_by_native_id_is_stored_under_application_id(client, association):
    report = _create_report(
        client, association, associationId=association.object_id, sales=1000, costs=400, expenses=0
    )

    assert report["associationId"] == association.id
    assert report["associationName"] == association.name

    summary = client.get("/financial-reports/summary", params={"year": 2025}).json()
    entry = summary["reportSummaries"][0]
    assert entry["associationId"] == association.id
    assert entry["reportPeriod"] != "No Reports"
    assert entry["netProfit"] == pytest.approx(600)


def test_create_report_keeps_supplied_association_name(client, association):
    report = _create_report(client, association, associationName="San Isidro (2025 roster)")

    assert report["associationName"] == "San Isidro (2025 roster)"


def test_generate_is_idempotent_per_association_and_period(client, association):
    first = client.post(
        "/financial-reports/generate",
        json={"associationId": association.id, "period": "Q1-2025"},
    )
    second = client.post(
        "/financial-reports/generate",
        json={"associationId": association.id, "period": "Q1-2025"},
    )

    assert first.status_code == 201, first.json()
    assert first.json()["existing"] is False
    assert second.status_code == 200
    assert second.json()["existing"] is True
    assert second.json()["id"] == first.json()["id"]
    listing = client.get("/financial-reports", params={"associationId": association.id})
    assert listing.json()["total"] == 1


def test_generate_defaults_to_annual_period(client, association):
    response = client.post(
        "/financial-reports/generate",
        json={"associationId": association.id, "year": 2024},
    )

    assert response.status_code == 201
    assert response.json()["period"] == "Annual 2024"


def test_generate_for_missing_association_returns_not_found(client):
    response = client.post("/financial-reports/generate", json={"associationId": "assoc-missing"})

    assert response.status_code == 404


def test_generate_service_uses_injected_random_source(db_session, association):
    report, created = FinancialReportService.get_or_create_report(
        db_session, association.id, period="Q3-2025", rng=random.Random(3)
    )

    assert created is True
    assert report.association_name == association.name
    assert report.sales > 0
    assert report.share80 + report.ass_share20 == pytest.approx(report.profit)


def test_update_report_rederives_when_inputs_change(client, association):
    report = _create_report(client, association)

    response = client.put(
        f"/financial-reports/{report['id']}",
        json={"sales": 200000, "profit": 5},
    )

    assert response.status_code == 200, response.json()
    updated = response.json()
    assert updated["sales"] == 200000
    assert updated["costs"] == 90000
    assert updated["profit"] == pytest.approx(110000)
    assert updated["balance"] == pytest.approx(102800)
    assert updated["createdAt"] == report["createdAt"]


def test_update_without_inputs_keeps_derived_fields(client, association):
    report = _create_report(client, association)

    response = client.put(f"/financial-reports/{report['id']}", json={"caretakerName": "Ana"})

    assert response.status_code == 200
    assert response.json()["caretakerName"] == "Ana"
    assert response.json()["profit"] == pytest.approx(60000)


def test_update_report_rejects_null_required_fields(client, association):
    report = _create_report(client, association)

    for field in ("period", "reportDate", "sales"):
        response = client.put(f"/financial-reports/{report['id']}", json={field: None})
        assert response.status_code == 422, field

    fetched = client.get(f"/financial-reports/{report['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["period"] == "Q1-2025"


def test_delete_archives_and_restore_brings_back(client, association):
    report = _create_report(client, association)

    deleted = client.delete(f"/financial-reports/{report['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["archived"] is True
    assert client.get("/financial-reports").json()["total"] == 0
    assert client.get(f"/financial-reports/{report['_id']}").status_code == 200

    restored = client.post(f"/financial-reports/{report['id']}/restore")
    assert restored.status_code == 200
    assert restored.json()["archived"] is False
    assert client.get("/financial-reports").json()["total"] == 1


def test_missing_and_malformed_identifiers(client):
    assert client.get("/financial-reports/report-missing").status_code == 404
    assert client.get("/financial-reports/bad id!").status_code == 400
    assert client.put("/financial-reports/report-missing", json={"sales": 1}).status_code == 404


def test_list_filters_by_year(client, association):
    _create_report(client, association)
    _create_report(client, association, period="Q1-2024", reportDate="2024-03-31T00:00:00Z")

    response = client.get("/financial-reports", params={"year": 2024})

    assert response.status_code == 200
    assert [item["period"] for item in response.json()["items"]] == ["Q1-2024"]


def test_group_summary_rates_associations(client, db_session, association):
    _create_report(client, association)
    db_session.add(
        models.Association(
            object_id="64b7f0c2a1b2c3d4e5f60719",
            id="assoc-without-reports",
            name="Quiet Farmers",
            active_members=3,
        )
    )
    db_session.commit()

    response = client.get("/financial-reports/summary", params={"year": 2025})

    assert response.status_code == 200, response.json()
    summary = response.json()
    assert summary["reportYear"] == 2025
    assert summary["totalAssociations"] == 2
    assert summary["associationsWithReports"] == 1
    assert summary["totalReports"] == 1
    assert summary["totalAssShare"] == pytest.approx(12000)
    by_id = {item["associationId"]: item for item in summary["reportSummaries"]}
    assert by_id[association.id]["performanceMetrics"]["descriptiveRating"] == "Outstanding"
    assert by_id["assoc-without-reports"]["reportPeriod"] == "No Reports"
    assert by_id["assoc-without-reports"]["performanceMetrics"] is None
