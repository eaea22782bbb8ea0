import pytest

from backend.app import models


def _register_association(client, association_id):
    response = client.post(
        "/associations",
        json={"id": association_id, "name": f"Association {association_id}", "active_members": 4},
    )
    assert response.status_code == 201, response.json()


def _file_report(client, association_id, sales, costs, expenses=0, period="Q1-2025"):
    response = client.post(
        "/financial-reports",
        json={
            "associationId": association_id,
            "associationName": f"Association {association_id}",
            "period": period,
            "sales": sales,
            "costs": costs,
            "expenses": expenses,
        },
    )
    assert response.status_code == 201, response.json()
    return response.json()


def test_dashboard_stats_envelope(client, association):
    _file_report(client, association.id, 150000, 90000, 5000)
    for association_id in ("assoc-b", "assoc-c", "assoc-d"):
        _register_association(client, association_id)
    _file_report(client, "assoc-b", 100, 50)
    _file_report(client, "assoc-c", 400, 100)
    _file_report(client, "assoc-d", 20, 15)
    rating = client.post(
        "/ratings",
        json={
            "associationId": association.id,
            "associationName": association.name,
            "ratingPeriod": "2025",
            "overallRating": 4.5,
            "adjectivalRating": "Outstanding",
        },
    )
    assert rating.status_code == 201, rating.json()

    response = client.get("/dashboard/stats")

    assert response.status_code == 200, response.json()
    body = response.json()
    assert set(body) == {"financialSummary", "recentRatings", "performanceTrends"}
    summary = body["financialSummary"]
    assert summary["totalReports"] == 4
    assert summary["totalAssociations"] == 4
    assert summary["totalSales"] == pytest.approx(150520)
    assert summary["totalProfit"] == pytest.approx(60355)
    top = summary["topPerformingAssociations"]
    assert [item["profit"] for item in top] == [60000, 300, 50]
    assert top[0]["name"] == "San Isidro Hog Raisers"
    assert top[1]["name"] == "Association assoc-c"
    assert len(summary["recentReports"]) == 4
    assert body["recentRatings"][0]["overallRating"] == 4.5
    assert len(body["performanceTrends"]) == 4
    assert set(body["performanceTrends"][0]) == {"period", "sales", "profit", "balance"}


def test_dashboard_stats_without_reports(client):
    body = client.get("/dashboard/stats").json()

    summary = body["financialSummary"]
    assert summary["totalReports"] == 0
    assert summary["averageProfitMargin"] == 0
    assert summary["topPerformingAssociations"] == []
    assert body["recentRatings"] == []


def test_dashboard_ignores_archived_reports(client, association):
    report = _file_report(client, association.id, 1000, 100)
    client.delete(f"/financial-reports/{report['id']}")

    summary = client.get("/dashboard/stats").json()["financialSummary"]

    assert summary["totalReports"] == 0
    assert summary["totalSales"] == 0


def test_recent_ratings_limit(client, db_session):
    for index in range(7):
        db_session.add(
            models.AssociationRating(
                object_id=f"{index:024x}",
                id=f"rating-{index}",
                association_id="assoc-a",
                association_name="Alpha",
                rating_period=str(2018 + index),
                overall_rating=3,
            )
        )
    db_session.commit()

    assert len(client.get("/ratings").json()["items"]) == 5
    assert len(client.get("/ratings", params={"limit": 10}).json()["items"]) == 7
    assert len(client.get("/dashboard/stats").json()["recentRatings"]) == 5
