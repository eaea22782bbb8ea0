import pytest


def _observe(client, **payload):
    response = client.post("/performance/records", json=payload)
    assert response.status_code == 201, response.json()
    return response.json()


def test_performance_metrics_with_monthly_breakdown(client):
    _observe(client, pigId="A", date="2025-01-05", weight=50, weightGain=1.2,
             feedConversionRatio=2.3, healthScore=90)
    _observe(client, pigId="B", date="2025-01-20", weight=60, weightGain=1.0,
             feedConversionRatio=2.5, healthScore=85, mortality=True)
    _observe(client, pigId="A", date="2025-03-02", weight=70)
    _observe(client, pigId="Z", date="2024-12-31", weight=10)

    response = client.get("/performance/metrics", params={"year": 2025})

    assert response.status_code == 200, response.json()
    metrics = response.json()
    assert metrics["year"] == 2025
    assert metrics["totalPigs"] == 2
    assert metrics["mortalityRate"] == 50
    assert len(metrics["monthlyData"]) == 12
    january = metrics["monthlyData"][0]
    assert january["month"] == "January"
    assert january["monthNumber"] == 1
    assert january["averageWeight"] == 55
    assert january["weightGain"] == pytest.approx(1.1)
    assert january["feedConversionRatio"] == pytest.approx(2.4)
    assert january["healthScore"] == pytest.approx(87.5)
    assert january["mortalityCount"] == 1
    assert january["totalPigs"] == 2
    assert metrics["monthlyData"][1]["totalPigs"] == 0


def test_performance_metrics_for_empty_year(client):
    metrics = client.get("/performance/metrics", params={"year": 2020}).json()

    assert metrics["totalPigs"] == 0
    assert metrics["mortalityRate"] == 0
    assert all(month["averageWeight"] == 0 for month in metrics["monthlyData"])


def test_performance_record_response_uses_camel_case(client):
    record = _observe(client, pigId="A", date="2025-01-05", caretakerId="care-1")

    assert record["pigId"] == "A"
    assert record["caretakerId"] == "care-1"
    assert record["mortality"] is False
    assert record["_id"]
