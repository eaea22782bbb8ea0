import math
import random

import pytest

from backend.app.services.financial_derivation import derive_report
from backend.app.services.report_generator import default_period_label, derive_generated_report


def test_derive_report_splits_profit_and_deducts_monitoring_fee():
    derived = derive_report(150000, 90000, 5000)

    assert derived.profit == pytest.approx(60000)
    assert derived.share80 == pytest.approx(48000)
    assert derived.ass_share20 == pytest.approx(12000)
    assert derived.monitoring2 == pytest.approx(1200)
    assert derived.balance == pytest.approx(53800)


@pytest.mark.parametrize(
    "sales, costs, expenses",
    [
        (0, 0, 0),
        (1000.5, 200.25, 10),
        (500, 800, 0),
        (1e9, 1, 1e8),
        (0.1, 0.2, 0.3),
    ],
)
def test_derived_fields_stay_consistent(sales, costs, expenses):
    derived = derive_report(sales, costs, expenses)

    assert derived.profit == pytest.approx(sales - costs)
    assert derived.share80 + derived.ass_share20 == pytest.approx(derived.profit)
    assert derived.balance == pytest.approx(
        derived.profit - expenses - derived.profit * 0.02
    )


def test_missing_inputs_count_as_zero():
    derived = derive_report(sales=1000)

    assert derived.costs == 0
    assert derived.expenses == 0
    assert derived.profit == 1000
    assert derived.balance == pytest.approx(980)


def test_negative_profit_yields_negative_balance():
    derived = derive_report(100, 300, 50)

    assert derived.profit == -200
    assert derived.monitoring2 == pytest.approx(-4)
    assert derived.balance == pytest.approx(-246)


def test_non_finite_inputs_propagate():
    derived = derive_report(float("nan"), 10, 0)
    assert math.isnan(derived.profit)
    assert math.isnan(derived.balance)

    infinite = derive_report(float("inf"), 10, 0)
    assert math.isinf(infinite.profit)


def test_as_dict_exposes_every_field():
    assert set(derive_report(1, 1, 1).as_dict()) == {
        "sales",
        "costs",
        "expenses",
        "profit",
        "share80",
        "ass_share20",
        "monitoring2",
        "balance",
    }


def test_default_period_label():
    assert default_period_label("Q1-2025") == "Q1-2025"
    assert default_period_label(None, 2024) == "Annual 2024"
    assert default_period_label("", 2023) == "Annual 2023"


def test_generated_report_stays_within_synthesis_bounds():
    association = {"active_members": 8, "inactive_members": 2}
    rng = random.Random(1234)

    for _ in range(50):
        derived = derive_generated_report(association, "Annual 2025", rng=rng, base_revenue_per_member=5000)

        assert 35000 <= derived.sales <= 65000
        assert derived.sales == math.floor(derived.sales)
        assert 0.4 * derived.sales - 1 <= derived.costs <= 0.7 * derived.sales
        assert 0.1 * derived.sales - 1 <= derived.expenses <= 0.2 * derived.sales
        assert derived.profit == pytest.approx(derived.sales - derived.costs)
        assert derived.share80 + derived.ass_share20 == pytest.approx(derived.profit)


def test_generated_report_is_reproducible_with_seeded_source():
    association = {"activeMembers": 5, "inactiveMembers": 0}

    first = derive_generated_report(association, "Annual 2025", rng=random.Random(7))
    second = derive_generated_report(association, "Annual 2025", rng=random.Random(7))

    assert first == second


def test_generated_report_uses_configured_revenue_per_member(monkeypatch):
    monkeypatch.setenv("REPORT_REVENUE_PER_MEMBER", "100")

    class Midpoint:
        def random(self) -> float:
            return 0.5

    derived = derive_generated_report({"active_members": 10}, "Annual 2025", rng=Midpoint())

    assert derived.sales == 1000
    assert derived.costs in (549, 550)
    assert derived.expenses in (149, 150)
