"""Placeholder report synthesis based on association size.

This produces demonstration figures for associations that have not filed a
report yet. It is not a forecast; real figures always go through
:func:`derive_report` with caller-supplied inputs.
"""

from __future__ import annotations

import math
import random
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Protocol

from ..config import revenue_per_member
from .financial_derivation import DerivedFields, derive_report

REVENUE_VARIATION = 0.3
COST_RATIO_RANGE = (0.4, 0.7)
EXPENSE_RATIO_RANGE = (0.1, 0.2)


class RandomSource(Protocol):
    def random(self) -> float:  # pragma: no cover - protocol definition
        ...


def default_period_label(period: Optional[str] = None, year: Optional[int] = None) -> str:
    if period:
        return period
    return f"Annual {year or datetime.now(timezone.utc).year}"


def _member_count(association: Any) -> int:
    if isinstance(association, Mapping):
        active = association.get("active_members") or association.get("activeMembers") or 0
        inactive = association.get("inactive_members") or association.get("inactiveMembers") or 0
    else:
        active = getattr(association, "active_members", 0) or 0
        inactive = getattr(association, "inactive_members", 0) or 0
    return int(active) + int(inactive)


def _sample_ratio(rng: RandomSource, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return low + rng.random() * (high - low)


def derive_generated_report(
    association: Any,
    period_label: str,
    *,
    rng: Optional[RandomSource] = None,
    base_revenue_per_member: Optional[float] = None,
) -> DerivedFields:
    """Synthesize sales, costs and expenses for ``association`` and derive the rest.

    ``period_label`` is accepted so callers describe which period the figures
    stand in for; the synthesis itself does not depend on it.
    """

    rng = rng or random.Random()
    per_member = revenue_per_member() if base_revenue_per_member is None else base_revenue_per_member
    base_revenue = _member_count(association) * per_member

    variation = rng.random() * REVENUE_VARIATION * 2 - REVENUE_VARIATION
    sales = math.floor(base_revenue * (1 + variation))
    costs = math.floor(sales * _sample_ratio(rng, COST_RATIO_RANGE))
    expenses = math.floor(sales * _sample_ratio(rng, EXPENSE_RATIO_RANGE))
    return derive_report(sales, costs, expenses)
