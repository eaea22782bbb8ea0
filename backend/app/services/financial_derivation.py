"""Derivation of a financial report's profit split from its raw inputs.

Everything here is pure arithmetic: no rounding, no bounds checks and no I/O.
Non-finite inputs propagate to non-finite outputs so upstream data problems
stay visible instead of being silently zeroed.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Union

PROFIT_SHARE_RATE = 0.8
ASSOCIATION_SHARE_RATE = 0.2
MONITORING_FEE_RATE = 0.02

DERIVED_FIELDS = ("profit", "share80", "ass_share20", "monitoring2", "balance")

Number = Union[int, float, Decimal]


@dataclass(frozen=True)
class DerivedFields:
    """Inputs of a report together with every value computed from them."""

    sales: float
    costs: float
    expenses: float
    profit: float
    share80: float
    ass_share20: float
    monitoring2: float
    balance: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def _as_number(value: Number | None) -> float:
    if value is None:
        return 0.0
    return float(value)


def derive_report(
    sales: Number | None = None,
    costs: Number | None = None,
    expenses: Number | None = None,
) -> DerivedFields:
    """Compute profit, the 80/20 split, the 2% monitoring fee and the balance.

    Missing inputs count as zero. Negative inputs are accepted and simply
    yield negative profit or balance.
    """

    sales_value = _as_number(sales)
    costs_value = _as_number(costs)
    expenses_value = _as_number(expenses)

    profit = sales_value - costs_value
    monitoring2 = profit * MONITORING_FEE_RATE
    return DerivedFields(
        sales=sales_value,
        costs=costs_value,
        expenses=expenses_value,
        profit=profit,
        share80=profit * PROFIT_SHARE_RATE,
        ass_share20=profit * ASSOCIATION_SHARE_RATE,
        monitoring2=monitoring2,
        balance=profit - expenses_value - monitoring2,
    )
