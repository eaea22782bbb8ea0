"""Summary statistics over financial records, reports and livestock observations.

All functions accept either ORM instances or plain mappings and degrade to
safe defaults when individual documents lack a field, so one malformed
document never prevents the rest of a batch from being summarised.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

LOGGER = logging.getLogger(__name__)

UNKNOWN_RECORD_TYPE = "unknown"
SUMMARY_RECORD_TYPES = {"income": "total_income", "expense": "total_expense", "savings": "total_savings"}
TOP_PERFORMERS_LIMIT = 3
RECENT_REPORTS_LIMIT = 5
TREND_QUARTERS = 4

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_QUARTER_LABEL = re.compile(r"Q([1-4])-(\d{4})")

RATING_WEIGHTS = {
    "financial_health": 0.3,
    "membership_engagement": 0.3,
    "operational_efficiency": 0.2,
    "compliance_score": 0.2,
}
RATING_BANDS = (
    (4.5, "Outstanding"),
    (4.0, "Very Satisfactory"),
    (3.5, "Satisfactory"),
    (3.0, "Fair"),
)
NET_PROFIT_CEILING = 50000.0
DEFAULT_SUSTAINABILITY_SCORE = 70.0
DEFAULT_COMPLIANCE_RATE = 80.0


def _field(document: Any, *names: str, default: Any = None) -> Any:
    for name in names:
        if isinstance(document, Mapping):
            if name in document and document[name] is not None:
                return document[name]
        else:
            value = getattr(document, name, None)
            if value is not None:
                return value
    return default


def _number(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        LOGGER.warning("Treating non-numeric value %r as zero", value)
        return 0.0


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, enum.Enum):
        return str(value.value)
    return str(value)


def _to_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError:
        LOGGER.warning("Ignoring unparseable date %r", value)
        return None


def _as_utc(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    parsed = _to_date(value)
    if parsed is None:
        return None
    return datetime(parsed.year, parsed.month, parsed.day, tzinfo=timezone.utc)


def _is_archived(document: Any) -> bool:
    return bool(_field(document, "archived", default=False) or _field(document, "is_archived", default=False))


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


# --------------------------------------------------------------------------
# Financial records
# --------------------------------------------------------------------------


@dataclass(frozen=True)
class RecordFilter:
    """Optional narrowing of a record set by owner and inclusive date range."""

    project_id: Optional[str] = None
    association_id: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    def matches(self, record: Any) -> bool:
        if self.project_id is not None:
            if str(_field(record, "project_id", "projectId", default="")) != str(self.project_id):
                return False
        if self.association_id is not None:
            if str(_field(record, "association_id", "associationId", default="")) != str(self.association_id):
                return False
        if self.date_from is not None or self.date_to is not None:
            record_date = _to_date(_field(record, "record_date", "recordDate"))
            if record_date is None:
                return False
            if self.date_from is not None and record_date < self.date_from:
                return False
            if self.date_to is not None and record_date > self.date_to:
                return False
        return True


def summarize_records(
    records: Iterable[Any],
    record_filter: Optional[RecordFilter] = None,
) -> Dict[str, Any]:
    """Totals, average, extremes and per-type distribution of record amounts.

    Archived records are skipped. Non-finite amounts are kept in the totals
    and counted in ``non_finite_count`` rather than coerced to zero; a NaN
    amount makes both extremes NaN whatever its position.
    """

    record_filter = record_filter or RecordFilter()
    summary = {
        "total_income": 0.0,
        "total_expense": 0.0,
        "total_savings": 0.0,
        "total_amount": 0.0,
        "avg_amount": 0.0,
        "min_amount": 0.0,
        "max_amount": 0.0,
    }
    type_totals: Dict[str, float] = {}
    amounts: List[float] = []
    non_finite = 0

    for record in records:
        if _is_archived(record) or not record_filter.matches(record):
            continue
        amount = _number(_field(record, "amount"))
        record_type = _text(_field(record, "record_type", "recordType")) or UNKNOWN_RECORD_TYPE
        if not math.isfinite(amount):
            non_finite += 1
        amounts.append(amount)
        summary["total_amount"] += amount
        bucket = SUMMARY_RECORD_TYPES.get(record_type)
        if bucket:
            summary[bucket] += amount
        type_totals[record_type] = type_totals.get(record_type, 0.0) + amount

    if amounts:
        summary["avg_amount"] = summary["total_amount"] / len(amounts)
        if any(math.isnan(amount) for amount in amounts):
            summary["min_amount"] = summary["max_amount"] = math.nan
        else:
            summary["min_amount"] = min(amounts)
            summary["max_amount"] = max(amounts)
    if non_finite:
        LOGGER.warning("Summarised %d financial records with non-finite amounts", non_finite)

    return {
        "summary": summary,
        "distribution": [
            {"record_type": record_type, "total": total} for record_type, total in type_totals.items()
        ],
        "record_count": len(amounts),
        "non_finite_count": non_finite,
    }


# --------------------------------------------------------------------------
# Financial reports
# --------------------------------------------------------------------------


def top_performing_associations(
    reports: Iterable[Any],
    *,
    names: Optional[Mapping[str, str]] = None,
    limit: int = TOP_PERFORMERS_LIMIT,
) -> List[Dict[str, Any]]:
    """Rank associations by summed report profit, keeping first-seen order on ties."""

    groups: Dict[str, Dict[str, Any]] = {}
    for report in reports:
        association_id = str(_field(report, "association_id", "associationId", default=""))
        group = groups.get(association_id)
        if group is None:
            name = (names or {}).get(association_id) or _field(
                report, "association_name", "associationName", default=""
            )
            group = {"association_id": association_id, "name": name, "profit": 0.0, "balance": 0.0}
            groups[association_id] = group
        group["profit"] += _number(_field(report, "profit"))
        group["balance"] += _number(_field(report, "balance"))

    ranked = sorted(groups.values(), key=lambda item: item["profit"], reverse=True)
    return ranked[:limit]


def _quarter_window(now: datetime, quarters_back: int) -> tuple[int, int]:
    index = now.year * 4 + (now.month - 1) // 3 - quarters_back
    return index // 4, index % 4 + 1


def _report_in_quarter(report: Any, year: int, quarter: int) -> bool:
    labelled = {
        (int(match_quarter), int(match_year))
        for match_quarter, match_year in _QUARTER_LABEL.findall(str(_field(report, "period", default="")))
    }
    if labelled:
        return (quarter, year) in labelled
    report_date = _to_date(_field(report, "report_date", "reportDate"))
    if report_date is None:
        return False
    return report_date.year == year and (report_date.month - 1) // 3 + 1 == quarter


def performance_trends(
    reports: Sequence[Any],
    *,
    now: Optional[datetime] = None,
    quarters: int = TREND_QUARTERS,
) -> List[Dict[str, Any]]:
    """Sales, profit and balance for the last ``quarters`` quarters, oldest first.

    A report whose period label names a quarter (``Qn-YYYY``) is bucketed by
    that label only; unlabelled reports fall back to their report date. Each
    report therefore lands in at most one quarter.
    """

    now = now or datetime.now(timezone.utc)
    trends = []
    for quarters_back in range(quarters - 1, -1, -1):
        year, quarter = _quarter_window(now, quarters_back)
        matching = [report for report in reports if _report_in_quarter(report, year, quarter)]
        trends.append(
            {
                "period": f"Q{quarter}-{year}",
                "sales": sum(_number(_field(report, "sales")) for report in matching),
                "profit": sum(_number(_field(report, "profit")) for report in matching),
                "balance": sum(_number(_field(report, "balance")) for report in matching),
            }
        )
    return trends


def _report_sort_key(report: Any) -> datetime:
    return _as_utc(_field(report, "report_date", "reportDate")) or datetime.min.replace(tzinfo=timezone.utc)


def summarize_reports(
    reports: Iterable[Any],
    *,
    now: Optional[datetime] = None,
    association_names: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Financial summary of a set of reports as shown on the dashboard."""

    active = [report for report in reports if not _is_archived(report)]
    total_sales = sum(_number(_field(report, "sales")) for report in active)
    total_profit = sum(_number(_field(report, "profit")) for report in active)
    total_balance = sum(_number(_field(report, "balance")) for report in active)
    association_ids = {str(_field(report, "association_id", "associationId", default="")) for report in active}

    return {
        "total_sales": total_sales,
        "total_profit": total_profit,
        "total_balance": total_balance,
        "total_associations": len(association_ids),
        "total_reports": len(active),
        "average_profit_margin": (total_profit / total_sales * 100) if total_sales else 0.0,
        "top_performing_associations": top_performing_associations(active, names=association_names),
        "recent_reports": sorted(active, key=_report_sort_key, reverse=True)[:RECENT_REPORTS_LIMIT],
        "performance_trends": performance_trends(active, now=now),
    }


def _clamp_rating(value: float) -> float:
    return round(max(1.0, min(5.0, value)), 2)


def descriptive_rating(rating: float) -> str:
    for threshold, label in RATING_BANDS:
        if rating >= threshold:
            return label
    return "Needs Improvement"


def rate_association(association: Any, reports: Sequence[Any]) -> Dict[str, Any]:
    """Score an association from 1 to 5 on finances, membership and compliance."""

    active_members = int(_number(_field(association, "active_members", "activeMembers")))
    total_members = active_members + int(_number(_field(association, "inactive_members", "inactiveMembers")))

    revenue = sum(_number(_field(report, "sales")) for report in reports)
    spending = sum(
        _number(_field(report, "costs")) + _number(_field(report, "expenses")) for report in reports
    )
    net_profit = revenue - spending

    financial_health = 1 + (min(net_profit / NET_PROFIT_CEILING, 1) * 4 if net_profit >= 0 else 0)
    membership_engagement = 1 + (active_members / total_members) * 4 if total_members > 0 else 1
    sustainability = (
        _number(_field(association, "sustainability_score", "sustainabilityScore"))
        or DEFAULT_SUSTAINABILITY_SCORE
    )
    compliance = (
        _number(_field(association, "compliance_rate", "complianceRate")) or DEFAULT_COMPLIANCE_RATE
    )
    operational_efficiency = 1 + sustainability / 100 * 4
    compliance_score = 1 + compliance / 100 * 4

    components = {
        "financial_health": financial_health,
        "membership_engagement": membership_engagement,
        "operational_efficiency": operational_efficiency,
        "compliance_score": compliance_score,
    }
    weighted_average = sum(components[name] * weight for name, weight in RATING_WEIGHTS.items())
    plus_factor = 0.0
    overall = weighted_average + plus_factor

    rating = {name: _clamp_rating(value) for name, value in components.items()}
    rating.update(
        {
            "weighted_average": _clamp_rating(weighted_average),
            "plus_factor": plus_factor,
            "overall_rating": _clamp_rating(overall),
            "descriptive_rating": descriptive_rating(overall),
        }
    )
    return rating


def summarize_group_reports(
    associations: Sequence[Any],
    reports: Sequence[Any],
    *,
    year: int,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Yearly roll-up of reports per association with performance ratings."""

    now = now or datetime.now(timezone.utc)
    year_reports = [
        report
        for report in reports
        if not _is_archived(report)
        and (_to_date(_field(report, "report_date", "reportDate")) or date.min).year == year
    ]
    year_reports.sort(key=_report_sort_key, reverse=True)

    by_association: Dict[str, List[Any]] = {}
    for report in year_reports:
        key = str(_field(report, "association_id", "associationId", default=""))
        by_association.setdefault(key, []).append(report)

    performance: Dict[str, Dict[str, Any]] = {}
    summaries = []
    for association in associations:
        association_id = str(_field(association, "id", "_id", default=""))
        association_reports = by_association.get(association_id, [])
        if association_reports:
            performance[association_id] = rate_association(association, association_reports)
        latest = association_reports[0] if association_reports else None
        active_members = int(_number(_field(association, "active_members", "activeMembers")))
        summaries.append(
            {
                "association_id": association_id,
                "association_name": _field(association, "name", default=""),
                "location": _field(association, "location"),
                "status": _text(_field(association, "status")),
                "total_members": active_members
                + int(_number(_field(association, "inactive_members", "inactiveMembers"))),
                "active_members": active_members,
                "total_revenue": sum(_number(_field(report, "sales")) for report in association_reports),
                "total_expenses": sum(
                    _number(_field(report, "costs")) + _number(_field(report, "expenses"))
                    for report in association_reports
                ),
                "net_profit": sum(_number(_field(report, "profit")) for report in association_reports),
                "sustainability_score": _field(association, "sustainability_score", "sustainabilityScore"),
                "compliance_rate": _field(association, "compliance_rate", "complianceRate"),
                "last_report_date": _field(latest, "report_date", "reportDate") if latest else None,
                "report_period": _field(latest, "period", default="No Reports") if latest else "No Reports",
                "performance_metrics": performance.get(association_id),
            }
        )

    return {
        "total_associations": len(associations),
        "associations_with_reports": len(by_association),
        "total_reports": len(year_reports),
        "total_sales": sum(_number(_field(report, "sales")) for report in year_reports),
        "total_profit": sum(_number(_field(report, "profit")) for report in year_reports),
        "total_balance": sum(_number(_field(report, "balance")) for report in year_reports),
        "total_ass_share": sum(_number(_field(report, "ass_share20", "assShare20")) for report in year_reports),
        "report_year": year,
        "generated_at": now,
        "report_summaries": summaries,
        "performance_metrics": performance,
    }


# --------------------------------------------------------------------------
# Associations
# --------------------------------------------------------------------------


def association_stats(associations: Iterable[Any], *, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Counts over non-archived associations plus last-month growth."""

    now = now or datetime.now(timezone.utc)
    since = now - timedelta(days=30)
    visible = [
        association
        for association in associations
        if _text(_field(association, "status")) != "archived" and not _is_archived(association)
    ]
    recent = [
        association
        for association in visible
        if (_as_utc(_field(association, "created_at", "createdAt")) or since) > since
    ]
    total = len(visible)
    return {
        "total_associations": total,
        "total_members": sum(int(_number(_field(item, "active_members", "activeMembers"))) for item in visible),
        "growth_rate": round(len(recent) / total * 100) if total else 0,
    }


# --------------------------------------------------------------------------
# Livestock performance
# --------------------------------------------------------------------------


def _values(records: Iterable[Any], *names: str) -> List[float]:
    values = []
    for record in records:
        raw = _field(record, *names)
        if raw is None:
            continue
        value = _number(raw)
        if math.isfinite(value):
            values.append(value)
    return values


def _observations_for_year(records: Iterable[Any], year: int) -> List[tuple[date, Any]]:
    observations = []
    for record in records:
        if _is_archived(record):
            continue
        observed_on = _to_date(_field(record, "date"))
        if observed_on is not None and observed_on.year == year:
            observations.append((observed_on, record))
    return observations


def _distinct_pigs(records: Iterable[Any], *, mortality_only: bool = False) -> int:
    pigs = set()
    for record in records:
        if mortality_only and not _field(record, "mortality", default=False):
            continue
        pigs.add(str(_field(record, "pig_id", "pigId", default="")))
    return len(pigs)


def _empty_month(index: int) -> Dict[str, Any]:
    return {
        "month": MONTH_NAMES[index],
        "month_number": index + 1,
        "average_weight": 0,
        "weight_gain": 0,
        "feed_conversion_ratio": 0,
        "mortality_count": 0,
        "total_pigs": 0,
        "health_score": 0,
    }


def compute_monthly_breakdown(records: Iterable[Any], year: int) -> List[Dict[str, Any]]:
    """Twelve per-month entries for ``year``; months without data are all zero."""

    by_month: Dict[int, List[Any]] = {}
    for observed_on, record in _observations_for_year(records, year):
        by_month.setdefault(observed_on.month - 1, []).append(record)

    months = []
    for index in range(12):
        month_records = by_month.get(index)
        if not month_records:
            months.append(_empty_month(index))
            continue
        months.append(
            {
                "month": MONTH_NAMES[index],
                "month_number": index + 1,
                "average_weight": round(_mean(_values(month_records, "weight")), 3),
                "weight_gain": round(_mean(_values(month_records, "weight_gain", "weightGain")), 3),
                "feed_conversion_ratio": round(
                    _mean(_values(month_records, "feed_conversion_ratio", "feedConversionRatio")), 2
                ),
                "mortality_count": _distinct_pigs(month_records, mortality_only=True),
                "total_pigs": _distinct_pigs(month_records),
                "health_score": round(_mean(_values(month_records, "health_score", "healthScore")), 1),
            }
        )
    return months


def compute_performance_metrics(records: Iterable[Any], year: int) -> Dict[str, Any]:
    """Yearly livestock performance with its monthly breakdown."""

    year_records = [record for _, record in _observations_for_year(records, year)]
    total_pigs = _distinct_pigs(year_records)
    dead_pigs = _distinct_pigs(year_records, mortality_only=True)
    return {
        "year": year,
        "total_pigs": total_pigs,
        "average_weight_gain": round(_mean(_values(year_records, "weight_gain", "weightGain")), 3),
        "mortality_rate": round(dead_pigs / total_pigs * 100, 2) if total_pigs else 0,
        "feed_conversion_ratio": round(
            _mean(_values(year_records, "feed_conversion_ratio", "feedConversionRatio")), 2
        ),
        "average_health_score": round(_mean(_values(year_records, "health_score", "healthScore")), 1),
        "monthly_data": compute_monthly_breakdown(year_records, year),
    }
