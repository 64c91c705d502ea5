"""
Financial rollups over income/expense transactions.

All groupings are plain totals. Sums use math.fsum, so the results do not
depend on the order the entries arrive in.
"""

import math
from collections import defaultdict
from dataclasses import dataclass, field

from farmmetrics.data.records import Entity, FinancialEntry

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


@dataclass(frozen=True)
class MonthlyFinancials:
    """Totals for one calendar month (0 = January)."""

    month: int
    income: float
    expenses: float

    @property
    def profit(self) -> float:
        return self.income - self.expenses

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month]


@dataclass(frozen=True)
class EntityFinancials:
    """Totals for one entity."""

    entity_id: int | str | None
    entity_name: str
    income: float
    expenses: float

    @property
    def profit(self) -> float:
        return self.income - self.expenses


@dataclass(frozen=True)
class CategoryTotal:
    """Total for one transaction type within income or expenses."""

    name: str
    value: float


@dataclass(frozen=True)
class FinancialSummary:
    """Income/expense rollup for a year (or all time)."""

    year: int | None
    total_income: float
    total_expenses: float
    roi: float | None  # None when there are no expenses
    by_entity: list[EntityFinancials] = field(default_factory=list)
    by_month: list[MonthlyFinancials] = field(default_factory=list)
    income_by_type: list[CategoryTotal] = field(default_factory=list)
    expense_by_type: list[CategoryTotal] = field(default_factory=list)

    @property
    def net_profit(self) -> float:
        return self.total_income - self.total_expenses


def entries_for_year(entries: list[FinancialEntry], year: int | None) -> list[FinancialEntry]:
    """Entries dated in `year`; every entry when year is None.

    Undated entries never match a year.
    """
    if year is None:
        return list(entries)
    return [e for e in entries if e.date is not None and e.date.year == year]


def _total(entries: list[FinancialEntry], category: str) -> float:
    return math.fsum(e.amount for e in entries if e.category == category)


def calculate_roi(total_income: float, total_expenses: float) -> float | None:
    """Return on expenses (%), None when nothing was spent."""
    if total_expenses == 0:
        return None
    return (total_income - total_expenses) / total_expenses * 100


def _by_type(entries: list[FinancialEntry], category: str) -> list[CategoryTotal]:
    amounts: dict[str, list[float]] = defaultdict(list)
    for entry in entries:
        if entry.category == category:
            amounts[entry.type].append(entry.amount)
    return [CategoryTotal(name=name, value=math.fsum(values)) for name, values in sorted(amounts.items())]


def _by_month(entries: list[FinancialEntry]) -> list[MonthlyFinancials]:
    buckets: dict[int, list[FinancialEntry]] = defaultdict(list)
    for entry in entries:
        if entry.date is not None:
            buckets[entry.date.month - 1].append(entry)
    return [
        MonthlyFinancials(
            month=month,
            income=_total(buckets[month], "income"),
            expenses=_total(buckets[month], "expense"),
        )
        for month in range(12)
    ]


def _by_entity(
    entries: list[FinancialEntry],
    entities: list[Entity] | None,
) -> list[EntityFinancials]:
    buckets: dict[int | str | None, list[FinancialEntry]] = defaultdict(list)
    for entry in entries:
        buckets[entry.entity_id].append(entry)

    if entities is not None:
        return [
            EntityFinancials(
                entity_id=entity.id,
                entity_name=entity.name,
                income=_total(buckets.get(entity.id, []), "income"),
                expenses=_total(buckets.get(entity.id, []), "expense"),
            )
            for entity in entities
        ]

    return [
        EntityFinancials(
            entity_id=entity_id,
            entity_name=str(entity_id) if entity_id is not None else "",
            income=_total(bucket, "income"),
            expenses=_total(bucket, "expense"),
        )
        for entity_id, bucket in sorted(buckets.items(), key=lambda item: str(item[0]))
    ]


def summarize_financials(
    entries: list[FinancialEntry],
    year: int | None = None,
    entities: list[Entity] | None = None,
) -> FinancialSummary:
    """
    Roll up transactions for a year.

    Args:
        entries: Income and expense entries
        year: Calendar year to summarize (all entries when None)
        entities: Entities to report on, in display order. Entities without
            entries get zero totals. When None, entity ids found in the
            entries are reported, sorted.

    Returns:
        FinancialSummary with totals, ROI and the monthly, per-entity and
        per-type breakdowns
    """
    selected = entries_for_year(entries, year)

    total_income = _total(selected, "income")
    total_expenses = _total(selected, "expense")

    return FinancialSummary(
        year=year,
        total_income=total_income,
        total_expenses=total_expenses,
        roi=calculate_roi(total_income, total_expenses),
        by_entity=_by_entity(selected, entities),
        by_month=_by_month(selected),
        income_by_type=_by_type(selected, "income"),
        expense_by_type=_by_type(selected, "expense"),
    )
