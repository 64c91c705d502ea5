"""Budget-vs-actual tracking per expense category."""

import math
from dataclasses import dataclass

from farmmetrics.data.records import FinancialEntry
from farmmetrics.finance.summary import entries_for_year


@dataclass(frozen=True)
class BudgetStatus:
    """Spending against one budget category."""

    category: str
    allocated: float
    spent: float

    @property
    def remaining(self) -> float:
        return max(0.0, self.allocated - self.spent)

    @property
    def progress(self) -> float:
        """Percent of the allocation spent, capped at 100 (0 if nothing allocated)."""
        if self.allocated <= 0:
            return 0.0
        return min(100.0, self.spent / self.allocated * 100)

    @property
    def over_budget(self) -> bool:
        return self.allocated > 0 and self.spent > self.allocated


def category_spent(entries: list[FinancialEntry], category: str, year: int | None) -> float:
    """Expenses of one type (exact match) in a year."""
    return math.fsum(
        e.amount for e in entries_for_year(entries, year) if e.category == "expense" and e.type == category
    )


def budget_progress(
    entries: list[FinancialEntry],
    budgets: dict[str, float],
    category: str,
    year: int | None,
) -> float:
    """Percent of a category's budget spent in a year (0-100)."""
    return BudgetStatus(
        category=category,
        allocated=budgets.get(category, 0.0),
        spent=category_spent(entries, category, year),
    ).progress


def budget_statuses(
    entries: list[FinancialEntry],
    budgets: dict[str, float],
    year: int | None,
) -> list[BudgetStatus]:
    """Status of every budget category, in the budget's order."""
    return [
        BudgetStatus(category=category, allocated=allocated, spent=category_spent(entries, category, year))
        for category, allocated in budgets.items()
    ]


def total_budget(budgets: dict[str, float]) -> float:
    return math.fsum(budgets.values())


def total_spent(entries: list[FinancialEntry], year: int | None) -> float:
    """All expenses in a year, budgeted category or not."""
    return math.fsum(e.amount for e in entries_for_year(entries, year) if e.category == "expense")
