"""Financial rollups, budgets, goals and planning helpers."""

from farmmetrics.finance.budget import (
    BudgetStatus,
    budget_progress,
    budget_statuses,
    category_spent,
    total_budget,
    total_spent,
)
from farmmetrics.finance.goals import GoalKind, classify_goal, goal_progress, update_goal_progress
from farmmetrics.finance.planning import (
    InvestmentReturn,
    ProjectionTotals,
    investment_roi,
    projection_totals,
)
from farmmetrics.finance.summary import (
    MONTH_NAMES,
    CategoryTotal,
    EntityFinancials,
    FinancialSummary,
    MonthlyFinancials,
    calculate_roi,
    entries_for_year,
    summarize_financials,
)

__all__ = [
    # summary
    "summarize_financials",
    "entries_for_year",
    "calculate_roi",
    "FinancialSummary",
    "MonthlyFinancials",
    "EntityFinancials",
    "CategoryTotal",
    "MONTH_NAMES",
    # budget
    "BudgetStatus",
    "budget_progress",
    "budget_statuses",
    "category_spent",
    "total_budget",
    "total_spent",
    # goals
    "GoalKind",
    "classify_goal",
    "goal_progress",
    "update_goal_progress",
    # planning
    "InvestmentReturn",
    "ProjectionTotals",
    "investment_roi",
    "projection_totals",
]
