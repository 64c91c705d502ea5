"""
Financial goal progress.

A goal's kind is read from its title (case-insensitive):
- "revenue" / "income": progress toward an income target
- "cost" / "expense": the target is a spending ceiling; progress is the
  share of it left unspent
- anything else: a savings goal, progress toward a net-profit target

Only goals due in the summarized year are recomputed. Goals due in other
years keep the progress they last had.
"""

from dataclasses import replace
from enum import Enum

from farmmetrics.data.records import FinancialGoal
from farmmetrics.finance.summary import FinancialSummary


class GoalKind(Enum):
    REVENUE = "revenue"
    COST_REDUCTION = "cost_reduction"
    SAVINGS = "savings"


def classify_goal(title: str) -> GoalKind:
    """Goal kind from keywords in its title."""
    text = title.lower()
    if "revenue" in text or "income" in text:
        return GoalKind.REVENUE
    elif "cost" in text or "expense" in text:
        return GoalKind.COST_REDUCTION
    else:
        return GoalKind.SAVINGS


def goal_progress(goal: FinancialGoal, summary: FinancialSummary) -> float:
    """
    Progress (0-100) of a goal against a summary.

    A target of zero or less yields 0.
    """
    target = goal.target_amount
    if target <= 0:
        return 0.0

    kind = classify_goal(goal.title)
    if kind is GoalKind.REVENUE:
        achieved = summary.total_income
    elif kind is GoalKind.COST_REDUCTION:
        achieved = max(0.0, target - summary.total_expenses)
    else:
        achieved = summary.net_profit

    return max(0.0, min(100.0, achieved / target * 100))


def update_goal_progress(
    goals: list[FinancialGoal],
    summary: FinancialSummary,
    year: int,
) -> list[FinancialGoal]:
    """
    Recompute progress for goals due in `year`.

    Returns:
        New goal list; goals due in other years (or undated) are returned
        unchanged. The input goals are not modified.
    """
    updated = []
    for goal in goals:
        if goal.deadline is not None and goal.deadline.year == year:
            updated.append(replace(goal, progress=goal_progress(goal, summary)))
        else:
            updated.append(goal)
    return updated
