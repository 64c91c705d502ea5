"""Investment return calculator and projection totals."""

import math
from dataclasses import dataclass

from farmmetrics.data.records import FinancialProjection


@dataclass(frozen=True)
class InvestmentReturn:
    """Result of an investment ROI calculation."""

    profit: float
    roi: float | None  # %, None for a zero investment
    annualized_roi: float | None  # %, None for a zero/negative timeframe


def investment_roi(
    initial_investment: float,
    estimated_return: float,
    timeframe_months: float = 12,
) -> InvestmentReturn:
    """
    Calculate the return on a planned investment.

    Args:
        initial_investment: Amount invested
        estimated_return: Amount expected back
        timeframe_months: Months until the return is realized

    Returns:
        InvestmentReturn with profit, ROI and annualized ROI

    Example:
        >>> investment_roi(10000, 12000, 12)
        InvestmentReturn(profit=2000, roi=20.0, annualized_roi=20.0)
    """
    profit = estimated_return - initial_investment
    if initial_investment == 0:
        return InvestmentReturn(profit=profit, roi=None, annualized_roi=None)

    roi = profit / initial_investment * 100
    annualized = roi * (12 / timeframe_months) if timeframe_months > 0 else None
    return InvestmentReturn(profit=profit, roi=roi, annualized_roi=annualized)


@dataclass(frozen=True)
class ProjectionTotals:
    income: float
    expenses: float

    @property
    def profit(self) -> float:
        return self.income - self.expenses


def projection_totals(projection: FinancialProjection) -> ProjectionTotals:
    """Yearly totals of a projection scenario."""
    return ProjectionTotals(
        income=math.fsum(m.income for m in projection.monthly_data),
        expenses=math.fsum(m.expenses for m in projection.monthly_data),
    )
