"""
Financial ROI for a partnership.

    totalInvestment = directCosts + staffHours * hourlyRate + resourceAllocation
                      + marketingCosts + technologyCosts + otherCosts
    totalReturns    = (directRevenue + costSavings) * months
                      + newCustomers * customerLTV
                      + marketShareIncrease * marketShareValue + otherReturns
    roiPercentage   = (totalReturns - totalInvestment) / totalInvestment * 100
    paybackMonths   = totalInvestment / (totalReturns / months)
"""

import logging
import math
from typing import Any, Dict, Optional, Union

from ..common import parse_number
from .schema import Investment, Returns, FinancialROI

logger = logging.getLogger(__name__)


def calculate_total_investment(investment: Investment) -> float:
    """Sum all investment components; staff cost is hours times rate."""
    return (
        parse_number(investment.direct_costs)
        + parse_number(investment.staff_hours) * parse_number(investment.hourly_rate)
        + parse_number(investment.resource_allocation)
        + parse_number(investment.marketing_costs)
        + parse_number(investment.technology_costs)
        + parse_number(investment.other_costs)
    )


def calculate_total_returns(returns: Returns, timeframe_months: float) -> float:
    """Sum all returns over the timeframe; revenue and savings are monthly."""
    return (
        parse_number(returns.direct_revenue) * timeframe_months
        + parse_number(returns.cost_savings) * timeframe_months
        + parse_number(returns.new_customers) * parse_number(returns.customer_ltv)
        + parse_number(returns.market_share_increase) * parse_number(returns.market_share_value)
        + parse_number(returns.other_returns)
    )


def calculate_financial_roi(
    investment: Optional[Union[Investment, Dict[str, Any]]],
    returns: Optional[Union[Returns, Dict[str, Any]]],
    timeframe_months: Any = 12
) -> Optional[FinancialROI]:
    """
    Calculate financial ROI metrics.

    Args:
        investment: Investment inputs
        returns: Expected returns
        timeframe_months: Assessment horizon in months (must be positive)

    Returns:
        FinancialROI, or None if an input is missing or the timeframe is not positive
    """
    months = parse_number(timeframe_months)
    if investment is None or returns is None or months <= 0:
        logger.error("Invalid inputs for ROI calculation")
        return None

    if isinstance(investment, dict):
        investment = Investment.from_dict(investment)
    if isinstance(returns, dict):
        returns = Returns.from_dict(returns)

    total_investment = calculate_total_investment(investment)
    total_returns = calculate_total_returns(returns, months)

    net_return = total_returns - total_investment
    roi_percentage = (net_return / total_investment) * 100 if total_investment > 0 else 0.0
    payback_months = total_investment / (total_returns / months) if total_returns > 0 else math.inf

    return FinancialROI(
        total_investment=total_investment,
        total_returns=total_returns,
        net_return=net_return,
        roi_percentage=roi_percentage,
        payback_months=payback_months,
        timeframe_months=months,
    )
