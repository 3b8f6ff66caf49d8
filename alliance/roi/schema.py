"""
Data structures for partnership ROI assessment.

A partnership case bundles the financial inputs (investment and returns over
a timeframe) with named 0-5 ratings for strategic value and risk. All numeric
inputs are optional and may arrive as form strings; they are parsed with
``parse_number`` at scoring time, so a missing or malformed field contributes 0.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List

STRATEGIC_FACTOR_NAMES = (
    "audienceReach",
    "audienceOverlap",
    "audienceEngagement",
    "brandAlignment",
    "reputationEnhancement",
    "brandVisibility",
    "innovationPotential",
    "technologyAccess",
    "ipCreation",
    "newMarketAccess",
    "channelExpansion",
    "competitiveAdvantage",
    "strategicAlignment",
    "longTermPotential",
    "ecosystemIntegration",
)

RISK_FACTOR_NAMES = (
    "investmentSize",
    "revenueUncertainty",
    "costOverrunRisk",
    "partnerReputationRisk",
    "brandAlignmentRisk",
    "integrationComplexity",
    "resourceConflictRisk",
    "timelineRisk",
    "goalMisalignmentRisk",
    "dependencyRisk",
    "competitiveDisclosureRisk",
)


@dataclass
class Investment:
    """Partnership investment inputs (one-off amounts; staff cost = hours x rate)."""
    direct_costs: Any = None
    staff_hours: Any = None
    hourly_rate: Any = None
    resource_allocation: Any = None
    marketing_costs: Any = None
    technology_costs: Any = None
    other_costs: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "directCosts": self.direct_costs,
            "staffHours": self.staff_hours,
            "hourlyRate": self.hourly_rate,
            "resourceAllocation": self.resource_allocation,
            "marketingCosts": self.marketing_costs,
            "technologyCosts": self.technology_costs,
            "otherCosts": self.other_costs,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Investment":
        return cls(
            direct_costs=data.get("directCosts"),
            staff_hours=data.get("staffHours"),
            hourly_rate=data.get("hourlyRate"),
            resource_allocation=data.get("resourceAllocation"),
            marketing_costs=data.get("marketingCosts"),
            technology_costs=data.get("technologyCosts"),
            other_costs=data.get("otherCosts"),
        )


@dataclass
class Returns:
    """
    Expected partnership returns.

    directRevenue and costSavings are monthly amounts and scale with the
    timeframe; the other fields are totals.
    """
    direct_revenue: Any = None
    cost_savings: Any = None
    new_customers: Any = None
    customer_ltv: Any = None
    market_share_increase: Any = None
    market_share_value: Any = None
    other_returns: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "directRevenue": self.direct_revenue,
            "costSavings": self.cost_savings,
            "newCustomers": self.new_customers,
            "customerLTV": self.customer_ltv,
            "marketShareIncrease": self.market_share_increase,
            "marketShareValue": self.market_share_value,
            "otherReturns": self.other_returns,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Returns":
        return cls(
            direct_revenue=data.get("directRevenue"),
            cost_savings=data.get("costSavings"),
            new_customers=data.get("newCustomers"),
            customer_ltv=data.get("customerLTV"),
            market_share_increase=data.get("marketShareIncrease"),
            market_share_value=data.get("marketShareValue"),
            other_returns=data.get("otherReturns"),
        )


@dataclass
class PartnershipCase:
    """
    Complete input for a partnership ROI assessment.

    Attributes:
        investment: Investment inputs (None if not provided)
        returns: Expected returns (None if not provided)
        timeframe_months: Assessment horizon; None means the configured default
        strategic_factors: Named strategic ratings (see STRATEGIC_FACTOR_NAMES)
        risk_factors: Named risk ratings (see RISK_FACTOR_NAMES)
    """
    investment: Optional[Investment] = None
    returns: Optional[Returns] = None
    timeframe_months: Any = None
    strategic_factors: Dict[str, Any] = field(default_factory=dict)
    risk_factors: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Accept nested dictionaries for investment and returns."""
        if isinstance(self.investment, dict):
            self.investment = Investment.from_dict(self.investment)
        if isinstance(self.returns, dict):
            self.returns = Returns.from_dict(self.returns)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "investment": self.investment.to_dict() if self.investment else None,
            "returns": self.returns.to_dict() if self.returns else None,
            "timeframeMonths": self.timeframe_months,
            "strategicFactors": dict(self.strategic_factors),
            "riskFactors": dict(self.risk_factors),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PartnershipCase":
        """
        Create from a dictionary.

        Factors may be nested under ``strategicFactors``/``riskFactors`` or
        flattened on the case itself, as the assessment form submits them.
        """
        strategic = dict(data.get("strategicFactors") or {})
        risk = dict(data.get("riskFactors") or {})
        for name in STRATEGIC_FACTOR_NAMES:
            if name in data and name not in strategic:
                strategic[name] = data[name]
        for name in RISK_FACTOR_NAMES:
            if name in data and name not in risk:
                risk[name] = data[name]

        return cls(
            investment=data.get("investment"),
            returns=data.get("returns"),
            timeframe_months=data.get("timeframeMonths"),
            strategic_factors=strategic,
            risk_factors=risk,
        )


@dataclass
class FinancialROI:
    """Financial ROI metrics over the assessment timeframe."""
    total_investment: float
    total_returns: float
    net_return: float
    roi_percentage: float
    payback_months: float  # inf when there are no returns
    timeframe_months: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalInvestment": self.total_investment,
            "totalReturns": self.total_returns,
            "netReturn": self.net_return,
            "roiPercentage": self.roi_percentage,
            "paybackMonths": self.payback_months,
            "timeframeMonths": self.timeframe_months,
        }


@dataclass
class StrategicValue:
    """Strategic value: five dimension scores and their rounded mean."""
    overall_score: int
    dimension_scores: Dict[str, int]

    def to_dict(self) -> Dict[str, Any]:
        return {"overallScore": self.overall_score, "dimensionScores": dict(self.dimension_scores)}


@dataclass
class RiskAssessment:
    """Risk assessment: four dimension scores (higher is riskier), level and mitigations."""
    overall_risk: int
    risk_level: str
    risk_scores: Dict[str, int]
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallRisk": self.overall_risk,
            "riskLevel": self.risk_level,
            "riskScores": dict(self.risk_scores),
            "recommendations": list(self.recommendations),
        }


@dataclass
class PartnershipAssessment:
    """Composite partnership assessment combining financial, strategic and risk views."""
    overall_score: int
    recommendation: str
    financial_roi: Optional[FinancialROI]
    strategic_value: StrategicValue
    risk_assessment: RiskAssessment

    def to_dict(self) -> Dict[str, Any]:
        return {
            "overallScore": self.overall_score,
            "recommendation": self.recommendation,
            "financialROI": self.financial_roi.to_dict() if self.financial_roi else None,
            "strategicValue": self.strategic_value.to_dict(),
            "riskAssessment": self.risk_assessment.to_dict(),
        }
