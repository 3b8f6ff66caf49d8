"""
Composite partnership ROI assessment.

Combines the financial, strategic and risk views into a single 0-100 score:

    overall = financial_component            # 0-40, step function of ROI %
              + strategic.overall * 0.4      # 0-40
              + (100 - risk.overall) * 0.2   # 0-20, lower risk scores higher

Financial component: ROI > 200 % -> 40, > 100 % -> 30, > 50 % -> 20,
> 0 % -> 10, otherwise (or when ROI is unavailable) 0.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Union

from ..common import parse_number, round_half_up
from .financial import calculate_financial_roi
from .risk import calculate_risk_assessment
from .schema import PartnershipCase, PartnershipAssessment, FinancialROI
from .strategic import calculate_strategic_value

logger = logging.getLogger(__name__)

CaseLike = Union[PartnershipCase, Dict[str, Any]]

FINANCIAL_STEPS = ((200, 40), (100, 30), (50, 20), (0, 10))

RECOMMENDATION_BANDS = (
    (80, "Strongly Recommended"),
    (60, "Recommended"),
    (40, "Consider with Modifications"),
)
NOT_RECOMMENDED = "Not Recommended"


@dataclass
class ROIConfig:
    """
    Configuration for ROI assessment.

    Attributes:
        default_timeframe_months: Horizon used when a case gives none
    """
    default_timeframe_months: int = 12

    def validate(self) -> None:
        """Validate configuration values."""
        if self.default_timeframe_months <= 0:
            raise ValueError(
                f"default_timeframe_months must be positive, got {self.default_timeframe_months}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ROIConfig":
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ROIConfig":
        """Create from main config dictionary."""
        roi_config = config.get("roi", {})
        return cls(default_timeframe_months=roi_config.get("default_timeframe_months", 12))


def financial_component(financial_roi: Optional[FinancialROI]) -> int:
    """Map ROI percentage onto the 0-40 financial component."""
    if financial_roi is None:
        return 0
    for threshold, points in FINANCIAL_STEPS:
        if financial_roi.roi_percentage > threshold:
            return points
    return 0


def recommendation_for(overall_score: int) -> str:
    """Band the composite score into a recommendation."""
    for threshold, label in RECOMMENDATION_BANDS:
        if overall_score >= threshold:
            return label
    return NOT_RECOMMENDED


def _coerce_case(case: Optional[CaseLike]) -> Optional[PartnershipCase]:
    if case is None or isinstance(case, PartnershipCase):
        return case
    return PartnershipCase.from_dict(case)


class ROIEngine:
    """
    Partnership ROI engine.

    Attributes:
        config: ROIConfig instance
    """

    def __init__(self, config: Optional[ROIConfig] = None):
        self.config = config or ROIConfig()
        self.config.validate()

    def calculate_financial_roi(self, case: Optional[CaseLike]) -> Optional[FinancialROI]:
        """Financial ROI for a case, using the default timeframe when unset."""
        case = _coerce_case(case)
        if case is None:
            logger.error("Invalid partnership data for ROI calculation")
            return None
        # An unset or zero horizon falls back to the default; negatives are rejected downstream
        months = parse_number(case.timeframe_months) or self.config.default_timeframe_months
        return calculate_financial_roi(case.investment, case.returns, months)

    def calculate_partnership_roi(self, case: Optional[CaseLike]) -> Optional[PartnershipAssessment]:
        """
        Compute the composite assessment for a partnership case.

        Args:
            case: PartnershipCase or equivalent dictionary

        Returns:
            PartnershipAssessment, or None if the case is missing
        """
        case = _coerce_case(case)
        if case is None:
            logger.error("Invalid partnership data for ROI calculation")
            return None

        financial_roi = self.calculate_financial_roi(case)
        if financial_roi is None:
            logger.warning("Financial ROI unavailable; financial component scored as 0")

        strategic_value = calculate_strategic_value(case.strategic_factors)
        risk_assessment = calculate_risk_assessment(case.risk_factors)

        score = (
            financial_component(financial_roi)
            + strategic_value.overall_score * 0.4
            + (100 - risk_assessment.overall_risk) * 0.2
        )
        overall_score = round_half_up(score)

        return PartnershipAssessment(
            overall_score=overall_score,
            recommendation=recommendation_for(overall_score),
            financial_roi=financial_roi,
            strategic_value=strategic_value,
            risk_assessment=risk_assessment,
        )


def create_engine_from_config(config: Dict[str, Any]) -> ROIEngine:
    """Factory function to create ROIEngine from config."""
    return ROIEngine(ROIConfig.from_config(config))
