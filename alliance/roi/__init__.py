"""
ROI module for partnership assessment.

This module computes financial ROI, strategic value and risk for a
partnership case and combines them into a recommendation.
"""

from .schema import (
    Investment,
    Returns,
    PartnershipCase,
    FinancialROI,
    StrategicValue,
    RiskAssessment,
    PartnershipAssessment,
)
from .financial import calculate_financial_roi
from .strategic import calculate_strategic_value
from .risk import calculate_risk_assessment, risk_level
from .engine import ROIEngine, ROIConfig, create_engine_from_config

__all__ = [
    "Investment",
    "Returns",
    "PartnershipCase",
    "FinancialROI",
    "StrategicValue",
    "RiskAssessment",
    "PartnershipAssessment",
    "calculate_financial_roi",
    "calculate_strategic_value",
    "calculate_risk_assessment",
    "risk_level",
    "ROIEngine",
    "ROIConfig",
    "create_engine_from_config",
]
