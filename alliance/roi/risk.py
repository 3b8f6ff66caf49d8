"""
Risk assessment scoring.

Four dimensions (higher is riskier), each with a 100-point budget over
named 0-5 inputs:

- financial: investment size x10, revenue uncertainty x6, cost overrun x4
- reputation: partner reputation x12, brand alignment risk x8
- operational: integration complexity x10, resource conflict x6, timeline x4
- strategic: goal misalignment x10, dependency x8, competitive disclosure x2

Overall risk is the rounded mean; every weight is positive, so raising any
input never lowers the overall risk.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from ..common import round_half_up
from .dimensions import FactorRule, score_dimensions
from .schema import RiskAssessment

logger = logging.getLogger(__name__)

RISK_DIMENSIONS = {
    "financial": [
        FactorRule("investmentSize", 10),
        FactorRule("revenueUncertainty", 6),
        FactorRule("costOverrunRisk", 4),
    ],
    "reputation": [
        FactorRule("partnerReputationRisk", 12),
        FactorRule("brandAlignmentRisk", 8),
    ],
    "operational": [
        FactorRule("integrationComplexity", 10),
        FactorRule("resourceConflictRisk", 6),
        FactorRule("timelineRisk", 4),
    ],
    "strategic": [
        FactorRule("goalMisalignmentRisk", 10),
        FactorRule("dependencyRisk", 8),
        FactorRule("competitiveDisclosureRisk", 2),
    ],
}

SEVERE_THRESHOLD = 60
MODERATE_THRESHOLD = 30

MITIGATIONS = {
    "financial": {
        "severe": [
            "Implement phased investment approach with clear go/no-go decision points.",
            "Establish detailed financial monitoring with regular review intervals.",
        ],
        "moderate": [
            "Set clear financial metrics and performance indicators.",
            "Include contingency funding in the partnership budget.",
        ],
    },
    "reputation": {
        "severe": [
            "Conduct thorough reputation due diligence before finalizing the partnership.",
            "Create a comprehensive crisis communication plan.",
        ],
        "moderate": [
            "Define brand usage guidelines for the partnership.",
            "Implement a media monitoring system for early risk detection.",
        ],
    },
    "operational": {
        "severe": [
            "Appoint dedicated integration managers from both organizations.",
            "Develop detailed implementation roadmap with clear dependencies and critical path.",
        ],
        "moderate": [
            "Establish a joint steering committee for operational oversight.",
            "Create clear escalation paths for operational issues.",
        ],
    },
    "strategic": {
        "severe": [
            "Define a detailed exit strategy before partnership launch.",
            "Implement formal quarterly strategic alignment reviews.",
        ],
        "moderate": [
            "Document shared strategic objectives with measurable outcomes.",
            "Define clear intellectual property rights and usage agreements.",
        ],
    },
}


def risk_level(overall_risk: int) -> str:
    """Band overall risk: <25 Low, <50 Moderate, <75 High, else Critical."""
    if overall_risk < 25:
        return "Low"
    if overall_risk < 50:
        return "Moderate"
    if overall_risk < 75:
        return "High"
    return "Critical"


def mitigation_recommendations(risk_scores: Dict[str, int]) -> List[str]:
    """Select static mitigation text per dimension by severity."""
    recommendations = []
    for dimension, score in risk_scores.items():
        if score >= SEVERE_THRESHOLD:
            recommendations.extend(MITIGATIONS[dimension]["severe"])
        elif score >= MODERATE_THRESHOLD:
            recommendations.extend(MITIGATIONS[dimension]["moderate"])
    return recommendations


def calculate_risk_assessment(factors: Optional[Mapping[str, Any]]) -> Optional[RiskAssessment]:
    """
    Score the four risk dimensions and derive level and mitigations.

    Args:
        factors: Named risk ratings

    Returns:
        RiskAssessment, or None if factors are missing
    """
    if factors is None:
        logger.error("Invalid partnership data for risk assessment")
        return None

    scores = score_dimensions(factors, RISK_DIMENSIONS)
    overall = round_half_up(sum(scores.values()) / len(scores))
    return RiskAssessment(
        overall_risk=overall,
        risk_level=risk_level(overall),
        risk_scores=scores,
        recommendations=mitigation_recommendations(scores),
    )
