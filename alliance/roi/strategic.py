"""
Strategic value scoring.

Five dimensions, each with a 100-point budget split across named inputs
(0-5 ratings unless noted):

- audience: reach (0-30 %, x2, capped at 30), overlap (0-100 %, less is
  better, (100 - overlap) x 0.2, only when given), engagement x4
- brand: alignment x10, reputation enhancement x6, visibility (0-100 %) x0.2
- innovation: potential x10, technology access x6, IP creation x4
- marketAccess: new market access x10, channel expansion x6, competitive advantage x4
- relationship: strategic alignment x10, long-term potential x8, ecosystem integration x2
"""

import logging
from typing import Any, Dict, Mapping, Optional

from ..common import round_half_up
from .dimensions import FactorRule, score_dimensions
from .schema import StrategicValue

logger = logging.getLogger(__name__)

STRATEGIC_DIMENSIONS = {
    "audience": [
        FactorRule("audienceReach", 2, input_cap=30),
        FactorRule("audienceOverlap", 0.2, invert_from=100, only_when_present=True),
        FactorRule("audienceEngagement", 4),
    ],
    "brand": [
        FactorRule("brandAlignment", 10),
        FactorRule("reputationEnhancement", 6),
        FactorRule("brandVisibility", 0.2),
    ],
    "innovation": [
        FactorRule("innovationPotential", 10),
        FactorRule("technologyAccess", 6),
        FactorRule("ipCreation", 4),
    ],
    "marketAccess": [
        FactorRule("newMarketAccess", 10),
        FactorRule("channelExpansion", 6),
        FactorRule("competitiveAdvantage", 4),
    ],
    "relationship": [
        FactorRule("strategicAlignment", 10),
        FactorRule("longTermPotential", 8),
        FactorRule("ecosystemIntegration", 2),
    ],
}


def calculate_strategic_value(factors: Optional[Mapping[str, Any]]) -> Optional[StrategicValue]:
    """
    Score the five strategic dimensions.

    Args:
        factors: Named strategic ratings

    Returns:
        StrategicValue with the rounded mean as overall score, or None if factors are missing
    """
    if factors is None:
        logger.error("Invalid partnership data for strategic value calculation")
        return None

    scores: Dict[str, int] = score_dimensions(factors, STRATEGIC_DIMENSIONS)
    overall = round_half_up(sum(scores.values()) / len(scores))
    return StrategicValue(overall_score=overall, dimension_scores=scores)
