"""
Partner matching module.

This module scores brand-to-brand compatibility and ranks partner pools.
"""

from .schema import (
    BrandProfile,
    ScoredPartner,
    DimensionScores,
    CompatibilityReport,
    Industry,
    CompanySize,
    GeographicFocus,
    PartnershipObjective,
)
from .scorer import (
    CompatibilityScorer,
    MatchingConfig,
    PartnerFilters,
    filter_partners,
    sort_partners_by_score,
    partners_to_frame,
    create_scorer_from_config,
)

__all__ = [
    "BrandProfile",
    "ScoredPartner",
    "DimensionScores",
    "CompatibilityReport",
    "Industry",
    "CompanySize",
    "GeographicFocus",
    "PartnershipObjective",
    "CompatibilityScorer",
    "MatchingConfig",
    "PartnerFilters",
    "filter_partners",
    "sort_partners_by_score",
    "partners_to_frame",
    "create_scorer_from_config",
]
