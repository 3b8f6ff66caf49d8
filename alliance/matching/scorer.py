"""
Compatibility scoring between brand profiles.

The score is a weighted combination of five sub-scores, each in [0, 1]:

    score = round(100 * (0.20 * industry + 0.25 * values + 0.25 * objectives
                         + 0.15 * geography + 0.15 * company_size))

Sub-score rules:
- industry: 1.0 if equal, 0.7 if complementary (directed table), else 0.3
- values / objectives: |shared| / min(|a|, |b|), 0 if either side is empty
- geography: 1.0 if equal, else symmetric matrix, 0.3 if a level is unknown
- company size: 1.0 if equal, else symmetric matrix, 0.5 if a size is unknown

A missing attribute on either side scores 0 for that dimension.
"""

import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any, List, Optional, Union

import pandas as pd

from ..common import round_half_up
from .schema import BrandProfile, ScoredPartner, DimensionScores, CompatibilityReport
from .tables import geography_compatibility, size_compatibility, is_complementary_industry

logger = logging.getLogger(__name__)

ProfileLike = Union[BrandProfile, Dict[str, Any]]

DEFAULT_WEIGHTS = {
    "industry": 0.20,
    "values": 0.25,
    "objectives": 0.25,
    "geography": 0.15,
    "company_size": 0.15,
}

COMPLEMENTARY_INDUSTRY_SCORE = 0.7
OTHER_INDUSTRY_SCORE = 0.3
UNKNOWN_GEOGRAPHY_SCORE = 0.3
UNKNOWN_SIZE_SCORE = 0.5

DIMENSION_LABELS = {
    "industry": "industry alignment",
    "values": "shared values",
    "objectives": "compatible objectives",
    "geography": "geographic alignment",
    "size": "company size compatibility",
}

WEAKNESS_RECOMMENDATIONS = {
    "industry": "Focus on cross-industry innovation opportunities.",
    "values": "Identify and emphasize the specific values that do align.",
    "objectives": "Define clear partnership goals that benefit both organizations.",
    "geography": "Consider a geographically focused pilot initiative.",
    "size": "Establish clear roles and responsibilities that leverage each organization's strengths.",
}


@dataclass
class MatchingConfig:
    """
    Configuration for compatibility scoring.

    Attributes:
        weights: Per-dimension weights (must sum to 1)
        strength_threshold: Dimension score at or above which it is a strength
        weakness_threshold: Dimension score below which it is a weakness
        default_limit: Default number of partners returned by ranking
    """
    weights: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_WEIGHTS))
    strength_threshold: int = 70
    weakness_threshold: int = 50
    default_limit: int = 5

    def validate(self) -> None:
        """Validate configuration values."""
        missing = set(DEFAULT_WEIGHTS) - set(self.weights)
        if missing:
            raise ValueError(f"Missing matching weights: {sorted(missing)}")
        total = sum(self.weights.values())
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"Matching weights must sum to 1, got {total}")
        if any(w < 0 for w in self.weights.values()):
            raise ValueError("Matching weights must be non-negative")
        if not 0 <= self.weakness_threshold <= self.strength_threshold <= 100:
            raise ValueError(
                f"Thresholds must satisfy 0 <= weakness <= strength <= 100, "
                f"got {self.weakness_threshold} / {self.strength_threshold}"
            )
        if self.default_limit < 1:
            raise ValueError(f"default_limit must be positive, got {self.default_limit}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "MatchingConfig":
        """Create from dictionary."""
        return cls(**d)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "MatchingConfig":
        """Create from main config dictionary."""
        matching_config = config.get("matching", {})
        return cls(
            weights=dict(matching_config.get("weights", DEFAULT_WEIGHTS)),
            strength_threshold=matching_config.get("strength_threshold", 70),
            weakness_threshold=matching_config.get("weakness_threshold", 50),
            default_limit=matching_config.get("default_limit", 5),
        )


@dataclass
class PartnerFilters:
    """Partner search filters; unset fields do not filter."""
    industry: Optional[str] = None
    company_size: Optional[str] = None
    geographic_focus: Optional[str] = None
    values: List[str] = field(default_factory=list)
    objectives: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "PartnerFilters":
        def listify(v):
            if not v:
                return []
            return [v] if isinstance(v, str) else list(v)

        return cls(
            industry=d.get("industry") or None,
            company_size=d.get("companySize", d.get("company_size")) or None,
            geographic_focus=d.get("geographicFocus", d.get("geographic_focus")) or None,
            values=listify(d.get("values")),
            objectives=listify(d.get("objectives")),
        )


def _coerce_profile(profile: Optional[ProfileLike]) -> Optional[BrandProfile]:
    if profile is None or isinstance(profile, BrandProfile):
        return profile
    return BrandProfile.from_dict(profile)


def industry_score(industry_a: str, industry_b: str) -> float:
    """Industry alignment in [0, 1]; the complementary lookup is keyed by ``industry_a``."""
    if not industry_a or not industry_b:
        return 0.0
    if industry_a == industry_b:
        return 1.0
    if is_complementary_industry(industry_a, industry_b):
        return COMPLEMENTARY_INDUSTRY_SCORE
    return OTHER_INDUSTRY_SCORE


def overlap_score(items_a, items_b) -> float:
    """Shared items divided by the size of the smaller set; 0 if either is empty."""
    set_a, set_b = set(items_a or ()), set(items_b or ())
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / min(len(set_a), len(set_b))


def geography_score(focus_a: str, focus_b: str) -> float:
    """Geographic alignment in [0, 1]."""
    if not focus_a or not focus_b:
        return 0.0
    if focus_a == focus_b:
        return 1.0
    value = geography_compatibility(focus_a, focus_b)
    return UNKNOWN_GEOGRAPHY_SCORE if value is None else value


def size_score(size_a: str, size_b: str) -> float:
    """Company size compatibility in [0, 1]."""
    if not size_a or not size_b:
        return 0.0
    if size_a == size_b:
        return 1.0
    value = size_compatibility(size_a, size_b)
    return UNKNOWN_SIZE_SCORE if value is None else value


class CompatibilityScorer:
    """
    Weighted compatibility scorer for brand profiles.

    Attributes:
        config: MatchingConfig with weights and report thresholds
    """

    def __init__(self, config: Optional[MatchingConfig] = None):
        """
        Initialize the scorer.

        Args:
            config: MatchingConfig instance (defaults if omitted)
        """
        self.config = config or MatchingConfig()
        self.config.validate()
        logger.debug(f"Initialized CompatibilityScorer with weights={self.config.weights}")

    def sub_scores(self, brand_a: BrandProfile, brand_b: BrandProfile) -> Dict[str, float]:
        """
        Compute the five sub-scores in [0, 1].

        Returns:
            Dictionary keyed by weight name
        """
        return {
            "industry": industry_score(brand_a.industry, brand_b.industry),
            "values": overlap_score(brand_a.values, brand_b.values),
            "objectives": overlap_score(brand_a.objectives, brand_b.objectives),
            "geography": geography_score(brand_a.geographic_focus, brand_b.geographic_focus),
            "company_size": size_score(brand_a.company_size, brand_b.company_size),
        }

    def score(self, brand_a: Optional[ProfileLike], brand_b: Optional[ProfileLike]) -> int:
        """
        Compute the compatibility score between two brands.

        Args:
            brand_a: First brand profile (its industry keys the complementary table)
            brand_b: Second brand profile

        Returns:
            Integer score in [0, 100]; 0 if either profile is missing
        """
        brand_a, brand_b = _coerce_profile(brand_a), _coerce_profile(brand_b)
        if brand_a is None or brand_b is None:
            logger.error("Invalid brand profiles for compatibility calculation")
            return 0

        subs = self.sub_scores(brand_a, brand_b)
        total = sum(self.config.weights[name] * value for name, value in subs.items())
        return max(0, min(100, round_half_up(total * 100)))

    def generate_report(
        self,
        brand: Optional[ProfileLike],
        partner: Optional[ProfileLike]
    ) -> Optional[CompatibilityReport]:
        """
        Generate a compatibility report with strengths, weaknesses and suggestions.

        Args:
            brand: The user's brand profile
            partner: Candidate partner profile

        Returns:
            CompatibilityReport, or None if either profile is missing
        """
        brand, partner = _coerce_profile(brand), _coerce_profile(partner)
        if brand is None or partner is None:
            logger.error("Invalid brand profiles for compatibility report")
            return None

        subs = self.sub_scores(brand, partner)
        dims = DimensionScores(
            industry=round_half_up(subs["industry"] * 100),
            values=round_half_up(subs["values"] * 100),
            objectives=round_half_up(subs["objectives"] * 100),
            geography=round_half_up(subs["geography"] * 100),
            size=round_half_up(subs["company_size"] * 100),
        )
        dim_values = dims.to_dict()

        strengths = [
            DIMENSION_LABELS[name] for name, value in dim_values.items()
            if value >= self.config.strength_threshold
        ]
        weak_dims = [
            name for name, value in dim_values.items()
            if value < self.config.weakness_threshold
        ]
        weaknesses = [DIMENSION_LABELS[name] for name in weak_dims]
        recommendations = [WEAKNESS_RECOMMENDATIONS[name] for name in weak_dims]

        either_objectives = brand.objective_set | partner.objective_set
        threshold = self.config.strength_threshold
        suggested = []
        if dims.values >= threshold and brand.industry != partner.industry:
            suggested.append("co-branding")
        if dims.industry >= threshold and "product" in either_objectives:
            suggested.append("product development")
        if dims.objectives >= threshold and "content" in either_objectives:
            suggested.append("content creation")
        if dims.geography >= threshold and brand.geographic_focus != partner.geographic_focus:
            suggested.append("distribution")

        return CompatibilityReport(
            overall_score=self.score(brand, partner),
            dimension_scores=dims,
            strengths=strengths,
            weaknesses=weaknesses,
            recommendations=recommendations,
            suggested_partnership_types=suggested,
        )

    def find_most_promising_partners(
        self,
        brand: Optional[ProfileLike],
        partners: List[ProfileLike],
        limit: Optional[int] = None
    ) -> List[ScoredPartner]:
        """
        Score every partner against the brand and return the best matches.

        Args:
            brand: The user's brand profile
            partners: Candidate partner profiles
            limit: Maximum number of partners (config default_limit if omitted)

        Returns:
            Partners sorted by compatibility score, descending, at most ``limit`` long
        """
        brand = _coerce_profile(brand)
        if brand is None or not partners:
            return []

        limit = self.config.default_limit if limit is None else limit
        scored = [
            ScoredPartner(profile=p, compatibility_score=self.score(brand, p))
            for p in map(_coerce_profile, partners)
        ]
        ranked = sort_partners_by_score(scored)
        return ranked[:max(0, limit)]


def filter_partners(partners: List[ProfileLike], filters: Union[PartnerFilters, Dict[str, Any]]) -> List[BrandProfile]:
    """
    Filter partner profiles by exact attributes and any-of value/objective matches.

    Args:
        partners: Candidate partner profiles
        filters: PartnerFilters or equivalent dictionary

    Returns:
        Profiles passing every set filter, in input order
    """
    if not partners:
        return []
    if isinstance(filters, dict):
        filters = PartnerFilters.from_dict(filters)

    result = []
    for partner in map(_coerce_profile, partners):
        if filters.industry and partner.industry != filters.industry:
            continue
        if filters.company_size and partner.company_size != filters.company_size:
            continue
        if filters.geographic_focus and partner.geographic_focus != filters.geographic_focus:
            continue
        if filters.values and not partner.value_set.intersection(filters.values):
            continue
        if filters.objectives and not partner.objective_set.intersection(filters.objectives):
            continue
        result.append(partner)
    return result


def sort_partners_by_score(partners: List[ScoredPartner], order: str = "desc") -> List[ScoredPartner]:
    """Return a new list sorted by compatibility score; ties keep input order."""
    if not partners:
        return []
    return sorted(partners, key=lambda p: p.compatibility_score, reverse=(order != "asc"))


def partners_to_frame(partners: List[ScoredPartner]) -> pd.DataFrame:
    """Tabulate scored partners for display or export."""
    rows = [
        {
            "id": p.profile.id,
            "brandName": p.profile.brand_name,
            "industry": p.profile.industry,
            "companySize": p.profile.company_size,
            "geographicFocus": p.profile.geographic_focus,
            "compatibilityScore": p.compatibility_score,
        }
        for p in partners
    ]
    columns = ["id", "brandName", "industry", "companySize", "geographicFocus", "compatibilityScore"]
    return pd.DataFrame(rows, columns=columns)


def create_scorer_from_config(config: Dict[str, Any]) -> CompatibilityScorer:
    """
    Factory function to create CompatibilityScorer from config.

    Args:
        config: Main configuration dictionary

    Returns:
        Configured CompatibilityScorer instance
    """
    return CompatibilityScorer(MatchingConfig.from_config(config))
