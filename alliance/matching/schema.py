"""
Data structures for brand profiles and compatibility results.

Profiles are serialized with camelCase keys and a nested ``partnership``
object, the shape stored in the root document:

    {
        "brandName": "TechInnovate",
        "industry": "technology",
        "companySize": "large",
        "geographicFocus": "global",
        "values": ["innovation", "quality"],
        "partnership": {"objectives": ["product", "innovation"]}
    }
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Optional, Dict, Any, List


class Industry(Enum):
    """Industry options offered by the profile form."""
    SPORTS = "sports"
    ENTERTAINMENT = "entertainment"
    TECHNOLOGY = "technology"
    RETAIL = "retail"
    FINANCIAL = "financial"
    HEALTHCARE = "healthcare"
    EDUCATION = "education"
    FOOD = "food"
    AUTOMOTIVE = "automotive"
    OTHER = "other"


class CompanySize(Enum):
    """Company size bands, ordered smallest to largest."""
    STARTUP = "startup"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    ENTERPRISE = "enterprise"


class GeographicFocus(Enum):
    """Geographic reach, ordered narrowest to widest."""
    LOCAL = "local"
    REGIONAL = "regional"
    NATIONAL = "national"
    INTERNATIONAL = "international"
    GLOBAL = "global"


class PartnershipObjective(Enum):
    """Partnership objectives a brand can declare."""
    AUDIENCE = "audience"
    CREDIBILITY = "credibility"
    PRODUCT = "product"
    INNOVATION = "innovation"
    CONTENT = "content"
    SALES = "sales"
    SOCIAL = "social"


def _as_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    return list(value)


@dataclass
class BrandProfile:
    """
    A brand's matchmaking profile.

    Attributes:
        industry: Industry key (see Industry); unknown keys are scored with defaults
        company_size: Company size key (see CompanySize)
        geographic_focus: Geographic focus key (see GeographicFocus)
        values: Declared brand values
        objectives: Declared partnership objectives (``partnership.objectives``)
        id: Optional identifier for partner-pool entries
        brand_name: Display name
        brand_description: Free-text description
        audience: Audience details captured by the profile form (age, income, interests)
        partnership_duration: Preferred partnership duration
        investment_level: Preferred investment level
        partnership_experience: Prior partnership experience
        created_at: Creation timestamp (ISO-8601)
        updated_at: Last update timestamp (ISO-8601)
    """
    industry: str = ""
    company_size: str = ""
    geographic_focus: str = ""
    values: List[str] = field(default_factory=list)
    objectives: List[str] = field(default_factory=list)
    id: Optional[str] = None
    brand_name: str = ""
    brand_description: str = ""
    audience: Dict[str, Any] = field(default_factory=dict)
    partnership_duration: Optional[str] = None
    investment_level: Optional[str] = None
    partnership_experience: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self):
        """Normalize list-valued fields coming from forms or files."""
        self.values = _as_list(self.values)
        self.objectives = _as_list(self.objectives)
        if self.audience is None:
            self.audience = {}

    @property
    def value_set(self) -> set:
        return set(self.values)

    @property
    def objective_set(self) -> set:
        return set(self.objectives)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted camelCase dictionary."""
        return {
            "id": self.id,
            "brandName": self.brand_name,
            "brandDescription": self.brand_description,
            "industry": self.industry,
            "companySize": self.company_size,
            "geographicFocus": self.geographic_focus,
            "values": list(self.values),
            "audience": dict(self.audience),
            "partnership": {
                "objectives": list(self.objectives),
                "duration": self.partnership_duration,
                "investment": self.investment_level,
                "experience": self.partnership_experience,
            },
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BrandProfile":
        """Create from a persisted (camelCase) or flat dictionary."""
        partnership = data.get("partnership") or {}
        return cls(
            industry=data.get("industry") or "",
            company_size=data.get("companySize", data.get("company_size")) or "",
            geographic_focus=data.get("geographicFocus", data.get("geographic_focus")) or "",
            values=data.get("values"),
            objectives=partnership.get("objectives", data.get("objectives")),
            id=data.get("id"),
            brand_name=data.get("brandName", data.get("brand_name")) or "",
            brand_description=data.get("brandDescription", data.get("brand_description")) or "",
            audience=data.get("audience") or {},
            partnership_duration=partnership.get("duration"),
            investment_level=partnership.get("investment"),
            partnership_experience=partnership.get("experience"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


@dataclass
class ScoredPartner:
    """A partner profile paired with its compatibility score."""
    profile: BrandProfile
    compatibility_score: int

    def to_dict(self) -> Dict[str, Any]:
        result = self.profile.to_dict()
        result["compatibilityScore"] = self.compatibility_score
        return result


@dataclass
class DimensionScores:
    """Per-dimension compatibility scores on a 0-100 scale."""
    industry: int
    values: int
    objectives: int
    geography: int
    size: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass
class CompatibilityReport:
    """
    Compatibility report between a brand and a partner.

    Attributes:
        overall_score: Weighted compatibility score [0, 100]
        dimension_scores: Per-dimension scores [0, 100]
        strengths: Dimensions scoring at or above the strength threshold
        weaknesses: Dimensions scoring below the weakness threshold
        recommendations: One static recommendation per weakness
        suggested_partnership_types: Partnership formats the profiles suit
    """
    overall_score: int
    dimension_scores: DimensionScores
    strengths: List[str] = field(default_factory=list)
    weaknesses: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    suggested_partnership_types: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "overallScore": self.overall_score,
            "dimensionScores": self.dimension_scores.to_dict(),
            "strengths": list(self.strengths),
            "weaknesses": list(self.weaknesses),
            "recommendations": list(self.recommendations),
            "suggestedPartnershipTypes": list(self.suggested_partnership_types),
        }
