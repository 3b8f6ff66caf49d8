"""
Data structures for the partnership resource library.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class ResourceType(Enum):
    """Kinds of library resources."""
    CASE = "case"
    TEMPLATE = "template"
    GUIDE = "guide"


class PartnershipType(Enum):
    """Partnership types used to tag resources and collaborations."""
    CO_BRANDING = "co-branding"
    PRODUCT = "product"
    CONTENT = "content"
    DISTRIBUTION = "distribution"
    TECHNOLOGY = "technology"
    CAUSE = "cause"


@dataclass
class Resource:
    """
    A library resource (case study, template or guide).

    Attributes:
        id: Resource identifier
        title: Display title
        description: One-line summary
        type: Resource type (see ResourceType)
        industry: Industry key the resource is about
        partnership_type: Partnership type (see PartnershipType)
        content: Body text
        created_at: Publication timestamp (ISO-8601)
        popularity: Popularity score used by the popularity sort
    """
    id: str
    title: str
    description: str = ""
    type: str = ResourceType.GUIDE.value
    industry: str = "other"
    partnership_type: str = ""
    content: str = ""
    created_at: Optional[str] = None
    popularity: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "type": self.type,
            "industry": self.industry,
            "partnershipType": self.partnership_type,
            "content": self.content,
            "createdAt": self.created_at,
            "popularity": self.popularity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Resource":
        return cls(
            id=data.get("id"),
            title=data.get("title", ""),
            description=data.get("description", ""),
            type=data.get("type", ResourceType.GUIDE.value),
            industry=data.get("industry", "other"),
            partnership_type=data.get("partnershipType", data.get("partnership_type", "")),
            content=data.get("content", ""),
            created_at=data.get("createdAt", data.get("created_at")),
            popularity=data.get("popularity") or 0,
        )


@dataclass
class RankedResource:
    """A resource with the relevance score it was ranked by."""
    resource: Resource
    relevance_score: int

    def to_dict(self) -> Dict[str, Any]:
        result = self.resource.to_dict()
        result["relevanceScore"] = self.relevance_score
        return result
