"""
Resource filtering, sorting and relevance ranking.

Relevance of another resource to ``resource``:
    +2 same industry, +2 same partnership type, +1 same resource type

Relevance of a resource to a brand profile:
    +3 same industry, +2 if one of the profile's objectives is served by the
    resource's partnership type (see TYPE_OBJECTIVES)

Rankings are stable: resources with equal scores keep catalog order.
"""

import logging
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from ..common import parse_date
from ..matching.schema import BrandProfile
from .catalog import get_sample_resources
from .schema import Resource, RankedResource

logger = logging.getLogger(__name__)

ResourceLike = Union[Resource, Dict[str, Any]]

TYPE_OBJECTIVES = {
    "co-branding": ("audience", "credibility"),
    "product": ("product", "innovation"),
    "content": ("content", "audience"),
    "distribution": ("sales",),
    "technology": ("innovation", "product"),
    "cause": ("credibility", "social"),
}

SORT_OPTIONS = ("newest", "oldest", "relevance", "popularity")
ALL = "all"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class LibraryConfig:
    """
    Configuration for resource ranking.

    Attributes:
        related_limit: Default number of related resources
        recommended_limit: Default number of recommended resources
    """
    related_limit: int = 3
    recommended_limit: int = 5

    def validate(self) -> None:
        """Validate configuration values."""
        if self.related_limit < 0 or self.recommended_limit < 0:
            raise ValueError("Library limits must be non-negative")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "LibraryConfig":
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "LibraryConfig":
        """Create from main config dictionary."""
        return cls.from_dict(config.get("library", {}))


def _coerce(resources: Optional[List[ResourceLike]]) -> List[Resource]:
    if not resources:
        return []
    return [r if isinstance(r, Resource) else Resource.from_dict(r) for r in resources]


def _created(resource: Resource) -> datetime:
    return parse_date(resource.created_at) or _EPOCH


def filter_resources(resources: List[ResourceLike], filters: Optional[Dict[str, Any]]) -> List[Resource]:
    """
    Filter resources by type, industry, partnership type and free-text query.

    Args:
        resources: Resources to filter
        filters: Dict with optional ``type``, ``industry``, ``partnershipType``
            (``"all"`` disables a filter) and ``query`` (case-insensitive
            match against title and description)

    Returns:
        Resources that pass every filter, in input order
    """
    resources = _coerce(resources)
    filters = filters or {}

    def wanted(key):
        value = filters.get(key)
        return value if value and value != ALL else None

    resource_type = wanted("type")
    industry = wanted("industry")
    partnership_type = wanted("partnershipType")
    query = (filters.get("query") or "").strip().lower()

    result = []
    for resource in resources:
        if resource_type and resource.type != resource_type:
            continue
        if industry and resource.industry != industry:
            continue
        if partnership_type and resource.partnership_type != partnership_type:
            continue
        if query and query not in resource.title.lower() and query not in resource.description.lower():
            continue
        result.append(resource)
    return result


def sort_resources(resources: List[ResourceLike], sort_by: str = "newest") -> List[Resource]:
    """Sort by ``newest``, ``oldest``, ``relevance`` (case studies first) or ``popularity``."""
    resources = _coerce(resources)
    if sort_by == "oldest":
        return sorted(resources, key=_created)
    if sort_by == "relevance":
        return sorted(resources, key=lambda r: r.type != "case")
    if sort_by == "popularity":
        return sorted(resources, key=lambda r: r.popularity or 0, reverse=True)
    if sort_by != "newest":
        logger.debug(f"Unknown sort option '{sort_by}', sorting newest first")
    return sorted(resources, key=_created, reverse=True)


def get_resource_by_id(resources: List[ResourceLike], resource_id: str) -> Optional[Resource]:
    if not resource_id:
        return None
    return next((r for r in _coerce(resources) if r.id == resource_id), None)


def _rank(scored: List[RankedResource], limit: int) -> List[RankedResource]:
    ranked = sorted(scored, key=lambda item: item.relevance_score, reverse=True)
    return ranked[:limit]


def get_related_resources(
    resources: List[ResourceLike],
    resource: Optional[ResourceLike],
    limit: int = 3
) -> List[RankedResource]:
    """Resources most similar to ``resource``, excluding itself."""
    if resource is None:
        return []
    if not isinstance(resource, Resource):
        resource = Resource.from_dict(resource)

    scored = []
    for item in _coerce(resources):
        if item.id == resource.id:
            continue
        score = 0
        if item.industry == resource.industry:
            score += 2
        if item.partnership_type == resource.partnership_type:
            score += 2
        if item.type == resource.type:
            score += 1
        scored.append(RankedResource(item, score))
    return _rank(scored, limit)


def get_recommended_resources(
    resources: List[ResourceLike],
    profile: Optional[Union[BrandProfile, Dict[str, Any]]],
    limit: int = 5
) -> List[RankedResource]:
    """Resources most relevant to a brand profile's industry and objectives."""
    if profile is None:
        return []
    if isinstance(profile, dict):
        profile = BrandProfile.from_dict(profile)

    objectives = profile.objective_set
    scored = []
    for resource in _coerce(resources):
        score = 0
        if resource.industry == profile.industry:
            score += 3
        if objectives.intersection(TYPE_OBJECTIVES.get(resource.partnership_type, ())):
            score += 2
        scored.append(RankedResource(resource, score))
    return _rank(scored, limit)


class ResourceRanker:
    """
    Resource library bound to a catalog and a LibraryConfig.

    Attributes:
        resources: Catalog of resources
        config: LibraryConfig instance
    """

    def __init__(self, resources: List[ResourceLike], config: Optional[LibraryConfig] = None):
        self.resources = _coerce(resources)
        self.config = config or LibraryConfig()
        self.config.validate()

    def related(self, resource: ResourceLike, limit: Optional[int] = None) -> List[RankedResource]:
        limit = self.config.related_limit if limit is None else limit
        return get_related_resources(self.resources, resource, limit)

    def recommended(
        self,
        profile: Union[BrandProfile, Dict[str, Any]],
        limit: Optional[int] = None
    ) -> List[RankedResource]:
        limit = self.config.recommended_limit if limit is None else limit
        return get_recommended_resources(self.resources, profile, limit)

    def search(self, filters: Optional[Dict[str, Any]] = None, sort_by: str = "newest") -> List[Resource]:
        """Filter then sort the catalog."""
        return sort_resources(filter_resources(self.resources, filters), sort_by)

    def get(self, resource_id: str) -> Optional[Resource]:
        return get_resource_by_id(self.resources, resource_id)


def create_ranker_from_config(config: Dict[str, Any], resources: Optional[List[ResourceLike]] = None) -> ResourceRanker:
    """Factory function to create ResourceRanker from config; defaults to the built-in catalog."""
    if resources is None:
        resources = get_sample_resources()
    return ResourceRanker(resources, LibraryConfig.from_config(config))
