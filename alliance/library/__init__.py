"""Partnership resource library: catalog, filtering and relevance ranking."""

from .schema import Resource, RankedResource, ResourceType, PartnershipType
from .catalog import get_resource_categories, get_sample_resources
from .ranker import (
    LibraryConfig,
    ResourceRanker,
    TYPE_OBJECTIVES,
    filter_resources,
    sort_resources,
    get_resource_by_id,
    get_related_resources,
    get_recommended_resources,
    create_ranker_from_config,
)

__all__ = [
    "Resource",
    "RankedResource",
    "ResourceType",
    "PartnershipType",
    "get_resource_categories",
    "get_sample_resources",
    "LibraryConfig",
    "ResourceRanker",
    "TYPE_OBJECTIVES",
    "filter_resources",
    "sort_resources",
    "get_resource_by_id",
    "get_related_resources",
    "get_recommended_resources",
    "create_ranker_from_config",
]
