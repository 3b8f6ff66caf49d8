"""Tests for the resource library."""

import pytest

from alliance.library import (
    LibraryConfig,
    ResourceRanker,
    create_ranker_from_config,
    filter_resources,
    get_recommended_resources,
    get_related_resources,
    get_resource_by_id,
    get_resource_categories,
    get_sample_resources,
    sort_resources,
)
from alliance.matching import BrandProfile


@pytest.fixture
def resources():
    return get_sample_resources()


def ids(items):
    return [getattr(item, "resource", item).id for item in items]


class TestFiltering:
    def test_no_filters(self, resources):
        assert len(filter_resources(resources, None)) == 6
        assert len(filter_resources(resources, {"type": "all", "industry": "all"})) == 6

    def test_by_type(self, resources):
        assert ids(filter_resources(resources, {"type": "case"})) == ["resource1", "resource4"]

    def test_by_industry_and_partnership_type(self, resources):
        assert ids(filter_resources(resources, {"industry": "technology"})) == ["resource6"]
        assert ids(filter_resources(resources, {"partnershipType": "content"})) == ["resource3"]

    def test_query_is_case_insensitive(self, resources):
        assert ids(filter_resources(resources, {"query": "roi"})) == ["resource4"]
        assert ids(filter_resources(resources, {"query": "TEMPLATE"})) == ["resource2"]

    def test_accepts_dicts(self, resources):
        as_dicts = [r.to_dict() for r in resources]
        assert ids(filter_resources(as_dicts, {"type": "guide"})) == ["resource3", "resource6"]


class TestSorting:
    def test_newest_and_oldest(self, resources):
        expected = [f"resource{i}" for i in range(6, 0, -1)]
        assert ids(sort_resources(resources)) == expected
        assert ids(sort_resources(resources, "oldest")) == expected[::-1]

    def test_popularity(self, resources):
        assert ids(sort_resources(resources, "popularity")) == [
            "resource2", "resource1", "resource5", "resource3", "resource6", "resource4",
        ]

    def test_relevance_puts_case_studies_first(self, resources):
        assert ids(sort_resources(resources, "relevance")) == [
            "resource1", "resource4", "resource2", "resource3", "resource5", "resource6",
        ]

    def test_unknown_option_sorts_newest(self, resources):
        assert ids(sort_resources(resources, "random")) == ids(sort_resources(resources, "newest"))


class TestRelevance:
    def test_related_excludes_self(self, resources):
        related = get_related_resources(resources, resources[0])

        assert ids(related) == ["resource4", "resource2", "resource3"]
        assert related[0].relevance_score == 1

    def test_related_none(self, resources):
        assert get_related_resources(resources, None) == []

    def test_recommended(self, resources):
        profile = BrandProfile(industry="technology", objectives=["innovation"])
        recommended = get_recommended_resources(resources, profile)

        assert ids(recommended) == ["resource6", "resource1", "resource2", "resource3", "resource4"]
        assert [r.relevance_score for r in recommended[:2]] == [5, 2]

    def test_recommended_from_dict(self, resources):
        recommended = get_recommended_resources(resources, {"industry": "retail", "objectives": ["audience"]}, limit=1)
        assert ids(recommended) == ["resource2"]
        assert recommended[0].to_dict()["relevanceScore"] == 5


def test_get_resource_by_id(resources):
    assert get_resource_by_id(resources, "resource3").title == "Content Creation Partnership Guide"
    assert get_resource_by_id(resources, "missing") is None


def test_categories():
    categories = get_resource_categories()

    assert set(categories) == {"types", "industries", "partnershipTypes", "sortOptions"}
    assert categories["types"][0] == {"id": "all", "name": "All Resources"}
    assert [o["id"] for o in categories["sortOptions"]] == ["newest", "oldest", "relevance", "popularity"]


class TestResourceRanker:
    def test_uses_config_limits(self, resources):
        ranker = ResourceRanker(resources, LibraryConfig(related_limit=1, recommended_limit=2))

        assert len(ranker.related(resources[0])) == 1
        assert len(ranker.recommended(BrandProfile(industry="sports"))) == 2

    def test_search(self):
        ranker = create_ranker_from_config({})
        assert ids(ranker.search({"type": "template"}, "popularity")) == ["resource2", "resource5"]
        assert ranker.get("resource5").industry == "healthcare"

    def test_invalid_config(self, resources):
        with pytest.raises(ValueError):
            ResourceRanker(resources, LibraryConfig(related_limit=-1))
