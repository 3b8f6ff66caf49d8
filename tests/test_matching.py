"""Tests for compatibility scoring and partner ranking."""

import pandas as pd
import pytest

from alliance.matching import (
    BrandProfile,
    CompatibilityScorer,
    MatchingConfig,
    filter_partners,
    sort_partners_by_score,
    partners_to_frame,
    create_scorer_from_config,
)
from alliance.matching.schema import ScoredPartner
from alliance.matching.scorer import industry_score, overlap_score, geography_score, size_score


@pytest.fixture
def scorer():
    return CompatibilityScorer()


def make_profile(**overrides):
    fields = dict(
        industry="technology",
        company_size="large",
        geographic_focus="global",
        values=["innovation"],
        objectives=["product"],
    )
    fields.update(overrides)
    return BrandProfile(**fields)


class TestSubScores:
    def test_industry(self):
        assert industry_score("technology", "technology") == 1.0
        assert industry_score("technology", "entertainment") == 0.7
        assert industry_score("technology", "automotive") == 0.3
        assert industry_score("", "technology") == 0.0

    def test_overlap_uses_smaller_set(self):
        assert overlap_score(["a", "b", "c", "d"], ["a", "b"]) == 1.0
        assert overlap_score(["a", "b"], ["b", "c"]) == 0.5
        assert overlap_score([], ["a"]) == 0.0

    def test_unknown_levels_use_defaults(self):
        assert geography_score("galactic", "local") == 0.3
        assert size_score("huge", "small") == 0.5
        assert geography_score("", "local") == 0.0
        assert size_score("small", None) == 0.0


class TestScore:
    def test_identical_profiles_score_100(self, scorer, brand):
        assert scorer.score(brand, brand) == 100

    def test_missing_profile_scores_zero(self, scorer, brand):
        assert scorer.score(None, brand) == 0
        assert scorer.score(brand, None) == 0

    def test_weighted_sum(self, scorer):
        brand = make_profile()
        partner = make_profile(
            industry="entertainment",
            geographic_focus="international",
            values=["innovation", "quality"],
            objectives=["content"],
        )
        # 0.2*0.7 + 0.25*1 + 0.25*0 + 0.15*0.8 + 0.15*1 = 0.66
        assert scorer.score(brand, partner) == 66

    def test_industry_lookup_keyed_by_first_brand(self, scorer):
        automotive = make_profile(industry="automotive")
        technology = make_profile(industry="technology")
        assert scorer.score(automotive, technology) > scorer.score(technology, automotive)

    def test_scores_within_range(self, scorer, brand, partner_pool):
        for partner in partner_pool:
            assert 0 <= scorer.score(brand, partner) <= 100
            assert 0 <= scorer.score(partner, brand) <= 100

    def test_accepts_persisted_dicts(self, scorer, brand):
        assert scorer.score(brand.to_dict(), brand.to_dict()) == 100


class TestGenerateReport:
    def test_strengths_weaknesses_and_recommendations(self, scorer):
        brand = make_profile()
        partner = make_profile(
            industry="entertainment",
            geographic_focus="international",
            values=["innovation", "quality"],
            objectives=["content"],
        )
        report = scorer.generate_report(brand, partner)

        assert report.overall_score == 66
        assert report.dimension_scores.to_dict() == {
            "industry": 70,
            "values": 100,
            "objectives": 0,
            "geography": 80,
            "size": 100,
        }
        assert "shared values" in report.strengths
        assert "industry alignment" in report.strengths
        assert report.weaknesses == ["compatible objectives"]
        assert report.recommendations == [
            "Define clear partnership goals that benefit both organizations."
        ]

    def test_suggested_partnership_types(self, scorer):
        brand = make_profile(objectives=["product"])
        partner = make_profile(industry="entertainment", geographic_focus="international", objectives=["product"])
        report = scorer.generate_report(brand, partner)

        # values 100 across industries, industry 70, shared objective with product, geography 80 across regions
        assert report.suggested_partnership_types == ["co-branding", "product development", "distribution"]

    def test_missing_profile_returns_none(self, scorer, brand):
        assert scorer.generate_report(brand, None) is None

    def test_to_dict_keys(self, scorer, brand):
        result = scorer.generate_report(brand, brand).to_dict()
        assert set(result) == {
            "overallScore", "dimensionScores", "strengths",
            "weaknesses", "recommendations", "suggestedPartnershipTypes",
        }


class TestRanking:
    def test_sorted_and_limited(self, scorer, brand, partner_pool):
        ranked = scorer.find_most_promising_partners(brand, partner_pool, limit=3)
        scores = [p.compatibility_score for p in ranked]

        assert len(ranked) == 3
        assert scores == sorted(scores, reverse=True)

    def test_default_limit_from_config(self, brand, partner_pool):
        scorer = CompatibilityScorer(MatchingConfig(default_limit=2))
        assert len(scorer.find_most_promising_partners(brand, partner_pool)) == 2

    def test_limit_larger_than_pool(self, scorer, brand, partner_pool):
        ranked = scorer.find_most_promising_partners(brand, partner_pool, limit=50)
        assert len(ranked) == len(partner_pool)

    def test_empty_inputs(self, scorer, brand, partner_pool):
        assert scorer.find_most_promising_partners(brand, []) == []
        assert scorer.find_most_promising_partners(None, partner_pool) == []

    def test_best_partner_for_technology_brand(self, scorer, brand, partner_pool):
        ranked = scorer.find_most_promising_partners(brand, partner_pool, limit=1)
        assert ranked[0].profile.brand_name == "TechInnovate"

    def test_sort_is_stable(self, brand):
        a = ScoredPartner(make_profile(id="a"), 50)
        b = ScoredPartner(make_profile(id="b"), 70)
        c = ScoredPartner(make_profile(id="c"), 50)

        assert [p.profile.id for p in sort_partners_by_score([a, b, c])] == ["b", "a", "c"]
        assert [p.profile.id for p in sort_partners_by_score([a, b, c], order="asc")] == ["a", "c", "b"]

    def test_partners_to_frame(self, scorer, brand, partner_pool):
        frame = partners_to_frame(scorer.find_most_promising_partners(brand, partner_pool))
        assert isinstance(frame, pd.DataFrame)
        assert list(frame.columns)[-1] == "compatibilityScore"
        assert frame["compatibilityScore"].is_monotonic_decreasing


class TestFilterPartners:
    def test_exact_attributes(self, partner_pool):
        result = filter_partners(partner_pool, {"industry": "sports"})
        assert [p.brand_name for p in result] == ["SportsFit"]

    def test_any_of_values(self, partner_pool):
        result = filter_partners(partner_pool, {"values": ["sustainability", "creativity"]})
        assert [p.brand_name for p in result] == ["MediaStream", "EcoGoods"]

    def test_combined_filters(self, partner_pool):
        result = filter_partners(partner_pool, {"geographicFocus": "national", "objectives": ["credibility"]})
        assert [p.brand_name for p in result] == ["FinSecure", "HealthPlus"]

    def test_empty_filters_keep_everything(self, partner_pool):
        assert len(filter_partners(partner_pool, {})) == len(partner_pool)


class TestMatchingConfig:
    def test_weights_must_sum_to_one(self):
        weights = {"industry": 0.5, "values": 0.5, "objectives": 0.5, "geography": 0.0, "company_size": 0.0}
        with pytest.raises(ValueError, match="sum to 1"):
            CompatibilityScorer(MatchingConfig(weights=weights))

    def test_from_config(self):
        scorer = create_scorer_from_config({"matching": {"strength_threshold": 80, "default_limit": 3}})
        assert scorer.config.strength_threshold == 80
        assert scorer.config.default_limit == 3
        assert scorer.config.weights["values"] == 0.25
