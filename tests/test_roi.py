"""Tests for financial ROI, strategic value, risk and the composite assessment."""

import math

import pytest

from alliance.roi import (
    PartnershipCase,
    ROIEngine,
    ROIConfig,
    calculate_financial_roi,
    calculate_strategic_value,
    calculate_risk_assessment,
    risk_level,
    create_engine_from_config,
)
from alliance.roi.engine import financial_component, recommendation_for
from alliance.roi.risk import MITIGATIONS
from alliance.roi.schema import FinancialROI, RISK_FACTOR_NAMES, STRATEGIC_FACTOR_NAMES


def roi_with(percentage):
    return FinancialROI(0, 0, 0, percentage, 0, 12)


class TestFinancialROI:
    def test_basic_case(self):
        result = calculate_financial_roi({"directCosts": 1000}, {"directRevenue": 200}, 12)

        assert result.total_investment == 1000
        assert result.total_returns == 2400
        assert result.net_return == 1400
        assert result.roi_percentage == 140
        assert result.payback_months == 5

    def test_all_components(self):
        investment = {
            "directCosts": 1000,
            "staffHours": 10,
            "hourlyRate": 50,
            "resourceAllocation": 100,
            "marketingCosts": 200,
            "technologyCosts": 300,
            "otherCosts": 400,
        }
        returns = {
            "directRevenue": 100,
            "costSavings": 50,
            "newCustomers": 10,
            "customerLTV": 20,
            "marketShareIncrease": 2,
            "marketShareValue": 1000,
            "otherReturns": 5,
        }
        result = calculate_financial_roi(investment, returns, 6)

        assert result.total_investment == 2500
        assert result.total_returns == 150 * 6 + 200 + 2000 + 5

    def test_form_strings_are_parsed(self):
        result = calculate_financial_roi(
            {"directCosts": "1000", "staffHours": "10", "hourlyRate": "abc"},
            {"directRevenue": "200"},
            "12",
        )
        assert result.total_investment == 1000
        assert result.total_returns == 2400

    def test_no_returns_never_pays_back(self):
        result = calculate_financial_roi({"directCosts": 1000}, {}, 12)
        assert result.roi_percentage == -100
        assert math.isinf(result.payback_months)

    def test_no_investment_reports_zero_roi(self):
        result = calculate_financial_roi({}, {"directRevenue": 100}, 12)
        assert result.roi_percentage == 0

    @pytest.mark.parametrize("investment,returns,months", [
        (None, {"directRevenue": 1}, 12),
        ({"directCosts": 1}, None, 12),
        ({"directCosts": 1}, {"directRevenue": 1}, 0),
        ({"directCosts": 1}, {"directRevenue": 1}, -6),
    ])
    def test_invalid_inputs_return_none(self, investment, returns, months):
        assert calculate_financial_roi(investment, returns, months) is None


class TestStrategicValue:
    def test_empty_factors_score_zero(self):
        result = calculate_strategic_value({})
        assert result.overall_score == 0
        assert set(result.dimension_scores) == {"audience", "brand", "innovation", "marketAccess", "relationship"}

    def test_reach_is_capped(self):
        result = calculate_strategic_value({"audienceReach": 50, "audienceEngagement": 5})
        assert result.dimension_scores["audience"] == 80

    def test_overlap_counts_only_when_given(self):
        base = {"audienceReach": 30, "audienceEngagement": 5}
        assert calculate_strategic_value(base).dimension_scores["audience"] == 80
        assert calculate_strategic_value({**base, "audienceOverlap": 0}).dimension_scores["audience"] == 100
        assert calculate_strategic_value({**base, "audienceOverlap": 100}).dimension_scores["audience"] == 80

    def test_maximum_inputs(self):
        factors = {name: 5 for name in STRATEGIC_FACTOR_NAMES}
        factors.update({"audienceReach": 30, "audienceOverlap": 0, "brandVisibility": 100})
        result = calculate_strategic_value(factors)

        assert all(score == 100 for score in result.dimension_scores.values())
        assert result.overall_score == 100

    def test_dimensions_are_clamped(self):
        result = calculate_strategic_value({"brandAlignment": 50})
        assert result.dimension_scores["brand"] == 100

    def test_missing_factors(self):
        assert calculate_strategic_value(None) is None


class TestRiskAssessment:
    def test_no_risk(self):
        result = calculate_risk_assessment({})
        assert result.overall_risk == 0
        assert result.risk_level == "Low"
        assert result.recommendations == []

    def test_severe_dimension_gets_severe_mitigations(self):
        result = calculate_risk_assessment({"investmentSize": 5, "revenueUncertainty": 5})

        assert result.risk_scores["financial"] == 80
        assert result.overall_risk == 20
        assert result.recommendations == MITIGATIONS["financial"]["severe"]

    def test_moderate_dimension_gets_moderate_mitigations(self):
        result = calculate_risk_assessment({"partnerReputationRisk": 3})

        assert result.risk_scores["reputation"] == 36
        assert result.overall_risk == 9
        assert result.recommendations == MITIGATIONS["reputation"]["moderate"]

    @pytest.mark.parametrize("score,level", [
        (0, "Low"), (24, "Low"), (25, "Moderate"), (49, "Moderate"),
        (50, "High"), (74, "High"), (75, "Critical"), (100, "Critical"),
    ])
    def test_risk_level_bands(self, score, level):
        assert risk_level(score) == level

    @pytest.mark.parametrize("name", RISK_FACTOR_NAMES)
    def test_raising_any_input_never_lowers_risk(self, name):
        base = {factor: 2 for factor in RISK_FACTOR_NAMES}
        previous = None
        for value in range(6):
            risk = calculate_risk_assessment({**base, name: value}).overall_risk
            if previous is not None:
                assert risk >= previous
            previous = risk

    def test_missing_factors(self):
        assert calculate_risk_assessment(None) is None


class TestCompositeAssessment:
    @pytest.mark.parametrize("percentage,points", [
        (250, 40), (200, 30), (101, 30), (100, 20), (51, 20), (50, 10), (0.1, 10), (0, 0), (-20, 0),
    ])
    def test_financial_component_steps(self, percentage, points):
        assert financial_component(roi_with(percentage)) == points

    def test_financial_component_without_roi(self):
        assert financial_component(None) == 0

    @pytest.mark.parametrize("score,label", [
        (100, "Strongly Recommended"), (80, "Strongly Recommended"), (79, "Recommended"),
        (60, "Recommended"), (59, "Consider with Modifications"), (40, "Consider with Modifications"),
        (39, "Not Recommended"), (0, "Not Recommended"),
    ])
    def test_recommendation_bands(self, score, label):
        assert recommendation_for(score) == label

    def test_basic_case(self):
        engine = ROIEngine()
        result = engine.calculate_partnership_roi({
            "investment": {"directCosts": 1000},
            "returns": {"directRevenue": 200},
            "timeframeMonths": 12,
        })

        # 30 (ROI 140 %) + 0 strategic + 20 (no risk)
        assert result.overall_score == 50
        assert result.recommendation == "Consider with Modifications"
        assert result.financial_roi.roi_percentage == 140

    def test_best_possible_case(self):
        strategic = {name: 5 for name in STRATEGIC_FACTOR_NAMES}
        strategic.update({"audienceReach": 30, "audienceOverlap": 0, "brandVisibility": 100})
        case = PartnershipCase(
            investment={"directCosts": 1000},
            returns={"directRevenue": 1000},
            timeframe_months=12,
            strategic_factors=strategic,
        )
        result = ROIEngine().calculate_partnership_roi(case)

        assert result.overall_score == 100
        assert result.recommendation == "Strongly Recommended"

    @pytest.mark.parametrize("timeframe", [None, "", 0])
    def test_unset_timeframe_uses_default(self, timeframe):
        case = {"investment": {"directCosts": 1000}, "returns": {"directRevenue": 200}, "timeframeMonths": timeframe}
        result = ROIEngine().calculate_financial_roi(case)
        assert result.timeframe_months == 12
        assert result.total_returns == 2400

    def test_configured_default_timeframe(self):
        engine = create_engine_from_config({"roi": {"default_timeframe_months": 24}})
        result = engine.calculate_financial_roi({"investment": {"directCosts": 1000}, "returns": {"directRevenue": 200}})
        assert result.total_returns == 4800

    def test_negative_timeframe_scores_financial_as_zero(self):
        result = ROIEngine().calculate_partnership_roi({
            "investment": {"directCosts": 1000},
            "returns": {"directRevenue": 200},
            "timeframeMonths": -3,
        })
        assert result.financial_roi is None
        assert result.overall_score == 20
        assert result.recommendation == "Not Recommended"

    def test_flat_factors_are_accepted(self):
        case = PartnershipCase.from_dict({"investmentSize": 5, "brandAlignment": 5})
        assert case.risk_factors == {"investmentSize": 5}
        assert case.strategic_factors == {"brandAlignment": 5}

    def test_missing_case(self):
        assert ROIEngine().calculate_partnership_roi(None) is None

    def test_to_dict_shape(self):
        result = ROIEngine().calculate_partnership_roi({"investment": {}, "returns": {}})
        data = result.to_dict()
        assert set(data) == {"overallScore", "recommendation", "financialROI", "strategicValue", "riskAssessment"}

    def test_invalid_config(self):
        with pytest.raises(ValueError):
            ROIEngine(ROIConfig(default_timeframe_months=0))
