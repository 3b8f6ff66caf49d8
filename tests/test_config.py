"""Tests for configuration loading."""

import pytest

from alliance.configs import load_config, validate_config, get_config_value
from alliance.matching import MatchingConfig
from alliance.projects import ProgressConfig
from alliance.roi import ROIConfig
from alliance.storage import StorageConfig


class TestLoadConfig:
    def test_shipped_config_is_valid(self, config_path):
        config = load_config(str(config_path))
        assert validate_config(config) == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError):
            load_config(str(path))


class TestValidateConfig:
    def test_missing_sections(self):
        issues = validate_config({})
        assert "Missing required section: matching" in issues

    def test_weights_must_sum_to_one(self, config_path):
        config = load_config(str(config_path))
        config["matching"]["weights"]["industry"] = 0.5
        assert any("Matching weights" in issue for issue in validate_config(config))

    def test_margins_must_be_ordered(self, config_path):
        config = load_config(str(config_path))
        config["projects"]["at_risk_margin"] = 5
        assert any("At-risk margin" in issue for issue in validate_config(config))


def test_get_config_value():
    config = {"matching": {"weights": {"industry": 0.2}}}

    assert get_config_value(config, "matching.weights.industry") == 0.2
    assert get_config_value(config, "matching.missing", 7) == 7
    assert get_config_value(config, "matching.weights.industry.deeper") is None


def test_section_dataclasses_read_shipped_config(config_path):
    config = load_config(str(config_path))

    assert StorageConfig.from_config(config).max_activities == 10
    assert ROIConfig.from_config(config).default_timeframe_months == 12
    assert ProgressConfig.from_config(config).at_risk_margin == 20
    assert MatchingConfig.from_config(config).default_limit == 5
