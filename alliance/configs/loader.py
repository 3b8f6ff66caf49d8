"""
Configuration loading and validation.

This module handles loading of YAML configuration files and
validates that all required fields are present.
"""

import logging
from pathlib import Path
from typing import Dict, Any, List

import yaml

logger = logging.getLogger(__name__)

REQUIRED_SECTIONS = ["global", "storage", "matching", "roi", "projects", "library"]


def load_config(filepath: str) -> Dict[str, Any]:
    """
    Load configuration from YAML file.

    Args:
        filepath: Path to the YAML configuration file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If the file is empty
        yaml.YAMLError: If YAML is invalid
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {filepath}")

    logger.info(f"Loading configuration from {filepath}")
    with open(filepath, "r") as f:
        config = yaml.safe_load(f)

    if config is None:
        raise ValueError(f"Configuration file is empty: {filepath}")

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration and return list of warnings/errors.

    Args:
        config: Configuration dictionary

    Returns:
        List of warning/error messages (empty if valid)
    """
    issues = []

    for section in REQUIRED_SECTIONS:
        if section not in config:
            issues.append(f"Missing required section: {section}")

    # Compatibility weights must sum to 1
    weights = get_config_value(config, "matching.weights")
    if isinstance(weights, dict):
        total = sum(weights.values())
        if abs(total - 1.0) > 0.01:
            issues.append(f"Matching weights don't sum to 1: {total}")

    # Progress blend must sum to 1
    task_weight = get_config_value(config, "projects.task_weight", 0.6)
    milestone_weight = get_config_value(config, "projects.milestone_weight", 0.4)
    if abs(task_weight + milestone_weight - 1.0) > 0.01:
        issues.append(f"Progress weights don't sum to 1: {task_weight} + {milestone_weight}")

    behind = get_config_value(config, "projects.behind_schedule_margin", 10)
    at_risk = get_config_value(config, "projects.at_risk_margin", 20)
    if at_risk <= behind:
        issues.append(f"At-risk margin ({at_risk}) must exceed behind-schedule margin ({behind})")

    if "storage" in config and "path" not in config["storage"]:
        issues.append("Missing storage.path")

    return issues


def get_config_value(config: Dict[str, Any], path: str, default: Any = None) -> Any:
    """
    Get a nested configuration value using dot notation.

    Args:
        config: Configuration dictionary
        path: Dot-separated path (e.g., "matching.weights.industry")
        default: Default value if path doesn't exist

    Returns:
        Configuration value or default
    """
    keys = path.split(".")
    value = config
    for key in keys:
        if isinstance(value, dict) and key in value:
            value = value[key]
        else:
            return default
    return value
