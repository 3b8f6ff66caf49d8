"""
Data loading functions for the alliance builder.

This module reads brand profiles, partner pools and partnership cases from
JSON, YAML and CSV files. Values are passed through as read; scoring code
handles missing or malformed fields.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Any

import pandas as pd
import yaml

from ..matching.schema import BrandProfile
from ..roi.schema import PartnershipCase

logger = logging.getLogger(__name__)

LIST_SEPARATOR = ";"

PARTNER_CSV_COLUMNS = [
    "id",
    "brandName",
    "industry",
    "companySize",
    "geographicFocus",
    "brandDescription",
    "values",
    "objectives",
]


def _read_structured(filepath: str, label: str) -> Any:
    """Read a JSON or YAML file, choosing the parser by extension."""
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"{label} file not found: {filepath}")

    logger.info(f"Loading {label.lower()} from {filepath}")
    with open(filepath, "r") as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if not data:
        raise ValueError(f"{label} file is empty: {filepath}")
    return data


def _split_list(cell: Any) -> List[str]:
    if not isinstance(cell, str):
        return []
    return [item.strip() for item in cell.split(LIST_SEPARATOR) if item.strip()]


def load_partner_pool(filepath: str, delimiter: str = ",") -> List[BrandProfile]:
    """
    Load a pool of candidate partner profiles.

    JSON files hold a list of profile objects (or ``{"partners": [...]}``).
    CSV files have one partner per row with columns PARTNER_CSV_COLUMNS;
    ``values`` and ``objectives`` are semicolon-separated.

    Args:
        filepath: Path to a .json or .csv file
        delimiter: Field delimiter for CSV files

    Returns:
        List of BrandProfile objects

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or has the wrong structure
    """
    path = Path(filepath)
    if path.suffix.lower() != ".csv":
        data = _read_structured(filepath, "Partner pool")
        if isinstance(data, dict):
            data = data.get("partners")
        if not isinstance(data, list):
            raise ValueError(f"Partner pool must be a list of profiles: {filepath}")
        partners = [BrandProfile.from_dict(item) for item in data]
        logger.info(f"Loaded {len(partners)} partners")
        return partners

    if not path.exists():
        raise FileNotFoundError(f"Partner pool file not found: {filepath}")

    logger.info(f"Loading partner pool from {filepath} (delimiter: {repr(delimiter)})")
    df = pd.read_csv(filepath, sep=delimiter, dtype=str, keep_default_na=False)

    if df.empty:
        raise ValueError(f"Partner pool file is empty: {filepath}")

    missing = [c for c in ("industry", "companySize", "geographicFocus") if c not in df.columns]
    if missing:
        raise ValueError(f"Partner pool missing columns: {missing}")

    ignored = [c for c in df.columns if c not in PARTNER_CSV_COLUMNS]
    if ignored:
        logger.warning(f"Ignoring unknown partner columns: {ignored}")

    partners = []
    for row in df.to_dict(orient="records"):
        partners.append(BrandProfile(
            id=row.get("id") or None,
            brand_name=row.get("brandName", ""),
            brand_description=row.get("brandDescription", ""),
            industry=row["industry"],
            company_size=row["companySize"],
            geographic_focus=row["geographicFocus"],
            values=_split_list(row.get("values")),
            objectives=_split_list(row.get("objectives")),
        ))

    logger.info(f"Loaded {len(partners)} partners with {len(df.columns)} columns")
    return partners


def load_brand_profile(filepath: str) -> BrandProfile:
    """
    Load a single brand profile from JSON or YAML.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or not a mapping
    """
    data = _read_structured(filepath, "Brand profile")
    if not isinstance(data, dict):
        raise ValueError(f"Brand profile must be a mapping: {filepath}")
    return BrandProfile.from_dict(data)


def load_partnership_case(filepath: str) -> PartnershipCase:
    """
    Load a partnership case for ROI assessment from JSON or YAML.

    The file mirrors the assessment form:

        investment: {directCosts: 10000, staffHours: 120, hourlyRate: 50}
        returns: {directRevenue: 2500, costSavings: 500}
        timeframeMonths: 12
        strategicFactors: {audienceReach: 4, brandAlignment: 5, ...}
        riskFactors: {investmentSize: 2, timelineRisk: 3, ...}

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or not a mapping
    """
    data = _read_structured(filepath, "Partnership case")
    if not isinstance(data, dict):
        raise ValueError(f"Partnership case must be a mapping: {filepath}")

    unknown = set(data) - {"investment", "returns", "timeframeMonths", "strategicFactors", "riskFactors"}
    if unknown:
        logger.debug(f"Partnership case has extra keys (treated as flat factors): {sorted(unknown)}")
    return PartnershipCase.from_dict(data)

