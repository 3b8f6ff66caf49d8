"""
Numeric helpers shared by the scoring components.

Scores are rounded half-up (floor(x + 0.5)) rather than with Python's
round-half-to-even, so that 12.5 becomes 13 everywhere a percentage is shown.
"""

import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)

_LEADING_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity."""
    return int(math.floor(value + 0.5))


def parse_number(value: Any, default: float = 0.0) -> float:
    """
    Safely coerce a form value to a float.

    Accepts numbers and numeric strings. A string with a numeric prefix
    ("12 months") yields that prefix; anything else yields the default.

    Args:
        value: Raw value (number, string, or None)
        default: Value returned when nothing numeric can be read

    Returns:
        Parsed float or default
    """
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, (int, float)):
        number = float(value)
        return default if math.isnan(number) else number

    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value.strip())
        if match:
            return float(match.group(0))
        if value.strip():
            logger.debug(f"Non-numeric value {value!r} coerced to {default}")
        return default

    logger.debug(f"Unsupported numeric type {type(value).__name__} coerced to {default}")
    return default


def clamp_score(value: float, lower: int = 0, upper: int = 100) -> int:
    """Round half-up and clamp to [lower, upper]."""
    return max(lower, min(upper, round_half_up(value)))
