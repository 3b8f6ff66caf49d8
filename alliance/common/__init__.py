"""Shared numeric and record helpers."""

from .numeric import round_half_up, parse_number, clamp_score
from .records import generate_id, utc_now_iso, today_iso, parse_date, apply_patch

__all__ = [
    "round_half_up",
    "parse_number",
    "clamp_score",
    "generate_id",
    "utc_now_iso",
    "today_iso",
    "parse_date",
    "apply_patch",
]
