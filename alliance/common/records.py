"""
Record helpers: identifiers, timestamps and allow-listed patch updates.
"""

import logging
import re
import uuid
from dataclasses import fields, replace
from datetime import date, datetime, timezone
from typing import Any, Dict, Iterable, Optional

logger = logging.getLogger(__name__)

# Never patched, whatever the allow-list says
PROTECTED_FIELDS = frozenset({"id", "created_at"})

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def generate_id() -> str:
    """Generate a short unique identifier."""
    return uuid.uuid4().hex[:12]


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def today_iso() -> str:
    """Current UTC date as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a date or timestamp into a timezone-aware UTC datetime.

    Bare dates ("2025-01-15") are taken as midnight UTC.

    Args:
        value: datetime, date, ISO string, or None

    Returns:
        Aware datetime, or None if the value is empty or unparseable
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            logger.warning(f"Could not parse date: {value!r}")
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)

    logger.warning(f"Unsupported date type: {type(value).__name__}")
    return None


def to_snake_case(key: str) -> str:
    """Convert a camelCase key (as persisted) to the snake_case field name."""
    return _CAMEL_BOUNDARY.sub("_", key).lower()


def apply_patch(record: Any, updates: Dict[str, Any], mutable_fields: Iterable[str]) -> Any:
    """
    Merge a partial update into a dataclass record, returning a new record.

    Keys may be given in camelCase or snake_case. Only keys in
    ``mutable_fields`` are applied; ``id`` and ``created_at`` are always
    rejected. ``updated_at`` is refreshed when the record has one.

    Args:
        record: Dataclass instance to patch
        updates: Mapping of field name to new value
        mutable_fields: Allow-list of snake_case field names

    Returns:
        New dataclass instance with the accepted updates applied
    """
    allowed = set(mutable_fields) - PROTECTED_FIELDS
    accepted: Dict[str, Any] = {}

    for key, value in updates.items():
        name = to_snake_case(key)
        if name in allowed:
            accepted[name] = value
        else:
            logger.debug(f"Ignoring non-patchable field '{key}' on {type(record).__name__}")

    if "updated_at" in {f.name for f in fields(record)}:
        accepted["updated_at"] = utc_now_iso()

    return replace(record, **accepted)
