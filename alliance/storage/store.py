"""
File-backed root document store.

The application state is a single JSON document:

    {
        "profile": {...} | null,
        "partners": [...],
        "collaborations": [...],
        "activities": [...],        # newest first, capped
        "customMetrics": [...],
        "settings": {"theme": "default", "fontSize": "medium", "compactView": false}
    }

It is persisted as an envelope ``{"initialized": bool, "data": {...}}`` under
a storage key inside a JSON file, so several stores can share one file.
Every mutating method saves before returning.
"""

import copy
import json
import logging
from dataclasses import dataclass, asdict, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..common import generate_id, utc_now_iso
from ..matching.schema import BrandProfile
from ..projects.schema import Collaboration

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "theme": "default",
    "fontSize": "medium",
    "compactView": False,
}

DOCUMENT_SECTIONS = ("profile", "partners", "collaborations", "activities", "customMetrics", "settings")


class DataImportError(ValueError):
    """Raised when an imported document cannot be used."""


def default_document() -> Dict[str, Any]:
    """A fresh, empty root document."""
    return {
        "profile": None,
        "partners": [],
        "collaborations": [],
        "activities": [],
        "customMetrics": [],
        "settings": dict(DEFAULT_SETTINGS),
    }


@dataclass
class StorageConfig:
    """
    Configuration for the document store.

    Attributes:
        path: JSON file holding the stored envelopes
        storage_key: Key of this application's envelope inside the file
        max_activities: Number of recent activities kept
    """
    path: str = "data/alliance_store.json"
    storage_key: str = "strategicAllianceBuilder"
    max_activities: int = 10

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.storage_key:
            raise ValueError("storage_key must not be empty")
        if self.max_activities < 1:
            raise ValueError(f"max_activities must be at least 1, got {self.max_activities}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "StorageConfig":
        return cls(**{k: v for k, v in d.items() if k in cls.__dataclass_fields__})

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "StorageConfig":
        """Create from main config dictionary."""
        return cls.from_dict(config.get("storage", {}))


def validate_imported_data(envelope: Any) -> List[str]:
    """
    Check that an imported object is a usable store envelope.

    Args:
        envelope: Parsed JSON

    Returns:
        List of problems (empty if valid)
    """
    if not isinstance(envelope, dict):
        return ["Imported data must be a JSON object"]

    issues = []
    for key in ("initialized", "data"):
        if key not in envelope:
            issues.append(f"Missing required key: {key}")

    data = envelope.get("data")
    if "data" in envelope and not isinstance(data, dict):
        issues.append("'data' must be an object")
    elif isinstance(data, dict):
        issues.extend(_document_issues(data))
    return issues


def _document_issues(data: Dict[str, Any]) -> List[str]:
    issues = []
    if data.get("profile") is not None and not isinstance(data["profile"], dict):
        issues.append("'profile' must be an object or null")
    for section in ("partners", "collaborations", "activities", "customMetrics"):
        if section not in data:
            continue
        if not isinstance(data[section], list):
            issues.append(f"'{section}' must be a list")
        elif not all(isinstance(item, dict) for item in data[section]):
            issues.append(f"Every entry of '{section}' must be an object")
    if "settings" in data and not isinstance(data["settings"], dict):
        issues.append("'settings' must be an object")
    return issues


def unwrap_legacy_document(parsed: Any) -> Any:
    """
    Wrap a bare root document (the older export format) in a store envelope.

    Objects that already carry ``data`` or lack every document section are
    returned unchanged.
    """
    if not isinstance(parsed, dict) or "data" in parsed:
        return parsed
    if not any(section in parsed for section in DOCUMENT_SECTIONS):
        return parsed
    logger.info("Importing a bare document; treating it as initialized")
    return {"initialized": True, "data": parsed}


class AppStore:
    """
    Root document store.

    Attributes:
        config: StorageConfig instance
        initialized: Whether the application has completed first-run setup
        data: The root document
    """

    def __init__(self, config: Optional[StorageConfig] = None):
        self.config = config or StorageConfig()
        self.config.validate()
        self.initialized = False
        self.data = default_document()

    @property
    def path(self) -> Path:
        return Path(self.config.path)

    def envelope(self) -> Dict[str, Any]:
        return {"initialized": self.initialized, "data": self.data}

    def _read_file(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            content = f.read()
        if not content.strip():
            return {}
        return json.loads(content)

    def load(self) -> bool:
        """
        Load the stored envelope, keeping defaults if nothing is stored.

        Returns:
            True if a stored document was found
        """
        stored = self._read_file().get(self.config.storage_key)
        if stored is None:
            logger.info(f"No stored data under '{self.config.storage_key}' in {self.path}")
            return False

        self.initialized = bool(stored.get("initialized"))
        self.data = self._with_defaults(stored.get("data") or {})
        logger.info(f"Loaded store from {self.path}")
        return True

    def save(self) -> None:
        """Write the envelope under the storage key, preserving other keys in the file."""
        contents = self._read_file()
        contents[self.config.storage_key] = self.envelope()

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(contents, f, indent=2)
        logger.debug(f"Saved store to {self.path}")

    def ensure_initialized(self) -> bool:
        """
        Mark first-run setup as done.

        Returns:
            True if this call performed the first-run initialization
        """
        if self.initialized:
            return False
        self.initialized = True
        self.save()
        return True

    def clear(self) -> None:
        """Reset the document to defaults and save."""
        self.data = default_document()
        self.save()
        logger.info("Cleared all stored data")

    @staticmethod
    def _with_defaults(data: Dict[str, Any]) -> Dict[str, Any]:
        document = default_document()
        document.update(data)
        settings = dict(DEFAULT_SETTINGS)
        settings.update(data.get("settings") or {})
        document["settings"] = settings
        return document

    def export_json(self) -> str:
        """Serialize the envelope as pretty-printed JSON."""
        return json.dumps(self.envelope(), indent=2)

    def import_json(self, text: Union[str, bytes]) -> None:
        """
        Replace the document with an exported envelope.

        A bare root document (no ``initialized``/``data`` wrapper) is also
        accepted and imported as initialized.

        Args:
            text: JSON text, or UTF-8 encoded bytes

        Raises:
            DataImportError: If the text is not valid JSON or not a store envelope
        """
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as e:
                raise DataImportError(f"File is not UTF-8 text: {e}") from e
        try:
            envelope = unwrap_legacy_document(json.loads(text))
        except (TypeError, json.JSONDecodeError) as e:
            raise DataImportError(f"Invalid JSON: {e}") from e

        issues = validate_imported_data(envelope)
        if issues:
            raise DataImportError("; ".join(issues))

        self.initialized = bool(envelope["initialized"])
        self.data = self._with_defaults(copy.deepcopy(envelope["data"]))
        self.save()
        logger.info("Imported data")

    def add_activity(self, description: str) -> Dict[str, Any]:
        """Record an activity at the front of the log, keeping the most recent entries."""
        activity = {
            "id": generate_id(),
            "description": description,
            "timestamp": utc_now_iso(),
        }
        activities = [activity] + list(self.data["activities"])
        self.data["activities"] = activities[:self.config.max_activities]
        self.save()
        return activity

    def add_custom_metric(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        metric = {
            "id": generate_id(),
            "name": fields.get("name", ""),
            "description": fields.get("description", ""),
            "type": fields.get("type", ""),
            "frequency": fields.get("frequency", ""),
            "createdAt": utc_now_iso(),
        }
        self.data["customMetrics"].append(metric)
        self.save()
        self.add_activity(f"Added custom metric: {metric['name']}")
        return metric

    def delete_custom_metric(self, metric_id: str) -> bool:
        """Remove a custom metric; returns False if no metric has that id."""
        metrics = self.data["customMetrics"]
        remaining = [m for m in metrics if m.get("id") != metric_id]
        if len(remaining) == len(metrics):
            logger.warning(f"Custom metric not found: {metric_id}")
            return False
        self.data["customMetrics"] = remaining
        self.save()
        return True

    def update_settings(self, **changes: Any) -> Dict[str, Any]:
        """Update display settings (theme, fontSize, compactView); other keys are ignored."""
        settings = dict(self.data["settings"])
        for key, value in changes.items():
            if key not in DEFAULT_SETTINGS:
                logger.debug(f"Ignoring unknown setting: {key}")
                continue
            settings[key] = value
        self.data["settings"] = settings
        self.save()
        return settings

    def get_profile(self) -> Optional[BrandProfile]:
        profile = self.data.get("profile")
        return BrandProfile.from_dict(profile) if profile else None

    def set_profile(self, profile: Union[BrandProfile, Dict[str, Any]]) -> BrandProfile:
        """Store the user's brand profile, stamping creation and update times."""
        if isinstance(profile, dict):
            profile = BrandProfile.from_dict(profile)
        now = utc_now_iso()
        existing = self.data.get("profile") or {}
        profile = replace(
            profile,
            created_at=profile.created_at or existing.get("createdAt") or now,
            updated_at=now,
        )

        self.data["profile"] = profile.to_dict()
        self.save()
        self.add_activity("Updated brand profile")
        return profile

    def get_partners(self) -> List[BrandProfile]:
        return [BrandProfile.from_dict(p) for p in self.data["partners"]]

    def set_partners(self, partners: List[Union[BrandProfile, Dict[str, Any]]]) -> None:
        """Replace the partner pool."""
        self.data["partners"] = [
            p.to_dict() if isinstance(p, BrandProfile) else dict(p) for p in partners
        ]
        self.save()

    def get_collaborations(self) -> List[Collaboration]:
        return [Collaboration.from_dict(c) for c in self.data["collaborations"]]

    def get_collaboration(self, collaboration_id: str) -> Optional[Collaboration]:
        for c in self.data["collaborations"]:
            if c.get("id") == collaboration_id:
                return Collaboration.from_dict(c)
        return None

    def upsert_collaboration(self, collaboration: Collaboration) -> None:
        """Insert or replace a collaboration by id."""
        record = collaboration.to_dict()
        collaborations = list(self.data["collaborations"])
        for i, existing in enumerate(collaborations):
            if existing.get("id") == collaboration.id:
                collaborations[i] = record
                break
        else:
            collaborations.append(record)
            logger.info(f"Created collaboration '{collaboration.name}'")
        self.data["collaborations"] = collaborations
        self.save()

    def remove_collaboration(self, collaboration_id: str) -> bool:
        collaborations = self.data["collaborations"]
        remaining = [c for c in collaborations if c.get("id") != collaboration_id]
        if len(remaining) == len(collaborations):
            logger.warning(f"Collaboration not found: {collaboration_id}")
            return False
        self.data["collaborations"] = remaining
        self.save()
        return True


def create_store_from_config(config: Dict[str, Any]) -> AppStore:
    """Factory function to create and load an AppStore from config."""
    store = AppStore(StorageConfig.from_config(config))
    store.load()
    return store
