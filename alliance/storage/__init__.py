"""Persistence of the application's root document."""

from .store import (
    AppStore,
    StorageConfig,
    DataImportError,
    default_document,
    validate_imported_data,
    unwrap_legacy_document,
    create_store_from_config,
)

__all__ = [
    "AppStore",
    "StorageConfig",
    "DataImportError",
    "default_document",
    "validate_imported_data",
    "unwrap_legacy_document",
    "create_store_from_config",
]
