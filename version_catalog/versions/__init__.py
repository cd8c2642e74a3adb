"""Version management module."""

from .channels import filter_by_channels, get_release_channel
from .defaults import get_default_version
from .formats import is_expected_format, migrate_versions
from .manager import VersionManager
from .models import (
    AggregatedVersionRecord, LegacyVersionRecord, ReleaseChannel,
    VersionRecord, VersionSource, VersionState,
)
from .normalize import normalize_version
from .persistence import LoadFailure, LoadResult, VersionKeys, VersionStorage, is_aggregated
from .snapshot import load_bundled_versions
from .store import JsonFileStore, KeyValueStore, MemoryStore

__all__ = [
    "AggregatedVersionRecord", "JsonFileStore", "KeyValueStore", "LegacyVersionRecord",
    "LoadFailure", "LoadResult", "MemoryStore", "ReleaseChannel", "VersionKeys",
    "VersionManager", "VersionRecord", "VersionSource", "VersionState", "VersionStorage",
    "filter_by_channels", "get_default_version", "get_release_channel", "is_aggregated",
    "is_expected_format", "load_bundled_versions", "migrate_versions", "normalize_version",
]
