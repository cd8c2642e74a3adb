"""Data models for known and local versions."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class VersionSource(str, Enum):
    remote = "remote"
    local = "local"


class VersionState(str, Enum):
    unknown = "unknown"
    ready = "ready"
    downloading = "downloading"


class ReleaseChannel(str, Enum):
    stable = "Stable"
    beta = "Beta"
    nightly = "Nightly"
    unsupported = "Unsupported"


class VersionRecord(BaseModel):
    """A known or local release, as persisted."""
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    version: str
    name: Optional[str] = None
    localPath: Optional[str] = None


class LegacyVersionRecord(BaseModel):
    """Local record shape written by old releases (GitHub release style)."""
    model_config = ConfigDict(extra="ignore")

    tag_name: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None


class AggregatedVersionRecord(VersionRecord):
    """Read-model handed to pickers; never persisted."""
    source: VersionSource
    state: VersionState = VersionState.unknown
