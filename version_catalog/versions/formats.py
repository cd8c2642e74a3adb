"""Structural checks and migrations for persisted version lists."""

from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ValidationError

from .models import LegacyVersionRecord, VersionRecord


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, BaseModel):
        return getattr(entry, name, None)
    if isinstance(entry, dict):
        return entry.get(name)
    return None


def is_expected_format(items: Any) -> bool:
    """Is the given value a list of version records?

    Every entry needs a truthy ``version``. An empty list passes.
    """
    if not isinstance(items, list):
        return False
    return all(_field(entry, "version") for entry in items)


def migrate_versions(items: Optional[Iterable[Any]] = None) -> List[VersionRecord]:
    """Convert legacy local records ({tag_name, name, url}) to VersionRecords.

    Entries missing any of the three fields are dropped.
    """
    migrated = []

    for item in items or []:
        if not item or not isinstance(item, dict):
            continue

        try:
            legacy = LegacyVersionRecord(**item)
        except (TypeError, ValidationError):
            continue

        if not legacy.tag_name or not legacy.name or not legacy.url:
            continue

        migrated.append(VersionRecord(
            version=legacy.tag_name,
            name=legacy.name,
            localPath=legacy.url
        ))

    return migrated
