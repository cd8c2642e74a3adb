"""Persistence of the known and local version collections."""

import json
import logging
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional

from pydantic import BaseModel, ValidationError

from .formats import is_expected_format, migrate_versions
from .models import AggregatedVersionRecord, VersionRecord, VersionSource
from .store import KeyValueStore

logger = logging.getLogger(__name__)

REMEMBERED_VERSION_KEY = "version"


class VersionKeys(str, Enum):
    local = "local-electron-versions"
    known = "known-electron-versions"


class LoadFailure(str, Enum):
    missing = "missing"
    store_error = "store_error"
    parse_error = "parse_error"
    invalid_format = "invalid_format"


class LoadResult(BaseModel):
    """Outcome of reading one collection.

    ``records`` always holds something usable: the stored list, the
    migrated list or the fallback. ``failure`` says why the stored list
    was not used as-is.
    """
    records: List[VersionRecord]
    failure: Optional[LoadFailure] = None
    error: Optional[str] = None
    migrated: bool = False

    @property
    def ok(self) -> bool:
        return self.failure is None


def is_aggregated(record: Any) -> bool:
    """Does the record carry a provenance tag?"""
    if isinstance(record, AggregatedVersionRecord):
        return True
    return isinstance(record, dict) and record.get("source") is not None


def _source(record: Any) -> Optional[str]:
    if isinstance(record, dict):
        return record.get("source")
    return record.source


def _dump(record: Any) -> Any:
    if isinstance(record, BaseModel):
        return record.model_dump(mode="json", include={"version", "name", "localPath"}, exclude_none=True)
    return record


class VersionStorage:
    def __init__(self, store: KeyValueStore, snapshot_provider: Callable[[], List[VersionRecord]]):
        self.store = store
        self.snapshot_provider = snapshot_provider

    def _fallback(self, key: VersionKeys) -> List[VersionRecord]:
        if key is VersionKeys.known:
            return list(self.snapshot_provider())
        return []

    def read(self, key: VersionKeys) -> LoadResult:
        """Read a collection without raising on bad stored data."""
        try:
            raw = self.store.get(key.value)
        except Exception as e:
            return LoadResult(records=self._fallback(key), failure=LoadFailure.store_error, error=str(e))

        if not raw:
            return LoadResult(records=self._fallback(key), failure=LoadFailure.missing)

        try:
            parsed = json.loads(raw)
        except ValueError as e:
            return LoadResult(records=self._fallback(key), failure=LoadFailure.parse_error, error=str(e))

        if is_expected_format(parsed):
            return LoadResult(records=self._to_records(key, parsed))

        # Known versions can just be fetched again; non-list data was never a legacy list
        if key is VersionKeys.known or not isinstance(parsed, list):
            return LoadResult(
                records=self._fallback(key),
                failure=LoadFailure.invalid_format,
                error="stored versions do not match the expected format"
            )

        # Local versions might be in the pre-0.5 format
        migrated = migrate_versions(parsed)
        self.save_local_versions(migrated)
        return LoadResult(records=migrated, migrated=True)

    def _to_records(self, key: VersionKeys, entries: List[Any]) -> List[VersionRecord]:
        records = []
        for entry in entries:
            try:
                records.append(VersionRecord.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping unreadable {key.name} version {entry.get('version')!r}: {e.error_count()} error(s)")
        return records

    def load(self, key: VersionKeys) -> List[VersionRecord]:
        result = self.read(key)

        if result.failure is LoadFailure.missing:
            logger.debug(f"No stored {key.name} versions, using fallback")
        elif result.failure is not None:
            logger.warning(f"Reading {key.name} versions failed ({result.failure.value}: {result.error}), using fallback")
        elif result.migrated:
            logger.info(f"Migrated {len(result.records)} local versions from legacy format")

        return result.records

    def save(self, key: VersionKeys, records: Iterable[Any]) -> None:
        self.store.set(key.value, json.dumps([_dump(record) for record in records]))

    def get_known_versions(self) -> List[VersionRecord]:
        """Stored known versions, else the bundled snapshot."""
        return self.load(VersionKeys.known)

    def save_known_versions(self, records: Iterable[Any]) -> None:
        self.save(VersionKeys.known, records)

    def get_local_versions(self) -> List[VersionRecord]:
        """Versions the user added, else an empty list."""
        return self.load(VersionKeys.local)

    def save_local_versions(self, records: Iterable[Any]) -> None:
        """Save local versions, dropping anything tagged as remote."""
        filtered = [
            record for record in records
            if not is_aggregated(record) or _source(record) == VersionSource.local
        ]
        self.save(VersionKeys.local, filtered)

    def get_remembered_version(self) -> Optional[str]:
        try:
            return self.store.get(REMEMBERED_VERSION_KEY)
        except Exception as e:
            logger.warning(f"Reading remembered version failed: {e}")
            return None

    def set_remembered_version(self, version: str) -> None:
        self.store.set(REMEMBERED_VERSION_KEY, version)
