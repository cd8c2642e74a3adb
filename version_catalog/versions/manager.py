"""Known and local version manager."""

import asyncio
import logging
from typing import Any, Callable, List, Optional

import aiohttp

from .. import config
from ..exceptions import VersionFetchError
from ..utils.async_http import AsyncHTTPClient
from .defaults import get_default_version
from .formats import is_expected_format
from .models import AggregatedVersionRecord, VersionRecord, VersionSource, VersionState
from .persistence import VersionStorage
from .snapshot import load_bundled_versions
from .store import KeyValueStore

logger = logging.getLogger(__name__)


class VersionManager:
    REGISTRY_URL = config.REGISTRY_URL

    def __init__(self, store: KeyValueStore,
                 snapshot_provider: Callable[[], List[VersionRecord]] = load_bundled_versions,
                 http_client: Optional[AsyncHTTPClient] = None,
                 registry_url: Optional[str] = None):
        self.storage = VersionStorage(store, snapshot_provider)
        self.registry_url = registry_url or self.REGISTRY_URL
        self.http_client = http_client
        self._owns_client = http_client is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def close(self):
        if self._owns_client and self.http_client:
            await self.http_client.close()
            self.http_client = None

    def get_all(self) -> List[AggregatedVersionRecord]:
        """Return both known and local versions, known first."""
        known = [
            AggregatedVersionRecord(**record.model_dump(), source=VersionSource.remote, state=VersionState.unknown)
            for record in self.storage.get_known_versions()
        ]
        local = [
            AggregatedVersionRecord(**record.model_dump(), source=VersionSource.local, state=VersionState.ready)
            for record in self.storage.get_local_versions()
        ]
        return known + local

    def add_local(self, record: VersionRecord) -> List[VersionRecord]:
        """Add a version to the local versions, unless its localPath is already there."""
        versions = self.storage.get_local_versions()

        if not any(v.localPath == record.localPath for v in versions):
            versions.append(record)

        self.storage.save_local_versions(versions)
        return versions

    async def fetch(self) -> List[VersionRecord]:
        """Fetch the full version list from the registry and persist it."""
        if self.http_client is None:
            self.http_client = AsyncHTTPClient()

        try:
            data = await self.http_client.get_json(self.registry_url)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise VersionFetchError(self.registry_url, str(e)) from e

        versions = data.get("versions") if isinstance(data, dict) else None
        if not isinstance(versions, dict):
            raise VersionFetchError(self.registry_url, "response has no 'versions' mapping")

        output = [VersionRecord(version=str(version)) for version in versions]

        if output and is_expected_format(output):
            logger.info(f"Fetched new versions (Count: {len(output)})")
            self.storage.save_known_versions(output)

        return output

    async def refresh_and_get_all(self) -> List[AggregatedVersionRecord]:
        """Try to refresh the known versions, then return whatever is stored."""
        try:
            await self.fetch()
        except Exception as e:
            logger.warning(f"Failed to fetch versions: {e}")

        return self.get_all()

    def get_default(self, known_versions: Optional[List[Any]] = None) -> str:
        """Pick the version to preselect, honouring the remembered selection."""
        if known_versions is None:
            known_versions = self.get_all()
        return get_default_version(known_versions, self.storage.get_remembered_version())

    def remember(self, version: str) -> None:
        self.storage.set_remembered_version(version)
