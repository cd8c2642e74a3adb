"""Shared fixtures."""

import pytest
from unittest.mock import AsyncMock

from version_catalog.versions import MemoryStore, VersionManager, VersionRecord, VersionStorage


class FailingStore(MemoryStore):
    """Store whose reads blow up."""

    def get(self, key):
        raise OSError("disk on fire")


def snapshot():
    return [VersionRecord(version="0.9.0"), VersionRecord(version="0.8.0")]


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def storage(store):
    return VersionStorage(store, snapshot)


@pytest.fixture
def http_client():
    return AsyncMock()


@pytest.fixture
def manager(store, http_client):
    return VersionManager(store, snapshot_provider=snapshot, http_client=http_client,
                          registry_url="https://registry.example/electron")


@pytest.fixture
def failing_store():
    return FailingStore()
