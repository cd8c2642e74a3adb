"""Tests for release channels and version normalization."""

import pytest

from version_catalog.versions import (
    ReleaseChannel, VersionRecord, filter_by_channels, get_release_channel, normalize_version,
)


@pytest.mark.parametrize("tag, channel", [
    ("10.0.0-beta.1", ReleaseChannel.beta),
    ("10.0.0-nightly.1", ReleaseChannel.nightly),
    ("10.0.0-unsupported.1", ReleaseChannel.unsupported),
    ("10.0.0", ReleaseChannel.stable),
    ("11.0.0-nightly-beta", ReleaseChannel.beta),
])
def test_release_channel(tag, channel):
    assert get_release_channel(VersionRecord(version=tag)) == channel


def test_release_channel_of_dict_without_version():
    assert get_release_channel({}) == ReleaseChannel.stable
    assert get_release_channel({"version": "2.0.0-beta.3"}) == ReleaseChannel.beta


def test_filter_by_channels_keeps_order():
    records = [VersionRecord(version=v) for v in ("3.0.0", "3.0.0-beta.1", "2.0.0", "4.0.0-nightly.1")]

    stable = filter_by_channels(records, [ReleaseChannel.stable])
    prerelease = filter_by_channels(records, {ReleaseChannel.beta, ReleaseChannel.nightly})

    assert [r.version for r in stable] == ["3.0.0", "2.0.0"]
    assert [r.version for r in prerelease] == ["3.0.0-beta.1", "4.0.0-nightly.1"]


@pytest.mark.parametrize("raw, expected", [
    ("1.2.3", "1.2.3"),
    ("v1.2.3", "1.2.3"),
    ("  V10.0.0-beta.1 ", "10.0.0-beta.1"),
    ("electron@12.0.0", "12.0.0"),
    ("garbage", None),
    ("1.2", None),
    ("", None),
    (None, None),
])
def test_normalize_version(raw, expected):
    assert normalize_version(raw) == expected
