"""Release channel classification."""

from typing import Any, Iterable, List

from .models import ReleaseChannel


def get_release_channel(record: Any) -> ReleaseChannel:
    """Return the release channel for a record (model or dict)."""
    if isinstance(record, dict):
        tag = record.get("version") or ""
    else:
        tag = getattr(record, "version", None) or ""

    if "beta" in tag:
        return ReleaseChannel.beta

    if "nightly" in tag:
        return ReleaseChannel.nightly

    if "unsupported" in tag:
        return ReleaseChannel.unsupported

    # Anything without a marker ships as stable
    return ReleaseChannel.stable


def filter_by_channels(records: Iterable[Any], channels: Iterable[ReleaseChannel]) -> List[Any]:
    """Keep records whose release channel is one of ``channels``."""
    wanted = set(channels)
    return [record for record in records if get_release_channel(record) in wanted]
