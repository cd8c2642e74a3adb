"""Default version selection."""

from typing import Optional, Sequence

from ..exceptions import CorruptedVersionDataError
from .models import VersionRecord
from .normalize import normalize_version


def _contains(known_versions: Sequence[VersionRecord], version: str) -> bool:
    return any(record.version == version for record in known_versions)


def get_default_version(known_versions: Sequence[VersionRecord], remembered: Optional[str] = None) -> str:
    """Returns a sensible default version string.

    Tries the remembered selection, then its normalized form, then the
    first known version. Raises CorruptedVersionDataError if there is
    nothing to pick from.
    """
    known_versions = known_versions or []

    if remembered and _contains(known_versions, remembered):
        return remembered

    # Self-heal: remembered version not formatted correctly
    normalized = normalize_version(remembered) if remembered else None
    if normalized and _contains(known_versions, normalized):
        return normalized

    # Self-heal: remembered version no longer known
    if remembered and known_versions:
        return known_versions[0].version

    if known_versions and known_versions[0].version:
        return known_versions[0].version

    raise CorruptedVersionDataError()
