"""Version string normalization."""

import re
from typing import Optional

_VERSION_RE = re.compile(r"(\d+)\.(\d+)\.(\d+)(-[0-9A-Za-z.\-]+)?")


def normalize_version(raw: Optional[str]) -> Optional[str]:
    """Turn a messy version tag ("v1.2.3", "electron@1.2.3") into "1.2.3".

    Returns None if no MAJOR.MINOR.PATCH triple can be found.
    """
    if not raw:
        return None

    cleaned = raw.strip()
    if cleaned[:1] in ("v", "V"):
        cleaned = cleaned[1:]

    match = _VERSION_RE.search(cleaned)
    if not match:
        return None
    return match.group(0).rstrip(".-")
