"""Bundled static snapshot of known versions."""

import json
from importlib import resources
from typing import List

from .models import VersionRecord


def load_bundled_versions() -> List[VersionRecord]:
    """Load the releases.json shipped with the package."""
    text = (resources.files("version_catalog") / "static" / "releases.json").read_text(encoding="utf-8")
    return [VersionRecord(**entry) for entry in json.loads(text)]
