"""Runtime configuration."""

import os
from pathlib import Path

REGISTRY_URL = os.environ.get("VERSION_CATALOG_REGISTRY_URL", "https://registry.npmjs.org/electron")

DATA_DIR = Path(os.environ.get("VERSION_CATALOG_DATA_DIR", Path.home() / ".cache" / "version_catalog"))
STORE_PATH = DATA_DIR / "store.json"
LOG_DIR = DATA_DIR
