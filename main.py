#!/usr/bin/env python3
"""Version catalog entry point"""

import argparse
import asyncio
import logging
from collections import Counter

from version_catalog import config
from version_catalog.utils import setup_logging
from version_catalog.versions import JsonFileStore, VersionManager, get_release_channel

logger = logging.getLogger(__name__)


async def main(offline: bool = False) -> int:
    """Refresh the catalog and report the default version."""
    setup_logging()

    store = JsonFileStore(config.STORE_PATH)
    async with VersionManager(store) as vm:
        if offline:
            versions = vm.get_all()
        else:
            versions = await vm.refresh_and_get_all()

        default = vm.get_default(versions)

    channels = Counter(get_release_channel(v).value for v in versions)
    print(f"Default version: {default}")
    for channel, count in sorted(channels.items()):
        print(f"  {channel}: {count}")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Refresh and inspect the version catalog")
    parser.add_argument("--offline", action="store_true", help="skip the registry refresh")
    args = parser.parse_args()
    try:
        raise SystemExit(asyncio.run(main(offline=args.offline)))
    except KeyboardInterrupt:
        pass
