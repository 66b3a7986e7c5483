"""Delete image files under the public directory that no record references."""

from __future__ import annotations

import argparse
import logging

from catalog_api.assets.store import AssetStore
from catalog_api.config.settings import get_settings
from catalog_api.service.sweeper import AssetSweeper


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Remove orphaned catalog images.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only list orphaned files, do not delete them.",
    )
    parser.add_argument(
        "--log-level",
        choices=["critical", "error", "warning", "info", "debug"],
        default="info",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    settings = get_settings()
    sweeper = AssetSweeper(AssetStore(settings.resolved_public_dir()))
    orphans = sweeper.sweep(dry_run=args.dry_run)
    verb = "Found" if args.dry_run else "Removed"
    print(f"{verb} {len(orphans)} orphaned file(s).")
    for path in orphans:
        print(f"  {path}")


if __name__ == "__main__":
    main()
