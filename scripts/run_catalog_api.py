"""Launch the catalog API after checking the public asset directories."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from catalog_api.assets.store import AssetStore
from catalog_api.config.settings import get_api_settings, get_settings

LOGGER = logging.getLogger("catalog_api.runner")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the catalog API.")
    parser.add_argument("--host", default=None, help="Bind address (overrides CATALOG_API_HOST).")
    parser.add_argument("--port", type=int, default=None, help="Port (overrides CATALOG_API_PORT).")
    parser.add_argument("--reload", action="store_true", help="Enable uvicorn auto-reload.")
    parser.add_argument(
        "--log-level",
        choices=["critical", "error", "warning", "info", "debug", "trace"],
        default=None,
        help="Log level for catalog and uvicorn output.",
    )
    return parser.parse_args()


def ensure_asset_dirs() -> None:
    """Exit before serving if uploads could not be written."""

    store = AssetStore(get_settings().resolved_public_dir())
    problems = store.unwritable_categories()
    if problems:
        missing = ", ".join(str(store.resolve(category)) for category in problems)
        raise SystemExit(f"Catalog API failed to start: asset directories missing or not writable: {missing}")
    LOGGER.info("Serving assets from %s", store.root)


def main() -> None:
    args = parse_args()
    api_settings = get_api_settings()
    log_level = (args.log_level or api_settings.log_level).lower()
    # uvicorn's "trace" has no stdlib counterpart.
    root_level = logging.DEBUG if log_level == "trace" else getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(level=root_level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(logger_name).setLevel(root_level)

    ensure_asset_dirs()

    uvicorn.run(
        "catalog_api.app:app",
        host=args.host or api_settings.host,
        port=args.port or api_settings.port,
        reload=args.reload or api_settings.reload,
        log_level=log_level if log_level != "trace" else "debug",
        log_config=None,
    )


if __name__ == "__main__":
    main()
