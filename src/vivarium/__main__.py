"""Vivarium entry point.

Changes:
  - 2026-10-02: Added --features to print the feature table and exit.
  - 2026-09-20: Rich logging for console output.
"""

from __future__ import annotations

import argparse
import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

from rich.console import Console
from rich.table import Table

from vivarium.config import Settings, get_settings
from vivarium.features.catalog import create_feature_registry
from vivarium.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _version() -> str:
    try:
        return get_version("vivarium")
    except PackageNotFoundError:
        return "unknown"


def print_features(settings: Settings, console: Console | None = None) -> None:
    """Print every catalog feature with its flag state."""
    registry = create_feature_registry(settings.features)

    table = Table(title="Vivarium features")
    table.add_column("Feature")
    table.add_column("Enabled")
    table.add_column("Routes", justify="right")
    table.add_column("Navigation", justify="right")

    for feature in registry:
        table.add_row(
            feature.name,
            "yes" if feature.enabled else "no",
            str(len(registry.get_feature_routes(feature.name))),
            str(len(registry.get_feature_navigation(feature.name))),
        )

    (console or Console()).print(table)


def run_shell(settings: Settings, host: str, port: int, dev: bool = False) -> None:
    import uvicorn

    logger.info("Starting Vivarium on http://%s:%d (record API: %s)", host, port, settings.api_base_url)
    if dev:
        uvicorn.run(
            "vivarium.shell.app:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            log_level="debug",
        )
    else:
        from vivarium.shell.app import create_app

        uvicorn.run(create_app(settings), host=host, port=port)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="vivarium",
        description="Vivarium - reptile keeping dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  vivarium                           Start the dashboard shell
  vivarium --features                List features and whether they are enabled
  VIVARIUM_FEATURES__TODOS=true vivarium
                                     Start with the todos feature switched on
""",
    )
    parser.add_argument("--host", type=str, default=None, help="Host to bind (default from settings)")
    parser.add_argument("--port", "-p", type=int, default=None, help="Port (default from settings)")
    parser.add_argument("--dev", action="store_true", help="Development mode with auto-reload")
    parser.add_argument(
        "--features", action="store_true", help="Print the feature table and exit"
    )
    parser.add_argument(
        "--version", "-v", action="version", version=f"%(prog)s {_version()}"
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(level=settings.log_level)

    if args.features:
        print_features(settings)
        return 0

    run_shell(
        settings,
        host=args.host or settings.host,
        port=args.port or settings.port,
        dev=args.dev,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
