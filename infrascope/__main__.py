"""Entry point for Infrascope."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from textual.logging import TextualHandler

from infrascope import __version__
from infrascope.models.state.config_manager import (
    AppSettings,
    ConfigLoadError,
    ConfigManager,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str, log_file: str = "") -> None:
    """Configure root logging without writing over the terminal UI."""
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(Path(log_file).expanduser(), encoding="utf-8")
    else:
        handler = TextualHandler()
    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
    # httpx logs every request at INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="infrascope",
        description="Terminal dashboard for vCenter/cluster resource usage and the user directory",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Settings YAML file (default: $INFRASCOPE_CONFIG or ~/.config/infrascope/settings.yaml)",
    )

    # Data source
    parser.add_argument(
        "--api-url",
        default=None,
        help="Base URL of the infrastructure API",
    )
    parser.add_argument(
        "--mock",
        action="store_true",
        help="Serve data from a YAML file instead of the API",
    )
    parser.add_argument(
        "--mock-data",
        default=None,
        help="YAML file used with --mock (default: bundled sample)",
    )

    # Logging
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: from settings, INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of the Textual devtools console",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> AppSettings:
    """Load settings and apply CLI overrides.

    Raises:
        ConfigLoadError: If the settings file is invalid.
    """
    settings = ConfigManager.load(args.config)

    overrides: dict[str, Any] = {}
    if args.api_url:
        overrides["api_base_url"] = args.api_url
    if args.mock or args.mock_data:
        overrides["use_mock_data"] = True
    if args.mock_data:
        overrides["mock_data_path"] = args.mock_data
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_file:
        overrides["log_file"] = args.log_file
    return settings.model_copy(update=overrides)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        settings = build_settings(args)
    except ConfigLoadError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging("DEBUG" if settings.debug_mode else settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)
    logger.info("Starting Infrascope v%s", __version__)

    from infrascope.app import InfrascopeApp

    InfrascopeApp(settings=settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
