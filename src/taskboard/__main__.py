"""CLI entry point for taskboard."""

import argparse
from pathlib import Path

from . import __version__
from .cli.output import error, info
from .config import Settings
from .errors import BoardStorageError
from .logging import setup_logging
from .models import SortOrder


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="taskboard",
        description="Terminal kanban board with lists, users and a sticky to-do list",
    )
    parser.add_argument(
        "--state-file",
        type=Path,
        default=None,
        help="YAML file to keep the board in (default: in-memory only)",
    )
    parser.add_argument(
        "--sort",
        choices=[order.value for order in SortOrder],
        default=None,
        help="Initial task order inside columns (default: newest)",
    )
    parser.add_argument(
        "--no-demo",
        action="store_true",
        help="Start a new board with one empty list instead of sample data",
    )
    parser.add_argument(
        "--sticky",
        action="store_true",
        help="Open the sticky to-do list instead of the board",
    )
    parser.add_argument(
        "--serve-items",
        action="store_true",
        help="Run the item web service instead of the TUI",
    )
    parser.add_argument("--host", default=None, help="Item service bind address")
    parser.add_argument("--port", type=int, default=None, help="Item service port")
    parser.add_argument(
        "--items-db",
        type=Path,
        default=None,
        help="SQLite database for the item service",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase logging verbosity (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Path to write logs to file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Build settings from CLI args; unset flags fall back to the environment."""
    settings_kwargs: dict = {}
    if args.state_file:
        settings_kwargs["state_file"] = args.state_file
    if args.sort:
        settings_kwargs["sort_order"] = args.sort
    if args.no_demo:
        settings_kwargs["seed_demo"] = False
    if args.verbose:
        settings_kwargs["verbose"] = args.verbose
    if args.log_file:
        settings_kwargs["log_file"] = args.log_file
    if args.items_db:
        settings_kwargs["items_db"] = args.items_db
    if args.host:
        settings_kwargs["items_host"] = args.host
    if args.port:
        settings_kwargs["items_port"] = args.port
    return Settings(**settings_kwargs)


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    settings = build_settings(args)

    setup_logging(settings.verbose, settings.log_file, settings.state_file)

    if args.serve_items:
        from .web import serve

        info(f"Item service on http://{settings.items_host}:{settings.items_port}", f"({settings.items_db})")
        serve(settings.items_db, settings.items_host, settings.items_port)
        return

    # Import here so the item service does not pull in textual
    from .app import run

    try:
        run(settings, start_screen="sticky" if args.sticky else "board")
    except BoardStorageError as e:
        error(str(e))
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()
