"""CLI entry point for imdbscraper with subcommands."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from imdbscraper.client import ImdbClient, create_client
from imdbscraper.errors import ImdbError
from imdbscraper.settings import SettingsError, load_settings

logger = logging.getLogger(__name__)

COMMANDS = ("watchlist", "lists", "ratings", "all")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with subcommands.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        description="Export IMDb watchlist, lists and ratings as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--config",
        help="Path to config.toml",
    )

    subs = parser.add_subparsers(dest="command")
    helps = {
        "watchlist": "Export the watchlist",
        "lists": "Export all custom lists",
        "ratings": "Export ratings",
        "all": "Export watchlist, lists and ratings",
    }
    for name in COMMANDS:
        sub = subs.add_parser(name, help=helps[name])
        sub.add_argument(
            "-o",
            "--output",
            help="Output JSON file (default: stdout)",
        )

    return parser


def collect(client: ImdbClient, command: str) -> dict[str, Any]:
    """Run the fetches a subcommand asks for.

    Args:
        client: Hydrated IMDb client.
        command: One of COMMANDS.

    Returns:
        JSON-ready mapping keyed by export kind.
    """
    payload: dict[str, Any] = {}
    if command in ("watchlist", "all"):
        payload["watchlist"] = client.fetch_watchlist().to_dict()
    if command in ("lists", "all"):
        payload["lists"] = [
            imdb_list.to_dict() for imdb_list in client.fetch_all_lists()
        ]
    if command in ("ratings", "all"):
        payload["ratings"] = [
            item.to_dict() for item in client.fetch_ratings()
        ]
    return payload


def _write(payload: dict[str, Any], output: str | None) -> None:
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        logger.info("Saved export to %s", output)
    else:
        sys.stdout.write(text + "\n")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Args:
        argv: Argument list. Uses sys.argv if None.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config_path = Path(args.config) if args.config else None
    settings = load_settings(config_path=config_path)

    try:
        with create_client(settings) as client:
            payload = collect(client, args.command)
    except (SettingsError, ImdbError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    _write(payload, args.output)


if __name__ == "__main__":
    main()
