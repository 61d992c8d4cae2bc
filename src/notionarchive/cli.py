"""Command line entry point: `notion-archive`."""

# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from dotenv import load_dotenv

from notionarchive.config import get_database_table, get_default_token, get_task_settings
from notionarchive.errors import ConfigurationError
from notionarchive.invoker import invoke
from notionarchive.task import ArchiveTask
from notionarchive.util.logging import configure_logging

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="notion-archive",
        description="Archive or trash every page of selected Notion databases "
        "(dry run unless --execute is given)",
    )
    parser.add_argument(
        "--database",
        "-d",
        action="append",
        default=None,
        metavar="NAME",
        help="Database name to process; repeat for several (default: all known databases)",
    )
    parser.add_argument(
        "--filter",
        type=str,
        default=None,
        help="Notion filter object as JSON, or @path to a JSON file",
    )
    parser.add_argument(
        "--execute",
        action="store_true",
        help="Actually archive pages (without it, pages are only counted)",
    )
    parser.add_argument(
        "--no-trash",
        action="store_true",
        help="Set archived only, without moving pages to the trash",
    )
    parser.add_argument(
        "--token",
        type=str,
        default=None,
        help="Notion integration token (default: NOTION_TOKEN)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug messages",
    )
    return parser.parse_args(list(argv))


def _load_filter(value: Optional[str]) -> Optional[dict[str, Any]]:
    if value is None:
        return None

    text = value
    if value.startswith("@"):
        text = Path(value[1:]).read_text(encoding="utf-8")

    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        raise ValueError("--filter must be a JSON object")
    return parsed


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point. Returns the process exit code."""
    load_dotenv()
    args = _parse_args(argv if argv is not None else sys.argv[1:])
    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        settings = get_task_settings()
        database_table = get_database_table()
        filter = _load_filter(args.filter)
    except (ConfigurationError, ValueError, OSError):
        log.exception("CLI validation error")
        return EXIT_USAGE

    request: dict[str, Any] = {
        "databases": args.database,
        "filter": filter,
        "dryRun": not args.execute,
        "archiveInstead": not args.no_trash,
    }
    if args.token:
        request["notionToken"] = args.token

    response = invoke(
        request,
        default_token=get_default_token(),
        task=ArchiveTask(settings, database_table=database_table),
    )
    print(json.dumps(response.body, indent=2))

    if response.ok:
        return EXIT_OK
    if response.status_code == 400:
        return EXIT_USAGE
    return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
