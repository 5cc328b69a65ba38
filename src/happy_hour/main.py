"""Entry point for the happy hour command line."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from functools import partial
from typing import Optional

import structlog
from pydantic import ValidationError

from .config import Settings
from .errors import InvalidArgumentError
from .events import create_event, get_defaults, get_info
from .formatting import format_defaults, format_info
from .hardware import get_host_serial_number, read_host_serial
from .menu import show_menu
from .models import MenuCategory, PlannedAction
from .utils import get_zone, now_in_timezone, parse_datetime


def configure_logging(level: int = logging.INFO) -> None:
    """Configure structlog + stdlib logging."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


LOGGER = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """CLI argument parsing."""
    parser = argparse.ArgumentParser(prog="happy-hour", description="Happy hour event utilities.")
    parser.add_argument("--verbose", action="store_true", help="Show diagnostic trace output.")
    commands = parser.add_subparsers(dest="command", required=True)

    defaults = commands.add_parser("defaults", help="Show the standard happy hour settings.")
    defaults.add_argument("--json", action="store_true", help="Print the record as JSON.")

    info = commands.add_parser("info", help="Describe a happy hour at a location and date.")
    info.add_argument("--location", help="Venue name; the default venue is used when omitted.")
    info.add_argument("--date", help="Date of the happy hour; today when omitted.")
    info.add_argument("--json", action="store_true", help="Print the record as JSON.")

    create = commands.add_parser("create-event", help="Create a happy hour event.")
    create.add_argument("--location", required=True, help="Venue name.")
    create.add_argument("--date", required=True, help="Date and time, e.g. 2025-12-10T17:00.")
    create.add_argument(
        "--attendee",
        dest="attendees",
        action="append",
        default=[],
        help="Attendee name; repeat for several attendees.",
    )
    create.add_argument("--theme", help="Optional event theme.")
    create.add_argument("--dry-run", action="store_true", help="Report the event without creating it.")
    create.add_argument("--confirm", action="store_true", help="Ask for confirmation before creating.")
    create.add_argument("--json", action="store_true", help="Print the created record as JSON.")

    menu = commands.add_parser("menu", help="Print the happy hour menu.")
    menu.add_argument(
        "--category",
        default=MenuCategory.ALL.value,
        help="One of: " + ", ".join(member.value for member in MenuCategory),
    )
    menu.add_argument("--include-prices", action="store_true", help="Show item prices.")

    commands.add_parser("serial", help="Show the host hardware serial number.")
    return parser


def resolve_date(value: str, timezone_name: str) -> datetime:
    """Parse a --date option in the configured zone or exit with a readable message."""
    try:
        parsed = parse_datetime(value)
    except ValueError as exc:
        raise SystemExit(f"Invalid --date: {value}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=get_zone(timezone_name))
    return parsed


def prompt_confirmation(plan: PlannedAction) -> bool:
    """Interactive confirmation used by ``create-event --confirm``."""
    answer = input(f'Perform the operation "{plan.action}" on target "{plan.target}"? [y/N] ')
    return answer.strip().lower() in {"y", "yes"}


def cli(argv: Optional[list[str]] = None) -> int:
    """Console script entrypoint."""
    args = build_parser().parse_args(argv)
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Error: invalid configuration: {exc}", file=sys.stderr)
        return 2
    configure_logging(logging.DEBUG if args.verbose else getattr(logging, settings.log_level))

    try:
        return _dispatch(args, settings)
    except InvalidArgumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    except Exception as exc:  # noqa: BLE001
        LOGGER.exception("command.failed", command=args.command, error=str(exc))
        return 1


def _dispatch(args: argparse.Namespace, settings: Settings) -> int:
    if args.command == "defaults":
        record = get_defaults()
        print(record.model_dump_json(by_alias=True) if args.json else format_defaults(record))
        return 0

    if args.command == "info":
        when = resolve_date(args.date, settings.timezone) if args.date else now_in_timezone(settings.timezone)
        info = get_info(args.location, when)
        print(info.model_dump_json(by_alias=True) if args.json else format_info(info))
        return 0

    if args.command == "create-event":
        when = resolve_date(args.date, settings.timezone)
        echo = partial(print, file=sys.stderr) if args.json else print
        record = create_event(
            args.location,
            when,
            args.attendees,
            args.theme,
            dry_run=args.dry_run,
            confirm=prompt_confirmation if args.confirm else None,
            echo=echo,
            now=now_in_timezone(settings.timezone),
        )
        if record is not None and args.json:
            print(record.model_dump_json(by_alias=True))
        return 0

    if args.command == "menu":
        show_menu(
            args.category,
            args.include_prices,
            currency_symbol=settings.currency_symbol,
        )
        return 0

    if args.command == "serial":
        lookup = get_host_serial_number(partial(read_host_serial, settings.serial_timeout_seconds))
        if not lookup.ok:
            print(f"Error: {lookup.error}", file=sys.stderr)
            return 1
        print(lookup.serial)
        return 0

    raise InvalidArgumentError(f"Unknown command '{args.command}'")  # pragma: no cover


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(cli())
