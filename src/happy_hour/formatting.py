"""Console text builders for the happy hour records."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Sequence, Tuple

from .models import DefaultsRecord, EventRecord, InfoRecord, MenuItem, PlannedAction

BORDER_WIDTH = 40
DATETIME_FORMAT = "%Y-%m-%d %H:%M"

MenuSection = Tuple[str, Sequence[MenuItem]]


def format_price(price: Decimal, currency_symbol: str = "$") -> str:
    """Render a price with two decimal places."""
    return f"{currency_symbol}{price:,.2f}"


def format_defaults(defaults: DefaultsRecord) -> str:
    lines = [
        f"Location: {defaults.location}",
        f"Time:     {defaults.time}",
        f"Duration: {defaults.duration_minutes} minutes",
    ]
    return "\n".join(lines)


def format_info(info: InfoRecord) -> str:
    lines = [
        f"Happy hour at {info.location}",
        f"Date:     {info.date} ({info.day_of_week})",
        f"Time:     {info.time}",
        f"Duration: {info.duration}",
    ]
    return "\n".join(lines)


def format_event_confirmation(record: EventRecord) -> str:
    """Build the confirmation block printed after an event is created."""
    lines: list[str] = [
        "Happy hour event created!",
        f"  Event ID:  {record.event_id}",
        f"  Location:  {record.location}",
        f"  Date/Time: {record.date_time.strftime(DATETIME_FORMAT)}",
    ]
    if record.attendees:
        lines.append(f"  Attendees: {', '.join(record.attendees)}")
    if record.theme is not None:
        lines.append(f"  Theme:     {record.theme}")
    return "\n".join(lines)


def format_planned_action(plan: PlannedAction) -> str:
    """Describe an action skipped by a dry run."""
    return f'What if: Performing the operation "{plan.action}" on target "{plan.target}".'


def format_menu(
    sections: Iterable[MenuSection],
    *,
    include_prices: bool = False,
    currency_symbol: str = "$",
) -> str:
    """Render the selected menu sections inside a bordered block."""
    border = "=" * BORDER_WIDTH
    lines: list[str] = [border, "HAPPY HOUR MENU".center(BORDER_WIDTH), border]

    for title, items in sections:
        lines.append("")
        lines.append(f"{title.upper()}:")
        for item in items:
            if include_prices:
                lines.append(f"  - {item.name} - {format_price(item.price, currency_symbol)}")
            else:
                lines.append(f"  - {item.name}")

    lines.append("")
    lines.append(border)
    return "\n".join(lines)
