from datetime import datetime
from decimal import Decimal

from happy_hour.events import get_defaults
from happy_hour.formatting import (
    BORDER_WIDTH,
    format_defaults,
    format_event_confirmation,
    format_menu,
    format_price,
)
from happy_hour.menu import menu_sections
from happy_hour.models import EventRecord


def test_format_price_two_decimals():
    assert format_price(Decimal("5")) == "$5.00"
    assert format_price(Decimal("8.5"), "£") == "£8.50"


def test_format_defaults():
    text = format_defaults(get_defaults())
    assert "The Local Pub" in text
    assert "120 minutes" in text


def test_menu_block_is_bordered():
    lines = format_menu(menu_sections("Drinks")).splitlines()
    assert lines[0] == "=" * BORDER_WIDTH
    assert lines[-1] == "=" * BORDER_WIDTH
    assert "DRINKS:" in lines


def test_confirmation_block_order():
    record = EventRecord(
        event_id="abc",
        location="Rooftop Bar",
        date_time=datetime(2025, 12, 10, 17, 0),
        attendees=["Alice"],
        theme="Jazz",
        created=datetime(2025, 12, 1, 9, 0),
    )
    lines = format_event_confirmation(record).splitlines()
    assert lines == [
        "Happy hour event created!",
        "  Event ID:  abc",
        "  Location:  Rooftop Bar",
        "  Date/Time: 2025-12-10 17:00",
        "  Attendees: Alice",
        "  Theme:     Jazz",
    ]
