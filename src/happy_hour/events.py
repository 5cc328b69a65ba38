"""Happy hour defaults, info lookups and event creation."""

from __future__ import annotations

import uuid
from datetime import date, datetime
from typing import Callable, Optional, Sequence

import structlog

from .formatting import DATETIME_FORMAT, format_event_confirmation, format_planned_action
from .models import SCHEDULED, DefaultsRecord, EventRecord, InfoRecord, PlannedAction
from .utils import day_name, describe_minutes

LOGGER = structlog.get_logger(__name__)

DEFAULT_LOCATION = "The Local Pub"
DEFAULT_TIME = "17:00"
DEFAULT_DURATION_MINUTES = 120

CREATE_ACTION = "Create happy hour event"


def get_defaults() -> DefaultsRecord:
    """Return the standard happy hour location, start time and duration."""
    return DefaultsRecord(
        location=DEFAULT_LOCATION,
        time=DEFAULT_TIME,
        duration_minutes=DEFAULT_DURATION_MINUTES,
    )


def get_info(
    location: Optional[str] = None,
    when: Optional[date] = None,
    *,
    defaults: Optional[DefaultsRecord] = None,
) -> InfoRecord:
    """
    Describe a happy hour at ``location`` on ``when``.

    Missing or empty locations fall back to the default venue, and ``when``
    defaults to the current moment. Time and duration always come from the
    defaults record.
    """
    defaults = defaults or get_defaults()
    when = when or datetime.now()
    LOGGER.debug("info.start", location=location, when=when.isoformat())

    if not location:
        location = defaults.location
        LOGGER.debug("info.default_location", location=location)

    info = InfoRecord(
        location=location,
        date=when.strftime("%Y-%m-%d"),
        time=defaults.time,
        duration=describe_minutes(defaults.duration_minutes),
        day_of_week=day_name(when),
    )
    LOGGER.debug("info.complete", date=info.date, day_of_week=info.day_of_week)
    return info


def plan_event(location: str, when: datetime) -> PlannedAction:
    """Describe the event that ``create_event`` would produce."""
    return PlannedAction(
        target=f"{location} on {when.strftime(DATETIME_FORMAT)}",
        action=CREATE_ACTION,
    )


def build_event_record(
    location: str,
    when: datetime,
    attendees: Optional[Sequence[str]] = None,
    theme: Optional[str] = None,
    *,
    now: Optional[datetime] = None,
) -> EventRecord:
    """Assemble a new event record with a fresh identifier."""
    return EventRecord(
        event_id=str(uuid.uuid4()),
        location=location,
        date_time=when,
        attendees=list(attendees or []),
        theme=theme,
        created=now or datetime.now(),
        status=SCHEDULED,
    )


def create_event(
    location: str,
    when: datetime,
    attendees: Optional[Sequence[str]] = None,
    theme: Optional[str] = None,
    *,
    dry_run: bool = False,
    confirm: Optional[Callable[[PlannedAction], bool]] = None,
    echo: Callable[[str], None] = print,
    now: Optional[datetime] = None,
) -> Optional[EventRecord]:
    """
    Create a happy hour event and print a confirmation.

    With ``dry_run`` the intended action is echoed and nothing is created.
    When ``confirm`` is given it decides whether to go ahead; a false answer
    also skips creation. Either way ``None`` is returned in place of a record.
    """
    plan = plan_event(location, when)

    if dry_run:
        LOGGER.info("event.dry_run", target=plan.target, action=plan.action)
        echo(format_planned_action(plan))
        return None

    if confirm is not None and not confirm(plan):
        LOGGER.info("event.declined", target=plan.target)
        return None

    record = build_event_record(location, when, attendees, theme, now=now)
    LOGGER.info(
        "event.created",
        event_id=record.event_id,
        location=record.location,
        attendees=len(record.attendees),
    )
    echo(format_event_confirmation(record))
    return record
