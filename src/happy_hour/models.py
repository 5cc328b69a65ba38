"""Pydantic models shared across the happy hour utilities."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .errors import InvalidArgumentError

SCHEDULED = "Scheduled"


class _Record(BaseModel):
    """Base record serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DefaultsRecord(_Record):
    """Fixed happy hour defaults."""

    model_config = ConfigDict(frozen=True)

    location: str
    time: str
    duration_minutes: int


class InfoRecord(_Record):
    """Display record combining caller input with the defaults."""

    location: str
    date: str
    time: str
    duration: str
    day_of_week: str


class EventRecord(_Record):
    """A newly created happy hour event."""

    event_id: str
    location: str
    date_time: datetime
    attendees: List[str] = Field(default_factory=list)
    theme: Optional[str] = None
    created: datetime
    status: str = SCHEDULED


class PlannedAction(_Record):
    """Description of a creation that has not been performed yet."""

    target: str
    action: str


class MenuItem(_Record):
    """Single entry in the fixed menu catalog."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal


class MenuCategory(str, Enum):
    """Menu sections a caller may ask for."""

    ALL = "All"
    DRINKS = "Drinks"
    FOOD = "Food"

    @classmethod
    def parse(cls, value: "str | MenuCategory | None") -> "MenuCategory":
        """Resolve a category name case-insensitively; ``None`` means all."""
        if value is None:
            return cls.ALL
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        valid = ", ".join(member.value for member in cls)
        raise InvalidArgumentError(f"Invalid category '{value}'. Expected one of: {valid}.")


class SerialLookup(_Record):
    """Outcome of a host serial number query."""

    serial: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.serial is not None and self.error is None
