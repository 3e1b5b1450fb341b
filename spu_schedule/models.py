"""
This module defines the data models for the collection schedule resolver.
"""

import functools
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Union
from zoneinfo import ZoneInfo

from .config import TIMEZONE
from .exceptions import NoUpcomingScheduleError, ResponseFormatError

# Get a logger instance for this module
logger = logging.getLogger(__name__)


class Service(Enum):
    """A waste stream collected by the utility."""

    GARBAGE = "Garbage"
    RECYCLE = "Recycle"
    YARD_WASTE = "Food/Yard Waste"


# Service descriptions as the API spells them
SERVICE_MAP: Dict[str, Service] = {
    "Garbage": Service.GARBAGE,
    "Recycle": Service.RECYCLE,
    "Food/Yard Waste": Service.YARD_WASTE,
}

# description -> servicePointId
ServicePointMap = Dict[str, str]


def today_in(timezone: str = TIMEZONE) -> str:
    """Returns the current calendar day in the given timezone as YYYY-MM-DD."""
    return datetime.now(ZoneInfo(timezone)).strftime("%Y-%m-%d")


def normalize_date(date_string: str, timezone: str = TIMEZONE) -> str:
    """
    Normalizes a date from the calendar endpoint to YYYY-MM-DD.

    Accepts the API's M/D/YYYY form (month and day padding optional, four
    digit year) and dates that are already normalized.

    Raises:
        ResponseFormatError: If the string is neither form.
    """
    value = str(date_string).strip()
    date_format = "%m/%d/%Y" if "/" in value else "%Y-%m-%d"
    try:
        local = datetime.strptime(value, date_format).replace(tzinfo=ZoneInfo(timezone))
    except ValueError as e:
        raise ResponseFormatError(f"Unrecognized collection date '{date_string}'") from e
    if local.year < 1000:
        raise ResponseFormatError(f"Collection date '{date_string}' is out of range")
    return local.strftime("%Y-%m-%d")


@dataclass(frozen=True)
class Account:
    """The solid-waste account an address resolved to."""

    address: str
    account_number: str
    premise_code: str
    person_id: Optional[str] = None
    company_code: Optional[str] = None


@functools.total_ordering
@dataclass(frozen=True)
class CollectionDay:
    """One calendar day and the services collected on it. Immutable."""

    date: str
    services: FrozenSet[Service] = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "services", frozenset(self.services))

    def with_label(self, description: str) -> "CollectionDay":
        """Returns this day plus the service an API description maps to. Unknown descriptions are ignored."""
        service = SERVICE_MAP.get(description)
        if service is None:
            return self
        return self.with_service(service)

    def with_service(self, service: Service) -> "CollectionDay":
        if service in self.services:
            return self
        return CollectionDay(self.date, self.services | {service})

    def as_date(self) -> date:
        return date.fromisoformat(self.date)

    def __lt__(self, other: "CollectionDay") -> bool:
        if not isinstance(other, CollectionDay):
            return NotImplemented
        return self.date < other.date


class CollectionCalendar:
    """
    A schedule of collection days keyed by YYYY-MM-DD.

    Days are folded in with add_days() while the calendar is being built;
    callers get a read-only view of immutable days through schedule().
    """

    def __init__(self, timezone: str = TIMEZONE):
        self.timezone = timezone
        self._schedule: Dict[str, CollectionDay] = {}

    def add_days(self, description: str, dates: Iterable[str]) -> None:
        """Records that the described service collects on each of the given days."""
        for raw in dates:
            day_key = normalize_date(raw, self.timezone)
            collection_day = self._schedule.get(day_key) or CollectionDay(day_key)
            self._schedule[day_key] = collection_day.with_label(description)

    def schedule(self) -> Mapping[str, CollectionDay]:
        return MappingProxyType(self._schedule)

    def _today_key(self, today: Union[str, date, None]) -> str:
        if today is None:
            return today_in(self.timezone)
        if isinstance(today, date):
            return today.strftime("%Y-%m-%d")
        try:
            return normalize_date(today, self.timezone)
        except ResponseFormatError as e:
            raise ValueError(f"Unrecognized day '{today}'") from e

    def upcoming(self, today: Union[str, date, None] = None) -> List[CollectionDay]:
        """Returns the days on or after today, earliest first."""
        today = self._today_key(today)
        return [self._schedule[key] for key in sorted(self._schedule) if key >= today]

    def next_collection_day(self, today: Union[str, date, None] = None) -> CollectionDay:
        """
        Returns the first collection day on or after today.

        Args:
            today: A date, or a string in YYYY-MM-DD or M/D/YYYY form.
                Defaults to the current day in the calendar's timezone.

        Raises:
            NoUpcomingScheduleError: If no day in the schedule is on or after today.
            ValueError: If today is a string in neither form.
        """
        today = self._today_key(today)
        upcoming_keys = [key for key in self._schedule if key >= today]
        if not upcoming_keys:
            logger.warning(f"No collection day on or after {today} ({len(self._schedule)} days known).")
            raise NoUpcomingScheduleError(f"No collection scheduled on or after {today}")
        return self._schedule[min(upcoming_keys)]

    def __len__(self) -> int:
        return len(self._schedule)

    def __contains__(self, day_key: object) -> bool:
        return day_key in self._schedule

    def __iter__(self) -> Iterator[CollectionDay]:
        for key in sorted(self._schedule):
            yield self._schedule[key]
