"""
This module exports a CollectionCalendar as an iCal file.

It uses the icalendar library to build the VCALENDAR.
"""
import logging
from datetime import datetime, timedelta, timezone

from icalendar import Calendar, Event

from .models import CollectionCalendar, CollectionDay, Service

# Get a logger instance for this module
logger = logging.getLogger(__name__)

PRODID = "-//spu-schedule//Collection Calendar//EN"

SERVICE_LABELS = {
    Service.GARBAGE: "Garbage",
    Service.RECYCLE: "Recycling",
    Service.YARD_WASTE: "Food/Yard Waste",
}


def describe_services(collection_day: CollectionDay) -> str:
    """Returns the day's services as a comma separated label, in enum order."""
    return ", ".join(SERVICE_LABELS[s] for s in Service if s in collection_day.services)


def calendar_to_ical(calendar: CollectionCalendar, address: str) -> bytes:
    """Builds an iCal file with one all-day event per collection day."""
    cal = Calendar()
    cal.add("prodid", PRODID)
    cal.add("version", "2.0")
    cal.add("x-wr-calname", f"Collection schedule for {address}")
    cal.add("x-wr-timezone", calendar.timezone)

    stamp = datetime.now(timezone.utc)
    slug = "".join(c if c.isalnum() else "-" for c in address.lower()).strip("-")
    for collection_day in calendar:
        day = collection_day.as_date()
        event = Event()
        event.add("uid", f"{collection_day.date}-{slug}@spu-schedule")
        event.add("dtstamp", stamp)
        event.add("dtstart", day)
        event.add("dtend", day + timedelta(days=1))
        event.add("summary", describe_services(collection_day) or "Collection")
        event.add("location", address)
        cal.add_component(event)

    logger.info(f"Exported {len(calendar)} collection days for '{address}' to iCal.")
    return cal.to_ical()
