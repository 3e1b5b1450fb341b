"""
Unit tests for the iCal export.
"""
from datetime import date

from icalendar import Calendar

from spu_schedule.ical_export import calendar_to_ical, describe_services
from spu_schedule.models import CollectionCalendar, CollectionDay, Service


def _calendar():
    calendar = CollectionCalendar()
    calendar.add_days("Garbage", ["03/01/2024", "03/08/2024"])
    calendar.add_days("Recycle", ["03/08/2024"])
    calendar.add_days("Food/Yard Waste", ["03/08/2024"])
    return calendar


def test_describe_services_uses_fixed_order():
    day = CollectionDay("2024-03-08", {Service.YARD_WASTE, Service.GARBAGE, Service.RECYCLE})
    assert describe_services(day) == "Garbage, Recycling, Food/Yard Waste"
    assert describe_services(CollectionDay("2024-03-09")) == ""


def test_export_has_one_all_day_event_per_collection_day():
    content = calendar_to_ical(_calendar(), "700 5th Ave")

    parsed = Calendar.from_ical(content)
    events = list(parsed.walk("VEVENT"))
    assert len(events) == 2

    starts = [e.get("DTSTART").dt for e in events]
    assert starts == [date(2024, 3, 1), date(2024, 3, 8)]
    assert str(events[0].get("SUMMARY")) == "Garbage"
    assert str(events[1].get("SUMMARY")) == "Garbage, Recycling, Food/Yard Waste"
    assert str(events[1].get("LOCATION")) == "700 5th Ave"


def test_export_uids_are_stable_per_day():
    first = Calendar.from_ical(calendar_to_ical(_calendar(), "700 5th Ave"))
    second = Calendar.from_ical(calendar_to_ical(_calendar(), "700 5th Ave"))

    uids = [str(e.get("UID")) for e in first.walk("VEVENT")]
    assert uids == [str(e.get("UID")) for e in second.walk("VEVENT")]
    assert uids[0] == "2024-03-01-700-5th-ave@spu-schedule"


def test_export_of_empty_calendar_has_no_events():
    parsed = Calendar.from_ical(calendar_to_ical(CollectionCalendar(), "700 5th Ave"))
    assert list(parsed.walk("VEVENT")) == []
