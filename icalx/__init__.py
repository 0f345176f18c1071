"""
icalx reads iCalendar (RFC 5545) text into plain Python records.

Parsing a calendar
------------------
>>> import icalx
>>> cal = icalx.read_calendar(
...     "BEGIN:VCALENDAR\\r\\n"
...     "VERSION:2.0\\r\\n"
...     "PRODID:-//Example//EN\\r\\n"
...     "BEGIN:VEVENT\\r\\n"
...     "UID:1@example.com\\r\\n"
...     "DTSTART:20240101T090000Z\\r\\n"
...     "DURATION:PT1H\\r\\n"
...     "END:VEVENT\\r\\n"
...     "END:VCALENDAR\\r\\n"
... )
>>> cal.events[0].duration
datetime.timedelta(seconds=3600)

The scalar grammars are available on their own:

>>> icalx.parse_duration("-P1DT12H")
datetime.timedelta(days=-2, seconds=43200)
"""

from . import icalendar  # noqa: F401, registers the component behaviors
from .base import parse_line, read_calendar, read_file
from .exceptions import ParseError, VObjectError
from .parser import parse_date, parse_datetime, parse_duration
from .rrule import parse_rrule

VERSION = "1.0.0"

__all__ = [
    "VERSION",
    "ParseError",
    "VObjectError",
    "parse_date",
    "parse_datetime",
    "parse_duration",
    "parse_line",
    "parse_rrule",
    "read_calendar",
    "read_file",
]
