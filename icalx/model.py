"""
Records produced by the parser.

Optional scalars default to None so that a value which was never set can be
told apart from an explicit zero, repeatable properties default to empty
lists in source order.
"""

from __future__ import annotations

import datetime as dt
from urllib.parse import SplitResult

from .helper.imports_ import Enum, dataclass, field
from .rrule import RRule


class AlarmAction(str, Enum):
    AUDIO = "AUDIO"
    DISPLAY = "DISPLAY"
    EMAIL = "EMAIL"
    PROCEDURE = "PROCEDURE"


class FreeBusyStatus(str, Enum):
    FREE = "FREE"
    BUSY = "BUSY"
    BUSY_TENTATIVE = "BUSY-TENTATIVE"
    BUSY_UNAVAILABLE = "BUSY-UNAVAILABLE"


@dataclass
class Organizer:
    cal_address: SplitResult = None
    common_name: str = None
    directory: SplitResult = None
    sent_by: SplitResult = None
    language: str = None
    other_params: dict = field(default_factory=dict)


@dataclass
class FreeBusyTime:
    start: dt.datetime
    end: dt.datetime
    status: FreeBusyStatus = FreeBusyStatus.BUSY


@dataclass
class Alarm:
    action: AlarmAction = None
    trigger: dt.timedelta | dt.datetime = None
    duration: dt.timedelta = None
    repeat: int = None
    summary: str = None
    descriptions: list = field(default_factory=list)
    attendees: list = field(default_factory=list)
    attach: list = field(default_factory=list)
    extensions: dict = field(default_factory=dict)


@dataclass
class Event:
    uid: str = None
    dtstamp: dt.datetime = None
    dtstart: dt.datetime | dt.date = None
    dtend: dt.datetime | dt.date = None
    duration: dt.timedelta = None
    summary: str = None
    description: str = None
    location: str = None
    status: str = None
    classification: str = None
    transp: str = None
    priority: int = None
    sequence: int = None
    created: dt.datetime = None
    last_modified: dt.datetime = None
    url: SplitResult = None
    recurrence_id: dt.datetime | dt.date = None
    geo: tuple = None
    organizer: Organizer = None
    rrule: RRule = None
    attach: list = field(default_factory=list)
    attendees: list = field(default_factory=list)
    categories: list = field(default_factory=list)
    comments: list = field(default_factory=list)
    contacts: list = field(default_factory=list)
    exdates: list = field(default_factory=list)
    rdates: list = field(default_factory=list)
    related_to: list = field(default_factory=list)
    request_status: list = field(default_factory=list)
    resources: list = field(default_factory=list)
    alarms: list = field(default_factory=list)
    extensions: dict = field(default_factory=dict)


@dataclass
class Todo:
    uid: str = None
    dtstamp: dt.datetime = None
    dtstart: dt.datetime | dt.date = None
    due: dt.datetime | dt.date = None
    duration: dt.timedelta = None
    completed: dt.datetime = None
    percent_complete: int = None
    summary: str = None
    location: str = None
    status: str = None
    classification: str = None
    transp: str = None
    priority: int = None
    sequence: int = None
    created: dt.datetime = None
    last_modified: dt.datetime = None
    url: SplitResult = None
    recurrence_id: dt.datetime | dt.date = None
    geo: tuple = None
    organizer: Organizer = None
    rrule: RRule = None
    descriptions: list = field(default_factory=list)
    attach: list = field(default_factory=list)
    attendees: list = field(default_factory=list)
    categories: list = field(default_factory=list)
    comments: list = field(default_factory=list)
    contacts: list = field(default_factory=list)
    exdates: list = field(default_factory=list)
    rdates: list = field(default_factory=list)
    related_to: list = field(default_factory=list)
    request_status: list = field(default_factory=list)
    resources: list = field(default_factory=list)
    alarms: list = field(default_factory=list)
    extensions: dict = field(default_factory=dict)


@dataclass
class Journal:
    uid: str = None
    dtstamp: dt.datetime = None
    dtstart: dt.datetime | dt.date = None
    summary: str = None
    status: str = None
    classification: str = None
    sequence: int = None
    created: dt.datetime = None
    last_modified: dt.datetime = None
    url: SplitResult = None
    recurrence_id: dt.datetime | dt.date = None
    organizer: Organizer = None
    rrule: RRule = None
    descriptions: list = field(default_factory=list)
    attach: list = field(default_factory=list)
    attendees: list = field(default_factory=list)
    categories: list = field(default_factory=list)
    comments: list = field(default_factory=list)
    contacts: list = field(default_factory=list)
    exdates: list = field(default_factory=list)
    rdates: list = field(default_factory=list)
    related_to: list = field(default_factory=list)
    request_status: list = field(default_factory=list)
    alarms: list = field(default_factory=list)
    extensions: dict = field(default_factory=dict)


@dataclass
class FreeBusy:
    uid: str = None
    dtstamp: dt.datetime = None
    dtstart: dt.datetime = None
    dtend: dt.datetime = None
    contact: str = None
    url: SplitResult = None
    organizer: Organizer = None
    attendees: list = field(default_factory=list)
    comments: list = field(default_factory=list)
    free_busy: list = field(default_factory=list)
    request_status: list = field(default_factory=list)
    extensions: dict = field(default_factory=dict)


@dataclass
class TimeZoneProperty:
    dtstart: dt.datetime = None
    tzoffset_from: str = None
    tzoffset_to: str = None
    rrule: RRule = None
    tznames: list = field(default_factory=list)
    comments: list = field(default_factory=list)
    rdates: list = field(default_factory=list)
    extensions: dict = field(default_factory=dict)


@dataclass
class TimeZone:
    tzid: str = None
    last_modified: dt.datetime = None
    tzurl: SplitResult = None
    standard: list = field(default_factory=list)
    daylight: list = field(default_factory=list)
    extensions: dict = field(default_factory=dict)


@dataclass
class Calendar:
    version: str = None
    prodid: str = None
    calscale: str = None
    method: str = None
    timezones: list = field(default_factory=list)
    events: list = field(default_factory=list)
    todos: list = field(default_factory=list)
    journals: list = field(default_factory=list)
    freebusys: list = field(default_factory=list)
    extensions: dict = field(default_factory=dict)
