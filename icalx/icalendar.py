"""Definitions and behavior for iCalendar, also known as vCalendar 2.0"""

from .base import register_behavior
from .behavior import Behavior, is_empty
from .exceptions import MissingRequiredPropertyError
from .model import Alarm, AlarmAction, Calendar, Event, FreeBusy, Journal, TimeZone, TimeZoneProperty, Todo
from .properties import (
    Repeatable,
    SetOnce,
    date_list,
    date_or_date_time,
    date_time,
    duration,
    geo,
    integer,
    organizer,
    parse_action,
    parse_period,
    parse_trigger,
    parse_utc_offset,
    text,
    text_list,
    uri,
    uri_list,
)
from .rrule import parse_rrule


# ------------------------ Components ---------------------------------------------
class VCalendar2_0(Behavior):
    """
    vCalendar 2.0 behavior.
    """

    name = "VCALENDAR"
    description = "vCalendar 2.0, also known as iCalendar."
    record = Calendar
    children = {
        "VTIMEZONE": "timezones",
        "VEVENT": "events",
        "VTODO": "todos",
        "VJOURNAL": "journals",
        "VFREEBUSY": "freebusys",
    }
    properties = {
        "VERSION": text("version"),
        "PRODID": text("prodid"),
        "CALSCALE": text("calscale"),
        "METHOD": text("method"),
    }
    required = (("VERSION", "version"), ("PRODID", "prodid"))


register_behavior(VCalendar2_0)


class VTimezone(Behavior):
    """
    Timezone behavior.

    STANDARD and DAYLIGHT rules are collected but never resolved to tzinfo.
    """

    name = "VTIMEZONE"
    description = "A grouping of component properties that defines a time zone."
    record = TimeZone
    children = {"STANDARD": "standard", "DAYLIGHT": "daylight"}
    properties = {
        "TZID": text("tzid"),
        "LAST-MODIFIED": date_time("last_modified"),
        "TZURL": uri("tzurl"),
    }
    required = (("TZID", "tzid"),)


register_behavior(VTimezone)


class TZProperty(Behavior):
    """
    Shared behavior of STANDARD and DAYLIGHT.
    """

    record = TimeZoneProperty
    properties = {
        "DTSTART": date_time("dtstart"),
        "TZOFFSETFROM": SetOnce("tzoffset_from", parse_utc_offset),
        "TZOFFSETTO": SetOnce("tzoffset_to", parse_utc_offset),
        "RRULE": SetOnce("rrule", parse_rrule),
        "TZNAME": text_list("tznames"),
        "COMMENT": text_list("comments"),
        "RDATE": date_list("rdates"),
    }


class Standard(TZProperty):
    name = "STANDARD"


class Daylight(TZProperty):
    name = "DAYLIGHT"


register_behavior(Standard)
register_behavior(Daylight)


class RecurringComponent(Behavior):
    """
    Properties shared by VEVENT, VTODO and VJOURNAL, which may hold alarms.
    """

    children = {"VALARM": "alarms"}
    properties = {
        "UID": text("uid"),
        "DTSTAMP": date_time("dtstamp"),
        "DTSTART": date_or_date_time("dtstart"),
        "SUMMARY": text("summary"),
        "STATUS": text("status"),
        "CLASS": text("classification"),
        "SEQUENCE": integer("sequence"),
        "CREATED": date_time("created"),
        "LAST-MODIFIED": date_time("last_modified"),
        "URL": uri("url"),
        "RECURRENCE-ID": date_or_date_time("recurrence_id"),
        "ORGANIZER": organizer(),
        "RRULE": SetOnce("rrule", parse_rrule),
        "ATTACH": text_list("attach"),
        "ATTENDEE": uri_list("attendees"),
        "CATEGORIES": text_list("categories", split=True),
        "COMMENT": text_list("comments"),
        "CONTACT": text_list("contacts"),
        "EXDATE": date_list("exdates"),
        "RDATE": date_list("rdates"),
        "RELATED-TO": text_list("related_to"),
        "RELATED": text_list("related_to"),
        "REQUEST-STATUS": text_list("request_status"),
        "RSTATUS": text_list("request_status"),
    }


class VEvent(RecurringComponent):
    """
    Event behavior.
    """

    name = "VEVENT"
    description = 'A grouping of component properties, and possibly including \
                   "VALARM" calendar components, that represents a scheduled \
                   amount of time on a calendar.'
    record = Event
    properties = {
        **RecurringComponent.properties,
        "DTEND": date_or_date_time("dtend", excludes=("duration", "DURATION")),
        "DURATION": duration("duration", excludes=("dtend", "DTEND")),
        "DESCRIPTION": text("description"),
        "LOCATION": text("location"),
        "TRANSP": text("transp"),
        "PRIORITY": integer("priority"),
        "GEO": geo(),
        "RESOURCES": text_list("resources", split=True),
    }
    required = (("UID", "uid"), ("DTSTART", "dtstart"))


register_behavior(VEvent)


class VTodo(RecurringComponent):
    """
    To-do behavior.
    """

    name = "VTODO"
    description = 'A grouping of component properties and possibly "VALARM" \
                   calendar components that represent an action-item or \
                   assignment.'
    record = Todo
    properties = {
        **RecurringComponent.properties,
        "DUE": date_or_date_time("due", excludes=("duration", "DURATION")),
        "DURATION": duration("duration", excludes=("due", "DUE")),
        "COMPLETED": date_time("completed"),
        "PERCENT-COMPLETE": integer("percent_complete"),
        "DESCRIPTION": text_list("descriptions"),
        "LOCATION": text("location"),
        "TRANSP": text("transp"),
        "PRIORITY": integer("priority"),
        "GEO": geo(),
        "RESOURCES": text_list("resources", split=True),
    }
    required = (("UID", "uid"), ("DTSTART", "dtstart"))


register_behavior(VTodo)


class VJournal(RecurringComponent):
    """
    Journal entry behavior.
    """

    name = "VJOURNAL"
    record = Journal
    properties = {
        **RecurringComponent.properties,
        "DESCRIPTION": text_list("descriptions"),
    }
    required = (("UID", "uid"),)


register_behavior(VJournal)


class VFreeBusy(Behavior):
    """
    Free/busy state behavior.
    """

    name = "VFREEBUSY"
    description = "A grouping of component properties that describe either a \
                   request for free/busy time, describe a response to a request \
                   for free/busy time or describe a published set of busy time."
    record = FreeBusy
    properties = {
        "UID": text("uid"),
        "DTSTAMP": date_time("dtstamp"),
        "DTSTART": date_time("dtstart"),
        "DTEND": date_time("dtend"),
        "CONTACT": text("contact"),
        "URL": uri("url"),
        "ORGANIZER": organizer(),
        "ATTENDEE": uri_list("attendees"),
        "COMMENT": text_list("comments"),
        "FREEBUSY": Repeatable("free_busy", parse_period, with_params=True, split=True),
        "REQUEST-STATUS": text_list("request_status"),
        "RSTATUS": text_list("request_status"),
    }
    required = (("UID", "uid"), ("DTSTART", "dtstart"))


register_behavior(VFreeBusy)


class VAlarm(Behavior):
    """
    Alarm behavior.
    """

    name = "VALARM"
    description = "Alarms describe when and how to provide alerts about events \
                   and to-dos."
    record = Alarm
    properties = {
        "ACTION": SetOnce("action", parse_action),
        "TRIGGER": SetOnce("trigger", parse_trigger, with_params=True),
        "DURATION": duration("duration"),
        "REPEAT": integer("repeat"),
        "SUMMARY": text("summary"),
        "DESCRIPTION": text_list("descriptions"),
        "ATTENDEE": uri_list("attendees"),
        "ATTACH": text_list("attach"),
    }
    required = (("ACTION", "action"), ("TRIGGER", "trigger"))

    @classmethod
    def validate(cls, obj):
        """
        DISPLAY and EMAIL alarms need a DESCRIPTION, EMAIL alarms also need a
        SUMMARY and at least one ATTENDEE.
        """
        super().validate(obj)
        if obj.action in (AlarmAction.DISPLAY, AlarmAction.EMAIL) and is_empty(obj.descriptions):
            raise MissingRequiredPropertyError(cls.name, "DESCRIPTION")
        if obj.action == AlarmAction.EMAIL:
            if is_empty(obj.summary):
                raise MissingRequiredPropertyError(cls.name, "SUMMARY")
            if is_empty(obj.attendees):
                raise MissingRequiredPropertyError(cls.name, "ATTENDEE")
        return True


register_behavior(VAlarm)
