"""
Property setters and the value parsers they use.

A setter moves one ContentLine into one field of a component record. Failures
of the value parser are reported as ComponentParseError naming the component
and property, except InvalidURIError which is raised as is.
"""

from __future__ import annotations

import math
from urllib.parse import SplitResult, urlsplit

from .exceptions import (
    ComponentParseError,
    DuplicatePropertyError,
    GeoFormatError,
    GeoLatitudeError,
    GeoLongitudeError,
    InvalidDurationError,
    InvalidFreeBusyError,
    InvalidURIError,
    InvalidValueError,
    MutuallyExclusivePropertyError,
    ParseError,
)
from .helper.config import logger
from .helper.constants import Delimiter
from .helper.imports_ import re
from .model import AlarmAction, FreeBusyStatus, FreeBusyTime, Organizer
from .parser import parse_date, parse_datetime, parse_duration

integer_re = re.compile(r"[+-]?\d+", re.ASCII)
float_re = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?", re.ASCII)
bad_escape_re = re.compile(r"%(?![0-9A-Fa-f]{2})")
utc_offset_re = re.compile(r"[+-]\d{4}(\d{2})?", re.ASCII)


# --------------------------------- value parsers -------------------------------
def parse_integer(value: str) -> int:
    if integer_re.fullmatch(value.strip()) is None:
        raise InvalidValueError(value, "INTEGER")
    return int(value)


def parse_uri(value: str) -> SplitResult:
    """
    Parse a URI (CAL-ADDRESS, URL, DIR, ...) into a SplitResult.
    """
    if not value:
        raise InvalidURIError(value, "empty URI")
    if value.startswith(Delimiter.VALUE):
        raise InvalidURIError(value, "missing protocol scheme")
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in value):
        raise InvalidURIError(value, "invalid control character in URL")
    match = bad_escape_re.search(value)
    if match is not None:
        raise InvalidURIError(value, f"invalid URL escape {value[match.start():match.start() + 3]!r}")
    try:
        result = urlsplit(value)
        result.port  # noqa: B018, validates the port
    except ValueError as e:
        raise InvalidURIError(value, str(e)) from e
    return result


def parse_geo(value: str) -> tuple:
    """
    GEO is 'latitude;longitude', two floats.
    """
    tokens = value.split(";")
    if len(tokens) != 2:
        raise GeoFormatError(value)
    latitude = _to_float(tokens[0], GeoLatitudeError, value)
    longitude = _to_float(tokens[1], GeoLongitudeError, value)
    return latitude, longitude


def _to_float(token, error, value):
    if float_re.fullmatch(token.strip()) is None:
        raise error(value)
    number = float(token)
    if not math.isfinite(number):
        raise error(value)
    return number


def parse_date_or_date_time(value: str, params: dict):
    """
    Convert a value into a date or date-time according to its VALUE parameter.
    """
    value_param = params.get("VALUE", "DATE-TIME").upper()
    if value_param == "DATE":
        return parse_date(value)
    elif value_param == "DATE-TIME":
        return parse_datetime(value)
    raise InvalidValueError(value, f"VALUE={value_param}")


def parse_period(value: str, params: dict) -> FreeBusyTime:
    """
    Parse one FREEBUSY period, start/end[/status] or start/duration[/status].
    """
    segments = value.split(Delimiter.PERIOD)
    if len(segments) not in (2, 3):
        raise InvalidFreeBusyError(value)
    try:
        start = parse_datetime(segments[0])
    except ParseError as e:
        raise InvalidFreeBusyError(value, "invalid start time in FREEBUSY property") from e
    try:
        if segments[1][:1] in ("P", "+", "-"):
            end = start + parse_duration(segments[1])
        else:
            end = parse_datetime(segments[1])
    except (ParseError, OverflowError) as e:
        raise InvalidFreeBusyError(value, "invalid end time in FREEBUSY property") from e

    status = segments[2] if len(segments) == 3 else params.get("FBTYPE", FreeBusyStatus.BUSY.value)
    try:
        return FreeBusyTime(start, end, FreeBusyStatus(status.upper()))
    except ValueError as e:
        raise InvalidFreeBusyError(value, f"invalid status {status!r} in FREEBUSY property") from e


def parse_organizer(value: str, params: dict) -> Organizer:
    """
    Build an Organizer from the CAL-ADDRESS value and its parameters.

    Parameters other than CN, DIR, SENT-BY and LANGUAGE are kept in
    other_params.
    """
    organizer = Organizer(cal_address=parse_uri(value))
    for key, param in params.items():
        if key == "CN":
            organizer.common_name = param
        elif key == "DIR":
            organizer.directory = parse_uri(param)
        elif key == "SENT-BY":
            organizer.sent_by = parse_uri(param)
        elif key == "LANGUAGE":
            organizer.language = param
        else:
            organizer.other_params[key] = param
    return organizer


def parse_trigger(value: str, params: dict):
    """
    Turn a TRIGGER value into a timedelta or a datetime.
    """
    value_param = params.get("VALUE", "DURATION").upper()
    if value_param == "DATE-TIME":
        return parse_datetime(value)
    elif value_param != "DURATION":
        raise InvalidValueError(value, f"VALUE={value_param}")
    try:
        return parse_duration(value)
    except InvalidDurationError:
        logger.warning(
            "TRIGGER not recognized as DURATION, trying "
            "DATE-TIME, because iCal sometimes exports "
            "DATE-TIMEs without setting VALUE=DATE-TIME"
        )
        return parse_datetime(value)


def parse_action(value: str) -> AlarmAction:
    try:
        return AlarmAction(value.upper())
    except ValueError as e:
        raise InvalidValueError(value, "ACTION") from e


def parse_utc_offset(value: str) -> str:
    """TZOFFSETFROM / TZOFFSETTO, kept as text once checked."""
    if utc_offset_re.fullmatch(value) is None:
        raise InvalidValueError(value, "UTC-OFFSET")
    return value


# ----------------------------------- setters -----------------------------------
class PropertySetter:
    """
    Base class for setters in a component's dispatch table.

    @ivar attribute:
        Name of the record field written by this setter.
    @ivar parse:
        Callable converting the raw value, or None for TEXT values.
    @ivar with_params:
        If True, parse is called with the line's parameters as second argument.
    """

    def __init__(self, attribute, parse=None, *, with_params=False):
        self.attribute = attribute
        self.parse = parse
        self.with_params = with_params

    def __repr__(self):
        return f"<{type(self).__name__} {self.attribute}>"

    def apply(self, component, obj, line):
        raise NotImplementedError

    def convert(self, component, line, value):
        if self.parse is None:
            return value
        try:
            if self.with_params:
                return self.parse(value, line.params)
            return self.parse(value)
        except InvalidURIError:
            raise
        except ParseError as e:
            raise ComponentParseError(component, line.name, value, reason=e.msg) from e


class SetOnce(PropertySetter):
    """
    A property allowed at most once per component.

    @ivar excludes:
        Optional (attribute, property name) of a field that may not be set
        together with this one.
    """

    def __init__(self, attribute, parse=None, *, with_params=False, excludes=None):
        super().__init__(attribute, parse, with_params=with_params)
        self.excludes = excludes

    def apply(self, component, obj, line):
        if self.excludes is not None:
            other_attribute, other_name = self.excludes
            if getattr(obj, other_attribute) is not None:
                raise MutuallyExclusivePropertyError(component, (other_name, line.name))
        if getattr(obj, self.attribute) is not None:
            raise DuplicatePropertyError(component, line.name)
        setattr(obj, self.attribute, self.convert(component, line, line.value))


class Repeatable(PropertySetter):
    """
    A property which may occur many times, values are appended in order.

    If split is True the value is a comma separated list and every item is
    appended on its own.
    """

    def __init__(self, attribute, parse=None, *, with_params=False, split=False):
        super().__init__(attribute, parse, with_params=with_params)
        self.split = split

    def apply(self, component, obj, line):
        values = line.value.split(Delimiter.LIST) if self.split else [line.value]
        target = getattr(obj, self.attribute)
        for value in values:
            target.append(self.convert(component, line, value.strip() if self.split else value))


# Shorthands used by the component dispatch tables
def text(attribute):
    return SetOnce(attribute)


def integer(attribute):
    return SetOnce(attribute, parse_integer)


def date_time(attribute):
    return SetOnce(attribute, parse_datetime)


def date_or_date_time(attribute, **kwargs):
    return SetOnce(attribute, parse_date_or_date_time, with_params=True, **kwargs)


def date_list(attribute):
    return Repeatable(attribute, parse_date_or_date_time, with_params=True, split=True)


def uri(attribute):
    return SetOnce(attribute, parse_uri)


def uri_list(attribute):
    return Repeatable(attribute, parse_uri)


def text_list(attribute, split=False):
    return Repeatable(attribute, split=split)


def duration(attribute, **kwargs):
    return SetOnce(attribute, parse_duration, **kwargs)


def organizer():
    return SetOnce("organizer", parse_organizer, with_params=True)


def geo():
    return SetOnce("geo", parse_geo)
