from __future__ import annotations

import datetime as dt

from dateutil import tz

from .exceptions import (
    DurationDuplicateUnitError,
    DurationMissingUnitError,
    DurationMixedWeeksError,
    DurationPrefixError,
    DurationTimeWithoutTError,
    DurationUnexpectedCharError,
    EmptyDurationError,
    InvalidDateTimeError,
    InvalidDurationError,
)
from .helper.imports_ import re, string

utc = tz.tzutc()

DATE_TIME_FORMAT = "%Y%m%dT%H%M%S"
DATE_FORMAT = "%Y%m%d"

date_time_re = re.compile(r"\d{8}T\d{6}Z?", re.ASCII)
date_re = re.compile(r"\d{8}", re.ASCII)

DAY_UNITS = "D"
TIME_UNITS = "HMS"
UNIT_NAMES = {"W": "weeks", "D": "days", "H": "hours", "M": "minutes", "S": "seconds"}


def parse_datetime(s: str) -> dt.datetime:
    """
    Parse a fixed-width DATE-TIME such as 19970714T173000Z.

    The Z suffix gives an aware UTC datetime, without it the result is a
    naive (floating) datetime.
    """
    if not isinstance(s, str) or date_time_re.fullmatch(s) is None:
        raise InvalidDateTimeError(s)
    try:
        _datetime = dt.datetime.strptime(s[:15], DATE_TIME_FORMAT)
    except ValueError as e:
        raise InvalidDateTimeError(s) from e
    if s.endswith("Z"):
        return _datetime.replace(tzinfo=utc)
    return _datetime


def parse_date(s: str) -> dt.date:
    """Parse a DATE value such as 19970714."""
    if not isinstance(s, str) or date_re.fullmatch(s) is None:
        raise InvalidDateTimeError(s, "DATE")
    try:
        return dt.datetime.strptime(s, DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidDateTimeError(s, "DATE") from e


def parse_duration(s: str) -> dt.timedelta:
    """
    Parse a DURATION value into a timedelta.

    Accepted forms are [+-]P<n>W and [+-]P[<n>D][T[<n>H][<n>M][<n>S]].
    Each grammar violation raises its own InvalidDurationError subclass.
    """
    if s is None or not s.strip():
        raise EmptyDurationError(s)
    s = s.strip()
    if "W" in s:
        return _parse_weeks(s)

    # vars which control state machine
    char_iterator = enumerate(s)
    state = "start"

    sign = 1
    current = ""
    in_time = False
    seen = {}

    while True:
        _, char = next(char_iterator, (None, "eof"))

        if state == "start":
            if char in "+-":
                sign = -1 if char == "-" else 1
                state = "prefix"
            elif char == "P":
                state = "read field"
            else:
                raise DurationPrefixError(s)

        elif state == "prefix":
            if char != "P":
                raise DurationPrefixError(s)
            state = "read field"

        elif state == "read field":
            if char in string.digits:
                current += char
            elif char == "eof":
                if current:
                    raise DurationMissingUnitError(s)
                break
            elif not current:
                if char == "T" and not in_time:
                    in_time = True
                else:
                    raise DurationUnexpectedCharError(s)
            elif char in DAY_UNITS:
                if in_time:
                    raise DurationUnexpectedCharError(s)
                if char in seen:
                    raise DurationDuplicateUnitError(s)
                seen[char] = int(current)
                current = ""
            elif char in TIME_UNITS:
                if not in_time:
                    raise DurationTimeWithoutTError(s)
                if char in seen:
                    raise DurationDuplicateUnitError(s)
                seen[char] = int(current)
                current = ""
            else:
                raise DurationMissingUnitError(s)

    return _make_timedelta(s, sign, seen)


def _parse_weeks(s: str) -> dt.timedelta:
    sign = 1
    body = s
    if body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    if not body.startswith("P"):
        raise DurationPrefixError(s)
    number, _, rest = body[1:].partition("W")
    if rest or any(char in UNIT_NAMES or char == "T" for char in number):
        raise DurationMixedWeeksError(s)
    if not number:
        raise DurationMissingUnitError(s)
    if any(char not in string.digits for char in number):
        raise DurationUnexpectedCharError(s)
    return _make_timedelta(s, sign, {"W": int(number)})


def _make_timedelta(s, sign, units):
    try:
        return sign * dt.timedelta(**{UNIT_NAMES[unit]: value for unit, value in units.items()})
    except OverflowError as e:
        raise InvalidDurationError(s) from e
