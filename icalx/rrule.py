"""Recurrence rule (RRULE) values."""

from __future__ import annotations

import datetime as dt

from .exceptions import (
    CountAndUntilError,
    FrequencyRequiredError,
    InvalidByDayError,
    InvalidDateTimeError,
    InvalidFrequencyError,
    InvalidIntervalError,
    InvalidRRuleStringError,
    InvalidRRuleValueError,
)
from .helper.config import logger
from .helper.imports_ import Enum, dataclass, field, re
from .parser import parse_date, parse_datetime

by_day_re = re.compile(r"(?P<ordinal>[+-]?\d+)?(?P<weekday>[A-Za-z]{2})", re.ASCII)
integer_re = re.compile(r"[+-]?\d+", re.ASCII)


class Frequency(str, Enum):
    SECONDLY = "SECONDLY"
    MINUTELY = "MINUTELY"
    HOURLY = "HOURLY"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class Weekday(str, Enum):
    MO = "MO"
    TU = "TU"
    WE = "WE"
    TH = "TH"
    FR = "FR"
    SA = "SA"
    SU = "SU"


@dataclass
class ByDay:
    weekday: Weekday
    ordinal: int = 1


@dataclass
class RRule:
    frequency: Frequency = None
    interval: int = 1
    count: int = None
    until: dt.date = None
    by_day: list = field(default_factory=list)
    by_month: list = field(default_factory=list)
    by_month_day: list = field(default_factory=list)
    by_year_day: list = field(default_factory=list)
    by_week_no: list = field(default_factory=list)
    by_hour: list = field(default_factory=list)
    by_minute: list = field(default_factory=list)
    by_second: list = field(default_factory=list)
    by_set_pos: list = field(default_factory=list)
    week_start: Weekday = None


# tag: (attribute, lowest, highest, negative allowed)
INT_LIST_TAGS = {
    "BYMONTH": ("by_month", 1, 12, False),
    "BYMONTHDAY": ("by_month_day", 1, 31, True),
    "BYYEARDAY": ("by_year_day", 1, 366, True),
    "BYWEEKNO": ("by_week_no", 1, 53, True),
    "BYHOUR": ("by_hour", 0, 23, False),
    "BYMINUTE": ("by_minute", 0, 59, False),
    "BYSECOND": ("by_second", 0, 60, False),
    "BYSETPOS": ("by_set_pos", 1, 366, True),
}


def parse_rrule(s: str) -> RRule:
    """
    Parse an RRULE value such as FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE.

    Only the rule itself is parsed, occurrences are never expanded.
    """
    if not isinstance(s, str):
        raise InvalidRRuleStringError(s)
    rule = RRule()
    seen = set()
    for part in s.strip().split(";"):
        if part.count("=") != 1:
            raise InvalidRRuleStringError(s, f"expected TAG=VALUE, got {part!r}")
        tag, value = part.split("=")
        tag = tag.strip().upper()
        if tag in seen:
            raise InvalidRRuleStringError(s, f"{tag} given twice")
        seen.add(tag)

        if tag == "FREQ":
            try:
                rule.frequency = Frequency(value.upper())
            except ValueError as e:
                raise InvalidFrequencyError(s, value) from e
        elif tag == "INTERVAL":
            rule.interval = _to_int(s, tag, value)
        elif tag == "COUNT":
            rule.count = _to_int(s, tag, value)
        elif tag == "UNTIL":
            rule.until = _to_until(s, value)
        elif tag == "BYDAY":
            rule.by_day = [parse_by_day(entry, s) for entry in value.split(",")]
        elif tag == "WKST":
            try:
                rule.week_start = Weekday(value.upper())
            except ValueError as e:
                raise InvalidRRuleValueError(s, f"WKST={value}") from e
        elif tag in INT_LIST_TAGS:
            attribute, lowest, highest, negative = INT_LIST_TAGS[tag]
            setattr(rule, attribute, [_to_ranged_int(s, tag, v, lowest, highest, negative) for v in value.split(",")])
        else:
            logger.debug(f"Ignoring unknown RRULE part {tag!s} in {s!s}")

    if rule.frequency is None:
        raise FrequencyRequiredError(s)
    if rule.count is not None and rule.until is not None:
        raise CountAndUntilError(s)
    if rule.interval <= 0:
        raise InvalidIntervalError(s, f"INTERVAL={rule.interval}")
    return rule


def parse_by_day(entry: str, rule=None) -> ByDay:
    """
    Parse one BYDAY entry: 20MO -> (MO, 20), MO -> (MO, 1), -1SU -> (SU, -1).
    """
    source = entry if rule is None else rule
    match = by_day_re.fullmatch(entry.strip())
    if match is None:
        raise InvalidByDayError(source, entry)
    try:
        weekday = Weekday(match.group("weekday").upper())
    except ValueError as e:
        raise InvalidByDayError(source, entry) from e
    return ByDay(weekday, int(match.group("ordinal") or 1))


def _to_int(rule, tag, value):
    if integer_re.fullmatch(value) is None:
        raise InvalidRRuleValueError(rule, f"{tag}={value}")
    return int(value)


def _to_ranged_int(rule, tag, value, lowest, highest, negative):
    number = _to_int(rule, tag, value)
    magnitude = abs(number) if negative else number
    if not lowest <= magnitude <= highest or (negative and number == 0):
        raise InvalidRRuleValueError(rule, f"{tag}={value}")
    return number


def _to_until(rule, value):
    try:
        if len(value) == 8:
            return parse_date(value)
        return parse_datetime(value)
    except InvalidDateTimeError as e:
        raise InvalidRRuleValueError(rule, f"UNTIL={value}") from e
