"""Tests for property value parsers and setters."""

import datetime as dt

import pytest
from dateutil.tz import tzutc

from icalx.base import parse_line
from icalx.exceptions import (
    ComponentParseError,
    DuplicatePropertyError,
    GeoFormatError,
    GeoLatitudeError,
    GeoLongitudeError,
    InvalidFreeBusyError,
    InvalidURIError,
    InvalidValueError,
    MutuallyExclusivePropertyError,
)
from icalx.model import AlarmAction, Event, FreeBusyStatus, FreeBusyTime
from icalx.properties import (
    Repeatable,
    SetOnce,
    date_list,
    duration,
    parse_action,
    parse_date_or_date_time,
    parse_geo,
    parse_integer,
    parse_organizer,
    parse_period,
    parse_trigger,
    parse_uri,
    parse_utc_offset,
    text,
)


def utc(*args):
    return dt.datetime(*args, tzinfo=tzutc())


def test_parse_uri():
    uri = parse_uri("mailto:jsmith@example.com")
    assert uri.scheme == "mailto"
    assert uri.path == "jsmith@example.com"
    assert uri.geturl() == "mailto:jsmith@example.com"


@pytest.mark.parametrize(
    "value",
    ["", "://invalid", "mailto:a\x01b", "http://example.com/%zz", "http://example.com:port/", "http://[::1/"],
)
def test_invalid_uri(value):
    with pytest.raises(InvalidURIError) as exc:
        parse_uri(value)
    assert exc.value.value == value


def test_parse_integer():
    assert parse_integer("0") == 0
    assert parse_integer("-5") == -5
    with pytest.raises(InvalidValueError):
        parse_integer("1_000")


def test_parse_geo():
    assert parse_geo("37.386013;-122.082932") == (37.386013, -122.082932)


@pytest.mark.parametrize(
    "value,error",
    [
        ("37.386013", GeoFormatError),
        ("1;2;3", GeoFormatError),
        ("north;-122.08", GeoLatitudeError),
        ("nan;-122.08", GeoLatitudeError),
        ("37.38;west", GeoLongitudeError),
        ("1_0;2.0", GeoLatitudeError),
        ("1.0;2_0", GeoLongitudeError),
        ("0x1p3;2.0", GeoLatitudeError),
    ],
)
def test_invalid_geo(value, error):
    with pytest.raises(error):
        parse_geo(value)


def test_organizer_parameters():
    """Known parameters become fields, the rest is kept"""
    line = parse_line(
        'ORGANIZER;CN=John Smith;DIR="ldap://example.com:6666/o=DC%20Associates,c=US???(cn=John%20Smith)"'
        ";SENT-BY=\"mailto:jane_doe@example.com\";LANGUAGE=en;X-ROLE=chair:mailto:jsmith@example.com"
    )
    organizer = parse_organizer(line.value, line.params)
    assert organizer.cal_address.geturl() == "mailto:jsmith@example.com"
    assert organizer.common_name == "John Smith"
    assert organizer.directory.scheme == "ldap"
    assert organizer.directory.netloc == "example.com:6666"
    assert organizer.directory.geturl() == "ldap://example.com:6666/o=DC%20Associates,c=US???(cn=John%20Smith)"
    assert organizer.sent_by.geturl() == "mailto:jane_doe@example.com"
    assert organizer.language == "en"
    assert organizer.other_params == {"X-ROLE": "chair"}


def test_organizer_bad_directory():
    with pytest.raises(InvalidURIError):
        parse_organizer("mailto:jsmith@example.com", {"DIR": "://nowhere"})


def test_period_with_end():
    assert parse_period("19980314T233000Z/19980315T003000Z", {}) == FreeBusyTime(
        utc(1998, 3, 14, 23, 30), utc(1998, 3, 15, 0, 30), FreeBusyStatus.BUSY
    )


def test_period_with_status_and_duration():
    period = parse_period("19980316T153000Z/PT1H/BUSY-TENTATIVE", {})
    assert period.end == utc(1998, 3, 16, 16, 30)
    assert period.status == FreeBusyStatus.BUSY_TENTATIVE


def test_period_status_from_fbtype():
    assert parse_period("19980316T153000Z/PT1H", {"FBTYPE": "FREE"}).status == FreeBusyStatus.FREE


@pytest.mark.parametrize(
    "value",
    [
        "19980314T233000Z",
        "a/b/c/d",
        "yesterday/19980315T003000Z",
        "19980314T233000Z/tomorrow",
        "19980314T233000Z/19980315T003000Z/SLEEPING",
        "99990101T000000Z/P999D",
        "00010101T000000Z/-P1D",
    ],
)
def test_invalid_period(value):
    with pytest.raises(InvalidFreeBusyError):
        parse_period(value, {})


def test_date_or_date_time():
    assert parse_date_or_date_time("20240101", {"VALUE": "DATE"}) == dt.date(2024, 1, 1)
    assert parse_date_or_date_time("20240101T080000Z", {}) == utc(2024, 1, 1, 8)
    with pytest.raises(InvalidValueError):
        parse_date_or_date_time("20240101", {"VALUE": "PERIOD"})


def test_trigger():
    assert parse_trigger("-PT15M", {}) == dt.timedelta(minutes=-15)
    assert parse_trigger("20240101T080000Z", {"VALUE": "DATE-TIME"}) == utc(2024, 1, 1, 8)


def test_trigger_date_time_without_value_param(caplog):
    """A DATE-TIME trigger without VALUE=DATE-TIME is still read"""
    assert parse_trigger("20240101T080000Z", {}) == utc(2024, 1, 1, 8)
    assert "TRIGGER not recognized as DURATION" in caplog.text


def test_action():
    assert parse_action("display") is AlarmAction.DISPLAY
    with pytest.raises(InvalidValueError):
        parse_action("SHOUT")


def test_utc_offset():
    assert parse_utc_offset("-0500") == "-0500"
    assert parse_utc_offset("+053000") == "+053000"
    with pytest.raises(InvalidValueError):
        parse_utc_offset("0500")


def test_set_once_duplicate():
    """Presence is tracked, so an explicit zero counts as set"""
    setter = SetOnce("sequence", parse_integer)
    event = Event()
    setter.apply("VEVENT", event, parse_line("SEQUENCE:0"))
    assert event.sequence == 0
    with pytest.raises(DuplicatePropertyError) as exc:
        setter.apply("VEVENT", event, parse_line("SEQUENCE:0"))
    assert exc.value.component == "VEVENT"
    assert exc.value.property == "SEQUENCE"


def test_set_once_wraps_parse_failure():
    event = Event()
    with pytest.raises(ComponentParseError) as exc:
        SetOnce("sequence", parse_integer).apply("VEVENT", event, parse_line("SEQUENCE:first"))
    assert exc.value.component == "VEVENT"
    assert exc.value.property == "SEQUENCE"
    assert exc.value.value == "first"
    assert isinstance(exc.value.__cause__, InvalidValueError)


def test_set_once_passes_uri_errors():
    with pytest.raises(InvalidURIError):
        SetOnce("url", parse_uri).apply("VEVENT", Event(), parse_line("URL:://invalid"))


def test_mutually_exclusive():
    event = Event()
    duration("duration", excludes=("dtend", "DTEND")).apply("VEVENT", event, parse_line("DURATION:PT1H"))
    with pytest.raises(MutuallyExclusivePropertyError) as exc:
        SetOnce("dtend", excludes=("duration", "DURATION")).apply("VEVENT", event, parse_line("DTEND:x"))
    assert set(exc.value.fields) == {"DTEND", "DURATION"}


def test_text_keeps_value():
    event = Event()
    text("summary").apply("VEVENT", event, parse_line("SUMMARY:Lunch; with: friends"))
    assert event.summary == "Lunch; with: friends"


def test_repeatable_split():
    event = Event()
    setter = Repeatable("categories", split=True)
    setter.apply("VEVENT", event, parse_line("CATEGORIES:A, B"))
    setter.apply("VEVENT", event, parse_line("CATEGORIES:C"))
    assert event.categories == ["A", "B", "C"]


def test_date_list():
    event = Event()
    date_list("exdates").apply("VEVENT", event, parse_line("EXDATE;VALUE=DATE:20240108,20240115"))
    assert event.exdates == [dt.date(2024, 1, 8), dt.date(2024, 1, 15)]


def test_parse_geo_decimal_forms():
    assert parse_geo("+37.5;-.5") == (37.5, -0.5)
    assert parse_geo(" 1.;2 ") == (1.0, 2.0)


def test_period_end_out_of_range():
    """A duration pushing the end past the supported years is a FREEBUSY error"""
    with pytest.raises(InvalidFreeBusyError) as exc:
        parse_period("99990101T000000Z/P999D", {})
    assert isinstance(exc.value.__cause__, OverflowError)
