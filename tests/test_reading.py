"""General tests for the BEGIN/END structure of ics files."""

import io

import pytest

from icalx import read_calendar, read_file
from icalx.base import CalendarParser, ComponentStack
from icalx.exceptions import (
    ContentAfterEndError,
    EmptyDocumentError,
    InvalidEncodingError,
    InvalidEndBlockError,
    InvalidStartBlockError,
    MalformedLineError,
    MissingBeginError,
    MissingEndError,
    ParseError,
)

from .common import calendar_text, event_text, get_test_file


def test_read_stream():
    """A text stream reads like the string it holds"""
    text = get_test_file("minimal.ics")
    assert read_calendar(io.StringIO(text)) == read_calendar(text)


def test_deterministic():
    text = get_test_file("standard_test.ics")
    assert read_calendar(text) == read_calendar(text)


def test_case_insensitive_component_names():
    cal = read_calendar(
        "begin:vcalendar\nversion:2.0\nprodid:X\nBegin:VEvent\nuid:1\ndtstart:20240101T100000Z\nend:vevent\n"
        "END:VCALENDAR\n"
    )
    assert cal.events[0].uid == "1"


@pytest.mark.parametrize("text", ["", "\n\n", "   \r\n\t\r\n"])
def test_empty_document(text):
    with pytest.raises(EmptyDocumentError):
        read_calendar(text)


def test_property_before_begin():
    with pytest.raises(MissingBeginError) as exc:
        read_calendar("VERSION:2.0\nBEGIN:VCALENDAR\n")
    assert exc.value.line_number == 1


def test_end_before_begin():
    with pytest.raises(MissingBeginError):
        read_calendar("END:VCALENDAR\n")


def test_other_component_first():
    with pytest.raises(InvalidStartBlockError) as exc:
        read_calendar("BEGIN:VEVENT\nEND:VEVENT\n")
    assert exc.value.token == "VEVENT"


def test_content_after_end():
    """Anything after the outermost END:VCALENDAR fails"""
    with pytest.raises(ContentAfterEndError) as exc:
        read_calendar(get_test_file("content_after_end.ics"))
    assert exc.value.line_number == 5
    with pytest.raises(ContentAfterEndError):
        read_calendar(get_test_file("minimal.ics") + "X-TRAILER:1\n")


def test_blank_lines_after_end_allowed():
    assert read_calendar(get_test_file("minimal.ics") + "\n\n").version == "2.0"


def test_missing_end():
    with pytest.raises(MissingEndError) as exc:
        read_calendar(get_test_file("missing_end.ics"))
    assert exc.value.token == "VCALENDAR"


def test_missing_inner_end():
    with pytest.raises(MissingEndError) as exc:
        read_calendar("BEGIN:VCALENDAR\nVERSION:2.0\nPRODID:X\nBEGIN:VEVENT\n")
    assert exc.value.token == "VEVENT"


def test_mismatched_end():
    """END for a block that is not the innermost open one"""
    with pytest.raises(InvalidEndBlockError) as exc:
        read_calendar(calendar_text("BEGIN:VEVENT", "UID:1", "DTSTART:20240101T100000Z", "END:VTODO"))
    assert exc.value.token == "VTODO"
    assert exc.value.expected == "VEVENT"
    assert exc.value.line_number == 7


def test_end_calendar_with_open_event():
    with pytest.raises(InvalidEndBlockError):
        read_calendar("BEGIN:VCALENDAR\nVERSION:2.0\nPRODID:X\nBEGIN:VEVENT\nEND:VCALENDAR\n")


@pytest.mark.parametrize(
    "lines",
    [
        ("BEGIN:VCALENDAR",),
        ("BEGIN:VALARM", "END:VALARM"),
        ("BEGIN:STANDARD", "END:STANDARD"),
        ("BEGIN:VCARD", "END:VCARD"),
        ("BEGIN:VEVENT", "BEGIN:VTODO"),
        ("BEGIN:VTIMEZONE", "BEGIN:VALARM"),
        ("BEGIN:VFREEBUSY", "BEGIN:VALARM"),
        ("BEGIN:VEVENT", "BEGIN:VALARM", "BEGIN:VALARM"),
    ],
)
def test_illegal_nesting(lines):
    with pytest.raises(InvalidStartBlockError) as exc:
        read_calendar(calendar_text(*lines))
    assert exc.value.token == lines[-1].split(":")[1]


def test_malformed_line_has_line_number():
    with pytest.raises(MalformedLineError) as exc:
        read_calendar(event_text("THIS LINE HAS NO DELIMITER"))
    assert exc.value.line_number == 7
    assert str(exc.value).startswith("At line 7:")


def test_folded_line_is_not_unfolded():
    """A continuation line is parsed on its own and fails"""
    with pytest.raises(ParseError):
        read_calendar(event_text("DESCRIPTION:first half", " second half"))


def test_parser_state_is_per_call():
    """Two parsers fed in turn do not share state"""
    first, second = CalendarParser(), CalendarParser()
    first.feed("BEGIN:VCALENDAR", 1)
    second.feed("BEGIN:VCALENDAR", 1)
    first.feed("VERSION:2.0", 2)
    first.feed("PRODID:first", 3)
    second.feed("VERSION:2.0", 2)
    second.feed("PRODID:second", 3)
    first.feed("END:VCALENDAR", 4)
    assert first.close().prodid == "first"
    with pytest.raises(MissingEndError):
        second.close()


def test_component_stack():
    stack = ComponentStack()
    assert not stack
    assert stack.top() is None
    assert stack.top_name() is None


def test_byte_order_mark():
    text = get_test_file("minimal.ics")
    assert read_calendar("\ufeff" + text) == read_calendar(text)
    assert read_calendar(b"\xef\xbb\xbf" + text.encode("utf-8")) == read_calendar(text)


def test_read_file_with_byte_order_mark(tmp_path):
    path = tmp_path / "bom.ics"
    path.write_bytes(b"\xef\xbb\xbf" + get_test_file("minimal.ics").encode("utf-8"))
    assert read_file(str(path)).prodid == "X"


def test_invalid_utf8_bytes():
    with pytest.raises(InvalidEncodingError) as exc:
        read_calendar(event_text("SUMMARY:\xff").encode("latin-1"))
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_invalid_utf8_file(tmp_path):
    path = tmp_path / "latin1.ics"
    path.write_bytes(event_text("SUMMARY:caf\xe9").encode("latin-1"))
    with pytest.raises(InvalidEncodingError):
        read_file(str(path))
