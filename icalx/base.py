"""icalx module for reading iCalendar files."""

from __future__ import annotations

from .exceptions import (
    ContentAfterEndError,
    EmptyDocumentError,
    InvalidEncodingError,
    InvalidEndBlockError,
    InvalidStartBlockError,
    MalformedLineError,
    MissingBeginError,
    MissingEndError,
    RegistryError,
    VObjectError,
)
from .helper.config import get_buffer, logger
from .helper.constants import Character as Char
from .helper.constants import Delimiter
from .helper.imports_ import TextIO

ROOT_COMPONENT = "VCALENDAR"


class ContentLine:
    """
    Holds one parsed property line.

    @ivar name:
        The uppercased property name, for instance DTSTART.
    @ivar params:
        A dictionary of uppercased parameter names to parameter values with
        surrounding double quotes removed. When a parameter repeats, the
        first occurrence is kept.
    @ivar value:
        Everything after the first colon found outside of double quotes.
    @ivar line_number:
        The physical line the property was read from, or None.
    """

    def __init__(self, name, params, value, line_number=None):
        self.name = name.upper()
        self.params = params
        self.value = value
        self.line_number = line_number

    def __eq__(self, other):
        try:
            return (self.name, self.params, self.value) == (other.name, other.params, other.value)
        except AttributeError:
            return False

    def __repr__(self):
        return f"<{self.name}{self.params}{self.value!r}>"


class OpenComponent:
    """A component whose BEGIN has been read but not its END."""

    def __init__(self, behavior, obj, line_number=None):
        self.behavior = behavior
        self.obj = obj
        self.line_number = line_number

    @property
    def name(self):
        return self.behavior.name


class ComponentStack:
    """Open components, the innermost one on top."""

    def __init__(self):
        self.stack = []

    def __len__(self):
        return len(self.stack)

    def __bool__(self):
        return bool(self.stack)

    def top(self):
        return self.stack[-1] if self.stack else None

    def top_name(self):
        return self.stack[-1].name if self.stack else None

    def push(self, component):
        self.stack.append(component)

    def pop(self):
        return self.stack.pop()

    def open_child(self, token, line_number=None):
        """
        Create the record for a BEGIN:<token> line below the innermost open
        component and make it the target for following property lines.
        """
        parent = self.top()
        opened = parent.behavior.add_child(parent.obj, token)
        if opened is None:
            raise InvalidStartBlockError(token, parent.name)
        behavior, obj = opened
        self.push(OpenComponent(behavior, obj, line_number))
        return obj


# --------------------------------- line lexer ----------------------------------
def split_unquoted(text, delimiter, maxsplit=-1):
    """
    Split text on delimiter, ignoring delimiters inside double quotes.
    """
    parts = []
    start = 0
    in_quotes = False
    for i, char in enumerate(text):
        if char == Char.DQUOTE:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes and maxsplit != 0:
            parts.append(text[start:i])
            start = i + 1
            maxsplit -= 1
    parts.append(text[start:])
    return parts


def parse_params(string, line, line_number=None):
    """
    Parse the ;-separated parameter list following a property name.
    """
    params = {}
    for segment in split_unquoted(string, Delimiter.PARAM):
        if not segment:
            continue
        key, sep, value = segment.partition(Delimiter.PARAM_VALUE)
        if not sep or not key:
            raise MalformedLineError(line, line_number, f"invalid parameter {segment!r}")
        params.setdefault(key.upper(), value.replace(Char.DQUOTE, ""))
    return params


def parse_line(line, line_number=None):
    """
    Split one property line into a ContentLine.

    The value starts after the first colon which is not inside double quotes,
    so quoted parameter values may contain ':' and ';'.
    """
    parts = split_unquoted(line, Delimiter.VALUE, maxsplit=1)
    if len(parts) != 2:
        raise MalformedLineError(line, line_number)
    prefix, value = parts
    name, _, params = prefix.partition(Delimiter.PARAM)
    if not name:
        raise MalformedLineError(line, line_number, "missing property name")
    return ContentLine(name, parse_params(params, line, line_number), value, line_number)


def get_lines(fp: TextIO):
    """
    Iterate through a stream, yielding (line, line_number) for every
    non-blank physical line.

    Folded lines are not joined, a continuation line is read on its own. A
    leading byte order mark is dropped.
    """
    try:
        for line_number, line in enumerate(fp, start=1):
            if line_number == 1:
                line = line.lstrip(Char.BOM)
            line = line.strip(Char.CRLF + Char.SPACEORTAB)
            if line:
                yield line, line_number
    except UnicodeDecodeError as e:
        raise InvalidEncodingError(e.reason) from e


# ------------------------------- state machine ---------------------------------
class CalendarParser:
    """
    Parse state of a single read_calendar call.

    Lines are fed in order, BEGIN and END lines open and close components on
    the stack, every other line is handed to the innermost open component.
    """

    def __init__(self, strict=True):
        self.strict = strict
        self.stack = ComponentStack()
        self.calendar = None
        self.closed = False

    def feed(self, line, line_number=None):
        try:
            self._feed(line, line_number)
        except VObjectError as e:
            if e.line_number is None:
                e.line_number = line_number
            raise

    def _feed(self, line, line_number):
        if self.closed:
            raise ContentAfterEndError(line)
        content = parse_line(line, line_number)
        if content.name == "BEGIN":
            self.begin(content.value.strip().upper(), line_number)
        elif content.name == "END":
            self.end(content.value.strip().upper(), line_number)
        elif not self.stack:
            raise MissingBeginError(inputs=line)
        else:
            top = self.stack.top()
            top.behavior.set_property(top.obj, content, strict=self.strict)

    def begin(self, token, line_number=None):
        if self.stack:
            self.stack.open_child(token, line_number)
        elif self.calendar is None and token == ROOT_COMPONENT:
            behavior = get_behavior(ROOT_COMPONENT)
            self.calendar = behavior.new()
            self.stack.push(OpenComponent(behavior, self.calendar, line_number))
        else:
            raise InvalidStartBlockError(token)
        logger.debug(f"BEGIN:{token!s} at line {line_number!s}")

    def end(self, token, line_number=None):
        if not self.stack:
            raise MissingBeginError()
        if token != self.stack.top_name():
            raise InvalidEndBlockError(token, self.stack.top_name())
        component = self.stack.pop()
        component.behavior.validate(component.obj)
        logger.debug(f"END:{token!s} at line {line_number!s}")
        if not self.stack:
            self.closed = True

    def close(self):
        """
        Return the calendar once the input is exhausted.
        """
        if self.calendar is None:
            raise EmptyDocumentError()
        if self.stack:
            raise MissingEndError(self.stack.top_name())
        return self.calendar


def read_calendar(stream_or_string, strict=True):
    """
    Parse iCalendar text (a str, UTF-8 bytes or a text stream) into a Calendar.

    The first error aborts parsing. With strict=False unknown properties are
    kept as extensions instead of raising UnknownPropertyError.
    """
    stream = get_buffer(stream_or_string)
    parser = CalendarParser(strict=strict)
    for line, n in get_lines(stream):
        parser.feed(line, n)
    return parser.close()


def read_file(path, strict=True):
    """
    Parse the iCalendar file at path.
    """
    with open(path, encoding="utf-8-sig") as fp:
        return read_calendar(fp, strict=strict)


# --------------------------- behavior registry ---------------------------------
__behavior_registry = {}


def register_behavior(behavior, name=None):
    """
    Register the given behavior under name, or under behavior.name.
    """
    if not name:
        name = behavior.name.upper()
    if not name:
        raise RegistryError(f"Cannot register {behavior!r} without a name")
    __behavior_registry[name] = behavior


def get_behavior(name):
    """
    Return a matching behavior if it exists, or None.
    """
    return __behavior_registry.get(name.upper())
