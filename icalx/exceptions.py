class VObjectError(Exception):
    def __init__(self, msg, line_number=None):
        super().__init__(msg)
        self.msg = msg
        self.line_number = line_number

    def __str__(self):
        if self.line_number is None:
            return repr(self.msg)
        return f"At line {self.line_number!s}: {self.msg!s}"


class ParseError(VObjectError):
    def __init__(self, msg, line_number=None, *, inputs=None):
        super().__init__(msg, line_number)
        self.inputs = inputs


class ValidateError(ParseError):
    pass


class RegistryError(VObjectError):
    """Misuse of the behavior registry, never caused by calendar data."""


# ------------------------------- document level --------------------------------
class EmptyDocumentError(ParseError):
    def __init__(self, line_number=None):
        super().__init__("empty calendar sent", line_number)


class InvalidEncodingError(ParseError):
    def __init__(self, reason, line_number=None):
        super().__init__(f"calendar is not valid UTF-8: {reason!s}", line_number)
        self.reason = reason


class MalformedLineError(ParseError):
    def __init__(self, line, line_number=None, reason="no unquoted ':' delimiter"):
        super().__init__(f"Failed to parse line: {line!s} ({reason})", line_number, inputs=line)
        self.line = line


class MissingBeginError(ParseError):
    def __init__(self, line_number=None, *, inputs=None):
        super().__init__("must start with BEGIN:VCALENDAR", line_number, inputs=inputs)


class MissingEndError(ParseError):
    def __init__(self, token, line_number=None):
        super().__init__(f"must end with END:VCALENDAR, {token!s} was never closed", line_number)
        self.token = token


class ContentAfterEndError(ParseError):
    def __init__(self, line, line_number=None):
        super().__init__(f"content after END:VCALENDAR: {line!s}", line_number, inputs=line)
        self.line = line


class InvalidStartBlockError(ParseError):
    def __init__(self, token, parent=None, line_number=None):
        where = f" inside {parent!s}" if parent else ""
        super().__init__(f"invalid start block: BEGIN:{token!s}{where}", line_number)
        self.token = token
        self.parent = parent


class InvalidEndBlockError(ParseError):
    def __init__(self, token, expected=None, line_number=None):
        super().__init__(f"invalid end block: END:{token!s} while {expected!s} is open", line_number)
        self.token = token
        self.expected = expected


# ------------------------------- component level -------------------------------
class DuplicatePropertyError(ParseError):
    def __init__(self, component, prop, line_number=None):
        super().__init__(f"duplicate property error: {prop!s} set twice in component {component!s}", line_number)
        self.component = component
        self.property = prop


class ComponentParseError(ParseError):
    def __init__(self, component, prop, value, line_number=None, *, reason=None):
        msg = f"parse error in component: {component!s} property {prop!s} in iCal: {value!s}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg, line_number, inputs=value)
        self.component = component
        self.property = prop
        self.value = value


class MutuallyExclusivePropertyError(ValidateError):
    def __init__(self, component, fields, line_number=None):
        names = " and ".join(fields)
        super().__init__(f"{component!s} components cannot contain both {names}", line_number)
        self.component = component
        self.fields = tuple(fields)


class MissingRequiredPropertyError(ValidateError):
    def __init__(self, component, field, line_number=None):
        super().__init__(f"{component!s} is missing required property {field!s}", line_number)
        self.component = component
        self.field = field


class UnknownPropertyError(ParseError):
    def __init__(self, component, prop, line_number=None):
        super().__init__(f"invalid property {prop!s} in component {component!s}", line_number)
        self.component = component
        self.property = prop


# -------------------------------- value level ----------------------------------
class InvalidURIError(ParseError):
    def __init__(self, value, reason="invalid URI", line_number=None):
        super().__init__(f"parse {value!r}: {reason!s}", line_number, inputs=value)
        self.value = value
        self.reason = reason


class InvalidDateTimeError(ParseError):
    def __init__(self, value, kind="DATE-TIME", line_number=None):
        super().__init__(f"'{value!s}' is not a valid {kind!s}", line_number, inputs=value)
        self.value = value


class InvalidValueError(ParseError):
    """A scalar (integer, float, enumerated text) that does not parse."""

    def __init__(self, value, kind, line_number=None):
        super().__init__(f"'{value!s}' is not a valid {kind!s}", line_number, inputs=value)
        self.value = value


class InvalidGeoError(ParseError):
    def __init__(self, msg, value, line_number=None):
        super().__init__(msg, line_number, inputs=value)
        self.value = value


class GeoFormatError(InvalidGeoError):
    def __init__(self, value, line_number=None):
        super().__init__(f"invalid GEO format, expected 'latitude;longitude': {value!s}", value, line_number)


class GeoLatitudeError(InvalidGeoError):
    def __init__(self, value, line_number=None):
        super().__init__(f"invalid latitude in GEO property: {value!s}", value, line_number)


class GeoLongitudeError(InvalidGeoError):
    def __init__(self, value, line_number=None):
        super().__init__(f"invalid longitude in GEO property: {value!s}", value, line_number)


class InvalidFreeBusyError(ParseError):
    def __init__(self, value, reason="invalid FREEBUSY format", line_number=None):
        super().__init__(f"{reason!s}: {value!s}", line_number, inputs=value)
        self.value = value
        self.reason = reason


# ---------------------------------- durations ----------------------------------
class InvalidDurationError(ParseError):
    reason = "invalid duration"

    def __init__(self, value, line_number=None):
        super().__init__(f"{self.reason}: {value!r}", line_number, inputs=value)
        self.value = value


class EmptyDurationError(InvalidDurationError):
    reason = "empty duration string"


class DurationPrefixError(InvalidDurationError):
    reason = "duration must start with 'P'"


class DurationMissingUnitError(InvalidDurationError):
    reason = "missing unit after number in duration"


class DurationTimeWithoutTError(InvalidDurationError):
    reason = "time unit before 'T' in duration"


class DurationDuplicateUnitError(InvalidDurationError):
    reason = "duplicate unit in duration"


class DurationUnexpectedCharError(InvalidDurationError):
    reason = "unexpected character in duration"


class DurationMixedWeeksError(InvalidDurationError):
    reason = "weeks cannot be combined with other units in duration"


# ------------------------------- recurrence rules ------------------------------
class InvalidRecurrenceRuleError(ParseError):
    reason = "invalid RRULE"

    def __init__(self, value, detail=None, line_number=None):
        msg = f"{self.reason}: {value!r}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg, line_number, inputs=value)
        self.value = value
        self.detail = detail


class InvalidRRuleStringError(InvalidRecurrenceRuleError):
    reason = "invalid RRULE string"


class FrequencyRequiredError(InvalidRecurrenceRuleError):
    reason = "FREQ is required in RRULE"


class InvalidFrequencyError(InvalidRecurrenceRuleError):
    reason = "invalid FREQ in RRULE"


class CountAndUntilError(InvalidRecurrenceRuleError):
    reason = "COUNT and UNTIL cannot both be set in RRULE"


class InvalidIntervalError(InvalidRecurrenceRuleError):
    reason = "INTERVAL must be greater than 0 in RRULE"


class InvalidByDayError(InvalidRecurrenceRuleError):
    reason = "invalid BYDAY entry in RRULE"


class InvalidRRuleValueError(InvalidRecurrenceRuleError):
    reason = "invalid value in RRULE"
