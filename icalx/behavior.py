from .base import get_behavior
from .exceptions import MissingRequiredPropertyError, RegistryError, UnknownPropertyError
from .helper.config import logger
from .helper.constants import Delimiter


# ------------------------ Abstract class for behavior --------------------------
class Behavior:
    """
    Parsing rules for one iCalendar component.

    Behavior subclasses are not meant to be instantiated, all methods should
    be classmethods.

    @cvar name:
        The uppercase name of the component, for instance VEVENT.
    @cvar description:
        A brief excerpt from the RFC explaining the function of the component.
    @cvar record:
        The model class instantiated when the component's BEGIN line is read.
    @cvar children:
        A dictionary with uppercased names of the components allowed directly
        inside this one as keys and the name of the record's list attribute
        collecting them as values.
    @cvar properties:
        The dispatch table, a dictionary with uppercased property names as keys
        and L{PropertySetter<properties.PropertySetter>} instances as values.
    @cvar required:
        A tuple of (property name, attribute) pairs which must hold a non
        empty value when the component ends.
    """

    name = ""
    description = ""
    record = None
    children = {}
    properties = {}
    required = ()

    def __init__(self):
        err = "Behavior subclasses are not meant to be instantiated"
        raise RegistryError(err)

    @classmethod
    def new(cls):
        """Return an empty record for this component."""
        if cls.record is None:
            raise RegistryError(f"{cls.__name__} has no record class")
        return cls.record()

    @classmethod
    def add_child(cls, obj, name):
        """
        Create a child record and append it to obj.

        Return a (behavior, record) tuple, or None if name may not appear
        inside this component.
        """
        attribute = cls.children.get(name)
        behavior = get_behavior(name) if attribute else None
        if behavior is None:
            return None
        child = behavior.new()
        getattr(obj, attribute).append(child)
        return behavior, child

    @classmethod
    def set_property(cls, obj, line, strict=True):
        """
        Route a ContentLine to the setter registered for its name.

        X- properties are kept in obj.extensions. Other unknown properties
        raise UnknownPropertyError, unless strict is False.
        """
        setter = cls.properties.get(line.name)
        if setter is not None:
            setter.apply(cls.name, obj, line)
            return
        if not line.name.startswith(Delimiter.EXTENSION_PREFIX):
            if strict:
                raise UnknownPropertyError(cls.name, line.name)
            logger.warning(f"Unknown property {line.name!s} in {cls.name!s} kept as an extension")
        obj.extensions.setdefault(line.name, []).append(line.value)

    @classmethod
    def validate(cls, obj):
        """
        Check that every required property was given.
        """
        for name, attribute in cls.required:
            if is_empty(getattr(obj, attribute)):
                raise MissingRequiredPropertyError(cls.name, name)
        return True


def is_empty(value):
    return value is None or value == "" or value == []
