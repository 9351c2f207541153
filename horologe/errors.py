"""Horologe exception hierarchy.

All Horologe-specific exceptions inherit from HorologeError. Errors carry
their details as attributes so callers can inspect them without parsing
the message.
"""

from __future__ import annotations


class HorologeError(Exception):
    """Base exception for all Horologe errors."""

    pass


class ComponentRangeError(HorologeError, ValueError):
    """A component provided to a constructor was out of range.

    Attributes:
        name: Name of the component (e.g. "hour").
        minimum: Minimum allowed value, inclusive.
        maximum: Maximum allowed value, inclusive.
        value: The value that was provided.
        conditional_range: True when the bounds depend on the values of
            other components (e.g. the maximum day depends on the month).

    Examples:
        >>> err = ComponentRangeError("hour", 0, 23, 24)
        >>> str(err)
        'hour must be in the range 0..=23'
    """

    def __init__(
        self,
        name: str,
        minimum: int,
        maximum: int,
        value: int,
        conditional_range: bool = False,
    ) -> None:
        self.name = name
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        self.conditional_range = conditional_range
        message = f"{name} must be in the range {minimum}..={maximum}"
        if conditional_range:
            message += ", given values of other parameters"
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentRangeError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self) -> tuple[str, int, int, int, bool]:
        return (
            self.name,
            self.minimum,
            self.maximum,
            self.value,
            self.conditional_range,
        )

    def __repr__(self) -> str:
        return (
            f"ComponentRangeError(name={self.name!r}, minimum={self.minimum}, "
            f"maximum={self.maximum}, value={self.value}, "
            f"conditional_range={self.conditional_range})"
        )


class ConversionRangeError(HorologeError, ValueError):
    """A value could not be stored in the target type.

    Raised when converting from a host value (such as a ``datetime``)
    that lies outside the supported range.
    """

    def __init__(self) -> None:
        super().__init__("Source value is out of range for the target type")


class IndeterminateOffsetError(HorologeError):
    """The system's UTC offset could not be determined."""

    def __init__(self) -> None:
        super().__init__("The system's UTC offset could not be determined")


# Formatting


class FormatError(HorologeError):
    """An error occurred while formatting a value."""

    pass


class InsufficientTypeInformation(FormatError):
    """The format requires more information than the value provides.

    Raised, for example, when an ``[offset_hour]`` component is rendered
    without a UtcOffset.
    """

    def __init__(self) -> None:
        super().__init__(
            "The format provided requires more information than the type provides."
        )


class InvalidFormatComponent(FormatError):
    """A component cannot be expressed by the requested format.

    Attributes:
        component: Name of the offending component.
    """

    def __init__(self, component: str) -> None:
        self.component = component
        super().__init__(
            f"The {component} component cannot be formatted into the requested format."
        )


class FormatOutputError(FormatError):
    """Writing to the output sink failed.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, message: str = "an error occurred when writing the output") -> None:
        super().__init__(message)


# Format description compilation


class InvalidFormatDescription(HorologeError, ValueError):
    """The textual format description could not be compiled."""

    pass


class UnclosedOpeningBracket(InvalidFormatDescription):
    """A ``[`` was never closed.

    Attributes:
        index: Position of the opening bracket.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"unclosed opening bracket at index {index}")


class InvalidComponentName(InvalidFormatDescription):
    """The component name is not recognized.

    Attributes:
        name: The unrecognized name.
        index: Position of the name.
    """

    def __init__(self, name: str, index: int) -> None:
        self.name = name
        self.index = index
        super().__init__(f"invalid component name `{name}` at index {index}")


class InvalidModifier(InvalidFormatDescription):
    """A modifier is unknown or has an invalid value.

    Attributes:
        value: The offending modifier text.
        index: Position of the modifier.
    """

    def __init__(self, value: str, index: int) -> None:
        self.value = value
        self.index = index
        super().__init__(f"invalid modifier `{value}` at index {index}")


class MissingComponentName(InvalidFormatDescription):
    """A bracketed component contains no name.

    Attributes:
        index: Position of the opening bracket.
    """

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"missing component name at index {index}")


class ConflictingModifier(InvalidFormatDescription):
    """The same modifier key was given more than once.

    Attributes:
        key: The repeated modifier key.
        index: Position of the repeated modifier.
    """

    def __init__(self, key: str, index: int) -> None:
        self.key = key
        self.index = index
        super().__init__(f"modifier `{key}` specified more than once at index {index}")


# Parsing


class ParseError(HorologeError, ValueError):
    """Parsing input against a format description failed."""

    pass


class InvalidLiteral(ParseError):
    """A literal in the format did not match the input."""

    def __init__(self) -> None:
        super().__init__("a literal was not present in the input")


class InvalidComponent(ParseError):
    """A component could not be read from the input.

    Attributes:
        component: Name of the component.
    """

    def __init__(self, component: str) -> None:
        self.component = component
        super().__init__(f"the {component} component could not be parsed")


class InsufficientInformation(ParseError):
    """The parsed components do not determine the requested type."""

    def __init__(self) -> None:
        super().__init__(
            "insufficient information was parsed to construct the requested type"
        )


class ParsedComponentRange(ParseError):
    """A parsed value was out of range for the requested type.

    Attributes:
        component_range: The ComponentRangeError raised by the constructor.
    """

    def __init__(self, component_range: ComponentRangeError) -> None:
        self.component_range = component_range
        super().__init__(str(component_range))


class UnexpectedTrailingCharacters(ParseError):
    """Input remained after every format item was consumed."""

    def __init__(self) -> None:
        super().__init__("unexpected trailing characters; the end of input was expected")


__all__ = [
    "HorologeError",
    "ComponentRangeError",
    "ConversionRangeError",
    "IndeterminateOffsetError",
    "FormatError",
    "InsufficientTypeInformation",
    "InvalidFormatComponent",
    "FormatOutputError",
    "InvalidFormatDescription",
    "UnclosedOpeningBracket",
    "InvalidComponentName",
    "InvalidModifier",
    "MissingComponentName",
    "ConflictingModifier",
    "ParseError",
    "InvalidLiteral",
    "InvalidComponent",
    "InsufficientInformation",
    "ParsedComponentRange",
    "UnexpectedTrailingCharacters",
]
