"""
Exception classes for talentbook argument parsing.

This module defines specific exception types for the different ways a
command's arguments can be rejected: malformed commands, bad indexes,
field constraint violations, repeated single-valued fields and edits that
change nothing.
"""

from enum import Enum
from typing import Iterable

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "


class FieldKind(Enum):
    """Kinds of fields that can be supplied to a command."""

    INDEX = "index"
    NAME = "name"
    PHONE = "phone"
    EMAIL = "email"
    ADDRESS = "address"
    TAG = "tag"
    DATE = "date"


class TalentbookError(Exception):
    """Base exception for all talentbook errors."""

    pass


class SettingsError(TalentbookError):
    """Raised when parser settings contain an invalid value."""

    def __init__(self, key: str, reason: str):
        """
        Initialize the exception.

        Params:
            key: Settings key holding the invalid value
            reason: Why the value is invalid
        """
        self.key = key
        self.reason = reason
        super().__init__(f"Invalid setting '{key}': {reason}")


class ParseException(TalentbookError):
    """Raised when user input does not conform to the expected format."""

    def __init__(self, message: str):
        """
        Initialize the exception.

        Params:
            message: User-facing error message
        """
        self.message = message
        super().__init__(message)


class InvalidCommandFormatError(ParseException):
    """Raised when a command is malformed as a whole."""

    def __init__(self, usage: str):
        """
        Initialize the exception.

        Params:
            usage: The command's canonical usage string
        """
        self.usage = usage
        super().__init__(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))


class IndexFormatError(ParseException):
    """Raised when an index is not a non-zero unsigned integer."""

    MESSAGE = "Index is not a non-zero unsigned integer."

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(self.MESSAGE)


class IndexRangeError(ParseException):
    """Raised when an index is numerically valid but larger than supported."""

    MESSAGE = "Index is too large; it must be at most {max_index}."

    def __init__(self, raw: str, max_index: int):
        self.raw = raw
        self.max_index = max_index
        super().__init__(self.MESSAGE.format(max_index=max_index))


class ConstraintViolationError(ParseException):
    """Raised when a field value fails its syntactic constraint."""

    def __init__(self, field: FieldKind, message: str, value: str | None = None):
        """
        Initialize the exception.

        Params:
            field: Kind of field whose value was rejected
            message: The field's constraint message
            value: The rejected raw value, if known
        """
        self.field = field
        self.value = value
        super().__init__(message)


class DuplicatePrefixError(ParseException):
    """Raised when single-valued fields are supplied more than once."""

    def __init__(self, prefixes: Iterable):
        """
        Initialize the exception.

        Params:
            prefixes: Every prefix that was repeated, in reporting order
        """
        self.prefixes = tuple(prefixes)
        super().__init__(duplicate_prefixes_message(self.prefixes))


class NothingToEditError(ParseException):
    """Raised when an edit-style command supplies no field to change."""

    pass


def duplicate_prefixes_message(prefixes: Iterable) -> str:
    """
    Build the error message listing repeated single-valued prefixes.

    Params:
        prefixes: Prefixes (or their string forms) that were repeated

    Returns:
        Message naming every prefix, separated by spaces
    """
    return MESSAGE_DUPLICATE_FIELDS + " ".join(str(prefix) for prefix in prefixes)
