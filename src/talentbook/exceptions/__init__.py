"""
talentbook exception classes.

This package provides all exception types used throughout talentbook
for consistent error handling and reporting.
"""

from talentbook.exceptions.core import (
    MESSAGE_DUPLICATE_FIELDS,
    MESSAGE_INVALID_COMMAND_FORMAT,
    ConstraintViolationError,
    DuplicatePrefixError,
    FieldKind,
    IndexFormatError,
    IndexRangeError,
    InvalidCommandFormatError,
    NothingToEditError,
    ParseException,
    SettingsError,
    TalentbookError,
    duplicate_prefixes_message,
)

__all__ = [
    "MESSAGE_DUPLICATE_FIELDS",
    "MESSAGE_INVALID_COMMAND_FORMAT",
    "TalentbookError",
    "SettingsError",
    "ParseException",
    "InvalidCommandFormatError",
    "IndexFormatError",
    "IndexRangeError",
    "ConstraintViolationError",
    "DuplicatePrefixError",
    "NothingToEditError",
    "FieldKind",
    "duplicate_prefixes_message",
]
