"""
Field validators for talentbook command arguments.

Each `parse_*` function is pure: it trims its raw input and either returns a
validated value or raises the field's ParseException. `validators_for`
collects them into a table keyed by FieldKind so command parsers can look
up the parse function and constraint message for any field.
"""

import re
from functools import partial
from typing import Iterable, NamedTuple

from talentbook.core.index import DEFAULT_MAX_INDEX, Index
from talentbook.core.types import FieldParser
from talentbook.exceptions import FieldKind, IndexFormatError, IndexRangeError
from talentbook.model.fields import (
    DEFAULT_DATE_FORMAT,
    Address,
    Email,
    InterviewDate,
    Name,
    Phone,
    Tag,
    date_constraint_message,
)
from talentbook.parsing.settings import DEFAULT_SETTINGS, ParserSettings

UNSIGNED_INTEGER_PATTERN = re.compile(r"[0-9]+")


def parse_index(one_based: str, max_index: int = DEFAULT_MAX_INDEX) -> Index:
    """
    Parse a one-based index typed by the user.

    Params:
        one_based: Raw text, e.g. "3"
        max_index: Largest one-based index accepted

    Returns:
        The validated Index

    Raises:
        IndexFormatError: When the text is not a non-zero unsigned integer
        IndexRangeError: When the number is larger than `max_index`
    """
    trimmed = one_based.strip()
    if not UNSIGNED_INTEGER_PATTERN.fullmatch(trimmed):
        raise IndexFormatError(trimmed)

    # int() refuses very long digit strings, so range is settled by length first
    significant = trimmed.lstrip("0")
    if not significant:
        raise IndexFormatError(trimmed)
    if len(significant) > len(str(max_index)):
        raise IndexRangeError(trimmed, max_index)

    value = int(significant)
    if value > max_index:
        raise IndexRangeError(trimmed, max_index)
    return Index.from_one_based(value)


def parse_name(name: str) -> Name:
    return Name(name.strip())


def parse_phone(phone: str) -> Phone:
    return Phone(phone.strip())


def parse_email(email: str) -> Email:
    return Email(email.strip())


def parse_address(address: str) -> Address:
    return Address(address.strip())


def parse_tag(tag: str) -> Tag:
    return Tag(tag.strip())


def parse_tags(tags: Iterable[str]) -> frozenset[Tag]:
    """
    Parse a collection of raw tags into a set.

    Repeated tags collapse into one. Validation stops at the first invalid
    tag in iteration order.

    Raises:
        ConstraintViolationError: For the first tag that is not alphanumeric
    """
    return frozenset(parse_tag(tag) for tag in tags)


def parse_date(date: str, date_format: str = DEFAULT_DATE_FORMAT) -> InterviewDate:
    return InterviewDate.parse(date.strip(), date_format)


class FieldValidator(NamedTuple):
    """A field's parse function paired with its constraint message."""

    parse: FieldParser
    message: str


def validators_for(settings: ParserSettings) -> dict[FieldKind, FieldValidator]:
    """
    Build the validator table for one configuration.

    Params:
        settings: Supplies the index limit and date format

    Returns:
        FieldKind to FieldValidator for every field kind
    """
    date_format = settings.date_format
    return {
        FieldKind.INDEX: FieldValidator(
            partial(parse_index, max_index=settings.max_index), IndexFormatError.MESSAGE
        ),
        FieldKind.NAME: FieldValidator(parse_name, Name.MESSAGE_CONSTRAINTS),
        FieldKind.PHONE: FieldValidator(parse_phone, Phone.MESSAGE_CONSTRAINTS),
        FieldKind.EMAIL: FieldValidator(parse_email, Email.MESSAGE_CONSTRAINTS),
        FieldKind.ADDRESS: FieldValidator(parse_address, Address.MESSAGE_CONSTRAINTS),
        FieldKind.TAG: FieldValidator(parse_tag, Tag.MESSAGE_CONSTRAINTS),
        FieldKind.DATE: FieldValidator(
            partial(parse_date, date_format=date_format),
            date_constraint_message(date_format),
        ),
    }


FIELD_VALIDATORS = validators_for(DEFAULT_SETTINGS)
