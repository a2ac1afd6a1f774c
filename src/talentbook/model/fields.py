"""
Validated field values for applicant records.

Every class here wraps raw text that has passed a field-specific syntactic
rule. Construction with invalid text raises ConstraintViolationError, so an
instance is always valid. Each class exposes its rule through `is_valid` and
its user-facing message through `MESSAGE_CONSTRAINTS`.
"""

import re
from datetime import date, datetime

from attrs import field, frozen

from talentbook.exceptions import ConstraintViolationError, FieldKind

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


def _satisfies_constraint(kind: FieldKind):
    """Build an attrs validator that checks a value with the owning class's rule."""

    def validate(instance, attribute, value) -> None:
        cls = type(instance)
        if not isinstance(value, str) or not cls.is_valid(value):
            raise ConstraintViolationError(kind, cls.MESSAGE_CONSTRAINTS, value)

    return validate


class _PatternField:
    """Mixin for fields whose rule is a single regular expression."""

    VALIDATION_REGEX: re.Pattern

    @classmethod
    def is_valid(cls, test: str) -> bool:
        return cls.VALIDATION_REGEX.fullmatch(test) is not None

    def __str__(self) -> str:
        return self.value


@frozen
class Name(_PatternField):
    MESSAGE_CONSTRAINTS = (
        "Names should only contain alphanumeric characters and spaces, "
        "and it should not be blank"
    )
    # First character must not be a space, otherwise " " is a valid name
    VALIDATION_REGEX = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")

    value: str = field(validator=_satisfies_constraint(FieldKind.NAME))


@frozen
class Phone(_PatternField):
    MIN_DIGITS = 3
    MAX_DIGITS = 15
    MESSAGE_CONSTRAINTS = (
        "Phone numbers should only contain numbers, "
        f"and it should be between {MIN_DIGITS} and {MAX_DIGITS} digits long"
    )
    VALIDATION_REGEX = re.compile(rf"\d{{{MIN_DIGITS},{MAX_DIGITS}}}", re.ASCII)

    value: str = field(validator=_satisfies_constraint(FieldKind.PHONE))


@frozen
class Email(_PatternField):
    """
    An email address of the form local-part@domain.

    The local-part holds alphanumerics and the characters `+_.-`, and may not
    start or end with one of those characters. The domain is one or more
    labels separated by periods; each label is alphanumeric with hyphens
    allowed only between characters, and the last label has at least two
    characters.
    """

    SPECIAL_CHARACTERS = "+_.-"
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these "
        f"special characters, excluding the parentheses, ({SPECIAL_CHARACTERS}). "
        "The local-part may not start or end with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is "
        "made up of domain labels separated by periods.\n"
        "The domain name must:\n"
        "    - end with a domain label at least 2 characters long\n"
        "    - have each domain label start and end with alphanumeric characters\n"
        "    - have each domain label consist of alphanumeric characters, "
        "separated only by hyphens, if any."
    )
    _ALNUM = r"[A-Za-z0-9]+"
    _LOCAL_PART = rf"{_ALNUM}(?:[{re.escape(SPECIAL_CHARACTERS)}]{_ALNUM})*"
    _DOMAIN_LABEL = rf"{_ALNUM}(?:-{_ALNUM})*"
    _DOMAIN_LAST_LABEL = rf"(?=[A-Za-z0-9-]{{2,}}$){_DOMAIN_LABEL}"
    VALIDATION_REGEX = re.compile(
        rf"{_LOCAL_PART}@(?:{_DOMAIN_LABEL}\.)*{_DOMAIN_LAST_LABEL}"
    )

    value: str = field(validator=_satisfies_constraint(FieldKind.EMAIL))


@frozen
class Address(_PatternField):
    MESSAGE_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
    # First character must not be whitespace, otherwise " " is a valid address
    VALIDATION_REGEX = re.compile(r"\S.*")

    value: str = field(validator=_satisfies_constraint(FieldKind.ADDRESS))


@frozen
class Tag(_PatternField):
    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    VALIDATION_REGEX = re.compile(r"[A-Za-z0-9]+")

    value: str = field(validator=_satisfies_constraint(FieldKind.TAG))


def date_constraint_message(date_format: str) -> str:
    example = date(2024, 12, 31).strftime(date_format)
    return f"Interview dates should be valid calendar dates written like {example}"


def _is_calendar_date(instance, attribute, value) -> None:
    if not isinstance(value, date) or isinstance(value, datetime):
        raise ConstraintViolationError(
            FieldKind.DATE, date_constraint_message(instance.date_format), value
        )


@frozen
class InterviewDate:
    """
    The scheduled interview date of an applicant.

    Holds a real calendar date; `date_format` only controls how the date is
    written back out and does not take part in equality.
    """

    MESSAGE_CONSTRAINTS = date_constraint_message(DEFAULT_DATE_FORMAT)

    value: date = field(validator=_is_calendar_date)
    date_format: str = field(default=DEFAULT_DATE_FORMAT, eq=False)

    @classmethod
    def is_valid(cls, test: str, date_format: str = DEFAULT_DATE_FORMAT) -> bool:
        try:
            datetime.strptime(str.strip(test), date_format)
        except (TypeError, ValueError):
            return False
        return True

    @classmethod
    def parse(cls, raw: str, date_format: str = DEFAULT_DATE_FORMAT) -> "InterviewDate":
        """
        Parse raw text written in `date_format` into an InterviewDate.

        Params:
            raw: Text such as "2024-12-31"
            date_format: strptime format the text must follow

        Returns:
            The parsed InterviewDate

        Raises:
            ConstraintViolationError: When the text is not a valid date in that format
        """
        try:
            parsed = datetime.strptime(str.strip(raw), date_format).date()
        except (TypeError, ValueError) as e:
            raise ConstraintViolationError(
                FieldKind.DATE, date_constraint_message(date_format), raw
            ) from e
        return cls(parsed, date_format)

    def __str__(self) -> str:
        return self.value.strftime(self.date_format)
