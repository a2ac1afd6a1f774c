"""
Tests for the per-field validators and the validator table.
"""

from datetime import date

import pytest

from talentbook.core.index import DEFAULT_MAX_INDEX, Index
from talentbook.exceptions import (
    ConstraintViolationError,
    FieldKind,
    IndexFormatError,
    IndexRangeError,
)
from talentbook.model.fields import Address, Email, InterviewDate, Name, Phone, Tag
from talentbook.parsing.parser_util import (
    FIELD_VALIDATORS,
    parse_address,
    parse_date,
    parse_email,
    parse_index,
    parse_name,
    parse_phone,
    parse_tag,
    parse_tags,
    validators_for,
)
from talentbook.parsing.settings import ParserSettings

WHITESPACE = " \t\r\n"


class TestParseIndex:
    @pytest.mark.parametrize("raw", ["", "  ", "abc", "-1", "+1", "0", "000", "1 2", "1.0", "١"])
    def test_not_a_non_zero_unsigned_integer(self, raw):
        with pytest.raises(IndexFormatError) as exc_info:
            parse_index(raw)
        assert exc_info.value.message == IndexFormatError.MESSAGE

    def test_out_of_range(self):
        with pytest.raises(IndexRangeError) as exc_info:
            parse_index(str(DEFAULT_MAX_INDEX + 1))
        assert exc_info.value.max_index == DEFAULT_MAX_INDEX

        with pytest.raises(IndexRangeError):
            parse_index("100000000000000000000000000000")

    def test_custom_maximum(self):
        assert parse_index("10", max_index=10) == Index.from_one_based(10)
        with pytest.raises(IndexRangeError):
            parse_index("11", max_index=10)

    def test_valid(self):
        assert parse_index("1") == Index.from_one_based(1)
        assert parse_index(WHITESPACE + "1" + WHITESPACE) == Index.from_one_based(1)
        assert parse_index("007") == Index.from_one_based(7)
        assert parse_index(str(DEFAULT_MAX_INDEX)).one_based == DEFAULT_MAX_INDEX

    def test_very_long_digit_strings(self):
        with pytest.raises(IndexRangeError) as exc_info:
            parse_index("9" * 5000)
        assert exc_info.value.max_index == DEFAULT_MAX_INDEX

        assert parse_index("0" * 5000 + "1") == Index.from_one_based(1)
        assert parse_index("0" * 5000 + "42", max_index=42).one_based == 42
        with pytest.raises(IndexFormatError):
            parse_index("0" * 5000)

    def test_leading_zeros_do_not_count_towards_range(self):
        assert parse_index("0000000010", max_index=10) == Index.from_one_based(10)
        with pytest.raises(IndexRangeError):
            parse_index("0000000011", max_index=10)


class TestParseFields:
    def test_values_are_trimmed(self):
        assert parse_name(WHITESPACE + "Rachel Walker" + WHITESPACE) == Name("Rachel Walker")
        assert parse_phone(WHITESPACE + "123456" + WHITESPACE) == Phone("123456")
        assert parse_email(WHITESPACE + "rachel@example.com" + WHITESPACE) == Email("rachel@example.com")
        assert parse_address(WHITESPACE + "123 Main Street #0505" + WHITESPACE) == Address("123 Main Street #0505")
        assert parse_tag(WHITESPACE + "friend" + WHITESPACE) == Tag("friend")
        assert parse_date(WHITESPACE + "2025-03-14" + WHITESPACE).value == date(2025, 3, 14)

    @pytest.mark.parametrize(
        "parse, raw, kind",
        [
            (parse_name, "R@chel", FieldKind.NAME),
            (parse_phone, "+651234", FieldKind.PHONE),
            (parse_email, "example.com", FieldKind.EMAIL),
            (parse_address, " ", FieldKind.ADDRESS),
            (parse_tag, "#friend", FieldKind.TAG),
            (parse_date, "14-03-2025", FieldKind.DATE),
        ],
    )
    def test_invalid_values(self, parse, raw, kind):
        with pytest.raises(ConstraintViolationError) as exc_info:
            parse(raw)
        assert exc_info.value.field is kind
        assert exc_info.value.message == FIELD_VALIDATORS[kind].message

    @pytest.mark.parametrize(
        "parse, raw",
        [
            (parse_name, "Rachel Walker"),
            (parse_phone, "123456"),
            (parse_email, "rachel@example.com"),
            (parse_address, "123 Main Street #0505"),
            (parse_tag, "friend"),
            (parse_date, "2025-03-14"),
        ],
    )
    def test_revalidating_is_idempotent(self, parse, raw):
        validated = parse(raw)
        assert parse(str(validated)) == validated

    def test_custom_date_format(self):
        assert parse_date("14/03/2025", "%d/%m/%Y") == InterviewDate(date(2025, 3, 14))


class TestParseTags:
    def test_empty_collection(self):
        assert parse_tags([]) == frozenset()

    def test_repeated_tags_collapse(self):
        assert parse_tags(["friend", "colleague", "friend"]) == frozenset({Tag("friend"), Tag("colleague")})

    def test_first_invalid_tag_reported(self):
        with pytest.raises(ConstraintViolationError) as exc_info:
            parse_tags(["friend", "b@d", "also bad!"])
        assert exc_info.value.value == "b@d"

    def test_empty_string_is_not_a_tag(self):
        with pytest.raises(ConstraintViolationError):
            parse_tags(["friend", ""])


class TestValidatorTable:
    def test_covers_every_field_kind(self):
        assert set(FIELD_VALIDATORS) == set(FieldKind)

    def test_messages(self):
        assert FIELD_VALIDATORS[FieldKind.INDEX].message == IndexFormatError.MESSAGE
        assert FIELD_VALIDATORS[FieldKind.NAME].message == Name.MESSAGE_CONSTRAINTS
        assert FIELD_VALIDATORS[FieldKind.PHONE].message == Phone.MESSAGE_CONSTRAINTS
        assert FIELD_VALIDATORS[FieldKind.EMAIL].message == Email.MESSAGE_CONSTRAINTS
        assert FIELD_VALIDATORS[FieldKind.ADDRESS].message == Address.MESSAGE_CONSTRAINTS
        assert FIELD_VALIDATORS[FieldKind.TAG].message == Tag.MESSAGE_CONSTRAINTS
        assert FIELD_VALIDATORS[FieldKind.DATE].message == InterviewDate.MESSAGE_CONSTRAINTS

    def test_follows_settings(self):
        validators = validators_for(ParserSettings(date_format="%d/%m/%Y", max_index=5))

        assert validators[FieldKind.DATE].parse("14/03/2025").value == date(2025, 3, 14)
        assert "31/12/2024" in validators[FieldKind.DATE].message
        with pytest.raises(IndexRangeError):
            validators[FieldKind.INDEX].parse("6")
