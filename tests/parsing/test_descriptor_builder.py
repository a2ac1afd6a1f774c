"""
Tests for building edit descriptors from tokenized arguments.
"""

import pytest

from talentbook.exceptions import ConstraintViolationError, FieldKind
from talentbook.model.fields import Email, Name, Phone, Tag
from talentbook.parsing.descriptor_builder import build_edit_descriptor, parse_tags_for_edit
from talentbook.parsing.prefix import (
    DEFAULT_SYNTAX,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
)
from talentbook.parsing.tokenizer import tokenize

ALL_PREFIXES = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_TAG)


class TestParseTagsForEdit:
    def test_absent(self):
        assert parse_tags_for_edit(()) is None

    def test_single_empty_value_clears(self):
        assert parse_tags_for_edit(("",)) == frozenset()

    def test_values(self):
        assert parse_tags_for_edit(("a", "b", "a")) == frozenset({Tag("a"), Tag("b")})

    @pytest.mark.parametrize("values", [("", "a"), ("a", ""), ("", "")])
    def test_empty_value_mixed_with_others(self, values):
        with pytest.raises(ConstraintViolationError) as exc_info:
            parse_tags_for_edit(values)
        assert exc_info.value.field is FieldKind.TAG


class TestBuildEditDescriptor:
    def test_only_supplied_fields_populated(self):
        arg_multimap = tokenize("1 p/91234567 e/amy@example.com", *ALL_PREFIXES)
        descriptor = build_edit_descriptor(
            arg_multimap, (FieldKind.NAME, FieldKind.PHONE, FieldKind.EMAIL, FieldKind.TAG)
        )

        assert descriptor.phone == Phone("91234567")
        assert descriptor.email == Email("amy@example.com")
        assert descriptor.edited_fields() == ("phone", "email")

    def test_fields_outside_selection_ignored(self):
        arg_multimap = tokenize("1 n/Amy p/123", *ALL_PREFIXES)
        descriptor = build_edit_descriptor(arg_multimap, (FieldKind.NAME,), DEFAULT_SYNTAX)
        assert descriptor.edited_fields() == ("name",)
        assert descriptor.name == Name("Amy")

    def test_tag_states(self):
        fields = (FieldKind.TAG,)
        assert build_edit_descriptor(tokenize("1", PREFIX_TAG), fields).tags is None
        assert build_edit_descriptor(tokenize("1 t/", PREFIX_TAG), fields).tags == frozenset()
        assert build_edit_descriptor(tokenize("1 t/x t/y", PREFIX_TAG), fields).tags == frozenset(
            {Tag("x"), Tag("y")}
        )

    def test_nothing_supplied_gives_empty_descriptor(self):
        descriptor = build_edit_descriptor(tokenize("1", *ALL_PREFIXES), (FieldKind.NAME,))
        assert not descriptor.is_any_field_edited()

    def test_first_invalid_field_in_field_order_wins(self):
        arg_multimap = tokenize("1 e/not-an-email p/12a", *ALL_PREFIXES)
        with pytest.raises(ConstraintViolationError) as exc_info:
            build_edit_descriptor(arg_multimap, (FieldKind.PHONE, FieldKind.EMAIL))
        assert exc_info.value.field is FieldKind.PHONE
