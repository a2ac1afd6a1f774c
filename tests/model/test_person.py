"""
Tests for the Person record model.
"""

import pytest
from pydantic import ValidationError

from talentbook.model import Address, Email, InterviewDate, Name, Person, Phone, Tag


def make_amy(**overrides) -> Person:
    fields = dict(
        name=Name("Amy Bee"),
        phone=Phone("11111111"),
        email=Email("amy@example.com"),
        address=Address("Block 312, Amy Street 1"),
    )
    fields.update(overrides)
    return Person(**fields)


class TestPerson:
    def test_optional_fields_default_to_empty(self):
        amy = make_amy()
        assert amy.tags == frozenset()
        assert amy.date is None

    def test_equality_by_value(self):
        assert make_amy(tags=frozenset({Tag("Applicant")})) == make_amy(
            tags=frozenset({Tag("Applicant")})
        )
        assert make_amy() != make_amy(phone=Phone("22222222"))

    def test_rejects_raw_strings(self):
        with pytest.raises(ValidationError):
            make_amy(name="Amy Bee")

    def test_is_frozen(self):
        amy = make_amy()
        with pytest.raises(ValidationError):
            amy.name = Name("Bob Choo")

    def test_str_lists_fields(self):
        amy = make_amy(
            tags=frozenset({Tag("Shortlisted"), Tag("Applicant")}),
            date=InterviewDate.parse("2025-03-14"),
        )
        text = str(amy)
        assert text.startswith("Amy Bee; Phone: 11111111; Email: amy@example.com")
        assert "Interview: 2025-03-14" in text
        assert text.endswith("Tags: Applicant, Shortlisted")
