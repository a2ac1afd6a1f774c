"""
talentbook record model.

This package provides the validated field value types and the Person
record assembled from them.
"""

from talentbook.model.fields import (
    DEFAULT_DATE_FORMAT,
    Address,
    Email,
    InterviewDate,
    Name,
    Phone,
    Tag,
)
from talentbook.model.descriptor import (
    EditPersonDescriptor,
    EditPersonDescriptorBuilder,
)
from talentbook.model.person import Person

__all__ = [
    "DEFAULT_DATE_FORMAT",
    "Address",
    "Email",
    "InterviewDate",
    "Name",
    "Phone",
    "Tag",
    "Person",
    "EditPersonDescriptor",
    "EditPersonDescriptorBuilder",
]
