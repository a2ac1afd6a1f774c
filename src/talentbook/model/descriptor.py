"""
Edit descriptors for talentbook edit-style commands.

An EditPersonDescriptor records only the fields a user asked to change.
Each slot is None when the field should be left untouched. The tags slot has
three states: None (keep existing tags), an empty frozenset (clear all
tags) or the new set of tags.
"""

from typing import Iterable

from pydantic import BaseModel, ConfigDict

from talentbook.exceptions import FieldKind
from talentbook.model.fields import Address, Email, InterviewDate, Name, Phone, Tag

SLOT_FOR_FIELD = {
    FieldKind.NAME: "name",
    FieldKind.PHONE: "phone",
    FieldKind.EMAIL: "email",
    FieldKind.ADDRESS: "address",
    FieldKind.TAG: "tags",
    FieldKind.DATE: "date",
}


class EditPersonDescriptor(BaseModel):
    """Frozen set of field changes to apply to one person."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: Name | None = None
    phone: Phone | None = None
    email: Email | None = None
    address: Address | None = None
    tags: frozenset[Tag] | None = None
    date: InterviewDate | None = None

    def edited_fields(self) -> tuple[str, ...]:
        """Names of the populated slots, in declaration order."""
        return tuple(slot for slot in type(self).model_fields if getattr(self, slot) is not None)

    def is_any_field_edited(self) -> bool:
        return bool(self.edited_fields())

    def __str__(self) -> str:
        changes = ", ".join(f"{slot}={_describe(getattr(self, slot))}" for slot in self.edited_fields())
        return f"{type(self).__name__}({changes})"


def _describe(value) -> str:
    if isinstance(value, frozenset):
        return "{" + ", ".join(sorted(str(tag) for tag in value)) + "}"
    return str(value)


class EditPersonDescriptorBuilder:
    """
    Mutable staging area for an EditPersonDescriptor.

    A builder belongs to a single parse call; `build` freezes the collected
    slots into a descriptor.
    """

    def __init__(self, descriptor: EditPersonDescriptor | None = None):
        self._slots = {slot: None for slot in EditPersonDescriptor.model_fields}
        if descriptor is not None:
            for slot in self._slots:
                self._slots[slot] = getattr(descriptor, slot)

    def set_name(self, name: Name) -> "EditPersonDescriptorBuilder":
        self._slots["name"] = name
        return self

    def set_phone(self, phone: Phone) -> "EditPersonDescriptorBuilder":
        self._slots["phone"] = phone
        return self

    def set_email(self, email: Email) -> "EditPersonDescriptorBuilder":
        self._slots["email"] = email
        return self

    def set_address(self, address: Address) -> "EditPersonDescriptorBuilder":
        self._slots["address"] = address
        return self

    def set_tags(self, tags: Iterable[Tag]) -> "EditPersonDescriptorBuilder":
        self._slots["tags"] = frozenset(tags)
        return self

    def set_date(self, date: InterviewDate) -> "EditPersonDescriptorBuilder":
        self._slots["date"] = date
        return self

    def set_field(self, kind: FieldKind, value) -> "EditPersonDescriptorBuilder":
        """Set the slot for `kind`; tag values are converted to a frozenset."""
        slot = SLOT_FOR_FIELD[kind]
        self._slots[slot] = frozenset(value) if kind is FieldKind.TAG else value
        return self

    def build(self) -> EditPersonDescriptor:
        return EditPersonDescriptor(
            **{slot: value for slot, value in self._slots.items() if value is not None}
        )
