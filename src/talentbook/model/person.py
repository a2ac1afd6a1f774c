"""
Applicant record model.

A Person is the fully specified record produced by the add command. The
record store that keeps and edits persons lives outside this package.
"""

from pydantic import BaseModel, ConfigDict

from talentbook.model.fields import Address, Email, InterviewDate, Name, Phone, Tag


class Person(BaseModel):
    """An applicant with every mandatory field present and valid."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: Name
    phone: Phone
    email: Email
    address: Address
    tags: frozenset[Tag] = frozenset()
    date: InterviewDate | None = None

    def __str__(self) -> str:
        parts = [
            f"{self.name}",
            f"Phone: {self.phone}",
            f"Email: {self.email}",
            f"Address: {self.address}",
        ]
        if self.date is not None:
            parts.append(f"Interview: {self.date}")
        if self.tags:
            parts.append("Tags: " + ", ".join(sorted(str(tag) for tag in self.tags)))
        return "; ".join(parts)
