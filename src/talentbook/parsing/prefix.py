"""
Argument prefixes for talentbook commands.

A prefix such as `n/` marks the start of one field's value in a command's
arguments. CliSyntax groups the prefixes a deployment recognizes and ties
each of them to the field kind it introduces.
"""

from dataclasses import dataclass

from talentbook.exceptions import FieldKind
from talentbook.parsing.settings import DEFAULT_SETTINGS, ParserSettings


@dataclass(frozen=True)
class Prefix:
    """A marker that introduces an argument, e.g. 'n/' in 'n/James'."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class CliSyntax:
    """The set of recognized prefixes, one per field kind."""

    name: Prefix
    phone: Prefix
    email: Prefix
    address: Prefix
    tag: Prefix
    date: Prefix

    @classmethod
    def from_settings(cls, settings: ParserSettings) -> "CliSyntax":
        return cls(
            name=Prefix(settings.name_prefix),
            phone=Prefix(settings.phone_prefix),
            email=Prefix(settings.email_prefix),
            address=Prefix(settings.address_prefix),
            tag=Prefix(settings.tag_prefix),
            date=Prefix(settings.date_prefix),
        )

    def for_field(self, kind: FieldKind) -> Prefix:
        """
        Look up the prefix that introduces a field.

        Raises:
            KeyError: For FieldKind.INDEX, which is positional and has no prefix
        """
        try:
            return getattr(self, _PREFIX_ATTRIBUTES[kind])
        except KeyError:
            raise KeyError(f"Field '{kind.value}' has no prefix") from None


_PREFIX_ATTRIBUTES = {
    FieldKind.NAME: "name",
    FieldKind.PHONE: "phone",
    FieldKind.EMAIL: "email",
    FieldKind.ADDRESS: "address",
    FieldKind.TAG: "tag",
    FieldKind.DATE: "date",
}

DEFAULT_SYNTAX = CliSyntax.from_settings(DEFAULT_SETTINGS)

PREFIX_NAME = DEFAULT_SYNTAX.name
PREFIX_PHONE = DEFAULT_SYNTAX.phone
PREFIX_EMAIL = DEFAULT_SYNTAX.email
PREFIX_ADDRESS = DEFAULT_SYNTAX.address
PREFIX_TAG = DEFAULT_SYNTAX.tag
PREFIX_DATE = DEFAULT_SYNTAX.date
