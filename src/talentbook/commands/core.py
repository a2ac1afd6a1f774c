"""
Command objects produced by talentbook's command parsers.

Each command carries the validated data its execution needs. Executing a
command against the record store is the job of the command layer that
receives these objects.

Usage texts are templates over the prefix names of CliSyntax, so a parser
running with custom prefixes reports the prefixes it actually accepts.
`MESSAGE_USAGE` is the text rendered with the default prefixes.
"""

from dataclasses import dataclass, fields
from typing import ClassVar

from talentbook.core.index import Index
from talentbook.model.descriptor import EditPersonDescriptor
from talentbook.model.person import Person
from talentbook.parsing.prefix import DEFAULT_SYNTAX, CliSyntax


def render_message(template: str, syntax: CliSyntax = DEFAULT_SYNTAX, **values: str) -> str:
    """
    Fill a message template with the prefixes of `syntax`.

    Params:
        template: Text with `{name}`, `{phone}`, ... placeholders for prefixes
        syntax: Prefixes to substitute
        values: Further placeholders, e.g. the command word
    """
    prefixes = {f.name: str(getattr(syntax, f.name)) for f in fields(syntax)}
    return template.format(**prefixes, **values)


class _Messages:
    """Renders a command's messages for a given prefix syntax."""

    COMMAND_WORD: ClassVar[str]
    USAGE_TEMPLATE: ClassVar[str]
    NOT_EDITED_TEMPLATE: ClassVar[str] = ""

    @classmethod
    def usage(cls, syntax: CliSyntax = DEFAULT_SYNTAX) -> str:
        return render_message(cls.USAGE_TEMPLATE, syntax, word=cls.COMMAND_WORD)

    @classmethod
    def not_edited(cls, syntax: CliSyntax = DEFAULT_SYNTAX) -> str:
        return render_message(cls.NOT_EDITED_TEMPLATE, syntax, word=cls.COMMAND_WORD)


@dataclass(frozen=True)
class EditCommand(_Messages):
    """Edit the details of the person at `index`."""

    COMMAND_WORD: ClassVar[str] = "edit"
    USAGE_TEMPLATE: ClassVar[str] = (
        "{word}: Edits the details of the person identified "
        "by the index number used in the displayed person list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        "[{name}NAME] [{phone}PHONE] [{email}EMAIL] [{address}ADDRESS] "
        "[{tag}TAG] [{date}DATE]\n"
        "Example: {word} 1 {phone}91234567 {email}johndoe@example.com"
    )
    NOT_EDITED_TEMPLATE: ClassVar[str] = "At least one field to edit must be provided."
    MESSAGE_USAGE: ClassVar[str] = render_message(USAGE_TEMPLATE, word=COMMAND_WORD)
    MESSAGE_NOT_EDITED: ClassVar[str] = render_message(NOT_EDITED_TEMPLATE)

    index: Index
    descriptor: EditPersonDescriptor


@dataclass(frozen=True)
class TagCommand(_Messages):
    """Replace, or clear, the tags of the person at `index`."""

    COMMAND_WORD: ClassVar[str] = "tag"
    USAGE_TEMPLATE: ClassVar[str] = (
        "{word}: Sets the tags of the person identified "
        "by the index number used in the displayed person list. "
        "Existing tags will be replaced; a lone {tag} removes all tags.\n"
        "Parameters: INDEX (must be a positive integer) {tag}[TAG]...\n"
        "Example: {word} 1 {tag}Interviewee {tag}Shortlisted"
    )
    NOT_EDITED_TEMPLATE: ClassVar[str] = "At least one {tag} must be provided."
    MESSAGE_USAGE: ClassVar[str] = render_message(USAGE_TEMPLATE, word=COMMAND_WORD)
    MESSAGE_NOT_EDITED: ClassVar[str] = render_message(NOT_EDITED_TEMPLATE)

    index: Index
    descriptor: EditPersonDescriptor


@dataclass(frozen=True)
class AddCommand(_Messages):
    """Add a new person to the records."""

    COMMAND_WORD: ClassVar[str] = "add"
    USAGE_TEMPLATE: ClassVar[str] = (
        "{word}: Adds a person to the records. "
        "Parameters: {name}NAME {phone}PHONE {email}EMAIL {address}ADDRESS "
        "[{date}DATE] [{tag}TAG]...\n"
        "Example: {word} {name}John Doe {phone}98765432 {email}johnd@example.com "
        "{address}311, Clementi Ave 2, #02-25 {tag}Applicant"
    )
    MESSAGE_USAGE: ClassVar[str] = render_message(USAGE_TEMPLATE, word=COMMAND_WORD)

    person: Person


@dataclass(frozen=True)
class DeleteCommand(_Messages):
    """Delete the person at `index`."""

    COMMAND_WORD: ClassVar[str] = "delete"
    USAGE_TEMPLATE: ClassVar[str] = (
        "{word}: Deletes the person identified by the index number "
        "used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: {word} 1"
    )
    MESSAGE_USAGE: ClassVar[str] = render_message(USAGE_TEMPLATE, word=COMMAND_WORD)

    index: Index
