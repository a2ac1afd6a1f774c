"""
Parsers for edit-style commands.

`edit` changes any of a person's fields; `tag` changes only the tags. Both
take the target index as the preamble and produce an EditPersonDescriptor
holding only the fields the user supplied.
"""

import logging

from talentbook.commands.base import CommandParser
from talentbook.commands.core import EditCommand, TagCommand
from talentbook.exceptions import FieldKind, NothingToEditError
from talentbook.parsing.descriptor_builder import build_edit_descriptor

logger = logging.getLogger(__name__)

ALL_FIELDS = (
    FieldKind.NAME,
    FieldKind.PHONE,
    FieldKind.EMAIL,
    FieldKind.ADDRESS,
    FieldKind.TAG,
    FieldKind.DATE,
)


class EditCommandParser(CommandParser):
    """Parses input arguments and creates a new EditCommand object."""

    FIELDS = ALL_FIELDS
    # A person holds one tag when edited through `edit`; use `tag` for several
    SINGLE_VALUED_FIELDS = ALL_FIELDS

    command = EditCommand

    def parse(self, args: str) -> EditCommand:
        """
        Parse `args` in the context of the edit command.

        Checks run in order: repeated prefixes, target index, field values,
        then whether anything is edited at all.

        Params:
            args: e.g. "1 p/91234567 e/amy@example.com"

        Returns:
            EditCommand for the index and descriptor

        Raises:
            ParseException: If the arguments do not conform to the expected format
        """
        arg_multimap = self.tokenize(args)
        index = self.parse_preamble_index(arg_multimap, self.command.usage(self.syntax))

        descriptor = build_edit_descriptor(
            arg_multimap, self.FIELDS, self.syntax, self.validators
        )
        if not descriptor.is_any_field_edited():
            logger.debug("No field supplied for %s at index %s", self.command.COMMAND_WORD, index)
            raise NothingToEditError(self.command.not_edited(self.syntax))

        return self.command(index, descriptor)


class TagCommandParser(EditCommandParser):
    """
    Parses input arguments and creates a new TagCommand object.

    The tag prefix may repeat. A lone empty tag prefix clears every tag;
    an empty tag prefix next to other tags is rejected as an invalid tag.
    """

    FIELDS = (FieldKind.TAG,)
    SINGLE_VALUED_FIELDS = ()

    command = TagCommand
