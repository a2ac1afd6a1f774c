"""
Parser for the add command.

Unlike edits, adding a person needs every mandatory field; only tags and
the interview date may be left out.
"""

import logging

from talentbook.commands.base import CommandParser
from talentbook.commands.core import AddCommand
from talentbook.exceptions import FieldKind, InvalidCommandFormatError
from talentbook.model.person import Person
from talentbook.parsing.parser_util import parse_tags

logger = logging.getLogger(__name__)


class AddCommandParser(CommandParser):
    """Parses input arguments and creates a new AddCommand object."""

    FIELDS = (
        FieldKind.NAME,
        FieldKind.PHONE,
        FieldKind.EMAIL,
        FieldKind.ADDRESS,
        FieldKind.TAG,
        FieldKind.DATE,
    )
    SINGLE_VALUED_FIELDS = (
        FieldKind.NAME,
        FieldKind.PHONE,
        FieldKind.EMAIL,
        FieldKind.ADDRESS,
        FieldKind.DATE,
    )
    MANDATORY_FIELDS = (
        FieldKind.NAME,
        FieldKind.PHONE,
        FieldKind.EMAIL,
        FieldKind.ADDRESS,
    )

    def parse(self, args: str) -> AddCommand:
        """
        Parse `args` in the context of the add command.

        Params:
            args: e.g. "n/Amy Bee p/11111111 e/amy@example.com a/Block 312 t/Applicant"

        Returns:
            AddCommand holding the new Person

        Raises:
            DuplicatePrefixError: If a single-valued field is repeated
            InvalidCommandFormatError: If a mandatory field is missing or a preamble is given
            ConstraintViolationError: For the first invalid field value
        """
        arg_multimap = self.tokenize(args)

        mandatory = [self.syntax.for_field(kind) for kind in self.MANDATORY_FIELDS]
        if not arg_multimap.are_prefixes_present(*mandatory) or arg_multimap.get_preamble():
            missing = [str(prefix) for prefix in mandatory if not arg_multimap.contains(prefix)]
            logger.debug(
                "Malformed add: missing %s, preamble %r", missing, arg_multimap.get_preamble()
            )
            raise InvalidCommandFormatError(AddCommand.usage(self.syntax))

        def parse_field(kind: FieldKind):
            return self.validators[kind].parse(arg_multimap.get_value(self.syntax.for_field(kind)))

        name = parse_field(FieldKind.NAME)
        phone = parse_field(FieldKind.PHONE)
        email = parse_field(FieldKind.EMAIL)
        address = parse_field(FieldKind.ADDRESS)
        tags = parse_tags(arg_multimap.get_all_values(self.syntax.tag))
        date = (
            parse_field(FieldKind.DATE) if arg_multimap.contains(self.syntax.date) else None
        )

        person = Person(
            name=name, phone=phone, email=email, address=address, tags=tags, date=date
        )
        return AddCommand(person)
