"""
Parser for the delete command.
"""

from talentbook.commands.base import CommandParser
from talentbook.commands.core import DeleteCommand


class DeleteCommandParser(CommandParser):
    """Parses input arguments and creates a new DeleteCommand object."""

    def parse(self, args: str) -> DeleteCommand:
        """
        Parse `args`, which must be exactly one index.

        Raises:
            InvalidCommandFormatError: If the arguments are not a valid index
            IndexRangeError: If the index exceeds the configured maximum
        """
        arg_multimap = self.tokenize(args)
        index = self.parse_preamble_index(arg_multimap, DeleteCommand.usage(self.syntax))
        return DeleteCommand(index)
