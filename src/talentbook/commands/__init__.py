"""
talentbook commands and their argument parsers.

This package contains the command objects handed to the command layer and
one parser per command that builds them from raw arguments.
"""

from talentbook.commands.add_parser import AddCommandParser
from talentbook.commands.base import CommandParser
from talentbook.commands.core import AddCommand, DeleteCommand, EditCommand, TagCommand
from talentbook.commands.delete_parser import DeleteCommandParser
from talentbook.commands.edit_parser import EditCommandParser, TagCommandParser

__all__ = [
    "AddCommand",
    "AddCommandParser",
    "CommandParser",
    "DeleteCommand",
    "DeleteCommandParser",
    "EditCommand",
    "EditCommandParser",
    "TagCommand",
    "TagCommandParser",
]
