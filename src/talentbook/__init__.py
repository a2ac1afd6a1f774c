"""
talentbook - Argument parsing for a command-line applicant record editor

talentbook turns the raw arguments of record commands such as
`edit 1 p/91234567 t/` into validated command objects.
"""

from importlib.metadata import version

from talentbook.commands import (
    AddCommandParser,
    DeleteCommandParser,
    EditCommandParser,
    TagCommandParser,
)
from talentbook.exceptions import ParseException
from talentbook.model import EditPersonDescriptor, Person
from talentbook.parsing import ParserSettings

__version__ = version("talentbook")

__all__ = [
    "__version__",
    "AddCommandParser",
    "DeleteCommandParser",
    "EditCommandParser",
    "TagCommandParser",
    "EditPersonDescriptor",
    "Person",
    "ParseException",
    "ParserSettings",
]
