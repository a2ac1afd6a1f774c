"""
Shared plumbing for talentbook command parsers.

A command parser turns the raw arguments of one command into a command
object. Subclasses declare which prefixes they recognize and which of those
may appear only once; this base class supplies tokenizing, duplicate
detection and preamble index handling on top of that.
"""

import logging
from abc import ABC, abstractmethod

from talentbook.core.index import Index
from talentbook.exceptions import FieldKind, IndexFormatError, InvalidCommandFormatError
from talentbook.parsing.parser_util import validators_for
from talentbook.parsing.prefix import CliSyntax, Prefix
from talentbook.parsing.settings import DEFAULT_SETTINGS, ParserSettings
from talentbook.parsing.tokenizer import ArgumentMultimap, tokenize

logger = logging.getLogger(__name__)


class CommandParser(ABC):
    """
    Base class for parsers of a single command's arguments.

    Parsers keep only immutable configuration, so one instance can serve any
    number of parse calls.

    Params:
        settings: Prefixes, date format and index limit to parse with
    """

    # Fields recognized by the command, in validation order
    FIELDS: tuple[FieldKind, ...] = ()
    # Fields that may be supplied at most once
    SINGLE_VALUED_FIELDS: tuple[FieldKind, ...] = ()

    def __init__(self, settings: ParserSettings | None = None):
        self.settings = settings or DEFAULT_SETTINGS
        self.syntax = CliSyntax.from_settings(self.settings)
        self.validators = validators_for(self.settings)

    @property
    def prefixes(self) -> tuple[Prefix, ...]:
        return tuple(self.syntax.for_field(kind) for kind in self.FIELDS)

    def tokenize(self, args: str) -> ArgumentMultimap:
        """
        Tokenize `args` and reject repeated single-valued fields.

        Raises:
            DuplicatePrefixError: Naming every single-valued prefix given more than once
        """
        arg_multimap = tokenize(args, *self.prefixes)
        arg_multimap.verify_no_duplicate_prefixes_for(
            *(self.syntax.for_field(kind) for kind in self.SINGLE_VALUED_FIELDS)
        )
        return arg_multimap

    def parse_preamble_index(self, arg_multimap: ArgumentMultimap, usage: str) -> Index:
        """
        Validate the preamble as the target index.

        A preamble that is not a non-zero unsigned integer usually means the
        whole command is malformed, so that failure is reported as the
        command's usage error. An index that is well formed but too large is
        reported as it is.

        Params:
            arg_multimap: Tokenized arguments
            usage: The command's usage message

        Raises:
            InvalidCommandFormatError: If the preamble is not a valid index
            IndexRangeError: If the index exceeds the configured maximum
        """
        preamble = arg_multimap.get_preamble()
        try:
            return self.validators[FieldKind.INDEX].parse(preamble)
        except IndexFormatError as e:
            logger.debug("Rejecting preamble %r: %s", preamble, e)
            raise InvalidCommandFormatError(usage) from e

    @abstractmethod
    def parse(self, args: str):
        """
        Parse the arguments of the command.

        Params:
            args: Everything after the command word

        Returns:
            The command object

        Raises:
            ParseException: If the arguments do not conform to the command's format
        """
        ...
