"""
Argument tokenizer for talentbook commands.

Splits a command's raw arguments, e.g. `1 n/James Lee t/friend t/colleague`,
into a preamble (`1`) and the values that follow each recognized prefix.
Prefixes are only recognized at the start of the string or right after
whitespace, so prefix-like text inside a value (`a/12 Main St/3`) is left
alone.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from talentbook.core.types import PrefixValues
from talentbook.exceptions import DuplicatePrefixError
from talentbook.parsing.prefix import Prefix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrefixPosition:
    """An occurrence of a prefix at a character offset in the arguments."""

    prefix: Prefix
    start: int

    @property
    def value_start(self) -> int:
        return self.start + len(self.prefix.text)


@dataclass(frozen=True)
class ArgumentMultimap:
    """
    Prefixes mapped to the ordered values captured after each occurrence.

    Values keep the order the prefixes appeared in and repeated values are kept
    as separate entries. Prefixes missing from the input map to an empty tuple,
    which is distinct from a prefix present with an empty value (`("",)`).

    Params:
        preamble: Trimmed text before the first recognized prefix
        values: Prefix to captured values
    """

    preamble: str = ""
    values: Mapping[Prefix, PrefixValues] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def get_preamble(self) -> str:
        return self.preamble

    def get_all_values(self, prefix: Prefix) -> PrefixValues:
        """Return every value captured for `prefix`, in input order."""
        return self.values.get(prefix, ())

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value captured for `prefix`, or None if it is absent."""
        captured = self.get_all_values(prefix)
        return captured[-1] if captured else None

    def contains(self, prefix: Prefix) -> bool:
        return bool(self.get_all_values(prefix))

    def are_prefixes_present(self, *prefixes: Prefix) -> bool:
        return all(self.contains(prefix) for prefix in prefixes)

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """
        Check that each of `prefixes` was supplied at most once.

        Params:
            prefixes: Prefixes of single-valued fields

        Raises:
            DuplicatePrefixError: Naming every repeated prefix, in the order given
        """
        duplicated = [
            prefix for prefix in dict.fromkeys(prefixes) if len(self.get_all_values(prefix)) > 1
        ]
        if duplicated:
            logger.debug("Rejecting repeated single-valued prefixes: %s", duplicated)
            raise DuplicatePrefixError(duplicated)


def find_prefix_positions(args: str, prefixes: tuple[Prefix, ...]) -> list[PrefixPosition]:
    """
    Locate every recognized prefix occurrence in `args`.

    An occurrence counts only at the start of `args` or after whitespace.
    When several prefixes match at the same offset the longest one wins.

    Params:
        args: Raw argument string
        prefixes: Prefixes to look for

    Returns:
        Occurrences sorted by offset
    """
    by_start: dict[int, Prefix] = {}
    # Longest first so a shorter prefix never shadows a longer one at one offset
    for prefix in sorted(set(prefixes), key=lambda p: len(p.text), reverse=True):
        start = args.find(prefix.text)
        while start != -1:
            at_boundary = start == 0 or args[start - 1].isspace()
            if at_boundary and start not in by_start:
                by_start[start] = prefix
            start = args.find(prefix.text, start + 1)

    positions = [PrefixPosition(prefix, start) for start, prefix in by_start.items()]
    positions.sort(key=lambda position: position.start)
    return positions


def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
    """
    Split `args` into a preamble and per-prefix values.

    Params:
        args: Raw argument string, typically everything after the command word
        prefixes: Prefixes the calling command recognizes

    Returns:
        ArgumentMultimap holding the trimmed preamble and values
    """
    if args is None:
        raise TypeError("args must be a string, not None")

    positions = find_prefix_positions(args, prefixes)
    preamble_end = positions[0].start if positions else len(args)
    preamble = args[:preamble_end].strip()

    captured: dict[Prefix, list[str]] = {prefix: [] for prefix in prefixes}
    for current, following in zip(positions, positions[1:] + [None]):
        value_end = following.start if following is not None else len(args)
        captured[current.prefix].append(args[current.value_start:value_end].strip())

    logger.debug(
        "Tokenized %r into preamble %r and %d prefixed value(s)",
        args,
        preamble,
        len(positions),
    )
    return ArgumentMultimap(
        preamble=preamble,
        values=MappingProxyType(
            {prefix: tuple(values) for prefix, values in captured.items() if values}
        ),
    )
