"""
Core type definitions for talentbook.

This module contains type aliases shared by the tokenizer, validators and
command parsers.
"""

from typing import Callable

# Ordered values captured after each occurrence of one prefix
PrefixValues = tuple[str, ...]

# Pure function turning raw text into a validated value
FieldParser = Callable[[str], object]
