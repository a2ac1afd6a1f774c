"""
Core talentbook components.

This package provides the fundamental building blocks shared by the model
and parsing layers.
"""

from talentbook.core.index import DEFAULT_MAX_INDEX, Index
from talentbook.core.types import FieldParser, PrefixValues

__all__ = [
    "DEFAULT_MAX_INDEX",
    "Index",
    "FieldParser",
    "PrefixValues",
]
