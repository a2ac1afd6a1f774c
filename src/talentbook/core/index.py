"""
Record index type for talentbook.

An Index identifies a record in the displayed list. Users type one-based
numbers while the record layer works with zero-based positions, so the
type offers both views and never holds a zero, negative or out-of-range
value.
"""

from attrs import field, frozen

# Largest value representable as a signed 32-bit integer
DEFAULT_MAX_INDEX = 2**31 - 1


def _check_zero_based(instance, attribute, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Index must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Zero-based index must not be negative, got {value}")


@frozen(order=True)
class Index:
    """
    A position in the record list, stored zero-based.

    Construct with `Index.from_one_based` for user-facing numbers or
    `Index.from_zero_based` for list positions.
    """

    zero_based: int = field(validator=_check_zero_based)

    @classmethod
    def from_zero_based(cls, zero_based: int) -> "Index":
        return cls(zero_based)

    @classmethod
    def from_one_based(cls, one_based: int) -> "Index":
        return cls(one_based - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)
