from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering


class _Tag(IntEnum):
    # Declaration order is the order of the three categories.
    NEG_INF = 0
    FINITE = 1
    POS_INF = 2


@total_ordering
@dataclass(frozen=True)
class ExtendedInt:
    """An integer extended with explicit negative and positive infinity.

    Infinities are tagged values rather than large sentinel numbers, so
    bounds at the extremes of the integer range still compare exactly.
    """

    tag: _Tag
    number: int = 0

    def __post_init__(self) -> None:
        if self.tag != _Tag.FINITE and self.number != 0:
            raise ValueError("infinite values carry no number")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ExtendedInt):
            return NotImplemented
        if self.tag != other.tag:
            return self.tag < other.tag
        return self.tag == _Tag.FINITE and self.number < other.number

    @property
    def is_finite(self) -> bool:
        return self.tag == _Tag.FINITE

    def __int__(self) -> int:
        if not self.is_finite:
            raise OverflowError(f"cannot convert {self} to int")
        return self.number

    def __str__(self) -> str:
        if self.tag == _Tag.NEG_INF:
            return "-inf"
        if self.tag == _Tag.POS_INF:
            return "+inf"
        return str(self.number)

    def __repr__(self) -> str:
        return f"ExtendedInt({self})"


NEG_INF = ExtendedInt(_Tag.NEG_INF)
POS_INF = ExtendedInt(_Tag.POS_INF)


def finite(number: int) -> ExtendedInt:
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return ExtendedInt(_Tag.FINITE, number)
