from __future__ import annotations

import enum
from dataclasses import dataclass


class DifferenceType(enum.Enum):
    NO_CHANGE = " "
    ADDITION = "+"
    DELETION = "-"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True)
class CharDifference:
    """
    A single character of a text difference.

    The meaning of ``index`` depends on ``type``: for NO_CHANGE and
    DELETION it is a position in the first (before) string, for ADDITION
    it is a position in the second (after) string. Consumers must read it
    according to the type.
    """

    index: int
    character: str
    type: DifferenceType

    def __str__(self) -> str:
        return self.type.symbol + self.character

    @property
    def in_first(self) -> bool:
        return self.type is not DifferenceType.ADDITION

    @property
    def in_second(self) -> bool:
        return self.type is not DifferenceType.DELETION
