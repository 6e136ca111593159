from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import chain
from typing import Iterable

from chardiff.char_difference import CharDifference, DifferenceType

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Boundaries:
    header: int
    footer: int
    first_length: int
    second_length: int

    @property
    def begin_first(self) -> int:
        return self.header

    @property
    def end_first(self) -> int:
        return self.first_length - self.footer

    @property
    def begin_second(self) -> int:
        return self.header

    @property
    def end_second(self) -> int:
        return self.second_length - self.footer

    @property
    def cells(self) -> int:
        """Number of entries the LCS table needs for the middle region."""
        rows = self.end_first - self.begin_first + 1
        cols = self.end_second - self.begin_second + 1
        return rows * cols


def header_length(first: str, second: str) -> int:
    count = 0
    limit = min(len(first), len(second))

    while count < limit and first[count] == second[count]:
        count += 1

    return count


def footer_length(offset: int, first: str, second: str) -> int:
    count = 0
    limit = min(len(first), len(second)) - offset

    while count < limit and first[-count - 1] == second[-count - 1]:
        count += 1

    return count


def lcs_matrix(first: str, second: str) -> list[list[int]]:
    matrix = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]

    for i in range(1, len(first) + 1):
        row, prev = matrix[i], matrix[i - 1]
        for j in range(1, len(second) + 1):
            if first[i - 1] == second[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(row[j - 1], prev[j])

    return matrix


def matching(content: str, begin: int, length: int) -> Iterable[CharDifference]:
    return (
        CharDifference(i, content[i], DifferenceType.NO_CHANGE)
        for i in range(begin, begin + length)
    )


class TextDifferencer:
    """
    Character differences between two strings based on the Longest Common
    Subsequence of their middle regions, after stripping the common prefix
    and suffix.
    """

    def __init__(self, first: str, second: str):
        self.first = first
        self.second = second

    @classmethod
    def diff(cls, first: str, second: str) -> list[CharDifference]:
        return cls(first, second)._diff()

    @classmethod
    def boundaries(cls, first: str, second: str) -> Boundaries:
        return cls(first, second)._boundaries()

    def _boundaries(self) -> Boundaries:
        header = header_length(self.first, self.second)
        footer = footer_length(header, self.first, self.second)
        return Boundaries(header, footer, len(self.first), len(self.second))

    def _diff(self) -> list[CharDifference]:
        bounds = self._boundaries()
        rows = bounds.end_first - bounds.begin_first
        cols = bounds.end_second - bounds.begin_second
        log.debug(f"header={bounds.header} footer={bounds.footer} middle={rows}x{cols}")

        return list(
            chain(
                matching(self.first, 0, bounds.header),
                self._backtrack(bounds),
                matching(self.first, bounds.end_first, bounds.footer),
            )
        )

    def _backtrack(self, bounds: Boundaries) -> list[CharDifference]:
        first, second = self.first, self.second
        begin_first, begin_second = bounds.begin_first, bounds.begin_second

        matrix = lcs_matrix(
            first[begin_first : bounds.end_first],
            second[begin_second : bounds.end_second],
        )

        def lcs(i: int, j: int) -> int:
            return matrix[i - begin_first][j - begin_second]

        differences: list[CharDifference] = []
        i, j = bounds.end_first, bounds.end_second

        while i >= begin_first or j >= begin_second:
            if i > begin_first and j > begin_second and first[i - 1] == second[j - 1]:
                differences.append(
                    CharDifference(i - 1, first[i - 1], DifferenceType.NO_CHANGE)
                )
                i -= 1
                j -= 1
            elif j > begin_second and (
                i == begin_first or lcs(i, j - 1) >= lcs(i - 1, j)
            ):
                differences.append(
                    CharDifference(j - 1, second[j - 1], DifferenceType.ADDITION)
                )
                j -= 1
            elif i > begin_first and (
                j == begin_second or lcs(i, j - 1) < lcs(i - 1, j)
            ):
                differences.append(
                    CharDifference(i - 1, first[i - 1], DifferenceType.DELETION)
                )
                i -= 1
            else:
                break

        differences.reverse()
        return differences


def get_all_text_differences(first: str, second: str) -> list[CharDifference]:
    return TextDifferencer.diff(first, second)
