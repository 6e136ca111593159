from __future__ import annotations

from itertools import groupby
from typing import Iterable, Sequence

from chardiff.char_difference import CharDifference, DifferenceType

SGR_CODES: dict[str, int] = {
    "strike": 9,
    "red": 31,
    "green": 32,
}

DIFF_FORMATS: dict[DifferenceType, list[str]] = {
    DifferenceType.DELETION: ["red", "strike"],
    DifferenceType.ADDITION: ["green"],
}

BRACKETS: dict[DifferenceType, tuple[str, str]] = {
    DifferenceType.NO_CHANGE: ("", ""),
    DifferenceType.DELETION: ("[-", "-]"),
    DifferenceType.ADDITION: ("{+", "+}"),
}


def _styled(ty: DifferenceType, text: str) -> str:
    codes = ";".join(str(SGR_CODES[name]) for name in DIFF_FORMATS[ty])
    return f"\x1b[{codes}m{text}\x1b[0m"


def _printable(character: str) -> str:
    if character.isprintable():
        return character
    return repr(character)[1:-1]


def listing(differences: Iterable[CharDifference]) -> str:
    """One line per difference: symbol, character and index."""
    lines = [
        f"{d.type.symbol} {_printable(d.character)}\t{d.index}" for d in differences
    ]
    return "\n".join(lines)


def runs(
    differences: Iterable[CharDifference],
) -> list[tuple[DifferenceType, str]]:
    return [
        (ty, "".join(d.character for d in group))
        for ty, group in groupby(differences, key=lambda d: d.type)
    ]


def inline(differences: Sequence[CharDifference], color: bool = False) -> str:
    out: list[str] = []

    for ty, text in runs(differences):
        if ty is DifferenceType.NO_CHANGE:
            out.append(text)
        elif color:
            out.append(_styled(ty, text))
        else:
            opening, closing = BRACKETS[ty]
            out.append(f"{opening}{text}{closing}")

    return "".join(out)
