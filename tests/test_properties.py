from __future__ import annotations

from hypothesis import given, strategies as st

from chardiff.char_difference import DifferenceType
from chardiff.text_differencer import TextDifferencer, get_all_text_differences

# a small alphabet makes shared subsequences likely
texts = st.text(alphabet="abcde\n", max_size=40)
unicode_texts = st.text(
    alphabet=st.characters(exclude_categories=("Cs",)),
    max_size=30,
)


def first_of(differences) -> str:
    return "".join(d.character for d in differences if d.in_first)


def second_of(differences) -> str:
    return "".join(d.character for d in differences if d.in_second)


@given(texts, texts)
def test_it_reconstructs_both_strings(first: str, second: str) -> None:
    differences = get_all_text_differences(first, second)
    assert first_of(differences) == first
    assert second_of(differences) == second


@given(unicode_texts, unicode_texts)
def test_it_reconstructs_arbitrary_unicode(first: str, second: str) -> None:
    differences = get_all_text_differences(first, second)
    assert first_of(differences) == first
    assert second_of(differences) == second


@given(texts, texts)
def test_indices_point_at_their_characters(first: str, second: str) -> None:
    for d in get_all_text_differences(first, second):
        source = second if d.type is DifferenceType.ADDITION else first
        assert source[d.index] == d.character


@given(texts, texts)
def test_indices_increase_in_each_string(first: str, second: str) -> None:
    differences = get_all_text_differences(first, second)
    in_first = [d.index for d in differences if d.in_first]
    additions = [
        d.index for d in differences if d.type is DifferenceType.ADDITION
    ]
    assert in_first == list(range(len(first)))
    assert additions == sorted(additions)


@given(texts, texts)
def test_unchanged_characters_form_a_longest_common_subsequence(
    first: str, second: str
) -> None:
    differences = get_all_text_differences(first, second)
    unchanged = sum(1 for d in differences if d.type is DifferenceType.NO_CHANGE)

    # reference LCS length over the untrimmed strings
    prev = [0] * (len(second) + 1)
    for a in first:
        row = [0]
        for j, b in enumerate(second, start=1):
            row.append(prev[j - 1] + 1 if a == b else max(row[j - 1], prev[j]))
        prev = row

    assert unchanged == prev[-1]


@given(texts)
def test_identical_strings_are_unchanged(text: str) -> None:
    differences = get_all_text_differences(text, text)
    assert [(d.type, d.index) for d in differences] == [
        (DifferenceType.NO_CHANGE, i) for i in range(len(text))
    ]


@given(texts, texts, texts)
def test_shared_boundaries_stay_unchanged(prefix: str, middle: str, suffix: str) -> None:
    first = prefix + middle + suffix
    second = prefix + suffix
    bounds = TextDifferencer.boundaries(first, second)
    differences = get_all_text_differences(first, second)

    head = differences[: bounds.header]
    tail = differences[len(differences) - bounds.footer :]

    assert bounds.header >= len(prefix)
    assert all(d.type is DifferenceType.NO_CHANGE for d in head + tail)
    assert [d.index for d in tail] == list(
        range(len(first) - bounds.footer, len(first))
    )


@given(texts, texts)
def test_it_is_deterministic(first: str, second: str) -> None:
    assert get_all_text_differences(first, second) == get_all_text_differences(
        first, second
    )
