from __future__ import annotations

import pytest

from rhyme_analyzer.core.scheme import PLACEHOLDER, assign_scheme, scheme_letter


@pytest.mark.parametrize(
    "ordinal, letter",
    [(0, "A"), (1, "B"), (25, "Z"), (26, "AA"), (27, "AB"), (52, "BA"), (701, "ZZ"), (702, "AAA")],
)
def test_scheme_letter(ordinal, letter) -> None:
    assert scheme_letter(ordinal) == letter


def test_letters_follow_first_appearance(span_factory) -> None:
    spans = [span_factory(line, ("T",)) for line in range(4)]

    # Group 1 ends the first line, so it takes the first letter.
    scheme = assign_scheme(spans, [[1, 3], [0, 2]], line_count=4)

    assert scheme == ["A", "B", "A", "B"]


def test_lines_without_grouped_line_end_get_placeholder(span_factory) -> None:
    spans = [
        span_factory(0, ("T",), line=0),
        span_factory(1, ("T",), line=1, is_line_end=False),
        span_factory(2, ("T",), line=2),
    ]

    scheme = assign_scheme(spans, [[0, 1, 2]], line_count=4)

    assert scheme == ["A", PLACEHOLDER, "A", PLACEHOLDER]


def test_scheme_without_groups(span_factory) -> None:
    spans = [span_factory(0, ("T",))]

    assert assign_scheme(spans, [], line_count=2) == ["-", "-"]
    assert assign_scheme([], [], line_count=0) == []


def test_many_groups_run_past_z(span_factory) -> None:
    spans = [span_factory(line, ("T",)) for line in range(28)]
    groups = [[line] for line in range(28)]

    scheme = assign_scheme(spans, groups, line_count=28)

    assert scheme[:3] == ["A", "B", "C"]
    assert scheme[-2:] == ["AA", "AB"]
