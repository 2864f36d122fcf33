"""Rhyme-scheme letters (A, B, C, ...) for each line."""

from __future__ import annotations

from typing import Dict, List, Sequence

from .clustering import Span

PLACEHOLDER = "-"


def scheme_letter(ordinal: int) -> str:
    """0 -> A, 25 -> Z, 26 -> AA, 27 -> AB, ..."""

    label = ""
    value = ordinal + 1
    while value > 0:
        value, remainder = divmod(value - 1, 26)
        label = chr(ord("A") + remainder) + label
    return label


def assign_scheme(
    spans: Sequence[Span],
    rhyme_groups: Sequence[Sequence[int]],
    line_count: int,
) -> List[str]:
    line_to_group: Dict[int, int] = {}
    for group_index, members in enumerate(rhyme_groups):
        for span_index in members:
            span = spans[span_index]
            if span.is_line_end:
                line_to_group[span.line] = group_index

    letters: Dict[int, str] = {}
    scheme: List[str] = []
    for line in range(line_count):
        group_index = line_to_group.get(line)
        if group_index is None:
            scheme.append(PLACEHOLDER)
            continue
        if group_index not in letters:
            letters[group_index] = scheme_letter(len(letters))
        scheme.append(letters[group_index])
    return scheme


__all__ = ["PLACEHOLDER", "assign_scheme", "scheme_letter"]
