from __future__ import annotations

import pytest

from rhyme_analyzer.core.clustering import (
    build_spans,
    group_assonance,
    group_rhymes,
    pair_threshold,
)
from rhyme_analyzer.core.config import AnalyzerConfig
from rhyme_analyzer.core.phonemes import PhonemeResolver
from rhyme_analyzer.core.tokenizer import tokenize

MIXED_POSITION_TEXT = "the fast cat sat\nwith a hat in the past"


def _spans(text: str, **kwargs):
    return build_spans(tokenize(text), PhonemeResolver(), **kwargs)


def _grouped_words(spans, groups) -> set[str]:
    return {spans[index].word for group in groups for index in group}


def test_build_spans_skips_stopwords_and_keeps_token_indices() -> None:
    spans = _spans("the cat")

    assert len(spans) == 1
    span = spans[0]
    assert span.index == 1
    assert span.word == "cat"
    assert span.nucleus == ("AE",)
    assert span.coda == ("K", "T")
    assert span.bucket_key == "AE|T"
    assert span.is_line_end


def test_build_spans_keeps_stopwords_when_asked() -> None:
    spans = _spans("cat the", ignore_stopwords=False)

    assert [(span.word, span.is_line_end) for span in spans] == [
        ("cat", False),
        ("the", True),
    ]


def test_line_end_is_decided_before_stopword_filtering() -> None:
    spans = _spans("cat the")

    assert [span.word for span in spans] == ["cat"]
    assert spans[0].is_line_end is False


def test_span_export_uses_camel_case_keys() -> None:
    exported = _spans("cat")[0].as_dict()

    assert exported == {
        "index": 0,
        "line": 0,
        "word": "cat",
        "nucleus": ["AE"],
        "coda": ["K", "T"],
        "bucketKey": "AE|T",
        "isLineEnd": True,
    }


def test_pair_threshold_depends_on_line_position(span_factory) -> None:
    config = AnalyzerConfig(perfect_threshold=0.1, slant_threshold=0.4)
    end_a = span_factory(0, ("T",))
    end_b = span_factory(1, ("T",))
    internal = span_factory(2, ("T",), is_line_end=False)

    assert pair_threshold(end_a, end_b, config) == 0.1
    assert pair_threshold(end_a, internal, config) == 0.4
    assert pair_threshold(internal, end_a, config) == 0.4


def test_group_rhymes_on_line_final_words() -> None:
    spans = _spans("cat\nhat\ndog\nlog")

    assert group_rhymes(spans, AnalyzerConfig()) == [[0, 1], [2, 3]]


def test_group_rhymes_never_crosses_buckets(span_factory) -> None:
    spans = [
        span_factory(0, ("K", "T")),
        span_factory(1, ("K", "S")),
    ]
    loose = AnalyzerConfig(perfect_threshold=1.0, slant_threshold=1.0)

    assert group_rhymes(spans, loose) == []


def test_grouping_is_anchor_based_not_transitive(span_factory) -> None:
    # anchor~b and b~c are within the cutoff, anchor~c is not.
    spans = [
        span_factory(0, ("K", "T")),
        span_factory(1, ("HH", "T")),
        span_factory(2, ("P", "HH", "T")),
    ]
    config = AnalyzerConfig(perfect_threshold=0.18, slant_threshold=0.18)

    assert group_rhymes(spans, config) == [[0, 1]]


def test_singletons_are_not_reported(span_factory) -> None:
    spans = [span_factory(0, ("T",)), span_factory(1, ("T",), vowel="OW")]

    assert group_rhymes(spans, AnalyzerConfig()) == []


def test_internal_pairs_use_slant_cutoff() -> None:
    spans = _spans(MIXED_POSITION_TEXT)

    assert [span.word for span in spans] == ["fast", "cat", "sat", "hat", "past"]
    assert [span.is_line_end for span in spans] == [False, False, True, False, True]

    strict = AnalyzerConfig(slant_threshold=0.05)
    assert group_rhymes(spans, strict) == [[2, 4]]


@pytest.mark.parametrize(
    "slant, expected",
    [
        (0.05, {"sat", "past"}),
        (0.12, {"fast", "sat", "past"}),
        (0.5, {"fast", "cat", "sat", "hat", "past"}),
    ],
)
def test_grouped_words_at_slant_cutoffs(slant, expected) -> None:
    spans = _spans(MIXED_POSITION_TEXT)
    groups = group_rhymes(spans, AnalyzerConfig(slant_threshold=slant))

    assert _grouped_words(spans, groups) == expected


def test_raising_slant_cutoff_never_ungroups_words() -> None:
    spans = _spans(MIXED_POSITION_TEXT)
    previous: set[str] = set()

    for slant in (0.0, 0.05, 0.12, 0.18, 0.25, 0.5, 1.0):
        grouped = _grouped_words(spans, group_rhymes(spans, AnalyzerConfig(slant_threshold=slant)))
        assert previous <= grouped
        previous = grouped


def test_group_assonance_buckets_by_vowel() -> None:
    spans = _spans("cat\ndog\nhand\nfrog\nsee")

    assert group_assonance(spans, AnalyzerConfig()) == [[0, 2], [1, 3]]


def test_group_assonance_disabled() -> None:
    spans = _spans("cat\nhat")

    assert group_assonance(spans, AnalyzerConfig(assonance_enabled=False)) == []


def test_group_assonance_threshold_below_zero_keeps_nothing() -> None:
    spans = _spans("cat\nhat")

    assert group_assonance(spans, AnalyzerConfig(assonance_threshold=-0.1)) == []
