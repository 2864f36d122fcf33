"""Bucketed greedy grouping of spans into rhyme groups and assonance clusters.

Grouping is anchor based and deliberately not transitive. Inside a bucket the
first unassigned span opens a group and every later unassigned span is tested
against that anchor only; a span that joins is never reconsidered. The result
therefore depends on scan order, and three-way borderline chains can split
differently than a connected-components clustering would.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from .config import AnalyzerConfig
from .phonemes import PhonemeResolver
from .scorer import nucleus_distance, rhyme_distance
from .tails import phones_to_nucleus_coda
from .tokenizer import WordToken, is_line_end, is_stopword

NO_VOWEL_BUCKET = "_"


@dataclass(frozen=True)
class Span:
    """An analyzable token with its rhyme tail."""

    index: int
    line: int
    word: str
    nucleus: Tuple[str, ...]
    coda: Tuple[str, ...]
    bucket_key: str
    is_line_end: bool

    def as_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "line": self.line,
            "word": self.word,
            "nucleus": list(self.nucleus),
            "coda": list(self.coda),
            "bucketKey": self.bucket_key,
            "isLineEnd": self.is_line_end,
        }


def build_spans(
    tokens: Sequence[WordToken],
    resolver: PhonemeResolver,
    *,
    ignore_stopwords: bool = True,
) -> List[Span]:
    spans: List[Span] = []
    for index, token in enumerate(tokens):
        if ignore_stopwords and is_stopword(token.word):
            continue
        phones = resolver.word_to_phones(token.word)
        if not phones:
            continue
        tail = phones_to_nucleus_coda(phones)
        spans.append(
            Span(
                index=index,
                line=token.line,
                word=token.word,
                nucleus=tail.nucleus,
                coda=tail.coda,
                bucket_key=tail.bucket_key,
                is_line_end=is_line_end(index, tokens),
            )
        )
    return spans


def _bucket(keys: Sequence[str]) -> Dict[str, List[int]]:
    buckets: Dict[str, List[int]] = {}
    for span_index, key in enumerate(keys):
        buckets.setdefault(key, []).append(span_index)
    return buckets


def pair_threshold(a: Span, b: Span, config: AnalyzerConfig) -> float:
    """Line-end pairs use the perfect cutoff; anything internal uses slant."""

    if a.is_line_end and b.is_line_end:
        return config.perfect_threshold
    return config.slant_threshold


def group_rhymes(spans: Sequence[Span], config: AnalyzerConfig) -> List[List[int]]:
    groups: List[List[int]] = []
    assigned = [False] * len(spans)

    for members in _bucket([span.bucket_key for span in spans]).values():
        for position, anchor_index in enumerate(members):
            if assigned[anchor_index]:
                continue
            anchor = spans[anchor_index]
            group = [anchor_index]
            for candidate_index in members[position + 1 :]:
                if assigned[candidate_index]:
                    continue
                candidate = spans[candidate_index]
                if rhyme_distance(anchor, candidate) <= pair_threshold(anchor, candidate, config):
                    group.append(candidate_index)
                    assigned[candidate_index] = True
            if len(group) > 1:
                assigned[anchor_index] = True
                groups.append(group)

    return groups


def group_assonance(spans: Sequence[Span], config: AnalyzerConfig) -> List[List[int]]:
    if not config.assonance_enabled:
        return []

    clusters: List[List[int]] = []
    keys = [span.nucleus[0] if span.nucleus else NO_VOWEL_BUCKET for span in spans]
    for members in _bucket(keys).values():
        used = [False] * len(members)
        for i, anchor_index in enumerate(members):
            if used[i]:
                continue
            used[i] = True
            cluster = [anchor_index]
            for j in range(i + 1, len(members)):
                if used[j]:
                    continue
                distance = nucleus_distance(
                    spans[anchor_index].nucleus, spans[members[j]].nucleus
                )
                if distance <= config.assonance_threshold:
                    cluster.append(members[j])
                    used[j] = True
            if len(cluster) > 1:
                clusters.append(cluster)

    return clusters


__all__ = [
    "Span",
    "build_spans",
    "group_assonance",
    "group_rhymes",
    "pair_threshold",
]
