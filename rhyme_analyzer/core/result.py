"""Structured analysis output and its JSON export."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .clustering import Span
from .tokenizer import WordToken


@dataclass(frozen=True)
class AnalysisResult:
    tokens: Tuple[WordToken, ...]
    spans: Tuple[Span, ...]
    rhyme_groups: Tuple[Tuple[int, ...], ...]
    assonance_clusters: Tuple[Tuple[int, ...], ...]
    scheme: Tuple[str, ...]

    @classmethod
    def empty(cls) -> "AnalysisResult":
        return cls(tokens=(), spans=(), rhyme_groups=(), assonance_clusters=(), scheme=())

    @property
    def is_empty(self) -> bool:
        return not self.tokens

    def group_words(self, group: Tuple[int, ...]) -> List[str]:
        return [self.spans[span_index].word for span_index in group]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "tokens": [token.as_dict() for token in self.tokens],
            "spans": [span.as_dict() for span in self.spans],
            "rhymeGroups": [list(group) for group in self.rhyme_groups],
            "assonanceClusters": [list(cluster) for cluster in self.assonance_clusters],
            "scheme": list(self.scheme),
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.as_dict(), indent=indent)


__all__ = ["AnalysisResult"]
