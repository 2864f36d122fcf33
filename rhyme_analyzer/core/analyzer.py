"""The rhyme analysis engine and its ``analyze`` entry point."""

from __future__ import annotations

from contextlib import nullcontext
from typing import Any, Mapping, Optional, Sequence

from rhyme_analyzer.utils.observability import get_logger
from rhyme_analyzer.utils.telemetry import StructuredTelemetry

from .clustering import build_spans, group_assonance, group_rhymes
from .config import AnalyzerConfig, resolve_config
from .phonemes import PhonemeResolver
from .result import AnalysisResult
from .scheme import assign_scheme
from .tokenizer import split_lines, tokenize


class RhymeAnalyzer:
    """Runs full analyses over text blobs.

    Each call recomputes everything from the text; only the phoneme cache of
    ``resolver`` carries over between calls. Sharing one instance across
    threads is safe because the resolver locks its cache.
    """

    def __init__(
        self,
        config: AnalyzerConfig | Mapping[str, Any] | None = None,
        *,
        resolver: Optional[PhonemeResolver] = None,
        overrides: Optional[Mapping[str, Sequence[str]]] = None,
    ) -> None:
        self.config = resolve_config(config)
        self.resolver = resolver or PhonemeResolver(overrides)
        self._logger = get_logger(__name__).bind(component="rhyme_analyzer")
        self._logger.debug("Rhyme analyzer initialised", context=self.config.as_dict())

    def word_to_phones(self, word: str) -> list[str]:
        return self.resolver.word_to_phones(word)

    def analyze(
        self,
        text: str,
        config: AnalyzerConfig | Mapping[str, Any] | None = None,
        *,
        telemetry: Optional[StructuredTelemetry] = None,
    ) -> AnalysisResult:
        settings = resolve_config(config, self.config)

        def _phase(name: str):
            return telemetry.timer(name) if telemetry else nullcontext()

        if not (text or "").strip():
            self._logger.debug("Blank text, nothing to analyze")
            return AnalysisResult.empty()

        # Text without words still gets one placeholder per line.
        with _phase("tokenize"):
            tokens = tokenize(text)

        with _phase("spans"):
            spans = build_spans(tokens, self.resolver, ignore_stopwords=settings.ignore_stopwords)
        with _phase("rhyme_groups"):
            rhyme_groups = group_rhymes(spans, settings)
        with _phase("assonance"):
            assonance = group_assonance(spans, settings)
        with _phase("scheme"):
            scheme = assign_scheme(spans, rhyme_groups, len(split_lines(text)))

        self._logger.debug(
            "Analysis complete",
            context={
                "tokens": len(tokens),
                "spans": len(spans),
                "rhyme_groups": len(rhyme_groups),
                "assonance_clusters": len(assonance),
                "cache_size": self.resolver.cache_size,
            },
        )

        return AnalysisResult(
            tokens=tuple(tokens),
            spans=tuple(spans),
            rhyme_groups=tuple(tuple(group) for group in rhyme_groups),
            assonance_clusters=tuple(tuple(cluster) for cluster in assonance),
            scheme=tuple(scheme),
        )


def analyze(
    text: str,
    config: AnalyzerConfig | Mapping[str, Any] | None = None,
) -> AnalysisResult:
    """Analyze ``text`` with a fresh engine (and therefore a fresh cache)."""

    return RhymeAnalyzer(config).analyze(text)


__all__ = ["RhymeAnalyzer", "analyze"]
