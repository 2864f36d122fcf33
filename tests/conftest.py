import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from rhyme_analyzer.core import NucleusCoda, RhymeAnalyzer, Span


class FakeClock:
    """Deterministic clock used to drive telemetry timers in tests."""

    def __init__(self, step: float = 0.01) -> None:
        self._current = 0.0
        self._step = step

    def __call__(self) -> float:
        value = self._current
        self._current += self._step
        return value


def make_span(
    index: int,
    coda,
    *,
    vowel: str = "AE",
    word: str | None = None,
    line: int | None = None,
    is_line_end: bool = True,
) -> Span:
    """Build a span by hand so clustering can be tested without phonemes."""

    nucleus = (vowel,) if vowel else ()
    tail = NucleusCoda(nucleus=nucleus, coda=tuple(coda))
    return Span(
        index=index,
        line=index if line is None else line,
        word=word or f"w{index}",
        nucleus=tail.nucleus,
        coda=tail.coda,
        bucket_key=tail.bucket_key,
        is_line_end=is_line_end,
    )


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def analyzer() -> RhymeAnalyzer:
    """Engine with a fresh phoneme cache."""

    return RhymeAnalyzer()


@pytest.fixture
def span_factory():
    return make_span
