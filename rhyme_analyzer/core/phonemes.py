"""Word to phoneme resolution: override table, spelling heuristics, cache."""

from __future__ import annotations

import re
import threading
from typing import Dict, List, Mapping, Optional, Pattern, Sequence, Set, Tuple

from rhyme_analyzer.utils.observability import create_counter, get_logger

VOWEL_PHONEMES: Set[str] = {
    "AA",
    "AE",
    "AH",
    "AO",
    "AW",
    "AY",
    "EH",
    "ER",
    "EY",
    "IH",
    "IY",
    "OW",
    "OY",
    "UH",
    "UW",
}

DEFAULT_PHONEME = "AH0"

# Pronunciations for spellings the heuristics get badly wrong. Extend freely.
OVERRIDE_PHONEMES: Dict[str, Tuple[str, ...]] = {
    "lekker": ("L", "EH1", "K", "ER0"),
    "bru": ("B", "R", "UW1"),
    "boet": ("B", "UH1", "T"),
    "ja": ("Y", "AA1"),
    "ain't": ("EY1", "N", "T"),
}

# Applied in order; "ei" is claimed by the AY rule before the IY rule sees it.
VOWEL_DIGRAPH_RULES: Tuple[Tuple[Pattern[str], str], ...] = (
    (re.compile(r"oy|oi"), "OY1"),
    (re.compile(r"ay|ai|ey|ei"), "AY1"),
    (re.compile(r"oo"), "UW1"),
    (re.compile(r"ow|ou"), "OW1"),
    (re.compile(r"au"), "AO1"),
    (re.compile(r"ee|ie|ei"), "IY1"),
    (re.compile(r"ea"), "EH1"),
)

VOWEL_LETTERS: Dict[str, str] = {
    "a": "AE1",
    "e": "EH1",
    "i": "IH1",
    "o": "OW1",
    "u": "UH1",
}

CONSONANT_LETTERS: Dict[str, str] = {
    "b": "B",
    "c": "K",
    "d": "D",
    "f": "F",
    "g": "G",
    "h": "HH",
    "j": "JH",
    "k": "K",
    "l": "L",
    "m": "M",
    "n": "N",
    "p": "P",
    "q": "K",
    "r": "R",
    "s": "S",
    "t": "T",
    "v": "V",
    "w": "W",
    "x": "K",
    "y": "Y",
    "z": "Z",
}

_VOWEL_LETTER_PATTERN = re.compile(r"[aeiou]")
_FINAL_Y_PATTERN = re.compile(r"y\b")
_WHITESPACE_PATTERN = re.compile(r"\s+")
_INVALID_CHARS_PATTERN = re.compile(r"[^a-zA-Z'\-]")
_STRESS_PATTERN = re.compile(r"[0-2]$")

_CACHE_LOOKUPS = create_counter(
    "rhyme_analyzer_phoneme_cache_lookups_total",
    "Phoneme cache lookups performed by the resolver.",
    label_names=("result",),
)


def strip_stress(phone: str) -> str:
    """Drop a trailing stress digit (``AY1`` -> ``AY``)."""

    return _STRESS_PATTERN.sub("", phone or "")


def is_vowel_phone(phone: str) -> bool:
    return strip_stress(phone) in VOWEL_PHONEMES


def clean_word(word: Optional[str]) -> str:
    """Lowercase ``word`` and keep only letters, apostrophes and hyphens."""

    cleaned = _INVALID_CHARS_PATTERN.sub("", (word or "").lower())
    return cleaned.strip("'")


def heuristic_phones(word: str) -> List[str]:
    """Approximate a pronunciation from spelling alone.

    Vowel digraphs are consumed first, then single vowel letters, then a
    word-final ``y``; whatever is left is read as consonants. Phonemes come
    out in that rule order rather than in spelling order, which keeps every
    consonant after the final vowel and so inside the coda.
    """

    out: List[str] = []

    def _emitter(phone: str):
        def _replace(_match: re.Match) -> str:
            out.append(phone)
            return " "

        return _replace

    working = word.lower()
    for pattern, phone in VOWEL_DIGRAPH_RULES:
        working = pattern.sub(_emitter(phone), working)

    def _vowel(match: re.Match) -> str:
        out.append(VOWEL_LETTERS[match.group(0)])
        return " "

    working = _VOWEL_LETTER_PATTERN.sub(_vowel, working)
    working = _FINAL_Y_PATTERN.sub(_emitter("IY1"), working)

    for char in _WHITESPACE_PATTERN.sub("", working):
        phone = CONSONANT_LETTERS.get(char)
        if phone:
            out.append(phone)

    return out or [DEFAULT_PHONEME]


class PhonemeResolver:
    """Memoizing word -> phoneme lookup owned by one analyzer instance.

    The cache only grows; word -> phones is a pure function of the cleaned
    word, so entries never go stale.
    """

    def __init__(self, overrides: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        self.overrides: Dict[str, Tuple[str, ...]] = dict(OVERRIDE_PHONEMES)
        if overrides:
            for word, phones in overrides.items():
                key = clean_word(word)
                if key:
                    self.overrides[key] = tuple(phones)

        self._cache_lock = threading.RLock()
        self._cache: Dict[str, Tuple[str, ...]] = {}
        self._logger = get_logger(__name__).bind(component="phoneme_resolver")

    @property
    def cache_size(self) -> int:
        with self._cache_lock:
            return len(self._cache)

    def clear_cache(self) -> None:
        self._logger.info("Clearing phoneme cache", context={"size": self.cache_size})
        with self._cache_lock:
            self._cache.clear()

    def word_to_phones(self, word: Optional[str]) -> List[str]:
        """Return the phonemes for ``word``, or ``[]`` if nothing survives cleaning."""

        key = clean_word(word)
        if not key:
            return []

        with self._cache_lock:
            cached = self._cache.get(key)
            if cached is not None:
                _CACHE_LOOKUPS.labels(result="hit").inc()
                return list(cached)

            _CACHE_LOOKUPS.labels(result="miss").inc()
            phones = self.overrides.get(key)
            if phones is None:
                phones = tuple(heuristic_phones(key))
            self._cache[key] = phones

        return list(phones)


__all__ = [
    "CONSONANT_LETTERS",
    "DEFAULT_PHONEME",
    "OVERRIDE_PHONEMES",
    "PhonemeResolver",
    "VOWEL_DIGRAPH_RULES",
    "VOWEL_LETTERS",
    "VOWEL_PHONEMES",
    "clean_word",
    "heuristic_phones",
    "is_vowel_phone",
    "strip_stress",
]
