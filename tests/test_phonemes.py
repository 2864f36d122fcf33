from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest
from prometheus_client import REGISTRY

from rhyme_analyzer.core.phonemes import (
    PhonemeResolver,
    clean_word,
    heuristic_phones,
    is_vowel_phone,
    strip_stress,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Cat", "cat"),
        ("Don't!", "don't"),
        ("'tis'", "tis"),
        ("rock-n-roll", "rock-n-roll"),
        ("42", ""),
        ("'", ""),
        (None, ""),
    ],
)
def test_clean_word(raw, expected) -> None:
    assert clean_word(raw) == expected


def test_strip_stress_and_vowel_detection() -> None:
    assert strip_stress("AY1") == "AY"
    assert strip_stress("K") == "K"
    assert is_vowel_phone("ER0")
    assert not is_vowel_phone("HH")


@pytest.mark.parametrize(
    "word, expected",
    [
        ("cat", ["AE1", "K", "T"]),
        ("hat", ["AE1", "HH", "T"]),
        ("dog", ["OW1", "D", "G"]),
        ("boy", ["OY1", "B"]),
        ("day", ["AY1", "D"]),
        ("see", ["IY1", "S"]),
        ("weird", ["AY1", "W", "R", "D"]),
        ("happy", ["AE1", "IY1", "HH", "P", "P"]),
        ("rhythm", ["R", "HH", "Y", "T", "HH", "M"]),
    ],
)
def test_heuristic_phones(word, expected) -> None:
    assert heuristic_phones(word) == expected


def test_heuristic_falls_back_when_nothing_matches() -> None:
    assert heuristic_phones("-") == ["AH0"]
    assert heuristic_phones("") == ["AH0"]


def test_override_table_wins_over_heuristics() -> None:
    resolver = PhonemeResolver()

    assert resolver.word_to_phones("Lekker") == ["L", "EH1", "K", "ER0"]
    assert resolver.word_to_phones("ain't") == ["EY1", "N", "T"]


def test_custom_overrides_are_cleaned_and_merged() -> None:
    resolver = PhonemeResolver({"Orange!": ["AO1", "R", "AH0", "N", "JH"]})

    assert resolver.word_to_phones("orange") == ["AO1", "R", "AH0", "N", "JH"]
    assert resolver.word_to_phones("bru") == ["B", "R", "UW1"]


def test_empty_word_has_no_phones() -> None:
    resolver = PhonemeResolver()

    assert resolver.word_to_phones("") == []
    assert resolver.word_to_phones("...") == []
    assert resolver.cache_size == 0


def test_cache_is_keyed_on_cleaned_word_and_returns_copies() -> None:
    resolver = PhonemeResolver()

    first = resolver.word_to_phones("Cat")
    first.append("BOGUS")
    second = resolver.word_to_phones("cat!")

    assert second == ["AE1", "K", "T"]
    assert resolver.cache_size == 1

    resolver.clear_cache()
    assert resolver.cache_size == 0


def test_cache_lookups_are_counted() -> None:
    def sample(result: str) -> float:
        value = REGISTRY.get_sample_value(
            "rhyme_analyzer_phoneme_cache_lookups_total", {"result": result}
        )
        return value or 0.0

    resolver = PhonemeResolver()
    hits_before, misses_before = sample("hit"), sample("miss")

    resolver.word_to_phones("glow")
    resolver.word_to_phones("glow")
    resolver.word_to_phones("show")

    assert sample("miss") - misses_before == 2
    assert sample("hit") - hits_before == 1


def test_shared_resolver_is_consistent_across_threads() -> None:
    resolver = PhonemeResolver()
    words = ["cat", "hat", "dog", "log", "boy", "toy"] * 50

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(resolver.word_to_phones, words))

    for word, phones in zip(words, results):
        assert phones == heuristic_phones(word)
    assert resolver.cache_size == 6
