"""Rhyme distance: weighted nucleus and coda comparison of two tails."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Protocol, Sequence

from .phonemes import strip_stress

NUCLEUS_WEIGHT = 0.7
CODA_WEIGHT = 0.3
SAME_FAMILY_DISTANCE = 0.25
NEUTRAL_CODA_DISTANCE = 0.6
CODA_WINDOW = 3

UNKNOWN_VOWEL = "unk"

VOWEL_FAMILIES: Dict[str, str] = {
    "AA": "low-back",
    "AH": "low-back",
    "AO": "low-back",
    "AE": "low-front",
    "EH": "mid-front",
    "EY": "mid-front",
    "ER": "r-colored",
    "IH": "high-front",
    "IY": "high-front",
    "OW": "mid-back",
    "UH": "mid-back",
    "UW": "high-back",
    "AY": "diph",
    "AW": "diph",
    "OY": "diph",
}

# Voiced/voiceless pairs and nasals collapse onto one representative.
CONSONANT_EQUIVALENTS: Dict[str, str] = {
    "S": "S",
    "Z": "S",
    "T": "T",
    "D": "T",
    "F": "F",
    "V": "F",
    "K": "K",
    "G": "K",
    "M": "N",
    "N": "N",
    "NG": "N",
    "R": "R",
    "L": "L",
    "B": "B",
    "P": "P",
    "CH": "CH",
    "JH": "CH",
    "SH": "SH",
    "ZH": "SH",
}


class HasTail(Protocol):
    nucleus: Sequence[str]
    coda: Sequence[str]


@dataclass(frozen=True)
class DistanceBreakdown:
    """Rhyme distance between two tails with its weighted components."""

    total: float
    nucleus: float
    coda: float


def vowel_class(nucleus: Sequence[str]) -> str:
    return strip_stress(nucleus[0]) if nucleus and nucleus[0] else UNKNOWN_VOWEL


def vowel_family(nucleus: Sequence[str]) -> str:
    if not nucleus or not nucleus[0]:
        return UNKNOWN_VOWEL
    base = strip_stress(nucleus[0])
    return VOWEL_FAMILIES.get(base, base)


def nucleus_distance(a: Sequence[str], b: Sequence[str]) -> float:
    """0.0 for the same vowel, 0.25 within a vowel family, 1.0 otherwise."""

    if vowel_class(a) == vowel_class(b):
        return 0.0
    return SAME_FAMILY_DISTANCE if vowel_family(a) == vowel_family(b) else 1.0


def _equivalent(phone: Optional[str]) -> str:
    if not phone:
        return ""
    return CONSONANT_EQUIVALENTS.get(phone, phone)


def coda_distance(a: Sequence[str], b: Sequence[str]) -> float:
    """Mismatch ratio over the last three coda positions, aligned from the end."""

    longest = max(len(a), len(b))
    if longest == 0:
        return NEUTRAL_CODA_DISTANCE

    mismatches = 0
    comparisons = 0
    for offset in range(1, min(CODA_WINDOW, longest) + 1):
        left = _equivalent(a[-offset] if offset <= len(a) else None)
        right = _equivalent(b[-offset] if offset <= len(b) else None)
        if not left and not right:
            continue
        comparisons += 1
        if left != right:
            mismatches += 1

    return mismatches / comparisons if comparisons else NEUTRAL_CODA_DISTANCE


def score_pair(a: HasTail, b: HasTail) -> DistanceBreakdown:
    nucleus = nucleus_distance(a.nucleus, b.nucleus)
    coda = coda_distance(a.coda, b.coda)
    return DistanceBreakdown(
        total=NUCLEUS_WEIGHT * nucleus + CODA_WEIGHT * coda,
        nucleus=nucleus,
        coda=coda,
    )


def rhyme_distance(a: HasTail, b: HasTail) -> float:
    return score_pair(a, b).total


__all__ = [
    "CONSONANT_EQUIVALENTS",
    "DistanceBreakdown",
    "VOWEL_FAMILIES",
    "coda_distance",
    "nucleus_distance",
    "rhyme_distance",
    "score_pair",
    "vowel_class",
    "vowel_family",
]
