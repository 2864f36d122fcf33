"""Split a phoneme sequence into its rhyming nucleus and coda."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .phonemes import is_vowel_phone, strip_stress


@dataclass(frozen=True)
class NucleusCoda:
    """Final vowel (zero or one phoneme) and the consonants after it."""

    nucleus: Tuple[str, ...]
    coda: Tuple[str, ...]

    @property
    def vowel(self) -> str:
        return self.nucleus[0] if self.nucleus else ""

    @property
    def bucket_key(self) -> str:
        """Coarse prefilter key: nucleus vowel and last coda phoneme."""

        last = self.coda[-1] if self.coda else "_"
        return f"{self.vowel or '_'}|{last}"


def phones_to_nucleus_coda(phones: Sequence[str]) -> NucleusCoda:
    for index in range(len(phones) - 1, -1, -1):
        if is_vowel_phone(phones[index]):
            return NucleusCoda(
                nucleus=(strip_stress(phones[index]),),
                coda=tuple(strip_stress(phone) for phone in phones[index + 1 :]),
            )

    # No vowel at all: compare on the last two phonemes.
    return NucleusCoda(
        nucleus=(),
        coda=tuple(strip_stress(phone) for phone in phones[-2:]),
    )


__all__ = ["NucleusCoda", "phones_to_nucleus_coda"]
