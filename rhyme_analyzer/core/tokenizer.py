"""Split text into line-tagged word tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Sequence

from .phonemes import clean_word

# Letter runs are the words; other runs are kept only so positions count them.
TOKEN_PATTERN = re.compile(r"[A-Za-z']+|[^A-Za-z'\s]+")
WORD_PATTERN = re.compile(r"[A-Za-z']+")

STOPWORDS: FrozenSet[str] = frozenset(
    {
        "the", "and", "a", "an", "of", "to", "in", "is", "it", "that",
        "for", "on", "with", "as", "at", "by", "be", "or", "but", "if",
        "so", "then", "than", "this", "these", "those", "from", "are",
        "was", "were", "will", "would", "could", "should", "i", "you",
        "he", "she", "we", "they", "me", "him", "her", "us", "them", "my",
        "your", "his", "its", "our", "their",
    }
)


@dataclass(frozen=True)
class WordToken:
    word: str
    line: int
    position: int

    def as_dict(self) -> Dict[str, Any]:
        return {"word": self.word, "line": self.line, "position": self.position}


def split_lines(text: str) -> List[str]:
    return (text or "").split("\n")


def tokenize(text: str) -> List[WordToken]:
    tokens: List[WordToken] = []
    for line_index, line in enumerate(split_lines(text)):
        for position, match in enumerate(TOKEN_PATTERN.finditer(line)):
            run = match.group(0)
            if not WORD_PATTERN.fullmatch(run):
                continue
            cleaned = clean_word(run)
            if cleaned:
                tokens.append(WordToken(word=cleaned, line=line_index, position=position))
    return tokens


def is_line_end(index: int, tokens: Sequence[WordToken]) -> bool:
    """True when no later token shares the line of ``tokens[index]``."""

    following = index + 1
    if following >= len(tokens):
        return True
    return tokens[following].line != tokens[index].line


def is_stopword(word: str) -> bool:
    return word in STOPWORDS


__all__ = [
    "STOPWORDS",
    "TOKEN_PATTERN",
    "WordToken",
    "is_line_end",
    "is_stopword",
    "split_lines",
    "tokenize",
]
