"""Phonetic approximation and rhyme clustering engine."""

from .analyzer import RhymeAnalyzer, analyze
from .clustering import Span, build_spans, group_assonance, group_rhymes
from .config import (
    DEFAULT_CONFIG,
    AnalyzerConfig,
    ConfigurationError,
    load_config,
    save_config,
)
from .phonemes import PhonemeResolver, clean_word, heuristic_phones
from .result import AnalysisResult
from .scheme import assign_scheme
from .scorer import coda_distance, nucleus_distance, rhyme_distance, score_pair
from .tails import NucleusCoda, phones_to_nucleus_coda
from .tokenizer import WordToken, tokenize

__all__ = [
    "AnalysisResult",
    "AnalyzerConfig",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "NucleusCoda",
    "PhonemeResolver",
    "RhymeAnalyzer",
    "Span",
    "WordToken",
    "analyze",
    "assign_scheme",
    "build_spans",
    "clean_word",
    "coda_distance",
    "group_assonance",
    "group_rhymes",
    "heuristic_phones",
    "load_config",
    "nucleus_distance",
    "phones_to_nucleus_coda",
    "rhyme_distance",
    "save_config",
    "score_pair",
    "tokenize",
]
