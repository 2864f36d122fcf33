"""Approximate rhyme groups and rhyme schemes for blocks of verse."""

from rhyme_analyzer.core import (
    AnalysisResult,
    AnalyzerConfig,
    ConfigurationError,
    RhymeAnalyzer,
    analyze,
    load_config,
    save_config,
)

__all__ = [
    "AnalysisResult",
    "AnalyzerConfig",
    "ConfigurationError",
    "RhymeAnalyzer",
    "analyze",
    "load_config",
    "save_config",
]
