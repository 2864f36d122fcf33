"""Command-line front end for quick rhyme analyses.

Examples::

    rhyme-analyzer verse.txt
    cat verse.txt | rhyme-analyzer --json --slant 0.4
    rhyme-analyzer verse.txt --config settings.json --no-assonance
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, Sequence

from rhyme_analyzer.core.config import (
    AnalyzerConfig,
    ConfigurationError,
    load_config,
    save_config,
)
from rhyme_analyzer.utils.logging_config import configure_logging

from .services import AnalysisService


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rhyme-analyzer",
        description="Group approximate rhymes and print the rhyme scheme of a text.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Text file to analyze. Reads stdin when omitted or '-'.",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="JSON settings file (camelCase keys, as written by --save-config).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the structured result as JSON instead of the text report.",
    )
    parser.add_argument(
        "--perfect",
        type=float,
        metavar="F",
        help="Distance cutoff for pairs of line-final words.",
    )
    parser.add_argument(
        "--slant",
        type=float,
        metavar="F",
        help="Distance cutoff for pairs involving an internal word.",
    )
    parser.add_argument(
        "--assonance-threshold",
        type=float,
        metavar="F",
        help="Vowel distance cutoff for assonance clusters.",
    )
    parser.add_argument(
        "--no-assonance",
        action="store_true",
        help="Skip vowel echo clustering.",
    )
    parser.add_argument(
        "--keep-stopwords",
        action="store_true",
        help="Analyze function words such as 'the' and 'and' as well.",
    )
    parser.add_argument(
        "--log-level",
        metavar="LEVEL",
        help="Logging level (defaults to RHYME_ANALYZER_LOG_LEVEL or INFO).",
    )
    parser.add_argument(
        "--save-config",
        metavar="PATH",
        help="Write the resolved settings to PATH before analyzing.",
    )
    return parser


def _resolve_config(namespace: argparse.Namespace) -> AnalyzerConfig:
    """Layer CLI flags over the settings file (or the defaults)."""

    base = load_config(namespace.config) if namespace.config else AnalyzerConfig()

    overrides: Dict[str, Any] = {
        "perfect_threshold": namespace.perfect,
        "slant_threshold": namespace.slant,
        "assonance_threshold": namespace.assonance_threshold,
    }
    if namespace.no_assonance:
        overrides["assonance_enabled"] = False
    if namespace.keep_stopwords:
        overrides["ignore_stopwords"] = False

    cleaned = {key: value for key, value in overrides.items() if value is not None}
    return base.with_overrides(**cleaned)


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        config = _resolve_config(args)
    except ConfigurationError as exc:
        parser.exit(2, f"{parser.prog}: error: {exc}\n")

    try:
        text = _read_text(args.file)
    except (OSError, UnicodeDecodeError) as exc:
        parser.exit(1, f"{parser.prog}: error: cannot read {args.file}: {exc}\n")

    if args.save_config:
        save_config(config, args.save_config)

    service = AnalysisService(config=config)
    if args.json:
        print(service.export_json(text))
    else:
        print(service.render_report(text))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
