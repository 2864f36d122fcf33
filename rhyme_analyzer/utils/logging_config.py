"""Root logging setup for the command line and embedding hosts."""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

_DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_CONFIGURED = False

LOG_LEVEL_ENV = "RHYME_ANALYZER_LOG_LEVEL"


def _resolve_level(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    text = str(level or "").strip()
    if not text:
        return logging.INFO
    if text.isdigit():
        return int(text)
    resolved = logging.getLevelName(text.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: Optional[str | int] = None,
    *,
    force: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """Attach a root handler writing to ``stream`` (stderr by default).

    Keeping log lines off stdout leaves the CLI's report or JSON output
    clean for piping. The level comes from ``level``, then from
    ``RHYME_ANALYZER_LOG_LEVEL``, then defaults to ``INFO``. Later calls are
    no-ops unless ``force`` is set.
    """

    global _CONFIGURED

    if _CONFIGURED and not force:
        return

    resolved_level = _resolve_level(level if level is not None else os.environ.get(LOG_LEVEL_ENV))

    logging.basicConfig(
        level=resolved_level,
        format=_DEFAULT_FORMAT,
        stream=stream or sys.stderr,
        force=force,
    )
    logging.getLogger("rhyme_analyzer").setLevel(resolved_level)
    _CONFIGURED = True


__all__ = ["configure_logging", "LOG_LEVEL_ENV"]
