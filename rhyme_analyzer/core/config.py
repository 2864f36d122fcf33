"""Analyzer configuration: documented defaults, coercion and persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from rhyme_analyzer.utils.observability import get_logger

_LOGGER = get_logger(__name__).bind(component="analyzer_config")

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


class ConfigurationError(ValueError):
    """Raised when a configuration cannot be turned into an ``AnalyzerConfig``."""


@dataclass(frozen=True)
class AnalyzerConfig:
    """Settings that fully determine an analysis run.

    Every field is coerced on construction, so a value that is not a number
    or a recognised boolean raises ``ConfigurationError`` here rather than
    during clustering. Thresholds are not range-checked: values outside 0..1
    only shift how strict the clustering is.
    """

    auto_analyze_on_type: bool = True
    perfect_threshold: float = 0.18
    slant_threshold: float = 0.50
    assonance_enabled: bool = True
    assonance_threshold: float = 0.35
    ignore_stopwords: bool = True

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _coerce(f.name, getattr(self, f.name)))

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        strict: bool = False,
    ) -> "AnalyzerConfig":
        """Build a config from persisted settings.

        Keys may use the persisted camelCase names or the attribute names.
        Missing keys take the documented defaults unless ``strict`` is set,
        in which case every field must be present.
        """

        if not isinstance(data, Mapping):
            raise ConfigurationError(
                f"configuration must be a mapping, got {type(data).__name__}"
            )

        values: Dict[str, Any] = {}
        for key, value in data.items():
            attr = _KEY_TO_ATTR.get(str(key))
            if attr is None:
                _LOGGER.warning("Ignoring unknown configuration key", context={"key": key})
                continue
            values[attr] = _coerce(attr, value)

        missing = [_ATTR_TO_KEY[name] for name in _ATTR_TO_KEY if name not in values]
        if strict and missing:
            raise ConfigurationError(
                "missing configuration fields: " + ", ".join(missing)
            )
        return cls(**values)

    def as_dict(self) -> Dict[str, Any]:
        """Flat key-value form used for persistence and export."""

        return {_ATTR_TO_KEY[f.name]: getattr(self, f.name) for f in fields(self)}

    def with_overrides(self, **overrides: Any) -> "AnalyzerConfig":
        coerced = {}
        for name, value in overrides.items():
            if name not in _ATTR_TO_KEY:
                raise ConfigurationError(f"unknown configuration field: {name}")
            coerced[name] = _coerce(name, value)
        return replace(self, **coerced)

_ATTR_TO_KEY: Dict[str, str] = {
    "auto_analyze_on_type": "autoAnalyzeOnType",
    "perfect_threshold": "perfectThreshold",
    "slant_threshold": "slantThreshold",
    "assonance_enabled": "assonanceEnabled",
    "assonance_threshold": "assonanceThreshold",
    "ignore_stopwords": "ignoreStopwords",
}
_KEY_TO_ATTR: Dict[str, str] = {key: attr for attr, key in _ATTR_TO_KEY.items()}
_KEY_TO_ATTR.update({attr: attr for attr in _ATTR_TO_KEY})

_BOOL_FIELDS = {"auto_analyze_on_type", "assonance_enabled", "ignore_stopwords"}


def _coerce(name: str, value: Any) -> Any:
    if name in _BOOL_FIELDS:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in _TRUE_STRINGS:
                return True
            if normalized in _FALSE_STRINGS:
                return False
        raise ConfigurationError(f"{_ATTR_TO_KEY[name]} must be a boolean, got {value!r}")

    if isinstance(value, bool):
        raise ConfigurationError(f"{_ATTR_TO_KEY[name]} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"{_ATTR_TO_KEY[name]} must be a number, got {value!r}"
        ) from exc


DEFAULT_CONFIG = AnalyzerConfig()


def resolve_config(config: Any, default: Optional[AnalyzerConfig] = None) -> AnalyzerConfig:
    """Accept an ``AnalyzerConfig``, a settings mapping, or ``None``."""

    if config is None:
        return default or DEFAULT_CONFIG
    if isinstance(config, AnalyzerConfig):
        return config
    if isinstance(config, Mapping):
        return AnalyzerConfig.from_mapping(config)
    raise ConfigurationError(
        f"unsupported configuration type: {type(config).__name__}"
    )


def load_config(path: Path | str, *, strict: bool = False) -> AnalyzerConfig:
    """Read a flat JSON settings document."""

    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"cannot read configuration {config_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"configuration {config_path} is not a JSON object")
    return AnalyzerConfig.from_mapping(data, strict=strict)


def save_config(config: AnalyzerConfig, path: Path | str) -> Path:
    config_path = Path(path)
    config_path.write_text(json.dumps(config.as_dict(), indent=2) + "\n", encoding="utf-8")
    _LOGGER.info("Configuration saved", context={"path": str(config_path)})
    return config_path


__all__ = [
    "AnalyzerConfig",
    "ConfigurationError",
    "DEFAULT_CONFIG",
    "load_config",
    "resolve_config",
    "save_config",
]
