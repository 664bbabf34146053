"""Configuration: separator, screens, and variant definitions."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

from twstyle.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "twstyle.config.json"

_DEFAULT_SCREENS = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

# Variant name -> selector suffix appended to the utility's class token.
_DEFAULT_PSEUDO_VARIANTS = {
    "hover": ":hover",
    "focus": ":focus",
    "active": ":active",
    "visited": ":visited",
    "disabled": ":disabled",
    "checked": ":checked",
    "focus-within": ":focus-within",
    "focus-visible": ":focus-visible",
    "first": ":first-child",
    "last": ":last-child",
    "odd": ":nth-child(odd)",
    "even": ":nth-child(even)",
    "placeholder": "::placeholder",
}

# Variant name -> ancestor selector placed before the utility selector.
_DEFAULT_PARENT_VARIANTS = {
    "group-hover": ".group:hover",
    "group-focus": ".group:focus",
    "dark": ".dark",
}


@dataclass(frozen=True)
class TwConfig:
    separator: str = ":"
    screens: dict[str, str] = field(default_factory=lambda: dict(_DEFAULT_SCREENS))
    pseudo_variants: dict[str, str] = field(
        default_factory=lambda: dict(_DEFAULT_PSEUDO_VARIANTS)
    )
    parent_variants: dict[str, str] = field(
        default_factory=lambda: dict(_DEFAULT_PARENT_VARIANTS)
    )

    def __post_init__(self) -> None:
        if not self.separator:
            raise ConfigError("separator must be a non-empty string")

    @property
    def variants(self) -> set[str]:
        """All variant names this configuration understands."""
        return set(self.screens) | set(self.pseudo_variants) | set(self.parent_variants)


_MAPPING_FIELDS = {"screens", "pseudo_variants", "parent_variants"}


def load_config(path: str | Path | None = None) -> TwConfig:
    """Load a JSON config file and overlay it on the defaults.

    Mapping sections are merged key by key into the default tables.  When
    *path* is None the default file name is tried in the working directory;
    a missing file falls back to the defaults.
    """
    config_path = Path(path) if path is not None else Path(DEFAULT_CONFIG_NAME)
    config = TwConfig()
    if not config_path.is_file():
        if path is not None:
            logger.warning("Config %s not found, using defaults", config_path)
        return config

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid config {config_path}: {exc}", cause=exc) from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config {config_path}: expected a JSON object")

    known = {f.name for f in fields(TwConfig)}
    updates: dict[str, object] = {}
    for key, value in data.items():
        if key not in known:
            raise ConfigError(f"Unknown config key: {key!r}")
        if key in _MAPPING_FIELDS:
            if not isinstance(value, dict):
                raise ConfigError(f"Config key {key!r} must be an object")
            merged = dict(getattr(config, key))
            merged.update({str(k): str(v) for k, v in value.items()})
            updates[key] = merged
        else:
            if not isinstance(value, str):
                raise ConfigError(f"Config key {key!r} must be a string")
            updates[key] = value

    logger.debug("Loaded config from %s", config_path)
    return replace(config, **updates)
