"""Serialize style objects to JSON or CSS text."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

from twstyle.model.style import CUSTOM_PROPERTY_MARKER, NESTING_MARKER

__all__ = ["kebab_case", "to_css", "to_json"]

_UPPER_RE = re.compile(r"([A-Z])")
_INDENT = "  "


def to_json(style: Mapping[str, Any], indent: int | None = None) -> str:
    """Dump a style object as JSON, keeping its key order."""
    return json.dumps(style, indent=indent, ensure_ascii=False)


def kebab_case(key: str) -> str:
    """Convert a style object key back to a CSS property name."""
    if key.startswith(CUSTOM_PROPERTY_MARKER):
        return key
    if key == "cssFloat":
        return "float"
    prop = _UPPER_RE.sub(lambda m: "-" + m.group(1).lower(), key)
    if prop.startswith("ms-"):
        prop = "-" + prop
    return prop


def _declarations(style: Mapping[str, Any], depth: int) -> list[str]:
    pad = _INDENT * depth
    lines: list[str] = []
    for key, value in style.items():
        if isinstance(value, str):
            lines.append(f"{pad}{kebab_case(key)}: {value};")
        elif isinstance(value, (list, tuple)):
            lines.extend(f"{pad}{kebab_case(key)}: {item};" for item in value)
    return lines


def _render(style: Mapping[str, Any], selector: str, depth: int) -> list[str]:
    pad = _INDENT * depth
    lines: list[str] = []
    declarations = _declarations(style, depth + 1)
    if declarations:
        lines.append(f"{pad}{selector} {{")
        lines.extend(declarations)
        lines.append(f"{pad}}}")

    for key, value in style.items():
        if not isinstance(value, Mapping):
            continue
        if key.startswith("@"):
            lines.append(f"{pad}{key} {{")
            lines.extend(_render(value, selector, depth + 1))
            lines.append(f"{pad}}}")
        else:
            lines.extend(_render(value, key.replace(NESTING_MARKER, selector), depth))
    return lines


def to_css(style: Mapping[str, Any], selector: str) -> str:
    """Render a style object as CSS for *selector*.

    Nested rules have ``&`` replaced by their parent selector; at-rules wrap
    the rendered body of their block.
    """
    return "\n".join(_render(style, selector, 0)) + "\n"
