"""Style object model: the nested key/value structure produced by synthesis."""

from __future__ import annotations

from enum import Enum
from typing import Union

StyleValue = Union[str, list[str], "StyleObject"]
StyleObject = dict[str, StyleValue]

CUSTOM_PROPERTY_MARKER = "--"
NESTING_MARKER = "&"
AT_RULE_MARKER = "@"


class StyleKind(Enum):
    """Classification of a style object entry."""

    VARIABLE_DECL = "declVariable"
    DECL = "decl"
    DECL_ARRAY = "declArray"
    AT_RULE = "atRule"
    RULE = "rule"

    @property
    def is_decl(self) -> bool:
        return self in (StyleKind.VARIABLE_DECL, StyleKind.DECL, StyleKind.DECL_ARRAY)
