"""Deep merge and canonical ordering of style objects."""

from __future__ import annotations

import copy
import re
from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any

from twstyle.errors import ClassificationError
from twstyle.model.style import (
    AT_RULE_MARKER,
    CUSTOM_PROPERTY_MARKER,
    NESTING_MARKER,
    StyleKind,
    StyleObject,
)

__all__ = ["canonicalize", "classify", "compare_entries", "merge", "merge_into"]

_NON_DIGITS_RE = re.compile(r"[^0-9]")


# ---------------------------------------------------------------------------
# Merge
# ---------------------------------------------------------------------------


def merge_into(accumulator: StyleObject, addition: Mapping[str, Any]) -> StyleObject:
    """Deep-merge *addition* into *accumulator* and return the accumulator.

    Nested rule and at-rule bodies merge key by key.  Anywhere a declaration
    or declaration array is involved the addition's value replaces the
    accumulator's, so later classes win at declaration granularity.
    """
    for key, value in addition.items():
        current = accumulator.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merge_into(current, value)
        else:
            accumulator[key] = copy.deepcopy(value)
    return accumulator


def merge(first: Mapping[str, Any], second: Mapping[str, Any]) -> StyleObject:
    """Return a new style object with *second* deep-merged over *first*."""
    return merge_into(copy.deepcopy(dict(first)), second)


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


def classify(key: str, value: Any) -> StyleKind:
    """Return the kind of a style object entry."""
    if isinstance(value, str):
        if key.startswith(CUSTOM_PROPERTY_MARKER):
            return StyleKind.VARIABLE_DECL
        return StyleKind.DECL
    if isinstance(value, (list, tuple)):
        return StyleKind.DECL_ARRAY
    if isinstance(value, Mapping):
        if key.startswith(AT_RULE_MARKER):
            return StyleKind.AT_RULE
        if NESTING_MARKER in key:
            return StyleKind.RULE
    raise ClassificationError(key, value)


def _at_rule_number(prelude: str) -> int | None:
    digits = _NON_DIGITS_RE.sub("", prelude)
    return int(digits) if digits else None


def compare_entries(first: tuple[str, Any], second: tuple[str, Any]) -> int:
    """Compare two ``(key, value)`` entries for canonical emission order."""
    first_key, first_value = first
    second_key, second_value = second
    first_kind = classify(first_key, first_value)
    second_kind = classify(second_key, second_value)

    if first_kind.is_decl or second_kind.is_decl:
        if first_kind.is_decl and second_kind.is_decl:
            first_is_var = first_kind is StyleKind.VARIABLE_DECL
            second_is_var = second_kind is StyleKind.VARIABLE_DECL
            if first_is_var == second_is_var:
                return 0
            return -1 if first_is_var else 1
        return -1 if first_kind.is_decl else 1

    first_is_at_rule = first_kind is StyleKind.AT_RULE
    second_is_at_rule = second_kind is StyleKind.AT_RULE

    # Approximates ascending breakpoint order; min/max-width are not told apart.
    if first_is_at_rule and second_is_at_rule:
        first_number = _at_rule_number(first_key)
        second_number = _at_rule_number(second_key)
        if first_number is None or second_number is None:
            return 0
        if first_number < second_number:
            return -1
        if first_number > second_number:
            return 1
        return 0

    if first_is_at_rule:
        return 1
    if second_is_at_rule:
        return -1
    return 0


def canonicalize(style: Mapping[str, Any]) -> StyleObject:
    """Return a copy of *style* with every level's keys in emission order.

    Declarations come before nested rules and at-rules, custom properties
    before other declarations, rules before at-rules, and at-rules ascend by
    the number embedded in their prelude.  ``sorted`` is stable, so ties keep
    their input order.
    """
    entries: list[tuple[str, Any]] = []
    for key, value in style.items():
        classify(key, value)
        if isinstance(value, Mapping):
            value = canonicalize(value)
        elif isinstance(value, (list, tuple)):
            value = list(value)
        entries.append((key, value))

    return dict(sorted(entries, key=cmp_to_key(compare_entries)))
