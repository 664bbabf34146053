"""Error hierarchy for style synthesis."""
from __future__ import annotations

from typing import Any


class TwStyleError(Exception):
    """Base error for all twstyle errors."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Synthesis errors
# ---------------------------------------------------------------------------


class StructuralError(TwStyleError):
    """A rule or at-rule node has no content where content was expected."""

    def __init__(self, node: Any) -> None:
        super().__init__(f"Rule has no nodes: {node}")
        self.node = node


class ClassificationError(TwStyleError):
    """A style value does not match any recognized kind."""

    def __init__(self, key: str, value: Any) -> None:
        super().__init__(
            f"This type: {type(value).__name__} of value: {value!r} "
            f"(key {key!r}) is not supported"
        )
        self.key = key
        self.value = value


class UnreachableInputError(TwStyleError):
    """The scope class could not be located in a selector being rewritten."""

    def __init__(self, selector: str, scope_class: str) -> None:
        super().__init__(
            f"Selector {selector!r} does not contain class {scope_class!r}"
        )
        self.selector = selector
        self.scope_class = scope_class


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------


class ClassListError(TwStyleError):
    """Raised when a class list cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column


class StylesheetError(TwStyleError):
    """Raised when utility CSS cannot be parsed."""


class UnknownUtilityError(TwStyleError):
    """The utility table has no rules for a class."""

    def __init__(self, class_name: str) -> None:
        super().__init__(f"{class_name} is not a known utility class")
        self.class_name = class_name


class UnknownVariantError(TwStyleError):
    """A variant prefix is not defined by the configuration."""

    def __init__(self, variant: str) -> None:
        super().__init__(f"{variant} is not a known variant")
        self.variant = variant


class ConfigError(TwStyleError):
    """The configuration file is invalid."""
