"""Lark-based parser for utility class lists with variant prefixes and groups."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from twstyle.errors import ClassListError

__all__ = ["ParsedClass", "parse_class_list", "serialize_class_list"]

GRAMMAR_PATH = Path(__file__).parent / "class_list.lark"

ParsedClass = tuple[str, tuple[str, ...]]


class _Group:
    """A variant prefix applied to a parenthesized list of entries."""

    def __init__(self, variants: tuple[str, ...], entries: list[object]):
        self.variants = variants
        self.entries = entries


class ClassListTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a class-list parse tree into (base_class, variants) pairs."""

    def __init__(self, separator: str):
        super().__init__()
        self.separator = separator

    def variants(self, items: list[Token]) -> tuple[str, ...]:
        return tuple(str(t)[: -len(self.separator)] for t in items)

    def utility(self, items: list[object]) -> ParsedClass:
        if len(items) == 2:
            return (str(items[1]), items[0])  # type: ignore[return-value]
        return (str(items[0]), ())

    def group(self, items: list[object]) -> _Group:
        return _Group(items[0], list(items[1:]))  # type: ignore[arg-type]

    def start(self, items: list[object]) -> list[ParsedClass]:
        return _flatten(items, ())


def _flatten(entries: list[object], outer: tuple[str, ...]) -> list[ParsedClass]:
    """Distribute group variants over their members, outer variants first."""
    result: list[ParsedClass] = []
    for entry in entries:
        if isinstance(entry, _Group):
            result.extend(_flatten(entry.entries, outer + entry.variants))
        else:
            base, variants = entry  # type: ignore[misc]
            result.append((base, outer + variants))
    return result


@lru_cache(maxsize=None)
def _build_parser(separator: str) -> Lark:
    sep = re.escape(separator).replace("/", "\\/")
    grammar = GRAMMAR_PATH.read_text().replace("__SEP__", sep)
    return Lark(grammar, parser="lalr", start="start")


def parse_class_list(source: str, separator: str = ":") -> list[ParsedClass]:
    """Parse a class list string into ordered ``(base_class, variants)`` pairs.

    ``"md:(p-4 hover:m-2)"`` yields ``[("p-4", ("md",)), ("m-2", ("md", "hover"))]``.
    """
    if not source.strip():
        return []
    parser = _build_parser(separator)
    try:
        tree = parser.parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ClassListError(str(e), line=line, column=column, cause=e) from e
    return ClassListTransformer(separator).transform(tree)


def serialize_class_list(classes: list[ParsedClass], separator: str = ":") -> str:
    """Render parsed pairs back into a flat class string."""
    return " ".join(
        separator.join((*variants, base)) for base, variants in classes
    )
