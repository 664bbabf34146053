"""Synthesize a single style object from an ordered list of utility classes."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, Callable

from twstyle.config import TwConfig
from twstyle.generator import Generator, UtilityTable
from twstyle.model.style import StyleObject
from twstyle.parser.classes import ParsedClass, parse_class_list
from twstyle.parser.escape import unescape_css
from twstyle.transforms.extract import extract
from twstyle.transforms.merge import canonicalize, merge_into

logger = logging.getLogger(__name__)

__all__ = ["StyleComposer", "compose_classes", "synthesize"]


def synthesize(
    parsed_classes: Iterable[ParsedClass],
    generate: Generator,
    unescape: Callable[[str], str] = unescape_css,
) -> StyleObject:
    """Build the canonical style object for *parsed_classes*.

    Classes are generated, extracted and merged strictly in input order so
    that later classes win conflicting declarations; the merged result is
    canonicalized once at the end.
    """
    merged: StyleObject = {}
    for base, variants in parsed_classes:
        root = generate((base, tuple(variants)))
        merge_into(merged, extract(root, base, unescape))
    return canonicalize(merged)


def _flatten_args(args: Iterable[Any], out: list[str]) -> None:
    for arg in args:
        if arg is None or arg is False:
            continue
        if isinstance(arg, str):
            if arg.strip():
                out.append(arg.strip())
        elif isinstance(arg, Mapping):
            out.extend(str(k).strip() for k, v in arg.items() if v and str(k).strip())
        elif isinstance(arg, (list, tuple)):
            _flatten_args(arg, out)
        else:
            raise TypeError(f"Unsupported class argument: {arg!r}")


def compose_classes(*args: Any) -> str:
    """Flatten strings, lists and ``{classes: condition}`` mappings into one string.

    >>> compose_classes("p-4", ["m-2", {"text-white": True, "hidden": False}])
    'p-4 m-2 text-white'
    """
    parts: list[str] = []
    _flatten_args(args, parts)
    return " ".join(parts)


class StyleComposer:
    """Callable turning utility class arguments into a style object.

    A composer holds only read-only state: the utility table and the
    configuration.  Every call builds a fresh accumulator, so one composer can
    serve many call sites.
    """

    def __init__(self, table: UtilityTable, config: TwConfig | None = None):
        self.table = table
        self.config = config or TwConfig()
        self._generate = table.generator(self.config)

    def parse(self, *args: Any) -> list[ParsedClass]:
        return parse_class_list(compose_classes(*args), self.config.separator)

    def __call__(self, *args: Any) -> StyleObject:
        parsed = self.parse(*args)
        logger.debug("Synthesizing %d classes", len(parsed))
        return synthesize(parsed, self._generate)
