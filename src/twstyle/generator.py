"""Utility table and rule generation for variant-prefixed utility classes."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Callable, Iterator

from twstyle.config import TwConfig
from twstyle.errors import UnknownUtilityError, UnknownVariantError
from twstyle.model.css import AtRule, Node, Root, Rule
from twstyle.parser.classes import ParsedClass
from twstyle.parser.escape import escape_class, unescape_css
from twstyle.parser.stylesheet import parse_css

logger = logging.getLogger(__name__)

Generator = Callable[[ParsedClass], Root]

# A class token: "." followed by identifier characters or escapes.
_CLASS_TOKEN_RE = re.compile(
    r"\.((?:\\[0-9a-fA-F]{1,6}(?:\r\n|[ \t\r\n\f])?|\\[^\n\r\f0-9a-fA-F]|[\w-]|[^\x00-\x7f])+)"
)


def _first_class(selector: str) -> str | None:
    match = _CLASS_TOKEN_RE.search(selector)
    if match is None:
        return None
    return unescape_css(match.group(1))


def _collect(nodes: list[Node]) -> Iterator[tuple[str, Node]]:
    """Yield ``(class_name, node)`` for every utility rule, keeping at-rule wrappers."""
    for node in nodes:
        if isinstance(node, Rule):
            class_name = _first_class(node.selector)
            if class_name is None:
                logger.debug("Skipping rule without a class: %s", node.selector)
                continue
            yield class_name, node
        elif isinstance(node, AtRule):
            for class_name, child in _collect(node.nodes):
                yield class_name, AtRule(node.name, node.params, [child])


class UtilityTable:
    """Maps unescaped utility class names to the CSS nodes that define them."""

    def __init__(self, utilities: dict[str, list[Node]] | None = None):
        self._utilities: dict[str, list[Node]] = utilities or {}

    @classmethod
    def from_root(cls, root: Root) -> UtilityTable:
        utilities: dict[str, list[Node]] = {}
        for class_name, node in _collect(root.nodes):
            utilities.setdefault(class_name, []).append(node)
        logger.debug("Loaded %d utility classes", len(utilities))
        return cls(utilities)

    @classmethod
    def from_css(cls, source: str) -> UtilityTable:
        return cls.from_root(parse_css(source))

    @classmethod
    def from_file(cls, path: str | Path) -> UtilityTable:
        return cls.from_css(Path(path).read_text(encoding="utf-8"))

    def __contains__(self, class_name: object) -> bool:
        return class_name in self._utilities

    def __len__(self) -> int:
        return len(self._utilities)

    def classes(self) -> list[str]:
        return list(self._utilities)

    def nodes_for(self, class_name: str) -> list[Node]:
        """Return a private copy of the nodes defining *class_name*."""
        try:
            nodes = self._utilities[class_name]
        except KeyError:
            raise UnknownUtilityError(class_name) from None
        return Root(nodes=nodes).clone().nodes

    def generator(self, config: TwConfig | None = None) -> Generator:
        """Return a ``generate(parsed_class)`` callable bound to this table."""
        config = config or TwConfig()

        def generate(parsed: ParsedClass) -> Root:
            return generate_rules_for_class(self, parsed, config)

        return generate


def _retarget(
    selector: str, base: str, replacement: str, parents: list[str]
) -> str:
    """Swap the *base* class token in *selector* for *replacement*.

    Selectors that do not name *base*, such as nested ``&`` rules, are
    returned unchanged.
    """
    for match in _CLASS_TOKEN_RE.finditer(selector):
        if unescape_css(match.group(1)) == base:
            selector = selector[: match.start()] + replacement + selector[match.end():]
            if parents:
                selector = " ".join(parents) + " " + selector
            return selector
    return selector


def generate_rules_for_class(
    table: UtilityTable,
    parsed: ParsedClass,
    config: TwConfig | None = None,
) -> Root:
    """Build the CSS tree for one utility class with its variants applied.

    ``md:hover:bg-red-500`` produces::

        @media (min-width: 768px) { .md\\:hover\\:bg-red-500:hover { ... } }
    """
    config = config or TwConfig()
    base, variants = parsed
    nodes = table.nodes_for(base)

    screens: list[str] = []
    pseudo = ""
    parents: list[str] = []
    for variant in variants:
        if variant in config.screens:
            screens.append(config.screens[variant])
        elif variant in config.pseudo_variants:
            pseudo += config.pseudo_variants[variant]
        elif variant in config.parent_variants:
            parents.append(config.parent_variants[variant])
        else:
            raise UnknownVariantError(variant)

    full_name = config.separator.join((*variants, base))
    replacement = "." + escape_class(full_name) + pseudo
    root = Root(nodes=nodes)
    for rule in root.walk_rules():
        rule.selector = _retarget(rule.selector, base, replacement, parents)

    # The first screen variant becomes the outermost media query.
    for width in reversed(screens):
        root.nodes = [AtRule("media", f"(min-width: {width})", root.nodes)]
    return root
