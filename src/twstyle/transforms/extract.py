"""Extract a style object from a CSS rule tree scoped to one utility class."""

from __future__ import annotations

import re
from typing import Callable

from twstyle.errors import StructuralError, UnreachableInputError
from twstyle.model.css import AtRule, Declaration, Node, Root, Rule
from twstyle.model.style import CUSTOM_PROPERTY_MARKER, NESTING_MARKER, StyleObject
from twstyle.parser.escape import unescape_css
from twstyle.transforms.merge import merge_into

__all__ = ["camel_case", "extract", "objectify"]

_DASH_RE = re.compile(r"-(\w|$)")


def camel_case(prop: str) -> str:
    """Convert a CSS property name to its style object key."""
    if prop.startswith(CUSTOM_PROPERTY_MARKER):
        return prop
    prop = prop.lower()
    if prop == "float":
        return "cssFloat"
    if prop.startswith("-ms-"):
        prop = prop[1:]
    return _DASH_RE.sub(lambda m: m.group(1).upper(), prop)


class _Scoper:
    """Rewrites selectors of a cloned tree relative to one utility class."""

    def __init__(self, scope_class: str, unescape: Callable[[str], str]):
        self.scope_class = scope_class
        self.unescape = unescape
        self.scope_selector = f".{scope_class}"
        self.pattern = re.compile(rf"\S*{re.escape(scope_class)}")

    def rewrite(self, nodes: list[Node]) -> list[Node]:
        """Return *nodes* with scope rules spliced out and selectors rewritten."""
        result: list[Node] = []
        for node in nodes:
            if isinstance(node, Declaration):
                result.append(node)
            elif isinstance(node, AtRule):
                if not node.nodes:
                    raise StructuralError(node)
                node.nodes = self.rewrite(node.nodes)
                result.append(node)
            elif isinstance(node, Rule):
                if not node.nodes:
                    raise StructuralError(node)
                selector = self._scope_selector(node.selector)
                children = self.rewrite(node.nodes)
                if selector is None:
                    # The selector only named the class: promote its children.
                    result.extend(children)
                else:
                    node.selector = selector
                    node.nodes = children
                    result.append(node)
        return result

    def _scope_selector(self, raw: str) -> str | None:
        selector = self.unescape(raw)
        if selector == self.scope_selector:
            return None
        rewritten, count = self.pattern.subn(NESTING_MARKER, selector)
        if count == 0:
            # Already relative to an enclosing rule.
            if NESTING_MARKER in selector:
                return selector
            raise UnreachableInputError(selector, self.scope_class)
        if rewritten == NESTING_MARKER:
            return None
        return rewritten


def _add_declaration(result: StyleObject, node: Declaration) -> None:
    name = camel_case(node.prop)
    value = f"{node.value} !important" if node.important else node.value
    existing = result.get(name)
    if existing is None:
        result[name] = value
    elif isinstance(existing, list):
        existing.append(value)
    else:
        result[name] = [existing, value]  # type: ignore[list-item]


def objectify(nodes: list[Node]) -> StyleObject:
    """Convert rewritten CSS nodes into a plain style object."""
    result: StyleObject = {}
    for node in nodes:
        if isinstance(node, Declaration):
            _add_declaration(result, node)
            continue
        key = node.selector if isinstance(node, Rule) else node.prelude
        body = objectify(node.nodes)
        if isinstance(result.get(key), dict):
            merge_into(result[key], body)  # type: ignore[arg-type]
        else:
            result[key] = body
    return result


def extract(
    tree: Root,
    scope_class: str,
    unescape: Callable[[str], str] = unescape_css,
) -> StyleObject:
    """Return the style object contributed by *scope_class* in *tree*.

    Rules whose selector is exactly ``.scope_class`` (or reduces to ``&``
    once the class token is replaced) are spliced out and their children
    promoted.  Every other selector has each token ending in the class
    replaced by ``&``.  The caller's tree is never modified.

    Raises StructuralError for rules without children and
    UnreachableInputError when a selector does not mention the class.
    """
    root = tree.clone()
    nodes = _Scoper(scope_class, unescape).rewrite(root.nodes)
    return objectify(nodes)
