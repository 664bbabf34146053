"""Parse utility CSS text into a CSS rule tree using tinycss2."""

from __future__ import annotations

import tinycss2

from twstyle.errors import StylesheetError
from twstyle.model.css import AtRule, Declaration, Node, Root, Rule

__all__ = ["parse_css"]

# At-rules whose block holds rules rather than declarations.
_RULE_LIST_AT_RULES = {"media", "supports", "container", "layer", "document"}


def _raise_parse_error(node) -> None:
    raise StylesheetError(
        f"{node.kind}: {node.message} (line {node.source_line}, "
        f"column {node.source_column})"
    )


def _split_selectors(prelude: list) -> list[str]:
    """Split a rule prelude on top-level commas."""
    selectors: list[str] = []
    current: list = []
    for token in prelude:
        if token.type == "literal" and token.value == ",":
            selectors.append(tinycss2.serialize(current).strip())
            current = []
        else:
            current.append(token)
    selectors.append(tinycss2.serialize(current).strip())
    return [s for s in selectors if s]


def _convert_block(content: list) -> list[Node]:
    """Convert the contents of a style rule (declarations and nested rules)."""
    nodes: list[Node] = []
    items = tinycss2.parse_blocks_contents(
        content, skip_comments=True, skip_whitespace=True
    )
    for item in items:
        if item.type == "error":
            _raise_parse_error(item)
        elif item.type == "declaration":
            nodes.append(
                Declaration(
                    prop=item.name,
                    value=tinycss2.serialize(item.value).strip(),
                    important=item.important,
                )
            )
        else:
            nodes.extend(_convert_rule(item, nested=True))
    return nodes


def _convert_rule_list(content: list) -> list[Node]:
    nodes: list[Node] = []
    items = tinycss2.parse_rule_list(content, skip_comments=True, skip_whitespace=True)
    for item in items:
        nodes.extend(_convert_rule(item))
    return nodes


def _convert_rule(item, nested: bool = False) -> list[Node]:
    if item.type == "error":
        _raise_parse_error(item)
    if item.type == "qualified-rule":
        body = _convert_block(item.content)
        # One Rule per selector so each can be looked up by its own class.
        return [
            Rule(selector=selector, nodes=[_copy(node) for node in body])
            for selector in _split_selectors(item.prelude)
        ]
    if item.type == "at-rule":
        if item.content is None:
            return []
        name = item.lower_at_keyword
        params = tinycss2.serialize(item.prelude).strip()
        # Inside a style rule, conditional blocks may hold bare declarations.
        if name in _RULE_LIST_AT_RULES and not nested:
            children = _convert_rule_list(item.content)
        else:
            children = _convert_block(item.content)
        return [AtRule(name=name, params=params, nodes=children)]
    return []


def _copy(node: Node) -> Node:
    if isinstance(node, Declaration):
        return Declaration(node.prop, node.value, node.important)
    if isinstance(node, Rule):
        return Rule(node.selector, [_copy(n) for n in node.nodes])
    return AtRule(node.name, node.params, [_copy(n) for n in node.nodes])


def parse_css(source: str) -> Root:
    """Parse a stylesheet string into a Root.

    Comma-separated selector lists are split into one Rule per selector.
    Statement at-rules such as ``@import`` are skipped.
    """
    items = tinycss2.parse_stylesheet(source, skip_comments=True, skip_whitespace=True)
    nodes: list[Node] = []
    for item in items:
        nodes.extend(_convert_rule(item))
    return Root(nodes=nodes)
