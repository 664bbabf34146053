"""CSS rule tree model: Declaration, Rule, AtRule, and Root."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass
class Declaration:
    """A single ``prop: value`` pair."""

    prop: str
    value: str
    important: bool = False

    def __str__(self) -> str:
        important = " !important" if self.important else ""
        return f"{self.prop}: {self.value}{important}"


@dataclass
class Rule:
    """A selector with a block of child nodes."""

    selector: str
    nodes: list[Node] = field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.selector} {{ {_render_body(self.nodes)} }}"


@dataclass
class AtRule:
    """A block at-rule such as ``@media (min-width: 640px) { ... }``."""

    name: str
    params: str = ""
    nodes: list[Node] = field(default_factory=list)

    @property
    def prelude(self) -> str:
        """The key used for this at-rule in a style object."""
        if self.params:
            return f"@{self.name} {self.params}"
        return f"@{self.name}"

    def __str__(self) -> str:
        return f"{self.prelude} {{ {_render_body(self.nodes)} }}"


Node = Union[Declaration, Rule, AtRule]


@dataclass
class Root:
    """The top of a CSS rule tree."""

    nodes: list[Node] = field(default_factory=list)

    def clone(self) -> Root:
        return copy.deepcopy(self)

    def walk_rules(self) -> Iterator[Rule]:
        """Yield every Rule depth-first pre-order, descending through at-rules."""
        yield from _walk_rules(self.nodes)

    def __str__(self) -> str:
        return _render_body(self.nodes)


def _walk_rules(nodes: list[Node]) -> Iterator[Rule]:
    for node in nodes:
        if isinstance(node, Rule):
            yield node
            yield from _walk_rules(node.nodes)
        elif isinstance(node, AtRule):
            yield from _walk_rules(node.nodes)


def _render_body(nodes: list[Node]) -> str:
    parts = []
    for node in nodes:
        text = str(node)
        parts.append(f"{text};" if isinstance(node, Declaration) else text)
    return " ".join(parts)
