from twstyle.model.css import AtRule, Declaration, Node, Root, Rule
from twstyle.model.style import StyleKind, StyleObject, StyleValue

__all__ = [
    "AtRule",
    "Declaration",
    "Node",
    "Root",
    "Rule",
    "StyleKind",
    "StyleObject",
    "StyleValue",
]
