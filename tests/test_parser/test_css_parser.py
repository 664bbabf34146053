"""Tests for parsing utility CSS into a rule tree."""

import pytest

from twstyle.model import AtRule, Declaration, Root, Rule
from twstyle.parser import StylesheetError, parse_css


class TestRules:
    def test_single_rule(self):
        root = parse_css(".p-4 { padding: 1rem; }")
        assert root == Root([Rule(".p-4", [Declaration("padding", "1rem")])])

    def test_selector_list_is_split(self):
        root = parse_css(".a, .b { color: red; }")
        assert [rule.selector for rule in root.nodes] == [".a", ".b"]
        assert root.nodes[0].nodes == root.nodes[1].nodes
        assert root.nodes[0].nodes is not root.nodes[1].nodes

    def test_comma_inside_function_does_not_split(self):
        root = parse_css(".a:not(.b, .c) { color: red; }")
        assert len(root.nodes) == 1
        assert root.nodes[0].selector == ".a:not(.b, .c)"

    def test_important(self):
        root = parse_css(".x { color: red !important; }")
        assert root.nodes[0].nodes == [Declaration("color", "red", important=True)]

    def test_value_keeps_inner_whitespace(self):
        root = parse_css(".x { margin: calc(1rem * var(--a)); }")
        assert root.nodes[0].nodes[0].value == "calc(1rem * var(--a))"


class TestAtRules:
    def test_media_block(self):
        root = parse_css("@media (min-width: 640px) { .c { max-width: 640px; } }")
        assert root == Root(
            [
                AtRule(
                    "media",
                    "(min-width: 640px)",
                    [Rule(".c", [Declaration("max-width", "640px")])],
                )
            ]
        )

    def test_statement_at_rule_is_skipped(self):
        root = parse_css('@import url("x.css"); .p-4 { padding: 1rem; }')
        assert len(root.nodes) == 1
        assert isinstance(root.nodes[0], Rule)

    def test_prelude(self):
        assert AtRule("media", "print").prelude == "@media print"
        assert AtRule("font-face").prelude == "@font-face"


class TestNestedAtRules:
    def test_media_inside_rule_holds_declarations(self):
        root = parse_css(".c { width: 100%; @media (min-width: 640px) { max-width: 640px; } }")
        assert root == Root(
            [
                Rule(
                    ".c",
                    [
                        Declaration("width", "100%"),
                        AtRule(
                            "media",
                            "(min-width: 640px)",
                            [Declaration("max-width", "640px")],
                        ),
                    ],
                )
            ]
        )

    def test_top_level_media_still_holds_rules(self):
        root = parse_css("@media print { .p { color: black; } }")
        assert root.nodes[0].nodes == [Rule(".p", [Declaration("color", "black")])]


class TestErrors:
    def test_rule_without_block_raises(self):
        with pytest.raises(StylesheetError):
            parse_css(".a")

    def test_empty_source(self):
        assert parse_css("") == Root([])
