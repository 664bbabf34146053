"""Tests for JSON and CSS serialization of style objects."""

import pytest

from twstyle.serialize import kebab_case, to_css, to_json


class TestToJson:
    def test_key_order_is_preserved(self):
        assert to_json({"b": "1", "a": "2"}) == '{"b": "1", "a": "2"}'

    def test_indent(self):
        assert to_json({"a": "1"}, indent=2) == '{\n  "a": "1"\n}'


class TestKebabCase:
    @pytest.mark.parametrize(
        ("key", "prop"),
        [
            ("color", "color"),
            ("backgroundColor", "background-color"),
            ("WebkitTransition", "-webkit-transition"),
            ("msFlex", "-ms-flex"),
            ("cssFloat", "float"),
            ("--tw-ring-color", "--tw-ring-color"),
        ],
    )
    def test_kebab_case(self, key, prop):
        assert kebab_case(key) == prop


class TestToCss:
    def test_declarations_and_nested_rule(self):
        css = to_css({"backgroundColor": "red", "&:hover": {"color": "white"}}, ".btn")
        assert css == (
            ".btn {\n"
            "  background-color: red;\n"
            "}\n"
            ".btn:hover {\n"
            "  color: white;\n"
            "}\n"
        )

    def test_at_rule_wraps_body(self):
        css = to_css({"@media (min-width: 640px)": {"padding": "1rem"}}, ".x")
        assert css == (
            "@media (min-width: 640px) {\n"
            "  .x {\n"
            "    padding: 1rem;\n"
            "  }\n"
            "}\n"
        )

    def test_declaration_array_repeats_property(self):
        css = to_css({"position": ["-webkit-sticky", "sticky"]}, ".s")
        assert css == ".s {\n  position: -webkit-sticky;\n  position: sticky;\n}\n"

    def test_parent_selector_rule(self):
        css = to_css({".group:hover &": {"color": "white"}}, ".card")
        assert css == ".group:hover .card {\n  color: white;\n}\n"
