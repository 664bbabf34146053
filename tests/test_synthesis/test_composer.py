"""Tests for the utility table, rule generator and StyleComposer."""

from pathlib import Path

import pytest

from twstyle.config import TwConfig
from twstyle.errors import ClassListError, UnknownUtilityError, UnknownVariantError
from twstyle.generator import UtilityTable, generate_rules_for_class
from twstyle.model import AtRule, Declaration, Root, Rule
from twstyle.synthesis import StyleComposer

FIXTURES = Path(__file__).parent.parent / "fixtures"


@pytest.fixture(scope="module")
def table() -> UtilityTable:
    return UtilityTable.from_file(FIXTURES / "utilities.css")


@pytest.fixture()
def tw(table: UtilityTable) -> StyleComposer:
    return StyleComposer(table)


# ---------------------------------------------------------------------------
# UtilityTable
# ---------------------------------------------------------------------------


class TestUtilityTable:
    def test_classes_are_unescaped(self, table):
        assert "w-1/2" in table
        assert "bg-red-500" in table

    def test_rules_without_class_are_skipped(self, table):
        assert "*" not in table
        assert len(table) == len(table.classes())

    def test_at_rule_wrappers_are_kept(self, table):
        nodes = table.nodes_for("container")
        assert len(nodes) == 3
        assert isinstance(nodes[0], Rule)
        assert nodes[1] == AtRule(
            "media", "(min-width: 640px)", [Rule(".container", [Declaration("max-width", "640px")])]
        )

    def test_nodes_for_returns_a_copy(self, table):
        table.nodes_for("p-4")[0].selector = ".changed"
        assert table.nodes_for("p-4")[0].selector == ".p-4"

    def test_unknown_class(self, table):
        with pytest.raises(UnknownUtilityError):
            table.nodes_for("nope")


# ---------------------------------------------------------------------------
# generate_rules_for_class
# ---------------------------------------------------------------------------


class TestGenerateRules:
    def test_no_variants(self, table):
        root = generate_rules_for_class(table, ("p-4", ()))
        assert root == Root([Rule(".p-4", [Declaration("padding", "1rem")])])

    def test_screen_and_pseudo_variants(self, table):
        root = generate_rules_for_class(table, ("p-4", ("md", "hover")))
        assert root == Root(
            [
                AtRule(
                    "media",
                    "(min-width: 768px)",
                    [Rule(".md\\:hover\\:p-4:hover", [Declaration("padding", "1rem")])],
                )
            ]
        )

    def test_first_screen_is_outermost(self, table):
        root = generate_rules_for_class(table, ("p-4", ("sm", "md")))
        outer = root.nodes[0]
        assert outer.params == "(min-width: 640px)"
        assert outer.nodes[0].params == "(min-width: 768px)"

    def test_parent_variant(self, table):
        root = generate_rules_for_class(table, ("text-white", ("dark",)))
        assert root.nodes[0].selector == ".dark .dark\\:text-white"

    def test_pseudo_inserted_after_class_token(self, table):
        root = generate_rules_for_class(table, ("placeholder-white", ("hover",)))
        assert root.nodes[0].selector == ".hover\\:placeholder-white:hover::placeholder"

    def test_unknown_variant(self, table):
        with pytest.raises(UnknownVariantError):
            generate_rules_for_class(table, ("p-4", ("wat",)))

    def test_custom_screens(self, table):
        config = TwConfig(screens={"tablet": "900px"})
        root = generate_rules_for_class(table, ("p-4", ("tablet",)), config)
        assert root.nodes[0].params == "(min-width: 900px)"


# ---------------------------------------------------------------------------
# StyleComposer
# ---------------------------------------------------------------------------


class TestStyleComposer:
    def test_end_to_end(self, tw):
        result = tw("bg-red-500 hover:text-white")
        assert result == {
            "--tw-bg-opacity": "1",
            "backgroundColor": "rgba(239, 68, 68, var(--tw-bg-opacity))",
            "&:hover": {
                "--tw-text-opacity": "1",
                "color": "rgba(255, 255, 255, var(--tw-text-opacity))",
            },
        }
        assert list(result) == ["--tw-bg-opacity", "backgroundColor", "&:hover"]

    def test_later_class_wins(self, tw):
        assert tw("bg-red-500 bg-blue-500")["backgroundColor"].startswith("rgba(59")
        assert tw("bg-blue-500 bg-red-500")["backgroundColor"].startswith("rgba(239")

    def test_screens_sorted_ascending(self, tw):
        result = tw("lg:p-4 md:p-4 sm:m-2")
        assert list(result) == [
            "@media (min-width: 640px)",
            "@media (min-width: 768px)",
            "@media (min-width: 1024px)",
        ]

    def test_same_screen_merges(self, tw):
        assert tw("md:(p-4 m-2)") == {
            "@media (min-width: 768px)": {"padding": "1rem", "margin": "0.5rem"}
        }

    def test_leading_digit_screen(self, tw):
        assert tw("2xl:p-4") == {"@media (min-width: 1536px)": {"padding": "1rem"}}

    def test_group_hover(self, tw):
        result = tw("group-hover:text-white")
        assert list(result) == [".group:hover &"]

    def test_combinator_selector(self, tw):
        result = tw("space-x-4")
        key = "& > :not([hidden]) ~ :not([hidden])"
        assert list(result) == [key]
        assert list(result[key])[0] == "--tw-space-x-reverse"

    def test_container_media_queries(self, tw):
        assert tw("container") == {
            "width": "100%",
            "@media (min-width: 640px)": {"maxWidth": "640px"},
            "@media (min-width: 1024px)": {"maxWidth": "1024px"},
        }

    def test_declaration_array_and_important(self, tw):
        result = tw("sticky font-bold float-left")
        assert result == {
            "position": ["-webkit-sticky", "sticky"],
            "fontWeight": "700 !important",
            "cssFloat": "left",
        }

    def test_fraction_class(self, tw):
        assert tw("w-1/2") == {"width": "50%"}

    def test_accepts_composed_arguments(self, tw):
        assert tw(["p-4", {"m-2": True, "font-bold": False}]) == {
            "padding": "1rem",
            "margin": "0.5rem",
        }

    def test_parse(self, tw):
        assert tw.parse("md:(p-4 hover:m-2)") == [("p-4", ("md",)), ("m-2", ("md", "hover"))]

    def test_custom_separator(self, table):
        tw = StyleComposer(table, TwConfig(separator="_"))
        assert tw("md_p-4") == {"@media (min-width: 768px)": {"padding": "1rem"}}

    def test_unknown_class(self, tw):
        with pytest.raises(UnknownUtilityError):
            tw("p-4 not-a-class")

    def test_unknown_variant(self, tw):
        with pytest.raises(UnknownVariantError):
            tw("wat:p-4")

    def test_syntax_error(self, tw):
        with pytest.raises(ClassListError):
            tw("hover:(p-4")

    def test_calls_do_not_share_state(self, tw):
        tw("p-4")
        assert tw("m-2") == {"margin": "0.5rem"}
