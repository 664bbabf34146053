"""twstyle: synthesize CSS-in-JS style objects from utility class names."""

__version__ = "0.1.0"

from twstyle.config import TwConfig, load_config
from twstyle.errors import (
    ClassificationError,
    ClassListError,
    ConfigError,
    StructuralError,
    StylesheetError,
    TwStyleError,
    UnknownUtilityError,
    UnknownVariantError,
    UnreachableInputError,
)
from twstyle.generator import UtilityTable, generate_rules_for_class
from twstyle.parser import escape_class, parse_class_list, parse_css, unescape_css
from twstyle.serialize import to_css, to_json
from twstyle.synthesis import StyleComposer, compose_classes, synthesize
from twstyle.transforms import canonicalize, classify, extract, merge, merge_into

__all__ = [
    "__version__",
    "ClassListError",
    "ClassificationError",
    "ConfigError",
    "StructuralError",
    "StyleComposer",
    "StylesheetError",
    "TwConfig",
    "TwStyleError",
    "UnknownUtilityError",
    "UnknownVariantError",
    "UnreachableInputError",
    "UtilityTable",
    "canonicalize",
    "classify",
    "compose_classes",
    "escape_class",
    "extract",
    "generate_rules_for_class",
    "load_config",
    "merge",
    "merge_into",
    "parse_class_list",
    "parse_css",
    "synthesize",
    "to_css",
    "to_json",
    "unescape_css",
]
