from twstyle.errors import ClassListError, StylesheetError
from twstyle.parser.classes import ParsedClass, parse_class_list, serialize_class_list
from twstyle.parser.escape import escape_class, unescape_css
from twstyle.parser.stylesheet import parse_css

__all__ = [
    "ClassListError",
    "ParsedClass",
    "StylesheetError",
    "escape_class",
    "parse_class_list",
    "parse_css",
    "serialize_class_list",
    "unescape_css",
]
