"""CSS selector escaping and unescaping."""

from __future__ import annotations

import re

__all__ = ["escape_class", "unescape_css"]

# A backslash followed by 1-6 hex digits (plus one optional whitespace
# character), or by any other single character.
_ESCAPE_RE = re.compile(
    r"""
    \\
    (?:
        (?P<hex>[0-9a-fA-F]{1,6})(?:\r\n|[ \t\r\n\f])?
      | (?P<char>[^\n\r\f0-9a-fA-F])
    )
    """,
    re.VERBOSE,
)

_MAX_CODE_POINT = 0x10FFFF
_REPLACEMENT_CHARACTER = "\ufffd"


def _replace(match: re.Match[str]) -> str:
    hex_digits = match.group("hex")
    if hex_digits is None:
        return match.group("char")
    code_point = int(hex_digits, 16)
    if code_point == 0 or code_point > _MAX_CODE_POINT or 0xD800 <= code_point <= 0xDFFF:
        return _REPLACEMENT_CHARACTER
    return chr(code_point)


def unescape_css(selector: str) -> str:
    """Reverse CSS escape sequences so ``.hover\\:bg-red`` reads ``.hover:bg-red``."""
    if "\\" not in selector:
        return selector
    return _ESCAPE_RE.sub(_replace, selector)


def _is_name_char(char: str) -> bool:
    return char.isalnum() or char in "-_" or ord(char) >= 0x80


def escape_class(name: str) -> str:
    """Escape a raw class name for use after ``.`` in a selector."""
    out: list[str] = []
    for index, char in enumerate(name):
        if index == 0 and char.isdigit():
            out.append(f"\\{ord(char):x} ")
        elif index == 1 and char.isdigit() and name[0] == "-":
            out.append(f"\\{ord(char):x} ")
        elif _is_name_char(char):
            out.append(char)
        else:
            out.append(f"\\{char}")
    return "".join(out)
