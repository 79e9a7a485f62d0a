"""
Value text grammar for iniopt (raw INI text <-> typed values).

Converts the right-hand side of an INI assignment into typed values
and back.

Grammar Notes:
    - Booleans: true/yes/on/1/enabled and false/no/off/0/disabled (any case)
    - Integers: decimal, 0x hex, 0o or leading-0 octal, 0b binary,
      within the 64-bit range of the kind
    - Floats: anything Python's float() accepts
    - Strings: a backslash escapes the delimiter or another backslash
    - Lists: items separated by a delimiter (default ",")
"""

import re
from typing import Any, List

from .errors import ParseError
from .values import OptionType, SIGNED_MAX, SIGNED_MIN, UNSIGNED_MAX, conform


_TRUE_WORDS = {"true", "yes", "on", "1", "enabled"}
_FALSE_WORDS = {"false", "no", "off", "0", "disabled"}

_INTEGER_RE = re.compile(
    r'^([+-]?)(0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+|0[0-7]*|[1-9][0-9]*)$'
)


def _parse_integer(text: str, kind: OptionType) -> int:
    """Parse an integer literal with an optional base prefix."""
    match = _INTEGER_RE.match(text)
    if not match:
        raise ParseError(text, kind)

    sign, digits = match.groups()
    prefix = digits[:2].lower()
    if prefix == '0x':
        number = int(digits[2:], 16)
    elif prefix == '0o':
        number = int(digits[2:], 8)
    elif prefix == '0b':
        number = int(digits[2:], 2)
    elif len(digits) > 1 and digits.startswith('0'):
        number = int(digits[1:], 8)
    else:
        number = int(digits)

    if sign == '-':
        number = -number

    if kind is OptionType.UNSIGNED:
        low, high = 0, UNSIGNED_MAX
    else:
        low, high = SIGNED_MIN, SIGNED_MAX
    if not low <= number <= high:
        raise ParseError(text, kind)
    return number


def _unescape(text: str, delimiter: str) -> str:
    """Resolve `\\<delimiter>` and `\\\\`; any other backslash is kept."""
    result = []
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == '\\' and pos + 1 < len(text) and text[pos + 1] in (delimiter, '\\'):
            result.append(text[pos + 1])
            pos += 2
            continue
        result.append(char)
        pos += 1
    return ''.join(result)


def _split_raw(text: str, delimiter: str) -> List[str]:
    """Split on unescaped delimiters, leaving escapes in the items."""
    if not text or not text.strip():
        return []

    items = []
    start = 0
    pos = 0
    while pos < len(text):
        char = text[pos]
        if char == '\\' and pos + 1 < len(text) and text[pos + 1] in (delimiter, '\\'):
            pos += 2
            continue
        if char == delimiter:
            items.append(text[start:pos].strip())
            start = pos + 1
        pos += 1
    items.append(text[start:].strip())

    return items


def parse_value(text: str, kind: OptionType, delimiter: str = ",") -> Any:
    """
    Parse a single value of the given kind.

    Surrounding whitespace is ignored for every kind except STRING,
    which keeps it and only has its escapes resolved.

    Args:
        text: Raw value text
        kind: Target kind
        delimiter: List delimiter that may appear escaped in strings

    Returns:
        Python value conforming to kind

    Raises:
        ParseError: If text is not a valid literal of the kind
    """
    if not isinstance(text, str):
        raise ParseError(repr(text), kind)

    if kind is OptionType.STRING:
        return _unescape(text, delimiter)

    stripped = text.strip()

    if kind is OptionType.BOOLEAN:
        lowered = stripped.lower()
        if lowered in _TRUE_WORDS:
            return True
        if lowered in _FALSE_WORDS:
            return False
        raise ParseError(text, kind)

    if kind in (OptionType.SIGNED, OptionType.UNSIGNED):
        return _parse_integer(stripped, kind)

    if kind is OptionType.FLOAT:
        try:
            return float(stripped)
        except ValueError:
            raise ParseError(text, kind)

    raise ParseError(text, kind)


def split_list(text: str, delimiter: str = ",") -> List[str]:
    """
    Split list text on unescaped delimiters.

    A backslash before the delimiter or before another backslash is an
    escape; any other backslash is kept as-is. Items are stripped.
    Empty or blank text yields an empty list.
    """
    return [_unescape(item, delimiter) for item in _split_raw(text, delimiter)]


def parse_list(text: str, kind: OptionType, delimiter: str = ",") -> List[Any]:
    """Parse delimited list text into typed values."""
    return [parse_value(item, kind, delimiter) for item in _split_raw(text, delimiter)]


def format_value(value: Any, kind: OptionType, delimiter: str = ",") -> str:
    """
    Render one typed value as INI text.

    Strings have the delimiter and backslash escaped, so parse_value and
    parse_list both read the text back to the same value.
    """
    value = conform(value, kind)
    if kind is OptionType.BOOLEAN:
        return "true" if value else "false"
    if kind is OptionType.FLOAT:
        return repr(value)
    if kind is OptionType.STRING:
        return value.replace('\\', '\\\\').replace(delimiter, '\\' + delimiter)
    return str(value)


def format_list(values: List[Any], kind: OptionType, delimiter: str = ",") -> str:
    """Render typed values as delimited INI list text."""
    return (delimiter + " ").join(format_value(value, kind, delimiter) for value in values)


__all__ = [
    "parse_value",
    "parse_list",
    "split_list",
    "format_value",
    "format_list",
]
