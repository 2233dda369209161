"""Small string helpers: predicates, splitting, stripping, case and UTF-8."""

from __future__ import annotations

import unicodedata
from typing import Iterable

__all__ = [
    "is_blank_char",
    "is_space_char",
    "contains",
    "is_blank",
    "split",
    "starts_with",
    "ends_with",
    "strip",
    "to_lower_case",
    "to_upper_case",
    "join",
    "utf8_to_text",
    "text_to_utf8",
]


def _require_char(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    return char


def is_blank_char(char: str) -> bool:
    """True for horizontal whitespace: tab or a space separator."""
    _require_char(char)
    return char == "\t" or unicodedata.category(char) == "Zs"


def is_space_char(char: str) -> bool:
    """True for any whitespace character, line breaks included."""
    return _require_char(char).isspace()


def _lower_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def _upper_char(char: str) -> str:
    raised = char.upper()
    return raised if len(raised) == 1 else char


def contains(text: str, substring: str) -> bool:
    return substring in text


def is_blank(text: str) -> bool:
    """True if ``text`` is empty or holds only blank characters."""
    return all(is_blank_char(char) for char in text)


def split(text: str, separator: str = "\n") -> list[str]:
    """Split ``text`` on ``separator``, dropping trailing empty parts."""
    if not separator:
        raise ValueError("The separator must not be empty.")
    parts = text.split(separator)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def starts_with(text: str, prefix: str) -> bool:
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    return text.endswith(suffix)


def strip(text: str) -> str:
    """Remove leading and trailing whitespace."""
    if is_blank(text):
        return ""
    start = 0
    end = len(text)
    while start < end and is_space_char(text[start]):
        start += 1
    while end > start and is_space_char(text[end - 1]):
        end -= 1
    return text[start:end]


def to_lower_case(text: str) -> str:
    """Lower-case ``text`` one character at a time, keeping its length."""
    return "".join(_lower_char(char) for char in text)


def to_upper_case(text: str) -> str:
    """Upper-case ``text`` one character at a time, keeping its length."""
    return "".join(_upper_char(char) for char in text)


def join(separator: str, items: Iterable[str]) -> str:
    return separator.join(items)


def utf8_to_text(data: bytes) -> str:
    """Decode UTF-8 bytes, raising ``UnicodeDecodeError`` on invalid input."""
    if not data:
        return ""
    return bytes(data).decode("utf-8")


def text_to_utf8(text: str) -> bytes:
    """Encode ``text`` as UTF-8, raising ``UnicodeEncodeError`` on invalid input."""
    if not text:
        return b""
    return text.encode("utf-8")