"""Interpretation of raw file attribute bit fields."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "INVALID_FILE_ATTRIBUTES",
    "FILE_ATTRIBUTE_DIRECTORY",
    "FileAttributes",
    "make_file_attributes",
]

INVALID_FILE_ATTRIBUTES = 0xFFFFFFFF
FILE_ATTRIBUTE_DIRECTORY = 0x10
_MAX_VALUE = 0xFFFFFFFF


@dataclass
class FileAttributes:
    """A 32-bit file attribute value."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= _MAX_VALUE:
            raise ValueError(f"File attributes out of range: {self.value!r}")

    def is_invalid(self) -> bool:
        return self.value == INVALID_FILE_ATTRIBUTES

    def is_valid(self) -> bool:
        return not self.is_invalid()

    def is_directory(self) -> bool:
        return (self.value & FILE_ATTRIBUTE_DIRECTORY) != 0

    def is_file(self) -> bool:
        """True for anything that is not a directory."""
        return not self.is_directory()


def make_file_attributes(value: int) -> FileAttributes:
    """Build attributes from ``value``, rejecting the invalid marker."""
    attributes = FileAttributes(value)
    if attributes.is_invalid():
        raise ValueError("Provided file attributes are invalid")
    return attributes