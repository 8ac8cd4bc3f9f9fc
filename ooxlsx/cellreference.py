"""Single cell references in A1 notation."""

from __future__ import annotations

import re
from dataclasses import dataclass

_CELL_PATTERN = re.compile(r"^\$?([A-Z]{1,3})\$?([0-9]+)$")


def column_to_name(column: int) -> str:
    """Return the column letters for a 1-based column number ("" if not positive)."""
    letters = []
    while column > 0:
        remainder = column % 26 or 26
        letters.append(chr(ord("A") + remainder - 1))
        column = (column - 1) // 26
    return "".join(reversed(letters))


def column_from_name(name: str) -> int:
    """Return the 1-based column number for column letters such as "AB"."""
    column = 0
    for letter in name:
        column = column * 26 + (ord(letter) - ord("A") + 1)
    return column


@dataclass(frozen=True)
class CellReference:
    """The location of one cell in a worksheet, such as "A1"."""

    row: int = -1
    column: int = -1

    @classmethod
    def from_string(cls, text: str) -> CellReference:
        """Parse "A1" or "$A$1"; text that does not match gives an invalid reference."""
        match = _CELL_PATTERN.match(text)
        if match is None:
            return cls()
        return cls(int(match.group(2)), column_from_name(match.group(1)))

    def is_valid(self) -> bool:
        return self.row > 0 and self.column > 0

    def to_string(self, row_abs: bool = False, col_abs: bool = False) -> str:
        """Return the A1 notation, or "" for an invalid reference."""
        if not self.is_valid():
            return ""
        column_part = ("$" if col_abs else "") + column_to_name(self.column)
        row_part = ("$" if row_abs else "") + str(self.row)
        return column_part + row_part

    def __str__(self) -> str:
        return self.to_string()