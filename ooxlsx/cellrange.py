"""Rectangular cell ranges such as "A1:B2"."""

from __future__ import annotations

from dataclasses import dataclass

from .cellreference import CellReference


@dataclass(frozen=True)
class CellRange:
    """Top-left and bottom-right rows and columns of a range in a worksheet."""

    top: int = -1
    left: int = -1
    bottom: int = -2
    right: int = -2

    @classmethod
    def from_string(cls, text: str) -> CellRange:
        """Parse "A1:B2" or a single cell "A1"."""
        parts = text.split(":")
        if len(parts) == 2:
            start = CellReference.from_string(parts[0])
            end = CellReference.from_string(parts[1])
            return cls(start.row, start.column, end.row, end.column)
        cell = CellReference.from_string(parts[0])
        return cls(cell.row, cell.column, cell.row, cell.column)

    @classmethod
    def from_references(
        cls, top_left: CellReference, bottom_right: CellReference
    ) -> CellRange:
        return cls(top_left.row, top_left.column, bottom_right.row, bottom_right.column)

    def is_valid(self) -> bool:
        return self.left <= self.right and self.top <= self.bottom

    def row_count(self) -> int:
        return self.bottom - self.top + 1

    def column_count(self) -> int:
        return self.right - self.left + 1

    def to_string(self, row_abs: bool = False, col_abs: bool = False) -> str:
        """Return "A1:B5" notation, a single cell for one-cell ranges, "" if invalid."""
        if not self.is_valid():
            return ""
        first = CellReference(self.top, self.left).to_string(row_abs, col_abs)
        if self.left == self.right and self.top == self.bottom:
            return first
        last = CellReference(self.bottom, self.right).to_string(row_abs, col_abs)
        return f"{first}:{last}"

    def __str__(self) -> str:
        return self.to_string()