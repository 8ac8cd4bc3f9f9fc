"""Cell formulas and their <f> element."""

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from .cellrange import CellRange


class FormulaType(enum.Enum):
    """Formula kinds; the values are the spellings of the "t" attribute."""

    NORMAL = "normal"
    ARRAY = "array"
    DATA_TABLE = "dataTable"
    SHARED = "shared"


_RANGED_TYPES = frozenset({FormulaType.SHARED, FormulaType.ARRAY, FormulaType.DATA_TABLE})


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _parse_xsd_boolean(text: str, default: bool) -> bool:
    if text in ("1", "true"):
        return True
    if text in ("0", "false"):
        return False
    return default


def _strip_formula_marker(text: str) -> str:
    if text.startswith("="):
        return text[1:]
    if text.startswith("{=") and text.endswith("}"):
        return text[2:-1]
    return text


@dataclass
class CellFormula:
    """A formula of a cell; a leading "=" or an enclosing "{=...}" is removed.

    Two formulas are equal when their text, type and shared index agree.
    """

    text: str = ""
    formula_type: FormulaType = FormulaType.NORMAL
    reference: CellRange = field(default_factory=CellRange, compare=False)
    ca: bool = field(default=False, compare=False)
    si: int = 0

    def __post_init__(self) -> None:
        self.text = _strip_formula_marker(self.text)

    def shared_index(self) -> int:
        """Return the shared group index, or -1 for a formula that is not shared."""
        return self.si if self.formula_type is FormulaType.SHARED else -1

    def to_xml(self) -> ET.Element:
        """Return the <f> element for this formula."""
        element = ET.Element("f")
        element.set("t", self.formula_type.value)
        if self.formula_type in _RANGED_TYPES and self.reference.is_valid():
            element.set("ref", self.reference.to_string())
        if self.ca:
            element.set("ca", "1")
        if self.formula_type is FormulaType.SHARED:
            element.set("si", str(self.si))
        if self.text:
            element.text = self.text
        return element

    @classmethod
    def from_xml(cls, element: ET.Element) -> CellFormula:
        """Read an <f> element; an unknown or missing type means a normal formula."""
        if _local_name(element.tag) != "f":
            raise ValueError(f"expected an <f> element, got <{element.tag}>")
        attrs = element.attrib
        try:
            formula_type = FormulaType(attrs.get("t", ""))
        except ValueError:
            formula_type = FormulaType.NORMAL

        formula = cls(formula_type=formula_type)
        if formula_type in _RANGED_TYPES and "ref" in attrs:
            formula.reference = CellRange.from_string(attrs["ref"])
        if formula_type is FormulaType.SHARED:
            formula.ca = _parse_xsd_boolean(attrs.get("ca", ""), False)
            if "si" in attrs:
                formula.si = _parse_int(attrs["si"])
        # The element text is kept exactly as stored.
        formula.text = "".join(element.itertext())
        return formula