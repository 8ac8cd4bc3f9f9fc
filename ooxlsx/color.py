"""Colours as stored in spreadsheet XML: RGB, indexed or theme based."""

from __future__ import annotations

import string
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import NamedTuple


class Rgba(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int = 255


def _hex(text: str) -> int:
    return int(text, 16)


def from_argb_string(text: str) -> Rgba | None:
    """Parse "AARRGGBB" (or "#RGB", "#RRGGBB" and similar); None if not a colour."""
    digits = text[1:] if text.startswith("#") else text
    if not digits or any(ch not in string.hexdigits for ch in digits):
        return None
    length = len(digits)
    if length == 3:
        red, green, blue = (_hex(ch) * 17 for ch in digits)
        return Rgba(red, green, blue)
    if length == 6:
        return Rgba(_hex(digits[0:2]), _hex(digits[2:4]), _hex(digits[4:6]))
    if length == 8:
        return Rgba(
            _hex(digits[2:4]), _hex(digits[4:6]), _hex(digits[6:8]), _hex(digits[0:2])
        )
    if length == 9:
        red, green, blue = (_hex(digits[i : i + 3]) >> 4 for i in (0, 3, 6))
        return Rgba(red, green, blue)
    if length == 12:
        red, green, blue = (_hex(digits[i : i + 4]) >> 8 for i in (0, 4, 8))
        return Rgba(red, green, blue)
    return None


def to_argb_string(rgba: Rgba) -> str:
    """Return the colour as upper-case "AARRGGBB"."""
    red, green, blue, alpha = rgba
    for component in (red, green, blue, alpha):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component out of range: {component}")
    return f"{alpha:02X}{red:02X}{green:02X}{blue:02X}"


@dataclass(frozen=True)
class XlsxColor:
    """A colour that is either RGB, an index into the palette, a theme, or unset."""

    rgba: Rgba | None = None
    index: int | None = None
    theme_tint: tuple[str, str] | None = None

    @classmethod
    def rgb(cls, rgba: Rgba | None) -> XlsxColor:
        return cls(rgba=Rgba(*rgba)) if rgba is not None else cls()

    @classmethod
    def indexed(cls, index: int) -> XlsxColor:
        return cls(index=index)

    @classmethod
    def theme(cls, theme: str, tint: str = "") -> XlsxColor:
        return cls(theme_tint=(theme, tint))

    def is_rgb_color(self) -> bool:
        return self.rgba is not None

    def is_indexed_color(self) -> bool:
        return self.index is not None

    def is_theme_color(self) -> bool:
        return self.theme_tint is not None

    def is_invalid(self) -> bool:
        return self.rgba is None and self.index is None and self.theme_tint is None

    def to_xml(self, node: str = "color") -> ET.Element:
        """Return an empty element carrying this colour as attributes."""
        element = ET.Element(node or "color")
        if self.rgba is not None:
            element.set("rgb", to_argb_string(self.rgba))
        elif self.theme_tint is not None:
            theme, tint = self.theme_tint
            element.set("theme", theme)
            if tint:
                element.set("tint", tint)
        elif self.index is not None:
            element.set("indexed", str(self.index))
        else:
            element.set("auto", "1")
        return element

    @classmethod
    def from_xml(cls, element: ET.Element) -> XlsxColor:
        """Read the rgb, indexed or theme attributes of a colour element."""
        attrs = element.attrib
        if "rgb" in attrs:
            return cls.rgb(from_argb_string(attrs["rgb"]))
        if "indexed" in attrs:
            try:
                index = int(attrs["indexed"])
            except ValueError:
                index = 0
            return cls.indexed(index)
        if "theme" in attrs:
            return cls.theme(attrs["theme"], attrs.get("tint", ""))
        return cls()