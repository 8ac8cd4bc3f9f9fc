import xml.etree.ElementTree as ET

import pytest

from ooxlsx.color import Rgba, XlsxColor, from_argb_string, to_argb_string


def test_to_argb_pin():
    assert to_argb_string(Rgba(255, 0, 0)) == "FFFF0000"


def test_from_argb_order():
    assert from_argb_string("80102030") == Rgba(0x10, 0x20, 0x30, 0x80)


@pytest.mark.parametrize("text", ["FF000000", "00ABCDEF", "7F123456", "FFFFFFFF"])
def test_argb_round_trip(text):
    assert to_argb_string(from_argb_string(text)) == text


def test_hash_prefix_accepted():
    assert from_argb_string("#FF00FF00") == from_argb_string("FF00FF00")


def test_six_digit_is_opaque():
    assert from_argb_string("102030").alpha == 255


@pytest.mark.parametrize("text", ["", "XYZ", "12345", "#GG0000"])
def test_invalid_strings(text):
    assert from_argb_string(text) is None


def test_out_of_range_component():
    with pytest.raises(ValueError):
        to_argb_string(Rgba(256, 0, 0))


def test_kinds():
    assert XlsxColor.rgb(Rgba(1, 2, 3)).is_rgb_color()
    assert XlsxColor.indexed(64).is_indexed_color()
    assert XlsxColor.theme("1", "0.5").is_theme_color()
    assert XlsxColor().is_invalid()
    assert XlsxColor.rgb(None).is_invalid()


def test_default_xml_is_auto():
    element = XlsxColor().to_xml()
    assert element.tag == "color"
    assert element.attrib == {"auto": "1"}


def test_theme_without_tint_omits_attribute():
    element = XlsxColor.theme("3").to_xml("fgColor")
    assert element.tag == "fgColor"
    assert "tint" not in element.attrib


@pytest.mark.parametrize(
    "color",
    [
        XlsxColor.rgb(Rgba(10, 20, 30, 40)),
        XlsxColor.indexed(12),
        XlsxColor.theme("4", "-0.25"),
        XlsxColor.theme("2"),
    ],
)
def test_xml_round_trip(color):
    xml_text = ET.tostring(color.to_xml("bgColor"))
    assert XlsxColor.from_xml(ET.fromstring(xml_text)) == color


def test_from_xml_without_attributes_is_invalid():
    assert XlsxColor.from_xml(ET.fromstring("<color/>")).is_invalid()