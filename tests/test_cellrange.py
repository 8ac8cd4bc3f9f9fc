import pytest

from ooxlsx.cellrange import CellRange
from ooxlsx.cellreference import CellReference


def test_default_is_empty_and_invalid():
    empty = CellRange()
    assert not empty.is_valid()
    assert empty.row_count() == 0
    assert empty.column_count() == 0
    assert empty.to_string() == ""


def test_parse_range():
    rng = CellRange.from_string("A1:B2")
    assert (rng.top, rng.left, rng.bottom, rng.right) == (1, 1, 2, 2)
    assert rng.is_valid()


def test_counts():
    rng = CellRange.from_string("A1:C5")
    assert rng.row_count() == 5
    assert rng.column_count() == 3


def test_single_cell_string():
    rng = CellRange.from_string("C3")
    assert rng.top == rng.bottom == 3
    assert rng.left == rng.right == 3
    assert rng.to_string() == "C3"


@pytest.mark.parametrize("text", ["A1:B2", "B3:Z100", "D4", "AA1:AB20"])
def test_round_trip(text):
    assert CellRange.from_string(text).to_string() == text


def test_absolute_string():
    rng = CellRange.from_string("A1:B2")
    assert rng.to_string(True, True) == "$A$1:$B$2"


def test_from_references_matches_parse():
    rng = CellRange.from_references(
        CellReference.from_string("B2"), CellReference.from_string("D9")
    )
    assert rng == CellRange.from_string("B2:D9")


def test_reversed_range_is_invalid():
    rng = CellRange.from_string("C3:A1")
    assert not rng.is_valid()
    assert rng.to_string() == ""