# ooxlsx

Pure-Python building blocks for some of the XML found inside an `.xlsx`
package: cell addresses and ranges, colours, cell formulas, and DrawingML
chart parts. It uses only the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Cell references and ranges

```python
from ooxlsx.cellreference import CellReference, column_to_name, column_from_name
from ooxlsx.cellrange import CellRange

ref = CellReference.from_string("$B$12")
ref.row, ref.column                  # (12, 2)
ref.to_string(True, True)            # "$B$12"
column_to_name(28)                   # "AB"
column_from_name("AB")               # 28

rng = CellRange.from_string("A1:C5")
rng.row_count(), rng.column_count()  # (5, 3)
rng.to_string(True, True)            # "$A$1:$C$5"
CellRange(2, 2, 2, 2).to_string()    # "B2"
```

Both classes are frozen dataclasses. Text that does not parse gives an
invalid value (`is_valid()` returns `False`), and an invalid reference or
range turns into an empty string. `CellRange.from_references(top_left,
bottom_right)` builds a range from two `CellReference` objects.

## Colours

```python
from ooxlsx.color import XlsxColor, Rgba, from_argb_string, to_argb_string

from_argb_string("FF00FF00")         # Rgba(red=0, green=255, blue=0, alpha=255)
to_argb_string(Rgba(255, 0, 0))      # "FFFF0000"

XlsxColor.rgb(Rgba(255, 0, 0)).to_xml("fgColor")   # <fgColor rgb="FFFF0000"/>
XlsxColor.theme("1", "-0.25").to_xml()             # <color theme="1" tint="-0.25"/>
XlsxColor.indexed(64).to_xml()                     # <color indexed="64"/>
XlsxColor().to_xml()                               # <color auto="1"/>
```

`to_xml` returns an `xml.etree.ElementTree.Element`; `XlsxColor.from_xml`
reads the `rgb`, `indexed` or `theme`/`tint` attributes of such an element.
`is_rgb_color()`, `is_indexed_color()`, `is_theme_color()` and
`is_invalid()` tell the kinds apart. `from_argb_string` returns `None` for
text that is not a colour; `to_argb_string` raises `ValueError` for a
component outside 0–255.

## Formulas

```python
from ooxlsx.cellformula import CellFormula, FormulaType
from ooxlsx.cellrange import CellRange

f = CellFormula("=SUM(A1:A3)")
f.text                               # "SUM(A1:A3)"
f.to_xml()                           # <f t="normal">SUM(A1:A3)</f>

shared = CellFormula("A1*2", FormulaType.SHARED, CellRange.from_string("B1:B9"), si=3)
shared.shared_index()                # 3
```

A leading `=`, or an enclosing `{=…}`, is removed from the text.
`shared_index()` is `-1` for formulas that are not shared. `to_xml()` writes
`ref` for shared, array and data-table formulas with a valid range, `ca="1"`
when set and `si` for shared formulas. `CellFormula.from_xml(element)` reads
an `<f>` element back (an unknown or missing `t` means a normal formula) and
raises `ValueError` for any other element. Formulas compare equal when text,
type and shared index agree.

## Charts

`ooxlsx.chart_model` holds the data of a chart part: `ChartData` with its
`ChartType`, a list of `Series` (cell-reference strings for values,
categories and headers), a list of `Axis` objects, axis titles keyed by
`AxisPos`, a chart title, legend position and overlay, gridline flags and the
plot-area layout markup. `axis_pos_code` and `axis_pos_from_code` convert
between `AxisPos` and the `l`/`r`/`t`/`b` codes.

```python
from ooxlsx.chart_model import ChartData, ChartType, Series, AxisPos
from ooxlsx.chart_writer import write_chart
from ooxlsx.chart_reader import read_chart

data = ChartData(
    chart_type=ChartType.BAR,
    series=[Series(number_data_source="Sheet1!$B$2:$B$10",
                   header_v="Sheet1!$B$1")],
    axis_names={AxisPos.BOTTOM: "Month"},
    chart_title="Sales",
    legend_pos=AxisPos.RIGHT,
)
xml_bytes = write_chart(data)        # UTF-8 chartSpace XML
again = read_chart(xml_bytes)
again.chart_type, again.chart_title  # (ChartType.BAR, "Sales")
```

`write_chart` writes area, line, scatter, pie, doughnut and bar charts (and
their 3D variants where they exist). Bar, line, scatter and area charts
without axes get default axes added to the `ChartData` passed in, titled
from `axis_names`. Other chart types are written with their plot area but
without a chart element.

`read_chart` accepts bytes or text. It collects the chart title, layout,
chart type, series references, axes (id, position, crossing axis, title),
gridline flags and the legend. It raises `xml.etree.ElementTree.ParseError`
on malformed XML and `ValueError` for an unknown chart element.
`read_sub_tree(element)` returns the child elements of an element as
markup without their text.

## What this package does not do

There is no workbook or worksheet model and no reading or writing of whole
`.xlsx` files: the package does not open the zip container, build
`[Content_Types].xml` or relationship parts, or keep sheets with names and
visibility. Charts are handled only as the data in `ChartData` and its XML;
there is no helper that turns a cell range of a sheet into series.