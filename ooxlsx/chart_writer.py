"""Writing ChartData as a chart part (chartSpace XML)."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from xml.sax.saxutils import escape

from .chart_model import (
    Axis,
    AxisPos,
    AxisType,
    ChartData,
    ChartType,
    Series,
    axis_pos_code,
)

CHART_NAMESPACE = "http://schemas.openxmlformats.org/drawingml/2006/chart"
DRAWING_NAMESPACE = "http://schemas.openxmlformats.org/drawingml/2006/main"
RELATIONSHIPS_NAMESPACE = (
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
)

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'

Attrs = Sequence[tuple[str, str]]


class _Markup:
    """A minimal XML text builder that keeps attribute order."""

    def __init__(self) -> None:
        self._parts: list[str] = [_XML_DECLARATION]

    @staticmethod
    def _attrs(attrs: Attrs) -> str:
        return "".join(
            f' {name}="{escape(value, {chr(34): "&quot;"})}"' for name, value in attrs
        )

    def start(self, name: str, attrs: Attrs = ()) -> None:
        self._parts.append(f"<{name}{self._attrs(attrs)}>")

    def end(self, name: str) -> None:
        self._parts.append(f"</{name}>")

    def empty(self, name: str, attrs: Attrs = ()) -> None:
        self._parts.append(f"<{name}{self._attrs(attrs)}/>")

    def text_element(self, name: str, text: str) -> None:
        self._parts.append(f"<{name}>{escape(text)}</{name}>")

    def raw(self, text: str) -> None:
        self._parts.append(text)

    def to_bytes(self) -> bytes:
        return "".join(self._parts).encode("utf-8")


def _write_rich_title(out: _Markup, text: str) -> None:
    """Write a <c:title> holding one rich text run."""
    out.start("c:title")
    out.start("c:tx")
    out.start("c:rich")
    out.empty("a:bodyPr")
    out.empty("a:lstStyle")
    out.start("a:p")
    out.start("a:pPr", [("lvl", "0")])
    out.empty("a:defRPr", [("b", "0")])
    out.end("a:pPr")
    out.start("a:r")
    out.text_element("a:t", text)
    out.end("a:r")
    out.end("a:p")
    out.end("c:rich")
    out.end("c:tx")
    out.empty("c:overlay", [("val", "0")])
    out.end("c:title")


def _write_series(out: _Markup, chart: ChartData, series: Series, index: int) -> None:
    out.start("c:ser")
    out.empty("c:idx", [("val", str(index))])
    out.empty("c:order", [("val", str(index))])

    if series.swap_header:
        header1, header2 = series.header_h, series.header_v
    else:
        header1, header2 = series.header_v, series.header_h

    for element, header in (("c:tx", header1), ("c:cat", header2)):
        if header:
            out.start(element)
            out.start("c:strRef")
            out.text_element("c:f", header)
            out.end("c:strRef")
            out.end(element)

    if series.number_data_source:
        scattered = chart.chart_type in (ChartType.SCATTER, ChartType.BUBBLE)
        element = "c:yVal" if scattered else "c:val"
        out.start(element)
        out.start("c:numRef")
        out.text_element("c:f", series.number_data_source)
        out.end("c:numRef")
        out.end(element)

    out.end("c:ser")


def _write_all_series(out: _Markup, chart: ChartData) -> None:
    for index, series in enumerate(chart.series):
        _write_series(out, chart, series, index)


_AxisSpec = tuple[AxisType, AxisPos, int, int, bool]


def _ensure_axes(chart: ChartData, specs: Sequence[_AxisSpec]) -> None:
    """Give the chart default axes when it has none yet."""
    if chart.axes:
        return
    for axis_type, pos, axis_id, cross_ax, named in specs:
        names = {pos: chart.axis_names.get(pos, "")} if named else {}
        chart.axes.append(
            Axis(axis_type=axis_type, pos=pos, axis_id=axis_id, cross_ax=cross_ax, names=names)
        )


def _write_axis_ids(out: _Markup, chart: ChartData) -> None:
    for axis in chart.axes:
        out.empty("c:axId", [("val", str(axis.axis_id))])


_CAT_VAL_NAMED: tuple[_AxisSpec, ...] = (
    (AxisType.CAT, AxisPos.BOTTOM, 0, 1, True),
    (AxisType.VAL, AxisPos.LEFT, 1, 0, True),
)


def _write_pie(out: _Markup, chart: ChartData) -> None:
    name = "c:pieChart" if chart.chart_type is ChartType.PIE else "c:pie3DChart"
    out.start(name)
    # Pie charts prefer varying colours, as the spreadsheet application does.
    out.empty("c:varyColors", [("val", "1")])
    _write_all_series(out, chart)
    out.end(name)


def _write_bar(out: _Markup, chart: ChartData) -> None:
    name = "c:barChart" if chart.chart_type is ChartType.BAR else "c:bar3DChart"
    out.start(name)
    out.empty("c:barDir", [("val", "col")])
    _write_all_series(out, chart)
    _ensure_axes(chart, _CAT_VAL_NAMED)
    _write_axis_ids(out, chart)
    out.end(name)


def _write_line(out: _Markup, chart: ChartData) -> None:
    name = "c:lineChart" if chart.chart_type is ChartType.LINE else "c:line3DChart"
    out.start(name)
    _write_all_series(out, chart)
    specs = list(_CAT_VAL_NAMED)
    if chart.chart_type is ChartType.LINE_3D:
        specs.append((AxisType.SER, AxisPos.BOTTOM, 2, 0, False))
    _ensure_axes(chart, specs)
    _write_axis_ids(out, chart)
    out.end(name)


def _write_scatter(out: _Markup, chart: ChartData) -> None:
    out.start("c:scatterChart")
    out.empty("c:scatterStyle")
    _write_all_series(out, chart)
    _ensure_axes(
        chart,
        (
            (AxisType.VAL, AxisPos.BOTTOM, 0, 1, True),
            (AxisType.VAL, AxisPos.LEFT, 1, 0, True),
        ),
    )
    _write_axis_ids(out, chart)
    out.end("c:scatterChart")


def _write_area(out: _Markup, chart: ChartData) -> None:
    name = "c:areaChart" if chart.chart_type is ChartType.AREA else "c:area3DChart"
    out.start(name)
    _write_all_series(out, chart)
    _ensure_axes(
        chart,
        (
            (AxisType.CAT, AxisPos.BOTTOM, 0, 1, False),
            (AxisType.VAL, AxisPos.LEFT, 1, 0, False),
        ),
    )
    _write_axis_ids(out, chart)
    out.end(name)


def _write_doughnut(out: _Markup, chart: ChartData) -> None:
    out.start("c:doughnutChart")
    out.empty("c:varyColors", [("val", "1")])
    _write_all_series(out, chart)
    out.empty("c:holeSize", [("val", "50")])
    out.end("c:doughnutChart")


_TYPE_WRITERS: dict[ChartType, Callable[[_Markup, ChartData], None]] = {
    ChartType.AREA: _write_area,
    ChartType.AREA_3D: _write_area,
    ChartType.LINE: _write_line,
    ChartType.LINE_3D: _write_line,
    ChartType.SCATTER: _write_scatter,
    ChartType.PIE: _write_pie,
    ChartType.PIE_3D: _write_pie,
    ChartType.DOUGHNUT: _write_doughnut,
    ChartType.BAR: _write_bar,
    ChartType.BAR_3D: _write_bar,
}


def _write_axis(out: _Markup, chart: ChartData, axis: Axis) -> None:
    name = f"c:{axis.axis_type.value}"
    out.start(name)
    out.empty("c:axId", [("val", str(axis.axis_id))])
    out.start("c:scaling")
    out.empty("c:orientation", [("val", "minMax")])
    out.end("c:scaling")
    code = axis_pos_code(axis.pos)
    out.empty("c:axPos", [("val", code)] if code else [])
    if chart.major_gridlines:
        out.empty("c:majorGridlines")
    if chart.minor_gridlines:
        out.empty("c:minorGridlines")
    _write_rich_title(out, axis.title())
    out.empty("c:crossAx", [("val", str(axis.cross_ax))])
    out.end(name)


def _write_legend(out: _Markup, chart: ChartData) -> None:
    if chart.legend_pos is AxisPos.NONE:
        return
    out.start("c:legend")
    out.empty("c:legendPos", [("val", axis_pos_code(chart.legend_pos) or "r")])
    out.empty("c:overlay", [("val", "1" if chart.legend_overlay else "0")])
    out.end("c:legend")


def write_chart(chart_data: ChartData) -> bytes:
    """Return the chart part as UTF-8 XML.

    Charts of the bar, line, scatter and area kinds that have no axes get
    their default axes added to ``chart_data``, as the saved part refers to them.
    """
    out = _Markup()
    out.start(
        "c:chartSpace",
        [
            ("xmlns:c", CHART_NAMESPACE),
            ("xmlns:a", DRAWING_NAMESPACE),
            ("xmlns:r", RELATIONSHIPS_NAMESPACE),
        ],
    )
    out.start("c:chart")
    if chart_data.chart_title:
        _write_rich_title(out, chart_data.chart_title)

    out.start("c:plotArea")
    out.start("c:layout")
    out.raw(chart_data.layout)
    out.end("c:layout")
    writer = _TYPE_WRITERS.get(chart_data.chart_type)
    if writer is not None:
        writer(out, chart_data)
    for axis in chart_data.axes:
        _write_axis(out, chart_data, axis)
    out.end("c:plotArea")

    _write_legend(out, chart_data)
    out.end("c:chart")
    out.end("c:chartSpace")
    return out.to_bytes()