import xml.etree.ElementTree as ET

import pytest

from ooxlsx.chart_model import Axis, AxisPos, AxisType, ChartData, ChartType, Series
from ooxlsx.chart_reader import read_chart
from ooxlsx.chart_writer import write_chart

C = "{http://schemas.openxmlformats.org/drawingml/2006/chart}"
A = "{http://schemas.openxmlformats.org/drawingml/2006/main}"


def _root(chart: ChartData) -> ET.Element:
    return ET.fromstring(write_chart(chart))


def test_declaration_and_root():
    data = write_chart(ChartData(chart_type=ChartType.BAR))
    assert data.startswith(b'<?xml version="1.0" encoding="UTF-8" standalone="yes"?>')
    assert ET.fromstring(data).tag == C + "chartSpace"


def test_bar_chart_gets_default_axes():
    chart = ChartData(chart_type=ChartType.BAR, axis_names={AxisPos.BOTTOM: "Month"})
    write_chart(chart)
    assert [(a.axis_type, a.pos, a.axis_id, a.cross_ax) for a in chart.axes] == [
        (AxisType.CAT, AxisPos.BOTTOM, 0, 1),
        (AxisType.VAL, AxisPos.LEFT, 1, 0),
    ]
    assert chart.axes[0].title() == "Month"


def test_bar_chart_bar_dir_and_axis_ids():
    root = _root(ChartData(chart_type=ChartType.BAR))
    bar = root.find(f"{C}chart/{C}plotArea/{C}barChart")
    assert bar.find(f"{C}barDir").get("val") == "col"
    assert [e.get("val") for e in bar.findall(f"{C}axId")] == ["0", "1"]


def test_line_3d_has_series_axis():
    chart = ChartData(chart_type=ChartType.LINE_3D)
    write_chart(chart)
    assert [a.axis_type for a in chart.axes] == [AxisType.CAT, AxisType.VAL, AxisType.SER]


def test_existing_axes_are_kept():
    axis = Axis(axis_type=AxisType.VAL, pos=AxisPos.RIGHT, axis_id=7, cross_ax=3)
    chart = ChartData(chart_type=ChartType.LINE, axes=[axis])
    write_chart(chart)
    assert chart.axes == [axis]


def test_pie_chart_has_no_axes():
    chart = ChartData(chart_type=ChartType.PIE)
    root = _root(chart)
    pie = root.find(f"{C}chart/{C}plotArea/{C}pieChart")
    assert pie.find(f"{C}varyColors").get("val") == "1"
    assert chart.axes == []


def test_doughnut_hole_size():
    root = _root(ChartData(chart_type=ChartType.DOUGHNUT))
    doughnut = root.find(f"{C}chart/{C}plotArea/{C}doughnutChart")
    assert doughnut.find(f"{C}holeSize").get("val") == "50"


def test_scatter_series_uses_y_values():
    chart = ChartData(
        chart_type=ChartType.SCATTER,
        series=[Series(number_data_source="Sheet1!$B$1:$B$5")],
    )
    ser = _root(chart).find(f"{C}chart/{C}plotArea/{C}scatterChart/{C}ser")
    assert ser.find(f"{C}yVal/{C}numRef/{C}f").text == "Sheet1!$B$1:$B$5"
    assert ser.find(f"{C}val") is None


def test_series_headers_swapped():
    series = Series(
        number_data_source="S!$B$2:$B$5",
        header_h="S!$B$1",
        header_v="S!$A$2:$A$5",
        swap_header=True,
    )
    root = _root(ChartData(chart_type=ChartType.BAR, series=[series]))
    ser = root.find(f"{C}chart/{C}plotArea/{C}barChart/{C}ser")
    assert ser.find(f"{C}tx/{C}strRef/{C}f").text == "S!$B$1"
    assert ser.find(f"{C}cat/{C}strRef/{C}f").text == "S!$A$2:$A$5"
    assert ser.find(f"{C}idx").get("val") == "0"


def test_no_title_and_no_legend_by_default():
    root = _root(ChartData(chart_type=ChartType.BAR))
    assert root.find(f"{C}chart/{C}title") is None
    assert root.find(f"{C}chart/{C}legend") is None


def test_legend_written():
    chart = ChartData(chart_type=ChartType.BAR, legend_pos=AxisPos.TOP, legend_overlay=True)
    legend = _root(chart).find(f"{C}chart/{C}legend")
    assert legend.find(f"{C}legendPos").get("val") == "t"
    assert legend.find(f"{C}overlay").get("val") == "1"


def test_axis_title_structure():
    chart = ChartData(chart_type=ChartType.BAR, axis_names={AxisPos.LEFT: "Sales"})
    root = _root(chart)
    val_ax = root.find(f"{C}chart/{C}plotArea/{C}valAx")
    run = val_ax.find(f"{C}title/{C}tx/{C}rich/{A}p/{A}r/{A}t")
    assert run.text == "Sales"
    assert val_ax.find(f"{C}scaling/{C}orientation").get("val") == "minMax"


@pytest.mark.parametrize(
    "chart_type", [ChartType.BAR, ChartType.LINE, ChartType.AREA, ChartType.SCATTER]
)
def test_round_trip_through_reader(chart_type):
    chart = ChartData(
        chart_type=chart_type,
        chart_title="Totals & more",
        series=[Series(number_data_source="Sheet1!$A$1:$A$3", header_v="Sheet1!$B$1")],
        legend_pos=AxisPos.RIGHT,
        major_gridlines=True,
        layout="<c:manualLayout></c:manualLayout>",
    )
    loaded = read_chart(write_chart(chart))
    assert loaded.chart_type is chart_type
    assert loaded.chart_title == "Totals & more"
    assert loaded.series[0].number_data_source == "Sheet1!$A$1:$A$3"
    assert loaded.series[0].header_v == "Sheet1!$B$1"
    assert loaded.legend_pos is AxisPos.RIGHT
    assert loaded.major_gridlines is True
    assert loaded.layout == chart.layout
    assert [(a.axis_type, a.pos, a.axis_id, a.cross_ax) for a in loaded.axes] == [
        (a.axis_type, a.pos, a.axis_id, a.cross_ax) for a in chart.axes
    ]


def test_axis_names_round_trip():
    chart = ChartData(
        chart_type=ChartType.LINE,
        axis_names={AxisPos.BOTTOM: "Day", AxisPos.LEFT: "Units"},
    )
    loaded = read_chart(write_chart(chart))
    assert [a.title() for a in loaded.axes] == ["Day", "Units"]


def test_area_default_axes_have_no_titles():
    chart = ChartData(chart_type=ChartType.AREA, axis_names={AxisPos.BOTTOM: "Ignored"})
    write_chart(chart)
    assert [a.title() for a in chart.axes] == ["", ""]