"""Reading a chart part (chartSpace XML) into ChartData."""

from __future__ import annotations

import io
import re
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterator

from .chart_model import (
    Axis,
    AxisType,
    ChartData,
    ChartType,
    Series,
    axis_pos_from_code,
)

_DEFAULT_PREFIXES = {
    "http://schemas.openxmlformats.org/drawingml/2006/chart": "c",
    "http://schemas.openxmlformats.org/drawingml/2006/main": "a",
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships": "r",
}

_AXIS_CODES = ("l", "r", "t", "b")
_UINT = re.compile(r"[0-9]+")

Handler = Callable[[ET.Element], bool]


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _qualified_name(tag: str, prefixes: dict[str, str]) -> str:
    if not tag.startswith("{"):
        return tag
    uri, local = tag[1:].split("}", 1)
    prefix = prefixes.get(uri, "")
    return f"{prefix}:{local}" if prefix else local


def _text(element: ET.Element) -> str:
    return "".join(element.itertext())


def _parse_uint(text: str) -> int:
    return int(text) if _UINT.fullmatch(text) else 0


def _visit(element: ET.Element, handler: Handler) -> None:
    """Walk the descendants in document order; a handler returning True prunes."""
    for child in element:
        if not handler(child):
            _visit(child, handler)


def _outermost(element: ET.Element, names: set[str]) -> Iterator[ET.Element]:
    """Yield descendants with one of the names, not looking inside a match."""
    found: list[ET.Element] = []

    def collect(child: ET.Element) -> bool:
        if _local_name(child.tag) in names:
            found.append(child)
            return True
        return False

    _visit(element, collect)
    return iter(found)


def _first(element: ET.Element | None, name: str) -> ET.Element | None:
    if element is None:
        return None
    return next(_outermost(element, {name}), None)


def _sub_tree(element: ET.Element, prefixes: dict[str, str]) -> str:
    parts = []
    for child in element:
        name = _qualified_name(child.tag, prefixes)
        attrs = "".join(
            f' {_local_name(key)}="{value}"' for key, value in child.attrib.items()
        )
        parts.append(f"<{name}{attrs}>{_sub_tree(child, prefixes)}</{name}>")
    return "".join(parts)


def read_sub_tree(element: ET.Element) -> str:
    """Return the child elements of ``element`` as markup, without text content.

    Attributes are written with their local names; element names carry the
    usual chart prefixes ("c", "a", "r").
    """
    return _sub_tree(element, _DEFAULT_PREFIXES)


def _parse(data: bytes | str) -> tuple[ET.Element, dict[str, str]]:
    if isinstance(data, str):
        data = data.encode("utf-8")
    prefixes: dict[str, str] = {}
    root: ET.Element | None = None
    for event, item in ET.iterparse(io.BytesIO(data), events=("start-ns", "start")):
        if event == "start-ns":
            prefix, uri = item
            prefixes.setdefault(uri, prefix)
        elif root is None:
            root = item
    assert root is not None
    for uri, prefix in _DEFAULT_PREFIXES.items():
        prefixes.setdefault(uri, prefix)
    return root, prefixes


class _ChartReader:
    def __init__(self, root: ET.Element, prefixes: dict[str, str]) -> None:
        self.chart = ChartData()
        self.prefixes = prefixes
        self.parents = {child: parent for parent in root.iter() for child in parent}
        self.done = False

    def read(self, root: ET.Element) -> ChartData:
        if not self._handle_outer(root):
            _visit(root, self._handle_outer)
        return self.chart

    def _handle_outer(self, element: ET.Element) -> bool:
        if self.done:
            return True
        if _local_name(element.tag) == "chart":
            _visit(element, self._handle_chart_child)
            return True
        return False

    def _handle_chart_child(self, element: ET.Element) -> bool:
        if self.done:
            return True
        name = _local_name(element.tag)
        if name == "title":
            self._read_chart_title(element)
            return True
        if name == "plotArea":
            self._read_plot_area(element)
            self.done = True
            return True
        return False

    def _read_chart_title(self, title: ET.Element) -> None:
        node: ET.Element | None = title
        for name in ("tx", "rich", "p", "r", "t"):
            node = _first(node, name)
        if node is not None:
            self.chart.chart_title = _text(node)

    def _read_plot_area(self, plot_area: ET.Element) -> None:
        # Everything from the plot area to the end of the document is scanned.
        handler = self._handle_plot_area_item
        _visit(plot_area, handler)
        node = plot_area
        while node in self.parents:
            parent = self.parents[node]
            siblings = list(parent)
            for sibling in siblings[siblings.index(node) + 1 :]:
                if not handler(sibling):
                    _visit(sibling, handler)
            node = parent

    def _handle_plot_area_item(self, element: ET.Element) -> bool:
        name = _local_name(element.tag)
        if name == "layout":
            self.chart.layout = _sub_tree(element, self.prefixes)
            return True
        if name.endswith("Chart"):
            self._read_type_chart(element, name)
            return True
        if name in ("catAx", "dateAx", "serAx", "valAx"):
            self._read_axis(element, AxisType(name))
            return True
        if name == "legend":
            self._read_legend(element)
            return True
        return False

    def _read_type_chart(self, element: ET.Element, name: str) -> None:
        try:
            self.chart.chart_type = ChartType(name)
        except ValueError:
            self.chart.chart_type = ChartType.NO_STATEMENT
            raise ValueError(f"undefined chart type: {name}") from None

        def handle(child: ET.Element) -> bool:
            if _local_name(child.tag) == "ser":
                self._read_series(child)
                return True
            return False

        _visit(element, handle)

    def _read_series(self, element: ET.Element) -> None:
        series = Series()
        self.chart.series.append(series)

        def handle(child: ET.Element) -> bool:
            name = _local_name(child.tag)
            if name == "tx":
                for ref in _outermost(child, {"strRef"}):
                    series.header_v = _ref_formula(ref)
            elif name in ("cat", "xVal"):
                for ref in _outermost(child, {"numRef", "strRef"}):
                    if _local_name(ref.tag) == "numRef":
                        series.ax_data_source = _ref_formula(ref)
                    else:
                        series.header_h = _ref_formula(ref)
            elif name in ("val", "yVal"):
                for ref in _outermost(child, {"numRef"}):
                    series.number_data_source = _ref_formula(ref)
            elif name != "extLst":
                return False
            return True

        _visit(element, handle)

    def _read_axis(self, element: ET.Element, axis_type: AxisType) -> None:
        axis = Axis(axis_type=axis_type)
        self.chart.axes.append(axis)

        def handle(child: ET.Element) -> bool:
            name = _local_name(child.tag)
            value = child.get("val", "")
            if name == "axId":
                axis.axis_id = _parse_uint(value)
            elif name == "scaling":
                pass
            elif name == "axPos":
                if value in _AXIS_CODES:
                    axis.pos = axis_pos_from_code(value)
            elif name == "majorGridlines":
                self.chart.major_gridlines = True
                return False
            elif name == "minorGridlines":
                self.chart.minor_gridlines = True
                return False
            elif name == "title":
                _read_axis_title(child, axis)
            elif name == "crossAx":
                axis.cross_ax = _parse_uint(value)
            else:
                return False
            return True

        _visit(element, handle)

    def _read_legend(self, element: ET.Element) -> None:
        def handle(child: ET.Element) -> bool:
            name = _local_name(child.tag)
            value = child.get("val", "")
            if name == "legendPos":
                self.chart.legend_pos = axis_pos_from_code(value)
            elif name == "overlay":
                self.chart.legend_overlay = value == "1"
            else:
                return False
            return True

        _visit(element, handle)


def _ref_formula(ref: ET.Element) -> str:
    formula = _first(ref, "f")
    return _text(formula) if formula is not None else ""


def _read_axis_title(title: ET.Element, axis: Axis) -> None:
    for node in _outermost(title, {"tx", "overlay"}):
        if _local_name(node.tag) != "tx":
            continue
        for rich in _outermost(node, {"rich"}):
            for paragraph in _outermost(rich, {"p"}):
                for run in _outermost(paragraph, {"r", "pPr"}):
                    if _local_name(run.tag) != "r":
                        continue
                    for text in _outermost(run, {"t"}):
                        axis.names[axis.pos] = _text(text)


def read_chart(data: bytes | str) -> ChartData:
    """Read a chart part.

    Raises xml.etree.ElementTree.ParseError on malformed XML and ValueError
    when the plot area holds a chart element of an unknown type.
    """
    root, prefixes = _parse(data)
    return _ChartReader(root, prefixes).read(root)