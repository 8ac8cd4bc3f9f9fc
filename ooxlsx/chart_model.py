"""Data held by a chart part: its type, series, axes, title and legend."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class ChartType(enum.Enum):
    """Chart kinds; the values are the plot-area element names."""

    NO_STATEMENT = ""
    AREA = "areaChart"
    AREA_3D = "area3DChart"
    LINE = "lineChart"
    LINE_3D = "line3DChart"
    STOCK = "stockChart"
    RADAR = "radarChart"
    SCATTER = "scatterChart"
    PIE = "pieChart"
    PIE_3D = "pie3DChart"
    DOUGHNUT = "doughnutChart"
    BAR = "barChart"
    BAR_3D = "bar3DChart"
    OF_PIE = "ofPieChart"
    SURFACE = "surfaceChart"
    SURFACE_3D = "surface3DChart"
    BUBBLE = "bubbleChart"


class AxisPos(enum.Enum):
    """Sides of the plot area, used for axes and for the legend."""

    NONE = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    TOP = enum.auto()
    BOTTOM = enum.auto()


class AxisType(enum.Enum):
    CAT = "catAx"
    VAL = "valAx"
    DATE = "dateAx"
    SER = "serAx"


_POS_CODES = {
    AxisPos.LEFT: "l",
    AxisPos.RIGHT: "r",
    AxisPos.TOP: "t",
    AxisPos.BOTTOM: "b",
}
_CODE_POSITIONS = {code: pos for pos, code in _POS_CODES.items()}


def axis_pos_code(pos: AxisPos) -> str:
    """Return "l", "r", "t" or "b" for a side, or "" for AxisPos.NONE."""
    return _POS_CODES.get(pos, "")


def axis_pos_from_code(code: str) -> AxisPos:
    """Return the side for a code, ignoring case; AxisPos.NONE if unknown."""
    return _CODE_POSITIONS.get(code.lower(), AxisPos.NONE)


@dataclass
class Series:
    """References of one data series; empty strings mean "not set"."""

    number_data_source: str = ""
    ax_data_source: str = ""
    header_h: str = ""
    header_v: str = ""
    swap_header: bool = False


@dataclass
class Axis:
    """One chart axis with its id, the id of the axis it crosses, and titles."""

    axis_type: AxisType = AxisType.CAT
    pos: AxisPos = AxisPos.LEFT
    axis_id: int = 0
    cross_ax: int = 0
    names: dict[AxisPos, str] = field(default_factory=dict)

    def title(self) -> str:
        """Return the title stored for the axis's own side, or ""."""
        if not axis_pos_code(self.pos):
            return ""
        return self.names.get(self.pos, "")


@dataclass
class ChartData:
    """Everything a chart part stores."""

    chart_type: ChartType = ChartType.NO_STATEMENT
    series: list[Series] = field(default_factory=list)
    axes: list[Axis] = field(default_factory=list)
    axis_names: dict[AxisPos, str] = field(default_factory=dict)
    chart_title: str = ""
    legend_pos: AxisPos = AxisPos.NONE
    legend_overlay: bool = False
    major_gridlines: bool = False
    minor_gridlines: bool = False
    layout: str = ""