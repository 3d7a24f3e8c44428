"""Native chart builders for exported data slides.

Every chart is a real, editable python-pptx chart with designer-chosen
sample data and series colors taken from the template palette.

Supported chart kinds:
    bar-vertical    Clustered columns, last quarter highlighted
    bar-horizontal  Clustered bars, last quarter highlighted
    line            Line with markers in the family's data point shape
    area            Filled area
    pie             Four-slice distribution with legend and percentages
    donut           Four-slice doughnut, 50% hole
    scatter         XY points without connecting lines
    stacked-bar     Three stacked column series with bottom legend
"""

from __future__ import annotations

from typing import Callable

from pptx.chart.data import CategoryChartData, XyChartData
from pptx.enum.chart import (
    XL_CHART_TYPE,
    XL_LABEL_POSITION,
    XL_LEGEND_POSITION,
    XL_MARKER_STYLE,
)
from pptx.enum.dml import MSO_LINE_DASH_STYLE
from pptx.oxml.ns import qn
from pptx.util import Inches, Pt

from ..schema.models import ColorTokens, Layout, RegionRole
from ..style.params import DataPointStyle
from .shapes import hex_to_rgb, region_box

QUARTERS = ["Q1", "Q2", "Q3", "Q4"]
QUARTER_VALUES = [42, 58, 65, 78]
PIE_LABELS = ["Product A", "Product B", "Product C", "Other"]
PIE_VALUES = [35, 25, 22, 18]
DONUT_LABELS = ["Category A", "Category B", "Category C", "Category D"]
DONUT_VALUES = [30, 28, 25, 17]
SCATTER_X = [10, 20, 30, 40, 50, 60, 70, 80]
SCATTER_Y = [25, 45, 35, 55, 48, 72, 65, 85]
STACKED_SERIES = [
    ("Series A", [20, 25, 30, 28]),
    ("Series B", [15, 18, 22, 25]),
    ("Series C", [10, 15, 13, 18]),
]
GRID_GRAY = "#CCCCCC"

_MARKER_STYLES = {
    DataPointStyle.CIRCLE: XL_MARKER_STYLE.CIRCLE,
    DataPointStyle.SQUARE: XL_MARKER_STYLE.SQUARE,
    DataPointStyle.DIAMOND: XL_MARKER_STYLE.DIAMOND,
    DataPointStyle.NONE: XL_MARKER_STYLE.NONE,
}
_MARKED_KINDS = {"line", "scatter"}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _add(slide, xl_type, box, chart_data):
    x, y, w, h = box
    frame = slide.shapes.add_chart(xl_type, Inches(x), Inches(y), Inches(w), Inches(h), chart_data)
    return frame.chart


def _style_common(chart, colors: ColorTokens, font: str, base_size: float) -> None:
    """Fonts, hidden title and legend; axis labels when the chart has axes."""
    chart.has_title = False
    chart.has_legend = False
    chart.font.name = font
    chart.font.size = Pt(base_size * 0.6)
    chart.font.color.rgb = hex_to_rgb(colors.neutral)


def _no_gridlines(chart) -> None:
    chart.category_axis.has_major_gridlines = False
    chart.value_axis.has_major_gridlines = False


def _dashed_value_grid(chart) -> None:
    chart.category_axis.has_major_gridlines = False
    axis = chart.value_axis
    axis.has_major_gridlines = True
    line = axis.major_gridlines.format.line
    line.color.rgb = hex_to_rgb(GRID_GRAY)
    line.width = Pt(0.5)
    line.dash_style = MSO_LINE_DASH_STYLE.DASH


def _value_labels(plot, colors: ColorTokens, font: str, base_size: float,
                  position=XL_LABEL_POSITION.OUTSIDE_END) -> None:
    plot.has_data_labels = True
    labels = plot.data_labels
    labels.show_value = True
    labels.position = position
    labels.font.name = font
    labels.font.size = Pt(base_size * 0.5)
    labels.font.color.rgb = hex_to_rgb(colors.neutral)


def _color_points(series, palette: list[str]) -> None:
    for idx, color in enumerate(palette):
        point = series.points[idx]
        point.format.fill.solid()
        point.format.fill.fore_color.rgb = hex_to_rgb(color)


def _legend(chart, position, font: str, base_size: float) -> None:
    chart.has_legend = True
    chart.legend.position = position
    chart.legend.include_in_layout = False
    chart.legend.font.name = font
    chart.legend.font.size = Pt(base_size * 0.6)


def _category_data(name: str, labels: list[str], values: list[float]) -> CategoryChartData:
    data = CategoryChartData()
    data.categories = labels
    data.add_series(name, values)
    return data


def _highlight_last(colors: ColorTokens, count: int) -> list[str]:
    return [colors.accent if i == count - 1 else colors.primary for i in range(count)]


# ---------------------------------------------------------------------------
# Chart kinds
# ---------------------------------------------------------------------------

def _bar(slide, box, colors, font, base_size, *, horizontal: bool):
    xl_type = XL_CHART_TYPE.BAR_CLUSTERED if horizontal else XL_CHART_TYPE.COLUMN_CLUSTERED
    name = "Performance" if horizontal else "Revenue"
    chart = _add(slide, xl_type, box, _category_data(name, QUARTERS, QUARTER_VALUES))
    _style_common(chart, colors, font, base_size)
    plot = chart.plots[0]
    plot.gap_width = 40 if horizontal else 50
    plot.vary_by_categories = False
    _color_points(plot.series[0], _highlight_last(colors, len(QUARTER_VALUES)))
    _value_labels(plot, colors, font, base_size)
    chart.value_axis.visible = False
    _no_gridlines(chart)
    return chart


def render_vertical_bar_chart(slide, box, colors, font, base_size):
    return _bar(slide, box, colors, font, base_size, horizontal=False)


def render_horizontal_bar_chart(slide, box, colors, font, base_size):
    return _bar(slide, box, colors, font, base_size, horizontal=True)


def render_line_chart(slide, box, colors, font, base_size):
    chart = _add(slide, XL_CHART_TYPE.LINE_MARKERS, box,
                 _category_data("Trend", QUARTERS, QUARTER_VALUES))
    _style_common(chart, colors, font, base_size)
    series = chart.plots[0].series[0]
    series.smooth = False
    series.format.line.color.rgb = hex_to_rgb(colors.primary)
    series.format.line.width = Pt(2)
    series.marker.style = XL_MARKER_STYLE.CIRCLE
    series.marker.size = 8
    series.marker.format.fill.solid()
    series.marker.format.fill.fore_color.rgb = hex_to_rgb(colors.primary)
    _dashed_value_grid(chart)
    return chart


def render_area_chart(slide, box, colors, font, base_size):
    chart = _add(slide, XL_CHART_TYPE.AREA, box, _category_data("Growth", QUARTERS, QUARTER_VALUES))
    _style_common(chart, colors, font, base_size)
    series = chart.plots[0].series[0]
    series.format.fill.solid()
    series.format.fill.fore_color.rgb = hex_to_rgb(colors.primary)
    _dashed_value_grid(chart)
    return chart


def _slice_palette(colors: ColorTokens) -> list[str]:
    return [colors.primary, colors.secondary, colors.accent, colors.neutral]


def render_pie_chart(slide, box, colors, font, base_size):
    chart = _add(slide, XL_CHART_TYPE.PIE, box,
                 _category_data("Distribution", PIE_LABELS, PIE_VALUES))
    _style_common(chart, colors, font, base_size)
    plot = chart.plots[0]
    _color_points(plot.series[0], _slice_palette(colors))
    plot.has_data_labels = True
    plot.data_labels.show_value = False
    plot.data_labels.show_percentage = True
    plot.data_labels.number_format = "0%"
    plot.data_labels.number_format_is_linked = False
    _legend(chart, XL_LEGEND_POSITION.RIGHT, font, base_size)
    return chart


def set_hole_size(chart, percent: int) -> None:
    """Doughnut hole size; python-pptx exposes no property for it."""
    doughnut = chart.plots[0]._element
    hole = doughnut.find(qn("c:holeSize"))
    if hole is None:
        hole = doughnut.makeelement(qn("c:holeSize"), {})
        doughnut.append(hole)
    hole.set("val", str(percent))


def render_donut_chart(slide, box, colors, font, base_size):
    chart = _add(slide, XL_CHART_TYPE.DOUGHNUT, box,
                 _category_data("Breakdown", DONUT_LABELS, DONUT_VALUES))
    _style_common(chart, colors, font, base_size)
    plot = chart.plots[0]
    _color_points(plot.series[0], _slice_palette(colors))
    plot.has_data_labels = True
    plot.data_labels.show_value = False
    plot.data_labels.show_percentage = True
    plot.data_labels.number_format = "0%"
    plot.data_labels.number_format_is_linked = False
    set_hole_size(chart, 50)
    _legend(chart, XL_LEGEND_POSITION.RIGHT, font, base_size)
    return chart


def render_scatter_chart(slide, box, colors, font, base_size):
    data = XyChartData()
    series_data = data.add_series("Data Points")
    for x, y in zip(SCATTER_X, SCATTER_Y):
        series_data.add_data_point(x, y)
    chart = _add(slide, XL_CHART_TYPE.XY_SCATTER, box, data)
    _style_common(chart, colors, font, base_size)

    series = chart.plots[0].series[0]
    series.format.line.fill.background()
    series.marker.style = XL_MARKER_STYLE.CIRCLE
    series.marker.size = 6
    series.marker.format.fill.solid()
    series.marker.format.fill.fore_color.rgb = hex_to_rgb(colors.primary)

    for axis in (chart.category_axis, chart.value_axis):
        axis.has_major_gridlines = True
        line = axis.major_gridlines.format.line
        line.color.rgb = hex_to_rgb(GRID_GRAY)
        line.width = Pt(0.5)
        line.dash_style = MSO_LINE_DASH_STYLE.DASH
    return chart


def render_stacked_bar_chart(slide, box, colors, font, base_size):
    data = CategoryChartData()
    data.categories = QUARTERS
    for name, values in STACKED_SERIES:
        data.add_series(name, values)
    chart = _add(slide, XL_CHART_TYPE.COLUMN_STACKED, box, data)
    _style_common(chart, colors, font, base_size)

    plot = chart.plots[0]
    for series, color in zip(plot.series, [colors.primary, colors.secondary, colors.accent]):
        series.format.fill.solid()
        series.format.fill.fore_color.rgb = hex_to_rgb(color)
    _no_gridlines(chart)
    _legend(chart, XL_LEGEND_POSITION.BOTTOM, font, base_size)
    return chart


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

_CHART_RENDERERS: dict[str, Callable] = {
    "bar-vertical": render_vertical_bar_chart,
    "bar-horizontal": render_horizontal_bar_chart,
    "line": render_line_chart,
    "area": render_area_chart,
    "pie": render_pie_chart,
    "donut": render_donut_chart,
    "scatter": render_scatter_chart,
    "stacked-bar": render_stacked_bar_chart,
}


def chart_region(layout: Layout):
    """First media region, or any region whose id mentions 'chart'."""
    for region in layout.regions:
        if region.role == RegionRole.MEDIA or "chart" in region.id:
            return region
    return None


def add_data_chart(slide, layout: Layout, colors: ColorTokens, font: str,
                   base_size: float, chart_kind: str = "bar-vertical",
                   data_point_style: DataPointStyle = DataPointStyle.CIRCLE) -> bool:
    """Add the native chart for a data layout.

    Args:
        slide: python-pptx Slide object.
        layout: Data layout providing the chart region.
        colors: Template palette.
        font: Resolved body font.
        base_size: Body font size in points; labels scale from it.
        chart_kind: Key of the chart renderer; unknown kinds draw vertical bars.
        data_point_style: Marker shape for line and scatter series.

    Returns:
        True if a chart was added, False if the layout has no chart region.
    """
    region = chart_region(layout)
    if region is None:
        return False
    renderer = _CHART_RENDERERS.get(chart_kind, render_vertical_bar_chart)
    chart = renderer(slide, region_box(region, layout), colors, font, base_size)
    if chart_kind in _MARKED_KINDS:
        for series in chart.plots[0].series:
            series.marker.style = _MARKER_STYLES[data_point_style]
    return True
