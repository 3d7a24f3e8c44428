"""Preview package - vector rendering of template layouts."""

from .charts import chart_area, chart_kind, render_chart
from .renderer import PREVIEW_SIZES, SPECIAL_CONTENT_TYPES, render_preview
from .scene import (
    Circle,
    Ellipse,
    GradientStop,
    Group,
    Line,
    LinearGradient,
    Node,
    Path,
    Polygon,
    Polyline,
    Rectangle,
    Scene,
    Text,
)
from .svg import scene_to_element, scene_to_svg, split_alpha

__all__ = [
    # Renderer
    "PREVIEW_SIZES",
    "SPECIAL_CONTENT_TYPES",
    "render_preview",
    "render_chart",
    "chart_area",
    "chart_kind",
    # Scene graph
    "Scene",
    "Node",
    "Group",
    "Rectangle",
    "Circle",
    "Ellipse",
    "Line",
    "Polyline",
    "Polygon",
    "Path",
    "Text",
    "LinearGradient",
    "GradientStop",
    # SVG
    "scene_to_element",
    "scene_to_svg",
    "split_alpha",
]
