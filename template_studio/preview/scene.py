"""Scene graph primitives produced by the preview renderer.

A scene is a flat list of vector nodes (optionally grouped) plus gradient
definitions.  Colors are '#RRGGBB', '#RRGGBBAA', 'none', CSS rgba() strings
or ``url(#id)`` gradient references; the SVG serializer resolves alpha.
"""

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(kw_only=True)
class Node:
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    opacity: float | None = None
    dasharray: str | None = None
    linecap: str | None = None
    linejoin: str | None = None


@dataclass(kw_only=True)
class Rectangle(Node):
    x: float
    y: float
    w: float
    h: float
    rx: float = 0


@dataclass(kw_only=True)
class Circle(Node):
    cx: float
    cy: float
    r: float


@dataclass(kw_only=True)
class Ellipse(Node):
    cx: float
    cy: float
    rx: float
    ry: float


@dataclass(kw_only=True)
class Line(Node):
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(kw_only=True)
class Polyline(Node):
    points: list[tuple[float, float]]


@dataclass(kw_only=True)
class Polygon(Node):
    points: list[tuple[float, float]]


@dataclass(kw_only=True)
class Path(Node):
    d: str


@dataclass(kw_only=True)
class Text(Node):
    x: float
    y: float
    text: str
    font_size: float
    font_family: str | None = None
    font_weight: int | str | None = None
    font_style: str | None = None           # "italic"
    anchor: str = "start"                   # start | middle | end
    baseline: str | None = None             # middle | hanging
    letter_spacing: float | None = None


@dataclass(kw_only=True)
class Group(Node):
    children: list[Node] = field(default_factory=list)
    translate: tuple[float, float] | None = None

    def add(self, node: Node) -> Node:
        self.children.append(node)
        return node


@dataclass
class GradientStop:
    offset: float       # 0-1
    color: str
    opacity: float = 1.0


@dataclass
class LinearGradient:
    id: str
    stops: list[GradientStop]
    x1: float = 0
    y1: float = 0
    x2: float = 0
    y2: float = 1


@dataclass
class Scene:
    """One rendered slide preview."""
    width: float
    height: float
    background: str
    label: str = ""
    layout_type: str = ""
    font_title: str = ""
    font_body: str = ""
    elements: list[Node] = field(default_factory=list)
    defs: list[LinearGradient] = field(default_factory=list)

    def add(self, node: Node | None) -> Node | None:
        if node is not None:
            self.elements.append(node)
        return node

    def walk(self) -> Iterator[Node]:
        """Every node depth-first, groups included."""
        stack = list(reversed(self.elements))
        while stack:
            node = stack.pop()
            yield node
            if isinstance(node, Group):
                stack.extend(reversed(node.children))

    def nodes_of(self, kind: type) -> list[Node]:
        return [n for n in self.walk() if isinstance(n, kind)]

    def texts(self) -> list[str]:
        return [n.text for n in self.walk() if isinstance(n, Text)]
