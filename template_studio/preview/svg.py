"""SVG serialization of preview scenes using lxml."""

import re

from lxml import etree

from .scene import (
    Circle,
    Ellipse,
    Group,
    Line,
    Node,
    Path,
    Polygon,
    Polyline,
    Rectangle,
    Scene,
    Text,
)

SVG_NS = "http://www.w3.org/2000/svg"
_ALPHA_HEX = re.compile(r"^#([0-9a-fA-F]{6})([0-9a-fA-F]{2})$")


def _num(value: float) -> str:
    """Compact number formatting: integers without a trailing '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.3f}".rstrip("0").rstrip(".")


def split_alpha(color: str) -> tuple[str, float | None]:
    """Split '#RRGGBBAA' into ('#RRGGBB', alpha); other values pass through."""
    match = _ALPHA_HEX.match(color)
    if not match:
        return color, None
    return f"#{match.group(1)}", round(int(match.group(2), 16) / 255, 3)


def _set_paint(el, attr: str, color: str | None) -> None:
    if color is None:
        return
    value, alpha = split_alpha(color)
    el.set(attr, value)
    if alpha is not None:
        el.set(f"{attr}-opacity", _num(alpha))


def _apply_style(el, node: Node, default_fill: str | None = None) -> None:
    _set_paint(el, "fill", node.fill if node.fill is not None else default_fill)
    _set_paint(el, "stroke", node.stroke)
    if node.stroke_width is not None:
        el.set("stroke-width", _num(node.stroke_width))
    if node.opacity is not None:
        el.set("opacity", _num(node.opacity))
    if node.dasharray and node.dasharray != "none":
        el.set("stroke-dasharray", node.dasharray)
    if node.linecap:
        el.set("stroke-linecap", node.linecap)
    if node.linejoin:
        el.set("stroke-linejoin", node.linejoin)


def _points(points) -> str:
    return " ".join(f"{_num(x)},{_num(y)}" for x, y in points)


def _tag(name: str) -> str:
    return f"{{{SVG_NS}}}{name}"


def _append(parent, node: Node) -> None:
    if isinstance(node, Group):
        el = etree.SubElement(parent, _tag("g"))
        if node.translate is not None:
            el.set("transform", f"translate({_num(node.translate[0])}, {_num(node.translate[1])})")
        _apply_style(el, node)
        for child in node.children:
            _append(el, child)
        return

    if isinstance(node, Rectangle):
        el = etree.SubElement(parent, _tag("rect"))
        for attr, value in (("x", node.x), ("y", node.y), ("width", max(node.w, 0)),
                            ("height", max(node.h, 0))):
            el.set(attr, _num(value))
        if node.rx:
            el.set("rx", _num(node.rx))
    elif isinstance(node, Circle):
        el = etree.SubElement(parent, _tag("circle"))
        for attr in ("cx", "cy"):
            el.set(attr, _num(getattr(node, attr)))
        el.set("r", _num(max(node.r, 0)))
    elif isinstance(node, Ellipse):
        el = etree.SubElement(parent, _tag("ellipse"))
        for attr in ("cx", "cy", "rx", "ry"):
            el.set(attr, _num(getattr(node, attr)))
    elif isinstance(node, Line):
        el = etree.SubElement(parent, _tag("line"))
        for attr in ("x1", "y1", "x2", "y2"):
            el.set(attr, _num(getattr(node, attr)))
    elif isinstance(node, Polyline):
        el = etree.SubElement(parent, _tag("polyline"))
        el.set("points", _points(node.points))
        if node.fill is None:
            el.set("fill", "none")
    elif isinstance(node, Polygon):
        el = etree.SubElement(parent, _tag("polygon"))
        el.set("points", _points(node.points))
    elif isinstance(node, Path):
        el = etree.SubElement(parent, _tag("path"))
        el.set("d", node.d)
    elif isinstance(node, Text):
        el = etree.SubElement(parent, _tag("text"))
        el.set("x", _num(node.x))
        el.set("y", _num(node.y))
        el.set("font-size", _num(node.font_size))
        if node.font_family:
            el.set("font-family", node.font_family)
        if node.font_weight is not None:
            el.set("font-weight", str(node.font_weight))
        if node.font_style:
            el.set("font-style", node.font_style)
        if node.anchor != "start":
            el.set("text-anchor", node.anchor)
        if node.baseline:
            el.set("dominant-baseline", node.baseline)
        if node.letter_spacing:
            el.set("letter-spacing", f"{_num(node.letter_spacing)}em")
        el.text = node.text
    else:
        raise TypeError(f"Unsupported scene node: {type(node).__name__}")

    _apply_style(el, node)


def scene_to_element(scene: Scene) -> etree._Element:
    """Build the <svg> element tree for *scene*."""
    root = etree.Element(_tag("svg"), nsmap={None: SVG_NS})
    root.set("width", _num(scene.width))
    root.set("height", _num(scene.height))
    root.set("viewBox", f"0 0 {_num(scene.width)} {_num(scene.height)}")

    if scene.defs:
        defs = etree.SubElement(root, _tag("defs"))
        for gradient in scene.defs:
            el = etree.SubElement(defs, _tag("linearGradient"), id=gradient.id)
            for attr in ("x1", "y1", "x2", "y2"):
                el.set(attr, f"{_num(getattr(gradient, attr) * 100)}%")
            for stop in gradient.stops:
                stop_el = etree.SubElement(el, _tag("stop"))
                stop_el.set("offset", f"{_num(stop.offset * 100)}%")
                color, alpha = split_alpha(stop.color)
                stop_el.set("stop-color", color)
                opacity = stop.opacity * (alpha if alpha is not None else 1)
                stop_el.set("stop-opacity", _num(opacity))

    background = etree.SubElement(root, _tag("rect"))
    background.set("width", _num(scene.width))
    background.set("height", _num(scene.height))
    _set_paint(background, "fill", scene.background)

    for node in scene.elements:
        _append(root, node)
    return root


def scene_to_svg(scene: Scene) -> bytes:
    """Serialize *scene* as a standalone UTF-8 SVG document."""
    return etree.tostring(scene_to_element(scene), xml_declaration=True,
                          encoding="UTF-8", pretty_print=True)
