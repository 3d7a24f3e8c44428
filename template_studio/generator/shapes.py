"""python-pptx drawing helpers shared by the builder, charts and content modules.

Positions are in inches, line widths and font sizes in points.  Fill and text
transparency (0-100) is written as an ``a:alpha`` child of the color element,
which python-pptx has no API for.
"""

from lxml import etree
from pptx.dml.color import RGBColor
from pptx.enum.dml import MSO_LINE_DASH_STYLE
from pptx.enum.shapes import MSO_CONNECTOR, MSO_SHAPE
from pptx.enum.text import MSO_ANCHOR, PP_ALIGN
from pptx.oxml.ns import qn
from pptx.util import Inches, Pt

SLIDE_WIDTH = 10.0
SLIDE_HEIGHT = 5.625

_ALIGN_MAP = {
    "left": PP_ALIGN.LEFT,
    "center": PP_ALIGN.CENTER,
    "right": PP_ALIGN.RIGHT,
}

_VALIGN_MAP = {
    "top": MSO_ANCHOR.TOP,
    "middle": MSO_ANCHOR.MIDDLE,
    "bottom": MSO_ANCHOR.BOTTOM,
}


def hex_to_rgb(hex_color: str) -> RGBColor:
    """Convert '#RRGGBB' hex string to an RGBColor."""
    h = hex_color.lstrip("#")
    return RGBColor(*bytes.fromhex(h))


def grid_to_inches(value: float, grid_size: float, total: float) -> float:
    return value / grid_size * total


def region_box(region, layout) -> tuple[float, float, float, float]:
    """(x, y, w, h) of a region on the 10 x 5.625 in slide."""
    b, g = region.bounds, layout.grid
    return (
        grid_to_inches(b.x, g.columns, SLIDE_WIDTH),
        grid_to_inches(b.y, g.rows, SLIDE_HEIGHT),
        grid_to_inches(b.w, g.columns, SLIDE_WIDTH),
        grid_to_inches(b.h, g.rows, SLIDE_HEIGHT),
    )


def _set_alpha(color_parent, transparency: float) -> None:
    """Attach alpha to the ``a:srgbClr`` inside *color_parent* (a solidFill owner)."""
    if not transparency:
        return
    clr = color_parent.find(".//" + qn("a:srgbClr"))
    if clr is None:
        return
    for old in clr.findall(qn("a:alpha")):
        clr.remove(old)
    alpha = etree.SubElement(clr, qn("a:alpha"))
    alpha.set("val", str(int(round((100 - transparency) * 1000))))


def _apply_line(line, color: str | None, width: float | None, dash: bool = False,
                transparency: float = 0) -> None:
    if color is None:
        line.fill.background()
        return
    line.color.rgb = hex_to_rgb(color)
    if width is not None:
        line.width = Pt(width)
    if dash:
        line.dash_style = MSO_LINE_DASH_STYLE.DASH
    if transparency:
        _set_alpha(line._get_or_add_ln(), transparency)


def add_box(slide, x: float, y: float, w: float, h: float, *,
            fill: str | None = None, transparency: float = 0,
            line: str | None = None, line_width: float | None = None, dash: bool = False,
            radius: float = 0, ellipse: bool = False):
    """Rectangle, rounded rectangle (*radius* in inches) or ellipse."""
    if ellipse:
        kind = MSO_SHAPE.OVAL
    elif radius > 0:
        kind = MSO_SHAPE.ROUNDED_RECTANGLE
    else:
        kind = MSO_SHAPE.RECTANGLE
    shape = slide.shapes.add_shape(kind, Inches(x), Inches(y), Inches(max(w, 0)), Inches(max(h, 0)))
    if kind == MSO_SHAPE.ROUNDED_RECTANGLE:
        shortest = min(w, h)
        shape.adjustments[0] = min(radius / shortest, 0.5) if shortest > 0 else 0

    if fill is None:
        shape.fill.background()
    else:
        shape.fill.solid()
        shape.fill.fore_color.rgb = hex_to_rgb(fill)
        _set_alpha(shape.fill._xPr, transparency)
    _apply_line(shape.line, line, line_width, dash)
    return shape


def add_line(slide, x: float, y: float, w: float, h: float, *, color: str,
             width: float = 1, transparency: float = 0, dash: bool = False):
    """Straight connector from (x, y) to (x + w, y + h)."""
    connector = slide.shapes.add_connector(
        MSO_CONNECTOR.STRAIGHT, Inches(x), Inches(y), Inches(x + w), Inches(y + h))
    _apply_line(connector.line, color, width, dash, transparency)
    return connector


def add_text(slide, text: str, x: float, y: float, w: float, h: float, *,
             font: str, size: float, color: str, bold: bool = False, italic: bool = False,
             align: str = "left", valign: str = "top", transparency: float = 0):
    """Text box; newlines start new paragraphs."""
    box = slide.shapes.add_textbox(Inches(x), Inches(y), Inches(max(w, 0)), Inches(max(h, 0)))
    tf = box.text_frame
    tf.word_wrap = True
    tf.vertical_anchor = _VALIGN_MAP.get(valign, MSO_ANCHOR.TOP)

    for i, line in enumerate(text.split("\n")):
        p = tf.paragraphs[0] if i == 0 else tf.add_paragraph()
        p.alignment = _ALIGN_MAP.get(align, PP_ALIGN.LEFT)
        run = p.add_run()
        run.text = line
        run.font.name = font
        run.font.size = Pt(size)
        run.font.bold = bold
        run.font.italic = italic
        run.font.color.rgb = hex_to_rgb(color)
        _set_alpha(run._r.get_or_add_rPr(), transparency)
    return box
