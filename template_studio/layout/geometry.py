"""Grid geometry - region boxes at any target resolution.

A region's absolute rectangle is ``bounds x (target_size / grid_count)``.
The same layout therefore drives a 320x180px preview and a 10x5.625in
slide.  Grids with zero columns or rows are a caller error; out-of-range
bounds are scaled as given and never rejected.
"""

from dataclasses import dataclass

from ..schema.models import Layout, Region, RegionRole


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def center_x(self) -> float:
        return self.x + self.w / 2

    @property
    def center_y(self) -> float:
        return self.y + self.h / 2

    def inset(self, dx: float, dy: float | None = None) -> "Rect":
        """Shrink by *dx* horizontally and *dy* (default *dx*) vertically on each side."""
        if dy is None:
            dy = dx
        return Rect(self.x + dx, self.y + dy, self.w - 2 * dx, self.h - 2 * dy)


def cell_size(layout: Layout, width: float, height: float) -> tuple[float, float]:
    return width / layout.grid.columns, height / layout.grid.rows


def region_rect(region: Region, layout: Layout, width: float, height: float) -> Rect:
    """Scale a region's grid-unit bounds to a *width* x *height* target."""
    cw, ch = cell_size(layout, width, height)
    b = region.bounds
    return Rect(b.x * cw, b.y * ch, b.w * cw, b.h * ch)


def find_region(layout: Layout, key: str) -> Region | None:
    """First region whose id or role equals *key*."""
    for region in layout.regions:
        if region.id == key or region.role.value == key:
            return region
    return None


def regions_by_role(layout: Layout, role: RegionRole | str) -> list[Region]:
    role = RegionRole(role)
    return [r for r in layout.regions if r.role == role]


def role_rects(layout: Layout, role: RegionRole | str,
               width: float, height: float) -> list[tuple[Region, Rect]]:
    """Every region of *role* paired with its scaled rectangle, in layout order."""
    return [(r, region_rect(r, layout, width, height))
            for r in regions_by_role(layout, role)]
