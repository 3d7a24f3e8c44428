"""Layout geometry package - grid-unit regions and their variants."""

from .geometry import (
    Rect,
    cell_size,
    find_region,
    region_rect,
    regions_by_role,
    role_rects,
)
from .variants import LayoutVariant, current_variant, generate_layout_variants

__all__ = [
    # Geometry
    "Rect",
    "cell_size",
    "find_region",
    "region_rect",
    "regions_by_role",
    "role_rects",
    # Variants
    "LayoutVariant",
    "current_variant",
    "generate_layout_variants",
]
