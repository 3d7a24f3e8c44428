"""Template Studio - brand template compiler with SVG previews and PPTX export."""

__version__ = "0.1.0"
