"""Document Assembler Package

This package turns one tall document raster and its link rectangles into
a sequence of pages ready for PDF writing:

Core Function:
- assemble: Lazy page-by-page orchestrator (from assembler.py)

Components:
- paginate / page_band / page_point_range: Page count and source bands
- slice_band: Band extraction from the full raster
- place_link / place_links: Link placement in page-local points

Utilities:
- coordinate_utils: Coordinate conversion functions
"""

from .assembler import assemble
from .paginator import paginate, page_band, page_point_range
from .page_rasterizer import slice_band
from .link_placer import place_link, place_links
from . import coordinate_utils

# Expose public API
__all__ = [
    # Orchestrator
    'assemble',

    # Components
    'paginate',
    'page_band',
    'page_point_range',
    'slice_band',
    'place_link',
    'place_links',

    # Utilities module
    'coordinate_utils',
]
