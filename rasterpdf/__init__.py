"""rasterpdf

Convert a rendered document image into a multi-page PDF that keeps its
hyperlinks clickable at the right place on the right page.
"""

__version__ = "0.1.0"

from .cancellation import CancellationToken
from .conversion_options import ConversionOptions, get_page_spec
from .conversion_result import ConversionResult
from .document_assembler import assemble
from .models import AssembledPage, Link, PageBand, PageSpec, PlacedLink, Raster, Rect
from .pipeline import ConversionPipeline

__all__ = [
    'AssembledPage',
    'CancellationToken',
    'ConversionOptions',
    'ConversionPipeline',
    'ConversionResult',
    'Link',
    'PageBand',
    'PageSpec',
    'PlacedLink',
    'Raster',
    'Rect',
    'assemble',
    'get_page_spec',
]
