"""Page Rasterizer

Cuts one page band out of the full-document raster.
"""
from PIL import Image

from ..models import Raster
from .coordinate_utils import logical_to_device_pixels


def device_band(raster: Raster, src_y: float, src_height: float):
    """
    Convert a logical band to clamped device-pixel (top, bottom) rows.

    Both edges are rounded from their logical positions, so the bottom of
    one band is exactly the top of the next. The band never reads outside
    [0, raster.height) and is at least one row tall.
    """
    top = int(round(logical_to_device_pixels(src_y, raster.pixel_scale)))
    bottom = int(round(logical_to_device_pixels(src_y + src_height, raster.pixel_scale)))

    top = min(max(top, 0), raster.height - 1)
    bottom = min(max(bottom, top + 1), raster.height)

    return top, bottom


def slice_band(raster: Raster, src_y: float, src_height: float) -> Image.Image:
    """
    Extract one page's pixel band as a standalone image.

    Args:
        raster: Full-document raster
        src_y: Band top in logical pixels
        src_height: Band height in logical pixels

    Returns:
        New Pillow image, full raster width, band height in device pixels
    """
    top, bottom = device_band(raster, src_y, src_height)
    return raster.image.crop((0, top, raster.width, bottom))
