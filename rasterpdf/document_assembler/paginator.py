"""Paginator

Splits the absolute height of a rendered document into page-sized bands.
"""
import math
from typing import Tuple

from ..exceptions import InvalidConfigurationError
from ..models import PageBand


def _validate(raster_height_pt: float, page_height_pt: float):
    if page_height_pt <= 0:
        raise InvalidConfigurationError(
            f"page height must be positive, got {page_height_pt}"
        )
    if raster_height_pt < 0:
        raise InvalidConfigurationError(
            f"raster height must be non-negative, got {raster_height_pt}"
        )


def paginate(raster_height_pt: float, page_height_pt: float) -> int:
    """
    Calculate how many pages the document needs.

    Args:
        raster_height_pt: Logical raster height converted to points
        page_height_pt: Output page height in points

    Returns:
        ceil(raster_height_pt / page_height_pt), never less than 1

    Raises:
        InvalidConfigurationError: If page height is not positive or raster
            height is negative

    Examples:
        >>> paginate(2000, 792)
        3
        >>> paginate(100, 792)
        1
    """
    _validate(raster_height_pt, page_height_pt)
    return max(1, math.ceil(raster_height_pt / page_height_pt))


def page_point_range(
    page_index: int,
    raster_height_pt: float,
    page_height_pt: float
) -> Tuple[float, float]:
    """
    Absolute point-Y range [start, end) covered by one page.

    The last page ends at the bottom of the document rather than at a
    full page height.
    """
    _validate(raster_height_pt, page_height_pt)
    start = page_index * page_height_pt
    end = min((page_index + 1) * page_height_pt, raster_height_pt)
    return start, end


def page_band(
    page_index: int,
    page_height_pt: float,
    ratio: float,
    raster_logical_height: float
) -> PageBand:
    """
    Compute the source band (logical pixels) that becomes one page.

    The final band may be shorter than a full page. Its ``height_pt`` is
    the true height, so the writer draws it from the page top unstretched.

    Examples:
        >>> page_band(2, 792, 1.0, 2000)
        PageBand(page_index=2, src_y=1584.0, src_height=416.0, height_pt=416.0)
    """
    if page_height_pt <= 0:
        raise InvalidConfigurationError(
            f"page height must be positive, got {page_height_pt}"
        )

    full_height = page_height_pt / ratio
    src_y = page_index * full_height
    src_height = max(0.0, min(full_height, raster_logical_height - src_y))

    return PageBand(
        page_index=page_index,
        src_y=src_y,
        src_height=src_height,
        height_pt=src_height * ratio,
    )
