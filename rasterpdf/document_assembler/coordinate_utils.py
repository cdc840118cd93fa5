"""Coordinate Conversion Utilities

This module provides pure utility functions for converting between the
coordinate systems used when paginating a rendered document:

- Source coordinates: logical pixels with origin at top-left
- Raster coordinates: device pixels (logical pixels times the pixel scale)
- Page coordinates: points with origin at the top-left of each page
- ReportLab coordinates: points with origin at bottom-left

All functions are pure (no side effects) and can be tested in isolation.
"""

from typing import Tuple

from ..exceptions import InvalidConfigurationError
from ..models import PageSpec, Raster


def compute_ratio(raster: Raster, page_spec: PageSpec) -> float:
    """
    Calculate the points-per-logical-pixel ratio for a conversion run.

    The document is rendered at a fixed logical width that maps onto the
    full page width, so one ratio serves every page and every link.

    Args:
        raster: Full-document raster
        page_spec: Output page dimensions

    Returns:
        Points per logical source pixel

    Raises:
        InvalidConfigurationError: If the raster or page width is not positive

    Examples:
        >>> compute_ratio(Raster(Image.new("RGB", (1224, 100)), 2), PageSpec(612, 792))
        1.0
    """
    if raster.width <= 0:
        raise InvalidConfigurationError(f"Raster width must be positive, got {raster.width}")
    if page_spec.width_pt <= 0:
        raise InvalidConfigurationError(f"Page width must be positive, got {page_spec.width_pt}")

    return page_spec.width_pt / (raster.width / raster.pixel_scale)


def to_points(source_pixel_value: float, ratio: float) -> float:
    """
    Convert a logical source-pixel measurement to points.

    Examples:
        >>> to_points(100, 0.5)
        50.0
    """
    return source_pixel_value * ratio


def source_y_to_absolute_point_y(y: float, ratio: float) -> float:
    """
    Map a source Y coordinate to the absolute document Y in points.

    The result ignores pagination: it is the offset from the top of the
    first page as if all pages were stacked without gaps.
    """
    return y * ratio


def logical_to_device_pixels(value: float, pixel_scale: float) -> float:
    """
    Convert logical pixels to device pixels of the stored bitmap.

    Examples:
        >>> logical_to_device_pixels(396, 2)
        792
    """
    return value * pixel_scale


def flip_y_coordinate(y: float, page_height: float) -> float:
    """
    Flip Y coordinate between top-left and bottom-left origin systems.

    Examples:
        >>> flip_y_coordinate(0, 792)
        792

    Notes:
        This function is its own inverse:
        flip_y_coordinate(flip_y_coordinate(y, h), h) == y
    """
    return page_height - y


def top_left_rect_to_pdf(
    x: float,
    y: float,
    width: float,
    height: float,
    page_height: float
) -> Tuple[float, float, float, float]:
    """
    Convert a top-left-origin rectangle to ReportLab's (x1, y1, x2, y2).

    ReportLab measures from the bottom-left corner, so the rectangle's
    bottom edge in page space becomes its lower Y.

    Examples:
        >>> top_left_rect_to_pdf(50, 8, 100, 20, 792)
        (50, 764, 150, 784)
    """
    x1 = x
    x2 = x + width
    y1 = flip_y_coordinate(y + height, page_height)
    y2 = flip_y_coordinate(y, page_height)
    return x1, y1, x2, y2
