"""Conversion Options Dataclass

Configuration options for the raster-to-PDF conversion pipeline.
"""
from dataclasses import dataclass
from typing import Optional

from .config import (
    PAGE_SIZES,
    ORIENTATIONS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_ORIENTATION,
    DEFAULT_RASTER_SCALE,
    MIN_RASTER_SCALE,
    MAX_RASTER_SCALE,
    DEFAULT_FALLBACK_LINK_WIDTH,
    DEFAULT_FALLBACK_LINK_HEIGHT,
    DEFAULT_JPEG_QUALITY,
)
from .exceptions import InvalidConfigurationError, InvalidPageSizeError
from .models import PageSpec


def get_page_spec(page_size: str, orientation: str = DEFAULT_ORIENTATION) -> PageSpec:
    """
    Resolve a named page size and orientation to page dimensions in points.

    Args:
        page_size: Key of PAGE_SIZES ("a4", "letter", "legal"), case-insensitive
        orientation: "portrait" or "landscape"

    Returns:
        PageSpec with width/height swapped for landscape

    Raises:
        InvalidPageSizeError: If the page size is unknown
        InvalidConfigurationError: If the orientation is unknown

    Examples:
        >>> get_page_spec("a4", "landscape")
        PageSpec(width_pt=841.89, height_pt=595.28)
    """
    key = (page_size or "").lower()
    if key not in PAGE_SIZES:
        raise InvalidPageSizeError(page_size, PAGE_SIZES.keys())
    if orientation not in ORIENTATIONS:
        raise InvalidConfigurationError(
            f"orientation must be one of {', '.join(ORIENTATIONS)}, got '{orientation}'"
        )

    width, height = PAGE_SIZES[key]
    if orientation == "landscape":
        width, height = height, width

    return PageSpec(width_pt=width, height_pt=height)


@dataclass
class ConversionOptions:
    """Configuration options for the conversion pipeline.

    Attributes:
        image_path: Path to the rendered document image (ignored when the
            caller supplies its own rasterizer)
        links_path: Optional path to a JSON link snapshot

        # Page Options
        page_size: Named page size ("a4", "letter", "legal")
        orientation: "portrait" or "landscape"

        # Raster Options
        raster_scale: Device pixels per logical pixel the image was rendered at (1-4)

        # Link Options
        preserve_links: If True, add clickable link annotations
        fallback_link_width: Width used for links that could not be measured
        fallback_link_height: Height used for links that could not be measured

        # Output Options
        output_name: Desired output filename ('.pdf' appended if missing)
        output_dir: Directory for the output PDF (current directory if None)
        jpeg_quality: JPEG quality for embedded page images (1-100)
    """

    image_path: Optional[str] = None
    links_path: Optional[str] = None

    # Page Options
    page_size: str = DEFAULT_PAGE_SIZE
    orientation: str = DEFAULT_ORIENTATION

    # Raster Options
    raster_scale: int = DEFAULT_RASTER_SCALE

    # Link Options
    preserve_links: bool = True
    fallback_link_width: float = DEFAULT_FALLBACK_LINK_WIDTH
    fallback_link_height: float = DEFAULT_FALLBACK_LINK_HEIGHT

    # Output Options
    output_name: Optional[str] = None
    output_dir: Optional[str] = None
    jpeg_quality: int = DEFAULT_JPEG_QUALITY

    def __post_init__(self):
        """Validate configuration options after initialization."""
        self.page_size = (self.page_size or "").lower()
        # Raises on unknown page size or orientation
        get_page_spec(self.page_size, self.orientation)

        if not (MIN_RASTER_SCALE <= self.raster_scale <= MAX_RASTER_SCALE):
            raise InvalidConfigurationError(
                f"raster_scale must be between {MIN_RASTER_SCALE}-{MAX_RASTER_SCALE}, got {self.raster_scale}"
            )

        if self.fallback_link_width <= 0 or self.fallback_link_height <= 0:
            raise InvalidConfigurationError(
                "fallback link size must be positive, got "
                f"{self.fallback_link_width}x{self.fallback_link_height}"
            )

        if not (1 <= self.jpeg_quality <= 100):
            raise InvalidConfigurationError(
                f"jpeg_quality must be between 1-100, got {self.jpeg_quality}"
            )

    def page_spec(self) -> PageSpec:
        """Page dimensions for the configured size and orientation."""
        return get_page_spec(self.page_size, self.orientation)
