"""Data Model

Value types shared by the pagination core and its collaborators.

Coordinate spaces:
- Logical pixels: CSS-pixel units of the rendered document, origin top-left
- Device pixels: actual bitmap pixels, ``device = logical * pixel_scale``
- Points: 1/72 inch, used for PDF pages and link rectangles
"""
from dataclasses import dataclass, field
from typing import List

from PIL import Image

from .exceptions import InvalidConfigurationError, InvalidGeometryError


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in logical source pixels (origin top-left)."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise InvalidGeometryError(
                f"Rect size must be non-negative, got {self.width}x{self.height}"
            )


@dataclass(frozen=True)
class Link:
    """A hyperlink and its absolute rectangle in the source document."""

    href: str
    rect: Rect


@dataclass(frozen=True)
class Raster:
    """Full-document bitmap stored at device-pixel resolution.

    Attributes:
        image: Pillow image holding the rendered document
        pixel_scale: Device pixels per logical pixel (>= 1)
    """

    image: Image.Image
    pixel_scale: float = 1.0

    def __post_init__(self):
        if self.pixel_scale < 1:
            raise InvalidConfigurationError(
                f"pixel_scale must be >= 1, got {self.pixel_scale}"
            )
        if self.image.width <= 0 or self.image.height <= 0:
            raise InvalidConfigurationError(
                f"raster must not be empty, got {self.image.width}x{self.image.height}px"
            )

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def logical_width(self) -> float:
        return self.image.width / self.pixel_scale

    @property
    def logical_height(self) -> float:
        return self.image.height / self.pixel_scale


@dataclass(frozen=True)
class PageSpec:
    """Output page dimensions in points."""

    width_pt: float
    height_pt: float


@dataclass(frozen=True)
class PageBand:
    """Horizontal slice of the full raster that becomes one page.

    ``src_y`` and ``src_height`` are logical pixels; ``height_pt`` is the
    band's true drawn height on the page.
    """

    page_index: int
    src_y: float
    src_height: float
    height_pt: float


@dataclass(frozen=True)
class PlacedLink:
    """Link rectangle in a specific page's own point space (origin top-left)."""

    page_index: int
    href: str
    x_pt: float
    y_pt: float
    width_pt: float
    height_pt: float


@dataclass
class AssembledPage:
    """One page ready for the PDF writer."""

    page_index: int
    page_count: int
    page_raster: Image.Image
    band: PageBand
    placed_links: List[PlacedLink] = field(default_factory=list)
