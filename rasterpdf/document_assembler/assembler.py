"""Document Assembler

Orchestrates pagination by coordinating the focused components:
- coordinate_utils: single points-per-pixel ratio for the run
- paginator: page count and per-page source bands
- page_rasterizer: band extraction from the full raster
- link_placer: per-page link rectangles

The output is a lazy, single-use sequence of AssembledPage values, one per
page in increasing page order, ready for the PDF writer.
"""
import logging
from typing import Callable, Dict, Iterator, List, Optional, Sequence

from ..cancellation import CancellationToken
from ..exceptions import ConversionCancelledError, InvalidConfigurationError
from ..models import AssembledPage, Link, PageSpec, PlacedLink, Raster
from . import coordinate_utils
from .link_placer import place_links
from .page_rasterizer import slice_band
from .paginator import page_band, paginate

logger = logging.getLogger(__name__)


def assemble(
    raster: Raster,
    links: Sequence[Link],
    page_spec: PageSpec,
    preserve_links: bool = True,
    cancel_token: Optional[CancellationToken] = None,
    on_page: Optional[Callable[[int, int], None]] = None,
) -> Iterator[AssembledPage]:
    """
    Split a full-document raster into pages with their placed links.

    Validation, the ratio and the page count are computed immediately, so
    any configuration error is raised here rather than while iterating.
    Pages are then produced lazily.

    Args:
        raster: Full-document raster (not modified)
        links: Link rectangles in logical source pixels (not modified)
        page_spec: Output page dimensions in points
        preserve_links: If False, every page gets an empty link list
        cancel_token: Optional token checked before each page
        on_page: Optional callback(page_index, page_count) fired as each page is produced

    Returns:
        Iterator of AssembledPage in page order

    Raises:
        InvalidConfigurationError: If the page height or raster size is invalid
        ConversionCancelledError: While iterating, if the token is cancelled
    """
    if page_spec.height_pt <= 0:
        raise InvalidConfigurationError(
            f"page height must be positive, got {page_spec.height_pt}"
        )

    ratio = coordinate_utils.compute_ratio(raster, page_spec)
    total_height_pt = coordinate_utils.to_points(raster.logical_height, ratio)
    page_count = paginate(total_height_pt, page_spec.height_pt)

    links_by_page = {}
    if preserve_links:
        links_by_page = place_links(links, ratio, page_spec.height_pt, page_count)
        placed = sum(len(page_links) for page_links in links_by_page.values())
        if placed < len(links):
            logger.info("Dropped %d link(s) past the last page", len(links) - placed)

    logger.info(
        "Paginating %dx%dpx raster into %d page(s) of %.0fx%.0fpt (ratio %.4f pt/px)",
        raster.width, raster.height, page_count,
        page_spec.width_pt, page_spec.height_pt, ratio,
    )

    return _iter_pages(
        raster, ratio, page_spec, page_count, links_by_page, cancel_token, on_page
    )


def _iter_pages(
    raster: Raster,
    ratio: float,
    page_spec: PageSpec,
    page_count: int,
    links_by_page: Dict[int, List[PlacedLink]],
    cancel_token: Optional[CancellationToken],
    on_page: Optional[Callable[[int, int], None]],
) -> Iterator[AssembledPage]:
    for page_index in range(page_count):
        if cancel_token is not None and cancel_token.cancelled:
            raise ConversionCancelledError(page_index, page_count)

        band = page_band(page_index, page_spec.height_pt, ratio, raster.logical_height)
        page_links = links_by_page.get(page_index, [])

        page = AssembledPage(
            page_index=page_index,
            page_count=page_count,
            page_raster=slice_band(raster, band.src_y, band.src_height),
            band=band,
            placed_links=list(page_links),
        )

        if on_page is not None:
            on_page(page_index, page_count)

        yield page
