"""Link Placer

Assigns each hyperlink rectangle to the page holding its top edge and
re-expresses it in that page's own point space.

A link that straddles a page break is placed entirely on the page holding
its top edge. The part below the break is not repeated on the next page.
"""
import logging
import math
from collections import defaultdict
from typing import Dict, Iterable, List, Optional

from ..models import Link, PlacedLink
from .coordinate_utils import source_y_to_absolute_point_y, to_points

logger = logging.getLogger(__name__)


def place_link(
    link: Link,
    ratio: float,
    page_height_pt: float,
    page_count: int
) -> Optional[PlacedLink]:
    """
    Place one link on its page.

    Args:
        link: Link with a rectangle in logical source pixels
        ratio: Points per logical pixel for this run
        page_height_pt: Output page height in points
        page_count: Number of pages actually produced

    Returns:
        PlacedLink in page-local points, or None when the link's top edge
        lies past the last page. A top edge above the document is
        clamped to the top of the first page.

    Examples:
        >>> place_link(Link("https://x", Rect(50, 800, 100, 20)), 1.0, 792, 3)
        PlacedLink(page_index=1, href='https://x', x_pt=50.0, y_pt=8.0, width_pt=100.0, height_pt=20.0)
    """
    y_abs = source_y_to_absolute_point_y(link.rect.y, ratio)
    if y_abs < 0:
        # Negative margins can put a link above the document top
        logger.debug("Clamping link %s: top edge %.1fpt is above the document", link.href, y_abs)
        y_abs = 0.0
    page_index = math.floor(y_abs / page_height_pt)

    if page_index >= page_count:
        logger.debug(
            "Dropping link %s: top edge %.1fpt is past page %d", link.href, y_abs, page_count
        )
        return None

    y_on_page = y_abs - page_index * page_height_pt

    return PlacedLink(
        page_index=page_index,
        href=link.href,
        x_pt=to_points(link.rect.x, ratio),
        y_pt=y_on_page,
        width_pt=to_points(link.rect.width, ratio),
        height_pt=to_points(link.rect.height, ratio),
    )


def place_links(
    links: Iterable[Link],
    ratio: float,
    page_height_pt: float,
    page_count: int
) -> Dict[int, List[PlacedLink]]:
    """
    Place every link and group the results by page index.

    Input order is kept within each page. Dropped links are left out.
    """
    by_page = defaultdict(list)
    for link in links:
        placed = place_link(link, ratio, page_height_pt, page_count)
        if placed is not None:
            by_page[placed.page_index].append(placed)
    return dict(by_page)
