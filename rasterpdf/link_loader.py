"""Link Snapshot Loader

Builds Link values from a flat snapshot of absolute link rectangles, as
produced by a DOM/markup scanner. The scanner resolves each element's
absolute offset; this module only consumes the resulting numbers.

Accepted JSON shapes:
    [{"href": "...", "x": 0, "y": 0, "width": 10, "height": 12}, ...]
    {"links": [ ...same entries... ]}
"""
import json
import logging
import os
from typing import Any, Dict, Iterable, List

from .config import DEFAULT_FALLBACK_LINK_WIDTH, DEFAULT_FALLBACK_LINK_HEIGHT
from .exceptions import LinkSnapshotError
from .models import Link, Rect

logger = logging.getLogger(__name__)


def _as_number(value: Any, default: float = 0.0) -> float:
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def is_external_href(href: str) -> bool:
    """True for hrefs worth annotating (non-empty and not an in-page anchor)."""
    return bool(href) and not href.startswith("#")


def link_from_entry(
    entry: Dict[str, Any],
    fallback_width: float = DEFAULT_FALLBACK_LINK_WIDTH,
    fallback_height: float = DEFAULT_FALLBACK_LINK_HEIGHT
) -> Link:
    """
    Build a Link from one snapshot entry.

    Missing offsets count as 0. A width or height that is missing, zero or
    negative means the element could not be measured, and the fallback
    size is used instead so the link still has a clickable area.
    """
    width = _as_number(entry.get("width"))
    height = _as_number(entry.get("height"))

    return Link(
        href=str(entry.get("href", "")),
        rect=Rect(
            x=_as_number(entry.get("x")),
            y=_as_number(entry.get("y")),
            width=width if width > 0 else fallback_width,
            height=height if height > 0 else fallback_height,
        ),
    )


def links_from_entries(
    entries: Iterable[Dict[str, Any]],
    fallback_width: float = DEFAULT_FALLBACK_LINK_WIDTH,
    fallback_height: float = DEFAULT_FALLBACK_LINK_HEIGHT,
    source: str = "<entries>"
) -> List[Link]:
    """
    Build Link values from snapshot entries, skipping ones not worth annotating.

    Entries without an href and in-page anchors ("#...") are skipped.
    """
    links = []
    skipped = 0

    for entry in entries:
        if not isinstance(entry, dict):
            raise LinkSnapshotError(source, f"expected an object, got {type(entry).__name__}")

        href = entry.get("href") or ""
        if not is_external_href(href):
            skipped += 1
            continue

        links.append(link_from_entry(entry, fallback_width, fallback_height))

    if skipped:
        logger.info("Skipped %d anchor(s) without an external href", skipped)

    return links


def load_links(
    links_path: str,
    fallback_width: float = DEFAULT_FALLBACK_LINK_WIDTH,
    fallback_height: float = DEFAULT_FALLBACK_LINK_HEIGHT
) -> List[Link]:
    """
    Load a link snapshot JSON file.

    Args:
        links_path: Path to the JSON snapshot
        fallback_width: Width for unmeasured links (logical pixels)
        fallback_height: Height for unmeasured links (logical pixels)

    Returns:
        List of Link values in file order

    Raises:
        LinkSnapshotError: If the file is missing, not JSON, or the wrong shape
    """
    if not links_path or not os.path.exists(links_path):
        raise LinkSnapshotError(str(links_path), "file does not exist")

    try:
        with open(links_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise LinkSnapshotError(links_path, f"invalid JSON: {e}")

    if isinstance(data, dict):
        data = data.get("links")

    if not isinstance(data, list):
        raise LinkSnapshotError(links_path, "expected a list of links or an object with a 'links' list")

    links = links_from_entries(data, fallback_width, fallback_height, source=links_path)

    logger.info("Mapped %d link position(s) from %s", len(links), links_path)
    return links
