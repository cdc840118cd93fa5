"""Tests for link placement and link snapshot loading."""
import json
import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from rasterpdf.document_assembler.link_placer import place_link, place_links
from rasterpdf.exceptions import InvalidGeometryError, LinkSnapshotError
from rasterpdf.link_loader import is_external_href, link_from_entry, links_from_entries, load_links
from rasterpdf.models import Link, PlacedLink, Rect


def make_link(y, href="https://example.com", x=50, width=100, height=20):
    return Link(href=href, rect=Rect(x=x, y=y, width=width, height=height))


class TestPlaceLink:

    def test_link_on_second_page(self):
        placed = place_link(make_link(800), ratio=1.0, page_height_pt=792, page_count=3)
        assert placed == PlacedLink(
            page_index=1, href="https://example.com",
            x_pt=50, y_pt=8, width_pt=100, height_pt=20,
        )

    def test_link_past_last_page_is_dropped(self):
        assert place_link(make_link(900), ratio=1.0, page_height_pt=792, page_count=1) is None

    def test_link_at_exact_page_boundary_starts_next_page(self):
        placed = place_link(make_link(792), ratio=1.0, page_height_pt=792, page_count=2)
        assert placed.page_index == 1
        assert placed.y_pt == 0

    def test_boundary_of_last_page_is_dropped(self):
        assert place_link(make_link(1584), ratio=1.0, page_height_pt=792, page_count=2) is None

    def test_ratio_scales_every_dimension(self):
        placed = place_link(make_link(1000, x=40, width=80, height=10), ratio=0.5,
                            page_height_pt=400, page_count=5)
        assert placed.page_index == 1
        assert placed.x_pt == pytest.approx(20)
        assert placed.y_pt == pytest.approx(100)
        assert placed.width_pt == pytest.approx(40)
        assert placed.height_pt == pytest.approx(5)

    def test_straddling_link_stays_on_page_of_its_top_edge(self):
        placed = place_link(make_link(780, height=30), ratio=1.0, page_height_pt=792, page_count=2)
        assert placed.page_index == 0
        assert placed.y_pt == 780
        assert placed.height_pt == 30

    def test_placement_is_deterministic(self):
        link = make_link(1234.5)
        assert place_link(link, 0.75, 841.89, 4) == place_link(link, 0.75, 841.89, 4)

    def test_link_above_document_top_is_clamped_to_first_page(self):
        placed = place_link(Link("https://x", Rect(0, -5, 10, 10)), 1.0, 792, 3)
        assert placed.page_index == 0
        assert placed.y_pt == 0
        assert placed.height_pt == 10

    def test_link_above_document_top_is_not_lost(self):
        links = [make_link(-40, href="above"), make_link(10, href="inside")]
        by_page = place_links(links, 1.0, 792, 1)
        assert list(by_page) == [0]
        assert [p.href for p in by_page[0]] == ["above", "inside"]

    def test_href_is_passed_through(self):
        placed = place_link(make_link(10, href="not a url"), 1.0, 792, 1)
        assert placed.href == "not a url"

    def test_every_link_inside_document_is_placed_once(self):
        links = [make_link(y) for y in range(0, 2376, 37)]
        by_page = place_links(links, ratio=1.0, page_height_pt=792, page_count=3)

        assert sum(len(page) for page in by_page.values()) == len(links)
        for page_index, page_links in by_page.items():
            for placed in page_links:
                assert placed.page_index == page_index
                assert 0 <= placed.y_pt < 792

    def test_place_links_keeps_input_order(self):
        links = [make_link(10, href="a"), make_link(900, href="b"), make_link(20, href="c")]
        by_page = place_links(links, 1.0, 792, 2)
        assert [p.href for p in by_page[0]] == ["a", "c"]
        assert [p.href for p in by_page[1]] == ["b"]


class TestRect:

    def test_negative_size_rejected(self):
        with pytest.raises(InvalidGeometryError):
            Rect(0, 0, -1, 10)


class TestLinkLoader:

    def test_external_href(self):
        assert is_external_href("https://example.com")
        assert is_external_href("mailto:a@b.c")
        assert not is_external_href("#section")
        assert not is_external_href("")

    def test_unmeasured_link_gets_fallback_size(self):
        link = link_from_entry({"href": "https://a", "x": 5, "y": 6, "width": 0})
        assert link.rect == Rect(5, 6, 10, 12)

    def test_fallback_size_is_configurable(self):
        link = link_from_entry({"href": "https://a", "x": 5, "y": 6}, fallback_width=4, fallback_height=3)
        assert link.rect.width == 4
        assert link.rect.height == 3

    def test_anchors_and_empty_hrefs_are_skipped(self):
        links = links_from_entries([
            {"href": "#top", "x": 0, "y": 0, "width": 5, "height": 5},
            {"href": "", "x": 0, "y": 0},
            {"x": 0, "y": 0},
            {"href": "https://kept", "x": 1, "y": 2, "width": 3, "height": 4},
        ])
        assert links == [Link("https://kept", Rect(1, 2, 3, 4))]

    def test_load_list_file(self, tmp_path):
        path = tmp_path / "links.json"
        path.write_text(json.dumps([
            {"href": "https://a", "x": 1, "y": 2, "width": 3, "height": 4},
        ]), encoding="utf-8")

        assert load_links(str(path)) == [Link("https://a", Rect(1, 2, 3, 4))]

    def test_load_object_file(self, tmp_path):
        path = tmp_path / "links.json"
        path.write_text(json.dumps({"links": [{"href": "https://a", "y": 40}]}), encoding="utf-8")

        links = load_links(str(path))
        assert links[0].rect == Rect(0, 40, 10, 12)

    def test_missing_file(self, tmp_path):
        with pytest.raises(LinkSnapshotError):
            load_links(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "links.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(LinkSnapshotError):
            load_links(str(path))

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "links.json"
        path.write_text(json.dumps({"anchors": []}), encoding="utf-8")
        with pytest.raises(LinkSnapshotError):
            load_links(str(path))
