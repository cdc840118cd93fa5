"""Tests for page geometry: coordinate conversion, pagination and band slicing."""
import math
import os
import sys

import pytest
from PIL import Image

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from rasterpdf.conversion_options import ConversionOptions, get_page_spec
from rasterpdf.document_assembler import coordinate_utils
from rasterpdf.document_assembler.page_rasterizer import device_band, slice_band
from rasterpdf.document_assembler.paginator import page_band, page_point_range, paginate
from rasterpdf.exceptions import InvalidConfigurationError, InvalidPageSizeError
from rasterpdf.models import PageSpec, Raster


class TestCoordinateUtils:

    def test_ratio_is_points_per_logical_pixel(self):
        raster = Raster(Image.new("RGB", (1224, 100)), pixel_scale=2)
        assert coordinate_utils.compute_ratio(raster, PageSpec(612, 792)) == pytest.approx(1.0)

    def test_ratio_a4_at_scale_one(self):
        raster = Raster(Image.new("RGB", (800, 100)), pixel_scale=1)
        ratio = coordinate_utils.compute_ratio(raster, get_page_spec("a4"))
        assert ratio == pytest.approx(595.28 / 800)

    def test_to_points(self):
        assert coordinate_utils.to_points(100, 0.5) == 50
        assert coordinate_utils.source_y_to_absolute_point_y(800, 1.0) == 800

    def test_logical_to_device_pixels(self):
        assert coordinate_utils.logical_to_device_pixels(396, 2) == 792

    def test_flip_is_its_own_inverse(self):
        assert coordinate_utils.flip_y_coordinate(coordinate_utils.flip_y_coordinate(120, 792), 792) == 120

    def test_top_left_rect_to_pdf(self):
        assert coordinate_utils.top_left_rect_to_pdf(50, 8, 100, 20, 792) == (50, 764, 150, 784)


class TestPageSpec:

    def test_letter_portrait(self):
        assert get_page_spec("letter", "portrait") == PageSpec(612, 792)

    def test_a4_landscape_swaps_dimensions(self):
        assert get_page_spec("a4", "landscape") == PageSpec(width_pt=841.89, height_pt=595.28)

    def test_page_size_is_case_insensitive(self):
        assert get_page_spec("LEGAL") == PageSpec(612, 1008)

    def test_unknown_page_size(self):
        with pytest.raises(InvalidPageSizeError):
            get_page_spec("tabloid")

    def test_unknown_orientation(self):
        with pytest.raises(InvalidConfigurationError):
            get_page_spec("a4", "sideways")

    def test_options_validate_scale(self):
        with pytest.raises(InvalidConfigurationError):
            ConversionOptions(raster_scale=0)
        with pytest.raises(InvalidConfigurationError):
            ConversionOptions(raster_scale=5)

    def test_options_validate_page_size(self):
        with pytest.raises(InvalidConfigurationError):
            ConversionOptions(page_size="b5")

    def test_options_page_spec(self):
        options = ConversionOptions(page_size="Letter", orientation="landscape")
        assert options.page_spec() == PageSpec(792, 612)


class TestPaginate:

    def test_letter_document_needs_three_pages(self):
        assert paginate(2000, 792) == 3

    def test_short_document_still_gets_one_page(self):
        assert paginate(100, 792) == 1
        assert paginate(0, 792) == 1

    def test_exact_multiple(self):
        assert paginate(1584, 792) == 2

    @pytest.mark.parametrize("height", [1, 791.5, 792, 792.01, 5000, 123456.7])
    def test_page_count_is_ceiling(self, height):
        assert paginate(height, 792) == max(1, math.ceil(height / 792))

    @pytest.mark.parametrize("page_height", [0, -10])
    def test_non_positive_page_height_fails(self, page_height):
        with pytest.raises(InvalidConfigurationError):
            paginate(1000, page_height)

    def test_negative_raster_height_fails(self):
        with pytest.raises(InvalidConfigurationError):
            paginate(-1, 792)

    def test_point_ranges_cover_document(self):
        total = 2000
        count = paginate(total, 792)
        ranges = [page_point_range(p, total, 792) for p in range(count)]

        assert ranges == [(0, 792), (792, 1584), (1584, 2000)]
        for (_, end), (start, _) in zip(ranges, ranges[1:]):
            assert end == start


class TestPageBand:

    def test_full_band(self):
        band = page_band(1, 792, 1.0, 2000)
        assert band.src_y == pytest.approx(792)
        assert band.src_height == pytest.approx(792)
        assert band.height_pt == pytest.approx(792)

    def test_last_band_is_short_not_padded(self):
        band = page_band(2, 792, 1.0, 2000)
        assert band.src_y == pytest.approx(1584)
        assert band.src_height == pytest.approx(416)
        assert band.height_pt == pytest.approx(416)

    def test_bands_use_ratio(self):
        band = page_band(1, 792, 0.5, 4000)
        assert band.src_y == pytest.approx(1584)
        assert band.src_height == pytest.approx(1584)
        assert band.height_pt == pytest.approx(792)

    def test_bands_cover_raster_without_overlap(self):
        ratio = 595.28 / 800
        logical_height = 5321
        count = paginate(logical_height * ratio, 841.89)
        bands = [page_band(p, 841.89, ratio, logical_height) for p in range(count)]

        assert bands[0].src_y == 0
        for band, following in zip(bands, bands[1:]):
            assert band.src_y + band.src_height == pytest.approx(following.src_y)
        assert bands[-1].src_y + bands[-1].src_height == pytest.approx(logical_height)


class TestSliceBand:

    def test_band_offsets_are_device_pixels(self):
        raster = Raster(Image.new("RGB", (1224, 4000)), pixel_scale=2)
        assert device_band(raster, 792, 792) == (1584, 3168)

    def test_band_is_clamped_to_raster(self):
        raster = Raster(Image.new("RGB", (1224, 4000)), pixel_scale=2)
        assert device_band(raster, 1584, 792) == (3168, 4000)

    def test_slice_size(self):
        raster = Raster(Image.new("RGB", (1224, 4000)), pixel_scale=2)
        page = slice_band(raster, 1584, 416)
        assert page.size == (1224, 832)

    @pytest.mark.parametrize("page_height, scale", [(100.4, 1), (100.3, 2), (97.31, 3)])
    def test_device_bands_tile_raster_without_gaps(self, page_height, scale):
        logical_height = 1000
        raster = Raster(Image.new("RGB", (10, logical_height * scale)), pixel_scale=scale)
        count = paginate(logical_height, page_height)
        rows = [
            device_band(raster, band.src_y, band.src_height)
            for band in (page_band(p, page_height, 1.0, logical_height) for p in range(count))
        ]

        assert rows[0][0] == 0
        assert rows[-1][1] == raster.height
        for (_, bottom), (top, _) in zip(rows, rows[1:]):
            assert bottom == top

    def test_empty_raster_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            Raster(Image.new("RGB", (10, 0)), pixel_scale=1)

    def test_slice_copies_the_right_rows(self):
        image = Image.new("RGB", (10, 20), "white")
        image.paste((255, 0, 0), (0, 10, 10, 20))
        raster = Raster(image, pixel_scale=1)

        top = slice_band(raster, 0, 10)
        bottom = slice_band(raster, 10, 10)

        assert top.getpixel((5, 5)) == (255, 255, 255)
        assert bottom.getpixel((5, 5)) == (255, 0, 0)
