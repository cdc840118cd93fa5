"""PDF Writer

Writes assembled pages to a PDF with ReportLab: one page image per page,
drawn from the page top at full page width, plus a URI link annotation for
every placed link.

The document is built in memory and only written to disk once the last
page is done, so a cancelled or failed run leaves no partial file behind.
"""
import io
import logging
import os
from dataclasses import dataclass
from typing import Iterable

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas as pdfcanvas

from .config import DEFAULT_JPEG_QUALITY, DEFAULT_BACKGROUND_COLOR
from .document_assembler import coordinate_utils
from .exceptions import ImageRenderingError, PdfWriteError
from .models import AssembledPage, PageSpec, PlacedLink

logger = logging.getLogger(__name__)


@dataclass
class PdfWriteStats:
    """Counts collected while writing a PDF."""

    page_count: int = 0
    links_placed: int = 0


class PdfWriter:
    """Build a PDF from a sequence of assembled pages.

    Attributes:
        output_path: Where to save the final PDF
        page_spec: Page dimensions in points
        jpeg_quality: JPEG quality used for embedded page images
    """

    def __init__(self, output_path: str, page_spec: PageSpec, jpeg_quality: int = DEFAULT_JPEG_QUALITY):
        self.output_path = output_path
        self.page_spec = page_spec
        self.jpeg_quality = jpeg_quality

    def write(self, pages: Iterable[AssembledPage]) -> PdfWriteStats:
        """
        Draw every page and save the PDF.

        Args:
            pages: Assembled pages in page order

        Returns:
            PdfWriteStats for the written document

        Raises:
            ImageRenderingError: If a page image cannot be encoded
            PdfWriteError: If the file cannot be written
            ConversionCancelledError: Propagated from the page sequence;
                nothing is written in that case
        """
        buffer = io.BytesIO()
        pdf = pdfcanvas.Canvas(
            buffer,
            pagesize=(self.page_spec.width_pt, self.page_spec.height_pt),
        )
        stats = PdfWriteStats()

        for page in pages:
            self._draw_page_image(pdf, page)
            for link in page.placed_links:
                self._add_link(pdf, link)
            stats.links_placed += len(page.placed_links)
            stats.page_count += 1
            pdf.showPage()

        pdf.save()
        self._flush(buffer.getvalue())

        logger.info(
            "Wrote %d page(s) with %d link annotation(s) to %s",
            stats.page_count, stats.links_placed, self.output_path,
        )
        return stats

    def _draw_page_image(self, pdf: pdfcanvas.Canvas, page: AssembledPage):
        """Embed the page raster at the page top, unstretched vertically."""
        try:
            image_reader = ImageReader(encode_jpeg(page.page_raster, self.jpeg_quality))
        except OSError as e:
            raise ImageRenderingError(page.page_index, str(e))

        height = page.band.height_pt
        pdf.drawImage(
            image_reader,
            0,
            coordinate_utils.flip_y_coordinate(height, self.page_spec.height_pt),
            width=self.page_spec.width_pt,
            height=height,
        )

    def _add_link(self, pdf: pdfcanvas.Canvas, link: PlacedLink):
        rect = coordinate_utils.top_left_rect_to_pdf(
            link.x_pt, link.y_pt, link.width_pt, link.height_pt, self.page_spec.height_pt
        )
        pdf.linkURL(link.href, rect, relative=0, thickness=0)

    def _flush(self, data: bytes):
        try:
            output_dir = os.path.dirname(self.output_path)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)
            with open(self.output_path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise PdfWriteError(self.output_path, str(e))


def encode_jpeg(image: Image.Image, quality: int = DEFAULT_JPEG_QUALITY) -> io.BytesIO:
    """
    Encode a page image as JPEG.

    Transparent areas are flattened onto a white background, since JPEG
    has no alpha channel.
    """
    if image.mode in ("RGBA", "LA", "P"):
        rgba = image.convert("RGBA")
        flattened = Image.new("RGB", rgba.size, DEFAULT_BACKGROUND_COLOR)
        flattened.paste(rgba, mask=rgba.getchannel("A"))
        image = flattened
    elif image.mode != "RGB":
        image = image.convert("RGB")

    buf = io.BytesIO()
    image.save(buf, format="JPEG", quality=quality)
    buf.seek(0)
    return buf


def write_pdf(
    output_path: str,
    pages: Iterable[AssembledPage],
    page_spec: PageSpec,
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
) -> PdfWriteStats:
    """
    Helper function to write assembled pages to a PDF file.

    Args:
        output_path: Where to save the PDF
        pages: Assembled pages in page order
        page_spec: Page dimensions in points
        jpeg_quality: JPEG quality for page images

    Returns:
        PdfWriteStats for the written document
    """
    writer = PdfWriter(output_path, page_spec, jpeg_quality=jpeg_quality)
    return writer.write(pages)
