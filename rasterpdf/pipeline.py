"""Conversion Pipeline

Main orchestration logic for the raster-to-PDF workflow.
"""
import logging
import os
from typing import Callable, List, Optional, Sequence

from PIL import Image, UnidentifiedImageError

from .cancellation import CancellationToken
from .config import PROGRESS_STEPS, MAX_FILE_SIZE_MB
from .conversion_options import ConversionOptions
from .conversion_result import ConversionResult
from .document_assembler import assemble
from .exceptions import ConversionCancelledError, PipelineStepError
from .link_loader import load_links
from .models import Link, Raster
from .pdf_writer import write_pdf
from .utils import validate_image_path, check_file_size_limit, resolve_output_name

logger = logging.getLogger(__name__)


class ConversionPipeline:
    """Raster-to-PDF conversion pipeline orchestrator.

    This class orchestrates the complete conversion workflow:
    1. Raster - obtain the full-document raster (caller's rasterizer or an image file)
    2. Links - take the caller's link rectangles or load a JSON snapshot
    3. Assembly - paginate, slice bands and place links
    4. PDF Generation - write pages and link annotations

    The caller's rasterizer is the only step with unpredictable latency.
    Its exceptions reach the caller unchanged and are never retried.

    Attributes:
        progress_callback: Optional callback for progress updates (progress, desc)
    """

    def __init__(self, progress_callback: Optional[Callable[[float, str], None]] = None):
        """Initialize pipeline with an optional progress callback.

        Args:
            progress_callback: Optional function(progress: float, desc: str) for progress updates
        """
        self.progress = progress_callback or (lambda p, d: None)

    def convert(
        self,
        options: ConversionOptions,
        rasterize: Optional[Callable[[], Raster]] = None,
        links: Optional[Sequence[Link]] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> ConversionResult:
        """Run the conversion and raise on failure.

        Args:
            options: Conversion configuration options
            rasterize: Optional callable returning the full-document raster;
                when omitted the raster is loaded from options.image_path
            links: Optional link rectangles; when omitted and links are
                preserved, they are loaded from options.links_path if set
            cancel_token: Optional token checked between pages

        Returns:
            Completed ConversionResult

        Raises:
            RasterPdfError: For validation, rendering or cancellation failures
            Exception: Anything raised by ``rasterize``, unchanged
        """
        self.progress(PROGRESS_STEPS["VALIDATE"], "Validating options...")
        page_spec = options.page_spec()

        self.progress(PROGRESS_STEPS["RASTERIZE"], "Rendering document raster...")
        raster = rasterize() if rasterize is not None else self._load_raster(options)
        logger.info(
            "Raster ready: %dx%dpx at %sx scale", raster.width, raster.height, raster.pixel_scale
        )

        self.progress(PROGRESS_STEPS["SCAN_LINKS"], "Scanning links...")
        link_list = self._collect_links(options, links)

        self.progress(PROGRESS_STEPS["BUILD_START"], "Building PDF...")
        pages = assemble(
            raster,
            link_list,
            page_spec,
            preserve_links=options.preserve_links,
            cancel_token=cancel_token,
            on_page=self._report_page,
        )

        output_path = self._output_path(options)
        stats = write_pdf(output_path, pages, page_spec, jpeg_quality=options.jpeg_quality)

        self.progress(PROGRESS_STEPS["COMPLETE"], "Done!")

        links_found = len(link_list) if options.preserve_links else 0
        return ConversionResult(
            status="completed",
            status_message=f"✅ Saved {stats.page_count} page(s) as {os.path.basename(output_path)}",
            output_pdf_path=output_path,
            page_count=stats.page_count,
            links_found=links_found,
            links_placed=stats.links_placed,
            links_dropped=links_found - stats.links_placed,
        )

    def process(
        self,
        options: ConversionOptions,
        rasterize: Optional[Callable[[], Raster]] = None,
        links: Optional[Sequence[Link]] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> ConversionResult:
        """Execute the conversion for a user-facing caller.

        Returns:
            ConversionResult with outputs and status

        Raises:
            Does not raise - all errors are captured in ConversionResult.error
        """
        try:
            return self.convert(options, rasterize=rasterize, links=links, cancel_token=cancel_token)
        except ConversionCancelledError as e:
            logger.info("%s", e)
            return ConversionResult(
                status="cancelled",
                status_message="Conversion cancelled",
                error=str(e),
            )
        except Exception as e:
            logger.exception("Conversion failed")
            return ConversionResult(
                status="failed",
                status_message=f"Conversion failed: {str(e)}",
                error=str(e),
            )

    def _load_raster(self, options: ConversionOptions) -> Raster:
        """Load the full-document raster from options.image_path.

        Raises:
            InvalidFileError: If the file is missing or has a wrong extension
            FileSizeLimitExceededError: If the file is too large
            PipelineStepError: If Pillow cannot read the image
        """
        validate_image_path(options.image_path)
        check_file_size_limit(options.image_path, max_mb=MAX_FILE_SIZE_MB)

        try:
            with Image.open(options.image_path) as img:
                img.load()
                image = img.copy()
        except (UnidentifiedImageError, OSError) as e:
            raise PipelineStepError("load_raster", e)

        return Raster(image=image, pixel_scale=options.raster_scale)

    def _collect_links(self, options: ConversionOptions, links: Optional[Sequence[Link]]) -> List[Link]:
        if not options.preserve_links:
            return []
        if links is not None:
            return list(links)
        if options.links_path:
            return load_links(
                options.links_path,
                fallback_width=options.fallback_link_width,
                fallback_height=options.fallback_link_height,
            )
        return []

    def _report_page(self, page_index: int, page_count: int):
        start = PROGRESS_STEPS["PAGES_START"]
        span = PROGRESS_STEPS["PAGES_END"] - start
        self.progress(
            start + span * (page_index + 1) / page_count,
            f"Rendering page {page_index + 1}/{page_count}...",
        )

    def _output_path(self, options: ConversionOptions) -> str:
        name = resolve_output_name(options.output_name, options.image_path)
        return os.path.join(options.output_dir, name) if options.output_dir else name
