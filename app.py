"""Raster to PDF - Main Application

Gradio application for turning a rendered document image into a multi-page
PDF with clickable links.
"""
import logging
import os
import sys

# Add current directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import gradio as gr
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from rasterpdf.config import (
    PAGE_SIZES,
    ORIENTATIONS,
    DEFAULT_PAGE_SIZE,
    DEFAULT_ORIENTATION,
    DEFAULT_RASTER_SCALE,
    MIN_RASTER_SCALE,
    MAX_RASTER_SCALE,
)
from rasterpdf.conversion_options import ConversionOptions
from rasterpdf.exceptions import ValidationError
from rasterpdf.pipeline import ConversionPipeline

logging.basicConfig(
    level=getattr(logging, os.getenv("RASTERPDF_LOG_LEVEL", "INFO").upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

OUTPUT_DIR = os.getenv("RASTERPDF_OUTPUT_DIR", "output")


def convert_image(
    image_file,
    links_file,
    page_size: str,
    orientation: str,
    raster_scale: int,
    preserve_links: bool,
    output_name: str,
    progress=gr.Progress()
) -> tuple:
    """
    Convert an uploaded document image to PDF.

    Args:
        image_file: Uploaded image path (rendered document)
        links_file: Optional uploaded JSON link snapshot path
        page_size: Named page size ("a4", "letter", "legal")
        orientation: "portrait" or "landscape"
        raster_scale: Scale the image was rendered at (device px per CSS px)
        preserve_links: If True, add clickable link annotations
        output_name: Desired output filename
        progress: Gradio progress tracker

    Returns:
        Tuple of (output PDF update, status message)
    """
    if image_file is None:
        raise gr.Error("Please upload a rendered document image")

    try:
        options = ConversionOptions(
            image_path=image_file,
            links_path=links_file if preserve_links else None,
            page_size=page_size,
            orientation=orientation,
            raster_scale=int(raster_scale),
            preserve_links=preserve_links,
            output_name=output_name,
            output_dir=OUTPUT_DIR,
        )
    except ValidationError as e:
        raise gr.Error(str(e))

    pipeline = ConversionPipeline(progress_callback=lambda p, d: progress(p, desc=d))
    result = pipeline.process(options)

    if result.is_complete and preserve_links:
        result.status_message += (
            f"\nInjected {result.links_placed} clickable link annotation(s)"
            f" ({result.links_dropped} dropped)"
        )

    return result.to_gradio_outputs()


# Create Gradio interface
with gr.Blocks(title="Raster to PDF") as app:
    gr.Markdown("# Raster to PDF")
    gr.Markdown(
        "Upload a rendered document image and, optionally, a JSON snapshot of its link "
        "rectangles. The image is split into pages and the links stay clickable."
    )

    with gr.Row():
        with gr.Column():
            gr.Markdown("## Settings")

            page_size = gr.Dropdown(
                choices=list(PAGE_SIZES.keys()),
                value=os.getenv("RASTERPDF_PAGE_SIZE", DEFAULT_PAGE_SIZE),
                label="Page size"
            )

            orientation = gr.Radio(
                choices=list(ORIENTATIONS),
                value=os.getenv("RASTERPDF_ORIENTATION", DEFAULT_ORIENTATION),
                label="Orientation"
            )

            raster_scale = gr.Slider(
                minimum=MIN_RASTER_SCALE,
                maximum=MAX_RASTER_SCALE,
                value=int(os.getenv("RASTERPDF_RASTER_SCALE", DEFAULT_RASTER_SCALE)),
                step=1,
                label="Image scale",
                info="Scale the image was rendered at (device pixels per CSS pixel)"
            )

            preserve_links = gr.Checkbox(
                label="Preserve links",
                value=True,
                info="Add clickable link annotations from the link snapshot"
            )

            output_name = gr.Textbox(
                label="Output filename",
                placeholder="document.pdf"
            )

        with gr.Column():
            gr.Markdown("## Workflow")

            image_input = gr.File(
                label="Upload Rendered Image",
                file_types=["image"],
                type="filepath"
            )

            links_input = gr.File(
                label="Upload Link Snapshot (JSON)",
                file_types=[".json"],
                type="filepath"
            )

            convert_btn = gr.Button(
                "Convert to PDF",
                variant="primary",
                size="lg"
            )

            main_status = gr.Textbox(
                label="Status",
                interactive=False
            )

            output_file = gr.File(
                label="📥 Download PDF",
                type="filepath",
                visible=False
            )

    # Grey out link upload when links are not preserved
    preserve_links.change(
        fn=lambda enabled: gr.update(interactive=enabled),
        inputs=[preserve_links],
        outputs=[links_input]
    )

    convert_btn.click(
        fn=convert_image,
        inputs=[image_input, links_input, page_size, orientation, raster_scale,
                preserve_links, output_name],
        outputs=[output_file, main_status]
    )


if __name__ == "__main__":
    app.launch()
