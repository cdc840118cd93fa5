"""Conversion Result Dataclass

Result outputs from the raster-to-PDF conversion pipeline.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ConversionResult:
    """Result from the conversion pipeline.

    Attributes:
        status: Conversion status ("completed", "cancelled", "failed")
        status_message: Human-readable status message

        # Output Files
        output_pdf_path: Path to the written PDF (None unless completed)

        # Statistics
        page_count: Number of pages written
        links_found: Number of links supplied to the run
        links_placed: Number of link annotations added
        links_dropped: Number of links whose top edge was past the last page

        # Error Handling
        error: Error message if conversion failed (None otherwise)
    """

    # Status
    status: str  # "completed", "cancelled", "failed"
    status_message: str

    # Output Files
    output_pdf_path: Optional[str] = None

    # Statistics
    page_count: int = 0
    links_found: int = 0
    links_placed: int = 0
    links_dropped: int = 0

    # Error Handling
    error: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """True if conversion completed and a PDF was written."""
        return self.status == "completed" and self.output_pdf_path is not None

    @property
    def is_failed(self) -> bool:
        """True if conversion failed with an error."""
        return self.status == "failed"

    def to_gradio_outputs(self) -> tuple:
        """Convert to Gradio UI outputs format.

        Returns:
            Tuple of (output_file, status)
        """
        import gradio as gr

        if not self.is_complete:
            return (
                gr.update(value=None, visible=False),  # output_file
                self.status_message,
            )

        return (
            gr.update(value=self.output_pdf_path, visible=True),
            self.status_message,
        )
