"""Custom Exception Hierarchy

Exception hierarchy for rasterpdf providing granular exception types for
the different ways a raster-to-PDF conversion can fail.
"""


class RasterPdfError(Exception):
    """Base exception for all rasterpdf errors.

    This is the root of the exception hierarchy. Catching this exception
    will catch all custom exceptions raised by the package.
    """
    pass


# Validation Errors
class ValidationError(RasterPdfError):
    """Raised when input validation fails."""
    pass


class InvalidFileError(ValidationError):
    """Raised when file validation fails (doesn't exist, wrong extension, etc.)."""
    pass


class FileSizeLimitExceededError(ValidationError):
    """Raised when an input file exceeds the size limit."""

    def __init__(self, file_size: float, max_size: float):
        self.file_size = file_size
        self.max_size = max_size
        super().__init__(
            f"File size {file_size:.1f} MB exceeds maximum allowed size {max_size:.1f} MB"
        )


class InvalidConfigurationError(ValidationError):
    """Raised when configuration parameters are invalid.

    Covers bad page size keys, unknown orientations, non-positive page
    heights and non-positive raster scales. Always raised before any
    page is produced.
    """
    pass


class InvalidPageSizeError(InvalidConfigurationError):
    """Raised when a named page size is not known."""

    def __init__(self, page_size: str, known_sizes):
        self.page_size = page_size
        self.known_sizes = tuple(known_sizes)
        super().__init__(
            f"Unknown page size '{page_size}'. Expected one of: {', '.join(self.known_sizes)}"
        )


class InvalidGeometryError(ValidationError):
    """Raised when a rectangle has a negative width or height."""
    pass


class LinkSnapshotError(ValidationError):
    """Raised when a link snapshot cannot be read or has the wrong shape."""

    def __init__(self, source: str, reason: str):
        self.source = source
        super().__init__(f"Failed to load link snapshot '{source}': {reason}")


# Rendering Errors
class RenderingError(RasterPdfError):
    """Base class for PDF rendering errors."""
    pass


class ImageRenderingError(RenderingError):
    """Raised when a page image cannot be embedded."""

    def __init__(self, page_index: int, reason: str):
        self.page_index = page_index
        super().__init__(f"Failed to render page {page_index + 1}: {reason}")


class PdfWriteError(RenderingError):
    """Raised when the finished PDF cannot be written to disk."""

    def __init__(self, output_path: str, reason: str):
        self.output_path = output_path
        super().__init__(f"Failed to write PDF '{output_path}': {reason}")


# Pipeline Errors
class PipelineError(RasterPdfError):
    """Base class for pipeline orchestration errors."""
    pass


class ConversionCancelledError(PipelineError):
    """Raised when a conversion is cancelled between pages."""

    def __init__(self, page_index: int, page_count: int):
        self.page_index = page_index
        self.page_count = page_count
        super().__init__(
            f"Conversion cancelled before page {page_index + 1} of {page_count}"
        )


class PipelineStepError(PipelineError):
    """Raised when a specific pipeline step fails.

    This wraps the underlying exception while preserving the pipeline context.
    """

    def __init__(self, step_name: str, original_exception: Exception):
        self.step_name = step_name
        self.original_exception = original_exception
        super().__init__(
            f"Pipeline step '{step_name}' failed: {str(original_exception)}"
        )
