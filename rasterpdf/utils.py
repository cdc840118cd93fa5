"""Utilities Module

Helper functions for the raster-to-PDF application.
"""
import os
import re

from .config import SUPPORTED_IMAGE_EXTENSIONS
from .exceptions import InvalidFileError, FileSizeLimitExceededError


def validate_image_path(image_path: str) -> None:
    """
    Validate image file exists and has a supported extension.

    Args:
        image_path: Path to rendered document image

    Raises:
        InvalidFileError: If file doesn't exist or has wrong extension
    """
    if not image_path:
        raise InvalidFileError("Image path cannot be empty")

    if not os.path.exists(image_path):
        raise InvalidFileError(f"File does not exist: {image_path}")

    if not image_path.lower().endswith(SUPPORTED_IMAGE_EXTENSIONS):
        raise InvalidFileError(
            f"File must be one of {', '.join(SUPPORTED_IMAGE_EXTENSIONS)}: {image_path}"
        )


def clean_filename(filename: str) -> str:
    """
    Clean filename for safe saving.

    Args:
        filename: Original filename

    Returns:
        Cleaned filename without extension
    """
    # Remove path components
    filename = os.path.basename(filename)

    # Remove extension
    name, _ = os.path.splitext(filename)

    # Replace invalid characters
    name = re.sub(r'[^\w\s-]', '', name)

    # Replace spaces with underscores
    name = re.sub(r'\s+', '_', name)

    # Limit length
    if len(name) > 50:
        name = name[:50]

    return name or 'document'


def resolve_output_name(output_name: str, source_path: str = None) -> str:
    """
    Pick the output PDF filename.

    An empty name falls back to the source file's stem; a missing '.pdf'
    suffix is appended.

    Examples:
        >>> resolve_output_name("", "page.html")
        'page.pdf'
        >>> resolve_output_name("report")
        'report.pdf'
    """
    name = (output_name or "").strip()
    if not name:
        name = clean_filename(source_path or "document") + ".pdf"

    if not name.lower().endswith(".pdf"):
        name += ".pdf"

    return os.path.basename(name)


def check_file_size_limit(file_path: str, max_mb: int = 200) -> float:
    """
    Check if file is within size limit.

    Args:
        file_path: Path to file
        max_mb: Maximum size in MB

    Returns:
        File size in MB

    Raises:
        FileSizeLimitExceededError: If file exceeds size limit
        InvalidFileError: If file size cannot be determined
    """
    try:
        size_bytes = os.path.getsize(file_path)
    except OSError as e:
        raise InvalidFileError(f"Error checking file size: {str(e)}")

    size_mb = size_bytes / (1024 * 1024)
    if size_mb > max_mb:
        raise FileSizeLimitExceededError(size_mb, max_mb)

    return size_mb
