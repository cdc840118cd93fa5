"""Configuration Constants

Constants for raster-to-PDF conversion configuration.
"""

# File Processing Limits
MAX_FILE_SIZE_MB = 200
SUPPORTED_IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp", ".bmp", ".tif", ".tiff")

# Progress Steps (for UI progress tracking)
PROGRESS_STEPS = {
    "VALIDATE": 0.02,
    "RASTERIZE": 0.10,
    "SCAN_LINKS": 0.20,
    "BUILD_START": 0.65,
    "PAGES_START": 0.75,
    "PAGES_END": 0.90,
    "COMPLETE": 1.0,
}

# Page sizes in points (width, height), portrait orientation
PAGE_SIZES = {
    "a4": (595.28, 841.89),
    "letter": (612.0, 792.0),
    "legal": (612.0, 1008.0),
}

ORIENTATIONS = ("portrait", "landscape")

DEFAULT_PAGE_SIZE = "a4"
DEFAULT_ORIENTATION = "portrait"

# Raster oversampling (device pixels per logical pixel)
DEFAULT_RASTER_SCALE = 2
MIN_RASTER_SCALE = 1
MAX_RASTER_SCALE = 4

# Size used for links whose element could not be measured (logical pixels)
DEFAULT_FALLBACK_LINK_WIDTH = 10.0
DEFAULT_FALLBACK_LINK_HEIGHT = 12.0

# Output Format
DEFAULT_JPEG_QUALITY = 97
DEFAULT_BACKGROUND_COLOR = "#ffffff"
