# pyimgproc/__init__.py
"""
pyimgproc - a small image manipulation library.

Loads raster and SVG images from disk or http(s) URLs, applies a fixed set of
transforms and re-encodes the result as PNG, JPEG, GIF, BMP or TIFF.

Main components:
- Loader: path/URL resolution, signature sniffing, SVG rasterization (CairoSVG)
- Transforms: resize, grayscale, rotate, flip, brightness, watermark
- Encoder: format registry and per-codec parameter mapping
- ImageProcessor: chainable wrapper with save / to_bytes / encode
- convert: one-shot file-to-file conversion
- Utils: logging helpers
"""

from .common.exceptions import (
    DecodeError,
    ImageIOError,
    MissingFormatError,
    NoImageError,
    PyImgProcError,
    UnsupportedFormatError,
    ValidationError,
)
from .encoder import ImageFormat, encoder_zoo, load_encoder
from .loader import Loader, load, load_bytes, rasterize_svg
from .processor import ImageProcessor, convert
from .utils import create_console_logger, get_library_logger

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "ImageProcessor",
    "convert",
    "load",
    "load_bytes",
    "Loader",
    "rasterize_svg",
    "ImageFormat",
    "load_encoder",
    "encoder_zoo",

    # Errors
    "PyImgProcError",
    "ImageIOError",
    "DecodeError",
    "ValidationError",
    "UnsupportedFormatError",
    "MissingFormatError",
    "NoImageError",

    # Utilities
    "get_library_logger",
    "create_console_logger",

    # Metadata
    "__version__",
]
