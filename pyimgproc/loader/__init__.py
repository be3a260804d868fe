# pyimgproc/loader/__init__.py
"""
Loader module: path/URL resolution, raster sniffing and SVG rasterization.
"""

from .decoders import (
    DEFAULT_DECODERS,
    Decoder,
    sniff_format,
)
from .loader import Loader, default_loader, load, load_bytes
from .svg import rasterize_svg, svg_canvas_size

__all__ = [
    "Loader",
    "Decoder",
    "DEFAULT_DECODERS",
    "default_loader",
    "load",
    "load_bytes",
    "sniff_format",
    "rasterize_svg",
    "svg_canvas_size",
]
