"""
_config.py

Fixed defaults shared across the library.

There is no configuration file and no environment lookup: these constants are
the single source of truth for quality handling, SVG canvas sizing, watermark
placement and network behaviour. Callers override per call where an argument
exists (e.g. ``ImageProcessor(quality=...)`` or ``Loader(timeout=...)``).
"""

# Quality / compression level (1-100)
DEFAULT_QUALITY = 90
MIN_QUALITY = 1
MAX_QUALITY = 100

# PNG compression-effort buckets derived from quality
PNG_FAST_QUALITY = 25       # quality <= this -> fastest
PNG_BEST_QUALITY = 76       # quality >= this -> best
PNG_FAST_LEVEL = 1
PNG_DEFAULT_LEVEL = 6
PNG_BEST_LEVEL = 9

# SVG rasterization
DEFAULT_SVG_SIZE = (512, 512)
SVG_SCALE = 1.0

# Watermark placement (approximate, see transforms.watermark_origin)
WATERMARK_MARGIN = 10
WATERMARK_CHAR_ADVANCE = 7
WATERMARK_COLOR = (255, 255, 255, 128)

BRIGHTNESS_LIMIT = 100

# Remote loading blocks until the server answers unless a timeout is given
HTTP_TIMEOUT = None
