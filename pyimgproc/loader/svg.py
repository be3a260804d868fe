import io
import re

import cairosvg
from PIL import Image

from .. import _config
from ..common.exceptions import DecodeError
from ..utils.logger import get_library_logger

logger = get_library_logger(__name__)

_SVG_TAG = re.compile(r"<svg\b[^>]*>", flags=re.IGNORECASE | re.DOTALL)
_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"


def _attribute(tag: str, name: str):
    m = re.search(
        r'(?<![\w:-])' + name + r'\s*=\s*(["\'])(.*?)\1', tag, flags=re.DOTALL
    )
    return m.group(2).strip() if m else None


def _length(value):
    """Parse a plain or ``px`` length; anything else (%, em, mm) is ignored."""
    if value is None:
        return None
    m = re.fullmatch(r"(" + _NUMBER + r")\s*(?:px)?", value)
    return float(m.group(1)) if m else None


def svg_canvas_size(svg_code: str) -> tuple[int, int]:
    """
    Work out the raster size for an SVG document.

    The declared ``viewBox`` wins; documents without one fall back to the root
    ``width``/``height`` attributes. If neither yields positive dimensions the
    default 512x512 canvas is used.

    Parameters
    ----------
    svg_code : str
        The SVG document.

    Returns
    -------
    tuple[int, int]
        (width, height) in pixels.
    """
    m = _SVG_TAG.search(svg_code)
    if not m:
        return _config.DEFAULT_SVG_SIZE
    tag = m.group(0)

    width = height = None
    view_box = _attribute(tag, "viewBox")
    if view_box:
        parts = re.findall(_NUMBER, view_box)
        if len(parts) == 4:
            width, height = float(parts[2]), float(parts[3])
    else:
        width = _length(_attribute(tag, "width"))
        height = _length(_attribute(tag, "height"))

    if width is None or height is None or int(width) <= 0 or int(height) <= 0:
        return _config.DEFAULT_SVG_SIZE
    return int(width), int(height)


def _with_canvas_size(svg_code: str, width: int, height: int) -> str:
    """Rewrite the root tag so it declares exactly `width` x `height`."""
    m = _SVG_TAG.search(svg_code)
    if not m:
        return svg_code
    tag = m.group(0)
    for name in ("width", "height"):
        tag = re.sub(r"\s+" + name + r"\s*=\s*([\"']).*?\1", "", tag, flags=re.DOTALL)
    tag = tag[:4] + f' width="{width}" height="{height}"' + tag[4:]
    return svg_code[:m.start()] + tag + svg_code[m.end():]


def rasterize_svg(data: bytes) -> Image.Image:
    """
    Rasterize an SVG document into a transparent RGBA image using CairoSVG.

    Animation and interactivity are ignored; the result is a single frame.

    Parameters
    ----------
    data : bytes
        Raw SVG document.

    Returns
    -------
    PIL.Image.Image
        RGBA image sized by `svg_canvas_size`.

    Raises
    ------
    DecodeError
        If the document cannot be parsed or rendered.
    """
    try:
        svg_code = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"failed to read SVG: {e}") from e

    width, height = svg_canvas_size(svg_code)
    logger.debug("Rasterizing SVG onto a %dx%d canvas", width, height)

    try:
        png_data = cairosvg.svg2png(
            bytestring=_with_canvas_size(svg_code, width, height).encode("utf-8"),
            output_width=width,
            output_height=height,
            scale=_config.SVG_SCALE,
        )
    except Exception as e:
        # CairoSVG surfaces XML, CSS and Cairo failures with unrelated types
        raise DecodeError(f"failed to read SVG: {e}") from e

    with Image.open(io.BytesIO(png_data)) as img:
        return img.convert("RGBA")
