"""Pixel transforms.

Every function takes an image, never touches it, and returns a newly
allocated image, so a processing chain cannot alias an earlier state.
Geometric transforms keep luminance images as luminance; all other input is
handled as full-color RGBA.
"""

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from . import _config
from .common.exceptions import NoImageError, ValidationError
from .utils.image_utils import normalize_mode


def _require(image, operation):
    if image is None:
        raise NoImageError(operation)
    return normalize_mode(image)


def resize(image: Image.Image, width: int, height: int) -> Image.Image:
    """
    Resample `image` to exactly `width` x `height`.

    Uses Pillow's bicubic filter, a cubic convolution with a = -0.5
    (Catmull-Rom). Aspect ratio is not preserved.

    Args:
        image (PIL.Image.Image): Source image.
        width (int): Target width, must be positive.
        height (int): Target height, must be positive.

    Raises:
        ValidationError: If a dimension is not a positive integer.
    """
    image = _require(image, "resize")
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ValidationError(f"{name} must be a positive integer, got {value!r}")
    return image.resize((width, height), Image.Resampling.BICUBIC)


def grayscale(image: Image.Image) -> Image.Image:
    """Convert to single-channel luminance (ITU-R 601-2 weights). Alpha is dropped."""
    image = _require(image, "convert to grayscale")
    return image.convert("L")


def rotate180(image: Image.Image) -> Image.Image:
    # (x, y) -> (W-1-x, H-1-y)
    return _require(image, "rotate").transpose(Image.Transpose.ROTATE_180)


def rotate90(image: Image.Image) -> Image.Image:
    """Rotate 90 degrees clockwise; width and height swap."""
    # (x, y) -> (H-1-y, x); Pillow's ROTATE_270 is counter-clockwise 270
    return _require(image, "rotate").transpose(Image.Transpose.ROTATE_270)


def flip_horizontal(image: Image.Image) -> Image.Image:
    return _require(image, "flip").transpose(Image.Transpose.FLIP_LEFT_RIGHT)


def flip_vertical(image: Image.Image) -> Image.Image:
    return _require(image, "flip").transpose(Image.Transpose.FLIP_TOP_BOTTOM)


def brightness(image: Image.Image, percent: int) -> Image.Image:
    """
    Shift red, green and blue by ``255 * percent / 100``.

    Args:
        image (PIL.Image.Image): Source image.
        percent (int): Adjustment, clamped to [-100, 100].

    Returns:
        PIL.Image.Image: RGBA image. Alpha passes through unchanged.
    """
    image = _require(image, "adjust brightness")
    limit = _config.BRIGHTNESS_LIMIT
    percent = max(-limit, min(limit, percent))
    offset = 255.0 * percent / 100.0

    img_array = np.asarray(image.convert("RGBA"), dtype=np.float32).copy()
    img_array[..., :3] += offset

    # Clip to 0-255 and truncate like an integer channel store
    result = np.clip(img_array, 0, 255).astype(np.uint8)
    return Image.fromarray(result)


def watermark_origin(size: tuple[int, int], text: str, text_height: int) -> tuple[int, int]:
    """
    Top-left corner for the watermark text.

    The text width is estimated as a fixed advance per character, not measured
    from glyph metrics. Very long strings or very small images can still
    overflow the left edge; the position is a best effort only.
    """
    width, height = size
    margin = _config.WATERMARK_MARGIN
    x = width - len(text) * _config.WATERMARK_CHAR_ADVANCE - margin
    y = height - margin - text_height
    return x, y


def watermark(image: Image.Image, text: str) -> Image.Image:
    """
    Draw `text` in semi-transparent white near the bottom-right corner.

    The text is rendered with Pillow's built-in fixed-size bitmap font onto a
    transparent layer and alpha-composited over a copy of the image.
    """
    base = _require(image, "watermark").convert("RGBA")

    font = ImageFont.load_default_imagefont()
    text_height = font.getbbox(text)[3] if text else 0
    origin = watermark_origin(base.size, text, text_height)

    overlay = Image.new("RGBA", base.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)
    draw.text(origin, text, fill=_config.WATERMARK_COLOR, font=font)

    return Image.alpha_composite(base, overlay)
