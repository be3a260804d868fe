from PIL import Image

FULL_COLOR = "RGBA"
LUMINANCE = "L"


def normalize_mode(image: Image.Image) -> Image.Image:
    """
    Bring a freshly decoded image to one of the two grid representations.

    Luminance images stay ``"L"``; every other mode (palette, RGB, CMYK,
    16-bit, ...) becomes ``"RGBA"``.

    Parameters
    ----------
    image : PIL.Image.Image
        Decoded image in any Pillow mode.

    Returns
    -------
    PIL.Image.Image
        Image in mode ``"L"`` or ``"RGBA"``.
    """
    if image.mode in (FULL_COLOR, LUMINANCE):
        return image
    return image.convert(FULL_COLOR)


def to_rgb(image: Image.Image) -> Image.Image:
    """Drop alpha for codecs without an alpha channel; luminance is kept."""
    if image.mode in ("RGB", LUMINANCE):
        return image
    return image.convert("RGB")
