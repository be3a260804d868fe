from enum import Enum

from ..common.exceptions import UnsupportedFormatError


class ImageFormat(str, Enum):
    """Closed set of output codecs. The value is the canonical tag."""

    JPEG = "jpeg"
    PNG = "png"
    GIF = "gif"
    BMP = "bmp"
    TIFF = "tiff"

    @classmethod
    def parse(cls, tag):
        """
        Normalize a format tag (``"JPG"``, ``".tif"``, ``ImageFormat.PNG`` ...).

        Args:
            tag: A string tag, file extension, or ImageFormat member.

        Returns:
            ImageFormat: The matching member.

        Raises:
            UnsupportedFormatError: If the tag names no supported codec.
        """
        if isinstance(tag, cls):
            return tag
        normalized = str(tag).strip().lower()
        if normalized.startswith("."):
            normalized = normalized[1:]
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError:
            raise UnsupportedFormatError(tag) from None

    @property
    def pil_format(self):
        return self.value.upper()


_ALIASES = {
    "jpg": "jpeg",
    "tif": "tiff",
}
