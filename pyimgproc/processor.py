"""Chainable image processor and the one-shot `convert` helper."""

import io
import os
from typing import BinaryIO, Optional

from iopath.common.file_io import g_pathmgr
from PIL import Image

from . import _config, transforms
from .common.exceptions import ImageIOError, MissingFormatError, NoImageError
from .common.utils import ensure_parent_dir, remove_quietly
from .encoder import ImageFormat, encode_image, load_encoder
from .loader import Loader, default_loader
from .utils.image_utils import normalize_mode
from .utils.logger import get_library_logger

logger = get_library_logger(__name__)


def clamp_quality(quality: int) -> int:
    return max(_config.MIN_QUALITY, min(_config.MAX_QUALITY, int(quality)))


class ImageProcessor:
    """
    Holds one current image plus output settings and applies transforms to it.

    Every transform replaces the current image with a new one and returns the
    processor itself, so calls can be chained. A processor is a short-lived,
    caller-owned accumulator: build one per chain and do not share it.

    Attributes:
        image (PIL.Image.Image | None): The current image.
        quality (int): Quality/compression level, 1-100.
        target_format (ImageFormat | None): Explicit output format. When set it
            overrides the extension of the path passed to `save`.
    """

    def __init__(
        self,
        image: Optional[Image.Image] = None,
        quality: int = _config.DEFAULT_QUALITY,
        target_format=None,
    ):
        self.image = normalize_mode(image) if image is not None else None
        self.original_image = self.image.copy() if self.image is not None else None
        self.quality = clamp_quality(quality)
        self.target_format = ImageFormat.parse(target_format) if target_format else None

    @classmethod
    def open(cls, source: str, loader: Optional[Loader] = None, **kwargs):
        """Load `source` (path or URL) and wrap it in a new processor."""
        loader = loader or default_loader
        return cls(loader.load(source), **kwargs)

    @property
    def size(self):
        if self.image is None:
            raise NoImageError("read size")
        return self.image.size

    def reset(self):
        """Restore the image the processor was created with."""
        if self.original_image is None:
            raise NoImageError("reset")
        self.image = self.original_image.copy()
        return self

    # --- Transforms ---

    def resize(self, width: int, height: int):
        self.image = transforms.resize(self.image, width, height)
        return self

    def grayscale(self):
        self.image = transforms.grayscale(self.image)
        return self

    def rotate180(self):
        self.image = transforms.rotate180(self.image)
        return self

    def rotate90(self):
        """Rotate 90 degrees clockwise."""
        self.image = transforms.rotate90(self.image)
        return self

    def flip_horizontal(self):
        self.image = transforms.flip_horizontal(self.image)
        return self

    def flip_vertical(self):
        self.image = transforms.flip_vertical(self.image)
        return self

    def brightness(self, percent: int):
        """Adjust brightness by `percent` (-100 to 100)."""
        self.image = transforms.brightness(self.image, percent)
        return self

    def watermark(self, text: str):
        """Add a text watermark near the bottom-right corner."""
        self.image = transforms.watermark(self.image, text)
        return self

    # --- Output settings ---

    def set_quality(self, quality: int):
        """Set the quality or compression level, clamped to 1-100."""
        self.quality = clamp_quality(quality)
        return self

    def set_format(self, fmt):
        """
        Set the explicit output format.

        Raises:
            UnsupportedFormatError: If `fmt` is not a supported output format.
        """
        self.target_format = ImageFormat.parse(fmt)
        return self

    def to_png(self):
        return self.set_format(ImageFormat.PNG)

    def to_jpeg(self):
        return self.set_format(ImageFormat.JPEG)

    def to_gif(self):
        return self.set_format(ImageFormat.GIF)

    def to_bmp(self):
        return self.set_format(ImageFormat.BMP)

    def to_tiff(self):
        return self.set_format(ImageFormat.TIFF)

    # --- Terminal operations ---

    def _resolve_format(self, fmt=None) -> ImageFormat:
        fmt = fmt or self.target_format
        if not fmt:
            raise MissingFormatError()
        return ImageFormat.parse(fmt)

    def encode(self, sink: BinaryIO, fmt=None) -> ImageFormat:
        """
        Write the image to a caller-owned binary stream.

        Args:
            sink: Any writable binary file-like object. It is not closed.
            fmt: Format override; defaults to the target format.

        Returns:
            ImageFormat: The format written.

        Raises:
            MissingFormatError: If neither `fmt` nor a target format is set.
            UnsupportedFormatError: If the format is not supported.
            ImageIOError: If writing to `sink` fails.
        """
        if self.image is None:
            raise NoImageError("encode")
        return encode_image(self.image, sink, self._resolve_format(fmt), self.quality)

    def to_bytes(self, fmt=None) -> bytes:
        """Encode into memory and return the bytes. Same format rules as `encode`."""
        buffer = io.BytesIO()
        self.encode(buffer, fmt)
        return buffer.getvalue()

    def save(self, path) -> ImageFormat:
        """
        Save the image to `path`.

        If a target format was set (``to_png()``, ``set_format(...)``) it wins
        over the file extension. Otherwise the format is inferred from the
        extension. The format is validated before the file is created, and a
        file left half-written by a failed encode is removed.

        Raises:
            MissingFormatError: If there is no target format and no extension.
            UnsupportedFormatError: If the format is not supported.
            ImageIOError: If the file cannot be created or written.
        """
        if self.image is None:
            raise NoImageError("save")
        path = os.fspath(path)
        fmt = self.target_format or os.path.splitext(path)[1]
        image_format = self._resolve_format(fmt)
        encoder = load_encoder(image_format)

        try:
            ensure_parent_dir(path)
            f = g_pathmgr.open(path, "wb")
        except OSError as e:
            raise ImageIOError(f"failed to create file: {e}") from e

        try:
            with f:
                encoder(self.image, f, self.quality)
        except OSError as e:
            remove_quietly(path)
            raise ImageIOError(f"failed to write {path}: {e}") from e
        except Exception:
            remove_quietly(path)
            raise

        logger.debug("Saved %s as %s", path, image_format.value)
        return image_format


def convert(src: str, dst: str, loader: Optional[Loader] = None) -> ImageFormat:
    """
    Load `src` and save it to `dst`, converting by the destination extension.

    Uses a fresh processor with default quality. Nothing is written when
    loading fails.
    """
    logger.debug("Converting %s -> %s", src, dst)
    return ImageProcessor.open(src, loader=loader).save(dst)
