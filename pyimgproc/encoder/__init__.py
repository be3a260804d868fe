# pyimgproc/encoder/__init__.py
"""
Encoder module for writing images in one of the supported output formats.

Every member of `ImageFormat` has exactly one encoder registered in the
registry. `encode_image` is the dispatcher used by the processor: it parses
the tag, looks up the encoder and writes to any binary sink.
"""

import io
from typing import BinaryIO

from PIL import Image

from ..common import registry
from ..common.exceptions import ImageIOError, NoImageError, UnsupportedFormatError
from ..utils.logger import get_library_logger
from .base import IEncoder
from .codecs import (
    BMPEncoder,
    GIFEncoder,
    JPEGEncoder,
    PNGEncoder,
    TIFFEncoder,
    png_compress_level,
)
from .formats import ImageFormat

logger = get_library_logger(__name__)

__all__ = [
    "IEncoder",
    "ImageFormat",
    "JPEGEncoder",
    "PNGEncoder",
    "GIFEncoder",
    "BMPEncoder",
    "TIFFEncoder",
    "png_compress_level",
    "load_encoder",
    "encode_image",
    "EncoderZoo",
    "encoder_zoo",
]


def load_encoder(fmt) -> IEncoder:
    """
    Load an encoder instance for a format tag using the registry.

    Args:
        fmt (str | ImageFormat): Format tag, e.g. "png", ".JPG", ImageFormat.TIFF.

    Returns:
        IEncoder: An instance of the encoder registered for that format.

    Raises:
        UnsupportedFormatError: If no encoder handles the tag.
    """
    image_format = ImageFormat.parse(fmt)
    encoder_cls = registry.get_encoder_class(image_format)
    if encoder_cls is None:
        raise UnsupportedFormatError(fmt)
    return encoder_cls()


def encode_image(image: Image.Image, sink: BinaryIO, fmt, quality: int) -> ImageFormat:
    """
    Encode `image` into `sink` as `fmt`.

    The encoder is resolved before anything is written, so an unsupported tag
    leaves the sink untouched. Encoding happens in memory first, so the sink
    only needs `write`; pipes, sockets and response streams work for every
    format, including TIFF whose writer seeks.

    Raises:
        ImageIOError: If writing to the sink fails.

    Returns:
        ImageFormat: The format actually written.
    """
    if image is None:
        raise NoImageError("encode")
    encoder = load_encoder(fmt)
    logger.debug(
        "Encoding %dx%d %s image as %s (quality=%d)",
        image.width, image.height, image.mode, encoder.format.value, quality,
    )
    buffer = io.BytesIO()
    encoder(image, buffer, quality)

    try:
        _write_all(sink, buffer.getvalue())
    except OSError as e:
        raise ImageIOError(f"failed to write {encoder.format.value} data: {e}") from e
    return encoder.format


def _write_all(sink: BinaryIO, data: bytes) -> None:
    # Raw streams may accept fewer bytes than offered; None means all of it
    while data:
        written = sink.write(data)
        if written is None:
            return
        if written == 0:
            raise BlockingIOError("sink accepted no bytes")
        data = data[written:]


class EncoderZoo:
    """
    Lists every encoder registered in the registry.
    """

    def __init__(self):
        # {format tag: class name}
        self.encoder_zoo = {
            k.value: v.__name__ for k, v in registry.mapping["encoder"].items()
        }

    def __str__(self):
        return (
            "=" * 50
            + "\n"
            + "\n".join(
                [
                    f"{name:<30} {cls}" for name, cls in self.encoder_zoo.items()
                ]
            )
        )

    def __iter__(self):
        return iter(self.encoder_zoo.items())


encoder_zoo = EncoderZoo()
