"""Concrete encoders, one per ImageFormat member.

Each encoder adapts the grid to what its codec can store and maps the shared
1-100 quality level to codec parameters. Only JPEG and PNG look at quality.
"""

from PIL import Image

from .. import _config
from ..common.registry import registry
from ..utils.image_utils import to_rgb
from .base import IEncoder
from .formats import ImageFormat


def png_compress_level(quality: int) -> int:
    """
    Map quality to a zlib effort level.

    <= 25 is fastest, >= 76 is best compression, anything in between is the
    zlib default.
    """
    if quality <= _config.PNG_FAST_QUALITY:
        return _config.PNG_FAST_LEVEL
    if quality >= _config.PNG_BEST_QUALITY:
        return _config.PNG_BEST_LEVEL
    return _config.PNG_DEFAULT_LEVEL


@registry.register_encoder(ImageFormat.JPEG)
class JPEGEncoder(IEncoder):
    """Lossy encode at the configured quality. Alpha is discarded."""

    def process(self, image: Image.Image, sink, quality: int):
        to_rgb(image).save(sink, format=self.format.pil_format, quality=int(quality))


@registry.register_encoder(ImageFormat.PNG)
class PNGEncoder(IEncoder):
    def process(self, image: Image.Image, sink, quality: int):
        image.save(sink, format=self.format.pil_format, compress_level=png_compress_level(quality))


@registry.register_encoder(ImageFormat.GIF)
class GIFEncoder(IEncoder):
    def process(self, image: Image.Image, sink, quality: int):
        image.save(sink, format=self.format.pil_format)


@registry.register_encoder(ImageFormat.BMP)
class BMPEncoder(IEncoder):
    def process(self, image: Image.Image, sink, quality: int):
        # Pillow's BMP writer is always uncompressed
        image.save(sink, format=self.format.pil_format)


@registry.register_encoder(ImageFormat.TIFF)
class TIFFEncoder(IEncoder):
    def process(self, image: Image.Image, sink, quality: int):
        image.save(sink, format=self.format.pil_format)
