from typing import Optional, Sequence

import requests
from iopath.common.file_io import g_pathmgr
from PIL import Image

from .. import _config
from ..common.exceptions import DecodeError, ImageIOError
from ..common.utils import has_suffix, is_remote
from ..utils.logger import get_library_logger
from .decoders import DEFAULT_DECODERS, Decoder, sniff_format
from .svg import rasterize_svg

logger = get_library_logger(__name__)


class Loader:
    """
    Resolves a local path or http(s) URL to a decoded image.

    Attributes:
        decoders (Sequence[Decoder]): Ordered raster decoders tried by signature.
        timeout (float | None): Timeout for remote GET requests, None blocks.
    """

    def __init__(
        self,
        decoders: Sequence[Decoder] = DEFAULT_DECODERS,
        timeout: Optional[float] = _config.HTTP_TIMEOUT,
    ):
        self.decoders = tuple(decoders)
        self.timeout = timeout

    def load(self, source: str) -> Image.Image:
        """
        Load an image from a local path or a remote URL.

        Args:
            source (str): File path or ``http://``/``https://`` URL.

        Returns:
            PIL.Image.Image: Image in mode "RGBA" or "L".

        Raises:
            ImageIOError: If the file cannot be read or the download fails.
            DecodeError: If the bytes are not a supported image.
        """
        source = str(source)
        if is_remote(source):
            return self.load_remote(source)
        return self.load_local(source)

    def load_local(self, path: str) -> Image.Image:
        logger.debug("Loading image from %s", path)
        try:
            with g_pathmgr.open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise ImageIOError(f"failed to open file: {e}") from e
        return self.decode(data, svg=has_suffix(path, ".svg"))

    def load_remote(self, url: str) -> Image.Image:
        logger.debug("Downloading image from %s", url)
        try:
            with requests.get(url, timeout=self.timeout) as resp:
                if not 200 <= resp.status_code < 300:
                    raise ImageIOError(
                        f"failed to download image, status code: {resp.status_code}",
                        status_code=resp.status_code,
                    )
                data = resp.content
        except requests.RequestException as e:
            raise ImageIOError(f"failed to download image: {e}") from e
        return self.decode(data, svg=has_suffix(url, ".svg"))

    def decode(self, data: bytes, svg: bool = False) -> Image.Image:
        """
        Decode an in-memory payload.

        Args:
            data (bytes): Encoded image.
            svg (bool): Treat the payload as an SVG document instead of sniffing.

        Returns:
            PIL.Image.Image: Image in mode "RGBA" or "L".
        """
        if svg:
            return rasterize_svg(data)

        decoder = sniff_format(data, self.decoders)
        if decoder is None:
            raise DecodeError("failed to decode image: unknown format")
        image = decoder.decode(data)
        logger.debug("Decoded %s image %dx%d (%s)", decoder.name, image.width, image.height, image.mode)
        return image


default_loader = Loader()


def load(source: str) -> Image.Image:
    """Load `source` with the default decoder list."""
    return default_loader.load(source)


def load_bytes(data: bytes, svg: bool = False) -> Image.Image:
    """Decode an already fetched payload with the default decoder list."""
    return default_loader.decode(data, svg=svg)
