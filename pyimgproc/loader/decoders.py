"""Signature-based raster decoders.

The loader is handed an explicit, ordered list of `Decoder` entries instead of
relying on whatever plugins Pillow happens to have registered. The first entry
whose signature matches the leading bytes decodes the payload.
"""

import io
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from PIL import Image, UnidentifiedImageError

from ..common.exceptions import DecodeError
from ..utils.image_utils import normalize_mode


@dataclass(frozen=True)
class Decoder:
    """
    A container-format detector paired with the Pillow plugin that decodes it.

    Attributes:
        name: Short label used in logs and errors.
        pil_format: Pillow format id passed to ``Image.open(formats=...)``.
        matches: Predicate over the leading bytes of the payload.
    """

    name: str
    pil_format: str
    matches: Callable[[bytes], bool]

    def decode(self, data: bytes) -> Image.Image:
        try:
            with Image.open(io.BytesIO(data), formats=[self.pil_format]) as img:
                img.load()
                # Detach from the buffer before it is closed
                decoded = normalize_mode(img)
                if decoded is img:
                    decoded = img.copy()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
            raise DecodeError(f"failed to decode {self.name} image: {e}") from e
        return decoded


def _prefix(*signatures: bytes) -> Callable[[bytes], bool]:
    return lambda head: any(head.startswith(sig) for sig in signatures)


def _is_webp(head: bytes) -> bool:
    return head[:4] == b"RIFF" and head[8:12] == b"WEBP"


PNG_DECODER = Decoder("png", "PNG", _prefix(b"\x89PNG\r\n\x1a\n"))
JPEG_DECODER = Decoder("jpeg", "JPEG", _prefix(b"\xff\xd8\xff"))
GIF_DECODER = Decoder("gif", "GIF", _prefix(b"GIF87a", b"GIF89a"))
BMP_DECODER = Decoder("bmp", "BMP", _prefix(b"BM"))
TIFF_DECODER = Decoder("tiff", "TIFF", _prefix(b"II*\x00", b"MM\x00*"))
WEBP_DECODER = Decoder("webp", "WEBP", _is_webp)

DEFAULT_DECODERS = (
    PNG_DECODER,
    JPEG_DECODER,
    GIF_DECODER,
    BMP_DECODER,
    TIFF_DECODER,
    WEBP_DECODER,
)


def sniff_format(data: bytes, decoders: Sequence[Decoder] = DEFAULT_DECODERS) -> Optional[Decoder]:
    """Return the first decoder whose signature matches `data`, or None."""
    head = data[:16]
    for decoder in decoders:
        if decoder.matches(head):
            return decoder
    return None
