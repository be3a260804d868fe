import io

import numpy as np
import pytest
from PIL import Image

from pyimgproc import ImageFormat, ImageIOError, NoImageError, UnsupportedFormatError
from pyimgproc.common.registry import registry
from pyimgproc.encoder import (
    PNGEncoder,
    encode_image,
    encoder_zoo,
    load_encoder,
    png_compress_level,
)


@pytest.mark.parametrize(
    "tag, expected",
    [
        ("png", ImageFormat.PNG),
        ("PNG", ImageFormat.PNG),
        (".png", ImageFormat.PNG),
        ("jpg", ImageFormat.JPEG),
        (".JPEG", ImageFormat.JPEG),
        ("gif", ImageFormat.GIF),
        ("Bmp", ImageFormat.BMP),
        (".tif", ImageFormat.TIFF),
        ("tiff", ImageFormat.TIFF),
        (ImageFormat.GIF, ImageFormat.GIF),
    ],
)
def test_parse_normalizes_tags(tag, expected):
    assert ImageFormat.parse(tag) is expected


@pytest.mark.parametrize("tag", ["xyz", "svg", "webp", "", ".", "jpeg2000"])
def test_parse_rejects_unknown_tags(tag):
    with pytest.raises(UnsupportedFormatError) as excinfo:
        ImageFormat.parse(tag)
    assert excinfo.value.format == tag
    assert "unsupported format" in str(excinfo.value)


@pytest.mark.parametrize(
    "quality, level",
    [(1, 1), (25, 1), (26, 6), (50, 6), (75, 6), (76, 9), (100, 9)],
)
def test_png_compress_level_buckets(quality, level):
    assert png_compress_level(quality) == level


def test_every_format_has_an_encoder():
    assert registry.list_encoder() == ["bmp", "gif", "jpeg", "png", "tiff"]
    assert dict(encoder_zoo)["png"] == "PNGEncoder"
    assert "JPEGEncoder" in str(encoder_zoo)


def test_load_encoder_returns_registered_class():
    encoder = load_encoder(".PNG")
    assert isinstance(encoder, PNGEncoder)
    assert encoder.format is ImageFormat.PNG


@pytest.mark.parametrize(
    "tag, pil_format",
    [("png", "PNG"), ("jpeg", "JPEG"), ("gif", "GIF"), ("bmp", "BMP"), ("tiff", "TIFF")],
)
def test_encode_writes_requested_container(gradient_image, tag, pil_format):
    buffer = io.BytesIO()
    written = encode_image(gradient_image, buffer, tag, 90)
    assert written is ImageFormat.parse(tag)

    buffer.seek(0)
    with Image.open(buffer) as decoded:
        assert decoded.format == pil_format
        assert decoded.size == gradient_image.size


def test_jpeg_drops_alpha(gradient_image):
    buffer = io.BytesIO()
    encode_image(gradient_image, buffer, "jpg", 90)
    buffer.seek(0)
    with Image.open(buffer) as decoded:
        assert decoded.mode == "RGB"


def test_jpeg_keeps_grayscale():
    buffer = io.BytesIO()
    encode_image(Image.new("L", (8, 8), 90), buffer, "jpeg", 90)
    buffer.seek(0)
    with Image.open(buffer) as decoded:
        assert decoded.mode == "L"


def test_jpeg_quality_changes_output_size():
    rng = np.random.RandomState(0)
    noisy = Image.fromarray(rng.randint(0, 256, (64, 64, 3), dtype=np.uint8))
    low, high = io.BytesIO(), io.BytesIO()
    encode_image(noisy, low, "jpeg", 10)
    encode_image(noisy, high, "jpeg", 95)
    assert len(low.getvalue()) < len(high.getvalue())


def test_png_quality_does_not_change_pixels(gradient_image):
    fast, best = io.BytesIO(), io.BytesIO()
    encode_image(gradient_image, fast, "png", 1)
    encode_image(gradient_image, best, "png", 100)
    fast.seek(0)
    best.seek(0)
    with Image.open(fast) as a, Image.open(best) as b:
        assert np.array_equal(np.asarray(a), np.asarray(b))


def test_unsupported_format_writes_nothing(gradient_image):
    buffer = io.BytesIO()
    with pytest.raises(UnsupportedFormatError):
        encode_image(gradient_image, buffer, "xyz", 90)
    assert buffer.getvalue() == b""


def test_encode_requires_an_image():
    with pytest.raises(NoImageError):
        encode_image(None, io.BytesIO(), "png", 90)


class WriteOnlySink(io.RawIOBase):
    """Pipe-like sink: no seek, accepts at most `chunk` bytes per write."""

    def __init__(self, chunk=64):
        self.chunk = chunk
        self.received = bytearray()

    def writable(self):
        return True

    def seekable(self):
        return False

    def write(self, data):
        taken = bytes(data[: self.chunk])
        self.received.extend(taken)
        return len(taken)


class BrokenSink(io.RawIOBase):
    def writable(self):
        return True

    def write(self, data):
        raise BrokenPipeError("reader went away")


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_encode_into_non_seekable_sink(gradient_image, fmt):
    sink = WriteOnlySink()
    assert encode_image(gradient_image, sink, fmt, 90) is fmt
    with Image.open(io.BytesIO(bytes(sink.received))) as decoded:
        assert decoded.format == fmt.pil_format
        assert decoded.size == gradient_image.size


def test_sink_write_failure_is_io_error(gradient_image):
    with pytest.raises(ImageIOError):
        encode_image(gradient_image, BrokenSink(), "png", 90)


@pytest.mark.parametrize("fmt", list(ImageFormat))
def test_encoder_writes_its_pil_format(gradient_image, fmt):
    buffer = io.BytesIO()
    load_encoder(fmt)(gradient_image, buffer, 90)
    buffer.seek(0)
    with Image.open(buffer) as decoded:
        assert decoded.format == fmt.pil_format
