"""Exception hierarchy raised by pyimgproc.

Every error aborts the current call and is surfaced to the caller. Underlying
causes (``OSError``, ``requests`` exceptions, Pillow/Cairo decode failures) are
chained via ``raise ... from exc``.
"""


class PyImgProcError(Exception):
    """Base class for all library errors."""


class ImageIOError(PyImgProcError, OSError):
    """A file could not be read or written, or a download failed."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(PyImgProcError, ValueError):
    """Bytes could not be decoded into an image (raster or SVG)."""


class ValidationError(PyImgProcError, ValueError):
    """An argument was rejected before any pixel work started."""


class UnsupportedFormatError(ValidationError):
    def __init__(self, fmt):
        super().__init__(f"unsupported format: {fmt}")
        self.format = fmt


class MissingFormatError(ValidationError):
    def __init__(self):
        super().__init__("no format specified for conversion")


class NoImageError(PyImgProcError, RuntimeError):
    """An operation needed an image but the processor holds none."""

    def __init__(self, operation=None):
        message = "no image loaded"
        if operation:
            message = f"cannot {operation}: {message}"
        super().__init__(message)
        self.operation = operation
