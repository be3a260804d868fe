from .registry import Registry, registry
from .exceptions import (
    DecodeError,
    ImageIOError,
    MissingFormatError,
    NoImageError,
    PyImgProcError,
    UnsupportedFormatError,
    ValidationError,
)
from .utils import ensure_parent_dir, has_suffix, is_remote, makedir

__all__ = [
    "Registry",
    "registry",

    "PyImgProcError",
    "ImageIOError",
    "DecodeError",
    "ValidationError",
    "UnsupportedFormatError",
    "MissingFormatError",
    "NoImageError",

    "is_remote",
    "has_suffix",
    "makedir",
    "ensure_parent_dir",
]
