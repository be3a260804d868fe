import os
from urllib.parse import urlparse

from iopath.common.file_io import g_pathmgr

from ..utils.logger import get_library_logger

logger = get_library_logger(__name__)

REMOTE_SCHEMES = ("http://", "https://")


def is_remote(source: str) -> bool:
    """Return True when `source` is an http(s) URL rather than a local path."""
    return source.lower().startswith(REMOTE_SCHEMES)


def has_suffix(source: str, suffix: str) -> bool:
    """
    Case-insensitive suffix test on the path part of `source`.

    For URLs the query string and fragment are ignored, so
    ``https://host/logo.svg?v=2`` is still an SVG.
    """
    path = urlparse(source).path if is_remote(source) else source
    return path.lower().endswith(suffix.lower())


def makedir(dir_path):
    """
    Create the directory if it does not exist.
    """
    if not dir_path or g_pathmgr.exists(dir_path):
        return
    logger.debug("Creating directory %s", dir_path)
    g_pathmgr.mkdirs(dir_path)


def ensure_parent_dir(file_path):
    makedir(os.path.dirname(os.fspath(file_path)))


def remove_quietly(file_path):
    """Delete a partially written file; a missing file is not an error."""
    try:
        if g_pathmgr.exists(file_path):
            g_pathmgr.rm(file_path)
    except OSError as e:
        logger.warning("Could not remove partial output %s: %s", file_path, e)
