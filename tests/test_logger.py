import io
import logging

from pyimgproc.utils import create_console_logger, get_library_logger
from pyimgproc.utils.logger import SUCCESS_LEVEL_NUM, ColoredFormatter


def test_console_logger_plain_text_when_not_a_tty():
    stream = io.StringIO()
    logger = create_console_logger("pyimgproc.test.plain", stream=stream)
    logger.success("converted %s", "a.png")
    output = stream.getvalue()
    assert "SUCCESS" in output
    assert "converted a.png" in output
    assert "\033[" not in output


def test_console_logger_colors_on_a_tty():
    class Tty(io.StringIO):
        def isatty(self):
            return True

    stream = Tty()
    logger = create_console_logger("pyimgproc.test.tty", stream=stream)
    logger.warning("careful")
    assert "\033[93mWARNING\033[0m" in stream.getvalue()


def test_console_logger_is_not_duplicated():
    stream = io.StringIO()
    first = create_console_logger("pyimgproc.test.once", stream=stream)
    second = create_console_logger("pyimgproc.test.once", stream=stream)
    assert first is second
    assert sum(isinstance(h.formatter, ColoredFormatter) for h in first.handlers) == 1
    first.info("hello")
    assert stream.getvalue().count("hello") == 1


def test_success_level_respects_threshold():
    stream = io.StringIO()
    logger = create_console_logger("pyimgproc.test.level", level=logging.WARNING, stream=stream)
    assert SUCCESS_LEVEL_NUM < logging.WARNING
    logger.success("hidden")
    assert stream.getvalue() == ""


def test_library_logger_is_silent():
    logger = get_library_logger("pyimgproc.test.library")
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)
