"""Command line front end.

Usage::

    pyimgproc convert input.png output.jpg
    pyimgproc process photo.jpg out.png --resize 300x300 --watermark "(c) me" --quality 50
"""

import argparse
import sys

from .common.exceptions import PyImgProcError
from .processor import ImageProcessor, convert
from .utils.logger import create_console_logger


def parse_size(value: str) -> tuple[int, int]:
    try:
        width, height = (int(v) for v in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"dimensions must be positive, got {value!r}")
    return width, height


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyimgproc",
        description="Load, transform and re-encode images.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_convert = sub.add_parser("convert", help="convert SRC to the format of DST's extension")
    p_convert.add_argument("src", help="input path or http(s) URL")
    p_convert.add_argument("dst", help="output path")

    p_process = sub.add_parser("process", help="apply transforms then save")
    p_process.add_argument("src", help="input path or http(s) URL")
    p_process.add_argument("dst", help="output path")
    p_process.add_argument("--resize", type=parse_size, metavar="WxH")
    p_process.add_argument("--grayscale", action="store_true")
    p_process.add_argument("--rotate", type=int, choices=(90, 180))
    p_process.add_argument("--flip-h", action="store_true", help="flip horizontally")
    p_process.add_argument("--flip-v", action="store_true", help="flip vertically")
    p_process.add_argument("--brightness", type=int, metavar="PERCENT")
    p_process.add_argument("--watermark", metavar="TEXT")
    p_process.add_argument("--quality", type=int)
    p_process.add_argument("--format", dest="fmt", help="output format, overrides DST's extension")
    return parser


def run_process(args) -> None:
    processor = ImageProcessor.open(args.src)
    if args.resize:
        processor.resize(*args.resize)
    if args.grayscale:
        processor.grayscale()
    if args.rotate == 90:
        processor.rotate90()
    elif args.rotate == 180:
        processor.rotate180()
    if args.flip_h:
        processor.flip_horizontal()
    if args.flip_v:
        processor.flip_vertical()
    if args.brightness is not None:
        processor.brightness(args.brightness)
    if args.watermark:
        processor.watermark(args.watermark)
    if args.quality is not None:
        processor.set_quality(args.quality)
    if args.fmt:
        processor.set_format(args.fmt)
    processor.save(args.dst)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logger = create_console_logger("pyimgproc")
    logger.setLevel("DEBUG" if args.verbose else "INFO")

    logger.info("Loading image from: %s", args.src)
    try:
        if args.command == "convert":
            fmt = convert(args.src, args.dst)
        else:
            run_process(args)
            fmt = None
    except PyImgProcError as e:
        logger.error("%s failed: %s", args.command, e)
        return 1

    logger.success("Wrote %s%s", args.dst, f" ({fmt.value})" if fmt else "")
    return 0


if __name__ == "__main__":
    sys.exit(main())
