import argparse

import pytest
from PIL import Image

from pyimgproc.cli import build_parser, main, parse_size


def test_convert_command(red_png, tmp_path):
    out = tmp_path / "out.bmp"
    assert main(["convert", str(red_png), str(out)]) == 0
    with Image.open(out) as img:
        assert img.format == "BMP"
        assert img.size == (200, 200)


def test_process_command_applies_transforms(red_png, tmp_path):
    out = tmp_path / "out.png"
    code = main([
        "process", str(red_png), str(out),
        "--resize", "50x40",
        "--grayscale",
        "--rotate", "90",
        "--flip-h",
        "--format", "tiff",
    ])
    assert code == 0
    with Image.open(out) as img:
        assert img.format == "TIFF"
        assert img.size == (40, 50)
        assert img.mode == "L"


def test_process_with_watermark_and_quality(red_png, tmp_path):
    out = tmp_path / "out.jpg"
    code = main([
        "-v", "process", str(red_png), str(out),
        "--brightness", "-20", "--watermark", "Reduced Quality", "--quality", "50",
    ])
    assert code == 0
    with Image.open(out) as img:
        assert img.format == "JPEG"


def test_failures_return_exit_code_one(tmp_path):
    assert main(["convert", str(tmp_path / "missing.png"), str(tmp_path / "out.png")]) == 1


def test_unsupported_output_returns_exit_code_one(red_png, tmp_path):
    out = tmp_path / "out.xyz"
    assert main(["convert", str(red_png), str(out)]) == 1
    assert not out.exists()


def test_parse_size():
    assert parse_size("300x200") == (300, 200)
    assert parse_size("10X5") == (10, 5)
    for bad in ["300", "ax2", "0x10", "3x-1"]:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_size(bad)


def test_rotate_choices_enforced():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["process", "a.png", "b.png", "--rotate", "45"])
