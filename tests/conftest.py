"""Shared fixtures.

Images are created in memory or under pytest's ``tmp_path``; nothing touches
the network.
"""

import numpy as np
import pytest
from PIL import Image

SVG_CIRCLE = (
    '<svg height="100" width="100">'
    '<circle cx="50" cy="50" r="40" stroke="black" stroke-width="3" fill="red" />'
    "</svg>"
)


@pytest.fixture
def red_image():
    return Image.new("RGBA", (200, 200), (255, 0, 0, 255))


@pytest.fixture
def red_png(tmp_path, red_image):
    path = tmp_path / "input.png"
    red_image.save(path, format="PNG")
    return path


@pytest.fixture
def gradient_image():
    """6x4 RGBA image where every pixel is distinct."""
    height, width = 4, 6
    arr = np.zeros((height, width, 4), dtype=np.uint8)
    for y in range(height):
        for x in range(width):
            arr[y, x] = (x * 40, y * 60, (x + y) * 10, 255 - x)
    return Image.fromarray(arr)


@pytest.fixture
def svg_file(tmp_path):
    path = tmp_path / "input.svg"
    path.write_text(SVG_CIRCLE)
    return path