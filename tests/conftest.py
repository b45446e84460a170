"""
Shared pytest fixtures for upscale tests.
"""

import numpy as np
import pytest
from PIL import Image


RED = (255, 0, 0, 255)


@pytest.fixture
def red_image():
    """Opaque 2x2 all-red image."""
    return Image.new("RGBA", (2, 2), RED)


@pytest.fixture
def gradient_image():
    """30x20 RGBA image with a color gradient and varying alpha."""
    ys, xs = np.mgrid[0:20, 0:30]
    arr = np.zeros((20, 30, 4), dtype=np.uint8)
    arr[..., 0] = xs * 8
    arr[..., 1] = ys * 12
    arr[..., 2] = 128
    arr[..., 3] = 255 - xs * 4
    return Image.fromarray(arr)


@pytest.fixture
def png_file(tmp_path, red_image):
    """Path to a 2x2 red PNG on disk."""
    path = tmp_path / "red.png"
    red_image.save(path, format="PNG")
    return path
