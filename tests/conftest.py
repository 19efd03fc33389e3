import pytest
from PIL import Image


@pytest.fixture
def gradient():
    """Horizontal black-to-white RGB gradient, one grey level per column (256x2)."""
    img = Image.new("RGB", (256, 2))
    pixels = img.load()
    for y in range(2):
        for x in range(256):
            pixels[x, y] = (x, x, x)
    return img


@pytest.fixture
def image_file(tmp_path):
    """Save an image to a PNG in tmp_path and return its path."""

    def _save(img, name="image.png"):
        path = tmp_path / name
        img.save(path)
        return path

    return _save
