from enum import Enum

import numpy as np
from PIL import Image

# Channel weights for the luminosity mapping (r, g, b)
LUMINOSITY_WEIGHTS = np.array([0.21, 0.72, 0.07])

# Absorbs float error so e.g. luminosity of pure white truncates to 255, not 254
_EPSILON = 1e-6

# Integer modes Pillow uses for 16-bit data
WIDE_INT_MODES = {"I", "I;16", "I;16B", "I;16L", "I;16N"}


class BrightnessMapping(Enum):
    AVERAGE = "average"
    MIN_MAX = "min_max"
    LUMINOSITY = "luminosity"


def _average(rgb: np.ndarray) -> np.ndarray:
    return rgb.sum(axis=-1) / 3


def _min_max(rgb: np.ndarray) -> np.ndarray:
    return (rgb.max(axis=-1) + rgb.min(axis=-1)) / 2


def _luminosity(rgb: np.ndarray) -> np.ndarray:
    return rgb @ LUMINOSITY_WEIGHTS


def to_rgb(image: Image.Image) -> Image.Image:
    """Convert to 8-bit RGB, scaling high bit depth pixels down rather than clipping them."""
    if image.mode in WIDE_INT_MODES:
        # 16-bit samples, keep the high byte
        arr = np.clip(np.asarray(image, dtype=np.int64) >> 8, 0, 255)
        image = Image.fromarray(arr.astype(np.uint8))
    elif image.mode == "F":
        # Float samples are taken as 0.0-1.0
        arr = np.clip(np.asarray(image, dtype=np.float64) * 255, 0, 255)
        image = Image.fromarray(arr.astype(np.uint8))
    return image.convert("RGB")


_MAPPINGS = {
    BrightnessMapping.AVERAGE: _average,
    BrightnessMapping.MIN_MAX: _min_max,
    BrightnessMapping.LUMINOSITY: _luminosity,
}


def brightness_matrix(image: Image.Image, mapping: BrightnessMapping = BrightnessMapping.AVERAGE) -> np.ndarray:
    """Compute per-pixel brightness of an image.

    Returns an int array of shape (rows, cols) with values 0-255, indexed
    [row, col]. Fractional brightness is truncated toward zero.
    """
    rgb = np.asarray(to_rgb(image), dtype=np.float64)
    values = _MAPPINGS[BrightnessMapping(mapping)](rgb)
    return np.clip(np.floor(values + _EPSILON), 0, 255).astype(np.int64)
