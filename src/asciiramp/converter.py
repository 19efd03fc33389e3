import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageOps

from asciiramp.brightness import BrightnessMapping, brightness_matrix, to_rgb
from asciiramp.charsets import RAMP
from asciiramp.grid import CharGrid
from asciiramp.render import REPEAT, OutputColour, render

# Largest image rendered without downscaling, in pixels (one pixel per character)
MAX_WIDTH = 317
MAX_HEIGHT = 168

logger = logging.getLogger(__name__)


def brightness_to_ascii(matrix: np.ndarray, ramp: str = RAMP) -> list[str]:
    """Map a 0-255 brightness matrix to rows of ramp characters."""
    if not ramp:
        raise ValueError("Character ramp must not be empty")
    indices = np.asarray(matrix, dtype=np.int64) * (len(ramp) - 1) // 255
    chars = np.array(list(ramp))
    return ["".join(chars[row]) for row in indices]


def load_image(path: str | Path) -> Image.Image:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        with Image.open(path) as image:
            return to_rgb(image)
    except (OSError, Image.DecompressionBombError) as exc:
        raise ValueError(f"{path}: {exc}") from exc


def fit_size(width: int, height: int, max_width: int, max_height: int) -> tuple[int, int]:
    """Largest size within max_width x max_height keeping the aspect ratio.

    Sizes already inside the bounds are returned unchanged.
    """
    if max_width < 1 or max_height < 1:
        raise ValueError(f"Size bounds must be positive, got {max_width}x{max_height}")
    if width <= max_width and height <= max_height:
        return width, height
    scale = min(max_width / width, max_height / height)
    return max(1, min(max_width, round(width * scale))), max(1, min(max_height, round(height * scale)))


def prepare_image(
    image: Image.Image,
    max_width: int = MAX_WIDTH,
    max_height: int = MAX_HEIGHT,
    invert: bool = False,
) -> Image.Image:
    """Bound an image to the maximum size and optionally negate it."""
    image = to_rgb(image)
    size = fit_size(image.width, image.height, max_width, max_height)
    if size != image.size:
        logger.debug("Resizing %dx%d to %dx%d", image.width, image.height, *size)
        image = image.resize(size, Image.LANCZOS)
    if invert:
        logger.debug("Inverting image")
        image = ImageOps.invert(image)
    return image


def image_to_grid(
    image: Image.Image | str | Path,
    mapping: BrightnessMapping = BrightnessMapping.AVERAGE,
    ramp: str = RAMP,
    max_width: int = MAX_WIDTH,
    max_height: int = MAX_HEIGHT,
    invert: bool = False,
) -> CharGrid:
    if not isinstance(image, Image.Image):
        image = load_image(image)
    image = prepare_image(image, max_width=max_width, max_height=max_height, invert=invert)

    matrix = brightness_matrix(image, mapping)
    chars = brightness_to_ascii(matrix, ramp)
    logger.debug(
        "Built %dx%d character grid using %s mapping", image.width, image.height, BrightnessMapping(mapping).value
    )
    return CharGrid(chars=chars, colours=np.asarray(image, dtype=np.uint8))


def image_to_ascii(
    image: Image.Image | str | Path,
    mapping: BrightnessMapping = BrightnessMapping.AVERAGE,
    output_colour: OutputColour = OutputColour.DEFAULT,
    ramp: str = RAMP,
    max_width: int = MAX_WIDTH,
    max_height: int = MAX_HEIGHT,
    invert: bool = False,
    repeat: int = REPEAT,
) -> str:
    grid = image_to_grid(image, mapping, ramp=ramp, max_width=max_width, max_height=max_height, invert=invert)
    return render(grid, output_colour, repeat=repeat)
