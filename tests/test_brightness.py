import numpy as np
import pytest
from PIL import Image

from asciiramp.brightness import BrightnessMapping, brightness_matrix


@pytest.mark.parametrize(
    "mapping, expected",
    [
        (BrightnessMapping.AVERAGE, 85),
        (BrightnessMapping.MIN_MAX, 127),
        (BrightnessMapping.LUMINOSITY, 53),
    ],
)
def test_pure_red_truncates(mapping, expected):
    img = Image.new("RGB", (1, 1), (255, 0, 0))
    assert brightness_matrix(img, mapping)[0, 0] == expected


@pytest.mark.parametrize("mapping", list(BrightnessMapping))
def test_white_is_255_and_black_is_0(mapping):
    white = Image.new("RGB", (2, 2), (255, 255, 255))
    black = Image.new("RGB", (2, 2), (0, 0, 0))
    np.testing.assert_array_equal(brightness_matrix(white, mapping), 255)
    np.testing.assert_array_equal(brightness_matrix(black, mapping), 0)


def test_mixed_colour():
    img = Image.new("RGB", (1, 1), (10, 20, 30))
    assert brightness_matrix(img, BrightnessMapping.AVERAGE)[0, 0] == 20
    assert brightness_matrix(img, BrightnessMapping.MIN_MAX)[0, 0] == 20
    # 2.1 + 14.4 + 2.1 = 18.6
    assert brightness_matrix(img, BrightnessMapping.LUMINOSITY)[0, 0] == 18


def test_luminosity_weights_green_most():
    red = Image.new("RGB", (1, 1), (200, 0, 0))
    green = Image.new("RGB", (1, 1), (0, 200, 0))
    blue = Image.new("RGB", (1, 1), (0, 0, 200))
    values = [brightness_matrix(img, BrightnessMapping.LUMINOSITY)[0, 0] for img in (red, green, blue)]
    assert values == [42, 144, 14]


def test_average_is_default():
    img = Image.new("RGB", (1, 1), (0, 0, 90))
    assert brightness_matrix(img)[0, 0] == 30


def test_shape_is_rows_by_columns():
    img = Image.new("RGB", (4, 2), (0, 0, 0))
    img.putpixel((3, 1), (255, 255, 255))
    result = brightness_matrix(img)
    assert result.shape == (2, 4)
    assert result[1, 3] == 255
    assert result.sum() == 255


def test_accepts_greyscale_image():
    img = Image.new("L", (3, 3), 100)
    for mapping in BrightnessMapping:
        np.testing.assert_array_equal(brightness_matrix(img, mapping), 100)


def test_accepts_mapping_name():
    img = Image.new("RGB", (1, 1), (255, 0, 0))
    assert brightness_matrix(img, "min_max")[0, 0] == 127


def test_unknown_mapping_rejected():
    img = Image.new("RGB", (1, 1))
    with pytest.raises(ValueError):
        brightness_matrix(img, "median")


def test_sixteen_bit_greyscale_is_scaled_down():
    img = Image.fromarray(np.full((2, 2), 32768, dtype=np.uint16))
    assert img.mode.startswith("I;16")
    np.testing.assert_array_equal(brightness_matrix(img), 128)


def test_float_image_taken_as_unit_range():
    img = Image.fromarray(np.full((1, 2), 0.5, dtype=np.float32))
    assert img.mode == "F"
    np.testing.assert_array_equal(brightness_matrix(img), 127)
