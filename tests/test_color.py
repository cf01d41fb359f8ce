import pytest

from fractalview.color import hsv_to_rgb, pixel_color, rgb_to_hsv


def test_pure_red_from_hue_zero():
    assert hsv_to_rgb(0, 1, 1) == (1.0, 0.0, 0.0)


@pytest.mark.parametrize(
    "rgb",
    [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0), (0.2, 0.4, 0.6), (0.9, 0.1, 0.5)],
)
def test_round_trip(rgb):
    assert hsv_to_rgb(*rgb_to_hsv(*rgb)) == pytest.approx(rgb)


def test_zero_saturation_is_gray():
    assert hsv_to_rgb(123.0, 0.0, 0.7) == (0.7, 0.7, 0.7)


def test_hue_360_wraps_to_zero():
    assert hsv_to_rgb(360.0, 0.5, 0.8) == hsv_to_rgb(0.0, 0.5, 0.8)


def test_gray_has_no_hue_or_saturation():
    assert rgb_to_hsv(0.5, 0.5, 0.5) == (0.0, 0.0, 0.5)


def test_black_to_hsv():
    assert rgb_to_hsv(0.0, 0.0, 0.0) == (0.0, 0.0, 0.0)


@pytest.mark.parametrize("hue", [180, 200, 220, 240])
def test_inside_points_are_black(hue):
    assert pixel_color(hue, 0) == (0, 0, 0)


def test_cyan_hue_wraps_bright_channels():
    assert pixel_color(180, 1) == (0, 248, 248)


@pytest.mark.parametrize("hue", range(0, 360, 15))
def test_pixel_channels_are_bytes(hue):
    color = pixel_color(hue, 1)
    assert len(color) == 3
    assert all(0 <= channel <= 255 for channel in color)