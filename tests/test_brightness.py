import math

from subpixel_render import brightness


def test_luminance_weights_sum_to_one():
    assert math.isclose(sum(brightness.LUMINANCE_WEIGHTS), 1.0)


def test_reference_color_is_evenly_lit():
    max_brightness = brightness.perceived_brightness(0.0, 0.0, 1.0)
    r, g, b = brightness.evenly_lit_reference_color()

    threshold = 0.002
    assert math.isclose(
        brightness.perceived_brightness(r / 255, 0.0, 0.0),
        max_brightness,
        abs_tol=threshold,
    )
    assert math.isclose(
        brightness.perceived_brightness(0.0, g / 255, 0.0),
        max_brightness,
        abs_tol=threshold,
    )
    assert math.isclose(
        brightness.perceived_brightness(0.0, 0.0, b / 255),
        max_brightness,
        abs_tol=threshold,
    )


def test_reference_color_dims_red_and_green():
    assert brightness.evenly_lit_reference_color() == (157, 112, 255)


def test_perceived_brightness_of_white_is_one():
    assert math.isclose(brightness.perceived_brightness(1.0, 1.0, 1.0), 1.0)
