import math

from subpixel_render import gamma_chart


def test_gamma_for_row_spans_one_to_three():
    assert gamma_chart.gamma_for_row(0, 600) == 1.0
    assert gamma_chart.gamma_for_row(300, 600) == 2.0
    assert gamma_chart.gamma_for_row(600, 600) == 3.0


def test_half_intensity_decreases_with_gamma():
    assert math.isclose(gamma_chart.half_intensity(1.0), 0.5 ** (1 / 2.2 / 2.2))
    assert gamma_chart.half_intensity(2.0) < gamma_chart.half_intensity(1.0)


def test_chart_layout():
    chart = gamma_chart.render_gamma_chart(section_width=200, height=600)

    assert chart.size == (800, 600)

    # dithered half: full color on even rows, black on odd rows
    assert chart.getpixel((10, 0)) == (255, 255, 255)
    assert chart.getpixel((10, 1)) == (0, 0, 0)
    assert chart.getpixel((210, 0)) == (255, 0, 0)
    assert chart.getpixel((410, 2)) == (0, 255, 0)
    assert chart.getpixel((610, 1)) == (0, 0, 0)

    shade = int(gamma_chart.half_intensity(1.0) * 255)
    assert chart.getpixel((110, 0)) == (shade, shade, shade)
    assert chart.getpixel((710, 0)) == (0, 0, shade)
