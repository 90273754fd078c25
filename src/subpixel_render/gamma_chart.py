"""
Gamma calibration chart.

Each color section compares a 50% line dither (left) with solid rows whose
gamma grows from 1.0 at the top to 3.0 at the bottom (right). The label next
to the row where both halves look equally bright gives the channel's gamma.
"""

import logging

from PIL import Image, ImageDraw, ImageFont

logger = logging.getLogger()

SECTION_COLORS = [
    (255, 255, 255),
    (255, 0, 0),
    (0, 255, 0),
    (0, 0, 255),
]
LABEL_SPACING = 15


def gamma_for_row(y: int, height: int) -> float:
    return 1.0 + y / height * 2.0


def half_intensity(gamma: float) -> float:
    """Brightness of 50% gray shown with ``gamma``.

    Goes through two "to linear" transforms: the first one leaves sRGB and the
    second one undoes the space so the custom gamma can be applied.
    """
    return ((0.5 ** (1.0 / 2.2)) ** (1.0 / 2.2)) ** gamma


def render_gamma_chart(section_width: int = 200, height: int = 600) -> Image.Image:
    chart = Image.new("RGB", (section_width * len(SECTION_COLORS), height))
    draw = ImageDraw.Draw(chart)
    font = ImageFont.load_default()
    middle = section_width // 2

    for index, color in enumerate(SECTION_COLORS):
        x0 = index * section_width

        for y in range(height):
            if y % 2 == 0:
                draw.line([(x0, y), (x0 + middle, y)], fill=color)

            half = half_intensity(gamma_for_row(y, height))
            shade = tuple(int(half * channel) for channel in color)
            draw.line([(x0 + middle, y), (x0 + section_width - 1, y)], fill=shade)

        for y in range(LABEL_SPACING // 2, height - LABEL_SPACING // 2):
            if y % LABEL_SPACING == 0:
                label = f"{gamma_for_row(y, height):.2f}"
                _, top, _, bottom = font.getbbox(label)
                draw.text(
                    (x0 + section_width * 3 // 4, y - (top + bottom) // 2),
                    label,
                    fill=(255, 255, 255),
                    font=font,
                )

    logger.debug("Rendered %sx%s gamma chart", chart.width, chart.height)
    return chart
