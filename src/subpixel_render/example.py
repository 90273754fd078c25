"""
Example scene used to judge subpixel text and line rendering on a panel.
"""

import logging
from pathlib import Path

from . import draw
from .buffer import SubpixelImageBuffer

logger = logging.getLogger()

EXAMPLE_WIDTH = 200
EXAMPLE_HEIGHT = 50


def render_example(text_color: bool, subpixel: bool = True) -> SubpixelImageBuffer:
    """Render the example scene with ``text_color`` on the inverse background."""
    display = SubpixelImageBuffer(EXAMPLE_WIDTH, EXAMPLE_HEIGHT, subpixel=subpixel)
    display.clear(not text_color)

    draw.text(display, "ABCDEF", (3, 0), text_color)
    draw.text(display, "This is a little test!", (3, 11), text_color)

    draw.line(display, (0, 0), (3, 3), text_color)

    # Many lines that blend into solid blocks, all of the same brightness
    lines = draw.translated(display, (9, 40))
    i = 0
    for _ in range(3):
        for _ in range(5):
            draw.line(lines, (i, 0), (i, 6), text_color)
            # same subpixel
            i += 3
        # next subpixel
        i += 1

    # Two and three pixel wide lines at different offsets, all of the same thickness
    for gap, width in ((12, 2), (10, 3)):
        i += gap
        for _ in range(3):
            draw.line(lines, (i, 0), (i, 6), text_color, width=width)
            i += 7

    smiley = draw.translated(display, (150, 20))
    draw.circle(smiley, (0, 0), 15, text_color)
    draw.line(smiley, (4, 4), (4, 5), text_color)
    draw.line(smiley, (10, 4), (10, 5), text_color)
    mouth = draw.clipped(smiley, (0, 8, 15, 6))
    draw.circle(mouth, (4, 3), 7, text_color)

    return display


def save_example(output_dir: Path, text_color: bool) -> list[Path]:
    """Write the example scene and its debug expansion as PNG files."""
    display = render_example(text_color)
    name = "on" if text_color else "off"

    output_dir.mkdir(parents=True, exist_ok=True)
    big_path = output_dir / f"example-big-{name}.png"
    path = output_dir / f"example-{name}.png"

    display.to_non_subpixel_image().save(big_path, format="PNG")
    display.into_image().save(path, format="PNG")
    logger.info("Saved example images: %s, %s", path, big_path)

    return [path, big_path]
