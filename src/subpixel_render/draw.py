"""
Drawing onto anything that exposes ``dimensions()`` and ``set_pixel()``.

Shapes and text are rasterized by Pillow's ImageDraw into a 1-bit mask that
covers the primitive, then every lit mask pixel is replayed on the target.
The target decides what a pixel write means (see SubpixelImageBuffer).
"""

from typing import Callable, Protocol

from PIL import Image, ImageDraw, ImageFont

Point = tuple[int, int]
Rect = tuple[int, int, int, int]  # left, top, width, height


class DrawTarget(Protocol):
    def dimensions(self) -> tuple[int, int]: ...

    def set_pixel(self, x: int, y: int, on: bool) -> None: ...


class Translated:
    """Moves everything drawn on it by ``offset``."""

    def __init__(self, parent: DrawTarget, offset: Point):
        self.parent = parent
        self.offset = offset

    def dimensions(self) -> tuple[int, int]:
        return self.parent.dimensions()

    def set_pixel(self, x: int, y: int, on: bool) -> None:
        self.parent.set_pixel(x + self.offset[0], y + self.offset[1], on)


class Clipped:
    """Drops pixels outside ``rect``."""

    def __init__(self, parent: DrawTarget, rect: Rect):
        self.parent = parent
        self.rect = rect

    def dimensions(self) -> tuple[int, int]:
        return self.parent.dimensions()

    def set_pixel(self, x: int, y: int, on: bool) -> None:
        left, top, width, height = self.rect
        if left <= x < left + width and top <= y < top + height:
            self.parent.set_pixel(x, y, on)


class Cropped:
    """A ``rect`` sized window whose origin is the top left corner of ``rect``."""

    def __init__(self, parent: DrawTarget, rect: Rect):
        left, top, width, height = rect
        self.parent = Translated(Clipped(parent, rect), (left, top))
        self.size = (width, height)

    def dimensions(self) -> tuple[int, int]:
        return self.size

    def set_pixel(self, x: int, y: int, on: bool) -> None:
        width, height = self.size
        if 0 <= x < width and 0 <= y < height:
            self.parent.set_pixel(x, y, on)


def translated(target: DrawTarget, offset: Point) -> Translated:
    return Translated(target, offset)


def clipped(target: DrawTarget, rect: Rect) -> Clipped:
    return Clipped(target, rect)


def cropped(target: DrawTarget, rect: Rect) -> Cropped:
    return Cropped(target, rect)


def _stamp(
    target: DrawTarget,
    box: tuple[int, int, int, int],
    color: bool,
    paint: Callable[[ImageDraw.ImageDraw, int, int], None],
) -> None:
    """Rasterize ``paint`` inside ``box`` (left, top, right, bottom) onto ``target``.

    ``paint`` gets the mask's drawing context and the mask origin, and must
    subtract the origin from its coordinates. The first failing pixel write
    aborts the primitive.
    """
    left, top, right, bottom = box
    width = right - left
    height = bottom - top
    if width <= 0 or height <= 0:
        return

    mask = Image.new("1", (width, height))
    paint(ImageDraw.Draw(mask), left, top)

    pixels = mask.load()
    for y in range(height):
        for x in range(width):
            if pixels[x, y]:
                target.set_pixel(left + x, top + y, color)


def line(
    target: DrawTarget, start: Point, end: Point, color: bool, width: int = 1
) -> None:
    pad = width + 1
    box = (
        min(start[0], end[0]) - pad,
        min(start[1], end[1]) - pad,
        max(start[0], end[0]) + pad + 1,
        max(start[1], end[1]) + pad + 1,
    )

    def paint(draw, left, top):
        draw.line(
            [(start[0] - left, start[1] - top), (end[0] - left, end[1] - top)],
            fill=1,
            width=width,
        )

    _stamp(target, box, color, paint)


def circle(
    target: DrawTarget,
    top_left: Point,
    diameter: int,
    color: bool,
    stroke_width: int = 1,
    fill: bool = False,
) -> None:
    if diameter <= 0:
        return
    x, y = top_left
    box = (x, y, x + diameter, y + diameter)

    def paint(draw, left, top):
        draw.ellipse(
            [x - left, y - top, x - left + diameter - 1, y - top + diameter - 1],
            outline=1,
            fill=1 if fill else None,
            width=stroke_width,
        )

    _stamp(target, box, color, paint)


def rectangle(
    target: DrawTarget,
    top_left: Point,
    size: tuple[int, int],
    color: bool,
    stroke_width: int = 1,
    fill: bool = False,
) -> None:
    x, y = top_left
    width, height = size
    if width <= 0 or height <= 0:
        return
    box = (x, y, x + width, y + height)

    def paint(draw, left, top):
        draw.rectangle(
            [x - left, y - top, x - left + width - 1, y - top + height - 1],
            outline=1,
            fill=1 if fill else None,
            width=stroke_width,
        )

    _stamp(target, box, color, paint)


def text(
    target: DrawTarget,
    content: str,
    position: Point,
    color: bool,
    font: ImageFont.ImageFont | ImageFont.FreeTypeFont | None = None,
) -> None:
    """Draw ``content`` with the top left of the text box at ``position``."""
    if not content:
        return
    if font is None:
        font = ImageFont.load_default()
    x, y = position
    text_left, text_top, text_right, text_bottom = font.getbbox(content)
    box = (
        x + int(text_left) - 1,
        y + int(text_top) - 1,
        x + int(text_right) + 1,
        y + int(text_bottom) + 1,
    )

    def paint(draw, left, top):
        draw.text((x - left, y - top), content, fill=1, font=font)

    _stamp(target, box, color, paint)


def clear(target: DrawTarget, color: bool) -> None:
    width, height = target.dimensions()
    for y in range(height):
        for x in range(width):
            target.set_pixel(x, y, color)
