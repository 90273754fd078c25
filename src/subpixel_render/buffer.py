"""
Subpixel compositing buffer.

A monochrome drawing surface that reports three times the width of the RGB
image it stores. Every logical column lands on one subpixel of a backing
pixel, so generic drawing code can address R, G and B individually.
"""

import logging

from PIL import Image

from .brightness import evenly_lit_reference_color

logger = logging.getLogger()

RGB_INDEX = {"R": 0, "G": 1, "B": 2}

# Physical subpixel layout of the panel, left to right
CHANNEL_ORDER = ("R", "G", "B")

SOURCE_GAMMA = 2.2
# Picked by eye from the gamma calibration chart
GAMMA_PER_CHANNEL = (2.2, 2.0, 1.8)


class SubpixelBufferError(Exception):
    """Base class for pixel write failures."""


class NegativeCoordinate(SubpixelBufferError, ValueError):
    def __init__(self, x: int, y: int):
        super().__init__(f"pixel position ({x}, {y}) is negative")
        self.x = x
        self.y = y


class IndexOutOfRange(SubpixelBufferError, IndexError):
    def __init__(self, x: int, y: int, size: tuple[int, int]):
        super().__init__(
            f"pixel position ({x}, {y}) is outside the {size[0]}x{size[1]} buffer"
        )
        self.x = x
        self.y = y
        self.size = size


def channel_for(x: int) -> int:
    """RGB channel index lit by logical column ``x``."""
    return RGB_INDEX[CHANNEL_ORDER[x % 3]]


def channel_intensity(channel: int, on: bool, reference: tuple[int, int, int]) -> int:
    """Corrected byte value stored for one subpixel write."""
    value = reference[channel] / 255.0 * (1.0 if on else 0.0)

    # Rough gamma correction to make the channels look a little more uniform.
    # Probably compensates for the brightness coefficients more than for any
    # real color space difference.
    value = (value ** (1.0 / SOURCE_GAMMA)) ** GAMMA_PER_CHANNEL[channel]

    return int(value * 255)


def debug_expand(image: Image.Image) -> Image.Image:
    """Draw every pixel as a 3x3 block with one column per channel.

    Makes it easy to see which subpixel received which intensity.
    """
    width, height = image.size
    source = image.load()
    expanded = Image.new("RGB", (width * 3, height * 3))
    target = expanded.load()

    for y in range(height):
        for x in range(width):
            pixel = source[x, y]
            for row in range(y * 3, y * 3 + 3):
                for channel in range(3):
                    if pixel[channel] != 0:
                        output = [0, 0, 0]
                        output[channel] = pixel[channel]
                        target[x * 3 + channel, row] = tuple(output)

    return expanded


class SubpixelImageBuffer:
    """Monochrome buffer that emits an image 1/3 of its reported width.

    With ``subpixel=False`` the buffer draws whole pixels instead, which is
    only useful to compare against the subpixel output.
    """

    def __init__(self, width: int, height: int, subpixel: bool = True):
        self.subpixel = subpixel
        self.reference = evenly_lit_reference_color()

        # Rounds the logical width up to the nearest multiple of 3
        backing_width = -(-width // 3) if subpixel else width
        self._image = Image.new("RGB", (backing_width, height))
        self._pixels = self._image.load()

        logger.debug(
            "Created %sx%s buffer backed by %sx%s image, reference color %s",
            width,
            height,
            backing_width,
            height,
            self.reference,
        )

    @property
    def backing_size(self) -> tuple[int, int]:
        return self._image.size

    def dimensions(self) -> tuple[int, int]:
        width, height = self._image.size
        if self.subpixel:
            return width * 3, height
        return width, height

    def set_pixel(self, x: int, y: int, on: bool) -> None:
        if x < 0 or y < 0:
            raise NegativeCoordinate(x, y)

        backing_x = x // 3 if self.subpixel else x
        width, height = self._image.size
        if backing_x >= width or y >= height:
            raise IndexOutOfRange(x, y, self.dimensions())

        if self.subpixel:
            channel = channel_for(x)
            pixel = list(self._pixels[backing_x, y])
            pixel[channel] = channel_intensity(channel, on, self.reference)
        else:
            pixel = [
                channel_intensity(channel, on, self.reference) for channel in range(3)
            ]

        self._pixels[backing_x, y] = tuple(pixel)

    def clear(self, on: bool) -> None:
        width, height = self.dimensions()
        for y in range(height):
            for x in range(width):
                self.set_pixel(x, y, on)

    def into_image(self) -> Image.Image:
        """Hand out the backing image. The buffer should not be drawn on afterwards."""
        return self._image

    def to_image(self) -> Image.Image:
        return self._image.copy()

    def to_non_subpixel_image(self) -> Image.Image:
        """Draw the image using whole pixels instead of subpixels, to debug output."""
        return debug_expand(self._image)
