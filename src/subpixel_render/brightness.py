"""
Perceived brightness helpers.

Finds a reference color whose channels, lit one at a time, look as bright
as a fully lit blue channel.
"""

import math

# From https://alienryderflex.com/hsp.html
LUMINANCE_WEIGHTS = (0.299, 0.587, 0.114)


def perceived_brightness(r: float, g: float, b: float) -> float:
    """Perceived brightness of a color with channels normalized to [0, 1]."""
    r_weight, g_weight, b_weight = LUMINANCE_WEIGHTS
    return math.sqrt(r_weight * r**2 + g_weight * g**2 + b_weight * b**2)


def evenly_lit_reference_color() -> tuple[int, int, int]:
    """A color where each channel is approximately the same perceptual brightness.

    Should be a light purple.
    """
    # Blue is the weakest channel, so the other channels get dimmed to match it
    desired_brightness = perceived_brightness(0.0, 0.0, 1.0)

    r_weight, g_weight, _ = LUMINANCE_WEIGHTS
    r = math.sqrt(desired_brightness**2 / r_weight)
    g = math.sqrt(desired_brightness**2 / g_weight)

    return (int(r * 255), int(g * 255), 255)
