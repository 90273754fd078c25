"""
Render the subpixel example scene for both text colors.

Outputs (in $SCREENSHOT_DIR, default ./screenshots):
- example-on.png / example-off.png: images to show on the panel at 1:1
- example-big-on.png / example-big-off.png: 3x3 blocks per pixel for inspection
"""

import logging
import os
import sys
from pathlib import Path

from subpixel_render.buffer import SubpixelBufferError
from subpixel_render.example import save_example

logger = logging.getLogger()


def main() -> int:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    output_dir = Path(os.environ.get("SCREENSHOT_DIR", "screenshots"))

    for text_color in (True, False):
        try:
            paths = save_example(output_dir, text_color)
        except (SubpixelBufferError, OSError) as exc:
            logger.error("Failed to render example: %s", exc)
            return 1
        for path in paths:
            print(f"Wrote {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
