"""
Generate the gamma calibration chart.

Outputs gamma.png in $SCREENSHOT_DIR (default ./screenshots). Show it on the
panel at 1:1 and read off, per color, the label where the dithered and the
solid half match. Those values end up in buffer.GAMMA_PER_CHANNEL.
"""

import logging
import os
import sys
from pathlib import Path

from subpixel_render.gamma_chart import render_gamma_chart

logger = logging.getLogger()


def main() -> int:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    output_dir = Path(os.environ.get("SCREENSHOT_DIR", "screenshots"))

    chart = render_gamma_chart()
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        chart.save(output_dir / "gamma.png", format="PNG")
    except OSError as exc:
        logger.error("Failed to save gamma chart: %s", exc)
        return 1

    print(f"Wrote {output_dir / 'gamma.png'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
