#!/usr/bin/env python3
"""
Block Number Rendering Demonstration

Prints numbers and clock-style text as large block glyphs on stdout.
Mirrors the two typical uses of the library: a fixed line such as "10:20 7"
and a counter whose value changes between frames.
"""

import sys
import os
import logging

# Allow running from a checkout without installing
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from blockglyph.config import RenderConfig, DEFAULT_BLOCK_SIZE, DEFAULT_TAKEN_VALUE, DEFAULT_EMPTY_VALUE
from blockglyph.glyphs.line import LineBuilder, lines_to_text

logger = logging.getLogger(__name__)


def render_text(config: RenderConfig, text: str) -> list[str]:
    """Render ``text`` (digits, ':' and ' ') as printable lines."""
    rows = LineBuilder.from_config(config).text(text).build_line()
    return lines_to_text(rows)


def render_counter(config: RenderConfig, start: int, frames: int) -> list[list[str]]:
    """Render ``frames`` consecutive counter values starting at ``start``."""
    rendered = []
    for value in range(start, start + frames):
        rows = LineBuilder.from_config(config).number(value).build_line()
        rendered.append(lines_to_text(rows))
        logger.debug(f"Rendered counter value {value}")
    return rendered


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Block glyph number rendering demonstration")
    parser.add_argument("--text", default="10:20 7", help="Text of digits, ':' and spaces to render")
    parser.add_argument("--counter", type=int, default=None, help="Render a counter starting at this value instead")
    parser.add_argument("--frames", type=int, default=3, help="Counter frames to render")
    parser.add_argument("--block-size", type=int, default=DEFAULT_BLOCK_SIZE, help="Cells per block edge")
    parser.add_argument("--on", default=DEFAULT_TAKEN_VALUE, help="Character for covered cells")
    parser.add_argument("--off", default=DEFAULT_EMPTY_VALUE, help="Character for empty cells")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        config = RenderConfig(block_size=args.block_size,
                              taken_value=args.on,
                              default_value=args.off)
        logger.info(f"Rendering with {config}")

        if args.counter is None:
            print('\n'.join(render_text(config, args.text)))
        else:
            for frame in render_counter(config, args.counter, args.frames):
                print('\n'.join(frame))
                print()

    except ValueError as e:
        logger.error(f"Rendering failed: {e}")
        sys.exit(1)
