"""CLI entry point for globe chart generation.

Writes one projected frame of the dot globe to a PNG:
    uv run colorglobe-chart --progress 0.25 --color 00ffff
"""

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

from colorglobe.compute import DEFAULT_SWATCH, GLOBE_SWATCHES, run
from colorglobe.config import load_settings
from colorglobe.models import GlobeQuery
from colorglobe.renderers.static import save_static_globe

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> Path:
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Render a dot globe frame to PNG.")
    parser.add_argument("--dots", type=int, default=settings.total_dots)
    parser.add_argument("--progress", type=float, default=0.0, help="Turn fraction 0..1")
    parser.add_argument("--size", type=float, default=280.0, help="Surface edge length")
    parser.add_argument("--seed", type=int, default=settings.seed)
    parser.add_argument(
        "--color",
        default=GLOBE_SWATCHES[DEFAULT_SWATCH].to_hex(),
        help="Dot color as rrggbb or a swatch name (%s)" % ", ".join(GLOBE_SWATCHES),
    )
    parser.add_argument("--output", type=Path, default=None)
    args = parser.parse_args(argv)

    color = args.color
    if color in GLOBE_SWATCHES:
        color = GLOBE_SWATCHES[color].to_hex()

    frame = run(
        GlobeQuery(
            total_dots=args.dots,
            progress=args.progress,
            width=args.size,
            height=args.size,
            seed=args.seed,
            dot_color=color,
        )
    )
    path = save_static_globe(frame, args.output)
    logger.info("Saved globe chart to %s", path)
    print(f"Saved: {path}")
    return path


if __name__ == "__main__":
    main()
