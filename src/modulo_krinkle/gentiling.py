#!/usr/bin/env -S uv run
# Script to generate Modulo Krinkle tilings.
# References:
# - Miki Imura, A new non-periodic tiling based on modulo arithmetic
#   https://arxiv.org/abs/2506.07638
import argparse
import logging
from typing import Optional, Sequence

from modulo_krinkle.config import UI_BOUNDS
from modulo_krinkle.draw import DRAW_STYLES, render
from modulo_krinkle.errors import ParameterError
from modulo_krinkle.logging_config import setup_logging
from modulo_krinkle.tiling import Tiling
from modulo_krinkle.timing import Timing

logger = logging.getLogger(__name__)

# Parameters of the original drawing script.
CLI_DEFAULTS = {"m": 2, "k": 5, "t": 2, "unit_length": 10.0, "layer_count": 5}


def build_argparser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="modulo-krinkle",
        description="Generate and draw a Modulo Krinkle non-periodic tiling.",
        epilog="Practical ranges: " + ", ".join(
            f"{name} in [{lo}, {hi}]" for name, (lo, hi) in UI_BOUNDS.items()),
    )
    p.add_argument("-m", type=int, default=CLI_DEFAULTS["m"],
                   help="modulus multiplier, 1 <= m <= k (default: %(default)s)")
    p.add_argument("-k", type=int, default=CLI_DEFAULTS["k"],
                   help="directions in each half of a tile (default: %(default)s)")
    p.add_argument("-t", type=int, default=CLI_DEFAULTS["t"],
                   help="rotation parameter, t >= 2 (default: %(default)s)")
    p.add_argument("--offset", action="store_true",
                   help="build the offset variant (half-turn sectors)")
    p.add_argument("--unit-length", type=float, default=CLI_DEFAULTS["unit_length"],
                   help="edge length (default: %(default)s)")
    p.add_argument("--layers", dest="layer_count", type=int, default=CLI_DEFAULTS["layer_count"],
                   help="layers per wedge (default: %(default)s)")
    p.add_argument("--style", choices=sorted(DRAW_STYLES), default="types",
                   help="draw style (default: %(default)s)")
    p.add_argument("--size", type=int, default=1080, help="canvas size in pixels")
    p.add_argument("-o", "--output", default="tiling.png",
                   help="output file, .png or .svg (default: %(default)s)")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--log-file", default=None, help="also write the log to this file")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    try:
        with Timing("build", logger):
            tiling = Tiling(args.m, args.k, args.t, args.offset, args.unit_length, args.layer_count)
    except ParameterError as e:
        parser.error(str(e))

    print(f"{tiling}: {tiling.tile_count} tiles")

    try:
        with Timing("draw", logger):
            render(tiling, args.output, size=args.size, style=args.style)
    except ValueError as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
