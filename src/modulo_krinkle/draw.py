"""
Cairo drawing for Modulo Krinkle tilings.

Drawing only reads tile points and metadata. A draw function has the
signature `draw(ctx, tile, center)` and paints one tile translated by
`center`. `DRAW_STYLES` maps a style name to a factory that takes the
tiling and returns such a function.
"""
import colorsys
import logging
import math
from pathlib import Path
from typing import Callable, Optional, Sequence

import cairo

from modulo_krinkle.geometry import Point2D
from modulo_krinkle.tile import AnyTile, TileType
from modulo_krinkle.tiling import Tiling

logger = logging.getLogger(__name__)

DrawFunction = Callable[[cairo.Context, AnyTile, Point2D], None]

STROKE = 0x000000

TILE_TYPE_COLORS: dict[TileType, int] = {
    TileType.BASE: 0xe15759,
    TileType.LEFT: 0x80afe1,
    TileType.MIDDLE: 0xffffff,
    TileType.CENTER: 0xffd700,
    TileType.RIGHT: 0x62ae19,
}

# Palette of the colouring example: gold, pale yellow, teal.
DEFAULT_PALETTE = (0xffd700, 0xffff99, 0x32b2b2)


def mkcolor(hex: int) -> tuple[float, float, float]:
    r, g, b = (hex >> 16) & 0xff, (hex >> 8) & 0xff, (hex & 0xff)
    return r / 255, g / 255, b / 255

def set_color(ctx: cairo.Context, hex: int):
    ctx.set_source_rgb(*mkcolor(hex))

def rainbow_color(
    value: float,
    lo: float,
    hi: float,
    start_hue: float = 0,
    end_hue: float = 360,
    flip: bool = False,
    offset: float = 0,
    counterclockwise: bool = False,
    saturation: float = 1.0,
    brightness: float = 1.0,
) -> tuple[float, float, float]:
    """
    RGB (0..1) for `value` mapped onto the hue arc from start_hue to end_hue.

    Values are clamped to [lo, hi]. `flip` reverses the mapping,
    `counterclockwise` walks the hue circle the other way round.
    """
    if lo == hi:
        t = 0.0
    else:
        value = max(lo, min(hi, value))
        t = (value - lo) / (hi - lo)
    if flip:
        t = 1 - t

    start_hue = start_hue % 360
    end_hue = 360 if end_hue == 360 else end_hue % 360

    if counterclockwise:
        span = start_hue - end_hue
        t = 1 - t
    else:
        span = end_hue - start_hue
    if span < 0:
        span += 360

    hue = (start_hue + t * span + offset) % 360
    saturation = min(abs(saturation), 1)
    brightness = min(abs(brightness), 1)
    return colorsys.hsv_to_rgb(hue / 360, saturation, brightness)


def resolve_index(index: int, count: int) -> int:
    """
    Point index within a tile of `count` points. Negative indices count
    from the far point of the tile (the turnaround), so -1 is the point
    opposite the start.
    """
    half = count // 2
    index = int(math.fmod(index, count))
    if index < 0:
        # wraps within the upper half, so it never runs past the end
        index = half - int(math.fmod(index + 1, half))
    return index


def _shifted(tile: AnyTile, center: Point2D) -> list[Point2D]:
    return [p + center for p in tile.points]

def trace_tile(ctx: cairo.Context, tile: AnyTile, center: Point2D):
    ps = _shifted(tile, center)
    ctx.move_to(*ps[0])
    for xy in ps[1:]:
        ctx.line_to(*xy)
    ctx.close_path()

def _fill_and_stroke(ctx: cairo.Context, fill: tuple[float, float, float]):
    ctx.set_source_rgb(*fill)
    ctx.fill_preserve()
    ctx.set_line_join(cairo.LINE_JOIN_ROUND)
    set_color(ctx, STROKE)
    ctx.stroke()


def draw_basic_tile(ctx: cairo.Context, tile: AnyTile, center: Point2D):
    trace_tile(ctx, tile, center)
    ctx.set_line_join(cairo.LINE_JOIN_ROUND)
    set_color(ctx, STROKE)
    ctx.stroke()

def draw_by_tile_type(ctx: cairo.Context, tile: AnyTile, center: Point2D):
    trace_tile(ctx, tile, center)
    _fill_and_stroke(ctx, mkcolor(TILE_TYPE_COLORS[tile.tile_type]))

def draw_with_colors(colors: Sequence[int] = DEFAULT_PALETTE) -> DrawFunction:
    """Fills tiles cycling through `colors` in drawing order."""
    counter = 0

    def draw(ctx: cairo.Context, tile: AnyTile, center: Point2D):
        nonlocal counter
        trace_tile(ctx, tile, center)
        _fill_and_stroke(ctx, mkcolor(colors[counter % len(colors)]))
        counter += 1

    return draw

def draw_by_wedge(wedge_count: int) -> DrawFunction:
    """Fills every wedge with its own hue."""
    def draw(ctx: cairo.Context, tile: AnyTile, center: Point2D):
        trace_tile(ctx, tile, center)
        _fill_and_stroke(ctx, rainbow_color(tile.wedge_index, 0, max(wedge_count - 1, 0),
                                            end_hue=300, saturation=0.55))
    return draw

def draw_circles(size: float = 3, indices: Sequence[int] = (0, -1)) -> DrawFunction:
    """Dots at the given tile points. Default: start and far point."""
    def draw(ctx: cairo.Context, tile: AnyTile, center: Point2D):
        ps = _shifted(tile, center)
        set_color(ctx, STROKE)
        for i in indices:
            p = ps[resolve_index(i, len(ps))]
            ctx.new_sub_path()
            ctx.arc(p.x, p.y, size, 0, 2 * math.pi)
            ctx.fill()
    return draw

def draw_lines(indices: Sequence = (0, -1)) -> DrawFunction:
    """
    Polylines through the given tile points. `indices` is one sequence of
    indices or a sequence of them, one polyline each.
    """
    if indices and isinstance(indices[0], int):
        indices = [indices]

    def draw(ctx: cairo.Context, tile: AnyTile, center: Point2D):
        ps = _shifted(tile, center)
        set_color(ctx, STROKE)
        for line in indices:
            points = [ps[resolve_index(i, len(ps))] for i in line]
            ctx.move_to(*points[0])
            for p in points[1:]:
                ctx.line_to(*p)
            ctx.stroke()
    return draw

def draw_cross_weave(include_first: bool = False, include_last: bool = False) -> DrawFunction:
    """Lines joining each point of the lower half to its partner on the upper half."""
    skip_start = 0 if include_first else 1
    skip_end = 0 if include_last else 1

    def draw(ctx: cairo.Context, tile: AnyTile, center: Point2D):
        ps = _shifted(tile, center)
        count = len(ps)
        half = count // 2
        set_color(ctx, STROKE)
        for j in range(1 + skip_start, half - skip_end):
            ctx.move_to(*ps[count - j])
            ctx.line_to(*ps[j])
            ctx.stroke()
    return draw


DRAW_STYLES: dict[str, Callable[[Tiling], DrawFunction]] = {
    "basic": lambda tiling: draw_basic_tile,
    "types": lambda tiling: draw_by_tile_type,
    "colors": lambda tiling: draw_with_colors(),
    "wedges": lambda tiling: draw_by_wedge(len(tiling.wedges)),
    "crossweave": lambda tiling: draw_cross_weave(True, True),
    "circles": lambda tiling: draw_circles(tiling.config.unit_length / 4),
    "lines": lambda tiling: draw_lines(),
}


def draw_tiling(
    ctx: cairo.Context,
    tiling: Tiling,
    center: Point2D = Point2D.zero(),
    style: str = "basic",
    draw: Optional[DrawFunction] = None,
) -> int:
    """
    Draw every tile of `tiling`, wedge by wedge. An explicit `draw`
    function overrides `style`. Returns the number of tiles drawn.

    Raises:
        KeyError: for an unknown style name.
    """
    if draw is None:
        draw = DRAW_STYLES[style](tiling)
    ctx.set_line_width(tiling.config.unit_length / 10)
    count = 0
    for tile in tiling.tiles():
        draw(ctx, tile, center)
        count += 1
    return count


def render(tiling: Tiling, path: str | Path, size: int = 1080, style: str = "types", margin: float = 0.05):
    """
    Render `tiling` centred on a square canvas, to PNG or SVG by suffix.

    Raises:
        ValueError: for any other suffix.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".png":
        surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, size, size)
    elif suffix == ".svg":
        surface = cairo.SVGSurface(str(path), size, size)
    else:
        raise ValueError(f"unsupported output format: {path.suffix!r}")

    try:
        ctx = cairo.Context(surface)
        set_color(ctx, 0xffffff)
        ctx.paint()

        min_x, min_y, max_x, max_y = tiling.bounds()
        extent = max(max_x - min_x, max_y - min_y, 1e-9)
        model2surface = size * (1 - 2 * margin) / extent

        # Model y points up, surface y points down.
        ctx.translate(size / 2, size / 2)
        ctx.scale(model2surface, -model2surface)
        center = Point2D(-(min_x + max_x) / 2, -(min_y + max_y) / 2)

        count = draw_tiling(ctx, tiling, center, style)

        if suffix == ".png":
            surface.write_to_png(str(path))
    finally:
        surface.finish()
    logger.info("Wrote %d tiles of %s to %s", count, tiling, path)
