"""Pillow renderer for graphical front ends.

Each cell becomes a square tile with a colored disc on a neutral background.
Tiles are cached per (cell, size) so redrawing a board only composites.
"""

from functools import lru_cache
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from grid_chase.state import State
from grid_chase.types import Cell

DEFAULT_RESOLUTION = 480
DEFAULT_MARGIN_PERCENT = 0.12

RGBA = Tuple[int, int, int, int]
ColorMap = Dict[Cell, RGBA]

BACKGROUND_COLOR: RGBA = (40, 40, 48, 255)

DEFAULT_COLOR_MAP: ColorMap = {
    Cell.MONSTER: (76, 175, 80, 255),
    Cell.TARGET: (229, 57, 53, 255),
    Cell.FOOTPRINT: (141, 110, 99, 255),
    Cell.EMPTY: (224, 224, 224, 255),
}


@lru_cache(maxsize=256)
def make_tile(color: RGBA, size: int, margin_percent: float) -> Image.Image:
    """Return a ``size`` x ``size`` tile with a centered disc of ``color``."""
    tile = Image.new("RGBA", (size, size), BACKGROUND_COLOR)
    margin = int(size * margin_percent)
    draw = ImageDraw.Draw(tile)
    draw.ellipse((margin, margin, size - margin - 1, size - margin - 1), fill=color)
    return tile


def render(
    state: State,
    hidden: bool = False,
    resolution: int = DEFAULT_RESOLUTION,
    margin_percent: float = DEFAULT_MARGIN_PERCENT,
    color_map: Optional[ColorMap] = None,
) -> Image.Image:
    """Render the board as a PIL image.

    Args:
        state (State): State to draw.
        hidden (bool): Paint every cell as empty.
        resolution (int): Image width in pixels; height keeps the grid ratio.
        margin_percent (float): Gap between tile edge and disc.
        color_map (ColorMap | None): Disc color per cell kind.

    Returns:
        Image.Image: RGBA image of ``cols * cell`` by ``rows * cell`` pixels.
    """
    colors = color_map or DEFAULT_COLOR_MAP
    cell_size = max(1, resolution // state.cols)
    img = Image.new(
        "RGBA", (state.cols * cell_size, state.rows * cell_size), BACKGROUND_COLOR
    )
    for row, cells in enumerate(state.grid):
        for col, cell in enumerate(cells):
            shown = Cell.EMPTY if hidden else cell
            tile = make_tile(colors[shown], cell_size, margin_percent)
            img.alpha_composite(tile, (col * cell_size, row * cell_size))
    return img


class TextureRenderer:
    resolution: int
    margin_percent: float
    color_map: ColorMap

    def __init__(
        self,
        resolution: int = DEFAULT_RESOLUTION,
        margin_percent: float = DEFAULT_MARGIN_PERCENT,
        color_map: Optional[ColorMap] = None,
    ):
        self.resolution = resolution
        self.margin_percent = margin_percent
        self.color_map = color_map or DEFAULT_COLOR_MAP

    def render(self, state: State, hidden: bool = False) -> Image.Image:
        return render(
            state,
            hidden=hidden,
            resolution=self.resolution,
            margin_percent=self.margin_percent,
            color_map=self.color_map,
        )
