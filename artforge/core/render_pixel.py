"""Pixel Renderer: sparse grid of square cells.

Invariants:
    - Cell side is 20; columns (x) outer, rows (y) inner, while index < size / 20
    - Each cell: next() > 0.4 paints it (colour, opacity 0.6-1.0), otherwise no draws
"""

import math

from artforge.core.deterministic_sequence import DeterministicSequence
from artforge.core.palettes import Palette
from artforge.core.primitives import Primitive, Rectangle

PIXEL_SIZE = 20
PAINT_THRESHOLD = 0.4


def grid_cells(size: int) -> int:
    """Cells per axis: every index i with i < size / PIXEL_SIZE."""
    return math.ceil(size / PIXEL_SIZE)


def render_pixel(
    seq: DeterministicSequence, palette: Palette, size: int,
) -> list[Primitive]:
    cells: list[Primitive] = []
    grid = grid_cells(size)

    for x in range(grid):
        for y in range(grid):
            if seq.next() > PAINT_THRESHOLD:
                color = seq.choice(palette)
                opacity = seq.uniform(0.6, 0.4)
                cells.append(Rectangle(
                    x=x * PIXEL_SIZE, y=y * PIXEL_SIZE,
                    width=PIXEL_SIZE, height=PIXEL_SIZE,
                    fill=color, opacity=opacity,
                ))

    return cells
