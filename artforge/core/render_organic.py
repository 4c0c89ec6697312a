"""Organic Renderer: smoothed hexagonal blobs.

Invariants:
    - Blob count: 5 + floor(next() * 8)
    - Per blob: colour, opacity (0.4-0.8), cx, cy, radius (40-140), then 6 variations (0.7-1.3)
    - Outline: M p0, then Q through each point to the midpoint with its successor, Z
"""

import math

from artforge.core.deterministic_sequence import DeterministicSequence
from artforge.core.palettes import Palette
from artforge.core.primitives import Path, PathCommand, Point, Primitive

BLOB_POINTS = 6


def _blob_outline(points: list[Point]) -> tuple[PathCommand, ...]:
    commands: list[PathCommand] = [("M", points[0])]
    for j, (x1, y1) in enumerate(points):
        x2, y2 = points[(j + 1) % len(points)]
        commands.append(("Q", (x1, y1, (x1 + x2) / 2, (y1 + y2) / 2)))
    commands.append(("Z", ()))
    return tuple(commands)


def render_organic(
    seq: DeterministicSequence, palette: Palette, size: int,
) -> list[Primitive]:
    blobs: list[Primitive] = []
    count = 5 + seq.next_index(8)

    for _ in range(count):
        color = seq.choice(palette)
        opacity = seq.uniform(0.4, 0.4)
        cx = seq.next() * size
        cy = seq.next() * size
        r = seq.uniform(40, 100)

        points = []
        for j in range(BLOB_POINTS):
            angle = (j / BLOB_POINTS) * math.pi * 2
            variation = seq.uniform(0.7, 0.6)
            points.append((
                cx + math.cos(angle) * r * variation,
                cy + math.sin(angle) * r * variation,
            ))

        blobs.append(Path(commands=_blob_outline(points), fill=color, opacity=opacity))

    return blobs
