"""Geometric Renderer: overlapping triangles, rotated rectangles and circles.

Invariants:
    - Shape count: 8 + floor(next() * 12)
    - Per shape draw order: colour, opacity, x, y, then the shape branch
    - Branch: next() > 0.5 -> triangle; else next() > 0.5 -> rectangle; else circle
"""

from artforge.core.deterministic_sequence import DeterministicSequence
from artforge.core.palettes import Palette
from artforge.core.primitives import Circle, Polygon, Primitive, Rectangle


def render_geometric(
    seq: DeterministicSequence, palette: Palette, size: int,
) -> list[Primitive]:
    shapes: list[Primitive] = []
    count = 8 + seq.next_index(12)

    for _ in range(count):
        color = seq.choice(palette)
        opacity = seq.uniform(0.3, 0.5)
        x = seq.next() * size
        y = seq.next() * size

        if seq.next() > 0.5:
            s = seq.uniform(30, 80)
            shapes.append(Polygon(
                points=((x, y - s), (x - s, y + s), (x + s, y + s)),
                fill=color, opacity=opacity,
            ))
        elif seq.next() > 0.5:
            w = seq.uniform(30, 100)
            h = seq.uniform(30, 100)
            angle = seq.next() * 360
            shapes.append(Rectangle(
                x=x, y=y, width=w, height=h,
                fill=color, opacity=opacity, rotation=angle,
            ))
        else:
            r = seq.uniform(20, 60)
            shapes.append(Circle(cx=x, cy=y, r=r, fill=color, opacity=opacity))

    return shapes
