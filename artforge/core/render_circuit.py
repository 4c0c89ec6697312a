"""Circuit Renderer: orthogonal traces with terminal pads, plus free nodes.

Invariants:
    - Trace count: 15 + floor(next() * 20); each trace: colour, x, y, segment count
      (3 + floor(next() * 5)), then per segment: direction, length (30-110)
    - Every trace is an axis-aligned polyline followed by a radius-6 pad at its end
    - Exactly 10 nodes after all traces: colour, x, y, radius (4-12)
"""

from artforge.core.deterministic_sequence import DeterministicSequence
from artforge.core.palettes import Palette
from artforge.core.primitives import Circle, Path, PathCommand, Primitive

TRACE_STROKE_WIDTH = 3
TRACE_OPACITY = 0.8
PAD_RADIUS = 6
NODE_COUNT = 10
NODE_OPACITY = 0.9

# +x, -x, +y, -y
_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def render_circuit(
    seq: DeterministicSequence, palette: Palette, size: int,
) -> list[Primitive]:
    elements: list[Primitive] = []
    traces = 15 + seq.next_index(20)

    for _ in range(traces):
        color = seq.choice(palette)
        x = seq.next() * size
        y = seq.next() * size
        commands: list[PathCommand] = [("M", (x, y))]

        segments = 3 + seq.next_index(5)
        for _ in range(segments):
            dx, dy = seq.choice(_DIRECTIONS)
            length = seq.uniform(30, 80)
            x += dx * length
            y += dy * length
            commands.append(("L", (x, y)))

        elements.append(Path(
            commands=tuple(commands), fill="none", opacity=TRACE_OPACITY,
            stroke=color, stroke_width=TRACE_STROKE_WIDTH,
        ))
        elements.append(Circle(cx=x, cy=y, r=PAD_RADIUS, fill=color))

    for _ in range(NODE_COUNT):
        color = seq.choice(palette)
        x = seq.next() * size
        y = seq.next() * size
        r = seq.uniform(4, 8)
        elements.append(Circle(cx=x, cy=y, r=r, fill=color, opacity=NODE_OPACITY))

    return elements
