"""Stacks Renderer: stacked rounded layers, a bitcoin glyph and floating particles.

Invariants:
    - Uses STACKS_PALETTE only; the palette drawn by the caller is ignored
    - Draw order: glyph size, then per layer (width, height, x jitter), then per
      particle (colour, x, y, radius, opacity)
    - Paint order: 5 layers, glyph, 20 particles
"""

from artforge.core.deterministic_sequence import DeterministicSequence
from artforge.core.palettes import Palette, STACKS_PALETTE
from artforge.core.primitives import Circle, Primitive, Rectangle, Text

LAYER_COUNT = 5
PARTICLE_COUNT = 20
GLYPH = "₿"
GLYPH_COLOR = "#f7931a"


def render_stacks(
    seq: DeterministicSequence, palette: Palette, size: int,
) -> list[Primitive]:
    elements: list[Primitive] = []

    glyph_size = seq.uniform(60, 40)
    cx = size / 2
    cy = size / 2

    for i in range(LAYER_COUNT):
        width = seq.uniform(200, 100)
        height = seq.uniform(40, 20)
        x = (size - width) / 2 + (seq.next() - 0.5) * 40
        elements.append(Rectangle(
            x=x, y=50 + i * 70, width=width, height=height,
            fill=STACKS_PALETTE[i % len(STACKS_PALETTE)],
            opacity=0.7 - i * 0.1, corner_radius=8,
        ))

    elements.append(Text(
        x=cx, y=cy + 20, content=GLYPH, font_size=glyph_size,
        fill=GLYPH_COLOR, opacity=0.9,
    ))

    for _ in range(PARTICLE_COUNT):
        color = seq.choice(STACKS_PALETTE)
        x = seq.next() * size
        y = seq.next() * size
        r = seq.uniform(2, 6)
        opacity = seq.uniform(0.3, 0.5)
        elements.append(Circle(cx=x, cy=y, r=r, fill=color, opacity=opacity))

    return elements
