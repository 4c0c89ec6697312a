"""Document Composer: wraps rendered primitives into a complete SVG document.

Invariants:
    - viewBox is "0 0 S S"; one linearGradient id="bg" painted on a full-canvas rect
    - Gradient stops are the first two colours of the palette used for the render,
      each at stop-opacity 0.8
    - Primitives are emitted in list order (later entries paint on top)
"""

from dataclasses import dataclass

from artforge.core.domain_types import HexColor
from artforge.core.primitives import Primitive, fmt_number

GRADIENT_ID = "bg"
GRADIENT_STOP_OPACITY = 0.8


@dataclass(frozen=True)
class Document:
    size: int
    gradient: tuple[HexColor, HexColor]
    primitives: tuple[Primitive, ...]

    def to_svg(self) -> str:
        size = fmt_number(self.size)
        start, end = self.gradient
        opacity = fmt_number(GRADIENT_STOP_OPACITY)
        elements = [
            "<defs>",
            f'  <linearGradient id="{GRADIENT_ID}" x1="0%" y1="0%" x2="100%" y2="100%">',
            f'    <stop offset="0%" stop-color="{start}" stop-opacity="{opacity}"/>',
            f'    <stop offset="100%" stop-color="{end}" stop-opacity="{opacity}"/>',
            "  </linearGradient>",
            "</defs>",
            f'<rect width="{size}" height="{size}" fill="url(#{GRADIENT_ID})"/>',
        ]
        elements.extend(p.to_svg() for p in self.primitives)
        body = "\n  ".join(elements)
        return f"""<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {size} {size}">
  {body}
</svg>"""


def compose_document(
    size: int, palette: tuple[HexColor, ...], primitives: list[Primitive],
) -> Document:
    """Build a Document from a palette and primitives. Pure, no validation."""
    return Document(
        size=size,
        gradient=(palette[0], palette[1]),
        primitives=tuple(primitives),
    )
