"""Primitives: drawable shapes and their SVG element serialization.

Invariants:
    - Primitives are immutable; geometry is stored unrounded
    - to_svg() output is a pure function of the field values
    - Rectangle rotation pivots on (x + width/2, y + height/2), the randomized centre
"""

from dataclasses import dataclass
from typing import Union
from xml.sax.saxutils import escape

from artforge.core.domain_types import HexColor

Point = tuple[float, float]
PathCommand = tuple[str, tuple[float, ...]]


def fmt_number(value: float) -> str:
    """Shortest round-trip text for a number; integral floats drop the '.0'."""
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Polygon:
    points: tuple[Point, ...]
    fill: HexColor
    opacity: float

    def to_svg(self) -> str:
        points = " ".join(f"{fmt_number(x)},{fmt_number(y)}" for x, y in self.points)
        return f'<polygon points="{points}" fill="{self.fill}" opacity="{fmt_number(self.opacity)}"/>'


@dataclass(frozen=True)
class Rectangle:
    x: float
    y: float
    width: float
    height: float
    fill: HexColor
    opacity: float
    rotation: float | None = None
    corner_radius: float | None = None

    @property
    def center(self) -> Point:
        return self.x + self.width / 2, self.y + self.height / 2

    def to_svg(self) -> str:
        attrs = (
            f'x="{fmt_number(self.x)}" y="{fmt_number(self.y)}" '
            f'width="{fmt_number(self.width)}" height="{fmt_number(self.height)}"'
        )
        if self.corner_radius is not None:
            attrs += f' rx="{fmt_number(self.corner_radius)}"'
        attrs += f' fill="{self.fill}" opacity="{fmt_number(self.opacity)}"'
        if self.rotation is not None:
            cx, cy = self.center
            attrs += (
                f' transform="rotate({fmt_number(self.rotation)} '
                f'{fmt_number(cx)} {fmt_number(cy)})"'
            )
        return f"<rect {attrs}/>"


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: HexColor
    opacity: float = 1.0

    def to_svg(self) -> str:
        return (
            f'<circle cx="{fmt_number(self.cx)}" cy="{fmt_number(self.cy)}" '
            f'r="{fmt_number(self.r)}" fill="{self.fill}" opacity="{fmt_number(self.opacity)}"/>'
        )


@dataclass(frozen=True)
class Path:
    """Filled bezier outline (fill set) or stroked polyline (stroke set, fill "none")."""
    commands: tuple[PathCommand, ...]
    fill: HexColor | str
    opacity: float
    stroke: HexColor | None = None
    stroke_width: float | None = None

    @property
    def d(self) -> str:
        parts = []
        for op, args in self.commands:
            parts.append(" ".join([op, *(fmt_number(a) for a in args)]))
        return " ".join(parts)

    @property
    def vertices(self) -> list[Point]:
        """End point of every command that carries coordinates."""
        return [(args[-2], args[-1]) for _, args in self.commands if args]

    def to_svg(self) -> str:
        attrs = f'd="{self.d}"'
        if self.stroke is not None:
            attrs += f' stroke="{self.stroke}"'
        if self.stroke_width is not None:
            attrs += f' stroke-width="{fmt_number(self.stroke_width)}"'
        attrs += f' fill="{self.fill}" opacity="{fmt_number(self.opacity)}"'
        return f"<path {attrs}/>"


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    content: str
    font_size: float
    fill: HexColor
    opacity: float
    font_family: str = "Arial Black"
    anchor: str = "middle"

    def to_svg(self) -> str:
        return (
            f'<text x="{fmt_number(self.x)}" y="{fmt_number(self.y)}" '
            f'font-family="{self.font_family}" font-size="{fmt_number(self.font_size)}" '
            f'fill="{self.fill}" text-anchor="{self.anchor}" '
            f'opacity="{fmt_number(self.opacity)}">{escape(self.content)}</text>'
        )


Primitive = Union[Polygon, Rectangle, Circle, Path, Text]
