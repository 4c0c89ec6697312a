"""Render Dispatch: exhaustive mapping from a renderable Style to its renderer.

Invariants:
    - Every renderable Style has exactly one renderer; FACES has none
    - gradient_palette() returns STACKS_PALETTE for STACKS, the drawn palette otherwise
"""

from typing import Callable

from artforge.core.deterministic_sequence import DeterministicSequence
from artforge.core.domain_types import Style
from artforge.core.palettes import Palette, STACKS_PALETTE
from artforge.core.primitives import Primitive
from artforge.core.render_circuit import render_circuit
from artforge.core.render_geometric import render_geometric
from artforge.core.render_organic import render_organic
from artforge.core.render_pixel import render_pixel
from artforge.core.render_stacks import render_stacks

Renderer = Callable[[DeterministicSequence, Palette, int], list[Primitive]]


def renderer_for(style: Style) -> Renderer:
    match style:
        case Style.GEOMETRIC:
            return render_geometric
        case Style.ORGANIC:
            return render_organic
        case Style.PIXEL:
            return render_pixel
        case Style.CIRCUIT:
            return render_circuit
        case Style.STACKS:
            return render_stacks
        case Style.FACES:
            raise ValueError("faces is served by a FaceImageProvider, not a renderer")


def gradient_palette(style: Style, drawn: Palette) -> Palette:
    if style is Style.STACKS:
        return STACKS_PALETTE
    return drawn
