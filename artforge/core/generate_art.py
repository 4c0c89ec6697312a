"""Art Generation: (seed, style, canvas_size) -> SVG Document.

Invariants:
    - Pure: equal (seed, style, canvas_size) always yields an equal Document
    - Draw order: palette index, background colour index, then the renderer's draws
    - canvas_size <= 0 raises InvalidCanvasSizeError; unknown styles render as geometric
"""

import logging

from artforge.core.compose_document import Document, compose_document
from artforge.core.deterministic_sequence import DeterministicSequence
from artforge.core.errors import ErrorContext, InvalidCanvasSizeError
from artforge.core.palettes import PALETTES
from artforge.core.render_dispatch import gradient_palette, renderer_for
from artforge.core.seed_hash import hash_seed
from artforge.core.style_catalog import resolve_render_style

logger = logging.getLogger(__name__)

DEFAULT_CANVAS_SIZE = 400


def generate_art(
    seed: str, style: str, canvas_size: int = DEFAULT_CANVAS_SIZE,
) -> Document:
    """Render the artwork for seed in style on a square canvas."""
    if canvas_size <= 0:
        raise InvalidCanvasSizeError(
            canvas_size, context=ErrorContext(seed=seed, style=style),
        )

    render_style = resolve_render_style(style)
    digest = hash_seed(seed)
    seq = DeterministicSequence(digest)

    palette = seq.choice(PALETTES)
    # drawn to keep the sequence aligned; not painted
    seq.choice(palette)

    primitives = renderer_for(render_style)(seq, palette, canvas_size)
    logger.debug(
        "Rendered %d primitives with %d draws",
        len(primitives), seq.draws,
        extra={"seed_digest": digest, "style": render_style.value, "canvas_size": canvas_size},
    )
    return compose_document(
        canvas_size, gradient_palette(render_style, palette), primitives,
    )


def generate_svg(
    seed: str, style: str, canvas_size: int = DEFAULT_CANVAS_SIZE,
) -> str:
    return generate_art(seed, style, canvas_size).to_svg()
