"""Style Catalog: ordered style ids with display names and descriptions.

Invariants:
    - Iteration order: geometric, organic, pixel, circuit, stacks, faces
    - resolve_render_style() is the only place raw strings become a renderable Style;
      anything it does not recognise (including faces) renders as GEOMETRIC
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType

from artforge.core.domain_types import Style

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleInfo:
    name: str
    description: str


STYLE_CATALOG: MappingProxyType[Style, StyleInfo] = MappingProxyType({
    Style.GEOMETRIC: StyleInfo("Geometric", "Sharp angles and bold shapes"),
    Style.ORGANIC: StyleInfo("Organic", "Flowing curves and natural forms"),
    Style.PIXEL: StyleInfo("Pixel", "Retro 8-bit aesthetic"),
    Style.CIRCUIT: StyleInfo("Circuit", "Digital circuitry patterns"),
    Style.STACKS: StyleInfo("Stacks", "Stacks ecosystem themed"),
    Style.FACES: StyleInfo("Bitcoin Faces", "Unique faces from bitcoinfaces.xyz"),
})

RENDERABLE_STYLES: tuple[Style, ...] = (
    Style.GEOMETRIC, Style.ORGANIC, Style.PIXEL, Style.CIRCUIT, Style.STACKS,
)


def style_ids() -> list[str]:
    return [style.value for style in STYLE_CATALOG]


def lookup_style(raw: str) -> Style | None:
    """Catalog lookup by id; None when the id is not in the catalog."""
    try:
        return Style(raw)
    except ValueError:
        return None


def display_name(raw: str) -> str:
    """Catalog display name, or the raw id when it is not in the catalog."""
    style = lookup_style(raw)
    if style is None:
        return raw
    return STYLE_CATALOG[style].name


def resolve_render_style(raw: str) -> Style:
    """Map a raw style string to a renderer, falling back to GEOMETRIC."""
    style = lookup_style(raw)
    if style in RENDERABLE_STYLES:
        return style
    logger.debug("Style %r has no renderer, using geometric", raw)
    return Style.GEOMETRIC
