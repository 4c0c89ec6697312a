"""Route Helpers: boundary validation shared by route modules.

Invariants:
    - Styles entering over HTTP must be catalog ids (core fallback is never reached via HTTP)
    - Canvas sizes above Settings.max_canvas_size are rejected before rendering
"""

from urllib.parse import quote

from artforge.config import Settings
from artforge.core.domain_types import Style
from artforge.core.errors import ErrorContext, InvalidCanvasSizeError, UnknownStyleError
from artforge.core.style_catalog import lookup_style, style_ids
from artforge.infrastructure.face_placeholder import PlaceholderFaceProvider
from artforge.core.collaborator_protocols import FaceImageProvider


def require_catalog_style(raw: str, seed: str | None = None) -> Style:
    style = lookup_style(raw)
    if style is None:
        raise UnknownStyleError(raw, style_ids(), ErrorContext(seed=seed))
    return style


def resolve_canvas_size(size: int | None, settings: Settings) -> int:
    """Apply the default size and the configured upper bound."""
    if size is None:
        return settings.default_canvas_size
    if size > settings.max_canvas_size:
        raise InvalidCanvasSizeError(
            size, f"must be at most {settings.max_canvas_size}",
        )
    return size


def preview_url(settings: Settings, style: str, seed: str) -> str:
    return f"{settings.public_base_url}/api/v1/preview/{style}/{quote(seed, safe='')}"


def get_face_provider() -> FaceImageProvider:
    return PlaceholderFaceProvider()
