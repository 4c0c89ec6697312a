"""Preview: SVG artwork for a (style, seed) pair.

Invariants:
    - Unknown style -> 400 INVALID_STYLE with the available ids
    - faces is answered by the injected FaceImageProvider, with a public cache header
    - Other styles are rendered by core.generate_art (same input -> same bytes)
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from artforge.api.routes.route_helpers import (
    get_face_provider, require_catalog_style, resolve_canvas_size,
)
from artforge.config import Settings, get_settings
from artforge.core.collaborator_protocols import FaceImageProvider
from artforge.core.domain_types import Style
from artforge.core.generate_art import generate_svg

router = APIRouter(prefix="/api/v1/preview", tags=["preview"])

SVG_MEDIA_TYPE = "image/svg+xml"


@router.get("/{style}/{seed}")
async def preview_artwork(
    style: str,
    seed: str,
    size: int | None = Query(None),
    settings: Settings = Depends(get_settings),
    faces: FaceImageProvider = Depends(get_face_provider),
):
    catalog_style = require_catalog_style(style, seed)

    if catalog_style is Style.FACES:
        return Response(
            content=faces.render(seed),
            media_type=SVG_MEDIA_TYPE,
            headers={"Cache-Control": f"public, max-age={settings.preview_cache_max_age}"},
        )

    canvas_size = resolve_canvas_size(size, settings)
    svg = generate_svg(seed, catalog_style.value, canvas_size)
    return Response(content=svg, media_type=SVG_MEDIA_TYPE)
