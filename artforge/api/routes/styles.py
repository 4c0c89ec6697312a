"""Styles & Service Info: catalog listing and API self-description.

Invariants:
    - Styles listed in catalog order, faces included
"""

from fastapi import APIRouter

from artforge.config import get_settings
from artforge.core.style_catalog import STYLE_CATALOG
from artforge.schemas.art import ServiceInfo, StyleOut, StylesResponse

router = APIRouter(prefix="/api/v1", tags=["styles"])

_ENDPOINTS = {
    "GET /api/v1/info": "This endpoint",
    "GET /api/v1/health/": "Liveness probe",
    "GET /api/v1/styles": "Available art styles",
    "GET /api/v1/preview/{style}/{seed}": "Artwork for a seed (SVG)",
    "GET /api/v1/traits/{style}/{seed}": "Traits for a seed",
    "GET /api/v1/metadata/{style}/{seed}": "SIP-016 token metadata for a seed",
}


def _catalog() -> list[StyleOut]:
    return [
        StyleOut(id=style.value, name=info.name, description=info.description)
        for style, info in STYLE_CATALOG.items()
    ]


@router.get("/styles", response_model=StylesResponse)
async def list_styles():
    return StylesResponse(styles=_catalog())


@router.get("/info", response_model=ServiceInfo)
async def service_info():
    settings = get_settings()
    return ServiceInfo(
        name=settings.service_name,
        version=settings.service_version,
        description="Deterministic procedural artwork and traits from a seed",
        endpoints=_ENDPOINTS,
        styles=_catalog(),
    )
