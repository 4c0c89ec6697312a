"""Traits & Metadata: seed-derived attributes and SIP-016 shaped token metadata.

Invariants:
    - attributes always has 5 entries in generate_traits() order
    - Metadata image points at the preview route for the same (style, seed)
"""

from fastapi import APIRouter, Depends

from artforge.api.routes.route_helpers import preview_url, require_catalog_style
from artforge.config import Settings, get_settings
from artforge.core.generate_traits import generate_traits
from artforge.core.style_catalog import STYLE_CATALOG
from artforge.schemas.art import TokenMetadata, TokenProperties, TraitOut, TraitsResponse

router = APIRouter(prefix="/api/v1", tags=["traits"])


@router.get("/traits/{style}/{seed}", response_model=TraitsResponse)
async def get_traits(style: str, seed: str):
    catalog_style = require_catalog_style(style, seed)
    traits = generate_traits(seed, catalog_style.value)
    return TraitsResponse(
        seed=seed,
        style=catalog_style.value,
        attributes=[TraitOut.from_trait(t) for t in traits],
    )


@router.get("/metadata/{style}/{seed}", response_model=TokenMetadata)
async def get_metadata(
    style: str, seed: str, settings: Settings = Depends(get_settings),
):
    catalog_style = require_catalog_style(style, seed)
    info = STYLE_CATALOG[catalog_style]
    traits = generate_traits(seed, catalog_style.value)
    return TokenMetadata(
        name=f"{info.name} #{seed}",
        description=f"{info.description}. Generated by Art Forge.",
        image=preview_url(settings, catalog_style.value, seed),
        attributes=[TraitOut.from_trait(t) for t in traits],
        properties=TokenProperties(style=catalog_style.value, seed=seed),
    )
