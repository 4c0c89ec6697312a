"""Art Schemas: Pydantic response models for the preview API.

Invariants:
    - attributes lists keep generate_traits() order
    - StyleOut.id is always a catalog id
"""

from pydantic import BaseModel, Field

from artforge.core.domain_types import Trait


class StyleOut(BaseModel):
    id: str
    name: str
    description: str


class StylesResponse(BaseModel):
    styles: list[StyleOut]


class TraitOut(BaseModel):
    trait_type: str
    value: str

    @classmethod
    def from_trait(cls, trait: Trait) -> "TraitOut":
        return cls(trait_type=trait.trait_type.value, value=trait.value)


class TraitsResponse(BaseModel):
    seed: str
    style: str
    attributes: list[TraitOut] = Field(min_length=5, max_length=5)


class TokenProperties(BaseModel):
    style: str
    seed: str


class TokenMetadata(BaseModel):
    """SIP-016 shaped metadata derived from a seed alone."""
    sip: int = 16
    name: str
    description: str
    image: str
    attributes: list[TraitOut]
    properties: TokenProperties


class ServiceInfo(BaseModel):
    name: str
    version: str
    description: str
    endpoints: dict[str, str]
    styles: list[StyleOut]
