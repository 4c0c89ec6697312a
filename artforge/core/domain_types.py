"""Domain Types: closed enums and value types shared across the core.

Invariants:
    - Style is a closed set; rendering dispatch over it is exhaustive
    - TraitType order is the output order of generate_traits()
    - Digest is a non-negative int below 2**32
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

Digest = NewType("Digest", int)         # 0 .. 2**31
HexColor = NewType("HexColor", str)     # "#RRGGBB"


# ─── Enums ───────────────────────────────────────────────────────

class Style(str, Enum):
    """Catalog style identifiers. FACES is delegated to FaceImageProvider."""
    GEOMETRIC = "geometric"
    ORGANIC = "organic"
    PIXEL = "pixel"
    CIRCUIT = "circuit"
    STACKS = "stacks"
    FACES = "faces"


class TraitType(str, Enum):
    """Trait slots, in output order."""
    STYLE = "Style"
    RARITY = "Rarity"
    BACKGROUND = "Background"
    MOOD = "Mood"
    GENERATION = "Generation"


@dataclass(frozen=True)
class Trait:
    """One (trait_type, value) descriptor."""
    trait_type: TraitType
    value: str

    def as_pair(self) -> tuple[str, str]:
        return self.trait_type.value, self.value

    def to_dict(self) -> dict[str, str]:
        return {"trait_type": self.trait_type.value, "value": self.value}
