"""Trait Generation: fixed-shape categorical descriptors derived from a seed.

Invariants:
    - Always 5 traits, ordered Style, Rarity, Background, Mood, Generation
    - Uses its own DeterministicSequence; draws Rarity, Background, Mood in that order
    - Style value is the catalog display name, or the raw id when not in the catalog
    - Generation is always "Genesis"
"""

from artforge.core.deterministic_sequence import DeterministicSequence
from artforge.core.domain_types import Trait, TraitType
from artforge.core.seed_hash import hash_seed
from artforge.core.style_catalog import display_name

RARITIES = ("Common", "Uncommon", "Rare", "Epic", "Legendary")
BACKGROUNDS = ("Sunset", "Midnight", "Ocean", "Forest", "Cosmic")
MOODS = ("Calm", "Energetic", "Mysterious", "Playful", "Bold")
GENERATION = "Genesis"


def generate_traits(seed: str, style: str) -> list[Trait]:
    """Derive the ordered trait list for seed. Pure, never raises."""
    seq = DeterministicSequence(hash_seed(seed))
    rarity = seq.choice(RARITIES)
    background = seq.choice(BACKGROUNDS)
    mood = seq.choice(MOODS)
    return [
        Trait(TraitType.STYLE, display_name(style)),
        Trait(TraitType.RARITY, rarity),
        Trait(TraitType.BACKGROUND, background),
        Trait(TraitType.MOOD, mood),
        Trait(TraitType.GENERATION, GENERATION),
    ]
