"""Trait generation tests: cardinality, order, value sets and fallbacks."""

import pytest

from artforge.core.domain_types import TraitType
from artforge.core.generate_traits import BACKGROUNDS, MOODS, RARITIES, generate_traits


def test_five_traits_in_fixed_order():
    traits = generate_traits("seed-1", "geometric")
    assert [t.trait_type for t in traits] == list(TraitType)
    assert [t.trait_type.value for t in traits] == [
        "Style", "Rarity", "Background", "Mood", "Generation",
    ]


def test_generation_is_always_genesis():
    for seed in ["", "a", "seed-1", "x" * 500]:
        assert generate_traits(seed, "pixel")[4].as_pair() == ("Generation", "Genesis")


def test_style_uses_catalog_display_name():
    assert generate_traits("seed-1", "stacks")[0].as_pair() == ("Style", "Stacks")
    assert generate_traits("seed-1", "faces")[0].value == "Bitcoin Faces"


def test_unknown_style_passes_through_raw_id():
    assert generate_traits("seed-1", "vaporwave")[0].value == "vaporwave"


def test_deterministic():
    assert generate_traits("abc", "organic") == generate_traits("abc", "organic")


def test_values_from_fixed_lists():
    for i in range(50):
        traits = generate_traits(f"c-{i}", "circuit")
        assert traits[1].value in RARITIES
        assert traits[2].value in BACKGROUNDS
        assert traits[3].value in MOODS


def test_draws_are_independent_of_style():
    a = generate_traits("shared-seed", "geometric")
    b = generate_traits("shared-seed", "pixel")
    assert [t.value for t in a[1:]] == [t.value for t in b[1:]]


def test_empty_seed_known_draws():
    traits = generate_traits("", "geometric")
    assert traits[1].value == "Common"
    assert traits[2].value == "Forest"


@pytest.mark.parametrize("seed", ["seed-1", "seed-2"])
def test_to_dict_shape(seed):
    for trait in generate_traits(seed, "geometric"):
        assert set(trait.to_dict()) == {"trait_type", "value"}
