"""Style catalog tests: ordering, lookups and the raw-string fallback boundary."""

import pytest

from artforge.core.domain_types import Style
from artforge.core.style_catalog import (
    RENDERABLE_STYLES, STYLE_CATALOG, display_name, lookup_style,
    resolve_render_style, style_ids,
)


def test_catalog_order():
    assert style_ids() == ["geometric", "organic", "pixel", "circuit", "stacks", "faces"]


def test_faces_is_catalogued_but_not_renderable():
    assert Style.FACES in STYLE_CATALOG
    assert Style.FACES not in RENDERABLE_STYLES
    assert STYLE_CATALOG[Style.FACES].name == "Bitcoin Faces"


def test_lookup_style():
    assert lookup_style("circuit") is Style.CIRCUIT
    assert lookup_style("Circuit") is None


def test_display_name():
    assert display_name("pixel") == "Pixel"
    assert display_name("nope") == "nope"


def test_resolve_render_style_falls_back():
    assert resolve_render_style("organic") is Style.ORGANIC
    assert resolve_render_style("faces") is Style.GEOMETRIC
    assert resolve_render_style("unknown-style") is Style.GEOMETRIC


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        STYLE_CATALOG[Style.PIXEL] = None  # type: ignore[index]
