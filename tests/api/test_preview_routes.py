"""Preview routes: SVG responses, style validation, canvas bounds and faces.

Invariants:
    - Same URL -> same SVG bytes
    - Unknown style -> 400 INVALID_STYLE with the catalog ids
    - Canvas sizes outside (0, max_canvas_size] -> 400 INVALID_CANVAS_SIZE
"""

import pytest

from artforge.api.routes.route_helpers import get_face_provider
from artforge.core.generate_art import generate_svg
from artforge.main import app


async def test_preview_returns_svg(client):
    res = await client.get("/api/v1/preview/geometric/abc")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("image/svg+xml")
    assert res.text == generate_svg("abc", "geometric", 400)


async def test_preview_is_deterministic(client):
    first = await client.get("/api/v1/preview/organic/collection-1")
    second = await client.get("/api/v1/preview/organic/collection-1")
    assert first.content == second.content


async def test_preview_respects_size(client):
    res = await client.get("/api/v1/preview/pixel/abc", params={"size": 20})
    assert res.status_code == 200
    assert 'viewBox="0 0 20 20"' in res.text


@pytest.mark.parametrize("size", [0, -3, 100_000])
async def test_preview_rejects_bad_sizes(client, size):
    res = await client.get("/api/v1/preview/pixel/abc", params={"size": size})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_CANVAS_SIZE"


async def test_preview_rejects_non_integer_size(client):
    res = await client.get("/api/v1/preview/pixel/abc", params={"size": "big"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_unknown_style_is_rejected_at_the_boundary(client):
    res = await client.get("/api/v1/preview/vaporwave/abc")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "INVALID_STYLE"
    assert error["available"] == ["geometric", "organic", "pixel", "circuit", "stacks", "faces"]


async def test_faces_uses_placeholder_with_cache_header(client):
    res = await client.get("/api/v1/preview/faces/SP2PABAF9FTAJYNFZH93XENAJ8FVY99RRM50D2JG9")
    assert res.status_code == 200
    assert res.headers["cache-control"] == "public, max-age=86400"
    assert "Bitcoin Face" in res.text


async def test_faces_provider_is_injectable(client):
    class StubFaces:
        def render(self, seed: str) -> str:
            return f"<svg><title>{seed}</title></svg>"

    app.dependency_overrides[get_face_provider] = StubFaces
    res = await client.get("/api/v1/preview/faces/alice")
    assert res.text == "<svg><title>alice</title></svg>"
