"""Error hierarchy tests: codes, statuses and REST envelopes."""

from artforge.core.errors import (
    ArtForgeError, ErrorCategory, ErrorContext, InvalidCanvasSizeError, UnknownStyleError,
)


def test_invalid_canvas_size_envelope():
    err = InvalidCanvasSizeError(-5, context=ErrorContext(seed="abc", style="pixel"))
    body = err.to_response()["error"]

    assert isinstance(err, ArtForgeError)
    assert err.http_status == 400
    assert body["code"] == "INVALID_CANVAS_SIZE"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["context"] == {"seed": "abc", "style": "pixel", "canvas_size": -5}
    assert "-5" in body["message"]


def test_unknown_style_lists_available():
    err = UnknownStyleError("vaporwave", ["geometric", "pixel"])
    body = err.to_response()["error"]

    assert err.http_status == 400
    assert body["code"] == "INVALID_STYLE"
    assert body["available"] == ["geometric", "pixel"]
    assert body["context"]["style"] == "vaporwave"
