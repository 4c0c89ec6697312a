"""Error Hierarchy: typed, categorized exceptions for all Art Forge failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The core raises only InvalidCanvasSizeError; unknown styles never raise inside core/
    - to_response() produces the REST envelope used by api/error_handlers.py
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    seed: str | None = None
    style: str | None = None
    canvas_size: int | None = None
    debug_info: dict[str, Any] | None = None


class ArtForgeError(Exception):
    """Base exception for all Art Forge errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "seed": self.context.seed,
                    "style": self.context.style,
                    "canvas_size": self.context.canvas_size,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidCanvasSizeError(ArtForgeError):
    """Canvas size is non-positive or above the configured bound."""
    def __init__(
        self, size: int, reason: str = "must be positive",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.canvas_size = size
        super().__init__(
            f"Invalid canvas size {size}: {reason}",
            "INVALID_CANVAS_SIZE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.size = size


class UnknownStyleError(ArtForgeError):
    """Style id is not in the catalog. Raised by the HTTP boundary only."""
    def __init__(
        self, style: str, available: list[str],
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.style = style
        super().__init__(
            f"Invalid style '{style}'. Available: {', '.join(available)}",
            "INVALID_STYLE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.available = available

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["available"] = self.available
        return response
