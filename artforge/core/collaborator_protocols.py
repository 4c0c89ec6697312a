"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; implementations are injected by the API layer
    - The faces style is answered entirely by a FaceImageProvider
"""

from typing import Protocol


class FaceImageProvider(Protocol):
    """Contract for the external face-image collaborator."""
    def render(self, seed: str) -> str: ...
