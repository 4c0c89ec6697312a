"""Seed Hash: maps an arbitrary seed string to a non-negative 32-bit digest.

Invariants:
    - Pure and total: defined for every str, including ""
    - hash_seed("") == 0
    - Result is always >= 0 (absolute value of the signed 32-bit accumulator)
    - Collisions are allowed

Design Decisions:
    - Iterates UTF-16 code units, so astral characters contribute two units
"""

from artforge.core.domain_types import Digest

_MASK_32 = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _utf16_code_units(text: str) -> list[int]:
    raw = text.encode("utf-16-le", errors="surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def hash_seed(seed: str) -> Digest:
    """Polynomial rolling hash (h * 31 + unit) in wrapping 32-bit arithmetic."""
    h = 0
    for unit in _utf16_code_units(seed):
        h = (h * 31 + unit) & _MASK_32
    if h & _SIGN_BIT:
        h -= 1 << 32
    return Digest(abs(h))
