"""Deterministic Sequence: reproducible float stream seeded from a digest.

Invariants:
    - state' = (state * 1103515245 + 12345) mod 2**31, exactly
    - next() returns state / (2**31 - 1), kept strictly below 1.0
    - One instance per render or trait computation; never shared

Design Decisions:
    - Explicit state object passed to renderers; draw order is part of each
      renderer's output contract
    - The single register value 2**31 - 1 would map to 1.0; it is clamped to the
      largest float below 1.0 so index draws stay in range
"""

import math

MULTIPLIER = 1103515245
INCREMENT = 12345
MODULUS = 1 << 31
_DIVISOR = MODULUS - 1
_BELOW_ONE = math.nextafter(1.0, 0.0)


class DeterministicSequence:
    """Linear congruential stream of floats in [0, 1)."""

    __slots__ = ("_state", "draws")

    def __init__(self, digest: int):
        self._state = digest
        self.draws = 0

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        self._state = (self._state * MULTIPLIER + INCREMENT) % MODULUS
        self.draws += 1
        return min(self._state / _DIVISOR, _BELOW_ONE)

    def next_index(self, n: int) -> int:
        """Uniform index in [0, n): floor(next() * n)."""
        return math.floor(self.next() * n)

    def choice(self, items):
        """Pick one element with a single index draw."""
        return items[self.next_index(len(items))]

    def uniform(self, low: float, span: float) -> float:
        """low + next() * span."""
        return low + self.next() * span
