"""Scripted sequence: a DeterministicSequence stand-in that replays fixed draws.

Renderer tests use it to pin the exact number and order of draws: running out
of values, or leaving values unread, fails the test.
"""

from artforge.core.deterministic_sequence import DeterministicSequence


class ScriptedSequence(DeterministicSequence):
    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)
        self._pos = 0

    def next(self) -> float:
        if self._pos >= len(self._values):
            raise AssertionError(f"renderer drew more than {len(self._values)} values")
        value = self._values[self._pos]
        self._pos += 1
        self.draws += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos
