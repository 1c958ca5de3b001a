import pytest

from textbook_rsa.random import IRandom
from textbook_rsa.tracing import RecordingTraceSink


class ScriptedRandom(IRandom):
    """Random source replaying fixed sequences of bits and integers."""

    def __init__(self, bits=(), ints=()):
        self._bits = iter(bits)
        self._ints = iter(ints)

    def next_bit(self) -> int:
        return next(self._bits)

    def next_non_negative_int(self) -> int:
        return next(self._ints)


@pytest.fixture
def scripted_random():
    """Factory fixture building a ScriptedRandom from bit and int sequences."""
    return ScriptedRandom


@pytest.fixture
def recording_trace():
    """Fixture providing a trace sink that keeps every record."""
    return RecordingTraceSink()
