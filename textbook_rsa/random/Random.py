import secrets
from typing import Optional

import gmpy2

from ..protocol_constants import RANDOM_INT_BITS
from .abstract.IRandom import IRandom
from .types import RandomState


class Random(IRandom):
    """Seedable random source backed by a GMP random state.

    Two instances built with the same seed produce the same sequence, which is
    what deterministic tests rely on. Without a seed a secure one is drawn.
    """

    SEED_BITS = 128

    def __init__(self, seed: Optional[int] = None) -> None:
        if seed is None:
            seed = secrets.randbits(Random.SEED_BITS)
        if seed < 0:
            raise ValueError("seed must be non-negative")
        self._seed = seed
        self._state: RandomState = gmpy2.random_state(seed)

    def get_seed(self) -> int:
        return self._seed

    def next_bit(self) -> int:
        return int(gmpy2.mpz_urandomb(self._state, 1))

    def next_non_negative_int(self) -> int:
        return int(gmpy2.mpz_urandomb(self._state, RANDOM_INT_BITS))
