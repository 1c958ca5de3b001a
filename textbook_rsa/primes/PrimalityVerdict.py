from enum import Enum


class PrimalityVerdict(Enum):
    """Outcome of a primality test."""

    NOT_PRIME = "not prime"
    PERHAPS_PRIME = "perhaps prime"

    def is_perhaps_prime(self) -> bool:
        return self is PrimalityVerdict.PERHAPS_PRIME
