from abc import ABC, abstractmethod

from ...binary import BitVector
from ..Prime import Prime
from ..PrimalityVerdict import PrimalityVerdict


class IPrimes(ABC):
    """Abstract base class defining the interface for prime number generation."""

    @abstractmethod
    def get_prime(self) -> Prime:
        """Get a random prime number of the configured bit size.

        Returns:
            Prime: A number that passed every primality test round
        """

    @abstractmethod
    def test_if_prime(self, candidate: BitVector, rounds: int) -> PrimalityVerdict:
        """Run the primality test with fresh random witnesses.

        Args:
            candidate (BitVector): The number to test
            rounds (int): Number of non-zero witnesses to try

        Returns:
            PrimalityVerdict: NOT_PRIME as soon as one witness proves the
                candidate composite, PERHAPS_PRIME otherwise
        """

    @abstractmethod
    def get_bit_size(self) -> int:
        """Get the bit length of the generated primes.

        Returns:
            int: Number of bits of every prime returned by get_prime
        """
