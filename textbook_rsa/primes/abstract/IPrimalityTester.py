from abc import ABC, abstractmethod

from ...binary import BitVector
from ..PrimalityVerdict import PrimalityVerdict


class IPrimalityTester(ABC):
    """Abstract base class defining the interface for a single-witness primality test."""

    @abstractmethod
    def test(self, a: int, x: BitVector) -> PrimalityVerdict:
        """Test the candidate x against the witness a.

        Args:
            a (int): Witness with 0 <= a <= n, where n is the value of x
            x (BitVector): Bit representation of the candidate n

        Returns:
            PrimalityVerdict: NOT_PRIME if a proves n composite, PERHAPS_PRIME otherwise
        """
