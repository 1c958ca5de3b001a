from abc import ABC, abstractmethod

from ...binary import BitVector


class IModularArithmetic(ABC):
    """Abstract base class defining the modular arithmetic used by RSA."""

    @staticmethod
    @abstractmethod
    def mod(a: int, n: int) -> int:
        """Compute a modulo n with floored division.

        Args:
            a (int): Dividend
            n (int): Divisor, must be positive

        Returns:
            int: The remainder, in [0, n)
        """

    @abstractmethod
    def mod_pow(self, base: int, exponent: BitVector, modulus: int) -> int:
        """Compute base^exponent mod modulus by square-and-multiply.

        Args:
            base (int): The base
            exponent (BitVector): The exponent, consumed from its most
                significant bit down to bit 0
            modulus (int): The modulus, must be positive

        Returns:
            int: Result of the modular exponentiation
        """
