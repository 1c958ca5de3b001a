from abc import ABC, abstractmethod

from ..keys import KeyPair


class IRSAKeyGenerator(ABC):
    """Abstract base class defining the interface for RSA key pair generation."""

    @abstractmethod
    def generate(self) -> KeyPair:
        """Generate a fresh key pair.

        Two distinct primes p and q give the modulus N = p * q. The public
        exponent e is the smallest value above 2 that is coprime with
        phi(N) = (p-1)(q-1), and d is its inverse modulo phi(N).

        Returns:
            KeyPair: The modulus and both exponents
        """
