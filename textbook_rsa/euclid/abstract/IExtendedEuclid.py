from abc import ABC, abstractmethod

from ..ExtendedEuclidResult import ExtendedEuclidResult


class IExtendedEuclid(ABC):
    """Abstract base class defining the interface for the Extended Euclidean algorithm."""

    @abstractmethod
    def compute(self, a: int, b: int) -> ExtendedEuclidResult:
        """Compute gcd(a, b) and the Bezout coefficients s, t with a*s + b*t = gcd.

        Args:
            a (int): First operand, non-negative
            b (int): Second operand, with 0 <= b <= a

        Returns:
            ExtendedEuclidResult: gcd and coefficients
        """
