"""Prime number generation module."""

from .Primes import Primes
from .Prime import Prime
from .MillerRabin import MillerRabin
from .PrimalityVerdict import PrimalityVerdict
from .abstract.IPrimes import IPrimes
from .abstract.IPrimalityTester import IPrimalityTester

__all__ = [
    "Primes",
    "Prime",
    "MillerRabin",
    "PrimalityVerdict",
    "IPrimes",
    "IPrimalityTester",
]
