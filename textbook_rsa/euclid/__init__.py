"""Extended Euclidean algorithm module."""

from .ExtendedEuclid import ExtendedEuclid
from .ExtendedEuclidResult import ExtendedEuclidResult
from .abstract.IExtendedEuclid import IExtendedEuclid

__all__ = ["ExtendedEuclid", "ExtendedEuclidResult", "IExtendedEuclid"]
