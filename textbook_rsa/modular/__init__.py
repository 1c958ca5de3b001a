"""Modular arithmetic module."""

from .ModularArithmetic import ModularArithmetic
from .abstract.IModularArithmetic import IModularArithmetic

__all__ = ["ModularArithmetic", "IModularArithmetic"]
