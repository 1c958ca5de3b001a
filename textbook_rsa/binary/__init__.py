"""Fixed-length bit sequences."""

from .BitVector import BitVector
from .BitCursor import ForwardBitCursor, ReverseBitCursor
from .abstract.IBitCursor import IBitCursor

__all__ = ["BitVector", "ForwardBitCursor", "ReverseBitCursor", "IBitCursor"]
