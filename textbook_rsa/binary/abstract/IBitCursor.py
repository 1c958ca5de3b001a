from abc import ABC, abstractmethod
from typing import List


class IBitCursor(ABC):
    """Positional read/write cursor over the bit buffer of a BitVector.

    A cursor borrows the buffer of the vector that created it; writes through
    the cursor are visible in that vector. It is also a Python iterator over
    the bits it has not consumed yet.
    """

    def __init__(self, bits: List[int]) -> None:
        self._bits = bits

    @abstractmethod
    def has_next(self) -> bool:
        """Tell whether the cursor has bits left.

        Returns:
            bool: True if read_next or write_next may be called
        """

    @abstractmethod
    def _advance(self) -> int:
        """Move one step and return the index of the bit stepped over."""

    def read_next(self) -> int:
        """Read the bit under the cursor and advance.

        Returns:
            int: 0 or 1

        Raises:
            IndexError: If the cursor is exhausted
        """
        if not self.has_next():
            raise IndexError("bit cursor exhausted")
        return self._bits[self._advance()]

    def write_next(self, bit: int) -> None:
        """Write a bit under the cursor and advance.

        Args:
            bit (int): 0 or 1

        Raises:
            IndexError: If the cursor is exhausted
            ValueError: If bit is not 0 or 1
        """
        check_bit(bit)
        if not self.has_next():
            raise IndexError("bit cursor exhausted")
        self._bits[self._advance()] = bit

    def set_first(self, bit: int) -> None:
        """Write the bit at index 0 without moving the cursor."""
        check_bit(bit)
        if not self._bits:
            raise IndexError("empty bit vector")
        self._bits[0] = bit

    def set_last(self, bit: int) -> None:
        """Write the bit at the highest index without moving the cursor."""
        check_bit(bit)
        if not self._bits:
            raise IndexError("empty bit vector")
        self._bits[-1] = bit

    def __iter__(self) -> "IBitCursor":
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self.read_next()


def check_bit(bit: int) -> None:
    if bit not in (0, 1):
        raise ValueError(f"bit must be 0 or 1, got {bit!r}")
