from typing import List

from .abstract.IBitCursor import IBitCursor


class ForwardBitCursor(IBitCursor):
    """Cursor walking from index 0 (least significant) upward."""

    def __init__(self, bits: List[int]) -> None:
        super().__init__(bits)
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._bits)

    def _advance(self) -> int:
        index = self._position
        self._position += 1
        return index


class ReverseBitCursor(IBitCursor):
    """Cursor walking from the highest index (most significant) down to 0."""

    def __init__(self, bits: List[int]) -> None:
        super().__init__(bits)
        self._position = len(bits)

    def has_next(self) -> bool:
        return self._position > 0

    def _advance(self) -> int:
        self._position -= 1
        return self._position
