from typing import Iterable, Iterator, List, Union

from ..protocol_constants import BYTE_SIZE, WORD_SIZE
from .BitCursor import ForwardBitCursor, ReverseBitCursor
from .abstract.IBitCursor import IBitCursor, check_bit


class BitVector:
    """A fixed-length sequence of bits; index 0 is the least significant bit.

    The length is fixed at construction. The bits can only be changed through
    the cursors returned by create_iterator() and create_reverse_iterator().
    """

    def __init__(self, bits: Union["BitVector", Iterable[int]]) -> None:
        """Create a copy of an explicit bit array or of another bit vector.

        Args:
            bits: Bits ordered from least to most significant

        Raises:
            ValueError: If a bit is not 0 or 1
        """
        bit_list = list(bits)
        for bit in bit_list:
            check_bit(bit)
        self._bits: List[int] = bit_list

    @classmethod
    def from_int(cls, value: int, length: int = WORD_SIZE) -> "BitVector":
        """Create the bit representation of a non-negative integer.

        Args:
            value (int): Integer to convert
            length (int): Number of bits, WORD_SIZE by default

        Returns:
            BitVector: A vector of exactly ``length`` bits

        Raises:
            ValueError: If value or length is negative, or value needs more
                than ``length`` bits
        """
        if length < 0 or value < 0:
            raise ValueError("non-negative arguments required")
        if value >= 1 << length:
            raise ValueError(f"integer {value} does not fit in {length} bits")

        bits = []
        for _ in range(length):
            bits.append(BitVector.get_lsb(value))
            value >>= 1
        return cls(bits)

    @classmethod
    def from_string(cls, text: str, length: int) -> "BitVector":
        """Create the bit representation of a string.

        The UTF-8 bytes are stored in reverse order, each least significant bit
        first, so the last character lands in the lowest bits. Unused high bits
        are 0.

        Args:
            text (str): String to convert
            length (int): Number of bits

        Returns:
            BitVector: A vector of exactly ``length`` bits

        Raises:
            ValueError: If length is negative or the string needs more bits
        """
        if text is None or length < 0:
            raise ValueError("non-negative or non-null arguments required")
        encoded = text.encode("utf-8")
        if len(encoded) * BYTE_SIZE > length:
            raise ValueError(f"string {text!r} does not fit in {length} bits")

        bits = [0] * length
        for x, byte in enumerate(reversed(encoded)):
            for i in range(x * BYTE_SIZE, (x + 1) * BYTE_SIZE):
                bits[i] = BitVector.get_lsb(byte)
                byte >>= 1
        return cls(bits)

    @staticmethod
    def get_lsb(n: int) -> int:
        """Return the least significant bit of an integer."""
        return n & 0x1

    @staticmethod
    def concatenate(*vectors: "BitVector") -> "BitVector":
        """Concatenate bit vectors, the first argument ending up in the highest bits.

        Bit 0 of the result is bit 0 of the last argument.
        """
        result = BitVector([0] * sum(len(vector) for vector in vectors))
        cursor = result.create_iterator()

        for vector in reversed(vectors):
            for bit in vector.create_iterator():
                cursor.write_next(bit)

        return result

    def to_int(self) -> int:
        """Convert to a non-negative integer.

        Raises:
            ValueError: If the vector is longer than a native word
        """
        if len(self._bits) > WORD_SIZE:
            raise ValueError(f"{len(self._bits)} bits do not fit in a {WORD_SIZE} bit word")

        n = 0
        for i, bit in enumerate(self._bits):
            n ^= bit << i
        return n

    def hash(self) -> "BitVector":
        """XOR the vector's consecutive bytes together into one 8 bit value.

        Bit j of the result is the XOR of every bit i with i % 8 == j.
        """
        h = [0] * BYTE_SIZE
        for i, bit in enumerate(self._bits):
            h[i % BYTE_SIZE] ^= bit
        return BitVector(h)

    def to_bit_array(self) -> List[int]:
        return list(self._bits)

    def create_iterator(self) -> IBitCursor:
        return ForwardBitCursor(self._bits)

    def create_reverse_iterator(self) -> IBitCursor:
        return ReverseBitCursor(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._bits))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self._bits == other._bits

    def __str__(self) -> str:
        return "".join(str(bit) for bit in self.create_reverse_iterator())

    def __repr__(self) -> str:
        return f"BitVector('{self}')"
