from ..binary import BitVector


class Prime:
    """A number that passed the primality test; compared and hashed by value."""

    def __init__(self, bits: BitVector) -> None:
        """Initialize a prime from its bit representation.

        Args:
            bits (BitVector): The candidate that passed the test; it is copied
        """
        self._bits = BitVector(bits)

    def get_as_int(self) -> int:
        return self._bits.to_int()

    def get_bits(self) -> BitVector:
        return BitVector(self._bits)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Prime):
            return NotImplemented
        return other.get_as_int() == self.get_as_int()

    def __hash__(self) -> int:
        return hash(self.get_as_int())

    def __int__(self) -> int:
        return self.get_as_int()

    def __str__(self) -> str:
        return f"{self.get_as_int()} {self._bits}"

    def __repr__(self) -> str:
        return f"Prime({self.get_as_int()})"
