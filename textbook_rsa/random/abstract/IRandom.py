from abc import ABC, abstractmethod


class IRandom(ABC):
    """Abstract base class defining the interface for a source of random bits and integers."""

    @abstractmethod
    def next_bit(self) -> int:
        """Get a uniformly random bit.

        Returns:
            int: 0 or 1
        """

    @abstractmethod
    def next_non_negative_int(self) -> int:
        """Get a uniformly random non-negative integer.

        Returns:
            int: An integer in [0, 2^31)
        """
