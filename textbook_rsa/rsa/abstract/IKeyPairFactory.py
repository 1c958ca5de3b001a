from abc import ABC, abstractmethod
from typing import List

from ..keys import KeyPair


class IKeyPairFactory(ABC):
    """Abstract base class defining the interface for a key pair factory."""

    @abstractmethod
    def create_key_pair(self) -> KeyPair:
        """Create a single key pair in the current process.

        Returns:
            KeyPair: The generated key pair
        """

    @abstractmethod
    def create_key_pairs(self, amount: int) -> List[KeyPair]:
        """Create multiple independent key pairs in parallel.

        Args:
            amount (int): Number of key pairs to create

        Returns:
            List[KeyPair]: The generated key pairs
        """
