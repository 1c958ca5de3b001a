from multiprocessing import Pool
from typing import List, Tuple

from ..primes import Primes
from ..protocol_constants import PRIME_BIT_SIZE, PRIMALITY_TEST_ROUNDS
from ..random import Random
from ..utils.SystemSpecs import SystemSpecs
from .RSAKeyGenerator import RSAKeyGenerator, check_prime_bit_size
from .abstract.IKeyPairFactory import IKeyPairFactory
from .keys import KeyPair


class KeyPairFactory(IKeyPairFactory):
    """Implementation of key pair factory."""

    def __init__(
        self, prime_bit_size: int = PRIME_BIT_SIZE, rounds: int = PRIMALITY_TEST_ROUNDS
    ) -> None:
        """Initialize the factory.

        Args:
            prime_bit_size (int): Bit length of each prime
            rounds (int): Miller-Rabin rounds per candidate

        Raises:
            ValueError: If prime_bit_size is unfit for key generation
        """
        check_prime_bit_size(prime_bit_size)
        self._prime_bit_size = prime_bit_size
        self._rounds = rounds

    def create_key_pair(self) -> KeyPair:
        # Each run owns a fresh random source so parallel runs never share one
        primes = Primes(self._prime_bit_size, self._rounds, Random())
        return RSAKeyGenerator(primes).generate()

    def create_key_pairs(self, amount: int) -> List[KeyPair]:
        if amount < 0:
            raise ValueError("amount must be non-negative")
        if amount == 0:
            return []

        key_params = [(self._prime_bit_size, self._rounds) for _ in range(amount)]

        num_workers = min(SystemSpecs.get_num_parallel_processes(), amount)

        with Pool(num_workers) as pool:
            return pool.map(KeyPairFactory._create_key_pair_parallel, key_params)

    # Private Methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _create_key_pair_parallel(key_params: Tuple[int, int]) -> KeyPair:
        """Helper method to create a single key pair for multiprocessing.

        Args:
            key_params (Tuple[int, int]): Tuple containing (prime_bit_size, rounds)

        Returns:
            KeyPair: The generated key pair
        """
        prime_bit_size, rounds = key_params
        return KeyPairFactory(prime_bit_size, rounds).create_key_pair()
