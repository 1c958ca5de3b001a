from typing import Optional

from ..binary import BitVector
from ..modular import ModularArithmetic
from ..protocol_constants import PRIME_BIT_SIZE, PRIMALITY_TEST_ROUNDS, WORD_SIZE
from ..random import IRandom, Random
from ..tracing import ITraceSink, NullTraceSink, TraceLevel
from .MillerRabin import MillerRabin
from .Prime import Prime
from .PrimalityVerdict import PrimalityVerdict
from .abstract.IPrimalityTester import IPrimalityTester
from .abstract.IPrimes import IPrimes

ALGORITHM = "prime_generator"


class Primes(IPrimes):
    """Random prime search: sample odd candidates until one passes Miller-Rabin."""

    def __init__(
        self,
        bit_size: int = PRIME_BIT_SIZE,
        rounds: int = PRIMALITY_TEST_ROUNDS,
        random: Optional[IRandom] = None,
        tester: Optional[IPrimalityTester] = None,
        trace: Optional[ITraceSink] = None,
    ) -> None:
        """Initialize the generator.

        Args:
            bit_size (int): Bit length of the generated primes
            rounds (int): Miller-Rabin rounds; a composite survives all of
                them with probability at most 2^-rounds
            random (IRandom): Source for candidate bits and witnesses
            tester (IPrimalityTester): Single-witness test, MillerRabin by default
            trace (ITraceSink): Receiver of trace records
        """
        if bit_size < 2 or bit_size > WORD_SIZE:
            raise ValueError(f"prime bit size must be in [2, {WORD_SIZE}], got {bit_size}")
        if rounds < 1:
            raise ValueError("at least one primality test round is required")

        self._bit_size = bit_size
        self._rounds = rounds
        self._random = random or Random()
        self._trace = trace or NullTraceSink()
        self._tester = tester or MillerRabin(self._trace)

    def get_bit_size(self) -> int:
        return self._bit_size

    def get_rounds(self) -> int:
        return self._rounds

    def get_prime(self) -> Prime:
        attempts = 0
        while True:
            attempts += 1
            candidate = self.generate_random_odd_candidate(self._bit_size)
            verdict = self.test_if_prime(candidate, self._rounds)
            if verdict.is_perhaps_prime():
                self._trace.trace(
                    ALGORITHM, TraceLevel.SUMMARY, "prime",
                    prime=candidate.to_int(), attempts=attempts,
                )
                return Prime(candidate)

    def test_if_prime(self, candidate: BitVector, rounds: int) -> PrimalityVerdict:
        n = candidate.to_int()
        verdict = PrimalityVerdict.PERHAPS_PRIME

        while rounds > 0 and verdict.is_perhaps_prime():
            # get a random witness and cut it down to size
            a = ModularArithmetic.mod(self._random.next_non_negative_int(), n)

            # a zero witness proves nothing and does not count as a round
            if a != 0:
                verdict = self._tester.test(a, candidate)
                rounds -= 1

        self._trace.trace(
            ALGORITHM, TraceLevel.SUMMARY, "candidate",
            candidate=n, perhaps_prime=int(verdict.is_perhaps_prime()),
        )
        return verdict

    def generate_random_odd_candidate(self, bit_size: int) -> BitVector:
        """Sample a bit_size long odd number whose top bit is set.

        Args:
            bit_size (int): Number of bits, at least 2

        Returns:
            BitVector: The candidate
        """
        if bit_size < 2 or bit_size > WORD_SIZE:
            raise ValueError(f"candidate bit size must be in [2, {WORD_SIZE}], got {bit_size}")

        candidate = BitVector([0] * bit_size)
        cursor = candidate.create_iterator()

        # set the first and last bit to 1, random bits in between
        cursor.write_next(1)
        for _ in range(bit_size - 2):
            cursor.write_next(self._random.next_bit())
        cursor.write_next(1)

        return candidate
