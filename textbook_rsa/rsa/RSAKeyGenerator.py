from typing import Optional, Tuple

from ..euclid import ExtendedEuclid, IExtendedEuclid
from ..primes import IPrimes, Prime, Primes
from ..protocol_constants import (
    FIRST_PUBLIC_EXPONENT,
    MAX_KEY_PRIME_BIT_SIZE,
    MIN_KEY_PRIME_BIT_SIZE,
)
from ..tracing import ITraceSink, NullTraceSink, TraceLevel
from .abstract.IRSAKeyGenerator import IRSAKeyGenerator
from .keys import KeyPair

ALGORITHM = "rsa_key_generator"


def check_prime_bit_size(bit_size: int) -> None:
    """Reject prime sizes that cannot give two distinct primes or a word-sized modulus.

    Raises:
        ValueError: If bit_size is outside [MIN_KEY_PRIME_BIT_SIZE, MAX_KEY_PRIME_BIT_SIZE]
    """
    if not MIN_KEY_PRIME_BIT_SIZE <= bit_size <= MAX_KEY_PRIME_BIT_SIZE:
        raise ValueError(
            f"key prime bit size must be in [{MIN_KEY_PRIME_BIT_SIZE}, "
            f"{MAX_KEY_PRIME_BIT_SIZE}], got {bit_size}"
        )


class RSAKeyGenerator(IRSAKeyGenerator):
    """Implementation of textbook RSA key generation."""

    def __init__(
        self,
        primes: Optional[IPrimes] = None,
        euclid: Optional[IExtendedEuclid] = None,
        trace: Optional[ITraceSink] = None,
    ) -> None:
        """Initialize the key generator.

        Args:
            primes (IPrimes): Source of the primes p and q
            euclid (IExtendedEuclid): gcd and inverse computation
            trace (ITraceSink): Receiver of trace records

        Raises:
            ValueError: If the primes' bit size is unfit for key generation
        """
        self._trace = trace or NullTraceSink()
        self._primes = primes or Primes(trace=self._trace)
        check_prime_bit_size(self._primes.get_bit_size())
        self._euclid = euclid or ExtendedEuclid(self._trace)

    def generate(self) -> KeyPair:
        p, q = self._generate_p_and_q()

        key_pair = self._derive_exponents(p, q)
        while key_pair is None:
            # every e below phi(N) shared a factor with it, start over
            p, q = self._generate_p_and_q()
            key_pair = self._derive_exponents(p, q)

        self._trace.trace(
            ALGORITHM, TraceLevel.SUMMARY, "key_pair",
            p=p.get_as_int(), q=q.get_as_int(),
            n=key_pair.modulus, e=key_pair.public_exponent, d=key_pair.private_exponent,
        )
        return key_pair

    # Private methods
    # --------------

    def _generate_p_and_q(self) -> Tuple[Prime, Prime]:
        """Generate two primes, resampling q until it differs from p."""
        p = self._primes.get_prime()
        q = self._primes.get_prime()
        while p == q:
            q = self._primes.get_prime()
        return p, q

    def _derive_exponents(self, p: Prime, q: Prime) -> Optional[KeyPair]:
        """Search e coprime with phi(N) and derive d.

        Returns:
            Optional[KeyPair]: None if no e in (2, phi(N)) is coprime with phi(N)
        """
        n = self._calculate_N(p, q)
        phi = self._calculate_phi(p, q)

        e = FIRST_PUBLIC_EXPONENT
        while e < phi:
            result = self._euclid.compute(phi, e)
            self._trace.trace(
                ALGORITHM, TraceLevel.SUMMARY, "public_exponent_candidate",
                e=e, n=n, phi=phi, gcd=result.get_gcd(),
            )
            if result.get_gcd() == 1:
                d = result.get_positive_mult_inverse_of_b_mod_a()
                return KeyPair(modulus=n, public_exponent=e, private_exponent=d)
            e += 1

        return None

    @staticmethod
    def _calculate_N(p: Prime, q: Prime) -> int:
        """Calculate the RSA modulus N = p * q."""
        return p.get_as_int() * q.get_as_int()

    @staticmethod
    def _calculate_phi(p: Prime, q: Prime) -> int:
        """Calculate Euler's totient φ(N) = (p-1)(q-1)."""
        return (p.get_as_int() - 1) * (q.get_as_int() - 1)
