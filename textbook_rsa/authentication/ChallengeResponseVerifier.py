from typing import Optional

from ..binary import BitVector
from ..certificate import DigitalCertificate
from ..modular import IModularArithmetic, ModularArithmetic
from ..random import IRandom, Random
from ..tracing import ITraceSink, NullTraceSink, TraceLevel
from .AuthenticationTranscript import AuthenticationTranscript
from .ChallengeResponseProver import ChallengeResponseProver
from .exceptions import AuthenticationError

ALGORITHM = "challenge_response"


class ChallengeResponseVerifier:
    """The party checking that its peer holds the private key of a certificate."""

    def __init__(
        self,
        random: Optional[IRandom] = None,
        arithmetic: Optional[IModularArithmetic] = None,
        trace: Optional[ITraceSink] = None,
    ) -> None:
        self._random = random or Random()
        self._trace = trace or NullTraceSink()
        self._arithmetic = arithmetic or ModularArithmetic(self._trace)

    def create_challenge(self, certificate: DigitalCertificate) -> int:
        """Pick a random challenge u below the certificate's modulus.

        With k the position of the modulus' most significant bit, u has k bits
        and its top bit set, so 2^(k-1) <= u < 2^k <= n.

        Args:
            certificate (DigitalCertificate): The certificate presented by the prover

        Returns:
            int: The challenge u
        """
        n = certificate.get_subject_public_key().get_modulus()
        k = n.bit_length() - 1
        if k < 1:
            raise ValueError(f"modulus {n} is too small for a challenge")

        u = BitVector([0] * k)
        cursor = u.create_reverse_iterator()
        while cursor.has_next():
            cursor.write_next(self._random.next_bit())

        # set one at the top position
        cursor.set_last(1)

        challenge = u.to_int()
        self._trace.trace(ALGORITHM, TraceLevel.SUMMARY, "challenge", k=k, u=challenge)
        return challenge

    def verify_response(
        self, certificate: DigitalCertificate, challenge: int, response: int
    ) -> AuthenticationTranscript:
        """Check that E(e, v) equals h(u).

        Args:
            certificate (DigitalCertificate): The prover's certificate
            challenge (int): The challenge u that was sent
            response (int): The response v that came back

        Returns:
            AuthenticationTranscript: The values of the successful exchange

        Raises:
            AuthenticationError: If the response does not match the challenge
        """
        public_key = certificate.get_subject_public_key()
        challenge_hash = BitVector.from_int(challenge).hash().to_int()

        encrypted_response = self._arithmetic.mod_pow(
            response,
            BitVector.from_int(public_key.get_public_exponent()),
            public_key.get_modulus(),
        )

        self._trace.trace(
            ALGORITHM, TraceLevel.SUMMARY, "response",
            u=challenge, challenge_hash=challenge_hash,
            v=response, encrypted_response=encrypted_response,
        )

        if encrypted_response != challenge_hash:
            raise AuthenticationError(certificate.get_subject(), challenge_hash, encrypted_response)

        return AuthenticationTranscript(challenge, challenge_hash, response, encrypted_response)

    def authenticate(
        self, certificate: DigitalCertificate, prover: ChallengeResponseProver
    ) -> AuthenticationTranscript:
        """Run a full exchange: challenge the prover and verify its answer."""
        challenge = self.create_challenge(certificate)
        response = prover.respond(challenge)
        return self.verify_response(certificate, challenge, response)
