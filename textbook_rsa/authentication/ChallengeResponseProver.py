from typing import Optional

from ..binary import BitVector
from ..modular import IModularArithmetic, ModularArithmetic
from ..rsa import RSAPrivateKey
from ..tracing import ITraceSink, NullTraceSink


class ChallengeResponseProver:
    """The party proving ownership of a certificate by signing challenges."""

    def __init__(
        self,
        private_key: RSAPrivateKey,
        arithmetic: Optional[IModularArithmetic] = None,
        trace: Optional[ITraceSink] = None,
    ) -> None:
        self._private_key = private_key
        self._arithmetic = arithmetic or ModularArithmetic(trace or NullTraceSink())

    def respond(self, challenge: int) -> int:
        """Sign a challenge: v = D(d, h(u)).

        Args:
            challenge (int): The challenge u received from the verifier

        Returns:
            int: The response v

        Raises:
            ValueError: If h(u) is not below the modulus and cannot be signed
        """
        challenge_hash = BitVector.from_int(challenge).hash()
        if challenge_hash.to_int() >= self._private_key.get_modulus():
            raise ValueError(
                f"challenge hash {challenge_hash.to_int()} is not below the "
                f"modulus {self._private_key.get_modulus()}"
            )
        return self._arithmetic.mod_pow(
            challenge_hash.to_int(),
            BitVector.from_int(self._private_key.get_private_exponent()),
            self._private_key.get_modulus(),
        )
