from dataclasses import dataclass


@dataclass(frozen=True)
class AuthenticationTranscript:
    """Values exchanged during one successful challenge/response run.

    Attributes:
        challenge (int): u, the random challenge sent to the prover
        challenge_hash (int): h(u)
        response (int): v = D(d, h(u)), produced by the prover
        encrypted_response (int): E(e, v), equal to h(u)
    """

    challenge: int
    challenge_hash: int
    response: int
    encrypted_response: int
