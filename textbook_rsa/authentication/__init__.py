"""Challenge/response authentication module."""

from .ChallengeResponseProver import ChallengeResponseProver
from .ChallengeResponseVerifier import ChallengeResponseVerifier
from .AuthenticationTranscript import AuthenticationTranscript
from .exceptions import AuthenticationError

__all__ = [
    "ChallengeResponseProver",
    "ChallengeResponseVerifier",
    "AuthenticationTranscript",
    "AuthenticationError",
]
