class AuthenticationError(Exception):
    """Raised when a challenge response does not match the challenge.

    Attributes:
        expected (int): The verifier's own hash of the challenge
        received (int): The response encrypted with the claimed public key
    """

    def __init__(self, subject: str, expected: int, received: int) -> None:
        super().__init__(
            f"Failed to authenticate {subject}: expected {expected}, got {received}"
        )
        self.subject = subject
        self.expected = expected
        self.received = received
