from dataclasses import dataclass


@dataclass(frozen=True)
class RSAPublicKey:
    """
    Read-only view of the public half of a key pair.

    Attributes:
        modulus (int): The RSA modulus n = p * q
        public_exponent (int): The public exponent e

    Raises:
        ValueError: If the key is malformed.
    """
    modulus: int
    public_exponent: int

    def __post_init__(self):
        if self.modulus <= 0:
            raise ValueError("Modulus (n) must be positive.")
        if self.public_exponent <= 0:
            raise ValueError("Public exponent (e) must be positive.")

    def get_modulus(self) -> int:
        return self.modulus

    def get_public_exponent(self) -> int:
        return self.public_exponent


@dataclass(frozen=True)
class RSAPrivateKey:
    """
    Read-only view of the private half of a key pair.

    Attributes:
        modulus (int): The RSA modulus n = p * q
        private_exponent (int): The private exponent d

    Raises:
        ValueError: If the key is malformed.
    """
    modulus: int
    private_exponent: int

    def __post_init__(self):
        if self.modulus <= 0:
            raise ValueError("Modulus (n) must be positive.")
        if self.private_exponent <= 0:
            raise ValueError("Private exponent (d) must be positive.")

    def get_modulus(self) -> int:
        return self.modulus

    def get_private_exponent(self) -> int:
        return self.private_exponent

    def __repr__(self) -> str:
        return f"RSAPrivateKey(modulus={self.modulus}, private_exponent=...)"


@dataclass(frozen=True)
class KeyPair:
    """
    Key material produced by one key generation run.

    The primes p and q the modulus was built from are not part of the pair.

    Attributes:
        modulus (int): The RSA modulus n
        public_exponent (int): e, with gcd(e, phi(n)) = 1
        private_exponent (int): d = e^-1 mod phi(n)
    """
    modulus: int
    public_exponent: int
    private_exponent: int

    def get_public_key(self) -> RSAPublicKey:
        return RSAPublicKey(self.modulus, self.public_exponent)

    def get_private_key(self) -> RSAPrivateKey:
        return RSAPrivateKey(self.modulus, self.private_exponent)

    def __repr__(self) -> str:
        return f"KeyPair(modulus={self.modulus}, public_exponent={self.public_exponent})"
