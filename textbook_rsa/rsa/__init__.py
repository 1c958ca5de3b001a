"""RSA key generation module."""

from .keys import KeyPair, RSAPublicKey, RSAPrivateKey
from .RSAKeyGenerator import RSAKeyGenerator
from .KeyPairFactory import KeyPairFactory
from .abstract.IRSAKeyGenerator import IRSAKeyGenerator
from .abstract.IKeyPairFactory import IKeyPairFactory

__all__ = [
    "KeyPair",
    "RSAPublicKey",
    "RSAPrivateKey",
    "RSAKeyGenerator",
    "KeyPairFactory",
    "IRSAKeyGenerator",
    "IKeyPairFactory",
]
