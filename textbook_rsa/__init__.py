"""Textbook RSA: key generation, certificates and challenge/response authentication."""

__version__ = "0.1.0"
