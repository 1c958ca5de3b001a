"""Digital certificate module."""

from .DigitalCertificate import DigitalCertificate

__all__ = ["DigitalCertificate"]
