"""Digital certificates binding a subject's identity to its public key."""

from typing import Optional

from ..binary import BitVector
from ..modular import IModularArithmetic, ModularArithmetic
from ..protocol_constants import (
    BYTE_SIZE,
    EXPONENT_BYTE_SIZE,
    MODULUS_BYTE_SIZE,
    SUBJECT_BYTE_SIZE,
)
from ..rsa import RSAPrivateKey, RSAPublicKey
from ..tracing import ITraceSink, NullTraceSink, TraceLevel

ALGORITHM = "digital_certificate"


class DigitalCertificate:
    """A subject's identity and public key, signed by an issuer.

    Signing packs ``subject || modulus || exponent`` into a bit record r,
    hashes it to 8 bits and decrypts the hash with the issuer's private key.
    Anyone holding the issuer's public key can re-encrypt the signature and
    compare it with h(r). The hash must be below the issuer's modulus to
    survive the round trip; only issuers with n >= 2^8 can sign every record.
    """

    def __init__(
        self,
        subject: str,
        subject_public_key: RSAPublicKey,
        arithmetic: Optional[IModularArithmetic] = None,
        trace: Optional[ITraceSink] = None,
        subject_byte_size: int = SUBJECT_BYTE_SIZE,
        modulus_byte_size: int = MODULUS_BYTE_SIZE,
        exponent_byte_size: int = EXPONENT_BYTE_SIZE,
    ) -> None:
        """Create an unsigned certificate.

        Args:
            subject (str): Identity of the subject, at most subject_byte_size bytes
            subject_public_key (RSAPublicKey): Public key of the subject
            arithmetic (IModularArithmetic): Exponentiation used for signing
            trace (ITraceSink): Receiver of trace records
            subject_byte_size (int): Width of the subject field in the record
            modulus_byte_size (int): Width of the modulus field in the record
            exponent_byte_size (int): Width of the exponent field in the record

        Raises:
            TypeError: If subject or subject_public_key is None
            ValueError: If subject is empty
        """
        if subject is None:
            raise TypeError("the subject parameter must be non-null")
        if subject_public_key is None:
            raise TypeError("the subject's public key parameter must be non-null")
        if not subject:
            raise ValueError("the subject parameter must not be empty")

        self._subject = subject
        self._subject_public_key = subject_public_key
        self._trace = trace or NullTraceSink()
        self._arithmetic = arithmetic or ModularArithmetic(self._trace)
        self._subject_bits = subject_byte_size * BYTE_SIZE
        self._modulus_bits = modulus_byte_size * BYTE_SIZE
        self._exponent_bits = exponent_byte_size * BYTE_SIZE

        self._issuer: Optional[str] = None
        self._signature: Optional[BitVector] = None

    def sign_certificate(self, issuer: str, issuer_private_key: RSAPrivateKey) -> None:
        """Sign the certificate; the issuer's private key is not retained.

        Args:
            issuer (str): Identity of the signatory
            issuer_private_key (RSAPrivateKey): Key used to sign

        Raises:
            TypeError: If issuer or issuer_private_key is None
            ValueError: If issuer is empty, a field does not fit its width, or
                h(r) is not below the issuer's modulus
        """
        if issuer is None:
            raise TypeError("the issuer parameter must be non-null")
        if issuer_private_key is None:
            raise TypeError("the issuer private key parameter must be non-null")
        if not issuer:
            raise ValueError("the issuer parameter must not be empty")

        record_hash = self.get_record_hash()
        if record_hash.to_int() >= issuer_private_key.get_modulus():
            raise ValueError(
                f"record hash {record_hash.to_int()} is not below the issuer's "
                f"modulus {issuer_private_key.get_modulus()}"
            )

        # D(d_issuer, h(subject || e_subject))
        s = self._arithmetic.mod_pow(
            record_hash.to_int(),
            BitVector.from_int(issuer_private_key.get_private_exponent()),
            issuer_private_key.get_modulus(),
        )

        self._issuer = issuer
        self._signature = BitVector.from_int(s)

        self._trace.trace(
            ALGORITHM, TraceLevel.SUMMARY, "signed",
            record_hash=record_hash.to_int(), signature=s,
        )

    def verify_signature(self, issuer_public_key: RSAPublicKey) -> bool:
        """Check the signature against the issuer's public key.

        Args:
            issuer_public_key (RSAPublicKey): Public key of the signatory

        Returns:
            bool: True if E(e_issuer, signature) equals h(r); False if the
                certificate is unsigned or the values differ
        """
        if self._signature is None:
            return False

        encrypted = self._arithmetic.mod_pow(
            self._signature.to_int(),
            BitVector.from_int(issuer_public_key.get_public_exponent()),
            issuer_public_key.get_modulus(),
        )
        expected = self.get_record_hash().to_int()

        self._trace.trace(
            ALGORITHM, TraceLevel.SUMMARY, "verified",
            record_hash=expected, encrypted_signature=encrypted,
        )
        return encrypted == expected

    def get_record(self) -> BitVector:
        """Return r = subject || modulus || exponent as one bit vector."""
        subject_bits = BitVector.from_string(self._subject, self._subject_bits)
        modulus_bits = BitVector.from_int(
            self._subject_public_key.get_modulus(), self._modulus_bits
        )
        exponent_bits = BitVector.from_int(
            self._subject_public_key.get_public_exponent(), self._exponent_bits
        )
        return BitVector.concatenate(subject_bits, modulus_bits, exponent_bits)

    def get_record_hash(self) -> BitVector:
        return self.get_record().hash()

    def get_signature_value(self) -> Optional[BitVector]:
        return self._signature

    def get_subject(self) -> str:
        return self._subject

    def get_subject_public_key(self) -> RSAPublicKey:
        return self._subject_public_key

    def get_issuer(self) -> Optional[str]:
        return self._issuer

    def is_signed(self) -> bool:
        return self._signature is not None
