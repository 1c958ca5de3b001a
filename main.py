"""Demonstration of certificates and authentication with textbook RSA.

Trent certifies Alice's public key. Bob receives the certificate, checks
Trent's signature and challenges Alice to prove she owns the matching
private key.
"""

import argparse
import logging
import sys
import time

from textbook_rsa.authentication import (
    AuthenticationError,
    ChallengeResponseProver,
    ChallengeResponseVerifier,
)
from textbook_rsa.binary import BitVector
from textbook_rsa.certificate import DigitalCertificate
from textbook_rsa.primes import Primes
from textbook_rsa.random import Random
from textbook_rsa.rsa import RSAKeyGenerator
from textbook_rsa.tracing import LoggingTraceSink, TraceLevel
from textbook_rsa.utils import EnvironmentManager, EnvironmentVariables

TRACE_LEVELS = {
    "off": None,
    "summary": TraceLevel.SUMMARY,
    "step": TraceLevel.STEP,
}


def parse_args() -> argparse.Namespace:
    """Parse command line arguments, falling back to the environment."""
    parser = argparse.ArgumentParser(
        description="Generate RSA keys, issue a certificate and authenticate its subject."
    )
    parser.add_argument(
        "--bit-size",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.PRIME_BIT_SIZE),
        help="Bit length of each prime",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=EnvironmentManager.get_int(EnvironmentVariables.PRIMALITY_TEST_ROUNDS),
        help="Miller-Rabin rounds per candidate",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EnvironmentManager.get_optional_int(EnvironmentVariables.RANDOM_SEED),
        help="Seed for a reproducible run",
    )
    parser.add_argument(
        "--trace",
        choices=sorted(TRACE_LEVELS),
        default=EnvironmentManager.get_string(EnvironmentVariables.TRACE_LEVEL),
        help="Algorithm trace detail",
    )
    parser.add_argument("--log", default="INFO", help="Logging level")
    return parser.parse_args()


def main() -> int:
    """Run the demonstration."""
    args = parse_args()
    level = getattr(logging, args.log.upper(), logging.INFO)
    if args.trace == "step":
        # step records are logged at DEBUG
        level = min(level, logging.DEBUG)
    logging.basicConfig(level=level, format="%(message)s")
    if args.trace not in TRACE_LEVELS:
        print(f"Unknown trace level {args.trace!r}", file=sys.stderr)
        return 2
    trace = LoggingTraceSink(max_level=TRACE_LEVELS[args.trace])

    # each party owns its random source
    seed = args.seed
    alice_random = Random(seed)
    trent_random = Random(None if seed is None else seed + 1)
    bob_random = Random(None if seed is None else seed + 2)

    start_time = time.time()
    try:
        alice_primes = Primes(args.bit_size, args.rounds, alice_random, trace=trace)
        alice = RSAKeyGenerator(alice_primes, trace=trace).generate()
        trent = RSAKeyGenerator(Primes(args.bit_size, args.rounds, trent_random)).generate()
    except ValueError as e:
        print(e, file=sys.stderr)
        return 2
    print(f"Key generation time: {time.time() - start_time:.4f} seconds")

    for name, key_pair in (("Alice", alice), ("Trent", trent)):
        print(f"\n{name}:")
        print(f"  n = {key_pair.modulus:5d} {BitVector.from_int(key_pair.modulus)}")
        print(f"  e = {key_pair.public_exponent:5d} {BitVector.from_int(key_pair.public_exponent)}")
        print(f"  d = {key_pair.private_exponent:5d} {BitVector.from_int(key_pair.private_exponent)}")

    # Trent certifies Alice's public key
    certificate = DigitalCertificate("Alice", alice.get_public_key(), trace=trace)
    try:
        certificate.sign_certificate("Trent", trent.get_private_key())
    except ValueError as e:
        print(e)
        return 1

    print("\nCertificate:")
    print(f"  r    = {certificate.get_record()}")
    print(f"  h(r) = {certificate.get_record_hash()} ({certificate.get_record_hash().to_int()})")
    print(f"  s    = {certificate.get_signature_value()} ({certificate.get_signature_value().to_int()})")

    if not certificate.verify_signature(trent.get_public_key()):
        print("Certificate signature is invalid.")
        return 1
    print("  signature verified with Trent's public key")

    # Bob challenges Alice
    bob = ChallengeResponseVerifier(bob_random, trace=trace)
    try:
        transcript = bob.authenticate(certificate, ChallengeResponseProver(alice.get_private_key()))
    except (AuthenticationError, ValueError) as e:
        print(e)
        return 1

    print("\nAuthentication:")
    print(f"  u              = {transcript.challenge:10d} {BitVector.from_int(transcript.challenge)}")
    print(f"  h(u)           = {transcript.challenge_hash:10d} {BitVector.from_int(transcript.challenge_hash, 8)}")
    print(f"  v = D(d, h(u)) = {transcript.response:10d} {BitVector.from_int(transcript.response)}")
    print(f"  E(e, v)        = {transcript.encrypted_response:10d} {BitVector.from_int(transcript.encrypted_response)}")
    print("\nAlice authenticated.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
