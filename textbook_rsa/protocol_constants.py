# protocol_constants.py

WORD_SIZE = 32  # Width of a native machine word in bits
BYTE_SIZE = 8  # Bits per byte, also the width of a hash value

PRIME_BIT_SIZE = 7  # Bit length of each generated prime
PRIMALITY_TEST_ROUNDS = 20  # Miller-Rabin rounds, false positive <= 2^-rounds
FIRST_PUBLIC_EXPONENT = 3  # First candidate tried for the public exponent e

# Prime bit sizes accepted for key generation; n = p*q must fit in a word
MIN_KEY_PRIME_BIT_SIZE = 3  # 2 bits only ever yield 3, so p != q is impossible
MAX_KEY_PRIME_BIT_SIZE = WORD_SIZE // 2

# Certificate record layout; each size is a number of bytes
SUBJECT_BYTE_SIZE = 6
MODULUS_BYTE_SIZE = 4
EXPONENT_BYTE_SIZE = 4

RANDOM_INT_BITS = 31  # next_non_negative_int() returns values in [0, 2^31)
