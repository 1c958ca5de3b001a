import pytest
import gmpy2

from textbook_rsa.binary import BitVector
from textbook_rsa.primes import MillerRabin, PrimalityVerdict


@pytest.fixture
def miller_rabin():
    """Fixture to create a MillerRabin tester without tracing."""
    return MillerRabin()

def test_prime_passes_every_witness(miller_rabin):
    """97 is reported perhaps-prime for all witnesses in [1, 96]."""
    candidate = BitVector.from_int(97, 7)
    for a in range(1, 97):
        assert miller_rabin.test(a, candidate) is PrimalityVerdict.PERHAPS_PRIME

def test_carmichael_number_is_mostly_rejected(miller_rabin):
    """561 = 3 * 11 * 17 is rejected by at least three quarters of the witnesses."""
    candidate = BitVector.from_int(561, 10)
    rejections = sum(
        1 for a in range(1, 561)
        if miller_rabin.test(a, candidate) is PrimalityVerdict.NOT_PRIME
    )
    assert rejections * 4 >= 3 * 560

def test_carmichael_number_rejected_by_nontrivial_root(recording_trace):
    """2^560 = 1 mod 561, so witness 2 can only catch 561 through a square root of 1."""
    verdict = MillerRabin(recording_trace).test(2, BitVector.from_int(561, 10))

    assert verdict is PrimalityVerdict.NOT_PRIME
    events = [record.event for record in recording_trace.for_algorithm("miller_rabin")]
    assert "nontrivial_root" in events
    assert events[-1] == "not_prime"

def test_small_primes_agree_with_gmpy2(miller_rabin):
    """Every prime below 300 passes with witnesses 2 and 3."""
    for n in range(5, 300, 2):
        if gmpy2.is_prime(n):
            candidate = BitVector.from_int(n, 9)
            assert miller_rabin.test(2, candidate).is_perhaps_prime()
            assert miller_rabin.test(3, candidate).is_perhaps_prime()

def test_even_composite_rejected(miller_rabin):
    """Fermat's check rejects 48 with witness 5."""
    assert miller_rabin.test(5, BitVector.from_int(48, 7)) is PrimalityVerdict.NOT_PRIME

def test_witness_equal_to_candidate_is_legal(miller_rabin):
    """a == n is accepted as an argument, and proves nothing useful."""
    assert miller_rabin.test(97, BitVector.from_int(97, 7)) is PrimalityVerdict.NOT_PRIME

@pytest.mark.parametrize("a", [-1, 98])
def test_witness_out_of_range(miller_rabin, a):
    """Witnesses outside [0, n] are rejected."""
    with pytest.raises(ValueError):
        miller_rabin.test(a, BitVector.from_int(97, 7))

def test_candidate_is_not_modified(miller_rabin):
    """Testing does not rewrite the candidate's bits."""
    candidate = BitVector.from_int(97, 7)
    miller_rabin.test(3, candidate)
    assert candidate.to_int() == 97
