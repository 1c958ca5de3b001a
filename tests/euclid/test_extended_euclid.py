import pytest
import gmpy2

from textbook_rsa.euclid import ExtendedEuclid, ExtendedEuclidResult
from textbook_rsa.tracing import TraceLevel


@pytest.fixture
def euclid(recording_trace):
    """Fixture to create an ExtendedEuclid instance that records its trace."""
    return ExtendedEuclid(recording_trace)

def test_known_inverses(euclid):
    """gcd(20, 3) = 1 with 20*(-1) + 3*7 = 1."""
    result = euclid.compute(20, 3)

    assert result.get_gcd() == 1
    assert (result.s, result.t) == (-1, 7)
    assert result.get_positive_mult_inverse_of_b_mod_a() == 7
    assert result.get_positive_mult_inverse_of_a_mod_b() == 2

def test_rsa_private_exponent(euclid):
    """The inverse of e = 7 modulo phi = 9600 is 2743."""
    result = euclid.compute(9600, 7)
    assert result.get_gcd() == 1
    assert result.get_positive_mult_inverse_of_b_mod_a() == 2743

def test_bezout_identity_and_gcd():
    """a*s + b*t equals gcd(a, b) for every pair with b <= a."""
    euclid = ExtendedEuclid()
    for a in range(0, 80):
        for b in range(0, a + 1):
            result = euclid.compute(a, b)
            assert result.get_gcd() == int(gmpy2.gcd(a, b))
            assert a * result.s + b * result.t == result.get_gcd()

def test_normalized_inverses():
    """For coprime operands the normalized coefficients are inverses in range."""
    euclid = ExtendedEuclid()
    for a in range(3, 120):
        for b in range(2, a):
            result = euclid.compute(a, b)
            if result.get_gcd() != 1:
                continue
            inverse_of_b = result.get_positive_mult_inverse_of_b_mod_a()
            inverse_of_a = result.get_positive_mult_inverse_of_a_mod_b()
            assert 0 <= inverse_of_b < a
            assert 0 <= inverse_of_a < b
            assert (b * inverse_of_b) % a == 1
            assert (a * inverse_of_a) % b == 1
            assert inverse_of_b == int(gmpy2.invert(b, a))

def test_zero_second_operand():
    """gcd(a, 0) is a."""
    result = ExtendedEuclid().compute(12, 0)
    assert result.get_gcd() == 12
    assert (result.s, result.t) == (1, 0)

@pytest.mark.parametrize("a,b", [(3, 20), (-1, 0), (5, -2)])
def test_rejects_invalid_operands(a, b):
    """b > a and negative operands are invalid."""
    with pytest.raises(ValueError):
        ExtendedEuclid().compute(a, b)

def test_result_is_immutable():
    """The result is a frozen value."""
    result = ExtendedEuclidResult(a=20, b=3, gcd=1, s=-1, t=7)
    with pytest.raises(AttributeError):
        result.gcd = 2

def test_step_trace(euclid, recording_trace):
    """One step record per division, carrying quotient and remainders."""
    euclid.compute(20, 3)

    steps = recording_trace.for_algorithm("extended_euclid", TraceLevel.STEP)
    assert [step.iteration for step in steps] == [1, 2, 3]
    assert [(step.fields["q"], step.fields["r2"]) for step in steps] == [(6, 2), (1, 1), (2, 0)]
