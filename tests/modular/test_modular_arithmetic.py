import pytest
import gmpy2

from textbook_rsa.binary import BitVector
from textbook_rsa.modular import ModularArithmetic
from textbook_rsa.tracing import TraceLevel


@pytest.fixture
def arithmetic(recording_trace):
    """Fixture to create a ModularArithmetic instance that records its trace."""
    return ModularArithmetic(recording_trace)

def test_mod_is_in_range_and_congruent():
    """mod(a, n) lies in [0, n) and is congruent to a."""
    for n in range(1, 30):
        for a in range(0, 100):
            r = ModularArithmetic.mod(a, n)
            assert 0 <= r < n
            assert (a - r) % n == 0

def test_mod_floors_negative_dividends():
    """Negative dividends still produce a non-negative remainder."""
    assert ModularArithmetic.mod(-1, 5) == 4
    assert ModularArithmetic.mod(-10, 5) == 0
    assert ModularArithmetic.mod(-11, 5) == 4

@pytest.mark.parametrize("n", [0, -3])
def test_mod_rejects_non_positive_divisor(n):
    """A divisor of zero or less is invalid."""
    with pytest.raises(ValueError):
        ModularArithmetic.mod(7, n)

def test_mod_pow_textbook_example(arithmetic):
    """4^13 mod 497 is 445."""
    assert arithmetic.mod_pow(4, BitVector.from_int(13), 497) == 445
    assert arithmetic.mod_pow(4, BitVector.from_int(13), 497) == 4**13 % 497

def test_mod_pow_matches_gmpy2():
    """Square-and-multiply agrees with gmpy2.powmod on small inputs."""
    arithmetic = ModularArithmetic()
    for modulus in (1, 2, 7, 97, 497, 4757):
        for base in (0, 1, 2, 3, 10, 96):
            for exponent in (0, 1, 2, 5, 13, 64, 1777):
                expected = int(gmpy2.powmod(base, exponent, modulus))
                assert arithmetic.mod_pow(base, BitVector.from_int(exponent), modulus) == expected

def test_mod_pow_empty_exponent_is_one():
    """An empty exponent leaves the accumulator at 1."""
    assert ModularArithmetic().mod_pow(5, BitVector([]), 7) == 1

def test_mod_pow_rejects_non_positive_modulus():
    """The modulus has to be positive."""
    with pytest.raises(ValueError):
        ModularArithmetic().mod_pow(2, BitVector.from_int(3), 0)

def test_mod_pow_step_trace(arithmetic, recording_trace):
    """Each exponent bit yields one step record with the intermediate values."""
    arithmetic.mod_pow(4, BitVector.from_int(13, 4), 497)

    steps = recording_trace.for_algorithm("mod_pow", TraceLevel.STEP)
    assert [step.iteration for step in steps] == [3, 2, 1, 0]
    assert [step.fields for step in steps] == [
        {"xi": 1, "y": 1, "squared": 1, "multiplied": 4},
        {"xi": 1, "y": 4, "squared": 16, "multiplied": 64},
        {"xi": 0, "y": 64, "squared": 120},
        {"xi": 1, "y": 120, "squared": 484, "multiplied": 445},
    ]

def test_mod_pow_summary_trace(arithmetic, recording_trace):
    """The summary tier records the inputs and the result."""
    arithmetic.mod_pow(4, BitVector.from_int(13, 4), 497)

    summary = recording_trace.for_algorithm("mod_pow", TraceLevel.SUMMARY)
    assert [record.event for record in summary] == ["start", "result"]
    assert summary[-1].fields == {"base": 4, "exponent": 13, "modulus": 497, "result": 445}
