from dataclasses import dataclass


@dataclass(frozen=True)
class ExtendedEuclidResult:
    """Outcome of the Extended Euclidean algorithm for a and b.

    The raw Bezout coefficients satisfy ``a*s + b*t == gcd``.

    Attributes:
        a (int): First operand
        b (int): Second operand, not greater than a
        gcd (int): Greatest common divisor of a and b
        s (int): Raw Bezout coefficient of a
        t (int): Raw Bezout coefficient of b
    """

    a: int
    b: int
    gcd: int
    s: int
    t: int

    def get_gcd(self) -> int:
        return self.gcd

    def get_positive_mult_inverse_of_a_mod_b(self) -> int:
        """Normalized s: the inverse of a modulo b when gcd is 1."""
        if self.s < 0:
            return self.b + self.s
        return self.s

    def get_positive_mult_inverse_of_b_mod_a(self) -> int:
        """Normalized t: the inverse of b modulo a when gcd is 1."""
        if self.t < 0:
            return self.a + self.t
        return self.t
