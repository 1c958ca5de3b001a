from typing import Optional

from ..binary import BitVector
from ..modular import ModularArithmetic
from ..tracing import ITraceSink, NullTraceSink, TraceLevel
from .PrimalityVerdict import PrimalityVerdict
from .abstract.IPrimalityTester import IPrimalityTester

ALGORITHM = "miller_rabin"


class MillerRabin(IPrimalityTester):
    """Miller-Rabin test computing a^(n-1) mod n by repeated squaring.

    Besides the final Fermat check, every squaring is checked for a
    non-trivial square root of 1 modulo n.
    """

    def __init__(self, trace: Optional[ITraceSink] = None) -> None:
        self._trace = trace or NullTraceSink()

    def test(self, a: int, x: BitVector) -> PrimalityVerdict:
        n = x.to_int()
        if a < 0 or a > n:
            raise ValueError(f"witness a = {a} is not in 0 <= a <= {n}")

        exponent = BitVector.from_int(n - 1, len(x))
        mod = ModularArithmetic.mod
        trace = self._trace
        trace.trace(ALGORITHM, TraceLevel.SUMMARY, "start", n=n, a=a)

        y = 1
        i = len(exponent)
        for xi in exponent.create_reverse_iterator():
            i -= 1
            z = y
            y = mod(y * y, n)
            squared = y

            if y == 1 and z != 1 and z != n - 1:
                trace.trace(ALGORITHM, TraceLevel.STEP, "nontrivial_root", i, xi=xi, z=z, y=squared)
                return self._verdict(n, a, PrimalityVerdict.NOT_PRIME)

            if xi == 1:
                y = mod(y * a, n)

            trace.trace(ALGORITHM, TraceLevel.STEP, "step", i, xi=xi, z=z, squared=squared, y=y)

        if y != 1:
            return self._verdict(n, a, PrimalityVerdict.NOT_PRIME)
        return self._verdict(n, a, PrimalityVerdict.PERHAPS_PRIME)

    # Private methods
    # --------------

    def _verdict(self, n: int, a: int, verdict: PrimalityVerdict) -> PrimalityVerdict:
        self._trace.trace(
            ALGORITHM, TraceLevel.SUMMARY, verdict.name.lower(),
            n=n, a=a,
        )
        return verdict
