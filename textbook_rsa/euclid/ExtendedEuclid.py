from typing import Optional

from ..tracing import ITraceSink, NullTraceSink, TraceLevel
from .ExtendedEuclidResult import ExtendedEuclidResult
from .abstract.IExtendedEuclid import IExtendedEuclid

ALGORITHM = "extended_euclid"


class ExtendedEuclid(IExtendedEuclid):
    """Iterative Extended Euclidean algorithm."""

    def __init__(self, trace: Optional[ITraceSink] = None) -> None:
        self._trace = trace or NullTraceSink()

    def compute(self, a: int, b: int) -> ExtendedEuclidResult:
        if a < 0 or b < 0:
            raise ValueError("non-negative operands required")
        if b > a:
            raise ValueError(f"b = {b} is greater than a = {a}")

        trace = self._trace
        trace.trace(ALGORITHM, TraceLevel.SUMMARY, "start", a=a, b=b)

        i = 0
        r1, r2 = a, b
        s, s1 = 0, 1
        t, t1 = 1, 0

        while r2 != 0:
            i += 1

            r = r1
            r1 = r2
            q = r // r1
            r2 = r - r1 * q

            trace.trace(ALGORITHM, TraceLevel.STEP, "step", i, q=q, r=r, r1=r1, r2=r2, s=s, t=t)

            # (s1, t1) become the coefficients of r1, (s, t) those of r2
            s, s1 = s1 - q * s, s
            t, t1 = t1 - q * t, t

        result = ExtendedEuclidResult(a=a, b=b, gcd=r1, s=s1, t=t1)
        trace.trace(ALGORITHM, TraceLevel.SUMMARY, "result", a=a, b=b, gcd=r1, s=s1, t=t1)
        return result
