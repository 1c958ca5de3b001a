from typing import Optional

from ..binary import BitVector
from ..tracing import ITraceSink, NullTraceSink, TraceLevel
from .abstract.IModularArithmetic import IModularArithmetic

ALGORITHM = "mod_pow"


class ModularArithmetic(IModularArithmetic):
    """Floored modulo and square-and-multiply exponentiation."""

    def __init__(self, trace: Optional[ITraceSink] = None) -> None:
        self._trace = trace or NullTraceSink()

    @staticmethod
    def mod(a: int, n: int) -> int:
        if n <= 0:
            raise ValueError(f"invalid divisor {n}")

        q = a // n  # floor division, so negative dividends land in [0, n) too
        return a - n * q

    def mod_pow(self, base: int, exponent: BitVector, modulus: int) -> int:
        if modulus <= 0:
            raise ValueError(f"invalid modulus {modulus}")

        trace = self._trace
        exponent_value = int(str(exponent) or "0", 2)
        trace.trace(
            ALGORITHM, TraceLevel.SUMMARY, "start",
            base=base, exponent=exponent_value, modulus=modulus,
        )

        y = 1
        i = len(exponent)
        for xi in exponent.create_reverse_iterator():
            i -= 1
            previous = y

            # squaring
            y = self.mod(y * y, modulus)
            squared = y

            if xi == 1:
                # multiplying
                y = self.mod(base * y, modulus)
                trace.trace(
                    ALGORITHM, TraceLevel.STEP, "step", i,
                    xi=xi, y=previous, squared=squared, multiplied=y,
                )
            else:
                trace.trace(
                    ALGORITHM, TraceLevel.STEP, "step", i,
                    xi=xi, y=previous, squared=squared,
                )

        trace.trace(
            ALGORITHM, TraceLevel.SUMMARY, "result",
            base=base, exponent=exponent_value, modulus=modulus, result=y,
        )
        return y
