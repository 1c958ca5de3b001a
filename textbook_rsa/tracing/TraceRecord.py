from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class TraceLevel(Enum):
    """Verbosity tiers, lower values are more important."""

    SUMMARY = 1  # entry/exit of an algorithm and its result
    STEP = 2  # one record per loop iteration

    def includes(self, other: "TraceLevel") -> bool:
        return other.value <= self.value


@dataclass(frozen=True)
class TraceRecord:
    """A structured trace event emitted by one of the arithmetic algorithms.

    Attributes:
        algorithm (str): Name of the emitting algorithm, e.g. "mod_pow"
        level (TraceLevel): Verbosity tier of the record
        event (str): What happened, e.g. "start", "step", "result"
        iteration (Optional[int]): Loop index for step records
        fields (Dict[str, int]): Named values of the event
    """

    algorithm: str
    level: TraceLevel
    event: str
    iteration: Optional[int] = None
    fields: Dict[str, int] = field(default_factory=dict)
