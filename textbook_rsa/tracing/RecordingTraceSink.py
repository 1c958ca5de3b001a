from typing import List, Optional

from .TraceRecord import TraceLevel, TraceRecord
from .abstract.ITraceSink import ITraceSink


class RecordingTraceSink(ITraceSink):
    """Trace sink that keeps records in memory, in emission order."""

    def __init__(self, max_level: TraceLevel = TraceLevel.STEP) -> None:
        self._max_level = max_level
        self.records: List[TraceRecord] = []

    def is_enabled(self, level: TraceLevel) -> bool:
        return self._max_level.includes(level)

    def emit(self, record: TraceRecord) -> None:
        self.records.append(record)

    def for_algorithm(
        self, algorithm: str, level: Optional[TraceLevel] = None
    ) -> List[TraceRecord]:
        """Return the records of one algorithm, optionally restricted to one tier."""
        return [
            record
            for record in self.records
            if record.algorithm == algorithm and (level is None or record.level == level)
        ]

    def clear(self) -> None:
        self.records.clear()
