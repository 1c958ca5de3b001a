from abc import ABC, abstractmethod
from typing import Optional

from ..TraceRecord import TraceLevel, TraceRecord


class ITraceSink(ABC):
    """Abstract base class for receivers of structured trace records."""

    @abstractmethod
    def is_enabled(self, level: TraceLevel) -> bool:
        """Tell whether records of the given tier are wanted.

        Args:
            level (TraceLevel): The tier of a prospective record

        Returns:
            bool: True if records of this tier will be kept
        """

    @abstractmethod
    def emit(self, record: TraceRecord) -> None:
        """Receive a single trace record.

        Args:
            record (TraceRecord): The record to handle
        """

    def trace(
        self,
        algorithm: str,
        level: TraceLevel,
        event: str,
        iteration: Optional[int] = None,
        **fields: int,
    ) -> None:
        """Build and emit a record, skipping the work when the tier is disabled."""
        if self.is_enabled(level):
            self.emit(TraceRecord(algorithm, level, event, iteration, dict(fields)))
