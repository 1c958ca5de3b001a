import logging
from typing import Optional

from .TraceRecord import TraceLevel, TraceRecord
from .abstract.ITraceSink import ITraceSink

_LOG_LEVELS = {
    TraceLevel.SUMMARY: logging.INFO,
    TraceLevel.STEP: logging.DEBUG,
}


class LoggingTraceSink(ITraceSink):
    """Trace sink that writes records to a standard library logger.

    SUMMARY records are logged at INFO and STEP records at DEBUG. Records above
    ``max_level`` are dropped before they reach the logger; ``max_level=None``
    turns tracing off entirely.
    """

    def __init__(
        self,
        logger_name: str = "textbook_rsa",
        max_level: Optional[TraceLevel] = TraceLevel.SUMMARY,
    ) -> None:
        self._logger = logging.getLogger(logger_name)
        self._max_level = max_level

    def is_enabled(self, level: TraceLevel) -> bool:
        if self._max_level is None or not self._max_level.includes(level):
            return False
        return self._logger.isEnabledFor(_LOG_LEVELS[level])

    def emit(self, record: TraceRecord) -> None:
        self._logger.log(
            _LOG_LEVELS[record.level],
            "%s",
            self.format_record(record),
            extra={"trace_record": record},
        )

    @staticmethod
    def format_record(record: TraceRecord) -> str:
        """Render a record as ``algorithm event [i=..] key=value ...``."""
        parts = [record.algorithm, record.event]
        if record.iteration is not None:
            parts.append(f"i={record.iteration}")
        parts.extend(f"{name}={value}" for name, value in record.fields.items())
        return " ".join(parts)
