from .TraceRecord import TraceLevel, TraceRecord
from .abstract.ITraceSink import ITraceSink


class NullTraceSink(ITraceSink):
    """Trace sink that discards every record."""

    def is_enabled(self, level: TraceLevel) -> bool:
        return False

    def emit(self, record: TraceRecord) -> None:
        pass
