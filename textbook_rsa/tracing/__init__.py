"""Structured tracing of the arithmetic algorithms."""

from .TraceRecord import TraceLevel, TraceRecord
from .abstract.ITraceSink import ITraceSink
from .NullTraceSink import NullTraceSink
from .LoggingTraceSink import LoggingTraceSink
from .RecordingTraceSink import RecordingTraceSink

__all__ = [
    "TraceLevel",
    "TraceRecord",
    "ITraceSink",
    "NullTraceSink",
    "LoggingTraceSink",
    "RecordingTraceSink",
]
