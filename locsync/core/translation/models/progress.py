"""Progress event models."""

from enum import Enum
from typing import Callable, Optional

from pydantic import BaseModel, Field


class LogSeverity(str, Enum):
    """Severity of a progress log entry."""

    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


class ProgressEvent(BaseModel):
    """A single progress notification for the caller."""

    current: int = Field(default=0, description="Units processed so far")
    total: int = Field(default=0, description="Units to process in this run")
    current_item_label: str = Field(default="", description="Short label of the unit")
    log_message: str = Field(default="", description="Human readable log line")
    log_severity: LogSeverity = Field(default=LogSeverity.INFO)


ProgressSink = Callable[[ProgressEvent], None]


def emit(sink: Optional[ProgressSink], event: ProgressEvent) -> None:
    """Send an event to the sink, if one was supplied."""
    if sink is not None:
        sink(event)
