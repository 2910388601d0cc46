"""LogRecord entity - one message at one level at one instant."""
from dataclasses import dataclass, field
from datetime import datetime

from pluggable_logger.domain.value_objects.log_level import LogLevel

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogRecord:
    """A log record, built inside a backend's log call and discarded after it."""

    message: str
    level: LogLevel
    timestamp: datetime = field(default_factory=datetime.now)

    def format_line(self) -> str:
        """Format as a file line: '2024-01-31 13:45:00 [INFO] message'."""
        return f"{self.timestamp.strftime(TIMESTAMP_FORMAT)} [{self.level.value}] {self.message}"

    def format_event_message(self) -> str:
        """Format as a remote event body: '[INFO] message'."""
        return f"[{self.level.value}] {self.message}"

    def timestamp_millis(self) -> int:
        """Milliseconds since the epoch."""
        return int(self.timestamp.timestamp() * 1000)
