"""Console Logger Adapter - Outputs logs to the terminal."""
import sys
from typing import TextIO

from pluggable_logger.domain.entities import LogRecord
from pluggable_logger.domain.entities.log_record import TIMESTAMP_FORMAT
from pluggable_logger.domain.value_objects import LogLevel


class ConsoleLogger:
    """
    Implementation of LoggerPort that writes logs to a console stream.

    Used for CLI runs and as the default diagnostics channel of the
    other backends.
    """

    COLORS = {
        LogLevel.DEBUG: "\033[36m",     # Cyan
        LogLevel.INFO: "\033[32m",      # Green
        LogLevel.WARN: "\033[33m",      # Yellow
        LogLevel.ERROR: "\033[31m",     # Red
        LogLevel.CRITICAL: "\033[35m",  # Magenta
    }

    def __init__(
        self,
        level: LogLevel | str = LogLevel.INFO,
        use_colors: bool = True,
        stream: TextIO | None = None,
    ):
        """
        Initialize the console logger.

        Args:
            level: Minimum log level to output
            use_colors: Whether to use ANSI colors when the stream is a TTY
            stream: Output stream (defaults to stderr at write time)
        """
        self._level = self._coerce_level(level)
        self._stream = stream
        self._use_colors = use_colors

    def log(self, message: str, level: LogLevel) -> None:
        """Write a record to the stream if it meets the minimum level."""
        if level.severity < self._level.severity:
            return

        record = LogRecord(message=message, level=level)
        stream = self._stream or sys.stderr
        level_str = self._colorize_level(level) if self._colors_enabled(stream) else level.value

        print(f"[{record.timestamp.strftime(TIMESTAMP_FORMAT)}] {level_str}: {message}", file=stream)

    def set_level(self, level: LogLevel | str) -> None:
        """Set the minimum logging level."""
        self._level = self._coerce_level(level)

    @staticmethod
    def _coerce_level(level: LogLevel | str) -> LogLevel:
        if isinstance(level, LogLevel):
            return level
        return LogLevel.from_string(level)

    def _colors_enabled(self, stream: TextIO) -> bool:
        isatty = getattr(stream, "isatty", None)
        return self._use_colors and callable(isatty) and isatty()

    def _colorize_level(self, level: LogLevel) -> str:
        """Add ANSI color codes to log level."""
        reset = "\033[0m"
        return f"{self.COLORS.get(level, '')}{level.value}{reset}"
