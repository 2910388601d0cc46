"""File Logger Adapter - Appends log lines to a local text file."""
import os
import threading

from pluggable_logger.adapters.outbound.console_logger import ConsoleLogger
from pluggable_logger.domain.entities import LogRecord
from pluggable_logger.domain.value_objects import LogLevel
from pluggable_logger.ports.outbound import LoggerPort


class FileLogger:
    """
    Implementation of LoggerPort that appends records to a text file.

    Each record becomes one line: ``2024-01-31 13:45:00 [INFO] message``.
    The file is created on first use, with a creation notice as its first
    line. Write failures are recorded instead of raised.
    """

    def __init__(self, log_file_path: str, reporter: LoggerPort | None = None):
        """
        Initialize the file logger.

        Args:
            log_file_path: Path of the log file. Missing parent directories
                are created along with the file.
            reporter: Where to report failures that cannot be written to the
                file itself (defaults to a ConsoleLogger on stderr)
        """
        self._log_file_path = log_file_path
        self._reporter = reporter or ConsoleLogger()
        self._lock = threading.Lock()

    @property
    def log_file_path(self) -> str:
        return self._log_file_path

    def log(self, message: str, level: LogLevel) -> None:
        """Append a record to the log file. Never raises on I/O errors."""
        record = LogRecord(message=message, level=level)
        with self._lock:
            try:
                if not os.path.exists(self._log_file_path):
                    self._create_file()
                self._append(record)
            except OSError as e:
                self._record_failure(e)

    def _create_file(self) -> None:
        """Create the file and write the creation notice as its first line."""
        log_dir = os.path.dirname(self._log_file_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        self._append(LogRecord(
            message=f"Log file created: {self._log_file_path}",
            level=LogLevel.INFO,
        ))

    def _append(self, record: LogRecord) -> None:
        # One write per line on an append-mode handle; unencodable text is escaped
        with open(self._log_file_path, "a", encoding="utf-8", errors="backslashreplace") as log_file:
            log_file.write(record.format_line() + "\n")

    def _record_failure(self, error: OSError) -> None:
        """Write an ERROR record about a failed write, falling back to the reporter."""
        failure = LogRecord(
            message=f"Error writing to log file: {error}",
            level=LogLevel.ERROR,
        )
        try:
            self._append(failure)
        except OSError:
            self._reporter.log(
                f"{failure.message} ({self._log_file_path})",
                LogLevel.ERROR,
            )
