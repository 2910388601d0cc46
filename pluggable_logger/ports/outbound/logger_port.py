"""Logger Port - Interface for logging backends."""
from typing import Protocol

from pluggable_logger.domain.value_objects import LogLevel


class LoggerPort(Protocol):
    """
    Port interface for logging.

    Implementations output to:
    - A local text file
    - CloudWatch Logs
    - Console (stderr)
    - Several of the above at once (composite)
    """

    def log(self, message: str, level: LogLevel) -> None:
        """
        Record a message at the given level.

        Args:
            message: Text of the record
            level: Severity of the record
        """
        ...
