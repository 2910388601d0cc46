"""Composite Logger Adapter - Fans records out to several backends."""
from collections.abc import Iterable

from pluggable_logger.adapters.outbound.console_logger import ConsoleLogger
from pluggable_logger.domain.value_objects import LogLevel
from pluggable_logger.ports.outbound import LoggerPort


class CompositeLogger:
    """
    Implementation of LoggerPort that forwards every record to a list of loggers.

    Loggers are called in order. A failing logger does not stop the
    remaining ones; the failure is reported instead.
    """

    def __init__(self, loggers: Iterable[LoggerPort], reporter: LoggerPort | None = None):
        """
        Initialize the composite logger.

        Args:
            loggers: Loggers to forward to, in call order. Must not be empty.
            reporter: Where to report failures of individual loggers
                (defaults to a ConsoleLogger on stderr). Must not be this
                composite or one of its loggers that may fail.

        Raises:
            ValueError: If no loggers are given
        """
        self._loggers = tuple(loggers)
        if not self._loggers:
            raise ValueError("CompositeLogger requires at least one logger")
        self._reporter = reporter or ConsoleLogger()

    @property
    def loggers(self) -> tuple[LoggerPort, ...]:
        return self._loggers

    def log(self, message: str, level: LogLevel) -> None:
        """Forward the record to every logger, in order."""
        for logger in self._loggers:
            try:
                logger.log(message, level)
            except Exception as e:
                self._reporter.log(
                    f"{type(logger).__name__} failed to log message: {e}",
                    LogLevel.ERROR,
                )

    def close(self) -> None:
        """Close every logger that supports closing."""
        for logger in self._loggers:
            close = getattr(logger, "close", None)
            if callable(close):
                close()

    def __len__(self) -> int:
        return len(self._loggers)
