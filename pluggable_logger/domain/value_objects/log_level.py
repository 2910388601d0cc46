"""Log level enumeration for log records."""
from enum import Enum


class LogLevel(str, Enum):
    """Severity levels, declared from least to most severe."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @property
    def severity(self) -> int:
        """Numeric severity, usable for minimum-level filtering."""
        mapping = {
            LogLevel.DEBUG: 10,
            LogLevel.INFO: 20,
            LogLevel.WARN: 30,
            LogLevel.ERROR: 40,
            LogLevel.CRITICAL: 50,
        }
        return mapping[self]

    @classmethod
    def from_string(cls, name: str) -> "LogLevel":
        """
        Look up a level by name, ignoring case.

        WARNING is accepted as an alias of WARN.

        Raises:
            ValueError: If the name matches no level
        """
        normalized = name.strip().upper()
        if normalized == "WARNING":
            return cls.WARN
        for level in cls:
            if level.value == normalized:
                return level
        raise ValueError(f"Unknown log level: {name}")
