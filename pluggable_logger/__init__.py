"""Pluggable Logger - One logging interface, interchangeable backends.

Log to a local file, to AWS CloudWatch Logs, or to several backends at once.
"""

__version__ = "0.1.0"

# Application layer
from pluggable_logger.application import LoggerSettings, create_logger

# Domain layer
from pluggable_logger.domain import AwsRegion, LogLevel, LogRecord

# Re-export for convenience
__all__ = [
    "__version__",
    # Domain
    "LogLevel",
    "AwsRegion",
    "LogRecord",
    # Application
    "LoggerSettings",
    "create_logger",
]
