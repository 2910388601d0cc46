"""Outbound adapters - Logging backends (file, CloudWatch, console, composite)."""
from pluggable_logger.adapters.outbound.cloudwatch_logger import CloudWatchLogger
from pluggable_logger.adapters.outbound.composite_logger import CompositeLogger
from pluggable_logger.adapters.outbound.console_logger import ConsoleLogger
from pluggable_logger.adapters.outbound.file_logger import FileLogger

__all__ = [
    "FileLogger",
    "CloudWatchLogger",
    "CompositeLogger",
    "ConsoleLogger",
]
