"""Adapters - Concrete implementations of ports."""
from pluggable_logger.adapters.outbound import (
    CloudWatchLogger,
    CompositeLogger,
    ConsoleLogger,
    FileLogger,
)

__all__ = [
    "FileLogger",
    "CloudWatchLogger",
    "CompositeLogger",
    "ConsoleLogger",
]
