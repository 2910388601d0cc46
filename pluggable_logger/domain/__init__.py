"""Domain layer for the pluggable logger."""
from pluggable_logger.domain.entities import LogRecord
from pluggable_logger.domain.exceptions import (
    ConfigurationError,
    InvalidRegionError,
    PluggableLoggerError,
    ProvisioningError,
)
from pluggable_logger.domain.value_objects import AwsRegion, LogLevel

__all__ = [
    "LogRecord",
    "AwsRegion",
    "LogLevel",
    "PluggableLoggerError",
    "InvalidRegionError",
    "ConfigurationError",
    "ProvisioningError",
]
