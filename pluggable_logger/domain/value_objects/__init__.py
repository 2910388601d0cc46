"""Value objects for the pluggable logger domain."""
from pluggable_logger.domain.value_objects.aws_region import AwsRegion
from pluggable_logger.domain.value_objects.log_level import LogLevel

__all__ = ["AwsRegion", "LogLevel"]
