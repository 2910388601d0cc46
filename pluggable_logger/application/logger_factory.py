"""Logger Factory - Builds configured logging backends."""
import os
from dataclasses import dataclass

import boto3

from pluggable_logger.domain.exceptions import ConfigurationError
from pluggable_logger.domain.value_objects import AwsRegion, LogLevel
from pluggable_logger.ports.outbound import LoggerPort

TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class LoggerSettings:
    """Which backends to build and where they write."""

    file_path: str | None = None

    # CloudWatch backend, enabled when all three are set
    region: str | None = None
    log_group: str | None = None
    log_stream: str | None = None

    console: bool = False
    console_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "LoggerSettings":
        """
        Read settings from environment variables.

        Environment Variables:
            LOG_FILE_PATH: Path of the log file (enables the file backend)
            LOG_AWS_REGION: CloudWatch region (falls back to AWS_REGION)
            LOG_GROUP_NAME: CloudWatch log group
            LOG_STREAM_NAME: CloudWatch log stream
            LOG_CONSOLE: Enable console output (1, true, yes, on)
            LOG_LEVEL: Minimum level for console output
        """
        return cls(
            file_path=os.environ.get("LOG_FILE_PATH") or None,
            region=os.environ.get("LOG_AWS_REGION") or os.environ.get("AWS_REGION") or None,
            log_group=os.environ.get("LOG_GROUP_NAME") or None,
            log_stream=os.environ.get("LOG_STREAM_NAME") or None,
            console=os.environ.get("LOG_CONSOLE", "").strip().lower() in TRUTHY,
            console_level=os.environ.get("LOG_LEVEL", "INFO"),
        )

    @property
    def cloudwatch_enabled(self) -> bool:
        """Check if any CloudWatch setting is given."""
        return bool(self.log_group or self.log_stream)

    def validate(self) -> None:
        """
        Check that the settings describe at least one usable backend.

        Raises:
            ConfigurationError: If nothing is enabled or CloudWatch settings
                are incomplete
            InvalidRegionError: If the region code is unknown
        """
        if self.cloudwatch_enabled:
            missing = [
                name for name, value in (
                    ("region", self.region),
                    ("log_group", self.log_group),
                    ("log_stream", self.log_stream),
                ) if not value
            ]
            if missing:
                raise ConfigurationError(
                    f"Incomplete CloudWatch settings, missing: {', '.join(missing)}"
                )
            AwsRegion.from_string(self.region)

        if self.console:
            try:
                LogLevel.from_string(self.console_level)
            except ValueError as e:
                raise ConfigurationError(str(e)) from e

        if not (self.file_path or self.cloudwatch_enabled or self.console):
            raise ConfigurationError("No logging backend configured")


def create_logger(
    settings: LoggerSettings,
    session: boto3.Session | None = None,
    reporter: LoggerPort | None = None,
) -> LoggerPort:
    """
    Factory function to create the logger described by the settings.

    Args:
        settings: Which backends to build
        session: Optional boto3 session for the CloudWatch backend
        reporter: Diagnostics channel shared by the backends
            (defaults to a ConsoleLogger on stderr)

    Returns:
        The single configured backend, or a CompositeLogger over
        file, CloudWatch and console backends in that order

    Raises:
        ConfigurationError: If the settings are invalid
        InvalidRegionError: If the region code is unknown
        ProvisioningError: If the CloudWatch group or stream cannot be created
    """
    from pluggable_logger.adapters.outbound import (
        CloudWatchLogger,
        CompositeLogger,
        ConsoleLogger,
        FileLogger,
    )

    settings.validate()
    reporter = reporter or ConsoleLogger()

    loggers: list[LoggerPort] = []

    if settings.file_path:
        loggers.append(FileLogger(settings.file_path, reporter=reporter))

    if settings.cloudwatch_enabled:
        loggers.append(CloudWatchLogger(
            region=settings.region,
            log_group_name=settings.log_group,
            log_stream_name=settings.log_stream,
            session=session,
            reporter=reporter,
        ))

    if settings.console:
        loggers.append(ConsoleLogger(level=settings.console_level))

    if len(loggers) == 1:
        return loggers[0]

    return CompositeLogger(loggers, reporter=reporter)
