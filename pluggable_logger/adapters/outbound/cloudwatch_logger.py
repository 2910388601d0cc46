"""CloudWatch Logger Adapter - Forwards log records to CloudWatch Logs."""
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from pluggable_logger.adapters.outbound.console_logger import ConsoleLogger
from pluggable_logger.domain.entities import LogRecord
from pluggable_logger.domain.exceptions import ProvisioningError
from pluggable_logger.domain.value_objects import AwsRegion, LogLevel
from pluggable_logger.ports.outbound import LoggerPort

ALREADY_EXISTS = "ResourceAlreadyExistsException"


class CloudWatchLogger:
    """
    Implementation of LoggerPort that sends records to AWS CloudWatch Logs.

    The log group and log stream are created at construction time if they
    do not exist yet. Each call to log() sends exactly one event.
    Credentials come from the session's default provider chain.
    """

    def __init__(
        self,
        region: AwsRegion | str,
        log_group_name: str,
        log_stream_name: str,
        session: boto3.Session | None = None,
        reporter: LoggerPort | None = None,
    ):
        """
        Initialize the CloudWatch logger and provision its group and stream.

        Args:
            region: Region of the log group (AwsRegion or region code)
            log_group_name: Log group to write to
            log_stream_name: Log stream inside the group
            session: Optional boto3 session (uses default if not provided)
            reporter: Where to report delivery problems (defaults to a
                ConsoleLogger on stderr)

        Raises:
            InvalidRegionError: If region is not a known region code
            ProvisioningError: If the group or stream cannot be created
        """
        if not isinstance(region, AwsRegion):
            region = AwsRegion.from_string(region)

        self._region = region
        self._log_group_name = log_group_name
        self._log_stream_name = log_stream_name
        self._reporter = reporter or ConsoleLogger()
        self._session = session or boto3.Session()
        self._client = self._session.client("logs", region_name=region.id)

        self._create_log_group_if_not_exists()
        self._create_log_stream_if_not_exists()

    @property
    def region(self) -> AwsRegion:
        return self._region

    @property
    def log_group_name(self) -> str:
        return self._log_group_name

    @property
    def log_stream_name(self) -> str:
        return self._log_stream_name

    def _create_log_group_if_not_exists(self) -> None:
        self._provision(
            "log group",
            self._log_group_name,
            self._client.create_log_group,
            logGroupName=self._log_group_name,
        )

    def _create_log_stream_if_not_exists(self) -> None:
        self._provision(
            "log stream",
            self._log_stream_name,
            self._client.create_log_stream,
            logGroupName=self._log_group_name,
            logStreamName=self._log_stream_name,
        )

    def _provision(self, resource: str, name: str, create: Any, **params: Any) -> None:
        """Call a create API, treating an already-existing resource as success."""
        try:
            create(**params)
            self._reporter.log(f"Created {resource}: {name}", LogLevel.DEBUG)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == ALREADY_EXISTS:
                self._reporter.log(f"Using existing {resource}: {name}", LogLevel.DEBUG)
                return
            raise ProvisioningError(resource, name, str(e)) from e
        except BotoCoreError as e:
            raise ProvisioningError(resource, name, str(e)) from e

    def log(self, message: str, level: LogLevel) -> None:
        """
        Send one event '[LEVEL] message' to the log stream.

        Delivery failures are reported, not raised.
        """
        record = LogRecord(message=message, level=level)
        event = {
            "timestamp": record.timestamp_millis(),
            "message": record.format_event_message(),
        }

        try:
            response = self._client.put_log_events(
                logGroupName=self._log_group_name,
                logStreamName=self._log_stream_name,
                logEvents=[event],
            )
        except (ClientError, BotoCoreError) as e:
            self._reporter.log(
                f"Failed to send log event to {self._log_group_name}/{self._log_stream_name}: {e}",
                LogLevel.ERROR,
            )
            return

        rejected = response.get("rejectedLogEventsInfo")
        if rejected:
            self._reporter.log(
                f"CloudWatch rejected log event for {self._log_group_name}/{self._log_stream_name}: {rejected}",
                LogLevel.WARN,
            )

    def close(self) -> None:
        """Release the underlying CloudWatch Logs client."""
        self._client.close()

    def __enter__(self) -> "CloudWatchLogger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
