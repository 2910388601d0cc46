"""Test configuration and shared fixtures."""
import io
from unittest.mock import MagicMock

import botocore.session
import pytest
from botocore.stub import Stubber

from pluggable_logger.domain.value_objects import LogLevel


class RecordingLogger:
    """LoggerPort fake that remembers every call."""

    def __init__(self, name: str = "recorder", calls: list | None = None):
        self.name = name
        self.calls = calls if calls is not None else []

    def log(self, message: str, level: LogLevel) -> None:
        self.calls.append((self.name, message, level))


class FakeSession:
    """Stands in for boto3.Session, handing out a prepared client."""

    def __init__(self, client):
        self._client = client
        self.client_calls: list[tuple] = []

    def client(self, service_name: str, region_name: str | None = None):
        self.client_calls.append((service_name, region_name))
        return self._client


@pytest.fixture
def sample_region() -> str:
    """Sample AWS region for testing."""
    return "us-east-1"


@pytest.fixture
def reporter() -> RecordingLogger:
    """Diagnostics channel that records what the backends report."""
    return RecordingLogger(name="reporter")


@pytest.fixture
def logs_client(sample_region):
    """Real botocore CloudWatch Logs client with dummy credentials."""
    return botocore.session.get_session().create_client(
        "logs",
        region_name=sample_region,
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


@pytest.fixture
def stubber(logs_client):
    """Stubber bound to the CloudWatch Logs client."""
    with Stubber(logs_client) as stub:
        yield stub


@pytest.fixture
def mock_logs_client() -> MagicMock:
    """Mock CloudWatch Logs client for inspecting call arguments."""
    client = MagicMock()
    client.put_log_events.return_value = {"nextSequenceToken": "1"}
    return client


@pytest.fixture
def console_stream() -> io.StringIO:
    """In-memory stream for console output."""
    return io.StringIO()


@pytest.fixture
def make_recorder():
    """Factory for RecordingLogger fakes."""
    return RecordingLogger


@pytest.fixture
def make_session():
    """Factory for FakeSession objects wrapping a client."""
    return FakeSession
