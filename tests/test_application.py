"""Tests for logger settings and the logger factory."""
import pytest

from pluggable_logger.adapters.outbound import CloudWatchLogger, CompositeLogger, ConsoleLogger, FileLogger
from pluggable_logger.application import LoggerSettings, create_logger
from pluggable_logger.domain.exceptions import ConfigurationError, InvalidRegionError
from pluggable_logger.domain.value_objects import LogLevel

ENV_VARS = [
    "LOG_FILE_PATH",
    "LOG_AWS_REGION",
    "AWS_REGION",
    "LOG_GROUP_NAME",
    "LOG_STREAM_NAME",
    "LOG_CONSOLE",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove logger environment variables."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestLoggerSettings:
    """Test reading and validating settings."""

    def test_from_env_defaults(self, clean_env):
        settings = LoggerSettings.from_env()

        assert settings.file_path is None
        assert settings.cloudwatch_enabled is False
        assert settings.console is False
        assert settings.console_level == "INFO"

    def test_from_env(self, clean_env):
        clean_env.setenv("LOG_FILE_PATH", "/var/log/app.log")
        clean_env.setenv("LOG_AWS_REGION", "eu-west-1")
        clean_env.setenv("LOG_GROUP_NAME", "my-app")
        clean_env.setenv("LOG_STREAM_NAME", "worker")
        clean_env.setenv("LOG_CONSOLE", "true")
        clean_env.setenv("LOG_LEVEL", "DEBUG")

        settings = LoggerSettings.from_env()

        assert settings.file_path == "/var/log/app.log"
        assert settings.region == "eu-west-1"
        assert settings.log_group == "my-app"
        assert settings.log_stream == "worker"
        assert settings.console is True
        assert settings.console_level == "DEBUG"

    def test_region_falls_back_to_aws_region(self, clean_env):
        clean_env.setenv("AWS_REGION", "us-west-2")
        assert LoggerSettings.from_env().region == "us-west-2"

    def test_nothing_configured(self):
        with pytest.raises(ConfigurationError, match="No logging backend"):
            LoggerSettings().validate()

    def test_incomplete_cloudwatch_settings(self):
        settings = LoggerSettings(log_group="my-app")
        with pytest.raises(ConfigurationError, match="region, log_stream"):
            settings.validate()

    def test_invalid_region(self):
        settings = LoggerSettings(region="nowhere-1", log_group="g", log_stream="s")
        with pytest.raises(InvalidRegionError):
            settings.validate()

    def test_console_level_ignored_without_console(self, tmp_path):
        """An unknown LOG_LEVEL does not block a file-only setup."""
        settings = LoggerSettings(file_path=str(tmp_path / "app.log"), console_level="TRACE")

        settings.validate()

        assert isinstance(create_logger(settings), FileLogger)

    def test_invalid_console_level(self):
        settings = LoggerSettings(console=True, console_level="LOUD")
        with pytest.raises(ConfigurationError, match="LOUD"):
            settings.validate()


class TestCreateLogger:
    """Test the logger factory."""

    def test_single_backend_returned_directly(self, tmp_path, reporter):
        logger = create_logger(LoggerSettings(file_path=str(tmp_path / "app.log")), reporter=reporter)
        assert isinstance(logger, FileLogger)

    def test_console_only(self, reporter):
        logger = create_logger(LoggerSettings(console=True), reporter=reporter)
        assert isinstance(logger, ConsoleLogger)

    def test_composite_order(self, tmp_path, mock_logs_client, make_session, reporter):
        settings = LoggerSettings(
            file_path=str(tmp_path / "app.log"),
            region="us-east-1",
            log_group="my-app",
            log_stream="web-1",
            console=True,
        )

        logger = create_logger(settings, session=make_session(mock_logs_client), reporter=reporter)

        assert isinstance(logger, CompositeLogger)
        assert [type(child) for child in logger.loggers] == [FileLogger, CloudWatchLogger, ConsoleLogger]

    def test_composite_delivers_everywhere(self, tmp_path, mock_logs_client, make_session, reporter):
        path = tmp_path / "app.log"
        settings = LoggerSettings(
            file_path=str(path),
            region="us-east-1",
            log_group="my-app",
            log_stream="web-1",
        )
        logger = create_logger(settings, session=make_session(mock_logs_client), reporter=reporter)

        logger.log("Order placed", LogLevel.INFO)

        assert path.read_text(encoding="utf-8").splitlines()[-1].endswith("[INFO] Order placed")
        event = mock_logs_client.put_log_events.call_args.kwargs["logEvents"][0]
        assert event["message"] == "[INFO] Order placed"

    def test_invalid_settings_raise(self):
        with pytest.raises(ConfigurationError):
            create_logger(LoggerSettings())
