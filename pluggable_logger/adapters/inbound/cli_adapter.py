"""CLI Adapter - Command-line interface for the pluggable logger."""
import sys
from dataclasses import replace

import click

from pluggable_logger import __version__
from pluggable_logger.adapters.outbound import ConsoleLogger
from pluggable_logger.application import LoggerSettings, create_logger
from pluggable_logger.domain.exceptions import PluggableLoggerError
from pluggable_logger.domain.value_objects import AwsRegion, LogLevel

LEVEL_CHOICES = [level.value for level in LogLevel]


@click.group()
@click.version_option(version=__version__, prog_name="pluggable-logger")
def cli() -> None:
    """
    Pluggable Logger - Send log records to files, CloudWatch Logs, or both.

    Backends not given on the command line are taken from the LOG_*
    environment variables.
    """
    pass


@cli.command()
@click.argument("message")
@click.option(
    "--level", "-l",
    default=LogLevel.INFO.value,
    type=click.Choice(LEVEL_CHOICES, case_sensitive=False),
    help="Severity of the record. Default: INFO.",
)
@click.option(
    "--file", "-f", "file_path",
    default=None,
    help="Append the record to this log file.",
)
@click.option(
    "--region", "-r",
    default=None,
    help="AWS region of the CloudWatch log group.",
)
@click.option(
    "--log-group", "-g",
    default=None,
    help="CloudWatch log group (created if missing).",
)
@click.option(
    "--log-stream", "-s",
    default=None,
    help="CloudWatch log stream (created if missing).",
)
@click.option(
    "--console", "-c",
    is_flag=True,
    help="Also print the record to stderr.",
)
def log(
    message: str,
    level: str,
    file_path: str | None,
    region: str | None,
    log_group: str | None,
    log_stream: str | None,
    console: bool,
) -> None:
    """
    Log MESSAGE through the configured backends.

    Examples:

        # Append to a file
        pluggable-logger log "Deployment finished" -f app.log

        # Send to CloudWatch Logs
        pluggable-logger log "Disk almost full" -l WARN -r us-east-1 -g my-app -s web-1

        # File and CloudWatch at once
        pluggable-logger log "Started" -f app.log -r eu-west-1 -g my-app -s worker
    """
    reporter = ConsoleLogger(level=LogLevel.INFO)

    settings = LoggerSettings.from_env()
    overrides = {
        "file_path": file_path,
        "region": region,
        "log_group": log_group,
        "log_stream": log_stream,
    }
    settings = replace(settings, **{k: v for k, v in overrides.items() if v})
    if console:
        settings.console = True

    if region and not settings.cloudwatch_enabled:
        reporter.log("--region ignored: CloudWatch needs --log-group and --log-stream", LogLevel.WARN)

    logger = None
    try:
        logger = create_logger(settings, reporter=reporter)
        logger.log(message, LogLevel.from_string(level))
    except PluggableLoggerError as e:
        reporter.log(f"Logging failed: {e}", LogLevel.ERROR)
        sys.exit(1)
    finally:
        close = getattr(logger, "close", None)
        if callable(close):
            close()


@cli.command()
@click.option(
    "--global-only",
    is_flag=True,
    help="Only list global regions.",
)
def list_regions(global_only: bool) -> None:
    """
    List the AWS regions accepted by --region.
    """
    click.echo("Known regions:\n")
    for region in AwsRegion:
        if global_only and not region.is_global_region:
            continue
        suffix = " (global)" if region.is_global_region else ""
        click.echo(f"  {region.id}{suffix}")


@cli.command()
def list_levels() -> None:
    """
    List log levels from least to most severe.
    """
    for level in LogLevel:
        click.echo(level.value)


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
