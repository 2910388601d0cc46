"""Pluggable Logger - Main entry point.

Send log records from the command line.
"""
from pluggable_logger.adapters.inbound.cli_adapter import main as cli_main


def main() -> None:
    """Main entry point - delegates to CLI adapter."""
    cli_main()


if __name__ == "__main__":
    main()
