"""Application layer - Logger configuration and assembly."""
from pluggable_logger.application.logger_factory import LoggerSettings, create_logger

__all__ = ["LoggerSettings", "create_logger"]
