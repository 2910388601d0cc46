"""Ports - Abstract interfaces for external dependencies."""
from pluggable_logger.ports.outbound import LoggerPort

__all__ = ["LoggerPort"]
