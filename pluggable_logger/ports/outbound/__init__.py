"""Outbound ports - Interfaces for driven adapters."""
from pluggable_logger.ports.outbound.logger_port import LoggerPort

__all__ = ["LoggerPort"]
