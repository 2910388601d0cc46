"""Domain entities for the pluggable logger."""
from pluggable_logger.domain.entities.log_record import LogRecord

__all__ = ["LogRecord"]
