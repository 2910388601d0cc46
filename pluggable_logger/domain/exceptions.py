"""Exceptions raised by the pluggable logger."""


class PluggableLoggerError(Exception):
    """Base class for all pluggable logger errors."""


class InvalidRegionError(PluggableLoggerError, ValueError):
    """Raised when a region code is not part of the region catalog."""

    def __init__(self, region_id: str):
        self.region_id = region_id
        super().__init__(f"No region with id {region_id}")


class ConfigurationError(PluggableLoggerError, ValueError):
    """Raised when logger settings are missing or inconsistent."""


class ProvisioningError(PluggableLoggerError):
    """Raised when a CloudWatch log group or stream cannot be created."""

    def __init__(self, resource: str, name: str, reason: str):
        self.resource = resource
        self.name = name
        super().__init__(f"Failed to create {resource} '{name}': {reason}")
