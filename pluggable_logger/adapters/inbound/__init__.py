"""Inbound adapters - Entry points driving the loggers."""
