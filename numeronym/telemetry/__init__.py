"""Telemetry components for runtime logging."""

from .logger import LOG_LEVELS, RunLogger

__all__ = ["RunLogger", "LOG_LEVELS"]
