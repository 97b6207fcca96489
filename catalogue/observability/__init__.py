"""
Observability for the pattern catalogue.

This package provides structured logging and event hooks for monitoring
demo runs and document rendering.
"""

from .hooks import (
    CatalogueEvent,
    EventData,
    EventHookRegistry,
    default_hook_registry,
)
from .logging import CatalogueLogger, LogLevel, configure_logging, get_logger

__all__ = [
    # Logging
    "CatalogueLogger",
    "LogLevel",
    "configure_logging",
    "get_logger",
    # Hooks
    "CatalogueEvent",
    "EventData",
    "EventHookRegistry",
    "default_hook_registry",
]
