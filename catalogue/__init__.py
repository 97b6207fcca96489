"""
Design pattern catalogue.

This package holds the twenty-three classic design patterns, each with
prose and a runnable toy demonstration, together with the machinery to
run the demos and render them as a markdown reference document.
"""

from catalogue.config import CatalogueConfig
from catalogue.document import DocumentRenderer, slugify
from catalogue.observability import (
    CatalogueEvent,
    CatalogueLogger,
    EventHookRegistry,
    configure_logging,
    default_hook_registry,
    get_logger,
)
from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import PatternRegistry, load_default_registry, pattern
from catalogue.runner import DemoResult, DemoRunner

__all__ = [
    # Core components
    "CatalogueConfig",
    "DemoResult",
    "DemoRunner",
    "DocumentRenderer",
    "PatternCategory",
    "PatternDemo",
    "PatternRegistry",
    "load_default_registry",
    "pattern",
    "slugify",
    # Observability
    "CatalogueEvent",
    "CatalogueLogger",
    "EventHookRegistry",
    "configure_logging",
    "default_hook_registry",
    "get_logger",
]
