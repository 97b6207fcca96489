"""Shared fixtures for catalogue tests."""

import logging
from typing import List

import pytest

from catalogue import registry as registry_module
from catalogue.config import CatalogueConfig
from catalogue.observability.hooks import EventData, EventHookRegistry
from catalogue.registry import PatternRegistry, load_default_registry
from catalogue.runner import DemoRunner


@pytest.fixture
def registry() -> PatternRegistry:
    """Registry holding every bundled pattern."""
    return load_default_registry()


@pytest.fixture
def hooks() -> EventHookRegistry:
    """Hook registry isolated from the module-level default."""
    return EventHookRegistry()


@pytest.fixture
def events(hooks) -> List[EventData]:
    """Every event triggered on ``hooks``, in order."""
    received: List[EventData] = []
    hooks.on_all(received.append)
    return received


@pytest.fixture
def runner(registry, hooks) -> DemoRunner:
    """Runner over the bundled patterns with isolated hooks."""
    return DemoRunner(registry=registry, hook_registry=hooks, session_id="test-session")


@pytest.fixture
def config() -> CatalogueConfig:
    """Default configuration, independent of the bundled YAML file."""
    return CatalogueConfig(title="Test Patterns", description="For tests.")


@pytest.fixture
def isolated_global_registry(monkeypatch):
    """Let a test register demo classes without leaking them into other tests."""
    # Bundled modules must be imported before the snapshot so they are in it
    PatternRegistry().discover_builtin()
    monkeypatch.setattr(
        registry_module, "_PATTERN_REGISTRY", dict(registry_module._PATTERN_REGISTRY)
    )
    return registry_module._PATTERN_REGISTRY


@pytest.fixture
def reset_catalogue_logging():
    """Remove handlers installed on the catalogue logger by a test."""
    yield
    logger = logging.getLogger("catalogue")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
