"""
Pattern registration and discovery.

This module provides a decorator for registering pattern demonstrations
and a registry for looking them up by slug or category.
"""

import importlib
import pkgutil
import re
from typing import Callable, Dict, List, Optional, Type

from catalogue.patterns.base import PatternCategory, PatternDemo

BUILTIN_PACKAGE = "catalogue.patterns"

# Global registry of demo classes, keyed by slug
_PATTERN_REGISTRY: Dict[str, Type[PatternDemo]] = {}


def slug_for(name: str) -> str:
    """Normalize a pattern name to its slug.

    ``"Chain of Responsibility"``, ``"chain-of-responsibility"`` and
    ``"chain_of_responsibility"`` all give ``"chain_of_responsibility"``.
    """
    return re.sub(r"[\s\-]+", "_", name.strip().lower())


def _ensure_unclaimed(
    patterns: Dict[str, Type[PatternDemo]], key: str, cls: Type[PatternDemo]
) -> None:
    # Same module and qualname is the same class, e.g. after a reload
    existing = patterns.get(key)
    if existing is not None and (
        existing.__module__,
        existing.__qualname__,
    ) != (cls.__module__, cls.__qualname__):
        raise ValueError(
            f"Pattern '{key}' is already registered by {existing.__qualname__}"
        )


def pattern(
    slug: Optional[str] = None,
) -> Callable[[Type[PatternDemo]], Type[PatternDemo]]:
    """Decorator to register a demo class.

    Usage:
        @pattern()
        class VisitorDemo(PatternDemo):
            name = "Visitor"
            ...

    Args:
        slug: Registry key (defaults to the slug of the class's ``name``)

    Returns:
        Decorator function

    Raises:
        ValueError: If the class has no name or the slug is already taken
            by a different class
    """

    def decorator(cls: Type[PatternDemo]) -> Type[PatternDemo]:
        if not cls.name:
            raise ValueError(f"{cls.__qualname__} must define a pattern name")

        key = slug or slug_for(cls.name)
        _ensure_unclaimed(_PATTERN_REGISTRY, key, cls)

        cls.slug = key
        _PATTERN_REGISTRY[key] = cls
        return cls

    return decorator


class PatternRegistry:
    """Registry for looking up pattern demonstrations.

    The registry starts as a copy of the global registry filled by
    ``@pattern``; ``discover_builtin()`` imports the bundled pattern
    modules so their decorators run.
    """

    def __init__(self) -> None:
        """Initialize the registry from the global registry."""
        self._patterns: Dict[str, Type[PatternDemo]] = {}
        self._load_global_registry()

    def _load_global_registry(self) -> None:
        self._patterns.update(_PATTERN_REGISTRY)

    def register(self, demo_cls: Type[PatternDemo]) -> None:
        """Register a demo class under its slug.

        Args:
            demo_cls: The demo class to register

        Raises:
            ValueError: If the slug is already taken by a different class
        """
        key = demo_cls.slug or slug_for(demo_cls.name)
        _ensure_unclaimed(self._patterns, key, demo_cls)
        demo_cls.slug = key
        self._patterns[key] = demo_cls

    def get(self, name: str) -> Optional[Type[PatternDemo]]:
        """Get a demo class by slug or name.

        Args:
            name: Pattern slug or display name

        Returns:
            The demo class if found, None otherwise
        """
        return self._patterns.get(slug_for(name))

    def require(self, name: str) -> Type[PatternDemo]:
        """Get a demo class by slug or name, failing if absent.

        Raises:
            ValueError: If no such pattern is registered
        """
        demo_cls = self.get(name)
        if demo_cls is None:
            raise ValueError(f"Pattern '{name}' not found")
        return demo_cls

    def list_patterns(self) -> List[str]:
        """Get the slugs of all registered patterns in catalogue order."""
        return [demo_cls.slug for demo_cls in self._ordered()]

    def by_category(self, category: PatternCategory) -> List[Type[PatternDemo]]:
        """Get the demo classes of one category, ordered by name."""
        return [c for c in self._ordered() if c.category == category]

    def get_all(self) -> Dict[str, Type[PatternDemo]]:
        """Get all registered demo classes keyed by slug."""
        return dict(self._patterns)

    def _ordered(self) -> List[Type[PatternDemo]]:
        categories = list(PatternCategory)
        return sorted(
            self._patterns.values(),
            key=lambda c: (categories.index(c.category), c.name),
        )

    def discover_builtin(self) -> int:
        """Import every bundled pattern module and load its registrations.

        Returns:
            Number of patterns added to this registry
        """
        package = importlib.import_module(BUILTIN_PACKAGE)
        initial_count = len(self._patterns)

        for module_info in pkgutil.iter_modules(package.__path__):
            if module_info.name.startswith("_") or module_info.name == "base":
                continue
            importlib.import_module(f"{BUILTIN_PACKAGE}.{module_info.name}")

        self._load_global_registry()
        return len(self._patterns) - initial_count

    def __len__(self) -> int:
        return len(self._patterns)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None


def load_default_registry() -> PatternRegistry:
    """Create a registry holding every bundled pattern."""
    registry = PatternRegistry()
    registry.discover_builtin()
    return registry
