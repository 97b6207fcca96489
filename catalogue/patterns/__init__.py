"""
Pattern demonstrations.

Each module in this package holds one pattern: its participants and a
``PatternDemo`` subclass registered with ``@pattern``. Modules are
imported by ``PatternRegistry.discover_builtin()``.
"""

from catalogue.patterns.base import PatternCategory, PatternDemo

__all__ = ["PatternCategory", "PatternDemo"]
