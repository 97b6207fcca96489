"""
Catalogue configuration management with YAML support.

This module provides the configuration dataclass for the catalogue and
utilities for loading it from YAML files.
"""

# pylint: disable=too-many-instance-attributes

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from catalogue.patterns.base import PatternCategory

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent / "config" / "catalogue.yaml"


@dataclass
class CatalogueConfig:
    """Configuration for rendering and running the catalogue.

    Attributes:
        title: Title of the rendered document
        description: Introductory paragraph under the title
        categories: Category names in the order they are rendered
        exclude: Pattern slugs left out of documents and batch runs
        include_snippets: Whether sections embed the demo source
        include_output: Whether sections embed the demo's sample output
        log_level: Minimum log level name
        log_file: Optional path of a JSON log file
        json_logs: Whether console logs are JSON instead of human-readable
    """

    title: str = "Design Patterns"
    description: str = ""
    categories: List[str] = field(
        default_factory=lambda: [c.value for c in PatternCategory]
    )
    exclude: List[str] = field(default_factory=list)
    include_snippets: bool = True
    include_output: bool = True
    log_level: str = "WARNING"
    log_file: str = ""
    json_logs: bool = False

    def __post_init__(self) -> None:
        known = {c.value for c in PatternCategory}
        unknown = [c for c in self.categories if c not in known]
        if unknown:
            raise ValueError(f"Unknown pattern categories: {unknown}")

    @property
    def category_order(self) -> List[PatternCategory]:
        """Configured categories as enum members."""
        return [PatternCategory(c) for c in self.categories]

    @classmethod
    def from_yaml(cls, path: Path | str) -> "CatalogueConfig":
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file

        Returns:
            CatalogueConfig instance with values from the file

        Raises:
            FileNotFoundError: If the YAML file doesn't exist
            yaml.YAMLError: If the YAML is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Catalogue config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CatalogueConfig":
        """Create configuration from a dictionary.

        Raises:
            ValueError: If the dictionary has keys the config doesn't know
        """
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown catalogue config keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def load(cls, path: Path | str | None = None) -> "CatalogueConfig":
        """Load from ``path``, or from the bundled default file if it exists."""
        if path:
            return cls.from_yaml(path)
        if DEFAULT_CONFIG_PATH.exists():
            return cls.from_yaml(DEFAULT_CONFIG_PATH)
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "title": self.title,
            "description": self.description,
            "categories": list(self.categories),
            "exclude": list(self.exclude),
            "include_snippets": self.include_snippets,
            "include_output": self.include_output,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "json_logs": self.json_logs,
        }

    def to_yaml(self, path: Path | str) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)
