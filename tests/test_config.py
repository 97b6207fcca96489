"""Tests for catalogue configuration."""

import pytest
import yaml

from catalogue.config import DEFAULT_CONFIG_PATH, CatalogueConfig
from catalogue.patterns.base import PatternCategory


class TestCatalogueConfig:
    """Test configuration loading and saving."""

    def test_defaults(self):
        config = CatalogueConfig()

        assert config.title == "Design Patterns"
        assert config.category_order == list(PatternCategory)
        assert config.include_snippets
        assert config.include_output

    def test_yaml_round_trip(self, tmp_path):
        original = CatalogueConfig(
            title="Patterns",
            categories=["structural"],
            exclude=["proxy"],
            include_output=False,
            log_level="DEBUG",
        )
        path = tmp_path / "nested" / "catalogue.yaml"
        original.to_yaml(path)

        assert CatalogueConfig.from_yaml(path) == original

    def test_partial_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "catalogue.yaml"
        path.write_text("title: Short\n", encoding="utf-8")

        config = CatalogueConfig.from_yaml(path)

        assert config.title == "Short"
        assert config.exclude == []

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "catalogue.yaml"
        path.write_text("", encoding="utf-8")

        assert CatalogueConfig.from_yaml(path) == CatalogueConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Catalogue config file not found"):
            CatalogueConfig.from_yaml(tmp_path / "absent.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "catalogue.yaml"
        path.write_text("title: [unclosed\n", encoding="utf-8")

        with pytest.raises(yaml.YAMLError):
            CatalogueConfig.from_yaml(path)

    def test_unknown_keys(self):
        with pytest.raises(ValueError, match="Unknown catalogue config keys"):
            CatalogueConfig.from_dict({"title": "x", "colour": "blue"})

    def test_unknown_category(self):
        with pytest.raises(ValueError, match="Unknown pattern categories"):
            CatalogueConfig(categories=["architectural"])

    def test_bundled_config_loads(self):
        config = CatalogueConfig.load()

        assert DEFAULT_CONFIG_PATH.exists()
        assert config.title == "Design Patterns"
        assert config.description

    def test_load_explicit_path(self, tmp_path):
        path = tmp_path / "catalogue.yaml"
        CatalogueConfig(title="Explicit").to_yaml(path)

        assert CatalogueConfig.load(path).title == "Explicit"
