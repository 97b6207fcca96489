"""Tests for the markdown document renderer."""

import re

import pytest

from catalogue.config import CatalogueConfig
from catalogue.document import DocumentRenderer, slugify, snippet_for
from catalogue.observability.hooks import CatalogueEvent
from catalogue.patterns.strategy import StrategyDemo
from catalogue.patterns.visitor import VisitorDemo


@pytest.fixture
def renderer(registry, config, runner, hooks):
    return DocumentRenderer(registry=registry, config=config, runner=runner, hook_registry=hooks)


class TestSlugify:
    """Test heading anchors."""

    @pytest.mark.parametrize(
        "title, anchor",
        [
            ("Chain of Responsibility", "chain-of-responsibility"),
            ("Creational Patterns", "creational-patterns"),
            ("Template Method", "template-method"),
            ("Singleton", "singleton"),
        ],
    )
    def test_github_style(self, title, anchor):
        assert slugify(title) == anchor


class TestSnippet:
    """Test snippet extraction."""

    def test_contains_participants_then_run(self):
        snippet = snippet_for(StrategyDemo)

        assert snippet.index("def no_discount") < snippet.index("class Order")
        assert snippet.index("class Order") < snippet.index("def run(self)")

    def test_run_method_is_dedented(self):
        assert "def run(self) -> None:" in snippet_for(VisitorDemo).splitlines()


class TestDocumentRenderer:
    """Test rendering the full document."""

    def test_title_and_description(self, renderer):
        document = renderer.render()

        assert document.startswith("# Test Patterns\n\nFor tests.\n")

    def test_contents_link_to_existing_headings(self, renderer):
        document = renderer.render()

        links = re.findall(r"\]\(#([\w-]+)\)", document)
        headings = {slugify(h) for h in re.findall(r"^#{2,3} (.+)$", document, re.MULTILINE)}

        assert len(links) == 26  # 3 categories + 23 patterns
        assert set(links) <= headings

    def test_every_pattern_has_a_section(self, renderer, registry):
        document = renderer.render()

        for demo_cls in registry.get_all().values():
            assert f"\n### {demo_cls.name}\n" in document
            assert f"**Intent:** {demo_cls.intent}" in document

    def test_category_order_follows_config(self, registry, runner, hooks):
        config = CatalogueConfig(categories=["behavioral", "creational"], include_output=False)
        document = DocumentRenderer(registry, config, runner, hooks).render()

        assert document.index("## Behavioral Patterns") < document.index("## Creational Patterns")
        assert "## Structural Patterns" not in document
        assert "### Adapter" not in document

    def test_exclude(self, registry, runner, hooks):
        config = CatalogueConfig(exclude=["singleton"], include_output=False)
        document = DocumentRenderer(registry, config, runner, hooks).render()

        assert "### Singleton" not in document
        assert "(#singleton)" not in document
        assert "### Prototype" in document

    def test_snippets_and_output_can_be_disabled(self, registry, runner, hooks, events):
        config = CatalogueConfig(include_snippets=False, include_output=False)
        document = DocumentRenderer(registry, config, runner, hooks).render()

        assert "```python" not in document
        assert "```text" not in document
        assert not [e for e in events if e.event == CatalogueEvent.DEMO_START]

    def test_output_is_embedded(self, renderer):
        document = renderer.render()

        assert "```text\nw x + = 15\n" in document

    def test_render_triggers_event(self, renderer, events):
        renderer.render()

        rendered = [e for e in events if e.event == CatalogueEvent.DOCUMENT_RENDERED]
        assert len(rendered) == 1
        assert rendered[0].data["patterns"] == 23

    def test_render_section(self, renderer):
        section = renderer.render_section("Visitor")

        assert section.startswith("### Visitor\n")
        assert "class AreaVisitor(Visitor):" in section
        assert "**Use it when:**" in section
        assert "**Consequences:**" in section

    def test_render_section_unknown(self, renderer):
        with pytest.raises(ValueError):
            renderer.render_section("monostate")

    def test_write(self, renderer, tmp_path):
        path = renderer.write(tmp_path / "docs" / "PATTERNS.md")

        assert path.exists()
        assert path.read_text(encoding="utf-8").startswith("# Test Patterns")
