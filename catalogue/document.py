"""
Markdown rendering of the pattern catalogue.

This module turns the registered demos into a single reference document:
a table of contents linking each section by anchor, then one section per
pattern with its prose, its snippet and the output the snippet produces.
"""

import inspect
import re
import textwrap
import time
from pathlib import Path
from typing import List, Optional, Type

from catalogue.config import CatalogueConfig
from catalogue.observability.hooks import (
    CatalogueEvent,
    EventHookRegistry,
    default_hook_registry,
)
from catalogue.observability.logging import CatalogueLogger, get_logger
from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import PatternRegistry, load_default_registry
from catalogue.runner import DemoRunner


def slugify(title: str) -> str:
    """Anchor for a heading, following GitHub's markdown rules.

    ``"Chain of Responsibility"`` gives ``"chain-of-responsibility"``.
    """
    anchor = re.sub(r"[^\w\- ]", "", title.strip().lower())
    return anchor.replace(" ", "-")


def snippet_for(demo_cls: Type[PatternDemo]) -> str:
    """Source of a demo's participants followed by its ``run`` method."""
    parts = [textwrap.dedent(inspect.getsource(p)).rstrip() for p in demo_cls.participants]
    parts.append(textwrap.dedent(inspect.getsource(demo_cls.run)).rstrip())
    return "\n\n\n".join(parts)


class DocumentRenderer:
    """Renders the catalogue as markdown.

    Usage:
        renderer = DocumentRenderer()
        renderer.write("PATTERNS.md")
    """

    def __init__(
        self,
        registry: Optional[PatternRegistry] = None,
        config: Optional[CatalogueConfig] = None,
        runner: Optional[DemoRunner] = None,
        hook_registry: Optional[EventHookRegistry] = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            registry: Pattern registry (defaults to every bundled pattern)
            config: Catalogue configuration
            runner: Runner used to capture sample output
            hook_registry: Event hook registry for observability
        """
        self._registry = registry or load_default_registry()
        self._config = config or CatalogueConfig()
        self._hooks = hook_registry or default_hook_registry
        self._runner = runner or DemoRunner(
            registry=self._registry, hook_registry=self._hooks
        )
        self._logger: CatalogueLogger = get_logger(
            name="document",
            session_id=self._runner.session_id,
        )

    def patterns(self, category: PatternCategory) -> List[Type[PatternDemo]]:
        """Demo classes of a category, minus excluded slugs."""
        return [
            c
            for c in self._registry.by_category(category)
            if c.slug not in self._config.exclude
        ]

    def render(self) -> str:
        """Render the whole document."""
        start_time = time.perf_counter()
        lines = [f"# {self._config.title}", ""]
        if self._config.description:
            lines += [self._config.description.strip(), ""]

        lines += self._render_contents()

        rendered = 0
        for category in self._config.category_order:
            demos = self.patterns(category)
            if not demos:
                continue
            lines += [f"## {category.title}", ""]
            for demo_cls in demos:
                lines += self._render_section(demo_cls)
                rendered += 1

        document = "\n".join(lines).rstrip() + "\n"

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._hooks.trigger(
            CatalogueEvent.DOCUMENT_RENDERED,
            session_id=self._runner.session_id,
            duration_ms=duration_ms,
            patterns=rendered,
            characters=len(document),
        )
        self._logger.info(
            f"Rendered document with {rendered} patterns",
            duration_ms=duration_ms,
        )
        return document

    def render_section(self, name: str) -> str:
        """Render the section of one pattern."""
        demo_cls = self._registry.require(name)
        return "\n".join(self._render_section(demo_cls)).rstrip() + "\n"

    def write(self, path: Path | str) -> Path:
        """Render the document and write it to ``path``.

        Returns:
            The path written
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        document = self.render()

        with open(path, "w", encoding="utf-8") as f:
            f.write(document)

        self._logger.info(f"Wrote document to {path}")
        return path

    def _render_contents(self) -> List[str]:
        lines = ["## Contents", ""]
        for category in self._config.category_order:
            demos = self.patterns(category)
            if not demos:
                continue
            lines.append(f"- [{category.title}](#{slugify(category.title)})")
            for demo_cls in demos:
                lines.append(f"  - [{demo_cls.name}](#{slugify(demo_cls.name)})")
        lines.append("")
        return lines

    def _render_section(self, demo_cls: Type[PatternDemo]) -> List[str]:
        lines = [f"### {demo_cls.name}", ""]
        lines += [f"**Intent:** {demo_cls.intent}", ""]

        if demo_cls.summary:
            lines += [textwrap.dedent(demo_cls.summary).strip(), ""]

        if demo_cls.applicability:
            lines += ["**Use it when:**", ""]
            lines += [f"- {item}" for item in demo_cls.applicability]
            lines.append("")

        if demo_cls.consequences:
            lines += ["**Consequences:**", ""]
            lines += [f"- {item}" for item in demo_cls.consequences]
            lines.append("")

        if self._config.include_snippets:
            lines += ["```python", snippet_for(demo_cls), "```", ""]

        if self._config.include_output:
            result = self._runner.run(demo_cls.slug)
            lines += ["Output:", "", "```text", *result.output, "```", ""]

        return lines
