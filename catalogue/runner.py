"""
Runner for pattern demonstrations.

This module provides a DemoRunner that executes registered demos,
captures their output and reports progress through logging and hooks.
"""

import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from catalogue.observability.hooks import (
    CatalogueEvent,
    EventHookRegistry,
    default_hook_registry,
)
from catalogue.observability.logging import CatalogueLogger, get_logger
from catalogue.patterns.base import PatternCategory
from catalogue.registry import PatternRegistry, load_default_registry, slug_for


@dataclass
class DemoResult:
    """Outcome of running one demo.

    Attributes:
        slug: Slug of the pattern that ran
        output: Lines the demo emitted
        duration_ms: Wall-clock duration of the run
        error: Exception raised by the demo, if any
    """

    slug: str
    output: List[str] = field(default_factory=list)
    duration_ms: float = 0.0
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        """Whether the demo completed without raising."""
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a dictionary."""
        result: Dict[str, Any] = {
            "slug": self.slug,
            "output": list(self.output),
            "duration_ms": round(self.duration_ms, 2),
        }
        if self.error is not None:
            result["error"] = str(self.error)
        return result


class DemoRunner:
    """Runs pattern demos with logging and event hooks.

    Usage:
        runner = DemoRunner()
        result = runner.run("observer")
        print("\\n".join(result.output))

        results = runner.run_all(category=PatternCategory.STRUCTURAL)
    """

    def __init__(
        self,
        registry: Optional[PatternRegistry] = None,
        hook_registry: Optional[EventHookRegistry] = None,
        session_id: Optional[str] = None,
        exclude: Optional[Iterable[str]] = None,
    ) -> None:
        """Initialize the runner.

        Args:
            registry: Pattern registry (defaults to every bundled pattern)
            hook_registry: Event hook registry for observability
            session_id: Session identifier for logging/tracing
            exclude: Pattern slugs or names skipped by batch runs
        """
        self._registry = registry or load_default_registry()
        self._hooks = hook_registry or default_hook_registry
        self.session_id = session_id or str(uuid.uuid4())
        self.exclude = {slug_for(name) for name in exclude or ()}
        self._logger: CatalogueLogger = get_logger(
            name="runner",
            session_id=self.session_id,
        )

    @property
    def registry(self) -> PatternRegistry:
        """Get the pattern registry."""
        return self._registry

    def run(self, name: str) -> DemoResult:
        """Run a single demo.

        Args:
            name: Pattern slug or name

        Returns:
            The demo's result

        Raises:
            ValueError: If the pattern is not registered
            Exception: Whatever the demo itself raised
        """
        result = self._execute(name)
        if result.error is not None:
            raise result.error
        return result

    def run_all(
        self,
        category: Optional[PatternCategory] = None,
        stop_on_error: bool = False,
        names: Optional[Iterable[str]] = None,
    ) -> List[DemoResult]:
        """Run a batch of demos.

        Without ``names`` every registered demo runs, optionally restricted
        to one category, minus the runner's ``exclude`` list. Demos named
        explicitly always run, in the order given.

        Args:
            category: Only run demos of this category
            stop_on_error: Stop at the first failing demo
            names: Pattern slugs or names to run instead of the catalogue

        Returns:
            Results in run order; failures carry their error

        Raises:
            ValueError: If a named pattern is not registered
        """
        if names is not None:
            slugs = [self._registry.require(name).slug for name in names]
        else:
            candidates = (
                [c.slug for c in self._registry.by_category(category)]
                if category
                else self._registry.list_patterns()
            )
            slugs = [slug for slug in candidates if slug not in self.exclude]

        start_time = time.perf_counter()
        self._hooks.trigger(
            CatalogueEvent.RUN_START,
            session_id=self.session_id,
            demos=len(slugs),
        )
        self._logger.info(f"Running {len(slugs)} demos", extra={"demos": len(slugs)})

        results: List[DemoResult] = []
        for step, slug in enumerate(slugs, 1):
            result = self._execute(slug, step=step)
            results.append(result)
            if stop_on_error and not result.ok:
                break

        duration_ms = (time.perf_counter() - start_time) * 1000
        failed = sum(1 for r in results if not r.ok)
        self._hooks.trigger(
            CatalogueEvent.RUN_END,
            session_id=self.session_id,
            duration_ms=duration_ms,
            completed=len(results),
            failed=failed,
        )
        self._logger.info(
            f"Completed {len(results)} demos, {failed} failed",
            duration_ms=duration_ms,
        )
        return results

    def _execute(self, name: str, step: Optional[int] = None) -> DemoResult:
        demo_cls = self._registry.require(name)
        slug = demo_cls.slug

        self._hooks.trigger(
            CatalogueEvent.DEMO_START,
            pattern=slug,
            session_id=self.session_id,
        )
        self._logger.debug(f"Running {demo_cls.name} demo", pattern=slug, step=step)

        start_time = time.perf_counter()
        try:
            output = demo_cls().execute()
        except Exception as e:  # pylint: disable=broad-exception-caught
            duration_ms = (time.perf_counter() - start_time) * 1000
            self._hooks.trigger(
                CatalogueEvent.DEMO_ERROR,
                pattern=slug,
                session_id=self.session_id,
                error=e,
                duration_ms=duration_ms,
            )
            self._logger.error(
                f"{demo_cls.name} demo failed: {e}",
                pattern=slug,
                step=step,
                duration_ms=duration_ms,
                exc_info=True,
            )
            return DemoResult(slug=slug, duration_ms=duration_ms, error=e)

        duration_ms = (time.perf_counter() - start_time) * 1000
        self._hooks.trigger(
            CatalogueEvent.DEMO_END,
            pattern=slug,
            session_id=self.session_id,
            duration_ms=duration_ms,
            lines=len(output),
        )
        self._logger.info(
            f"Completed {demo_cls.name} demo",
            pattern=slug,
            step=step,
            duration_ms=duration_ms,
        )
        return DemoResult(slug=slug, output=output, duration_ms=duration_ms)
