#!/usr/bin/env python3
"""
Design Pattern Catalogue.

This script lets you browse the catalogue from the command line:
1. List the patterns, optionally by category
2. Show the section of one pattern
3. Run pattern demos
4. Render the full markdown reference document
5. Evaluate expressions with the toy interpreter

Usage:
    python main.py                       # interactive menu
    python main.py list --category structural
    python main.py show visitor
    python main.py run observer state
    python main.py run --all
    python main.py render --output PATTERNS.md
    python main.py eval "a b + c +" a=1 b=2 c=3
"""
# pylint: disable=wrong-import-position

import argparse
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import load_dotenv

# Load environment variables
load_dotenv(override=True)

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))

from catalogue import (
    CatalogueConfig,
    CatalogueEvent,
    DemoRunner,
    DocumentRenderer,
    PatternCategory,
    PatternRegistry,
    configure_logging,
    default_hook_registry,
    get_logger,
    load_default_registry,
)
from catalogue.interpreter import MalformedExpression, Number, interpret

logger = get_logger("cli")


def parse_bindings(assignments: List[str]) -> Dict[str, Number]:
    """Turn ``NAME=VALUE`` arguments into interpreter bindings.

    Raises:
        ValueError: If an argument is not an assignment or its value is not a number
    """
    bindings: Dict[str, Number] = {}
    for assignment in assignments:
        name, sep, value = assignment.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected NAME=VALUE, got {assignment!r}")
        try:
            bindings[name] = int(value)
        except ValueError:
            try:
                bindings[name] = float(value)
            except ValueError:
                raise ValueError(f"Value for '{name}' is not a number: {value!r}") from None
    return bindings


def cmd_list(registry: PatternRegistry, category: Optional[str] = None) -> int:
    """Print the catalogue, grouped by category."""
    categories = [PatternCategory(category)] if category else list(PatternCategory)
    for cat in categories:
        print(cat.title)
        for demo_cls in registry.by_category(cat):
            print(f"  {demo_cls.slug:<26} {demo_cls.intent}")
    return 0


def cmd_show(renderer: DocumentRenderer, name: str) -> int:
    """Print the rendered section of one pattern."""
    print(renderer.render_section(name))
    return 0


def cmd_run(runner: DemoRunner, names: List[str], run_all: bool = False) -> int:
    """Run demos and print their output."""
    results = runner.run_all() if run_all or not names else runner.run_all(names=names)

    for result in results:
        demo_cls = runner.registry.require(result.slug)
        print(f"\n{'=' * 60}")
        print(demo_cls.name)
        print(f"{'=' * 60}")
        if result.ok:
            print("\n".join(result.output))
        else:
            print(f"Error: {result.error}")

    return 0 if all(r.ok for r in results) else 1


def cmd_render(renderer: DocumentRenderer, output: Optional[str] = None) -> int:
    """Write the document to ``output``, or print it."""
    if output:
        path = renderer.write(output)
        print(f"Wrote {path}")
    else:
        print(renderer.render(), end="")
    return 0


def cmd_eval(expression: str, assignments: List[str]) -> int:
    """Evaluate an expression with the toy interpreter."""
    bindings = parse_bindings(assignments)
    result = interpret(expression, bindings)
    default_hook_registry.trigger(
        CatalogueEvent.EXPRESSION_EVALUATED,
        pattern="interpreter",
        expression=expression,
        result=result,
    )
    logger.debug(
        f"Evaluated {expression!r}",
        pattern="interpreter",
        extra={"result": result},
    )
    print(result)
    return 0


def interactive(registry: PatternRegistry, runner: DemoRunner, renderer: DocumentRenderer) -> int:
    """Menu-driven browsing, used when no command is given."""
    print("=" * 60)
    print("Design Pattern Catalogue")
    print("=" * 60)

    print("\nAvailable actions:")
    print("1. List patterns")
    print("2. Show a pattern")
    print("3. Run a demo")
    print("4. Evaluate an expression")
    print("q. Quit")

    choice = input("\nSelect action (1/2/3/4/q): ").strip().lower()

    if choice == "1":
        return cmd_list(registry)
    if choice == "2":
        name = input("Pattern name (or press Enter for 'observer'): ").strip()
        return cmd_show(renderer, name or "observer")
    if choice == "3":
        name = input("Pattern name (or press Enter for 'visitor'): ").strip()
        return cmd_run(runner, [name or "visitor"])
    if choice == "4":
        expression = input("Expression (or press Enter for 'a b + c +'): ").strip()
        assignments = input("Bindings (or press Enter for 'a=1 b=2 c=3'): ").split()
        return cmd_eval(expression or "a b + c +", assignments or ["a=1", "b=2", "c=3"])
    if choice in ("q", "quit", "exit"):
        print("Goodbye!")
        return 0

    print("Invalid choice. Please select 1, 2, 3, 4, or q.")
    return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(description="Browse the design pattern catalogue.")
    parser.add_argument(
        "--config",
        default=os.getenv("CATALOGUE_CONFIG"),
        help="YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("CATALOGUE_LOG_LEVEL"),
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Minimum log level",
    )
    parser.add_argument("--json-logs", action="store_true", help="Log as JSON")

    commands = parser.add_subparsers(dest="command")

    list_parser = commands.add_parser("list", help="List patterns")
    list_parser.add_argument(
        "--category", choices=[c.value for c in PatternCategory], help="Only this category"
    )

    show_parser = commands.add_parser("show", help="Show one pattern")
    show_parser.add_argument("name", help="Pattern slug or name")

    run_parser = commands.add_parser("run", help="Run pattern demos")
    run_parser.add_argument("names", nargs="*", help="Pattern slugs or names")
    run_parser.add_argument("--all", action="store_true", dest="run_all", help="Run every demo")

    render_parser = commands.add_parser("render", help="Render the markdown document")
    render_parser.add_argument("--output", "-o", help="Write to this file instead of stdout")

    eval_parser = commands.add_parser("eval", help="Evaluate a postfix '+' expression")
    eval_parser.add_argument("expression", help="e.g. \"a b + c +\"")
    eval_parser.add_argument("bindings", nargs="*", help="NAME=VALUE pairs")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = CatalogueConfig.load(args.config)
        configure_logging(
            level=args.log_level or config.log_level,
            log_file=config.log_file or None,
            json_format=args.json_logs or config.json_logs,
        )

        if args.command == "eval":
            return cmd_eval(args.expression, args.bindings)

        registry = load_default_registry()
        runner = DemoRunner(registry=registry, exclude=config.exclude)
        renderer = DocumentRenderer(registry=registry, config=config, runner=runner)

        if args.command == "list":
            return cmd_list(registry, args.category)
        if args.command == "show":
            return cmd_show(renderer, args.name)
        if args.command == "run":
            return cmd_run(runner, args.names, args.run_all)
        if args.command == "render":
            return cmd_render(renderer, args.output)
        return interactive(registry, runner, renderer)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        return 0
    except MalformedExpression as e:
        print(f"Malformed expression: {e}")
        return 1
    except (ValueError, RuntimeError, OSError) as e:
        print(f"\nError: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
