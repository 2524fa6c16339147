"""Command-line interface for litanalyzer."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from litanalyzer import Analyzer
from litanalyzer.core.config import config
from litanalyzer.core.error_handling import LitAnalyzerError
from litanalyzer.models.module import LitModule


def _print_module(module: LitModule, console: Console) -> None:
    """Render one analyzed module as rich tables."""
    for element in module.elements:
        title = element.name if not element.tag_name else f"{element.name} <{element.tag_name}>"
        table = Table(title=title, title_justify="left")
        for column in ("property", "type", "attribute", "typeOption", "reflect", "converter"):
            table.add_column(column)
        for prop in element.reactive_properties.values():
            data = prop.to_dict()
            table.add_row(
                data["name"],
                data["type"] or "-",
                data["attribute"] or "-",
                data["typeOption"] or "-",
                "yes" if data["reflect"] else "no",
                data["converter"] or "-",
            )
        console.print(table)
    for diagnostic in module.diagnostics:
        style = "red" if diagnostic.severity.value == "error" else "yellow"
        console.print(f"[{style}]{diagnostic}[/{style}]")


def _analyze(path: str, recursive: bool, strict: bool) -> List[LitModule]:
    analyzer = Analyzer(strict=strict)
    if os.path.isdir(path):
        return analyzer.analyze_directory(path, recursive=recursive)
    return [analyzer.analyze_file(path)]


def main() -> None:
    """Entry point for the ``litanalyzer`` command."""

    console = Console()
    parser = argparse.ArgumentParser(description="Lit reactive property analyzer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Reduce logs to errors only")
    sub = parser.add_subparsers(dest="command")

    analyze_p = sub.add_parser("analyze", help="Extract reactive properties")
    analyze_p.add_argument("path", help="Source file or directory path")
    analyze_p.add_argument("--raw-json", action="store_true", help="Output raw JSON")
    analyze_p.add_argument("--output", help="Write JSON results to this file")
    analyze_p.add_argument("--recursive", action="store_true", help="Scan directory recursively")
    analyze_p.add_argument("--strict", action="store_true", help="Abort on the first unsupported class")
    analyze_p.add_argument(
        "--decorator",
        default=None,
        help="Name of the property decorator (default: %s)" % config.get("analysis", "property_decorator"),
    )

    args = parser.parse_args()
    if getattr(args, "debug", False):
        log_level = logging.DEBUG
    elif getattr(args, "quiet", False):
        log_level = logging.ERROR
    elif getattr(args, "verbose", False):
        log_level = logging.INFO
    else:
        log_level = getattr(logging, config.get("logging", "level", "WARNING"))
    logging.basicConfig(level=log_level)

    if args.command != "analyze":
        parser.print_help()
        return

    if not os.path.exists(args.path):
        console.print(f"[bold red]Path not found:[/bold red] {args.path}")
        sys.exit(1)
    if args.decorator:
        config.set("analysis", "property_decorator", args.decorator)

    try:
        modules = _analyze(args.path, args.recursive, args.strict)
    except LitAnalyzerError as e:
        console.print(Panel(str(e), title="Analysis failed", style="red"))
        sys.exit(1)

    output_data: Dict[str, Any] = {"modules": [m.to_dict() for m in modules]}
    if args.output:
        with open(args.output, "w", encoding="utf8") as f:
            json.dump(output_data, f, indent=2)
    elif args.raw_json:
        print(json.dumps(output_data, indent=2))
    else:
        for module in modules:
            console.rule(module.path or "<source>")
            _print_module(module, console)

    if any(m.has_errors for m in modules):
        sys.exit(1)


if __name__ == "__main__":
    main()
