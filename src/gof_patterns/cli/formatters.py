"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for pattern listings and demonstration output
- Plain list formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_table([data["pattern"]])
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_list([data["pattern"]])
    elif isinstance(data, dict) and "results" in data:
        return format_results_list(data["results"])
    else:
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format catalog entries as a table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Intent")

    for pattern in patterns:
        table.add_row(
            pattern.get("name", "N/A"),
            pattern.get("title", "N/A"),
            pattern.get("category", "N/A"),
            pattern.get("intent", ""),
        )
    return _render(table)


def format_results_table(results: List[Dict]) -> str:
    """Format demonstration results as a table, one row per pattern."""
    if not results:
        return "No results."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Pattern", style="cyan", no_wrap=True)
    table.add_column("Category", style="blue")
    table.add_column("Output")

    for result in results:
        table.add_row(
            result.get("pattern", "N/A"),
            result.get("category", "N/A"),
            "\n".join(result.get("output", [])),
        )
    return _render(table)


def format_patterns_list(patterns: List[Dict]) -> str:
    if not patterns:
        return "No patterns found."

    blocks = []
    for pattern in patterns:
        blocks.append("\n".join([
            f"Name:     {pattern.get('name', 'N/A')}",
            f"Title:    {pattern.get('title', 'N/A')}",
            f"Category: {pattern.get('category', 'N/A')}",
            f"Intent:   {pattern.get('intent', '')}",
        ]))
    return "\n\n".join(blocks)


def format_results_list(results: List[Dict]) -> str:
    if not results:
        return "No results."

    blocks = []
    for result in results:
        header = f"== {result.get('pattern', 'N/A')} ({result.get('category', 'N/A')})"
        blocks.append("\n".join([header, *result.get("output", [])]))
    return "\n\n".join(blocks)
