"""Output helpers: JSON to stdout, diagnostics to stderr through rich."""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape

# Diagnostics only; stdout stays machine readable
console = Console(stderr=True)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout."""
    print(json.dumps(data, indent=2))


def print_error(message: str) -> None:
    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False, soft_wrap=True)


def print_info(message: str) -> None:
    console.print(f"[dim]{escape(message)}[/dim]", highlight=False, soft_wrap=True)
