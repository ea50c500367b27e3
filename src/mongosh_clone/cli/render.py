"""CLI renderer for mongosh-clone."""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mongosh_clone.core.types import MethodRule


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, indent: int = 2) -> None:
        self.console: Console = Console()
        self._indent = indent

    def info(self, message: str) -> None:
        """Render an info message."""
        self.console.print(message, markup=False, highlight=False)

    def error(self, message: str) -> None:
        """Render an error message."""
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")

    def json(self, data: Any) -> None:
        """Render a JSON-compatible value."""
        self.console.print_json(data=data, indent=self._indent, default=str)

    def method_table(self, rules: list[MethodRule]) -> None:
        """Render the supported methods with their arity and parameters."""
        table = Table(title="Supported operations")
        table.add_column("method", style="cyan")
        table.add_column("args", justify="center")
        table.add_column("parameters")
        for rule in rules:
            params = [
                spec.name if index < rule.min_args else f"[{spec.name}]" for index, spec in enumerate(rule.params)
            ]
            table.add_row(rule.name, rule.describe_arity(), escape(", ".join(params)) or "-")
        self.console.print(table)
