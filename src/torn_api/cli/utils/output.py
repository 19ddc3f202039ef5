"""Rich console output formatting utilities."""

from typing import Any

from rich.console import Console

console = Console()


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[bold red]Error:[/bold red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[bold yellow]Warning:[/bold yellow] {message}")


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[bold green]Success:[/bold green] {message}")


def print_json(data: Any) -> None:
    """Pretty-print a JSON-compatible value."""
    console.print_json(data=data)
