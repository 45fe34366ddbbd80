"""Terminal output for the birdctl CLI."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from birdctl.core.configs import ClientConfig

console = Console()
err_console = Console(stderr=True)


def success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[green]{escape(message)}[/green]")


def error(message: str) -> None:
    """Print error message in red on stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)


def show_config(config: ClientConfig) -> None:
    """Render the effective client configuration as a table."""
    table = Table(title="birdctl configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("socket_path", config.socket_path)
    table.add_row(
        "timeout",
        "none (block)" if config.timeout is None else f"{config.timeout:g}s",
    )
    console.print(table)
