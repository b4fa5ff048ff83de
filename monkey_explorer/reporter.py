from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from monkey_explorer.domain.models import Record

ASCII_ARTS = (
    "(\\_/)\n( •_•)\n/ >🐒",
    "  _\n ('_')\n/)>🐵",
    '  .-""-.\n /      \\\n|  O  O |\n|  \\__/ |\n \\      /\n  `----`',
)

MENU = """
Monkey Explorer
1) List all monkeys
2) Get details for a monkey by name
3) Get a random monkey
4) Exit (or q)"""

NAME_WIDTH = 25
LOCATION_WIDTH = 30


def truncate(value: str | None, max_length: int) -> str:
    """Shorten `value` to `max_length` characters, marking the cut with '...'."""
    if not value:
        return ""
    if len(value) > max_length:
        return value[: max_length - 3] + "..."
    return value


def print_records(console: Console, records: Sequence[Record]) -> None:
    """
    Render all records as a rich table, in the order given.
    """
    if not records:
        console.print("[yellow]No monkeys available.[/yellow]")
        return

    table = Table(title="Monkeys", box=box.ROUNDED)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Location")
    table.add_column("Population", justify="right", style="magenta")
    table.add_column("Latitude", justify="right", style="green")
    table.add_column("Longitude", justify="right", style="green")

    for record in records:
        table.add_row(
            escape(truncate(record.name, NAME_WIDTH)),
            escape(truncate(record.location, LOCATION_WIDTH)),
            f"{record.population}",
            f"{record.latitude:.6f}",
            f"{record.longitude:.6f}",
        )

    console.print(table)


def print_record_details(console: Console, record: Record) -> None:
    console.print(f"[bold]Name:[/bold] {escape(record.name)}")
    console.print(f"[bold]Location:[/bold] {escape(record.location)}")
    console.print(f"[bold]Population:[/bold] {record.population}")
    console.print(f"[bold]Coordinates:[/bold] {record.latitude:.6f}, {record.longitude:.6f}")
    console.print(f"[bold]Image:[/bold] {escape(record.image)}")
    console.print("[bold]Details:[/bold]")
    console.print(escape(record.details))


def print_random_pick(console: Console, record: Record, count: int, art: str) -> None:
    """Show a randomly picked record with its ASCII art and running pick count."""
    console.print(f"\n{escape(art)}\n", highlight=False)
    print_record_details(console, record)
    console.print(f"(random-picked count for {escape(record.name)}: {count})")


def print_security_failure(console: Console, message: str) -> None:
    console.print(
        "[bold red]Basic security check failed: the monkey data file was edited 🙈🙉[/bold red]"
    )
    console.print(f"[red]{escape(message)}[/red]")


__all__ = [
    "ASCII_ARTS",
    "MENU",
    "print_random_pick",
    "print_record_details",
    "print_records",
    "print_security_failure",
    "truncate",
]
