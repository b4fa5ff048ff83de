from __future__ import annotations

import random
import sys
from typing import Optional

import typer
from rich.console import Console

from monkey_explorer.config import get_settings
from monkey_explorer.reporter import (
    ASCII_ARTS,
    MENU,
    print_random_pick,
    print_record_details,
    print_records,
    print_security_failure,
)
from monkey_explorer.store import EXPECTED_DIGEST, DataStore, IntegrityViolation, digest_matches
from monkey_explorer.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Monkey Explorer: browse the monkey dataset from the terminal.")
log = get_logger(__name__)

QUIT_CHOICES = {"exit", "4", "q"}


def _open_store(console: Console) -> DataStore:
    """
    Load the configured dataset, exiting with status 1 if it was tampered with.
    """
    settings = get_settings()
    try:
        return DataStore.load(settings.data_file)
    except IntegrityViolation as exc:
        print_security_failure(console, str(exc))
        raise typer.Exit(code=1) from exc


def _list_all(store: DataStore, console: Console) -> None:
    console.clear()
    print_records(console, store.get_all())


def _details_by_name(store: DataStore, console: Console) -> None:
    console.clear()
    try:
        name = console.input("Enter monkey name: ")
    except EOFError:
        name = ""
    if not name.strip():
        console.print("Name cannot be empty.")
        return

    record = store.get_by_name(name.strip())
    if record is None:
        console.print(f"No monkey found with name '{name}'.", markup=False)
        return
    print_record_details(console, record)


def _random_pick(store: DataStore, console: Console) -> None:
    console.clear()
    record = store.pick_random()
    if record is None:
        console.print("No monkeys available to pick.")
        return
    print_random_pick(console, record, store.access_count(record.name), random.choice(ASCII_ARTS))


def run_menu(store: DataStore, console: Console) -> None:
    """
    Interactive loop: print the menu, dispatch the choice, repeat until quit or EOF.
    """
    actions = {
        "1": _list_all,
        "2": _details_by_name,
        "3": _random_pick,
    }
    console.clear()
    while True:
        console.print(MENU, highlight=False)
        try:
            choice = console.input("Select an option: ").strip()
        except EOFError:
            choice = "exit"

        if not choice:
            continue
        if choice in QUIT_CHOICES:
            console.print("Goodbye!")
            return
        action = actions.get(choice)
        if action is None:
            console.print("Unknown option. Choose 1-4.")
            continue
        log.debug("Menu choice", extra={"choice": choice})
        action(store, console)


@app.callback(invoke_without_command=True)
def root(ctx: typer.Context) -> None:
    """
    Configure logging; without a sub-command, start the interactive menu.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    if ctx.invoked_subcommand is None:
        explore()


@app.command()
def explore() -> None:
    """
    Start the interactive menu.
    """
    console = Console()
    run_menu(_open_store(console), console)


@app.command("list")
def list_records() -> None:
    """
    Print all monkeys as a table.
    """
    console = Console()
    print_records(console, _open_store(console).get_all())


@app.command()
def show(name: str = typer.Argument(..., help="Monkey name (case-insensitive).")) -> None:
    """
    Show the details of one monkey.
    """
    console = Console()
    record = _open_store(console).get_by_name(name.strip())
    if record is None:
        console.print(f"No monkey found with name '{name}'.", markup=False)
        raise typer.Exit(code=1)
    print_record_details(console, record)


@app.command("random")
def random_record() -> None:
    """
    Pick a random monkey.
    """
    console = Console()
    _random_pick(_open_store(console), console)


@app.command()
def info() -> None:
    """
    Show effective configuration values and the dataset status.
    """
    settings = get_settings()
    console = Console()
    console.print(
        f"data_file={settings.data_file} | log_level={settings.log_level} "
        f"| json_logs={settings.json_logs}",
        markup=False,
        highlight=False,
    )

    data: Optional[bytes]
    try:
        data = settings.data_file.read_bytes()
    except OSError as exc:
        log.warning("Dataset unreadable: %s", exc)
        data = None

    if data is None:
        console.print("digest=unreadable records=0", highlight=False)
    elif not digest_matches(data, EXPECTED_DIGEST):
        console.print("digest=MISMATCH records=0", highlight=False)
        raise typer.Exit(code=1)
    else:
        store = DataStore.load(data)
        console.print(f"digest=ok records={len(store.get_all())}", highlight=False)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
