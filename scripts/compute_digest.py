"""
Digest tool for the Monkey Explorer dataset.

Prints the base64 SHA-512 digest of a dataset file so `EXPECTED_DIGEST` in
`monkey_explorer/store/integrity.py` can be regenerated after a legitimate
dataset change. With `--check`, compares the file against the embedded digest
instead.
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from monkey_explorer.config import DEFAULT_DATA_FILE
from monkey_explorer.store.integrity import EXPECTED_DIGEST, compute_digest, digest_matches

app = typer.Typer(help="Compute or verify the SHA-512 digest of the monkey dataset.")


def _digest_file(path: Path) -> str:
    return compute_digest(path.read_bytes())


@app.command()
def main(
    path: Path = typer.Argument(
        DEFAULT_DATA_FILE,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Dataset file to hash (defaults to the packaged dataset).",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        "-c",
        help="Compare against the embedded digest instead of printing it.",
    ),
) -> None:
    """
    Print the digest of PATH, or verify it with --check.
    """
    if not check:
        typer.echo(_digest_file(path))
        return

    if digest_matches(path.read_bytes(), EXPECTED_DIGEST):
        typer.echo(f"{path}: OK")
        return
    typer.echo(f"{path}: MISMATCH (got {_digest_file(path)})", err=True)
    raise typer.Exit(code=1)


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
