"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.console import Console

from todo_directory.app.core.exceptions import DirectoryError
from todo_directory.app.runtime.container import ApplicationDependencies, DirectoryServices

# Initialize Rich console for colored output
console = Console()


@contextmanager
def directory_services() -> Iterator[DirectoryServices]:
    """Open one unit of work against the configured store.

    Directory failures are reported on the console and end the command
    with exit code 1; the transaction is rolled back.
    """
    dependencies = ApplicationDependencies.from_config()
    try:
        with dependencies.unit_of_work() as services:
            yield services
    except DirectoryError as e:
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(1) from None
    finally:
        dependencies.close()
