"""Command-line interface for the todo directory.

Manages users, groups, memberships and tasks against the configured store.
"""

from pathlib import Path

import typer

from todo_directory.app.runtime.app_startup import configure_logging
from todo_directory.app.runtime.config.config_template import load_config
from todo_directory.app.runtime.container import ApplicationDependencies
from todo_directory.app.runtime.context import set_config

from .group_commands import groups_app
from .task_commands import tasks_app
from .user_commands import users_app
from .utils import console

# Initialize the main CLI app
app = typer.Typer(
    name="todo-directory",
    help="Todo Directory CLI - Manage users, groups and tasks",
    rich_markup_mode="rich",
)

# Add command groups to main app
app.add_typer(users_app, name="users")
app.add_typer(groups_app, name="groups")
app.add_typer(tasks_app, name="tasks")


@app.callback()
def configure(
    config: Path | None = typer.Option(
        None, "--config", help="Path to a config.yaml overriding the default one"
    ),
) -> None:
    """Load configuration and set up logging before any command runs."""
    if config is not None:
        if not config.exists():
            console.print(f"[red]❌ Config file not found: {config}[/red]")
            raise typer.Exit(1)
        set_config(load_config(config))
    configure_logging()


@app.command("init-db")
def init_db() -> None:
    """🗄️  Create the database tables."""
    dependencies = ApplicationDependencies.from_config()
    try:
        dependencies.init_db()
    finally:
        dependencies.close()
    console.print("[green]✅ Database initialized[/green]")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
