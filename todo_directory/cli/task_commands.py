"""Task management CLI commands."""

from datetime import datetime

import typer
from rich.table import Table

from todo_directory.app.core.models.task import TaskCreateRequest, TaskUpdateRequest

from .utils import console, directory_services

tasks_app = typer.Typer(help="📝 Task management commands")


@tasks_app.command("list")
def list_tasks(
    user_id: int | None = typer.Option(None, "--user", "-u", help="Only list tasks of this user"),
) -> None:
    """📋 List tasks."""
    with directory_services() as services:
        tasks = services.tasks.find_by_user(user_id) if user_id else services.tasks.find_all()

    if not tasks:
        console.print("[yellow]No tasks found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="cyan")
    table.add_column("User", style="blue")
    table.add_column("Deadline", style="green")
    table.add_column("Important", style="yellow")
    table.add_column("Done", style="yellow")
    for task in tasks:
        table.add_row(
            str(task.id),
            task.title,
            str(task.user_id),
            task.deadline_date.isoformat() if task.deadline_date else "",
            "✅" if task.is_important else "",
            "✅" if task.is_completed else "❌",
        )
    console.print(table)


@tasks_app.command("add")
def add_task(
    user_id: int = typer.Argument(..., help="ID of the owning user"),
    title: str = typer.Argument(..., help="Task title"),
    content: str | None = typer.Option(None, "--content", "-c", help="Task details"),
    important: bool = typer.Option(False, "--important", help="Mark the task as important"),
    deadline: datetime | None = typer.Option(
        None, "--deadline", formats=["%Y-%m-%d"], help="Deadline date (YYYY-MM-DD)"
    ),
) -> None:
    """➕ Add a task for a user."""
    request = TaskCreateRequest(
        title=title,
        content=content,
        is_important=important,
        deadline_date=deadline.date() if deadline else None,
        user_id=user_id,
    )
    with directory_services() as services:
        task = services.tasks.create(request)
    console.print(f"[green]✅ Task {task.id} created for user {task.user_id}[/green]")


@tasks_app.command("complete")
def complete_task(task_id: int = typer.Argument(..., help="ID of the task")) -> None:
    """✔️  Mark a task as completed."""
    with directory_services() as services:
        services.tasks.update(task_id, TaskUpdateRequest(is_completed=True))
    console.print(f"[green]✅ Task {task_id} completed[/green]")


@tasks_app.command("delete")
def delete_task(task_id: int = typer.Argument(..., help="ID of the task to delete")) -> None:
    """🗑️  Delete a task."""
    with directory_services() as services:
        services.tasks.delete(task_id)
    console.print(f"[green]✅ Task {task_id} deleted successfully![/green]")
