"""Group management CLI commands."""

import typer
from rich.table import Table

from todo_directory.app.core.models.group import GroupCreateRequest, GroupUpdateRequest

from .utils import console, directory_services

groups_app = typer.Typer(help="🏷️ Group management commands")


@groups_app.command("list")
def list_groups() -> None:
    """📋 List groups with their member ids."""
    with directory_services() as services:
        groups = services.groups.find_all()

    if not groups:
        console.print("[yellow]No groups found[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="green")
    table.add_column("Members", style="yellow")
    for group in groups:
        table.add_row(
            str(group.id),
            group.name,
            group.description or "",
            ", ".join(str(user_id) for user_id in group.user_ids),
        )
    console.print(table)


@groups_app.command("add")
def add_group(
    name: str = typer.Argument(..., help="Unique group name"),
    description: str | None = typer.Option(None, "--description", "-d", help="Group description"),
) -> None:
    """➕ Add a new group."""
    with directory_services() as services:
        group = services.groups.create(GroupCreateRequest(name=name, description=description))
    console.print(f"[green]✅ Group '{group.name}' created with id {group.id}[/green]")


@groups_app.command("rename")
def rename_group(
    group_id: int = typer.Argument(..., help="ID of the group"),
    name: str = typer.Argument(..., help="New group name"),
) -> None:
    """✏️  Rename a group."""
    with directory_services() as services:
        group = services.groups.update(group_id, GroupUpdateRequest(name=name))
    console.print(f"[green]✅ Group {group.id} renamed to '{group.name}'[/green]")


@groups_app.command("delete")
def delete_group(
    group_id: int = typer.Argument(..., help="ID of the group to delete"),
    force: bool = typer.Option(False, "--force", help="Skip confirmation prompt"),
) -> None:
    """🗑️  Delete a group. Its members stay, without the membership."""
    if not force:
        confirm = typer.confirm(f"Are you sure you want to delete group {group_id}?")
        if not confirm:
            console.print("[yellow]Operation cancelled[/yellow]")
            raise typer.Exit(0)

    with directory_services() as services:
        services.groups.delete(group_id)
    console.print(f"[green]✅ Group {group_id} deleted successfully![/green]")
