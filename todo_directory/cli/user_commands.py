"""User management CLI commands."""

import typer
from rich.panel import Panel
from rich.table import Table

from todo_directory.app.core.models.user import (
    UserCreateRequest,
    UserResponse,
    UserUpdateRequest,
)

from .utils import console, directory_services

# Create the users command group
users_app = typer.Typer(help="👥 User management commands")


def _users_table(users: list[UserResponse]) -> Table:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", style="dim")
    table.add_column("First Name", style="blue")
    table.add_column("Last Name", style="blue")
    table.add_column("Email", style="green")
    table.add_column("Phone", style="cyan")
    for user in users:
        table.add_row(str(user.id), user.first_name, user.last_name, user.email, user.phone)
    return table


@users_app.command("list")
def list_users(
    group: str | None = typer.Option(None, "--group", "-g", help="Only list members of this group"),
) -> None:
    """
    📋 List users.

    With --group, shows only the members of the named group.
    """
    with directory_services() as services:
        users = services.users.list_by_group(group) if group else services.users.find_all()

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    console.print(_users_table(users))
    console.print(f"\n[dim]Showing {len(users)} users[/dim]")


@users_app.command("show")
def show_user(user_id: int = typer.Argument(..., help="ID of the user")) -> None:
    """🔎 Show a single user."""
    with directory_services() as services:
        user = services.users.get(user_id)
    console.print(_users_table([user]))


@users_app.command("add")
def add_user(
    first_name: str = typer.Argument(..., help="First name"),
    last_name: str = typer.Argument(..., help="Last name"),
    email: str = typer.Argument(..., help="Email address, unique across users"),
    phone: str = typer.Argument(..., help="Phone number, unique across users"),
) -> None:
    """
    ➕ Add a new user.

    Fails if another user already has the same email or phone.
    """
    console.print(Panel.fit(f"[bold green]Adding User: {email}[/bold green]", border_style="green"))
    request = UserCreateRequest(first_name=first_name, last_name=last_name, email=email, phone=phone)
    with directory_services() as services:
        user = services.users.create(request)
    console.print(f"[green]✅ User {user.id} created successfully![/green]")


@users_app.command("update")
def update_user(
    user_id: int = typer.Argument(..., help="ID of the user"),
    first_name: str | None = typer.Option(None, "--first-name", help="New first name"),
    last_name: str | None = typer.Option(None, "--last-name", help="New last name"),
    email: str | None = typer.Option(None, "--email", help="New email address"),
    phone: str | None = typer.Option(None, "--phone", help="New phone number"),
) -> None:
    """✏️  Update the given fields of a user."""
    request = UserUpdateRequest(first_name=first_name, last_name=last_name, email=email, phone=phone)
    with directory_services() as services:
        user = services.users.update(user_id, request)
    console.print(f"[green]✅ User {user.id} updated[/green]")


@users_app.command("delete")
def delete_user(
    user_id: int = typer.Argument(..., help="ID of the user to delete"),
    force: bool = typer.Option(False, "--force", help="Skip confirmation prompt"),
) -> None:
    """
    🗑️  Delete a user.

    Removes the user from all groups and deletes the tasks they own.
    """
    if not force:
        confirm = typer.confirm(f"Are you sure you want to delete user {user_id}? This cannot be undone.")
        if not confirm:
            console.print("[yellow]Operation cancelled[/yellow]")
            raise typer.Exit(0)

    with directory_services() as services:
        services.users.delete(user_id)
    console.print(f"[green]✅ User {user_id} deleted successfully![/green]")


@users_app.command("join")
def join_group(
    user_id: int = typer.Argument(..., help="ID of the user"),
    group_id: int = typer.Argument(..., help="ID of the group"),
) -> None:
    """🔗 Add a user to a group."""
    with directory_services() as services:
        services.users.add_to_group(user_id, group_id)
    console.print(f"[green]✅ User {user_id} is a member of group {group_id}[/green]")


@users_app.command("leave")
def leave_group(
    user_id: int = typer.Argument(..., help="ID of the user"),
    group_id: int = typer.Argument(..., help="ID of the group"),
) -> None:
    """✂️  Remove a user from a group."""
    with directory_services() as services:
        services.users.remove_from_group(user_id, group_id)
    console.print(f"[green]✅ User {user_id} is not a member of group {group_id}[/green]")
