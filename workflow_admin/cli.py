"""Workflow Admin CLI - serve the admin UI and inspect workflow tabs."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine

from .config import settings
from .database import create_session_factory
from .models import Base
from .pages.list_workflows import ListWorkflowsPage
from .services import group_svc, workflow_svc

app = typer.Typer(
    name="workflow-admin",
    help="Workflow Admin: grouped workflow list pages",
    no_args_is_help=True,
)
console = Console()

DATABASE_OPTION = typer.Option(None, "--database-url", help="Database URL (default: WFA_DATABASE_URL)")


async def _with_session(database_url: str | None, fn):
    engine = create_async_engine(database_url or settings.database_url, echo=settings.echo_sql)
    try:
        async with create_session_factory(engine)() as session:
            return await fn(session)
    finally:
        await engine.dispose()


@app.command()
def serve(
    port: int = typer.Option(8024, "--port", "-p", help="Port to run on"),
    host: str = typer.Option("127.0.0.1", "--host", help="Host to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Launch the Workflow Admin web UI."""
    import uvicorn

    console.print(f"[bold cyan]Starting Workflow Admin at http://{host}:{port}[/bold cyan]")
    uvicorn.run("workflow_admin.app:app", host=host, port=port, reload=reload)


@app.command("init-db")
def init_db(database_url: str = DATABASE_OPTION):
    """Create any missing tables."""

    async def _init():
        engine = create_async_engine(database_url or settings.database_url)
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        finally:
            await engine.dispose()

    asyncio.run(_init())
    console.print("[green]Database ready.[/green]")


@app.command("group-add")
def group_add(
    name: str = typer.Argument(..., help="Group name"),
    database_url: str = DATABASE_OPTION,
):
    """Create a workflow group."""
    group = asyncio.run(_with_session(database_url, lambda db: group_svc.create_group(db, name)))
    console.print(f"[green]Created group[/green] {group.name} ({group.id})")


@app.command("add")
def workflow_add(
    name: str = typer.Argument(..., help="Workflow name"),
    group: str = typer.Option(None, "--group", "-g", help="Group name to assign"),
    description: str = typer.Option(None, "--description", "-d", help="Description"),
    database_url: str = DATABASE_OPTION,
):
    """Create a workflow, optionally inside an existing group."""

    async def _add(db: AsyncSession):
        group_id = None
        if group:
            found = await group_svc.get_group_by_name(db, group)
            if not found:
                return None
            group_id = found.id
        return await workflow_svc.create_workflow(
            db, name=name, description=description, workflow_group_id=group_id
        )

    wf = asyncio.run(_with_session(database_url, _add))
    if wf is None:
        console.print(f"[red]Group not found: {group}[/red]")
        raise typer.Exit(1)
    console.print(f"[green]Created workflow[/green] {wf.name} ({wf.id})")


@app.command()
def tabs(database_url: str = DATABASE_OPTION):
    """Show the workflow list page's tabs and badge counts."""
    page = ListWorkflowsPage()
    built = asyncio.run(_with_session(database_url, page.get_tabs))

    table = Table(title="Workflow Tabs")
    table.add_column("Key", style="cyan")
    table.add_column("Label")
    table.add_column("Badge", justify="right")
    table.add_column("Color", style="dim")
    default = page.get_default_active_tab()
    for key, tab in built.items():
        marker = " *" if key == default else ""
        table.add_row(f"{key}{marker}", tab.label, str(tab.badge), tab.badge_color)
    console.print(table)


if __name__ == "__main__":
    app()
