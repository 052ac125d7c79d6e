#!/usr/bin/env python3
"""Berth CLI - Scaffold and deploy containerized services."""
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from berth import __version__
from berth.cli_addons_commands import register_addons_commands
from berth.cli_support import find_workspace, handle_cli_error, print_info

app = typer.Typer(
    name="berth",
    help="""Berth - Scaffold and deploy containerized services

Extend a service with addons: drop params.yaml, outputs.yaml and resource
files into infra/<service>/addons/ and Berth merges them into one template.

Quick start:
  berth services                 # Services in this workspace
  berth addons ls api            # Addon files and their sections
  berth addons show api          # Composed addons template
""",
    add_completion=False,
)

console = Console()

register_addons_commands(app, console)


@app.command("services")
def list_services(
    workspace: Optional[str] = typer.Option(None, "--workspace", "-w", help="Workspace directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """List services in the workspace."""
    try:
        ws = find_workspace(workspace)
        application = ws.summary().application
        services = ws.list_services()
    except Exception as e:
        handle_cli_error(e, console, verbose, exit_code=1)

    if not services:
        print_info(console, f"No services in application {application}")
        return

    table = Table(title=f"Application: {application}", show_header=True)
    table.add_column("Service", style="cyan")
    table.add_column("Addons", style="dim")
    for name in services:
        has_addons = ws.addons_dir(name).is_dir()
        table.add_row(name, "yes" if has_addons else "-")
    console.print(table)


@app.command("version")
def version() -> None:
    """Show the Berth version."""
    console.print(f"berth {__version__}")


if __name__ == "__main__":
    app()
