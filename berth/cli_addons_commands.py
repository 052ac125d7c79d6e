"""Addons command group."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from berth.addons import Addons, AddonsDirNotFoundError, MissingAddonsFilesError, RenderMode
from berth.addons.classifier import (
    OUTPUTS_FILE_WITHOUT_EXT,
    PARAMS_FILE_WITHOUT_EXT,
    Category,
    classify,
    filter_yaml_files,
    split_ext,
)
from berth.cli_support import (
    find_workspace,
    handle_cli_error,
    print_error,
    print_info,
    print_success,
    print_warning,
    setup_file_logging,
)

AddonsApp = typer.Typer(help="Inspect and compose service addons", add_completion=False)

_console: Console = Console()


def register_addons_commands(app: typer.Typer, console: Console) -> None:
    """Attach addons commands to the primary CLI."""
    global _console
    _console = console
    app.add_typer(AddonsApp, name="addons")


def _compose(service: str, workspace: Optional[str], render_mode: Optional[str], verbose: bool) -> str:
    """Compose the addons template, turning failures into CLI exits."""
    try:
        ws = find_workspace(workspace)
        return Addons(service, ws=ws, render_mode=render_mode).template()
    except AddonsDirNotFoundError as e:
        print_error(_console, f"Service '{service}' has no addons directory")
        print_info(_console, f"Create {ws.addons_dir(service)} with params.yaml, outputs.yaml and a resource file")
        raise typer.Exit(1) from e
    except MissingAddonsFilesError as e:
        print_error(_console, str(e))
        raise typer.Exit(1) from e
    except Exception as e:
        handle_cli_error(e, _console, verbose, exit_code=1)


@AddonsApp.command("show")
def addons_show(
    service: str = typer.Argument(..., help="Service name"),
    workspace: Optional[str] = typer.Option(None, "--workspace", "-w", help="Workspace directory"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the template to a file"),
    render_mode: Optional[RenderMode] = typer.Option(
        None, "--render-mode", help="One template entry per line or per file", case_sensitive=False
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Path to log file"),
) -> None:
    """Print the template composed from a service's addons directory."""
    setup_file_logging(log_file=log_file, verbose=verbose)

    content = _compose(service, workspace, render_mode, verbose)

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content)
        print_success(_console, f"Wrote addons template for {service} to {output}")
        return

    typer.echo(content, nl=False)


@AddonsApp.command("validate")
def addons_validate(
    service: str = typer.Argument(..., help="Service name"),
    workspace: Optional[str] = typer.Option(None, "--workspace", "-w", help="Workspace directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Path to log file"),
) -> None:
    """Check that a service's addons compose into a template."""
    setup_file_logging(log_file=log_file, verbose=verbose)

    _compose(service, workspace, None, verbose)
    print_success(_console, f"Addons for {service} look good")


@AddonsApp.command("ls")
def addons_list(
    service: str = typer.Argument(..., help="Service name"),
    workspace: Optional[str] = typer.Option(None, "--workspace", "-w", help="Workspace directory"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
) -> None:
    """List addon files and the template section each one fills."""
    try:
        ws = find_workspace(workspace)
        file_names = ws.read_addons_dir(service)
    except OSError:
        print_error(_console, f"Service '{service}' has no addons directory")
        raise typer.Exit(1)
    except Exception as e:
        handle_cli_error(e, _console, verbose, exit_code=1)

    if not file_names:
        print_info(_console, f"Addons directory for {service} is empty")
        return

    yaml_files = set(filter_yaml_files(file_names))

    table = Table(title=f"Addons for {service}", show_header=True)
    table.add_column("File", style="cyan")
    table.add_column("Section", style="bold")
    for name in file_names:
        if name in yaml_files:
            table.add_row(name, classify(name).value)
        else:
            table.add_row(name, "[dim]ignored[/dim]")
    _console.print(table)

    reserved = (PARAMS_FILE_WITHOUT_EXT, OUTPUTS_FILE_WITHOUT_EXT)
    for name in sorted(yaml_files):
        base, _ = split_ext(name)
        if classify(name) is Category.RESOURCES and base.lower() in reserved:
            print_warning(
                _console,
                f"{name} is a resource file, not {base.lower()}.yaml (names are case-sensitive)",
            )
