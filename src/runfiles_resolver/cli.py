"""Runfiles command-line tool.

Commands:
    runfiles-resolver path NAME...     -- Print the location of each runfile
    runfiles-resolver env              -- Print the derived environment
    runfiles-resolver exec -- CMD ...  -- Run CMD with the derived environment
    runfiles-resolver manifest         -- Show the active manifest entries
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from runfiles_resolver.errors import EmptyRunfileError, RunfilesError
from runfiles_resolver.manifest import ManifestBackend
from runfiles_resolver.names import is_valid_name
from runfiles_resolver.resolver import Runfiles

logger = logging.getLogger(__name__)

app = typer.Typer(help="Resolve Bazel runfiles and propagate them to subprocesses")
console = Console()
err_console = Console(stderr=True)


@dataclass(frozen=True)
class _Options:
    program: Optional[str]
    manifest: Optional[str]
    directory: Optional[str]


def _fail(exc: Exception) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
    return typer.Exit(1)


def _load(ctx: typer.Context) -> Runfiles:
    opts: _Options = ctx.obj
    try:
        return Runfiles.create(
            program=opts.program,
            manifest_file=opts.manifest,
            directory=opts.directory,
        )
    except RunfilesError as exc:
        raise _fail(exc) from exc


@app.callback()
def callback(
    ctx: typer.Context,
    program: Optional[str] = typer.Option(
        None, "--program", help="Program whose co-located runfiles to look for",
    ),
    manifest: Optional[str] = typer.Option(
        None, "--manifest", help="Manifest file (default: $RUNFILES_MANIFEST_FILE)",
    ),
    directory: Optional[str] = typer.Option(
        None, "--directory", help="Runfiles directory (default: $RUNFILES_DIR)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log discovery details"),
) -> None:
    """Configure runfiles discovery for all subcommands."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.obj = _Options(program=program, manifest=manifest, directory=directory)


@app.command("path")
def path_command(
    ctx: typer.Context,
    names: List[str] = typer.Argument(..., help="Runfile names, e.g. my_ws/pkg/data.txt"),
) -> None:
    """Print the filesystem location of each runfile, one per line.

    Empty runfiles print an empty line.
    """
    runfiles = _load(ctx)
    for name in names:
        try:
            typer.echo(runfiles.resolve(name))
        except EmptyRunfileError:
            typer.echo("")
        except RunfilesError as exc:
            raise _fail(exc) from exc


@app.command("env")
def env_command(ctx: typer.Context) -> None:
    """Print KEY=VALUE assignments to pass to subprocesses."""
    for entry in _load(ctx).environment():
        typer.echo(entry)


@app.command(
    "exec",
    context_settings={"ignore_unknown_options": True},
)
def exec_command(
    ctx: typer.Context,
    command: List[str] = typer.Argument(..., help="Command and arguments; a runfile name is resolved first"),
) -> None:
    """Run COMMAND with the runfiles environment appended to the current one."""
    runfiles = _load(ctx)
    program, *args = command
    if is_valid_name(program):
        try:
            location = runfiles.resolve(program)
        except RunfilesError:
            location = None
        # Directory runfiles resolve every name, so only an existing file counts.
        if location is not None and os.path.exists(location):
            program = location
        else:
            logger.debug("%s is not a runfile; running it as-is", program)

    try:
        completed = subprocess.run([program, *args], env=runfiles.environ(), check=False)
    except OSError as exc:
        err_console.print(f"[red]Error:[/red] cannot run {escape(program)}: {escape(str(exc))}")
        raise typer.Exit(127) from exc
    raise typer.Exit(completed.returncode)


@app.command("manifest")
def manifest_command(ctx: typer.Context) -> None:
    """Show the entries of the active runfiles manifest."""
    backend = _load(ctx).backend
    if not isinstance(backend, ManifestBackend):
        err_console.print("[yellow]No runfiles manifest in use (directory-based runfiles).[/yellow]")
        raise typer.Exit(1)

    table = Table(title=f"Runfiles manifest: {escape(backend.path)}")
    table.add_column("Name", style="cyan")
    table.add_column("Location")
    for name, location in sorted(backend.entries.items()):
        table.add_row(escape(name), escape(location) if location else "[dim](empty)[/dim]")
    console.print(table)


def main() -> None:
    app()
