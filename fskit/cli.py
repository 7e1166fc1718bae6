#!/usr/bin/env python3
"""
fskit - command line inspection tool

Main entry point for the fskit CLI application.
"""

import os
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .core import __version__, AuditLogger, FilesystemError, load_settings, save_settings
from .factory import Factory


console = Console()


def get_factory(ctx: click.Context) -> Factory:
    """Get a factory configured from the selected settings file."""
    return Factory(settings=load_settings(ctx.obj["config_path"]))


def _fail(error: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__, prog_name="fskit")
@click.option("--config", "config_path", default="fskit.yaml", show_default=True,
              help="Settings file.")
@click.pass_context
def fskit(ctx, config_path: str):
    """
    fskit - file and directory operations

    Inspect, copy, move and delete files and directory trees.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


@fskit.command()
@click.argument("path")
@click.pass_context
def info(ctx, path: str):
    """Show metadata for a file."""
    ops = get_factory(ctx).file

    try:
        table = Table(title=escape(path), show_header=False)
        table.add_column("Field", style="dim")
        table.add_column("Value")
        table.add_row("Name", escape(ops.name(path)))
        table.add_row("Extension", ops.extension(path) or "-")
        table.add_row("MIME type", ops.mime_type(path))
        table.add_row("Size", f"{ops.size(path)} bytes")
        table.add_row("Modified", datetime.fromtimestamp(ops.last_modified(path)).isoformat())
    except FilesystemError as e:
        _fail(e)

    console.print(table)


@fskit.command("ls")
@click.argument("path", default=".")
@click.option("--pattern", default="*", show_default=True, help="Glob pattern.")
@click.option("--recursive", is_flag=True, help="List every file at any depth.")
@click.pass_context
def ls(ctx, path: str, pattern: str, recursive: bool):
    """List the contents of a directory."""
    ops = get_factory(ctx).dir

    try:
        if recursive:
            entries = sorted(ops.files_recursive(path))
        else:
            entries = ops.glob(path, pattern)
    except FilesystemError as e:
        _fail(e)

    if not entries:
        console.print("[dim]No entries found.[/dim]")
        return

    for entry in entries:
        if os.path.isdir(entry):
            console.print(f"  [bold blue]{escape(entry + os.sep)}[/bold blue]")
        else:
            console.print(f"  {escape(entry)}")


@fskit.command()
@click.argument("source")
@click.argument("destination")
@click.option("--no-overwrite", is_flag=True, help="Fail if the destination file exists.")
@click.pass_context
def cp(ctx, source: str, destination: str, no_overwrite: bool):
    """Copy a file or a directory tree."""
    factory = get_factory(ctx)

    try:
        if factory.dir_exists(source):
            factory.cp_dir(source, destination)
        else:
            factory.cp_file(source, destination, overwrite=not no_overwrite)
    except FilesystemError as e:
        _fail(e)

    console.print(f"[green]Copied[/green] {escape(source)} -> {escape(destination)}")


@fskit.command()
@click.argument("source")
@click.argument("destination")
@click.option("--no-overwrite", is_flag=True, help="Fail if the destination file exists.")
@click.pass_context
def mv(ctx, source: str, destination: str, no_overwrite: bool):
    """Move a file or a directory tree."""
    factory = get_factory(ctx)

    try:
        if factory.dir_exists(source):
            factory.mv_dir(source, destination)
        else:
            factory.mv_file(source, destination, overwrite=not no_overwrite)
    except FilesystemError as e:
        _fail(e)

    console.print(f"[green]Moved[/green] {escape(source)} -> {escape(destination)}")


@fskit.command()
@click.argument("paths", nargs=-1, required=True)
@click.option("--keep-root", is_flag=True, help="Empty directories instead of removing them.")
@click.pass_context
def rm(ctx, paths, keep_root: bool):
    """Delete files or directory trees."""
    factory = get_factory(ctx)

    for path in paths:
        try:
            if factory.dir_exists(path):
                factory.delete_dir(path, keep=keep_root)
            else:
                factory.unlink(path)
        except FilesystemError as e:
            _fail(e)
        console.print(f"[green]Deleted[/green] {escape(path)}")


@fskit.command()
@click.option("--limit", default=20, show_default=True, help="Number of entries.")
@click.option("--failed", is_flag=True, help="Only show failed operations.")
@click.pass_context
def audit(ctx, limit: int, failed: bool):
    """View the audit log."""
    settings = load_settings(ctx.obj["config_path"])
    if not Path(settings.audit_log_path).is_file():
        console.print("[dim]No audit entries found.[/dim]")
        return

    logger = AuditLogger(log_path=settings.audit_log_path)
    entries = logger.get_failed_actions(limit=limit) if failed else logger.get_recent(limit=limit)

    if not entries:
        console.print("[dim]No audit entries found.[/dim]")
        return

    table = Table(title="Recent Audit Log")
    table.add_column("Time", style="dim")
    table.add_column("Action")
    table.add_column("Description")
    table.add_column("Status")

    for entry in entries:
        time_str = entry.timestamp.split("T")[1].split(".")[0] if "T" in entry.timestamp else entry.timestamp

        status_str = entry.status
        if entry.status == "executed":
            status_str = f"[green]{entry.status}[/green]"
        elif entry.status == "failed":
            status_str = f"[red]{entry.status}[/red]"

        description = entry.action_description
        if len(description) > 60:
            description = description[:60] + "..."

        table.add_row(time_str, entry.action_type, escape(description), status_str)

    console.print(table)


@fskit.command("config")
@click.option("--init", is_flag=True, help="Write the current settings to the config file.")
@click.pass_context
def config_show(ctx, init: bool):
    """Show the effective settings."""
    config_path = ctx.obj["config_path"]
    settings = load_settings(config_path)

    if init:
        if Path(config_path).exists():
            console.print(f"[red]Config already exists:[/red] {config_path}")
            raise SystemExit(1)
        save_settings(settings, config_path)
        console.print(f"[green]Wrote settings to[/green] {config_path}")

    console.print(f"\n[bold]Settings[/bold] ({config_path}):")
    console.print(f"   Directory mode: {oct(settings.directory_mode)}")
    console.print(f"   JSON indent: {settings.json_indent}")
    console.print(f"   Audit enabled: {settings.audit_enabled}")
    console.print(f"   Audit log: {settings.audit_log_path}")


def main():
    fskit(obj={})


if __name__ == "__main__":
    main()
