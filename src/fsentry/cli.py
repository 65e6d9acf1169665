"""Command line interface for fsentry."""

from __future__ import annotations

import difflib
from datetime import datetime
from typing import Any

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from fsentry.classification import LabelTableError
from fsentry.config import (
    ConfigError,
    ConfigManager,
    FsentryConfig,
    flatten_for_env,
    resolve_with_precedence,
)
from fsentry.entries import (
    ClassifiedEntry,
    DirectoryListing,
    DirectoryUnreadableError,
    EntryBuilder,
    MetadataUnavailableError,
    labeler_from_options,
)
from fsentry.logging_setup import configure_logging

console = Console()


def _handle_cli_error(
    message: str,
    *,
    code: str,
    json_output: bool,
    original: Exception | None = None,
) -> None:
    """Emit a standardized error and terminate the command.

    Args:
        message: Human-readable error message.
        code: Machine-readable error identifier.
        json_output: Indicates whether JSON mode is active.
        original: Original exception for chaining when not using JSON.

    Raises:
        SystemExit: When emitting JSON output to terminate the command.
        click.ClickException: For non-JSON flows to surface the error.
    """
    if json_output:
        console.print_json(data={"error": {"code": code, "message": message}})
        raise SystemExit(1)

    raise click.ClickException(message) from original


def _load_config(ctx: click.Context) -> FsentryConfig:
    """Load configuration and configure logging for the invocation."""
    manager = ConfigManager()
    try:
        config = manager.load()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    configure_logging(config.logging, verbose=bool(ctx.obj and ctx.obj.get("verbose")))
    return config


def _builder(config: FsentryConfig, *, json_output: bool) -> EntryBuilder:
    try:
        return EntryBuilder.from_config(config.classification)
    except LabelTableError as exc:
        _handle_cli_error(
            str(exc), code="label_table_invalid", json_output=json_output, original=exc
        )
        raise


def _format_size(size: int) -> str:
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024 or unit == "GB":
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{size} B"


def _format_time(value: datetime) -> str:
    return value.strftime("%Y-%m-%d %H:%M")


def _entries_table(entries: list[ClassifiedEntry], *, title: str | None = None) -> Table:
    table = Table(title=title)
    table.add_column("Name", overflow="fold")
    table.add_column("Type")
    table.add_column("Category")
    table.add_column("MIME")
    table.add_column("Size", justify="right")
    table.add_column("Modified")
    for entry in entries:
        name = f"{entry.name}/" if entry.is_directory else entry.name
        table.add_row(
            name,
            entry.type_label,
            entry.category.value,
            entry.mime or "-",
            "-" if entry.is_directory else _format_size(entry.size_bytes),
            _format_time(entry.modified_at),
        )
    return table


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="fsentry")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """fsentry classifies files and directories by type, MIME, and content."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("path", type=click.Path(path_type=str))
@click.option("--json", "json_output", is_flag=True, help="Emit JSON output.")
@click.option("--strict", is_flag=True, help="Fail instead of returning a placeholder entry.")
@click.pass_context
def inspect(ctx: click.Context, path: str, json_output: bool, strict: bool) -> None:
    """Classify a single PATH."""
    config = _load_config(ctx)
    json_enabled = json_output or config.cli.json_default
    builder = _builder(config, json_output=json_enabled)

    if strict:
        try:
            entry = builder.inspect(path)
        except MetadataUnavailableError as exc:
            _handle_cli_error(
                str(exc), code="metadata_unavailable", json_output=json_enabled, original=exc
            )
            return
    else:
        entry = builder.build_entry(path)

    if json_enabled:
        console.print_json(data=entry.model_dump(mode="json"))
        return

    table = Table(show_header=False, title=str(entry.path))
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")
    table.add_row("Name", entry.name)
    table.add_row("Directory", "yes" if entry.is_directory else "no")
    table.add_row("Type", entry.type_label)
    table.add_row("Category", entry.category.value)
    table.add_row("MIME", entry.mime or "-")
    table.add_row("Size", f"{entry.size_bytes} bytes")
    table.add_row("Created", entry.created_at.isoformat())
    table.add_row("Modified", entry.modified_at.isoformat())
    console.print(table)


@cli.command("ls")
@click.argument("path", type=click.Path(path_type=str), default=".")
@click.option("--json", "json_output", is_flag=True, help="Emit JSON output.")
@click.option("--strict", is_flag=True, help="Fail instead of returning an empty listing.")
@click.pass_context
def list_command(ctx: click.Context, path: str, json_output: bool, strict: bool) -> None:
    """List the immediate children of PATH."""
    config = _load_config(ctx)
    json_enabled = json_output or config.cli.json_default
    builder = _builder(config, json_output=json_enabled)

    listing: DirectoryListing
    if strict:
        try:
            listing = builder.read_directory(path)
        except DirectoryUnreadableError as exc:
            _handle_cli_error(
                str(exc), code="directory_unreadable", json_output=json_enabled, original=exc
            )
            return
    else:
        listing = builder.list_directory(path)

    if json_enabled:
        console.print_json(data=listing.model_dump(mode="json"))
        return

    if not listing.entries:
        console.print(f"[yellow]No entries found in {path}.[/yellow]")
        return

    console.print(_entries_table(listing.entries, title=path))
    parent = listing.parent.as_posix() if listing.parent is not None else "-"
    console.print(f"[green]{len(listing.entries)} entries; parent: {parent}[/green]")


@cli.command()
@click.argument("extensions", nargs=-1)
@click.option("--all", "show_all", is_flag=True, help="Print the whole label table.")
@click.pass_context
def label(ctx: click.Context, extensions: tuple[str, ...], show_all: bool) -> None:
    """Print the type label for each of EXTENSIONS."""
    if not extensions and not show_all:
        raise click.UsageError("Provide at least one extension or pass --all.")

    config = _load_config(ctx)
    try:
        labeler = labeler_from_options(config.classification)
    except LabelTableError as exc:
        raise click.ClickException(str(exc)) from exc

    if show_all:
        table = Table(title=f"{len(labeler)} extension labels")
        table.add_column("Extension")
        table.add_column("Label")
        for extension, text in sorted(labeler.labels.items()):
            table.add_row(extension, text)
        console.print(table)

    for extension in extensions:
        suffix = "" if extension in labeler else " [dim](unmapped)[/dim]"
        text = escape(f"{extension}: {labeler.label(extension)}")
        console.print(f"{text}{suffix}", highlight=False)


def _assign_nested(target: dict[str, Any], path: list[str], value: Any) -> None:
    """Assign a nested value within a dictionary for a dotted path.

    Raises:
        ConfigError: If a non-mapping value is encountered along the path.
    """
    node = target
    for segment in path[:-1]:
        existing = node.get(segment)
        if existing is None:
            existing = {}
            node[segment] = existing
        elif not isinstance(existing, dict):
            raise ConfigError(
                f"Cannot assign into '{segment}' because it is not a mapping in the config file."
            )
        node = existing
    node[path[-1]] = value


@cli.group()
def config() -> None:
    """Manage fsentry configuration files and overrides."""


@config.command("view")
@click.option("--no-env", is_flag=True, help="Ignore environment overrides when displaying output.")
@click.option(
    "--env",
    "as_env",
    is_flag=True,
    help="Print the configuration as FSENTRY__ environment variable assignments.",
)
def config_view(no_env: bool, as_env: bool) -> None:
    """Display the effective configuration after applying precedence rules."""
    manager = ConfigManager()
    try:
        manager.ensure_exists()
        resolved = manager.load(include_env=not no_env)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    if as_env:
        for key, value in flatten_for_env(resolved).items():
            console.print(f"{key}={value}", highlight=False, markup=False)
        return

    yaml_text = yaml.safe_dump(resolved.model_dump(mode="python"), sort_keys=False)
    console.print(Syntax(yaml_text, "yaml", word_wrap=True))


@config.command("set")
@click.argument("key")
@click.option("--value", required=True, help="Value to assign to KEY.")
def config_set(key: str, value: str) -> None:
    """Persist a configuration value expressed as a dotted KEY."""
    manager = ConfigManager()
    manager.ensure_exists()

    before = manager.read_text().splitlines()
    segments = [segment.strip() for segment in key.split(".") if segment.strip()]
    if not segments:
        raise click.ClickException(
            "KEY must specify a dotted path such as 'classification.sample_size_bytes'."
        )

    try:
        parsed_value = yaml.safe_load(value)
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Unable to parse value: {exc}") from exc

    try:
        file_data = manager.load_file_overrides()
        _assign_nested(file_data, segments, parsed_value)
        resolve_with_precedence(defaults=FsentryConfig(), file_overrides=file_data)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    manager.save(file_data)
    after = manager.read_text().splitlines()

    diff = list(
        difflib.unified_diff(
            before,
            after,
            fromfile="config.yaml (before)",
            tofile="config.yaml (after)",
            lineterm="",
        )
    )
    changed = [
        line
        for line in diff
        if line.startswith(("+", "-"))
        and not line.startswith(("+++", "---"))
        and "Last updated:" not in line
    ]
    if not changed:
        console.print("[yellow]No changes applied; value already up to date.[/yellow]")
        return

    console.print(Syntax("\n".join(diff), "diff", word_wrap=False))
    console.print(f"[green]Updated {'.'.join(segments)}.[/green]")


@config.command("edit")
def config_edit() -> None:
    """Open the configuration file in an interactive editor session."""
    manager = ConfigManager()
    manager.ensure_exists()

    original = manager.read_text()
    edited = click.edit(original, extension=".yaml")

    if edited is None:
        console.print("[yellow]Edit cancelled; no changes applied.[/yellow]")
        return

    if edited == original:
        console.print("[yellow]No changes detected.[/yellow]")
        return

    try:
        parsed = yaml.safe_load(edited) or {}
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Invalid YAML: {exc}") from exc

    if not isinstance(parsed, dict):
        raise click.ClickException("Configuration file must contain a top-level mapping.")

    try:
        resolve_with_precedence(defaults=FsentryConfig(), file_overrides=parsed)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    manager.save(parsed)
    console.print("[green]Configuration updated successfully.[/green]")


def main() -> None:
    """Invoke the Click CLI as the console script entry point."""
    cli()


if __name__ == "__main__":
    main()
