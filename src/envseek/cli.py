"""CLI entrypoint for envseek diagnostics.

Every command loads into a private mapping store, so nothing here changes the
environment of the invoking shell.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

import typer

from envseek.accessors import get_bool, get_float, get_int, get_string, must_get_string
from envseek.config import DEFAULT_ENV_FILE, DEFAULT_MAX_DEPTH, SearchConfig
from envseek.errors import EnvSeekError
from envseek.loader import load_file, load_with_config
from envseek.log import configure_logging
from envseek.store import MappingEnvironment
from envseek.traversal import iter_candidate_files
from envseek.ui.console import get_console
from envseek.ui.render import (
    render_error,
    render_file_keys,
    render_info,
    render_success,
    render_summary_table,
    render_value,
    render_warning,
)

app = typer.Typer(add_completion=False, help="Locate, validate and read .env files.")

VALUE_TYPES = ("str", "int", "float", "bool")


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log traversal and parsing details."),
) -> None:
    """envseek diagnostics CLI."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


@app.command("scan")
def scan(
    root_dir: Path = typer.Option(Path("."), "--root", "-r", envvar="ENVSEEK_ROOT"),
    names: Optional[List[str]] = typer.Option(None, "--name", "-n", help="Candidate filename; repeatable."),
    max_depth: int = typer.Option(DEFAULT_MAX_DEPTH, "--max-depth", "-d", envvar="ENVSEEK_MAX_DEPTH", min=0),
    load_all: bool = typer.Option(False, "--all", help="Apply every match instead of stopping at the first."),
    lenient: bool = typer.Option(False, "--lenient", help="Skip malformed lines instead of failing."),
) -> None:
    """Show which files a load would apply and the keys each one sets."""
    config = SearchConfig(
        candidate_filenames=tuple(names or [DEFAULT_ENV_FILE]),
        max_depth=max_depth,
        stop_on_first_match=not load_all,
        strict=not lenient,
    )
    store = MappingEnvironment()
    keys_by_file: list[tuple[Path, list[str]]] = []
    try:
        with get_console().status(f"Scanning {root_dir}", spinner="dots", spinner_style="accent"):
            for path in iter_candidate_files(root_dir, config):
                file_store = MappingEnvironment()
                load_file(path, strict=config.strict, store=file_store)
                store.values.update(file_store.values)
                keys_by_file.append((path, list(file_store.values)))
                if config.stop_on_first_match:
                    break
    except EnvSeekError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1) from exc

    render_summary_table(
        {
            "Root": str(root_dir),
            "Names": ", ".join(config.candidate_filenames),
            "Max depth": str(config.max_depth),
            "Mode": "all matches" if load_all else "first match",
            "Files applied": str(len(keys_by_file)),
            "Keys set": str(len(store.values)),
        },
        title="Scan",
    )
    if not keys_by_file:
        render_warning("No matching file found.")
        return
    for path, keys in keys_by_file:
        render_file_keys(str(path), keys)


@app.command("check")
def check(
    path: Path = typer.Argument(..., help="File to validate."),
    lenient: bool = typer.Option(False, "--lenient", help="Skip malformed lines instead of failing."),
) -> None:
    """Parse a single file and report its keys or the first error."""
    store = MappingEnvironment()
    try:
        count = load_file(path, strict=not lenient, store=store)
    except EnvSeekError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1) from exc
    render_file_keys(str(path), sorted(store.values))
    render_success(f"{path}: {count} assignment(s) valid.")


@app.command("get")
def get(
    key: str = typer.Argument(...),
    value_type: str = typer.Option("str", "--type", "-t", help="One of: str, int, float, bool."),
    default: Optional[str] = typer.Option(None, "--default"),
    required: bool = typer.Option(False, "--required", help="Fail when the key is absent."),
    root_dir: Path = typer.Option(Path("."), "--root", "-r", envvar="ENVSEEK_ROOT"),
) -> None:
    """Load with defaults and print one value, as seen by the typed accessors."""
    if value_type not in VALUE_TYPES:
        raise typer.BadParameter(f"Unsupported type: {value_type}", param_hint="--type")
    store = MappingEnvironment(dict(os.environ))
    try:
        load_with_config(None, root=root_dir, store=store)
        if required:
            render_value(must_get_string(key, store=store))
            return
    except EnvSeekError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1) from exc

    fallback = _convert_default(default, value_type)
    if value_type == "int":
        value = get_int(key, fallback, store=store)
    elif value_type == "float":
        value = get_float(key, fallback, store=store)
    elif value_type == "bool":
        value = get_bool(key, fallback, store=store)
    else:
        value = get_string(key, fallback, store=store)
    if value is None:
        render_info(f"{key} is not set.")
        raise typer.Exit(code=1)
    render_value(value)


def _convert_default(default: str | None, value_type: str) -> object:
    if default is None:
        return None
    try:
        if value_type == "int":
            return int(default)
        if value_type == "float":
            return float(default)
        if value_type == "bool":
            return _convert_bool(default)
    except ValueError as exc:
        raise typer.BadParameter(f"Default {default!r} is not a valid {value_type}.", param_hint="--default") from exc
    return default


def _convert_bool(default: str) -> bool:
    lowered = default.lower()
    if lowered in {"true", "1"}:
        return True
    if lowered in {"false", "0"}:
        return False
    raise ValueError(default)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
