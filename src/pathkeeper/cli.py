"""Command-line entry points for the path registry."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from pathkeeper.config import ConfigError, PathkeeperConfig, dump_example_config, load_config
from pathkeeper.errors import PathRegistryError
from pathkeeper.registry import PathRegistry
from pathkeeper.startup import build_report, validate_required
from pathkeeper.util.logging import LOG_FILE_NAME, configure_logging
from pathkeeper.util.report import write_report

app = typer.Typer(add_completion=False, help="Resolve and validate named filesystem paths")

ConfigOption = typer.Option(None, "--config", "-c", help="Path to a YAML/TOML/JSON config file")


def _load(config_path: Optional[Path]) -> tuple[PathkeeperConfig, PathRegistry]:
    try:
        cfg = load_config(config_path)
        registry = PathRegistry.from_config(cfg.registry)
    except (ConfigError, PathRegistryError, OSError) as exc:
        _fail(exc)
    return cfg, registry


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


def _logger_for(cfg: PathkeeperConfig, registry: PathRegistry) -> logging.Logger:
    log_path = None
    if cfg.logging.file_key:
        log_path = registry.ensure_directory(cfg.logging.file_key) / LOG_FILE_NAME
    return configure_logging(level=cfg.logging.level, log_path=log_path)


@app.command()
def resolve(
    key: str = typer.Argument(..., help="Logical path key"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Print the absolute path configured for KEY."""

    _, registry = _load(config)
    try:
        typer.echo(str(registry.resolve(key)))
    except PathRegistryError as exc:
        _fail(exc)


@app.command()
def ensure(
    keys: List[str] = typer.Argument(..., help="Logical directory keys"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Create the directories configured for KEYS if missing."""

    _, registry = _load(config)
    for key in keys:
        try:
            typer.echo(str(registry.ensure_directory(key)))
        except PathRegistryError as exc:
            _fail(exc)


@app.command()
def child(
    key: str = typer.Argument(..., help="Logical directory key"),
    name: str = typer.Argument(..., help="File name or relative sub-path inside the directory"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Print the path of NAME inside the directory for KEY, refusing escapes."""

    _, registry = _load(config)
    try:
        typer.echo(str(registry.resolve_child(key, name)))
    except PathRegistryError as exc:
        _fail(exc)


@app.command("list")
def list_paths(config: Optional[Path] = ConfigOption) -> None:
    """Print every configured key with its resolved path."""

    _, registry = _load(config)
    for key, path in registry.items():
        typer.echo(f"{key}\t{path}")


@app.command()
def realpath(
    key: str = typer.Argument(..., help="Logical path key"),
    config: Optional[Path] = ConfigOption,
) -> None:
    """Print the symlink-resolved path for KEY; it must exist."""

    _, registry = _load(config)
    try:
        typer.echo(str(registry.real_path(key)))
    except PathRegistryError as exc:
        _fail(exc)


@app.command()
def check(
    config: Optional[Path] = ConfigOption,
    report: Optional[Path] = typer.Option(None, help="Write a JSON report of all entries to this file"),
) -> None:
    """Ensure every required directory exists and is writable."""

    cfg, registry = _load(config)
    try:
        logger = _logger_for(cfg, registry)
        ensured = validate_required(registry, cfg.registry.required, logger=logger)
    except (PathRegistryError, OSError) as exc:
        _fail(exc)

    if report is not None:
        try:
            write_report(build_report(registry, ensured), report)
        except OSError as exc:
            _fail(exc)
        logger.info("Wrote report %s", report)
    typer.echo(f"OK: {len(ensured)} required path(s) ready under {registry.home}")


@app.command("dump-config")
def dump_config(dest: Path = typer.Argument(..., help="Destination YAML or JSON file")) -> None:
    """Write the default configuration to DEST."""

    try:
        dump_example_config(dest)
    except (ConfigError, OSError) as exc:
        _fail(exc)
    typer.echo(f"Wrote {dest}")


def main() -> None:
    app()


__all__ = ["main", "app"]
