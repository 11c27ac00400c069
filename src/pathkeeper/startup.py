"""Startup validation for required registry keys."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable

from pathkeeper.errors import PathRegistryError, StartupValidationError
from pathkeeper.registry import PathRegistry

_LOGGER = logging.getLogger(__name__)


def validate_required(
    registry: PathRegistry,
    keys: Iterable[str],
    *,
    logger: logging.Logger | None = None,
) -> dict[str, Path]:
    """Ensure every key in ``keys`` is an existing, writable directory.

    Stops at the first failure with a ``StartupValidationError`` naming the
    key; the registry error that caused it is chained as ``__cause__``.
    """

    log = logger or _LOGGER
    filesystem = registry.filesystem
    ensured: dict[str, Path] = {}

    for key in keys:
        try:
            path = registry.ensure_directory(key)
        except PathRegistryError as exc:
            log.error("Required path '%s' failed validation: %s", key, exc)
            raise StartupValidationError(key, str(exc)) from exc

        if not filesystem.is_writable(str(path)):
            log.error("Required path '%s' is not writable: %s", key, path)
            raise StartupValidationError(key, f"directory is not writable: {path}")

        log.info("Verified '%s' -> %s", key, path)
        ensured[key] = path

    return ensured


def build_report(registry: PathRegistry, ensured: dict[str, Path] | None = None) -> dict[str, Any]:
    """Summarise every registry entry for a JSON report."""

    filesystem = registry.filesystem
    ensured = ensured or {}
    entries = []
    for key, path in registry.items():
        target = str(path)
        is_directory = filesystem.is_directory(target)
        entries.append(
            {
                "key": key,
                "raw_value": registry.raw_value(key),
                "path": target,
                "exists": filesystem.exists(target),
                "is_directory": is_directory,
                "writable": is_directory and filesystem.is_writable(target),
                "required": key in ensured,
            }
        )

    return {
        "home": str(registry.home),
        "case_sensitive": registry.case_sensitive,
        "entries": entries,
    }


__all__ = ["build_report", "validate_required"]
