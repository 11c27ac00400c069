"""Named-path registry resolving logical keys against a home directory."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Union

from pathkeeper.errors import (
    NotADirectoryPathError,
    PathIOError,
    PathNotFoundError,
    PathTraversalError,
    RegistryConfigError,
    UnknownKeyError,
)
from pathkeeper.util.paths import LocalFilesystem, expand_home, is_within
from pathkeeper.util.typing import FilesystemProvider

if TYPE_CHECKING:
    from pathkeeper.config.models import RegistryConfig

logger = logging.getLogger(__name__)

EntriesInput = Union[Mapping[str, str], Iterable[tuple[str, str]]]


class PathRegistry:
    """Resolve logical path keys into absolute, normalized paths.

    ``home`` and ``entries`` are fixed at construction. Every resolved path is
    computed once, lexically, and kept in a read-only mapping; building a new
    registry is the only way to change them. ``resolve`` and
    ``resolve_child`` never touch the filesystem and are safe to call from
    any thread without locking.
    """

    def __init__(
        self,
        home: str | os.PathLike[str],
        entries: EntriesInput,
        *,
        case_sensitive: bool = True,
        filesystem: FilesystemProvider | None = None,
    ) -> None:
        self._fs: FilesystemProvider = filesystem or LocalFilesystem()
        self._case_sensitive = case_sensitive

        home_str = os.fspath(home) if isinstance(home, os.PathLike) else home
        if not isinstance(home_str, str) or not home_str.strip():
            raise RegistryConfigError("Registry home must be a non-empty string.")
        self._home = self._absolute(expand_home(home_str))

        raw = _validate_entries(entries)
        self._raw: Mapping[str, str] = MappingProxyType(raw)
        self._resolved: Mapping[str, str] = MappingProxyType(
            {key: self._resolve_raw(value) for key, value in raw.items()}
        )

    @classmethod
    def from_config(
        cls, config: "RegistryConfig", *, filesystem: FilesystemProvider | None = None
    ) -> "PathRegistry":
        """Build a registry from a validated ``RegistryConfig``."""

        return cls(
            config.home,
            config.entries,
            case_sensitive=config.case_sensitive,
            filesystem=filesystem,
        )

    @property
    def home(self) -> Path:
        return Path(self._home)

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    @property
    def filesystem(self) -> FilesystemProvider:
        return self._fs

    def keys(self) -> list[str]:
        return list(self._raw)

    def items(self) -> Iterator[tuple[str, Path]]:
        for key, value in self._resolved.items():
            yield key, Path(value)

    def raw_value(self, key: str) -> str:
        try:
            return self._raw[key]
        except KeyError:
            raise UnknownKeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._raw

    def __len__(self) -> int:
        return len(self._raw)

    def __repr__(self) -> str:
        return f"PathRegistry(home={self._home!r}, keys={sorted(self._raw)!r})"

    def resolve(self, key: str) -> Path:
        """Return the absolute, normalized path configured for ``key``."""

        return Path(self._lookup(key))

    def ensure_directory(self, key: str) -> Path:
        """Resolve ``key`` and create the directory with any missing ancestors.

        Calling this repeatedly, or concurrently from several processes, is
        safe: an existing directory is not an error.
        """

        target = self._lookup(key)
        path = Path(target)

        if self._fs.exists(target) and not self._fs.is_directory(target):
            raise NotADirectoryPathError(key, path)

        existed = self._fs.is_directory(target)
        try:
            self._fs.create_directory_all(target)
        except FileExistsError as exc:
            if self._fs.exists(target) and not self._fs.is_directory(target):
                raise NotADirectoryPathError(key, path) from exc
            raise PathIOError(key, path, exc) from exc
        except OSError as exc:
            raise PathIOError(key, path, exc) from exc

        if not existed:
            logger.debug("Created directory for '%s' at %s", key, target)
        return path

    def resolve_child(self, dir_key: str, child_name: str) -> Path:
        """Join an untrusted ``child_name`` onto the directory for ``dir_key``.

        Raises ``PathTraversalError`` when the normalized result is not the
        base directory itself or one of its descendants.
        """

        base = self._lookup(dir_key)
        if not isinstance(child_name, str):
            raise TypeError("child_name must be a string")

        candidate = self._fs.normalize(self._fs.join_path(base, child_name))
        if not self._fs.is_absolute(candidate):
            # Drive-relative names on Windows can lose the base anchor.
            candidate = self._fs.to_absolute(candidate)

        if not is_within(candidate, base, case_sensitive=self._case_sensitive):
            logger.warning("Rejected child %r for key '%s'", child_name, dir_key)
            raise PathTraversalError(dir_key, Path(base), child_name)
        return Path(candidate)

    def real_path(self, key: str) -> Path:
        """Resolve ``key`` and then follow symlinks on the actual filesystem."""

        target = self._lookup(key)
        try:
            return Path(self._fs.real_path(target))
        except FileNotFoundError as exc:
            raise PathNotFoundError(key, Path(target)) from exc
        except OSError as exc:
            raise PathIOError(key, Path(target), exc) from exc

    def _lookup(self, key: str) -> str:
        try:
            return self._resolved[key]
        except (KeyError, TypeError):
            raise UnknownKeyError(key) from None

    def _absolute(self, path: str) -> str:
        return self._fs.normalize(self._fs.to_absolute(path))

    def _resolve_raw(self, value: str) -> str:
        expanded = expand_home(value)
        if self._fs.is_absolute(expanded):
            return self._absolute(expanded)
        return self._absolute(self._fs.join_path(self._home, expanded))


def _validate_entries(entries: EntriesInput) -> dict[str, str]:
    """Return a plain dict of entries, rejecting empty or duplicate keys."""

    if entries is None:
        raise RegistryConfigError("Registry entries must be a mapping, got None.")
    pairs = entries.items() if isinstance(entries, Mapping) else entries

    result: dict[str, str] = {}
    for item in pairs:
        try:
            key, value = item
        except (TypeError, ValueError):
            raise RegistryConfigError(f"Invalid registry entry {item!r}; expected (key, value).") from None
        if not isinstance(key, str) or not key.strip():
            raise RegistryConfigError(f"Registry keys must be non-empty strings, got {key!r}.")
        if key in result:
            raise RegistryConfigError(f"Duplicate registry key '{key}'.")
        if isinstance(value, os.PathLike):
            value = os.fspath(value)
        if not isinstance(value, str) or not value.strip():
            raise RegistryConfigError(f"Path for key '{key}' must be a non-empty string.")
        result[key] = value
    return result


__all__ = ["PathRegistry"]
