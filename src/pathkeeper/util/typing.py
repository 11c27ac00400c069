"""Shared typing helpers for pathkeeper modules."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FilesystemProvider(Protocol):
    """Filesystem facilities consumed by the path registry.

    The lexical operations (``join_path``, ``normalize``, ``to_absolute``,
    ``is_absolute``) must never touch the disk.
    """

    def join_path(self, base: str, other: str) -> str:
        ...

    def normalize(self, path: str) -> str:
        ...

    def to_absolute(self, path: str) -> str:
        ...

    def is_absolute(self, path: str) -> bool:
        ...

    def create_directory_all(self, path: str) -> None:
        """Create ``path`` and missing ancestors; no error if it is already a directory."""
        ...

    def exists(self, path: str) -> bool:
        ...

    def is_directory(self, path: str) -> bool:
        ...

    def is_writable(self, path: str) -> bool:
        ...

    def real_path(self, path: str) -> str:
        """Resolve symlinks, raising ``FileNotFoundError`` for missing paths."""
        ...


__all__ = ["FilesystemProvider"]
