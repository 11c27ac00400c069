"""Lexical path helpers and the local filesystem provider."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import Tuple


def normalize_path(path: str) -> str:
    """Collapse ``.`` and ``..`` segments without touching the filesystem."""
    return os.path.normpath(path)


def expand_home(path: str) -> str:
    """Expand a bare ``~`` or a leading ``~/``; ``~name`` stays a literal segment."""
    separators = tuple(sep for sep in (os.sep, os.altsep) if sep)
    if path == "~" or path.startswith(tuple("~" + sep for sep in separators)):
        return os.path.expanduser(path)
    return path


def segments(path: str, *, case_sensitive: bool = True) -> Tuple[str, ...]:
    """Return the segment tuple of a normalized path used for containment checks."""
    parts = PurePath(normalize_path(path)).parts
    if case_sensitive:
        return tuple(parts)
    return tuple(part.casefold() for part in parts)


def is_within(path: str, base: str, *, case_sensitive: bool = True) -> bool:
    """Return True when ``path`` equals ``base`` or is one of its descendants.

    Both paths are compared segment by segment, so ``/a/b`` contains
    ``/a/b/c`` but not ``/a/bc``.
    """
    path_parts = segments(path, case_sensitive=case_sensitive)
    base_parts = segments(base, case_sensitive=case_sensitive)
    if len(path_parts) < len(base_parts):
        return False
    return path_parts[: len(base_parts)] == base_parts


class LocalFilesystem:
    """``FilesystemProvider`` backed by :mod:`os` and :mod:`os.path`."""

    def join_path(self, base: str, other: str) -> str:
        return os.path.join(base, other)

    def normalize(self, path: str) -> str:
        return normalize_path(path)

    def to_absolute(self, path: str) -> str:
        # abspath is lexical: it joins onto the cwd and normalizes.
        return os.path.abspath(path)

    def is_absolute(self, path: str) -> bool:
        return os.path.isabs(path)

    def create_directory_all(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_writable(self, path: str) -> bool:
        return os.access(path, os.W_OK)

    def real_path(self, path: str) -> str:
        return os.path.realpath(path, strict=True)


__all__ = ["LocalFilesystem", "expand_home", "is_within", "normalize_path", "segments"]
