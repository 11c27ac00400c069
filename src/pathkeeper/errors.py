"""Exception taxonomy for the path registry."""

from __future__ import annotations

from pathlib import Path


class PathRegistryError(Exception):
    """Base class for every error raised by the registry."""


class RegistryConfigError(PathRegistryError, ValueError):
    """Raised when the registry is constructed from invalid input."""


class UnknownKeyError(PathRegistryError, KeyError):
    """Raised when a logical key is not present in the registry."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Unknown path key '{self.key}'."


class PathTraversalError(PathRegistryError, ValueError):
    """Raised when a child name would escape its base directory."""

    def __init__(self, key: str, base: Path, child_name: str) -> None:
        super().__init__(
            f"Child name {child_name!r} escapes the directory for key '{key}' ({base})."
        )
        self.key = key
        self.base = base
        self.child_name = child_name


class NotADirectoryPathError(PathRegistryError, NotADirectoryError):
    """Raised when a resolved path exists but is not a directory."""

    def __init__(self, key: str, path: Path) -> None:
        super().__init__(f"Path for key '{key}' exists but is not a directory: {path}")
        self.key = key
        self.path = path


class PathIOError(PathRegistryError, OSError):
    """Wraps an underlying filesystem error for a registry key."""

    def __init__(self, key: str, path: Path, cause: OSError) -> None:
        super().__init__(f"Filesystem error for key '{key}' at {path}: {cause}")
        self.key = key
        self.path = path
        self.cause = cause


class PathNotFoundError(PathRegistryError, FileNotFoundError):
    """Raised by real path resolution when the target does not exist."""

    def __init__(self, key: str, path: Path) -> None:
        super().__init__(f"Path for key '{key}' does not exist: {path}")
        self.key = key
        self.path = path


class StartupValidationError(PathRegistryError):
    """Raised when a required key cannot be made usable at startup."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Required path '{key}' is not usable: {reason}")
        self.key = key
        self.reason = reason


__all__ = [
    "NotADirectoryPathError",
    "PathIOError",
    "PathNotFoundError",
    "PathRegistryError",
    "PathTraversalError",
    "RegistryConfigError",
    "StartupValidationError",
    "UnknownKeyError",
]
