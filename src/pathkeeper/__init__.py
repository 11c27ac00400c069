"""Named-path registry with traversal-safe resolution."""

from .errors import (
    NotADirectoryPathError,
    PathIOError,
    PathNotFoundError,
    PathRegistryError,
    PathTraversalError,
    RegistryConfigError,
    StartupValidationError,
    UnknownKeyError,
)
from .registry import PathRegistry

__all__ = [
    "NotADirectoryPathError",
    "PathIOError",
    "PathNotFoundError",
    "PathRegistry",
    "PathRegistryError",
    "PathTraversalError",
    "RegistryConfigError",
    "StartupValidationError",
    "UnknownKeyError",
]
