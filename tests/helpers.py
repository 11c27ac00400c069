from __future__ import annotations

from pathlib import Path
from typing import Mapping

import yaml

from pathkeeper.util.paths import LocalFilesystem

DISK_OPERATIONS = {
    "create_directory_all",
    "exists",
    "is_directory",
    "is_writable",
    "real_path",
}


class RecordingFilesystem(LocalFilesystem):
    """Local filesystem that records every call touching the disk."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def create_directory_all(self, path: str) -> None:
        self.calls.append(("create_directory_all", path))
        super().create_directory_all(path)

    def exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        return super().exists(path)

    def is_directory(self, path: str) -> bool:
        self.calls.append(("is_directory", path))
        return super().is_directory(path)

    def is_writable(self, path: str) -> bool:
        self.calls.append(("is_writable", path))
        return super().is_writable(path)

    def real_path(self, path: str) -> str:
        self.calls.append(("real_path", path))
        return super().real_path(path)

    @property
    def disk_calls(self) -> list[tuple[str, str]]:
        return [call for call in self.calls if call[0] in DISK_OPERATIONS]


class FailingFilesystem(LocalFilesystem):
    """Filesystem whose directory creation always raises ``error``."""

    def __init__(self, error: OSError) -> None:
        self.error = error

    def create_directory_all(self, path: str) -> None:
        raise self.error


class ReadOnlyFilesystem(LocalFilesystem):
    """Filesystem reporting every directory as not writable."""

    def is_writable(self, path: str) -> bool:
        return False


def write_config(
    dest: Path,
    *,
    home: Path,
    entries: Mapping[str, str],
    required: list[str] | None = None,
    file_key: str | None = None,
) -> Path:
    """Write a YAML config layered over the packaged defaults."""

    payload = {
        "registry": {
            "home": str(home),
            "entries": dict(entries),
            "required": list(required or []),
        },
        "logging": {"level": "INFO", "file_key": file_key},
    }
    dest.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return dest
