"""JSON report helpers for registry checks."""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Mapping


def write_report(payload: Mapping[str, Any], dest: Path) -> Path:
    """Write ``payload`` as JSON to ``dest`` stamped with a UTC ``generated_at``."""

    dest.parent.mkdir(parents=True, exist_ok=True)
    document = {"generated_at": datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ"), **payload}
    dest.write_text(json.dumps(document, indent=2, default=str), encoding="utf-8")
    return dest


__all__ = ["write_report"]
