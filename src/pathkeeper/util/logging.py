"""Logging setup for the ``pathkeeper`` logger hierarchy.

Library modules log through ``logging.getLogger(__name__)`` (for example
``pathkeeper.registry`` and ``pathkeeper.startup``), so the handlers attached
here to the ``pathkeeper`` root receive all of them. Records go to stderr so
that CLI results printed on stdout stay clean.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "pathkeeper.log"


def configure_logging(*, level: str = "INFO", log_path: Path | None = None) -> logging.Logger:
    """Attach stderr and optional file handlers to the ``pathkeeper`` logger.

    Calling it again adds no duplicate handlers; ``level`` is reapplied each time.
    """

    logger = logging.getLogger("pathkeeper")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    has_stream = any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in logger.handlers
    )
    existing_files = {getattr(h, "baseFilename", None) for h in logger.handlers}

    formatter = logging.Formatter(fmt="%(asctime)s %(levelname)s %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")

    if not has_stream:
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_path and str(log_path) not in existing_files:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


__all__ = ["LOG_FILE_NAME", "configure_logging"]
