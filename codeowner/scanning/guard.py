"""Size and binary-content checks applied before a file is scanned."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..logging import get_logger

# Larger files are skipped to avoid scanning binaries or generated artifacts.
MAX_FILE_SIZE = 1 << 20

# Number of leading bytes inspected for a NUL byte.
SNIFF_SIZE = 512

_logger = get_logger("scanning.guard")


def is_binary(data: bytes) -> bool:
    """Return True when the sniff window of ``data`` contains a NUL byte."""
    return b"\x00" in data[:SNIFF_SIZE]


def read_eligible(path: Path, size: int, rel_path: str = "") -> Optional[bytes]:
    """Return the file contents when it is small and textual, else None.

    ``size`` comes from the walker's metadata read so no extra stat is needed.
    The file is opened and read once; the binary sniff runs on the in-memory
    buffer which the extractor then scans in full.
    """
    label = rel_path or str(path)
    if size > MAX_FILE_SIZE:
        _logger.debug("Skipping %s: %d bytes exceeds limit", label, size)
        return None

    with path.open("rb") as handle:
        # Bounded even if the file grew after the metadata read.
        data = handle.read(MAX_FILE_SIZE + 1)
    if len(data) > MAX_FILE_SIZE:
        _logger.debug("Skipping %s: grew past size limit", label)
        return None
    if is_binary(data):
        _logger.debug("Skipping %s: binary content", label)
        return None
    return data


__all__ = ["MAX_FILE_SIZE", "SNIFF_SIZE", "is_binary", "read_eligible"]
