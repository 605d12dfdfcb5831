"""Walks a tree and collects ownership mappings from annotations and markers."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from ..logging import get_logger
from ..models import Mapping
from .annotations import DEFAULT_PREFIX, decode, scan_text
from .guard import read_eligible
from .markers import DEFAULT_MARKER_FILENAME, directory_pattern, parse_marker_file
from .walker import FileEntry, FileSystemWalker, TreeWalker


class OwnershipScanner:
    """Produces one mapping per annotated file or non-empty marker file."""

    def __init__(self, walker: TreeWalker | None = None) -> None:
        self.walker = walker or FileSystemWalker()
        self.logger = get_logger("scanning")

    def scan(
        self,
        root: str | Path,
        prefix: str = DEFAULT_PREFIX,
        marker_filename: str = DEFAULT_MARKER_FILENAME,
    ) -> List[Mapping]:
        """Return mappings for every owned file and directory under ``root``.

        The result is in traversal order; callers that need a stable order
        must sort it (the formatter does).
        """
        root_path = Path(root).expanduser()
        mappings: List[Mapping] = []
        visited = 0
        for entry in self.walker.walk(root_path):
            visited += 1
            mapping = self.parse_entry(entry, prefix, marker_filename)
            if mapping is not None:
                self.logger.debug("Found %s -> %s", mapping.path, " ".join(mapping.owners))
                mappings.append(mapping)
        self.logger.debug("Scanned %d files, %d mappings", visited, len(mappings))
        return mappings

    def parse_entry(
        self, entry: FileEntry, prefix: str, marker_filename: str
    ) -> Optional[Mapping]:
        if entry.name == marker_filename:
            owners = parse_marker_file(entry.path)
            if not owners:
                return None
            return Mapping(path=directory_pattern(entry.rel_dir), owners=tuple(owners))

        data = read_eligible(entry.path, entry.size, entry.rel_path)
        if data is None:
            return None
        owners = scan_text(decode(data), prefix)
        if not owners:
            return None
        return Mapping(path=f"/{entry.rel_path}", owners=owners.as_tuple())


__all__ = ["OwnershipScanner"]
