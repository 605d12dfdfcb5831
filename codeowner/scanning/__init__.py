"""Tree scanning: traversal, eligibility checks and owner extraction."""

from .annotations import DEFAULT_PREFIX, extract_owners, parse_file
from .markers import DEFAULT_MARKER_FILENAME, parse_marker_file
from .scanner import OwnershipScanner
from .walker import ExclusionPolicy, FileEntry, FileSystemWalker, TreeWalker

__all__ = [
    "DEFAULT_MARKER_FILENAME",
    "DEFAULT_PREFIX",
    "ExclusionPolicy",
    "FileEntry",
    "FileSystemWalker",
    "OwnershipScanner",
    "TreeWalker",
    "extract_owners",
    "parse_file",
    "parse_marker_file",
]
