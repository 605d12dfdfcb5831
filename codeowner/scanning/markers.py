"""Parsing of per-directory ``.codeowner`` marker files."""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..models import ROOT_PATH
from ..owners import OwnerSet, valid_owner_tokens

DEFAULT_MARKER_FILENAME = ".codeowner"


def parse_marker_text(text: str) -> OwnerSet:
    """Return every valid owner token in ``text``; no prefix is required."""
    return OwnerSet(valid_owner_tokens(text))


def parse_marker_file(path: Path) -> List[str]:
    """Read ``path`` line by line; marker files skip the size guard."""
    owners = OwnerSet()
    with path.open("r", encoding="utf-8", errors="replace") as handle:
        for line in handle:
            owners.extend(valid_owner_tokens(line))
    return list(owners)


def directory_pattern(rel_dir: str) -> str:
    """Return the CODEOWNERS pattern covering ``rel_dir`` and its subtree."""
    if not rel_dir:
        return ROOT_PATH
    return f"/{rel_dir}/"


__all__ = [
    "DEFAULT_MARKER_FILENAME",
    "directory_pattern",
    "parse_marker_file",
    "parse_marker_text",
]
