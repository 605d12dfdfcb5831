"""File tree enumeration for ownership scanning."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Protocol

from ..logging import get_logger

VCS_DIRS: FrozenSet[str] = frozenset({".git", ".hg", ".svn"})

_logger = get_logger("scanning.walker")


@dataclass(frozen=True)
class FileEntry:
    """A regular file discovered under the scan root."""

    path: Path
    rel_path: str
    size: int

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def rel_dir(self) -> str:
        """Slash-separated parent directory relative to the root ("" at root)."""
        parent, _, _ = self.rel_path.rpartition("/")
        return parent


@dataclass(frozen=True)
class ExclusionPolicy:
    """Directory names skipped whole during traversal; links are never followed."""

    excluded_dirs: FrozenSet[str] = field(default=VCS_DIRS)

    @classmethod
    def with_extra_dirs(cls, names: Iterable[str]) -> "ExclusionPolicy":
        return cls(excluded_dirs=VCS_DIRS | frozenset(names))

    def skip_dir(self, name: str) -> bool:
        return name in self.excluded_dirs


class TreeWalker(Protocol):
    """Capability interface for enumerating candidate files under a root."""

    def walk(self, root: Path) -> Iterator[FileEntry]:
        """Yield every regular file under ``root`` allowed by the policy."""


def _raise(error: OSError) -> None:
    raise error


class FileSystemWalker:
    """Walks the real filesystem with ``os.walk`` without following links."""

    def __init__(self, policy: ExclusionPolicy | None = None) -> None:
        self.policy = policy or ExclusionPolicy()

    def walk(self, root: Path) -> Iterator[FileEntry]:
        if not root.exists():
            raise FileNotFoundError(f"Directory not found: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {root}")

        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise, followlinks=False):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

            dirnames[:] = sorted(name for name in dirnames if not self.policy.skip_dir(name))

            for filename in sorted(filenames):
                path = current_dir / filename
                info = os.lstat(path)
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if stat.S_ISLNK(info.st_mode):
                    _logger.debug("Skipping symlink %s", rel_path)
                    continue
                if not stat.S_ISREG(info.st_mode):
                    _logger.debug("Skipping non-regular file %s", rel_path)
                    continue
                yield FileEntry(path=path, rel_path=rel_path, size=info.st_size)


__all__ = ["ExclusionPolicy", "FileEntry", "FileSystemWalker", "TreeWalker", "VCS_DIRS"]
