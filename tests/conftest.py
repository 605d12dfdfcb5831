from __future__ import annotations

import logging
import os
import textwrap
from pathlib import Path
from typing import Mapping

import pytest

TESTDATA = Path(__file__).parent / "testdata"


class TreeBuilder:
    """Utility for writing files into a throwaway tree for scanning."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries below the root."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def write_bytes(self, relative: str, data: bytes) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    def symlink(self, relative: str, target: str) -> Path:
        """Create ``relative`` as a symlink pointing at ``target`` (root-relative)."""
        link = self.root / relative
        link.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(self.root / target, link)
        return link


@pytest.fixture
def tree_builder(tmp_path: Path) -> TreeBuilder:
    """Provide a reusable tree builder rooted at the pytest tmp_path."""
    return TreeBuilder(tmp_path)


@pytest.fixture(autouse=True)
def reset_codeowner_logger():
    """Undo handlers and levels installed by configure_logging during a test."""
    yield
    logger = logging.getLogger("codeowner")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def testdata() -> Path:
    return TESTDATA
