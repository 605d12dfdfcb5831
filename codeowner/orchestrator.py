"""Pipeline orchestration for a single CODEOWNERS generation run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .config import ScanOptions
from .formatter import format_codeowners
from .logging import get_logger
from .models import Mapping
from .owners import parse_protect
from .scanning import ExclusionPolicy, FileSystemWalker, OwnershipScanner


@dataclass
class GenerationResult:
    """Mappings discovered by a run and their rendered CODEOWNERS text."""

    root: Path
    mappings: List[Mapping]
    text: str

    @property
    def is_empty(self) -> bool:
        return not self.mappings


class Orchestrator:
    """Validates protect owners, scans the tree and renders the result."""

    def __init__(self, scanner: OwnershipScanner | None = None) -> None:
        self._scanner = scanner
        self.logger = get_logger("orchestrator")

    def run(self, path: str | Path, options: ScanOptions | None = None) -> GenerationResult:
        options = options or ScanOptions()
        root = Path(path).expanduser()
        self.logger.debug("Generating CODEOWNERS for %s", root)

        # Protect owners are validated before the walk so bad input fails fast.
        protect: Optional[Mapping] = None
        if options.protect is not None:
            protect = parse_protect(options.protect)

        scanner = self._scanner or self._build_scanner(options)
        mappings = scanner.scan(root, options.prefix, options.marker_filename)
        self.logger.info("Found %d ownership entries under %s", len(mappings), root)

        if protect is not None:
            mappings.append(protect)

        text = format_codeowners(mappings) if mappings else ""
        return GenerationResult(root=root, mappings=mappings, text=text)

    @staticmethod
    def _build_scanner(options: ScanOptions) -> OwnershipScanner:
        policy = ExclusionPolicy.with_extra_dirs(options.exclude_dirs)
        return OwnershipScanner(FileSystemWalker(policy))


__all__ = ["GenerationResult", "Orchestrator"]
