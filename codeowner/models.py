"""Core data models shared across codeowner components."""

from dataclasses import dataclass
from typing import Tuple

# Path used for the mapping that protects the generated file itself. Real
# paths are always root-anchored ("/..."), so this never collides with one.
PROTECT_PATH = "CODEOWNERS"

ROOT_PATH = "/"


@dataclass(frozen=True)
class Mapping:
    """A root-anchored path (or the protect sentinel) and its owners."""

    path: str
    owners: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.owners:
            raise ValueError(f"Mapping for {self.path!r} requires at least one owner")

    @property
    def is_protect(self) -> bool:
        return self.path == PROTECT_PATH

    def render(self) -> str:
        """Return the CODEOWNERS line for this mapping, without newline."""
        return f"{self.path} {' '.join(self.owners)}"
