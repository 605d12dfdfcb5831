"""Extraction of ``CodeOwner:`` annotations from source text."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List

from ..owners import OwnerSet, valid_owner_tokens

DEFAULT_PREFIX = "CodeOwner:"

_PRECEDING_WHITESPACE = (" ", "\t")


def split_lines(text: str) -> Iterator[str]:
    """Yield ``\\n``-delimited lines with a single trailing ``\\r`` removed."""
    for line in text.split("\n"):
        yield line[:-1] if line.endswith("\r") else line


def decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def extract_owners(line: str, prefix: str) -> List[str]:
    """Return valid owners that follow the first ``prefix`` on ``line``.

    The prefix must start the line or follow a space or tab, and must be
    followed by a space. Anything after it is split on whitespace and each
    token is kept only if it is a valid owner handle.
    """
    index = line.find(prefix)
    if index < 0:
        return []
    if index > 0 and line[index - 1] not in _PRECEDING_WHITESPACE:
        return []

    rest = line[index + len(prefix):]
    if not rest.startswith(" "):
        return []
    return list(valid_owner_tokens(rest))


def scan_owners(lines: Iterable[str], prefix: str) -> OwnerSet:
    """Accumulate owners across ``lines`` keeping first-seen order."""
    owners = OwnerSet()
    for line in lines:
        owners.extend(extract_owners(line, prefix))
    return owners


def scan_text(text: str, prefix: str = DEFAULT_PREFIX) -> OwnerSet:
    return scan_owners(split_lines(text), prefix)


def parse_file(path: Path, prefix: str = DEFAULT_PREFIX) -> List[str]:
    """Read ``path`` and return its annotated owners without any guards."""
    return list(scan_text(decode(path.read_bytes()), prefix))


__all__ = [
    "DEFAULT_PREFIX",
    "decode",
    "extract_owners",
    "parse_file",
    "scan_owners",
    "scan_text",
    "split_lines",
]
