"""Rendering of ownership mappings as a CODEOWNERS file."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .models import Mapping

SECTION_ROOT = 0
SECTION_HIDDEN = 1
SECTION_OTHER = 2


def _strip_root(path: str) -> str:
    return path[1:] if path.startswith("/") else path


def path_section(path: str) -> int:
    """Return 0 for root-level entries, 1 for hidden directories, 2 otherwise."""
    relative = _strip_root(path)
    if "/" not in relative:
        return SECTION_ROOT
    first, _, _ = relative.partition("/")
    if first.startswith("."):
        return SECTION_HIDDEN
    return SECTION_OTHER


def group_key(path: str) -> str:
    """Return the first one or two directory segments of ``path``.

    Root-level entries share the empty key. Directory patterns such as
    ``/src/cmd/`` group with the files they contain.
    """
    directory, sep, _ = _strip_root(path).rpartition("/")
    if not sep:
        return ""
    return "/".join(directory.split("/", 2)[:2])


def sort_key(mapping: Mapping) -> Tuple[int, str, str]:
    return (path_section(mapping.path), group_key(mapping.path), mapping.path)


def format_codeowners(mappings: Iterable[Mapping]) -> str:
    """Return the CODEOWNERS text for ``mappings``.

    The protect mapping, if any, comes first. Remaining entries are sorted by
    section, group and path, with one blank line whenever the group changes.
    Output is identical for any input ordering of the same mappings.
    """
    protect: Optional[Mapping] = None
    ordinary: List[Mapping] = []
    for mapping in mappings:
        if mapping.is_protect:
            if protect is not None:
                raise ValueError("Only one CODEOWNERS protect mapping is allowed")
            protect = mapping
        else:
            ordinary.append(mapping)

    ordinary.sort(key=sort_key)

    lines: List[str] = []
    if protect is not None:
        lines.append(protect.render())
        if ordinary:
            lines.append("")

    previous_group: Optional[str] = None
    for mapping in ordinary:
        group = group_key(mapping.path)
        if previous_group is not None and group != previous_group:
            lines.append("")
        previous_group = group
        lines.append(mapping.render())

    return "".join(f"{line}\n" for line in lines)


__all__ = ["format_codeowners", "group_key", "path_section", "sort_key"]
