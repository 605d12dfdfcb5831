"""Owner handle validation and accumulation helpers."""

from __future__ import annotations

import re
import string
from typing import Iterable, Iterator, List, Set

from .models import PROTECT_PATH, Mapping

_OWNER_CHARS = frozenset(string.ascii_letters + string.digits + "-_/@")

# Unicode White_Space minus the ASCII information separators (\x1c-\x1f),
# which str.split() would otherwise treat as delimiters.
_FIELD_SEPARATORS = re.compile(
    "[\t\n\v\f\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+"
)


class OwnerValidationError(ValueError):
    """Raised when a caller-supplied owner list is not usable."""


def is_valid_owner(token: str) -> bool:
    """Return True when ``token`` is an ``@handle`` or ``@org/team`` owner."""
    if len(token) < 2 or not token.startswith("@"):
        return False
    return all(char in _OWNER_CHARS for char in token)


class OwnerSet:
    """Insertion-ordered collection of owner handles without repeats."""

    def __init__(self, owners: Iterable[str] = ()) -> None:
        self._ordered: List[str] = []
        self._seen: Set[str] = set()
        self.extend(owners)

    def add(self, owner: str) -> bool:
        """Append ``owner`` unless already present; return True if appended."""
        if owner in self._seen:
            return False
        self._seen.add(owner)
        self._ordered.append(owner)
        return True

    def extend(self, owners: Iterable[str]) -> None:
        for owner in owners:
            self.add(owner)

    def as_tuple(self) -> tuple[str, ...]:
        return tuple(self._ordered)

    def __contains__(self, owner: object) -> bool:
        return owner in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._ordered)

    def __len__(self) -> int:
        return len(self._ordered)

    def __bool__(self) -> bool:
        return bool(self._ordered)


def split_fields(text: str) -> List[str]:
    """Split ``text`` on runs of whitespace, dropping empty fields."""
    return [field for field in _FIELD_SEPARATORS.split(text) if field]


def valid_owner_tokens(text: str) -> Iterator[str]:
    """Yield whitespace-delimited tokens of ``text`` that are valid owners."""
    for token in split_fields(text):
        if is_valid_owner(token):
            yield token


def parse_protect(value: str) -> Mapping:
    """Build the mapping that assigns owners to the CODEOWNERS file itself.

    ``value`` is a whitespace separated list such as ``"@admin @org/team"``.
    Every token must start with ``@`` and use only the owner character set;
    the first offending token is named in the raised error.
    """
    tokens = split_fields(value)
    if not tokens:
        raise OwnerValidationError("empty protect string: at least one owner is required")

    owners = OwnerSet()
    for token in tokens:
        if not token.startswith("@"):
            raise OwnerValidationError(f"invalid owner {token!r}: must start with @")
        if not is_valid_owner(token):
            raise OwnerValidationError(f"invalid owner {token!r}: contains invalid characters")
        owners.add(token)
    return Mapping(path=PROTECT_PATH, owners=owners.as_tuple())


__all__ = [
    "OwnerSet",
    "OwnerValidationError",
    "is_valid_owner",
    "parse_protect",
    "split_fields",
    "valid_owner_tokens",
]
