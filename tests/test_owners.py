"""Tests for codeowner.owners."""

from __future__ import annotations

import pytest

from codeowner.models import PROTECT_PATH, Mapping
from codeowner.owners import (
    OwnerSet,
    OwnerValidationError,
    is_valid_owner,
    parse_protect,
    split_fields,
)


@pytest.mark.parametrize(
    "token",
    ["@a1", "@team-a", "@team_b", "@myorg/backend-team", "@X", "@@double"],
)
def test_is_valid_owner_accepts(token: str) -> None:
    assert is_valid_owner(token)


@pytest.mark.parametrize(
    "token",
    ["@", "", "team", "@bad!owner", "@dot.name", "@émile", "x@team", "@team:"],
)
def test_is_valid_owner_rejects(token: str) -> None:
    assert not is_valid_owner(token)


def test_owner_set_preserves_first_seen_order() -> None:
    owners = OwnerSet(["@b", "@a"])
    assert owners.add("@b") is False
    assert owners.add("@c") is True
    owners.extend(["@a", "@d"])

    assert list(owners) == ["@b", "@a", "@c", "@d"]
    assert owners.as_tuple() == ("@b", "@a", "@c", "@d")
    assert len(owners) == 4
    assert "@c" in owners
    assert "@z" not in owners


def test_owner_set_truthiness() -> None:
    assert not OwnerSet()
    assert OwnerSet(["@a"])


def test_parse_protect_builds_sentinel_mapping() -> None:
    mapping = parse_protect("@admin @platform-team")
    assert mapping == Mapping(path=PROTECT_PATH, owners=("@admin", "@platform-team"))
    assert mapping.is_protect


def test_parse_protect_accepts_org_team_and_extra_whitespace() -> None:
    mapping = parse_protect("  @myorg/admins\t@solo  ")
    assert mapping.owners == ("@myorg/admins", "@solo")


def test_parse_protect_dedupes_repeated_owner() -> None:
    assert parse_protect("@a @b @a").owners == ("@a", "@b")


@pytest.mark.parametrize("value", ["", "   ", "\t\n"])
def test_parse_protect_rejects_empty(value: str) -> None:
    with pytest.raises(OwnerValidationError, match="at least one owner is required"):
        parse_protect(value)


def test_parse_protect_requires_at_sign() -> None:
    with pytest.raises(OwnerValidationError, match="'admin': must start with @"):
        parse_protect("@ok admin")


def test_parse_protect_rejects_invalid_characters() -> None:
    with pytest.raises(OwnerValidationError, match="'@bad!owner': contains invalid characters"):
        parse_protect("@bad!owner")


def test_parse_protect_rejects_bare_at_sign() -> None:
    with pytest.raises(OwnerValidationError, match="contains invalid characters"):
        parse_protect("@")


def test_mapping_requires_owners() -> None:
    with pytest.raises(ValueError):
        Mapping(path="/README.md", owners=())


def test_split_fields_matches_unicode_spaces() -> None:
    assert split_fields("  @a\t@b @c\u3000@d\n") == ["@a", "@b", "@c", "@d"]
    assert split_fields("") == []


@pytest.mark.parametrize("separator", ["\x1c", "\x1d", "\x1e", "\x1f"])
def test_split_fields_keeps_information_separators_in_token(separator: str) -> None:
    assert split_fields(f"@a{separator}@b") == [f"@a{separator}@b"]


def test_parse_protect_rejects_information_separator() -> None:
    with pytest.raises(OwnerValidationError, match="contains invalid characters"):
        parse_protect("@admin\x1f@team")
