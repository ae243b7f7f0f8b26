# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for identifier normalization."""

import pytest

from ramlgen.codegen.emitter import GenerationError
from ramlgen.codegen.naming import (
    ROOT_NAME,
    body_struct_name,
    claim_name,
    field_name,
    normalize,
    normalize_name,
    normalize_uri_title,
)


class TestNormalizeUriTitle:
    def test_single_segment(self) -> None:
        """A single segment is capitalised."""
        assert normalize_uri_title("/users") == "Users"

    def test_path_parameter_braces_are_stripped(self) -> None:
        """Path parameter braces are removed."""
        assert normalize_uri_title("/users/{id}") == "UsersId"

    def test_separators_inside_segments_split_words(self) -> None:
        """Separators inside a segment start a new word."""
        assert normalize_uri_title("/user-groups/{group_id}") == "UserGroupsGroupId"

    def test_inner_capitals_are_preserved(self) -> None:
        """Capitals inside a word are kept."""
        assert normalize_uri_title("/userGroups") == "UserGroups"

    def test_empty_path_yields_sentinel(self) -> None:
        """An empty path yields the Root sentinel."""
        assert normalize_uri_title("") == ROOT_NAME
        assert normalize_uri_title("/") == ROOT_NAME

    def test_deterministic(self) -> None:
        """Normalizing twice gives the same identifier."""
        assert normalize_uri_title("/a/{b}/c") == normalize_uri_title("/a/{b}/c")


class TestNormalizeName:
    def test_drops_non_identifier_characters(self) -> None:
        """Characters outside identifiers are dropped."""
        assert normalize_name("Users.Get$") == "UsersGet"

    def test_leading_digit_is_prefixed(self) -> None:
        """A leading digit gets an X prefix."""
        assert normalize_name("2fa") == "X2fa"

    def test_non_ascii_input_does_not_fail(self) -> None:
        """Non-ASCII input is handled without raising."""
        assert normalize_name("Grüße") == "Gre"

    def test_nothing_left_yields_sentinel(self) -> None:
        """A name without identifier characters yields the Root sentinel."""
        assert normalize_name("$$$") == ROOT_NAME


def test_normalize_with_title() -> None:
    """The method name is appended to the normalized path."""
    assert normalize("/users/{id}", "Get") == "UsersIdGet"


def test_body_struct_names_differ_by_direction() -> None:
    """Request and response struct names differ by suffix."""
    assert body_struct_name("UsersGet", "", is_request=True) == "UsersGetReq"
    assert body_struct_name("UsersGet", "", is_request=False) == "UsersGetResp"
    assert body_struct_name("Users", "Post", is_request=True) == "UsersPostReq"


def test_field_name_is_exported() -> None:
    """Field names start with a capital letter."""
    assert field_name("name") == "Name"
    assert field_name("first-name") == "Firstname"


def test_claim_name_records_the_endpoint() -> None:
    """A free name is recorded with the endpoint that claimed it."""
    seen: dict[str, str] = {}
    claim_name(seen, "UsersGet", "/users")
    claim_name(seen, "UsersPost", "/users")
    assert seen == {"UsersGet": "/users", "UsersPost": "/users"}


def test_claim_name_rejects_a_second_claim() -> None:
    """Claiming a taken name raises GenerationError naming both endpoints."""
    seen = {"AB": "/a-b"}
    with pytest.raises(GenerationError, match="'/a-b' and '/a/b' both normalize to the name 'AB'"):
        claim_name(seen, "AB", "/a/b")
    assert seen == {"AB": "/a-b"}
