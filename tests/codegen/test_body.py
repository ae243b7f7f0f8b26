# Copyright 2026 RamlGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the request/response body walker."""

from pathlib import Path

import pytest

from ramlgen.codegen.body import body_struct_defs, generate_body_structs
from ramlgen.codegen.emitter import ArtifactEmitter, GenerationError, GenerationReport
from ramlgen.model import APIDefinition, Body, Method, Property, Resource, Response

# ###############
# Helpers
# ###############


def _json(*names: str) -> Body:
    return Body(has_json=True, properties=[Property(name=n, type="string") for n in names])


def _method(verb: str, req: Body | None = None, resp: Body | None = None) -> Method:
    responses = [Response(code="200", body=resp)] if resp is not None else []
    return Method(verb=verb, body=req or Body(), responses=responses)


def _users_tree() -> Resource:
    item = Resource(
        uri="/{id}",
        methods={"Get": _method("Get", _json("q"), _json("name"))},
    )
    return Resource(
        uri="/users",
        methods={
            "Post": _method("Post", _json("name"), _json("id")),
            "Get": _method("Get", _json("filter"), _json("total")),
        },
        nested=[item],
    )


# ###############
# Walking
# ###############


class TestBodyStructDefs:
    def test_names_cover_every_path_method_direction(self) -> None:
        """Every (path, method, direction) triple gets its own struct name."""
        names = [sd.name for sd in body_struct_defs(_users_tree(), "", "main")]
        assert names == [
            "UsersGetReq",
            "UsersGetResp",
            "UsersPostReq",
            "UsersPostResp",
            "UsersIdGetReq",
            "UsersIdGetResp",
        ]
        assert len(set(names)) == len(names)

    def test_fields_come_from_body_properties(self) -> None:
        """Struct fields are the JSON body's properties."""
        structs = {sd.name: sd for sd in body_struct_defs(_users_tree(), "", "main")}
        assert list(structs["UsersPostReq"].fields) == ["name"]
        assert list(structs["UsersIdGetResp"].fields) == ["name"]

    def test_non_json_bodies_are_skipped(self) -> None:
        """Bodies without a JSON representation produce no struct."""
        resource = Resource(
            uri="/pets",
            methods={"Put": _method("Put", Body(has_json=False), Body(has_json=False))},
        )
        assert body_struct_defs(resource, "", "main") == []

    def test_method_without_body_only_yields_response(self) -> None:
        """A method without a request body only yields its response struct."""
        resource = Resource(uri="/pets", methods={"Get": _method("Get", resp=_json("n"))})
        assert [sd.name for sd in body_struct_defs(resource, "", "main")] == ["PetsGetResp"]

    def test_ancestor_path_is_part_of_the_name(self) -> None:
        """The ancestor path prefixes the struct name."""
        resource = Resource(uri="/{id}", methods={"Delete": _method("Delete", _json("why"))})
        assert [sd.name for sd in body_struct_defs(resource, "/users", "main")] == ["UsersIdDeleteReq"]

    def test_deeply_nested(self) -> None:
        """Resources nested several levels deep are walked."""
        leaf = Resource(uri="/tags", methods={"Get": _method("Get", resp=_json("t"))})
        mid = Resource(uri="/{id}", nested=[leaf])
        root = Resource(uri="/posts", nested=[mid])
        assert [sd.name for sd in body_struct_defs(root, "", "blog")] == ["PostsIdTagsGetResp"]


def test_generate_body_structs_writes_files(tmp_path: Path) -> None:
    """One file is written per body struct."""
    api = APIDefinition(resources={"/users": _users_tree()})
    report = GenerationReport()
    structs = generate_body_structs(api, tmp_path, "main", ArtifactEmitter(), report)

    assert len(structs) == 6
    assert (tmp_path / "UsersIdGetResp.go").exists()
    assert "type UsersPostReq struct {" in (tmp_path / "UsersPostReq.go").read_text()


# ###############
# Name collisions
# ###############


def test_sibling_paths_with_the_same_name_are_rejected() -> None:
    """Sibling URIs normalizing to the same name raise instead of sharing a struct."""
    resource = Resource(
        uri="/users",
        nested=[
            Resource(uri="/{user-id}", methods={"Get": _method("Get", resp=_json("a"))}),
            Resource(uri="/user_id", methods={"Get": _method("Get", resp=_json("b"))}),
        ],
    )
    with pytest.raises(GenerationError, match="'/users/{user-id}' and '/users/user_id'.*'UsersUserIdGet'"):
        body_struct_defs(resource, "", "main")


def test_top_level_paths_with_the_same_name_are_rejected(tmp_path: Path) -> None:
    """Top-level URIs normalizing to the same name raise before overwriting a struct file."""
    api = APIDefinition(
        resources={
            "/a-b": Resource(uri="/a-b", methods={"Get": _method("Get", resp=_json("x"))}),
            "/a/b": Resource(uri="/a/b", methods={"Get": _method("Get", resp=_json("y"))}),
        }
    )
    report = GenerationReport()
    with pytest.raises(GenerationError, match="'/a-b' and '/a/b'"):
        generate_body_structs(api, tmp_path, "main", ArtifactEmitter(), report)
    assert report.written == [tmp_path / "ABGetResp.go"]
    assert "X string" in (tmp_path / "ABGetResp.go").read_text()


def test_distinct_methods_on_one_path_do_not_collide() -> None:
    """Request and response structs of one method share a prefix without a collision."""
    resource = Resource(
        uri="/a-b",
        methods={"Get": _method("Get", _json("q"), _json("r")), "Post": _method("Post", _json("n"))},
    )
    assert [sd.name for sd in body_struct_defs(resource, "", "main")] == ["ABGetReq", "ABGetResp", "ABPostReq"]
