"""
Tests for reference encoding of normalized schemas.
"""

import copy

import pytest

from json_schema_to_ts.pipeline.reference_encoder import (
    json_schema_to_jstt_json_schema,
    resolve_reference_path,
)


class TestResolveReferencePath:
    @pytest.mark.parametrize(
        "current_path, relative, expected",
        [
            ([], "a", ["a"]),
            (["a", "b"], "c", ["a", "b", "c"]),
            (["a", "b"], "../c", ["a", "c"]),
            (["a", "b"], "../../c", ["c"]),
            (["a"], "../../../c", ["c"]),
            (["a"], "./b//c/", ["a", "b", "c"]),
            (["a"], "b\\c", ["a", "b", "c"]),
            (["list", 0], "id", ["list", "0", "id"]),
            (["a"], "", ["a"]),
            (["..", "b"], "c", ["..", "b", "c"]),
            (["..", "."], "../c", ["..", "c"]),
            (["a/b"], "c", ["a/b", "c"]),
        ],
    )
    def test_resolution(self, current_path, relative, expected):
        assert resolve_reference_path(current_path, relative) == expected


class TestReferenceEncoding:
    """Alias directives in titles and descriptions"""

    def test_reference_is_resolved_below_the_current_node(self):
        schema = {"properties": {"a": {"properties": {"b": {"title": "&c"}}}}}
        encoded = json_schema_to_jstt_json_schema(schema, "Foo")
        node = encoded["properties"]["a"]["properties"]["b"]
        assert node["tsType"] == 'NonNullable<NonNullable<NonNullable<Foo["a"]>["b"]>["c"]>'

    def test_sibling_reference(self):
        schema = {
            "type": "object",
            "properties": {
                "parent": {"type": "object", "properties": {"id": {"type": "integer"}}},
                "child": {"type": "object", "title": "&../parent"},
            },
        }
        encoded = json_schema_to_jstt_json_schema(schema, "Tree")
        assert encoded["properties"]["child"]["tsType"] == 'NonNullable<Tree["parent"]>'
        assert "tsType" not in encoded["properties"]["parent"]

    def test_description_is_the_fallback_carrier(self):
        schema = {"type": "object", "properties": {"x": {"type": "string", "description": "&../y"}}}
        node = json_schema_to_jstt_json_schema(schema, "Foo")["properties"]["x"]
        assert node["tsType"] == 'NonNullable<Foo["y"]>'
        assert node["description"] == "&../y"

    def test_title_takes_precedence_over_description(self):
        schema = {"properties": {"x": {"title": "Plain title", "description": "&../y"}}}
        node = json_schema_to_jstt_json_schema(schema, "Foo")["properties"]["x"]
        assert "tsType" not in node

    def test_null_title_falls_back_to_description(self):
        schema = {"properties": {"x": {"title": None, "description": "&../y"}}}
        node = json_schema_to_jstt_json_schema(schema, "Foo")["properties"]["x"]
        assert node["tsType"] == 'NonNullable<Foo["y"]>'

    def test_array_items_use_index_segments(self):
        schema = {"type": "array", "items": {"type": "object", "title": "&name"}}
        encoded = json_schema_to_jstt_json_schema(schema, "Foo")
        assert encoded["items"]["tsType"] == 'NonNullable<NonNullable<Foo["0"]>["name"]>'

    def test_combinator_members_resolve_from_the_parent_path(self):
        schema = {"properties": {"a": {"oneOf": [{"title": "&b"}, {"type": "null"}]}}}
        encoded = json_schema_to_jstt_json_schema(schema, "Foo")
        assert encoded["properties"]["a"]["oneOf"][0]["tsType"] == 'NonNullable<NonNullable<Foo["a"]>["b"]>'

    def test_root_reference(self):
        encoded = json_schema_to_jstt_json_schema({"type": "string", "title": "&x"}, "Foo")
        assert encoded["tsType"] == 'NonNullable<Foo["x"]>'

    def test_non_ascii_keys(self):
        schema = {"properties": {"用户": {"title": "&名称"}}}
        node = json_schema_to_jstt_json_schema(schema, "Foo")["properties"]["用户"]
        assert node["tsType"] == 'NonNullable<NonNullable<Foo["用户"]>["名称"]>'

    def test_dot_property_names_are_plain_keys(self):
        schema = {"properties": {"..": {"title": "&x"}}}
        node = json_schema_to_jstt_json_schema(schema, "Foo")["properties"][".."]
        assert node["tsType"] == 'NonNullable<NonNullable<Foo[".."]>["x"]>'

    def test_titles_without_sigil_are_not_references(self):
        schema = {"title": "User", "properties": {"a": {"title": "a & b"}, "b": {"title": 5}}}
        encoded = json_schema_to_jstt_json_schema(schema, "Foo")
        assert "tsType" not in encoded
        assert "tsType" not in encoded["properties"]["a"]
        assert "tsType" not in encoded["properties"]["b"]


class TestCompilerHints:
    """Keys removed or forced for the compiler"""

    def test_misleading_keys_are_removed_everywhere(self):
        schema = {
            "type": "object",
            "title": "Root",
            "id": "root",
            "properties": {
                "list": {"type": "array", "minItems": 1, "maxItems": 3, "default": [], "items": {"type": "string", "default": "x"}},
                "obj": {"type": "object", "title": "Nested", "id": "nested"},
            },
        }
        encoded = json_schema_to_jstt_json_schema(schema, "Foo")
        stripped = ("title", "id", "minItems", "maxItems", "default")
        for node in (encoded, encoded["properties"]["list"], encoded["properties"]["list"]["items"], encoded["properties"]["obj"]):
            for key in stripped:
                assert key not in node

    def test_objects_are_closed(self):
        schema = {"type": "object", "additionalProperties": True, "properties": {"a": {"type": "object"}, "b": {"type": "string"}}}
        encoded = json_schema_to_jstt_json_schema(schema, "Foo")
        assert encoded["additionalProperties"] is False
        assert encoded["properties"]["a"]["additionalProperties"] is False
        assert "additionalProperties" not in encoded["properties"]["b"]

    def test_root_description_is_removed_but_nested_ones_kept(self):
        schema = {"type": "object", "description": "Root doc", "properties": {"a": {"type": "string", "description": "A doc"}}}
        encoded = json_schema_to_jstt_json_schema(schema, "Foo")
        assert "description" not in encoded
        assert encoded["properties"]["a"]["description"] == "A doc"


class TestOwnership:
    def test_encodes_a_copy_by_default(self):
        schema = {"type": "object", "description": "doc", "properties": {"a": {"title": "&../b", "default": 1}}}
        original = copy.deepcopy(schema)
        encoded = json_schema_to_jstt_json_schema(schema, "Foo")
        assert schema == original
        assert encoded is not schema

    def test_in_place_when_asked(self):
        schema = {"type": "object", "properties": {"a": {"title": "x"}}}
        encoded = json_schema_to_jstt_json_schema(schema, "Foo", copy=False)
        assert encoded is schema
        assert "title" not in schema["properties"]["a"]
