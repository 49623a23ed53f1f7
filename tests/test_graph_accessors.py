import pytest

from gltfcheck.core.context import ValidatorContext
from gltfcheck.core.errors import ValidatorInternalError
from gltfcheck.core.graph import (
    add_entity,
    add_with_generated_id,
    contains,
    generate_id,
    get_size,
    resolve_or_report_missing,
)
from gltfcheck.core.model import GlTF, Program
from gltfcheck.core.result import IssueKind, ValidatorResult


def test_resolve_returns_entity_without_diagnostics():
    result = ValidatorResult()
    program = Program(vertex_shader="vs", fragment_shader="fs")
    found = resolve_or_report_missing({"p": program}, "p", None, result, "program")
    assert found is program
    assert len(result) == 0


def test_resolve_reports_missing_reference():
    result = ValidatorResult()
    ctx = ValidatorContext.root().with_segment("programs[p]")
    assert resolve_or_report_missing({}, "p", ctx, result, "program") is None
    assert len(result) == 1
    issue = result.issues[0]
    assert issue.kind is IssueKind.MISSING_REFERENCE
    assert issue.path == "programs[p]"
    assert "program ID p does not exist" in issue.message


def test_resolve_treats_none_collection_as_empty():
    result = ValidatorResult()
    assert resolve_or_report_missing(None, "x", None, result, "node") is None
    assert result.has_errors()


def test_resolve_unhashable_id_is_reported_not_raised():
    result = ValidatorResult()
    assert resolve_or_report_missing({"a": 1}, ["a"], None, result, "texture") is None
    assert result.errors[0].kind is IssueKind.MISSING_REFERENCE


def test_non_mapping_collection_is_internal_error():
    with pytest.raises(ValidatorInternalError):
        resolve_or_report_missing(["p"], "p", None, ValidatorResult(), "program")


def test_generate_id_prefers_free_name():
    assert generate_id("program", {}) == "program"
    assert generate_id("program", None) == "program"


@pytest.mark.parametrize("existing, expected", [
    ({"shader": 1}, "shader0"),
    ({"shader": 1, "shader0": 1}, "shader1"),
    ({"shader": 1, "shader0": 1, "shader2": 1}, "shader1"),
])
def test_generate_id_uses_smallest_unused_suffix(existing, expected):
    assert generate_id("shader", existing) == expected


def test_size_and_contains():
    assert get_size(None) == 0
    assert get_size({"a": 1, "b": 2}) == 2
    assert contains({"a": 1}, "a")
    assert not contains({"a": 1}, "b")


def test_add_entity_refuses_overwrite():
    gltf = GlTF()
    add_entity(gltf, "programs", "p", Program())
    with pytest.raises(ValueError):
        add_entity(gltf, "programs", "p", Program())


def test_add_with_generated_id_uses_collection_size():
    gltf = GlTF()
    first = add_with_generated_id(gltf, "programs", "program", Program())
    second = add_with_generated_id(gltf, "programs", "program", Program())
    assert first == "program0"
    assert second == "program1"
    assert set(gltf.programs) == {"program0", "program1"}


def test_null_entity_entry_is_internal_error():
    with pytest.raises(ValidatorInternalError):
        resolve_or_report_missing({"t1": None}, "t1", None, ValidatorResult(), "technique")
