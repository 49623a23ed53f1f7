from gltfcheck.core.context import ValidatorContext, extend
from gltfcheck.core.result import IssueKind, Severity, ValidatorResult


# -------------------------
# ValidatorContext
# -------------------------

def test_root_context_renders_empty_path():
    assert ValidatorContext.root().path == ""
    assert str(ValidatorContext.root()) == ""


def test_context_chain_renders_segments_in_order():
    ctx = ValidatorContext.root().with_segment("techniques[42]").with_segment("uniform u_color")
    assert ctx.path == "techniques[42].uniform u_color"
    assert ctx.segments() == ["techniques[42]", "uniform u_color"]


def test_extending_does_not_touch_parent():
    parent = ValidatorContext.root().with_segment("techniques[t1]")
    a = parent.with_segment("uniform u_a")
    b = parent.with_segment("uniform u_b")
    assert parent.path == "techniques[t1]"
    assert a.path == "techniques[t1].uniform u_a"
    assert b.path == "techniques[t1].uniform u_b"
    assert a.parent is parent and b.parent is parent


def test_extend_accepts_none_as_root():
    assert extend(None, "programs[p]").path == "programs[p]"


# -------------------------
# ValidatorResult
# -------------------------

def test_empty_result_is_valid():
    result = ValidatorResult()
    assert len(result) == 0
    assert result.is_valid
    assert not result.has_errors()
    assert not result.has_warnings()
    assert result.to_display_string() == "No issues found"


def test_warning_does_not_count_as_error():
    result = ValidatorResult()
    result.add_warning("suspicious", ValidatorContext.root().with_segment("textures[t]"))
    assert not result.has_errors()
    assert result.has_warnings()
    assert result.is_valid
    issue = result.issues[0]
    assert issue.severity is Severity.WARNING
    assert issue.kind is IssueKind.TYPE_SHAPE
    assert issue.path == "textures[t]"


def test_merge_appends_child_after_parent():
    parent = ValidatorResult()
    parent.add_warning("parent check", None)
    child = ValidatorResult()
    child.add_error("child check", None, kind=IssueKind.MISSING_REFERENCE)
    assert parent.merge(child) is parent
    assert [i.message for i in parent] == ["parent check", "child check"]
    assert parent.has_errors()
    # the merged result itself is untouched
    assert len(child) == 1


def test_display_string_lists_errors_before_warnings():
    result = ValidatorResult()
    result.add_warning("first warning", ValidatorContext.root().with_segment("a"))
    result.add_error("first error", ValidatorContext.root().with_segment("b"))
    lines = result.to_display_string().splitlines()
    assert lines[0].startswith("ERROR")
    assert "b: first error" in lines[0]
    assert lines[1].startswith("WARNING")
    assert lines[-1] == "1 error(s), 1 warning(s)"


def test_to_dict_is_json_friendly():
    result = ValidatorResult()
    result.add_error("The program ID is null", ValidatorContext.root().with_segment("techniques[t1]"),
                     kind=IssueKind.MISSING_REQUIRED_FIELD)
    data = result.to_dict()
    assert data["valid"] is False
    assert data["errors"] == [{
        "severity": "error",
        "message": "The program ID is null",
        "path": "techniques[t1]",
        "kind": "missing_required_field",
    }]
    assert data["warnings"] == []


def test_display_string_sorts_each_severity_by_path():
    root = ValidatorContext.root()
    result = ValidatorResult()
    result.add_error("late", root.with_segment("textures[b]"))
    result.add_error("first at a", root.with_segment("textures[a]"))
    result.add_error("second at a", root.with_segment("textures[a]"))
    result.add_warning("warn", root.with_segment("images[z]"))
    lines = result.to_display_string().splitlines()
    assert [line.split(": ", 1)[1] for line in lines[:4]] == [
        "first at a (invalid_value)",
        "second at a (invalid_value)",
        "late (invalid_value)",
        "warn (type_shape)",
    ]
    # insertion order of the result itself is untouched
    assert [i.message for i in result] == ["late", "first at a", "second at a", "warn"]
