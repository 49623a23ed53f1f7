from gltfcheck.core.constants import GL_FLOAT_VEC3, GL_FLOAT_VEC4, GL_SAMPLER_2D
from gltfcheck.core.model import GlTF, Node, Program, Technique, TechniqueParameters
from gltfcheck.core.result import IssueKind, Severity
from gltfcheck.validation import TechniqueValidator, validate_gltf

from conftest import add_program, add_texture


def _technique(**kwargs):
    kwargs.setdefault("program", "p")
    return Technique(**kwargs)


def test_empty_document_has_no_findings():
    result = validate_gltf(GlTF())
    assert len(result) == 0
    assert result.to_display_string() == "No issues found"


def test_missing_program_is_reported_once_and_shaders_are_skipped():
    gltf = GlTF(techniques={"t1": _technique(program="missing")})
    result = validate_gltf(gltf)
    assert len(result) == 1
    issue = result.errors[0]
    assert issue.kind is IssueKind.MISSING_REFERENCE
    assert issue.path == "techniques[t1].programs[missing]"
    assert not any("shader" in i.message for i in result)


def test_null_uniform_entry_names_the_symbol():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(
        parameters={"color": TechniqueParameters(type=GL_FLOAT_VEC4)},
        uniforms={"u_color": "color", "u_broken": None},
    )
    result = validate_gltf(gltf)
    assert len(result.errors) == 1
    issue = result.errors[0]
    assert issue.kind is IssueKind.MALFORMED_MAPPING
    assert "u_broken" in issue.message
    assert issue.path == "techniques[t1]"


def test_validation_is_repeatable():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(
        parameters={"diffuse": TechniqueParameters(type=GL_SAMPLER_2D, value="nope")},
        uniforms={"u_diffuse": "diffuse"},
    )
    gltf.techniques["t2"] = _technique(program=None)
    first = validate_gltf(gltf)
    second = validate_gltf(gltf)
    assert first == second
    assert first.issues == second.issues
    assert len(first) == 2


def test_null_parameter_type_stops_before_texture_check():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(
        parameters={"diffuse": TechniqueParameters(type=None, value="missingTexture")},
        uniforms={"u_diffuse": "diffuse"},
    )
    result = validate_gltf(gltf)
    assert len(result) == 1
    issue = result.errors[0]
    assert issue.message == "The type is null"
    assert issue.kind is IssueKind.MISSING_REQUIRED_FIELD
    assert issue.path == "techniques[t1].uniform u_diffuse.technique.parameters[diffuse]"


def test_null_program_is_reported_at_technique():
    gltf = GlTF(techniques={"t1": _technique(program=None)})
    result = validate_gltf(gltf)
    assert len(result) == 1
    issue = result.errors[0]
    assert issue.kind is IssueKind.MISSING_REQUIRED_FIELD
    assert issue.path == "techniques[t1]"
    assert "program" in issue.message


def test_sampler_with_missing_texture():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(
        parameters={"diffuse": TechniqueParameters(type=GL_SAMPLER_2D, value="noSuchTexture")},
        uniforms={"u_diffuse": "diffuse"},
    )
    result = validate_gltf(gltf)
    assert len(result) == 1
    issue = result.errors[0]
    assert issue.kind is IssueKind.MISSING_REFERENCE
    assert issue.path == "techniques[t1].uniform u_diffuse.technique.parameters[diffuse].textures[noSuchTexture]"


def test_non_string_sampler_value_warns_and_resolves_string_form():
    gltf = GlTF()
    add_program(gltf)
    add_texture(gltf, "7")
    gltf.techniques["t1"] = _technique(
        parameters={"diffuse": TechniqueParameters(type=GL_SAMPLER_2D, value=7)},
        uniforms={"u_diffuse": "diffuse"},
    )
    result = validate_gltf(gltf)
    assert not result.has_errors()
    assert len(result.warnings) == 1
    assert result.warnings[0].kind is IssueKind.TYPE_SHAPE
    assert result.warnings[0].severity is Severity.WARNING


def test_unreferenced_sampler_parameter_is_still_checked():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(
        parameters={"diffuse": TechniqueParameters(type=GL_SAMPLER_2D, value="gone")},
    )
    result = validate_gltf(gltf)
    assert len(result.errors) == 1
    assert result.errors[0].path == "techniques[t1].technique.parameters[diffuse].textures[gone]"


def test_uniform_naming_missing_parameter():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(uniforms={"u_color": "color"})
    result = validate_gltf(gltf)
    assert len(result) == 1
    assert result.errors[0].kind is IssueKind.MISSING_REFERENCE
    assert "techniqueParameters ID color does not exist" in result.errors[0].message


def test_invalid_parameter_type_is_rejected():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(
        parameters={"color": TechniqueParameters(type=12345)},
        uniforms={"u_color": "color"},
    )
    result = validate_gltf(gltf)
    assert len(result.errors) == 1
    assert result.errors[0].kind is IssueKind.INVALID_VALUE
    assert "12345" in result.errors[0].message


def test_sampler_used_as_attribute_is_an_error():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(
        parameters={"tex": TechniqueParameters(type=GL_SAMPLER_2D)},
        attributes={"a_tex": "tex"},
    )
    result = validate_gltf(gltf)
    assert len(result.errors) == 1
    assert "vertex attribute" in result.errors[0].message


def test_parameter_node_must_exist():
    gltf = GlTF(nodes={"light": Node()})
    add_program(gltf)
    gltf.techniques["t1"] = _technique(
        parameters={
            "lightMatrix": TechniqueParameters(type=GL_FLOAT_VEC3, node="light"),
            "other": TechniqueParameters(type=GL_FLOAT_VEC3, node="ghost"),
        },
    )
    result = validate_gltf(gltf)
    assert len(result.errors) == 1
    assert result.errors[0].path == "techniques[t1].technique.parameters[other]"


def test_attribute_missing_from_program_only_warns():
    gltf = GlTF()
    add_program(gltf)
    gltf.programs["p"] = Program(vertex_shader="vs", fragment_shader="fs", attributes=["a_position"])
    gltf.techniques["t1"] = _technique(
        parameters={
            "position": TechniqueParameters(type=GL_FLOAT_VEC3, semantic="POSITION"),
            "normal": TechniqueParameters(type=GL_FLOAT_VEC3, semantic="NORMAL"),
        },
        attributes={"a_position": "position", "a_normal": "normal"},
    )
    result = validate_gltf(gltf)
    assert not result.has_errors()
    assert len(result.warnings) == 1
    assert "a_normal" in result.warnings[0].message


def test_uniforms_are_checked_before_program():
    gltf = GlTF(techniques={"t1": _technique(program="missing", uniforms={"u_x": None})})
    result = TechniqueValidator(gltf).validate_technique("t1")
    assert len(result) == 1
    assert result.errors[0].kind is IssueKind.MALFORMED_MAPPING


def test_null_technique_id_is_unsupported_default():
    result = TechniqueValidator(GlTF()).validate_technique(None)
    assert len(result) == 1
    assert result.errors[0].kind is IssueKind.UNSUPPORTED_DEFAULT
    assert result.errors[0].path == ""


def test_broken_techniques_do_not_hide_each_other():
    gltf = GlTF(techniques={
        "a": _technique(program="missingA"),
        "b": _technique(program="missingB"),
    })
    result = validate_gltf(gltf)
    assert [i.path for i in result.errors] == [
        "techniques[a].programs[missingA]",
        "techniques[b].programs[missingB]",
    ]


def test_null_uniform_entry_is_reported_after_a_broken_uniform():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(uniforms={"u_a": "missingParam", "u_b": None})
    result = validate_gltf(gltf)
    malformed = [i for i in result if i.kind is IssueKind.MALFORMED_MAPPING]
    assert len(malformed) == 1
    assert "u_b" in malformed[0].message
    assert len(result.errors) == 1


def test_null_attribute_entry_names_the_symbol():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(
        parameters={"position": TechniqueParameters(type=GL_FLOAT_VEC3, semantic="POSITION")},
        attributes={"a_position": "position", "a_normal": None},
    )
    result = validate_gltf(gltf)
    assert len(result.errors) == 1
    issue = result.errors[0]
    assert issue.kind is IssueKind.MALFORMED_MAPPING
    assert "attribute a_normal" in issue.message
    assert issue.path == "techniques[t1]"


def test_custom_semantic_is_accepted():
    gltf = GlTF()
    add_program(gltf)
    gltf.techniques["t1"] = _technique(
        parameters={"custom": TechniqueParameters(type=GL_FLOAT_VEC4, semantic="MY_CUSTOM_SEMANTIC")},
        uniforms={"u_custom": "custom"},
    )
    assert len(validate_gltf(gltf)) == 0
