import pytest

from gltfcheck.core.errors import DocumentStructureError
from gltfcheck.core.model import GlTF

from conftest import make_valid_gltf_dict


def test_collections_are_materialized_with_python_names():
    gltf = GlTF.from_dict(make_valid_gltf_dict())
    assert gltf.scene == "defaultScene"
    assert gltf.asset == {"version": "1.0"}
    assert gltf.buffer_views["bv_indices"].byte_length == 72
    assert gltf.accessors["acc_position"].component_type == 5126
    assert gltf.textures["tex"].internal_format == 6408
    assert gltf.programs["prog"].vertex_shader == "vs"
    technique = gltf.techniques["tech"]
    assert technique.parameters["diffuse"].value == "tex"
    assert technique.uniforms["u_diffuse"] == "diffuse"
    assert gltf.meshes["box"].primitives[0].attributes["NORMAL"] == "acc_normal"
    channel = gltf.animations["anim"].channels[0]
    assert channel.target.id == "boxNode"
    assert gltf.animations["anim"].samplers["s0"].interpolation == "LINEAR"


def test_absent_collections_are_empty():
    gltf = GlTF.from_dict({})
    assert gltf.techniques == {}
    assert gltf.scene is None


def test_values_are_kept_as_found():
    data = {"techniques": {"t": {"program": "p", "parameters": {"d": {"type": "35678", "value": 7}}}}}
    parameters = GlTF.from_dict(data).techniques["t"].parameters["d"]
    assert parameters.type == "35678"
    assert parameters.value == 7


def test_null_mapping_entries_survive_materialization():
    data = {"techniques": {"t": {"uniforms": {"u_color": None}}}}
    assert GlTF.from_dict(data).techniques["t"].uniforms == {"u_color": None}


@pytest.mark.parametrize("data", [
    [],
    {"techniques": []},
    {"techniques": {"t": "not an object"}},
    {"meshes": {"m": {"primitives": {"0": {}}}}},
    {"meshes": {"m": {"primitives": ["not an object"]}}},
    {"animations": {"a": {"channels": [{"target": "boxNode"}]}}},
])
def test_wrong_shapes_raise(data):
    with pytest.raises(DocumentStructureError):
        GlTF.from_dict(data)
