# gltfcheck technique builder
# Creates the standard techniques used when converting simple formats (e.g. OBJ/MTL)
# into glTF: ambient/diffuse/specular/shininess lighting, with or without a diffuse
# texture and with or without vertex normals.
#
# Each technique is created at most once per document, together with its program and
# a vertex/fragment shader pair. New ids come from graph.generate_id(), so existing
# user entities are never overwritten. Shader sources are referenced by uri only; the
# GLSL payloads are supplied by whoever writes the files.
#
# Public API:
# - TechniqueBuilder(gltf).get_technique_id(with_texture, with_normals) -> str

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from ..core import constants as gl
from ..core.graph import add_entity, add_with_generated_id, generate_id, get_size
from ..core.model import GlTF, Program, Shader, Technique, TechniqueParameters

logger = logging.getLogger(__name__)

TECHNIQUE_TEXTURE_NORMALS_ID = "techniqueTextureNormals"
TECHNIQUE_TEXTURE_ID = "techniqueTexture"
TECHNIQUE_NORMALS_ID = "techniqueNormals"
TECHNIQUE_NONE_ID = "techniqueNone"

AMBIENT_NAME = "ambient"
DIFFUSE_NAME = "diffuse"
SPECULAR_NAME = "specular"
SHININESS_NAME = "shininess"

# (with_texture, with_normals) -> (technique id, vertex shader uri, fragment shader uri)
_VARIANTS = {
    (True, True): (TECHNIQUE_TEXTURE_NORMALS_ID, "vs_texture_normals.glsl", "fs_texture_normals.glsl"),
    (True, False): (TECHNIQUE_TEXTURE_ID, "vs_texture.glsl", "fs_texture.glsl"),
    (False, True): (TECHNIQUE_NORMALS_ID, "vs_normals.glsl", "fs_normals.glsl"),
    (False, False): (TECHNIQUE_NONE_ID, "vs_none.glsl", "fs_none.glsl"),
}


def _parameters(param_type: int, semantic: Optional[str] = None) -> TechniqueParameters:
    return TechniqueParameters(type=param_type, semantic=semantic)


class TechniqueBuilder:
    """Adds standard techniques (and their programs and shaders) to a document."""

    def __init__(self, gltf: GlTF) -> None:
        self.gltf = gltf

    def get_technique_id(self, with_texture: bool, with_normals: bool) -> str:
        """
        Return the id of the standard technique for the given vertex layout,
        creating the technique on first use.
        """
        technique_id, vertex_uri, fragment_uri = _VARIANTS[(bool(with_texture), bool(with_normals))]
        if technique_id not in (self.gltf.techniques or {}):
            self._create_technique(technique_id, with_texture, with_normals, vertex_uri, fragment_uri)
        return technique_id

    def _create_technique(
        self,
        technique_id: str,
        with_texture: bool,
        with_normals: bool,
        vertex_uri: str,
        fragment_uri: str,
    ) -> None:
        program_counter = get_size(self.gltf.programs)

        vertex_shader_id = generate_id(f"vertexShader{program_counter}", self.gltf.shaders)
        add_entity(self.gltf, "shaders", vertex_shader_id, Shader(uri=vertex_uri, type=gl.GL_VERTEX_SHADER))
        fragment_shader_id = generate_id(f"fragmentShader{program_counter}", self.gltf.shaders)
        add_entity(self.gltf, "shaders", fragment_shader_id, Shader(uri=fragment_uri, type=gl.GL_FRAGMENT_SHADER))

        program_attributes: List[str] = ["a_position"]
        if with_texture:
            program_attributes.append("a_texcoord0")
        if with_normals:
            program_attributes.append("a_normal")
        program = Program(
            vertex_shader=vertex_shader_id,
            fragment_shader=fragment_shader_id,
            attributes=program_attributes,
        )
        program_id = add_with_generated_id(self.gltf, "programs", "program", program)

        technique = Technique(
            program=program_id,
            attributes=self._attributes(with_texture, with_normals),
            parameters=self._technique_parameters(with_texture, with_normals),
            uniforms=self._uniforms(with_normals),
        )
        add_entity(self.gltf, "techniques", technique_id, technique)
        logger.debug(
            "Created technique %s (program %s, shaders %s/%s)",
            technique_id, program_id, vertex_shader_id, fragment_shader_id,
        )

    @staticmethod
    def _attributes(with_texture: bool, with_normals: bool) -> Dict[str, Optional[str]]:
        attributes: Dict[str, Optional[str]] = {"a_position": "position"}
        if with_texture:
            attributes["a_texcoord0"] = "texcoord0"
        if with_normals:
            attributes["a_normal"] = "normal"
        return attributes

    @staticmethod
    def _technique_parameters(with_texture: bool, with_normals: bool) -> Dict[str, TechniqueParameters]:
        parameters: Dict[str, TechniqueParameters] = {
            "position": _parameters(gl.GL_FLOAT_VEC3, "POSITION"),
        }
        if with_texture:
            parameters["texcoord0"] = _parameters(gl.GL_FLOAT_VEC2, "TEXCOORD_0")
        if with_normals:
            parameters["normal"] = _parameters(gl.GL_FLOAT_VEC3, "NORMAL")
        parameters["modelViewMatrix"] = _parameters(gl.GL_FLOAT_MAT4, "MODELVIEW")
        if with_normals:
            parameters["normalMatrix"] = _parameters(gl.GL_FLOAT_MAT3, "MODELVIEWINVERSETRANSPOSE")
        parameters["projectionMatrix"] = _parameters(gl.GL_FLOAT_MAT4, "PROJECTION")

        parameters[AMBIENT_NAME] = _parameters(gl.GL_FLOAT_VEC4)
        parameters[DIFFUSE_NAME] = _parameters(gl.GL_SAMPLER_2D if with_texture else gl.GL_FLOAT_VEC4)
        parameters[SPECULAR_NAME] = _parameters(gl.GL_FLOAT_VEC4)
        parameters[SHININESS_NAME] = _parameters(gl.GL_FLOAT)
        return parameters

    @staticmethod
    def _uniforms(with_normals: bool) -> Dict[str, Optional[str]]:
        uniforms: Dict[str, Optional[str]] = {
            "u_ambient": AMBIENT_NAME,
            "u_diffuse": DIFFUSE_NAME,
            "u_specular": SPECULAR_NAME,
            "u_shininess": SHININESS_NAME,
            "u_modelViewMatrix": "modelViewMatrix",
        }
        if with_normals:
            uniforms["u_normalMatrix"] = "normalMatrix"
        uniforms["u_projectionMatrix"] = "projectionMatrix"
        return uniforms


__all__ = [
    "TechniqueBuilder",
    "TECHNIQUE_TEXTURE_NORMALS_ID",
    "TECHNIQUE_TEXTURE_ID",
    "TECHNIQUE_NORMALS_ID",
    "TECHNIQUE_NONE_ID",
    "AMBIENT_NAME",
    "DIFFUSE_NAME",
    "SPECULAR_NAME",
    "SHININESS_NAME",
]
