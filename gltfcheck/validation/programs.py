# gltfcheck shader and program validators

from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import GL_FRAGMENT_SHADER, GL_VERTEX_SHADER, SHADER_TYPES, gl_type_name
from ..core.context import ValidatorContext
from ..core.model import GlTF, Program
from ..core.result import IssueKind, ValidatorResult
from .base import GltfValidator

logger = logging.getLogger(__name__)


class ShaderValidator(GltfValidator):
    """A class for validating shaders"""

    def validate_shader(self, shader_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(shader_id, "shader", current_context, result):
            return result
        context = self._enter(current_context, "shaders", shader_id)
        shader = self._resolve(self.gltf.shaders, shader_id, context, result, "shader")
        if shader is None:
            return result

        if not self._require_field(shader.type, "shader.type", context, result):
            return result
        self._check_enum(shader.type, SHADER_TYPES, "shader.type", context, result)
        return result


class ProgramValidator(GltfValidator):
    """A class for validating programs"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.shader_validator = ShaderValidator(gltf)

    def validate_program(self, program_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        """
        Validate the program with the given ID, and the vertex and fragment
        shaders it refers to.
        """
        result = ValidatorResult()
        if not self._require_id(program_id, "program", current_context, result):
            return result
        context = self._enter(current_context, "programs", program_id)
        program = self._resolve(self.gltf.programs, program_id, context, result, "program")
        if program is None:
            return result

        if not self._require_id(program.vertex_shader, "vertexShader", context, result):
            return result
        if not self._require_id(program.fragment_shader, "fragmentShader", context, result):
            return result

        self._run_steps(result, [
            lambda: self.shader_validator.validate_shader(program.vertex_shader, context),
            lambda: self.shader_validator.validate_shader(program.fragment_shader, context),
            lambda: self._validate_shader_slots(program, context),
        ])
        if result.has_errors():
            return result

        self._validate_attributes(program, context, result)
        return result

    def _validate_shader_slots(self, program: Program, context: ValidatorContext) -> ValidatorResult:
        result = ValidatorResult()
        slots = (
            (program.vertex_shader, GL_VERTEX_SHADER, "vertexShader"),
            (program.fragment_shader, GL_FRAGMENT_SHADER, "fragmentShader"),
        )
        for shader_id, expected, slot in slots:
            actual = self.gltf.shaders[shader_id].type
            if actual != expected:
                result.add_error(
                    f"The shader {shader_id} is used as {slot}, but has type {gl_type_name(actual)}",
                    context,
                    kind=IssueKind.INVALID_VALUE,
                )
        return result

    @staticmethod
    def _validate_attributes(program: Program, context: ValidatorContext, result: ValidatorResult) -> None:
        seen = set()
        for attribute in program.attributes or []:
            if not isinstance(attribute, str):
                result.add_warning(
                    f"The program attribute {attribute!r} is not a string",
                    context,
                    kind=IssueKind.TYPE_SHAPE,
                )
                continue
            if attribute in seen:
                result.add_warning(
                    f"The program attribute {attribute} is declared more than once",
                    context,
                    kind=IssueKind.TYPE_SHAPE,
                )
            seen.add(attribute)
