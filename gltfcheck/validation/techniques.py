# gltfcheck technique validator
# Validates techniques together with the technique parameters they own, the
# program they use (and through it the shaders) and the textures referenced by
# sampler parameters.
#
# Rules worth knowing:
# - technique.uniforms / technique.attributes may be absent; absent means empty.
# - A uniform or attribute entry whose target parameter ID is null is an error.
# - Parameter semantics are free-form strings and are never checked against a list.
# - A null technique ID would mean "use the default technique"; no default is
#   defined, so it is reported as an error.

from __future__ import annotations

import logging
from typing import Dict, Optional, Set

from ..core.constants import GL_SAMPLER_2D, TECHNIQUE_PARAMETER_TYPES
from ..core.context import ValidatorContext
from ..core.model import GlTF, Technique
from ..core.result import IssueKind, ValidatorResult
from .base import GltfValidator, type_of
from .programs import ProgramValidator
from .textures import TextureValidator

logger = logging.getLogger(__name__)

UNIFORM = "uniform"
ATTRIBUTE = "attribute"


class TechniqueValidator(GltfValidator):
    """A class for validating techniques"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.program_validator = ProgramValidator(gltf)
        self.texture_validator = TextureValidator(gltf)

    def validate_technique(
        self, technique_id: Optional[str], current_context: Optional[ValidatorContext] = None
    ) -> ValidatorResult:
        """
        Validate the technique with the given ID.

        Order: null uniform/attribute entries, uniforms, attributes, parameters not used by either mapping,
        program, then program attribute coverage. The first step that reports
        an error ends the validation of this technique.
        """
        result = ValidatorResult()
        if technique_id is None:
            result.add_error(
                "The technique ID is null, and a default technique is not supported",
                current_context,
                kind=IssueKind.UNSUPPORTED_DEFAULT,
            )
            return result

        context = self._enter(current_context, "techniques", technique_id)
        technique = self._resolve(self.gltf.techniques, technique_id, context, result, "technique")
        if technique is None:
            return result

        # Null mapping entries are reported before any parameter is followed
        for mapping, usage in ((technique.uniforms, UNIFORM), (technique.attributes, ATTRIBUTE)):
            if not self._check_null_entries(mapping or {}, usage, "techniqueParameters", context, result):
                return result

        return self._run_steps(result, [
            lambda: self._validate_symbol_mapping(technique, technique.uniforms, UNIFORM, context),
            lambda: self._validate_symbol_mapping(technique, technique.attributes, ATTRIBUTE, context),
            lambda: self._validate_unreferenced_parameters(technique, context),
            lambda: self.program_validator.validate_program(technique.program, context),
            lambda: self._validate_program_attributes(technique, context),
        ])

    def _validate_symbol_mapping(
        self,
        technique: Technique,
        mapping: Optional[Dict[str, Optional[str]]],
        usage: str,
        context: ValidatorContext,
    ) -> ValidatorResult:
        result = ValidatorResult()
        for symbol, parameters_id in (mapping or {}).items():
            result.merge(self._validate_technique_parameters(
                technique, parameters_id, context.with_segment(f"{usage} {symbol}"), usage))
            if result.has_errors():
                return result
        return result

    def _validate_unreferenced_parameters(self, technique: Technique, context: ValidatorContext) -> ValidatorResult:
        result = ValidatorResult()
        referenced: Set[str] = set()
        for mapping in (technique.uniforms, technique.attributes):
            referenced.update(v for v in (mapping or {}).values() if isinstance(v, str))
        for parameters_id in technique.parameters or {}:
            if parameters_id in referenced:
                continue
            result.merge(self._validate_technique_parameters(technique, parameters_id, context, None))
            if result.has_errors():
                return result
        return result

    def _validate_technique_parameters(
        self,
        technique: Technique,
        parameters_id: str,
        current_context: ValidatorContext,
        usage: Optional[str],
    ) -> ValidatorResult:
        """
        Validate one entry of technique.parameters. A sampler typed entry with a
        value must name an existing texture; a non-string value only warns and
        is checked in its string form.
        """
        context = current_context.with_segment(f"technique.parameters[{parameters_id}]")
        result = ValidatorResult()

        parameters = self._resolve(technique.parameters, parameters_id, context, result, "techniqueParameters")
        if parameters is None:
            return result

        param_type = parameters.type
        if param_type is None:
            result.add_error("The type is null", context, kind=IssueKind.MISSING_REQUIRED_FIELD)
            return result
        if not self._check_enum(param_type, TECHNIQUE_PARAMETER_TYPES, "techniqueParameters.type", context, result):
            return result

        if parameters.semantic is not None and not isinstance(parameters.semantic, str):
            result.add_warning(
                f"The semantic of techniqueParameters {parameters_id} is "
                f"{type_of(parameters.semantic)}, but should be str",
                context,
                kind=IssueKind.TYPE_SHAPE,
            )

        if usage == ATTRIBUTE and param_type == GL_SAMPLER_2D:
            result.add_error(
                f"The techniqueParameters {parameters_id} has a sampler type, but is used as a vertex attribute",
                context,
            )
            return result

        if parameters.node is not None:
            if self._resolve(self.gltf.nodes, parameters.node, context, result, "node") is None:
                return result

        if param_type == GL_SAMPLER_2D and parameters.value is not None:
            value = parameters.value
            if not isinstance(value, str):
                result.add_warning(
                    f"The value of techniqueParameters {parameters_id} is "
                    f"{type_of(value)}, but should be str",
                    context,
                    kind=IssueKind.TYPE_SHAPE,
                )
            result.merge(self.texture_validator.validate_texture(str(value), context))
        return result

    def _validate_program_attributes(self, technique: Technique, context: ValidatorContext) -> ValidatorResult:
        result = ValidatorResult()
        program = self.gltf.programs[technique.program]
        if program.attributes is None:
            return result
        declared = set(a for a in program.attributes if isinstance(a, str))
        for symbol in technique.attributes or {}:
            if symbol not in declared:
                result.add_warning(
                    f"The attribute {symbol} is not declared in program {technique.program}",
                    context,
                    kind=IssueKind.TYPE_SHAPE,
                )
        return result
