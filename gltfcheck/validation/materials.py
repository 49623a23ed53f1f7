# gltfcheck material validator

from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import GL_SAMPLER_2D
from ..core.context import ValidatorContext
from ..core.model import GlTF, Material
from ..core.result import IssueKind, ValidatorResult
from .base import GltfValidator, type_of
from .techniques import TechniqueValidator
from .textures import TextureValidator

logger = logging.getLogger(__name__)


class MaterialValidator(GltfValidator):
    """A class for validating materials"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.technique_validator = TechniqueValidator(gltf)
        self.texture_validator = TextureValidator(gltf)

    def validate_material(self, material_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(material_id, "material", current_context, result):
            return result
        context = self._enter(current_context, "materials", material_id)
        material = self._resolve(self.gltf.materials, material_id, context, result, "material")
        if material is None:
            return result

        # A null technique is reported by the technique validator itself
        return self._run_steps(result, [
            lambda: self.technique_validator.validate_technique(material.technique, context),
            lambda: self._validate_values(material, context),
        ])

    def _validate_values(self, material: Material, context: ValidatorContext) -> ValidatorResult:
        """Material values override technique parameters; sampler values name textures."""
        result = ValidatorResult()
        parameters = self.gltf.techniques[material.technique].parameters or {}
        for name, value in (material.values or {}).items():
            target = parameters.get(name)
            if target is None:
                result.add_warning(
                    f"The material value {name} does not match a parameter of technique {material.technique}",
                    context,
                    kind=IssueKind.TYPE_SHAPE,
                )
                continue
            if target.type != GL_SAMPLER_2D or value is None:
                continue
            value_context = context.with_segment(f"values[{name}]")
            if not isinstance(value, str):
                result.add_warning(
                    f"The value of material value {name} is {type_of(value)}, but should be str",
                    value_context,
                    kind=IssueKind.TYPE_SHAPE,
                )
            result.merge(self.texture_validator.validate_texture(str(value), value_context))
            if result.has_errors():
                return result
        return result
