# gltfcheck mesh validator

from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import PRIMITIVE_MODES
from ..core.context import ValidatorContext
from ..core.model import GlTF, MeshPrimitive
from ..core.result import IssueKind, ValidatorResult
from .base import GltfValidator
from .buffers import AccessorValidator
from .materials import MaterialValidator

logger = logging.getLogger(__name__)


class MeshValidator(GltfValidator):
    """A class for validating meshes and their primitives"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.material_validator = MaterialValidator(gltf)
        self.accessor_validator = AccessorValidator(gltf)

    def validate_mesh(self, mesh_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(mesh_id, "mesh", current_context, result):
            return result
        context = self._enter(current_context, "meshes", mesh_id)
        mesh = self._resolve(self.gltf.meshes, mesh_id, context, result, "mesh")
        if mesh is None:
            return result

        primitives = mesh.primitives or []
        if not primitives:
            result.add_warning("The mesh has no primitives", context, kind=IssueKind.TYPE_SHAPE)
            return result

        for index, primitive in enumerate(primitives):
            result.merge(self._validate_primitive(primitive, context.with_segment(f"primitives[{index}]")))
            if result.has_errors():
                return result
        return result

    def _validate_primitive(self, primitive: MeshPrimitive, context: ValidatorContext) -> ValidatorResult:
        result = ValidatorResult()
        if primitive.mode is not None:
            if not self._check_enum(primitive.mode, PRIMITIVE_MODES, "primitive.mode", context, result):
                return result
        attributes = primitive.attributes or {}
        if not self._check_null_entries(attributes, "attribute", "accessor", context, result):
            return result

        steps = [lambda: self.material_validator.validate_material(primitive.material, context)]
        if primitive.indices is not None:
            steps.append(lambda: self.accessor_validator.validate_accessor(primitive.indices, context))
        for semantic, accessor_id in attributes.items():
            steps.append(self._attribute_step(semantic, accessor_id, context))
        return self._run_steps(result, steps)

    def _attribute_step(self, semantic: str, accessor_id: str, context: ValidatorContext):
        attribute_context = context.with_segment(f"attribute {semantic}")
        return lambda: self.accessor_validator.validate_accessor(accessor_id, attribute_context)
