# gltfcheck top-level validator
# Visits every entity of every collection of a document and merges the per-entity
# results into one report. Unlike the per-kind validators, an error in one entity
# never stops the validation of the others.
#
# Public API:
# - Validator(gltf).validate() -> ValidatorResult
# - validate_gltf(gltf) -> ValidatorResult
# - assert_valid_gltf(gltf) -> ValidatorResult  (raises GltfValidationError on errors)

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from enum import Enum
from typing import Callable, Dict, Optional

from ..core.context import ValidatorContext
from ..core.errors import GltfValidationError, ValidatorInternalError
from ..core.graph import resolve_or_report_missing
from ..core.model import GlTF
from ..core.result import ValidatorResult
from .animations import AnimationValidator
from .buffers import AccessorValidator, BufferValidator, BufferViewValidator
from .materials import MaterialValidator
from .meshes import MeshValidator
from .programs import ProgramValidator, ShaderValidator
from .scenes import CameraValidator, NodeValidator, SceneValidator, SkinValidator
from .techniques import TechniqueValidator
from .textures import ImageValidator, SamplerValidator, TextureValidator

logger = logging.getLogger(__name__)

EntityCheck = Callable[[Optional[str], Optional[ValidatorContext]], ValidatorResult]


class EntityKind(Enum):
    """Root collections of a document, in declaration order"""
    BUFFERS = ("buffers", "buffers")
    BUFFER_VIEWS = ("bufferViews", "buffer_views")
    ACCESSORS = ("accessors", "accessors")
    IMAGES = ("images", "images")
    SAMPLERS = ("samplers", "samplers")
    TEXTURES = ("textures", "textures")
    SHADERS = ("shaders", "shaders")
    PROGRAMS = ("programs", "programs")
    TECHNIQUES = ("techniques", "techniques")
    MATERIALS = ("materials", "materials")
    MESHES = ("meshes", "meshes")
    CAMERAS = ("cameras", "cameras")
    ANIMATIONS = ("animations", "animations")
    SKINS = ("skins", "skins")
    NODES = ("nodes", "nodes")
    SCENES = ("scenes", "scenes")

    def __init__(self, collection_name: str, attribute: str) -> None:
        self.collection_name = collection_name
        self.attribute = attribute


class Validator:
    """Validates a whole glTF document."""

    def __init__(self, gltf: GlTF) -> None:
        self.gltf = gltf
        self._dispatch: Dict[EntityKind, EntityCheck] = {
            EntityKind.BUFFERS: BufferValidator(gltf).validate_buffer,
            EntityKind.BUFFER_VIEWS: BufferViewValidator(gltf).validate_buffer_view,
            EntityKind.ACCESSORS: AccessorValidator(gltf).validate_accessor,
            EntityKind.IMAGES: ImageValidator(gltf).validate_image,
            EntityKind.SAMPLERS: SamplerValidator(gltf).validate_sampler,
            EntityKind.TEXTURES: TextureValidator(gltf).validate_texture,
            EntityKind.SHADERS: ShaderValidator(gltf).validate_shader,
            EntityKind.PROGRAMS: ProgramValidator(gltf).validate_program,
            EntityKind.TECHNIQUES: TechniqueValidator(gltf).validate_technique,
            EntityKind.MATERIALS: MaterialValidator(gltf).validate_material,
            EntityKind.MESHES: MeshValidator(gltf).validate_mesh,
            EntityKind.CAMERAS: CameraValidator(gltf).validate_camera,
            EntityKind.ANIMATIONS: AnimationValidator(gltf).validate_animation,
            EntityKind.SKINS: SkinValidator(gltf).validate_skin,
            EntityKind.NODES: NodeValidator(gltf).validate_node,
            EntityKind.SCENES: SceneValidator(gltf).validate_scene,
        }
        missing = [kind.collection_name for kind in EntityKind if kind not in self._dispatch]
        if missing:
            raise ValidatorInternalError(f"No validator registered for: {', '.join(missing)}")

    def validate(self) -> ValidatorResult:
        started = time.perf_counter()
        result = ValidatorResult()
        for kind in EntityKind:
            result.merge(self.validate_kind(kind))
        result.merge(self._validate_default_scene())

        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.info(
            "Validation finished: %d error(s), %d warning(s) in %.1f ms",
            len(result.errors),
            len(result.warnings),
            elapsed_ms,
        )
        return result

    def validate_kind(self, kind: EntityKind) -> ValidatorResult:
        """Validate every entity of one collection; errors never stop the loop."""
        result = ValidatorResult()
        collection = getattr(self.gltf, kind.attribute, None)
        if collection is None:
            return result
        if not isinstance(collection, Mapping):
            raise ValidatorInternalError(
                f"Collection {kind.collection_name} must be a mapping, got: {type(collection).__name__}"
            )
        logger.debug("Validating %d %s", len(collection), kind.collection_name)
        check = self._dispatch[kind]
        for entity_id in collection:
            result.merge(check(entity_id, None))
        return result

    def _validate_default_scene(self) -> ValidatorResult:
        result = ValidatorResult()
        if self.gltf.scene is None:
            return result
        context = ValidatorContext.root().with_segment("scene")
        resolve_or_report_missing(self.gltf.scenes, self.gltf.scene, context, result, "scene")
        return result


def validate_gltf(gltf: GlTF) -> ValidatorResult:
    """Validate a whole document and return the report."""
    return Validator(gltf).validate()


def assert_valid_gltf(gltf: GlTF) -> ValidatorResult:
    """
    Validate and raise GltfValidationError when the report contains errors.
    Warnings never raise. Returns the report otherwise.
    """
    result = validate_gltf(gltf)
    if result.has_errors():
        raise GltfValidationError("glTF validation failed:\n" + result.to_display_string(), result)
    return result


__all__ = ["EntityKind", "Validator", "validate_gltf", "assert_valid_gltf"]
