# gltfcheck camera, skin, node and scene validators
#
# Node hierarchies may contain cycles in broken documents, so node children and
# skeleton roots are only resolved, never validated recursively. Every node is
# still validated once from the top level.

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..core.constants import CAMERA_TYPES
from ..core.context import ValidatorContext
from ..core.model import Camera, GlTF, Node
from ..core.result import IssueKind, ValidatorResult
from .base import GltfValidator, is_number
from .buffers import AccessorValidator
from .meshes import MeshValidator

logger = logging.getLogger(__name__)

# Number of elements of the node transform properties
NODE_TRANSFORM_SIZES = (
    ("matrix", 16),
    ("translation", 3),
    ("rotation", 4),
    ("scale", 3),
)


class CameraValidator(GltfValidator):
    """A class for validating cameras"""

    def validate_camera(self, camera_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(camera_id, "camera", current_context, result):
            return result
        context = self._enter(current_context, "cameras", camera_id)
        camera = self._resolve(self.gltf.cameras, camera_id, context, result, "camera")
        if camera is None:
            return result

        if not self._require_field(camera.type, "camera.type", context, result):
            return result
        if not self._check_enum(camera.type, CAMERA_TYPES, "camera.type", context, result):
            return result
        if camera.type == "perspective":
            self._validate_perspective(camera, context, result)
        else:
            self._validate_orthographic(camera, context, result)
        return result

    def _validate_perspective(self, camera: Camera, context: ValidatorContext, result: ValidatorResult) -> None:
        params = camera.perspective
        if not self._require_field(params, "camera.perspective", context, result):
            return
        context = context.with_segment("perspective")
        yfov, znear, zfar = params.get("yfov"), params.get("znear"), params.get("zfar")
        if not (is_number(yfov) and yfov > 0):
            result.add_error(f"The yfov must be a number > 0, got: {yfov!r}", context)
            return
        if not (is_number(znear) and znear > 0):
            result.add_error(f"The znear must be a number > 0, got: {znear!r}", context)
            return
        if not (is_number(zfar) and zfar > znear):
            result.add_error(f"The zfar must be a number > znear ({znear}), got: {zfar!r}", context)

    def _validate_orthographic(self, camera: Camera, context: ValidatorContext, result: ValidatorResult) -> None:
        params = camera.orthographic
        if not self._require_field(params, "camera.orthographic", context, result):
            return
        context = context.with_segment("orthographic")
        for magnification in ("xmag", "ymag"):
            value = params.get(magnification)
            if not is_number(value):
                result.add_error(f"The {magnification} must be a number, got: {value!r}", context)
                return
        znear, zfar = params.get("znear"), params.get("zfar")
        if not (is_number(znear) and znear >= 0):
            result.add_error(f"The znear must be a number >= 0, got: {znear!r}", context)
            return
        if not (is_number(zfar) and zfar > znear):
            result.add_error(f"The zfar must be a number > znear ({znear}), got: {zfar!r}", context)


class SkinValidator(GltfValidator):
    """A class for validating skins"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.accessor_validator = AccessorValidator(gltf)

    def validate_skin(self, skin_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(skin_id, "skin", current_context, result):
            return result
        context = self._enter(current_context, "skins", skin_id)
        skin = self._resolve(self.gltf.skins, skin_id, context, result, "skin")
        if skin is None:
            return result

        if not self._require_id(skin.inverse_bind_matrices, "inverseBindMatrices accessor", context, result):
            return result
        if not skin.joint_names:
            result.add_warning("The skin has no jointNames", context, kind=IssueKind.TYPE_SHAPE)
        return self._run_steps(result, [
            lambda: self.accessor_validator.validate_accessor(skin.inverse_bind_matrices, context),
        ])


class NodeValidator(GltfValidator):
    """A class for validating nodes"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.camera_validator = CameraValidator(gltf)
        self.mesh_validator = MeshValidator(gltf)
        self.skin_validator = SkinValidator(gltf)

    def validate_node(self, node_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(node_id, "node", current_context, result):
            return result
        context = self._enter(current_context, "nodes", node_id)
        node = self._resolve(self.gltf.nodes, node_id, context, result, "node")
        if node is None:
            return result

        if not self._validate_transform(node, context, result):
            return result
        if not self._validate_node_links(node_id, node, context, result):
            return result

        steps = []
        if node.camera is not None:
            steps.append(lambda: self.camera_validator.validate_camera(node.camera, context))
        if node.skin is not None:
            steps.append(lambda: self.skin_validator.validate_skin(node.skin, context))
        for mesh_id in node.meshes or []:
            steps.append(self._mesh_step(mesh_id, context))
        return self._run_steps(result, steps)

    def _mesh_step(self, mesh_id: str, context: ValidatorContext):
        return lambda: self.mesh_validator.validate_mesh(mesh_id, context)

    def _validate_node_links(self, node_id: str, node: Node, context: ValidatorContext, result: ValidatorResult) -> bool:
        links: Dict[str, List[Any]] = {
            "children": node.children or [],
            "skeletons": node.skeletons or [],
        }
        for label, ids in links.items():
            for linked_id in ids:
                if label == "children" and linked_id == node_id:
                    result.add_error(f"The node {node_id} lists itself as a child", context)
                    return False
                if self._resolve(self.gltf.nodes, linked_id, context.with_segment(label), result, "node") is None:
                    return False
        return True

    @staticmethod
    def _validate_transform(node: Node, context: ValidatorContext, result: ValidatorResult) -> bool:
        for name, size in NODE_TRANSFORM_SIZES:
            values = getattr(node, name)
            if values is None:
                continue
            if len(values) != size or not all(is_number(v) for v in values):
                result.add_error(f"The node.{name} must be an array of {size} numbers", context)
                return False
        return True


class SceneValidator(GltfValidator):
    """A class for validating scenes"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.node_validator = NodeValidator(gltf)

    def validate_scene(self, scene_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(scene_id, "scene", current_context, result):
            return result
        context = self._enter(current_context, "scenes", scene_id)
        scene = self._resolve(self.gltf.scenes, scene_id, context, result, "scene")
        if scene is None:
            return result

        steps = [self._node_step(node_id, context) for node_id in scene.nodes or []]
        return self._run_steps(result, steps)

    def _node_step(self, node_id: str, context: ValidatorContext):
        return lambda: self.node_validator.validate_node(node_id, context)
