# gltfcheck validation module
# One validator class per entity kind plus the top-level Validator.

from .animations import AnimationValidator
from .base import GltfValidator
from .buffers import AccessorValidator, BufferValidator, BufferViewValidator
from .materials import MaterialValidator
from .meshes import MeshValidator
from .programs import ProgramValidator, ShaderValidator
from .scenes import CameraValidator, NodeValidator, SceneValidator, SkinValidator
from .techniques import TechniqueValidator
from .textures import ImageValidator, SamplerValidator, TextureValidator
from .validator import EntityKind, Validator, assert_valid_gltf, validate_gltf

__all__ = [
    "GltfValidator",
    "BufferValidator",
    "BufferViewValidator",
    "AccessorValidator",
    "ImageValidator",
    "SamplerValidator",
    "TextureValidator",
    "ShaderValidator",
    "ProgramValidator",
    "TechniqueValidator",
    "MaterialValidator",
    "MeshValidator",
    "CameraValidator",
    "AnimationValidator",
    "SkinValidator",
    "NodeValidator",
    "SceneValidator",
    "EntityKind",
    "Validator",
    "validate_gltf",
    "assert_valid_gltf",
]
