# gltfcheck entity model
# Typed, identifier-keyed entity graph of a glTF 1.0 document.
#
# Conventions:
# - Identifier-valued fields hold Optional[str]; None means "not set".
# - Mapping fields hold Optional[Dict[...]]; None means "absent" and is read as empty.
# - Field values are stored as found in the source; type and range checks belong
#   to the validators, never to the materializer.
#
# Public API:
# - GlTF.from_dict(data) -> GlTF   (materialize an already parsed JSON object)

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

from .errors import DocumentStructureError

T = TypeVar("T")


def _require_mapping(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DocumentStructureError(f"{where} must be an object, got: {type(value).__name__}")
    return value


def _optional_mapping(data: Mapping[str, Any], key: str, where: str) -> Optional[Dict[str, Any]]:
    value = data.get(key)
    if value is None:
        return None
    return dict(_require_mapping(value, f"{where}.{key}"))


def _optional_list(data: Mapping[str, Any], key: str, where: str) -> Optional[List[Any]]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise DocumentStructureError(f"{where}.{key} must be an array, got: {type(value).__name__}")
    return list(value)


@dataclass
class Buffer:
    uri: Optional[str] = None
    byte_length: Optional[int] = None
    type: Optional[str] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "buffer") -> "Buffer":
        return Buffer(
            uri=data.get("uri"),
            byte_length=data.get("byteLength"),
            type=data.get("type"),
            name=data.get("name"),
        )


@dataclass
class BufferView:
    buffer: Optional[str] = None
    byte_offset: Optional[int] = None
    byte_length: Optional[int] = None
    target: Optional[int] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "bufferView") -> "BufferView":
        return BufferView(
            buffer=data.get("buffer"),
            byte_offset=data.get("byteOffset"),
            byte_length=data.get("byteLength"),
            target=data.get("target"),
            name=data.get("name"),
        )


@dataclass
class Accessor:
    buffer_view: Optional[str] = None
    byte_offset: Optional[int] = None
    byte_stride: Optional[int] = None
    component_type: Optional[int] = None
    count: Optional[int] = None
    type: Optional[str] = None
    min: Optional[List[Any]] = None
    max: Optional[List[Any]] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "accessor") -> "Accessor":
        return Accessor(
            buffer_view=data.get("bufferView"),
            byte_offset=data.get("byteOffset"),
            byte_stride=data.get("byteStride"),
            component_type=data.get("componentType"),
            count=data.get("count"),
            type=data.get("type"),
            min=_optional_list(data, "min", where),
            max=_optional_list(data, "max", where),
            name=data.get("name"),
        )


@dataclass
class Image:
    uri: Optional[str] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "image") -> "Image":
        return Image(uri=data.get("uri"), name=data.get("name"))


@dataclass
class Sampler:
    mag_filter: Optional[int] = None
    min_filter: Optional[int] = None
    wrap_s: Optional[int] = None
    wrap_t: Optional[int] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "sampler") -> "Sampler":
        return Sampler(
            mag_filter=data.get("magFilter"),
            min_filter=data.get("minFilter"),
            wrap_s=data.get("wrapS"),
            wrap_t=data.get("wrapT"),
            name=data.get("name"),
        )


@dataclass
class Texture:
    source: Optional[str] = None
    sampler: Optional[str] = None
    format: Optional[int] = None
    internal_format: Optional[int] = None
    target: Optional[int] = None
    type: Optional[int] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "texture") -> "Texture":
        return Texture(
            source=data.get("source"),
            sampler=data.get("sampler"),
            format=data.get("format"),
            internal_format=data.get("internalFormat"),
            target=data.get("target"),
            type=data.get("type"),
            name=data.get("name"),
        )


@dataclass
class Shader:
    uri: Optional[str] = None
    type: Optional[int] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "shader") -> "Shader":
        return Shader(uri=data.get("uri"), type=data.get("type"), name=data.get("name"))


@dataclass
class Program:
    vertex_shader: Optional[str] = None
    fragment_shader: Optional[str] = None
    attributes: Optional[List[str]] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "program") -> "Program":
        return Program(
            vertex_shader=data.get("vertexShader"),
            fragment_shader=data.get("fragmentShader"),
            attributes=_optional_list(data, "attributes", where),
            name=data.get("name"),
        )


@dataclass
class TechniqueParameters:
    type: Optional[int] = None
    semantic: Optional[str] = None
    count: Optional[int] = None
    node: Optional[str] = None
    value: Any = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "parameter") -> "TechniqueParameters":
        return TechniqueParameters(
            type=data.get("type"),
            semantic=data.get("semantic"),
            count=data.get("count"),
            node=data.get("node"),
            value=data.get("value"),
        )


@dataclass
class Technique:
    program: Optional[str] = None
    parameters: Optional[Dict[str, TechniqueParameters]] = None
    attributes: Optional[Dict[str, Optional[str]]] = None
    uniforms: Optional[Dict[str, Optional[str]]] = None
    states: Optional[Dict[str, Any]] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "technique") -> "Technique":
        return Technique(
            program=data.get("program"),
            parameters=_entity_map(data.get("parameters"), f"{where}.parameters", TechniqueParameters.from_dict),
            attributes=_optional_mapping(data, "attributes", where),
            uniforms=_optional_mapping(data, "uniforms", where),
            states=_optional_mapping(data, "states", where),
            name=data.get("name"),
        )


@dataclass
class Material:
    technique: Optional[str] = None
    values: Optional[Dict[str, Any]] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "material") -> "Material":
        return Material(
            technique=data.get("technique"),
            values=_optional_mapping(data, "values", where),
            name=data.get("name"),
        )


@dataclass
class MeshPrimitive:
    attributes: Optional[Dict[str, Optional[str]]] = None
    indices: Optional[str] = None
    material: Optional[str] = None
    mode: Optional[int] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "primitive") -> "MeshPrimitive":
        return MeshPrimitive(
            attributes=_optional_mapping(data, "attributes", where),
            indices=data.get("indices"),
            material=data.get("material"),
            mode=data.get("mode"),
        )


@dataclass
class Mesh:
    primitives: Optional[List[MeshPrimitive]] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "mesh") -> "Mesh":
        raw = _optional_list(data, "primitives", where)
        primitives = None
        if raw is not None:
            primitives = [
                MeshPrimitive.from_dict(_require_mapping(p, f"{where}.primitives[{i}]"), f"{where}.primitives[{i}]")
                for i, p in enumerate(raw)
            ]
        return Mesh(primitives=primitives, name=data.get("name"))


@dataclass
class Camera:
    type: Optional[str] = None
    perspective: Optional[Dict[str, Any]] = None
    orthographic: Optional[Dict[str, Any]] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "camera") -> "Camera":
        return Camera(
            type=data.get("type"),
            perspective=_optional_mapping(data, "perspective", where),
            orthographic=_optional_mapping(data, "orthographic", where),
            name=data.get("name"),
        )


@dataclass
class AnimationChannelTarget:
    id: Optional[str] = None
    path: Optional[str] = None


@dataclass
class AnimationChannel:
    sampler: Optional[str] = None
    target: Optional[AnimationChannelTarget] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "channel") -> "AnimationChannel":
        target = None
        raw_target = data.get("target")
        if raw_target is not None:
            t = _require_mapping(raw_target, f"{where}.target")
            target = AnimationChannelTarget(id=t.get("id"), path=t.get("path"))
        return AnimationChannel(sampler=data.get("sampler"), target=target)


@dataclass
class AnimationSampler:
    input: Optional[str] = None
    output: Optional[str] = None
    interpolation: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "sampler") -> "AnimationSampler":
        return AnimationSampler(
            input=data.get("input"),
            output=data.get("output"),
            interpolation=data.get("interpolation"),
        )


@dataclass
class Animation:
    channels: Optional[List[AnimationChannel]] = None
    parameters: Optional[Dict[str, Optional[str]]] = None
    samplers: Optional[Dict[str, AnimationSampler]] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "animation") -> "Animation":
        raw = _optional_list(data, "channels", where)
        channels = None
        if raw is not None:
            channels = [
                AnimationChannel.from_dict(_require_mapping(c, f"{where}.channels[{i}]"), f"{where}.channels[{i}]")
                for i, c in enumerate(raw)
            ]
        return Animation(
            channels=channels,
            parameters=_optional_mapping(data, "parameters", where),
            samplers=_entity_map(data.get("samplers"), f"{where}.samplers", AnimationSampler.from_dict),
            name=data.get("name"),
        )


@dataclass
class Skin:
    inverse_bind_matrices: Optional[str] = None
    joint_names: Optional[List[str]] = None
    bind_shape_matrix: Optional[List[float]] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "skin") -> "Skin":
        return Skin(
            inverse_bind_matrices=data.get("inverseBindMatrices"),
            joint_names=_optional_list(data, "jointNames", where),
            bind_shape_matrix=_optional_list(data, "bindShapeMatrix", where),
            name=data.get("name"),
        )


@dataclass
class Node:
    camera: Optional[str] = None
    children: Optional[List[str]] = None
    meshes: Optional[List[str]] = None
    skin: Optional[str] = None
    skeletons: Optional[List[str]] = None
    joint_name: Optional[str] = None
    matrix: Optional[List[float]] = None
    translation: Optional[List[float]] = None
    rotation: Optional[List[float]] = None
    scale: Optional[List[float]] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "node") -> "Node":
        return Node(
            camera=data.get("camera"),
            children=_optional_list(data, "children", where),
            meshes=_optional_list(data, "meshes", where),
            skin=data.get("skin"),
            skeletons=_optional_list(data, "skeletons", where),
            joint_name=data.get("jointName"),
            matrix=_optional_list(data, "matrix", where),
            translation=_optional_list(data, "translation", where),
            rotation=_optional_list(data, "rotation", where),
            scale=_optional_list(data, "scale", where),
            name=data.get("name"),
        )


@dataclass
class Scene:
    nodes: Optional[List[str]] = None
    name: Optional[str] = None

    @staticmethod
    def from_dict(data: Mapping[str, Any], where: str = "scene") -> "Scene":
        return Scene(nodes=_optional_list(data, "nodes", where), name=data.get("name"))


def _entity_map(
    raw: Any,
    where: str,
    factory: Callable[[Mapping[str, Any], str], T],
) -> Optional[Dict[str, T]]:
    if raw is None:
        return None
    mapping = _require_mapping(raw, where)
    out: Dict[str, T] = {}
    for key, value in mapping.items():
        path = f"{where}[{key}]"
        out[key] = factory(_require_mapping(value, path), path)
    return out


# JSON member name -> (attribute name, factory); insertion order is the
# order in which a document declares its collections.
_COLLECTIONS: Dict[str, Any] = {
    "buffers": ("buffers", Buffer.from_dict),
    "bufferViews": ("buffer_views", BufferView.from_dict),
    "accessors": ("accessors", Accessor.from_dict),
    "images": ("images", Image.from_dict),
    "samplers": ("samplers", Sampler.from_dict),
    "textures": ("textures", Texture.from_dict),
    "shaders": ("shaders", Shader.from_dict),
    "programs": ("programs", Program.from_dict),
    "techniques": ("techniques", Technique.from_dict),
    "materials": ("materials", Material.from_dict),
    "meshes": ("meshes", Mesh.from_dict),
    "cameras": ("cameras", Camera.from_dict),
    "animations": ("animations", Animation.from_dict),
    "skins": ("skins", Skin.from_dict),
    "nodes": ("nodes", Node.from_dict),
    "scenes": ("scenes", Scene.from_dict),
}


@dataclass
class GlTF:
    """Root of the entity graph. Every collection maps identifiers to entities."""
    buffers: Dict[str, Buffer] = field(default_factory=dict)
    buffer_views: Dict[str, BufferView] = field(default_factory=dict)
    accessors: Dict[str, Accessor] = field(default_factory=dict)
    images: Dict[str, Image] = field(default_factory=dict)
    samplers: Dict[str, Sampler] = field(default_factory=dict)
    textures: Dict[str, Texture] = field(default_factory=dict)
    shaders: Dict[str, Shader] = field(default_factory=dict)
    programs: Dict[str, Program] = field(default_factory=dict)
    techniques: Dict[str, Technique] = field(default_factory=dict)
    materials: Dict[str, Material] = field(default_factory=dict)
    meshes: Dict[str, Mesh] = field(default_factory=dict)
    cameras: Dict[str, Camera] = field(default_factory=dict)
    animations: Dict[str, Animation] = field(default_factory=dict)
    skins: Dict[str, Skin] = field(default_factory=dict)
    nodes: Dict[str, Node] = field(default_factory=dict)
    scenes: Dict[str, Scene] = field(default_factory=dict)
    scene: Optional[str] = None
    asset: Optional[Dict[str, Any]] = None
    extensions_used: Optional[List[str]] = None

    @staticmethod
    def from_dict(data: Any) -> "GlTF":
        """
        Materialize an already parsed glTF JSON object.

        Raises:
            DocumentStructureError when a collection or entity is not a JSON object.
        """
        root = _require_mapping(data, "glTF")
        kwargs: Dict[str, Any] = {}
        for json_name, (attr, factory) in _COLLECTIONS.items():
            kwargs[attr] = _entity_map(root.get(json_name), json_name, factory) or {}
        kwargs["scene"] = root.get("scene")
        kwargs["asset"] = _optional_mapping(root, "asset", "glTF")
        kwargs["extensions_used"] = _optional_list(root, "extensionsUsed", "glTF")
        return GlTF(**kwargs)


__all__ = [
    "Buffer",
    "BufferView",
    "Accessor",
    "Image",
    "Sampler",
    "Texture",
    "Shader",
    "Program",
    "TechniqueParameters",
    "Technique",
    "Material",
    "MeshPrimitive",
    "Mesh",
    "Camera",
    "AnimationChannelTarget",
    "AnimationChannel",
    "AnimationSampler",
    "Animation",
    "Skin",
    "Node",
    "Scene",
    "GlTF",
]
