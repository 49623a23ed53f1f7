# gltfcheck GL constants
# Numeric codes used by glTF 1.0 documents (WebGL/OpenGL ES enum values) and the
# closed sets the validators check against.

from __future__ import annotations

from typing import Dict, FrozenSet

# Component / scalar types
GL_BYTE = 5120
GL_UNSIGNED_BYTE = 5121
GL_SHORT = 5122
GL_UNSIGNED_SHORT = 5123
GL_INT = 5124
GL_UNSIGNED_INT = 5125
GL_FLOAT = 5126

# Uniform / attribute types
GL_FLOAT_VEC2 = 35664
GL_FLOAT_VEC3 = 35665
GL_FLOAT_VEC4 = 35666
GL_INT_VEC2 = 35667
GL_INT_VEC3 = 35668
GL_INT_VEC4 = 35669
GL_BOOL = 35670
GL_BOOL_VEC2 = 35671
GL_BOOL_VEC3 = 35672
GL_BOOL_VEC4 = 35673
GL_FLOAT_MAT2 = 35674
GL_FLOAT_MAT3 = 35675
GL_FLOAT_MAT4 = 35676
GL_SAMPLER_2D = 35678

# Shaders
GL_FRAGMENT_SHADER = 35632
GL_VERTEX_SHADER = 35633

# Buffer view targets
GL_ARRAY_BUFFER = 34962
GL_ELEMENT_ARRAY_BUFFER = 34963

# Texture targets, formats and texel types
GL_TEXTURE_2D = 3553
GL_ALPHA = 6406
GL_RGB = 6407
GL_RGBA = 6408
GL_LUMINANCE = 6409
GL_LUMINANCE_ALPHA = 6410
GL_UNSIGNED_SHORT_5_6_5 = 33635
GL_UNSIGNED_SHORT_4_4_4_4 = 32819
GL_UNSIGNED_SHORT_5_5_5_1 = 32820

# Sampler filters and wrap modes
GL_NEAREST = 9728
GL_LINEAR = 9729
GL_NEAREST_MIPMAP_NEAREST = 9984
GL_LINEAR_MIPMAP_NEAREST = 9985
GL_NEAREST_MIPMAP_LINEAR = 9986
GL_LINEAR_MIPMAP_LINEAR = 9987
GL_CLAMP_TO_EDGE = 33071
GL_MIRRORED_REPEAT = 33648
GL_REPEAT = 10497

# Primitive modes
GL_POINTS = 0
GL_LINES = 1
GL_LINE_LOOP = 2
GL_LINE_STRIP = 3
GL_TRIANGLES = 4
GL_TRIANGLE_STRIP = 5
GL_TRIANGLE_FAN = 6


TECHNIQUE_PARAMETER_TYPES: FrozenSet[int] = frozenset({
    GL_BYTE,
    GL_UNSIGNED_BYTE,
    GL_SHORT,
    GL_UNSIGNED_SHORT,
    GL_INT,
    GL_UNSIGNED_INT,
    GL_FLOAT,
    GL_FLOAT_VEC2,
    GL_FLOAT_VEC3,
    GL_FLOAT_VEC4,
    GL_INT_VEC2,
    GL_INT_VEC3,
    GL_INT_VEC4,
    GL_BOOL,
    GL_BOOL_VEC2,
    GL_BOOL_VEC3,
    GL_BOOL_VEC4,
    GL_FLOAT_MAT2,
    GL_FLOAT_MAT3,
    GL_FLOAT_MAT4,
    GL_SAMPLER_2D,
})

SHADER_TYPES: FrozenSet[int] = frozenset({GL_VERTEX_SHADER, GL_FRAGMENT_SHADER})

BUFFER_VIEW_TARGETS: FrozenSet[int] = frozenset({GL_ARRAY_BUFFER, GL_ELEMENT_ARRAY_BUFFER})

BUFFER_TYPES: FrozenSet[str] = frozenset({"arraybuffer", "text"})

ACCESSOR_COMPONENT_TYPES: FrozenSet[int] = frozenset({
    GL_BYTE,
    GL_UNSIGNED_BYTE,
    GL_SHORT,
    GL_UNSIGNED_SHORT,
    GL_UNSIGNED_INT,
    GL_FLOAT,
})

# Number of components per accessor element type
ACCESSOR_TYPE_SIZES: Dict[str, int] = {
    "SCALAR": 1,
    "VEC2": 2,
    "VEC3": 3,
    "VEC4": 4,
    "MAT2": 4,
    "MAT3": 9,
    "MAT4": 16,
}

TEXTURE_FORMATS: FrozenSet[int] = frozenset({GL_ALPHA, GL_RGB, GL_RGBA, GL_LUMINANCE, GL_LUMINANCE_ALPHA})
TEXTURE_TARGETS: FrozenSet[int] = frozenset({GL_TEXTURE_2D})
TEXTURE_TYPES: FrozenSet[int] = frozenset({
    GL_UNSIGNED_BYTE,
    GL_UNSIGNED_SHORT_5_6_5,
    GL_UNSIGNED_SHORT_4_4_4_4,
    GL_UNSIGNED_SHORT_5_5_5_1,
})

SAMPLER_MAG_FILTERS: FrozenSet[int] = frozenset({GL_NEAREST, GL_LINEAR})
SAMPLER_MIN_FILTERS: FrozenSet[int] = frozenset({
    GL_NEAREST,
    GL_LINEAR,
    GL_NEAREST_MIPMAP_NEAREST,
    GL_LINEAR_MIPMAP_NEAREST,
    GL_NEAREST_MIPMAP_LINEAR,
    GL_LINEAR_MIPMAP_LINEAR,
})
SAMPLER_WRAP_MODES: FrozenSet[int] = frozenset({GL_CLAMP_TO_EDGE, GL_MIRRORED_REPEAT, GL_REPEAT})

PRIMITIVE_MODES: FrozenSet[int] = frozenset({
    GL_POINTS,
    GL_LINES,
    GL_LINE_LOOP,
    GL_LINE_STRIP,
    GL_TRIANGLES,
    GL_TRIANGLE_STRIP,
    GL_TRIANGLE_FAN,
})

CAMERA_TYPES: FrozenSet[str] = frozenset({"perspective", "orthographic"})
ANIMATION_PATHS: FrozenSet[str] = frozenset({"translation", "rotation", "scale"})
ANIMATION_INTERPOLATIONS: FrozenSet[str] = frozenset({"LINEAR"})

# Readable names for diagnostics
GL_TYPE_NAMES: Dict[int, str] = {
    GL_BYTE: "BYTE",
    GL_UNSIGNED_BYTE: "UNSIGNED_BYTE",
    GL_SHORT: "SHORT",
    GL_UNSIGNED_SHORT: "UNSIGNED_SHORT",
    GL_INT: "INT",
    GL_UNSIGNED_INT: "UNSIGNED_INT",
    GL_FLOAT: "FLOAT",
    GL_FLOAT_VEC2: "FLOAT_VEC2",
    GL_FLOAT_VEC3: "FLOAT_VEC3",
    GL_FLOAT_VEC4: "FLOAT_VEC4",
    GL_INT_VEC2: "INT_VEC2",
    GL_INT_VEC3: "INT_VEC3",
    GL_INT_VEC4: "INT_VEC4",
    GL_BOOL: "BOOL",
    GL_BOOL_VEC2: "BOOL_VEC2",
    GL_BOOL_VEC3: "BOOL_VEC3",
    GL_BOOL_VEC4: "BOOL_VEC4",
    GL_FLOAT_MAT2: "FLOAT_MAT2",
    GL_FLOAT_MAT3: "FLOAT_MAT3",
    GL_FLOAT_MAT4: "FLOAT_MAT4",
    GL_SAMPLER_2D: "SAMPLER_2D",
    GL_VERTEX_SHADER: "VERTEX_SHADER",
    GL_FRAGMENT_SHADER: "FRAGMENT_SHADER",
}


def gl_type_name(code: object) -> str:
    """Return a readable name for a GL code, falling back to the raw value."""
    if isinstance(code, int) and code in GL_TYPE_NAMES:
        return f"{GL_TYPE_NAMES[code]} ({code})"
    return repr(code)
