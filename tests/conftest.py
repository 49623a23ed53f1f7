"""Shared builders for gltfcheck tests"""
import copy

from gltfcheck.core.constants import GL_FRAGMENT_SHADER, GL_VERTEX_SHADER
from gltfcheck.core.model import Image, Program, Sampler, Shader, Texture

VALID_GLTF = {
    "asset": {"version": "1.0"},
    "scene": "defaultScene",
    "buffers": {
        "buf": {"uri": "box.bin", "byteLength": 840, "type": "arraybuffer"},
    },
    "bufferViews": {
        "bv_indices": {"buffer": "buf", "byteOffset": 0, "byteLength": 72, "target": 34963},
        "bv_vertices": {"buffer": "buf", "byteOffset": 72, "byteLength": 768, "target": 34962},
    },
    "accessors": {
        "acc_indices": {"bufferView": "bv_indices", "byteOffset": 0, "componentType": 5123, "count": 36, "type": "SCALAR"},
        "acc_position": {
            "bufferView": "bv_vertices", "byteOffset": 0, "byteStride": 12, "componentType": 5126,
            "count": 24, "type": "VEC3", "min": [-0.5, -0.5, -0.5], "max": [0.5, 0.5, 0.5],
        },
        "acc_normal": {"bufferView": "bv_vertices", "byteOffset": 288, "byteStride": 12, "componentType": 5126, "count": 24, "type": "VEC3"},
        "acc_texcoord": {"bufferView": "bv_vertices", "byteOffset": 576, "byteStride": 8, "componentType": 5126, "count": 24, "type": "VEC2"},
        "acc_times": {"bufferView": "bv_vertices", "byteOffset": 0, "componentType": 5126, "count": 2, "type": "SCALAR"},
        "acc_translations": {"bufferView": "bv_vertices", "byteOffset": 8, "componentType": 5126, "count": 2, "type": "VEC3"},
    },
    "images": {"img": {"uri": "checker.png"}},
    "samplers": {"smp": {"magFilter": 9729, "minFilter": 9987, "wrapS": 10497, "wrapT": 10497}},
    "textures": {
        "tex": {"source": "img", "sampler": "smp", "format": 6408, "internalFormat": 6408, "target": 3553, "type": 5121},
    },
    "shaders": {
        "vs": {"uri": "vs.glsl", "type": 35633},
        "fs": {"uri": "fs.glsl", "type": 35632},
    },
    "programs": {
        "prog": {"vertexShader": "vs", "fragmentShader": "fs", "attributes": ["a_position", "a_normal", "a_texcoord0"]},
    },
    "techniques": {
        "tech": {
            "program": "prog",
            "parameters": {
                "position": {"type": 35665, "semantic": "POSITION"},
                "normal": {"type": 35665, "semantic": "NORMAL"},
                "texcoord0": {"type": 35664, "semantic": "TEXCOORD_0"},
                "modelViewMatrix": {"type": 35676, "semantic": "MODELVIEW"},
                "projectionMatrix": {"type": 35676, "semantic": "PROJECTION"},
                "diffuse": {"type": 35678, "value": "tex"},
            },
            "attributes": {"a_position": "position", "a_normal": "normal", "a_texcoord0": "texcoord0"},
            "uniforms": {
                "u_modelViewMatrix": "modelViewMatrix",
                "u_projectionMatrix": "projectionMatrix",
                "u_diffuse": "diffuse",
            },
            "states": {"enable": [2929, 2884]},
        },
    },
    "materials": {"mat": {"technique": "tech", "values": {"diffuse": "tex"}}},
    "meshes": {
        "box": {
            "primitives": [
                {
                    "attributes": {"POSITION": "acc_position", "NORMAL": "acc_normal", "TEXCOORD_0": "acc_texcoord"},
                    "indices": "acc_indices",
                    "material": "mat",
                    "mode": 4,
                }
            ]
        }
    },
    "cameras": {
        "cam": {"type": "perspective", "perspective": {"aspectRatio": 1.5, "yfov": 0.66, "znear": 0.01, "zfar": 100.0}},
    },
    "animations": {
        "anim": {
            "channels": [{"sampler": "s0", "target": {"id": "boxNode", "path": "translation"}}],
            "parameters": {"TIME": "acc_times", "translation": "acc_translations"},
            "samplers": {"s0": {"input": "TIME", "output": "translation", "interpolation": "LINEAR"}},
        }
    },
    "nodes": {
        "rootNode": {"children": ["boxNode", "cameraNode"], "matrix": [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]},
        "boxNode": {"meshes": ["box"], "translation": [0, 0, 0], "rotation": [0, 0, 0, 1], "scale": [1, 1, 1]},
        "cameraNode": {"camera": "cam", "translation": [0, 0, 5]},
    },
    "scenes": {"defaultScene": {"nodes": ["rootNode"]}},
}


def make_valid_gltf_dict():
    return copy.deepcopy(VALID_GLTF)


def add_program(gltf, program_id="p"):
    """Add a well-formed program with a vertex/fragment shader pair."""
    gltf.shaders["vs"] = Shader(uri="vs.glsl", type=GL_VERTEX_SHADER)
    gltf.shaders["fs"] = Shader(uri="fs.glsl", type=GL_FRAGMENT_SHADER)
    gltf.programs[program_id] = Program(vertex_shader="vs", fragment_shader="fs")
    return program_id


def add_texture(gltf, texture_id="tex"):
    gltf.images["img"] = Image(uri="checker.png")
    gltf.samplers["smp"] = Sampler()
    gltf.textures[texture_id] = Texture(source="img", sampler="smp")
    return texture_id
