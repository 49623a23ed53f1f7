# gltfcheck generation module
# Entity-synthesis helpers that add well-formed entities to a document.

from .technique_builder import TechniqueBuilder

__all__ = ["TechniqueBuilder"]
