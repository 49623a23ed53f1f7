# gltfcheck: consistency validator for glTF 1.0 scene documents
#
# Walks the identifier-linked entity graph of a document (techniques, programs,
# shaders, textures, materials, meshes, accessors, animations, ...), resolves every
# cross reference and reports errors and warnings with the path at which they occur.
#
# License: MIT

import logging

__version__ = "0.1.0"

# Global logger for the package
logger = logging.getLogger(__name__)
logger.setLevel(logging.WARNING)

# Handler to stderr
handler = logging.StreamHandler()
handler.setLevel(logging.DEBUG)
formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
handler.setFormatter(formatter)
logger.addHandler(handler)

# Suppress verbose logs from external libraries (e.g., requests)
logging.getLogger("urllib3").setLevel(logging.WARNING)
logging.getLogger("requests").setLevel(logging.WARNING)

from .core import (  # noqa: E402
    DocumentLoadError,
    DocumentStructureError,
    GlTF,
    GltfCheckError,
    GltfValidationError,
    IssueKind,
    Severity,
    ValidationIssue,
    ValidatorContext,
    ValidatorInternalError,
    ValidatorResult,
)
from .validation import EntityKind, Validator, assert_valid_gltf, validate_gltf  # noqa: E402

__all__ = [
    "GlTF",
    "Validator",
    "EntityKind",
    "validate_gltf",
    "assert_valid_gltf",
    "ValidatorContext",
    "ValidatorResult",
    "ValidationIssue",
    "Severity",
    "IssueKind",
    "GltfCheckError",
    "ValidatorInternalError",
    "DocumentStructureError",
    "DocumentLoadError",
    "GltfValidationError",
]
