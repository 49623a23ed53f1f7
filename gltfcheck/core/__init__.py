# gltfcheck core: diagnostic context/result, entity model and graph accessors.
# No third-party imports here so the core stays importable everywhere.

from .context import ValidatorContext
from .errors import (
    DocumentLoadError,
    DocumentStructureError,
    GltfCheckError,
    GltfValidationError,
    ValidatorInternalError,
)
from .model import GlTF
from .result import IssueKind, Severity, ValidationIssue, ValidatorResult

__all__ = [
    "ValidatorContext",
    "ValidatorResult",
    "ValidationIssue",
    "Severity",
    "IssueKind",
    "GlTF",
    "GltfCheckError",
    "ValidatorInternalError",
    "DocumentStructureError",
    "DocumentLoadError",
    "GltfValidationError",
]
