# gltfcheck exceptions
# Content problems never raise; they become ValidationIssue entries. The classes
# below are reserved for conditions that abort a pass or an API call.

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .result import ValidatorResult


class GltfCheckError(Exception):
    """Base class for all gltfcheck exceptions."""
    pass


class ValidatorInternalError(GltfCheckError):
    """Raised when an invariant of the accessor layer or validator wiring is broken."""
    pass


class DocumentStructureError(GltfCheckError):
    """Raised when a parsed mapping cannot be materialized into an entity graph."""
    pass


class DocumentLoadError(GltfCheckError):
    """Raised when a document source cannot be read or fetched."""
    pass


class GltfValidationError(GltfCheckError):
    """Raised by assert_valid_gltf() when validation reports errors."""

    def __init__(self, message: str, result: "ValidatorResult") -> None:
        super().__init__(message)
        self.result = result
