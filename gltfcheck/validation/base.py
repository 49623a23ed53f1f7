# gltfcheck validator base
# Shared plumbing for the per-kind validators.
#
# Every per-kind entry point follows the same shape:
#   1. null id where required -> error against the caller's context, return
#   2. extend context with "<collection>[<id>]", resolve; on miss return
#   3. required scalar / enum fields; on violation return
#   4. referenced entities through _run_steps(), which stops the branch after
#      the first step that leaves errors in the result
#   5. cross-field constraints

from __future__ import annotations

import logging
from typing import Any, Callable, Collection, Iterable, Mapping, Optional, TypeVar

from ..core.constants import gl_type_name
from ..core.context import ValidatorContext, extend
from ..core.graph import resolve_or_report_missing
from ..core.model import GlTF
from ..core.result import IssueKind, ValidatorResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

Step = Callable[[], ValidatorResult]


def is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def type_of(value: Any) -> str:
    return type(value).__name__


class GltfValidator:
    """Base class of all validators; holds the document being validated."""

    def __init__(self, gltf: GlTF) -> None:
        self.gltf = gltf

    # -----------------
    # Identifier handling
    # -----------------
    @staticmethod
    def _require_id(
        entity_id: Optional[str],
        kind: str,
        context: Optional[ValidatorContext],
        result: ValidatorResult,
        issue_kind: IssueKind = IssueKind.MISSING_REQUIRED_FIELD,
    ) -> bool:
        if entity_id is None:
            result.add_error(f"The {kind} ID is null", context, kind=issue_kind)
            return False
        return True

    @staticmethod
    def _enter(current_context: Optional[ValidatorContext], collection_name: str, entity_id: str) -> ValidatorContext:
        return extend(current_context, f"{collection_name}[{entity_id}]")

    @staticmethod
    def _resolve(
        collection: Optional[Mapping[str, T]],
        entity_id: str,
        context: ValidatorContext,
        result: ValidatorResult,
        kind: str,
    ) -> Optional[T]:
        return resolve_or_report_missing(collection, entity_id, context, result, kind)

    # -----------------
    # Field checks
    # -----------------
    @staticmethod
    def _require_field(
        value: Any,
        field_name: str,
        context: ValidatorContext,
        result: ValidatorResult,
    ) -> bool:
        if value is None:
            result.add_error(f"The {field_name} is null", context, kind=IssueKind.MISSING_REQUIRED_FIELD)
            return False
        return True

    @staticmethod
    def _check_enum(
        value: Any,
        allowed: Collection[Any],
        field_name: str,
        context: ValidatorContext,
        result: ValidatorResult,
    ) -> bool:
        if isinstance(value, (int, str)) and not isinstance(value, bool) and value in allowed:
            return True
        choices = ", ".join(sorted(gl_type_name(v) if is_int(v) else repr(v) for v in allowed))
        result.add_error(
            f"The {field_name} {gl_type_name(value)} is not valid, must be one of: {choices}",
            context,
            kind=IssueKind.INVALID_VALUE,
        )
        return False

    @staticmethod
    def _check_non_negative_int(
        value: Any,
        field_name: str,
        context: ValidatorContext,
        result: ValidatorResult,
    ) -> bool:
        if is_int(value) and value >= 0:
            return True
        result.add_error(
            f"The {field_name} must be a non-negative integer, got: {value!r}",
            context,
            kind=IssueKind.INVALID_VALUE,
        )
        return False

    @staticmethod
    def _check_null_entries(
        mapping: Mapping[str, Any],
        label: str,
        target_kind: str,
        context: ValidatorContext,
        result: ValidatorResult,
    ) -> bool:
        """Report the first mapping entry without a target identifier."""
        for key, value in mapping.items():
            if value is None:
                result.add_error(
                    f"The {target_kind} ID is null for {label} {key}",
                    context,
                    kind=IssueKind.MALFORMED_MAPPING,
                )
                return False
        return True

    # -----------------
    # Short-circuit
    # -----------------
    @staticmethod
    def _run_steps(result: ValidatorResult, steps: Iterable[Step]) -> ValidatorResult:
        """
        Run steps in order, merging each sub-result into result. Stops after the
        first step that leaves result with errors; later steps may depend on
        data that step just failed to verify.
        """
        for step in steps:
            result.merge(step())
            if result.has_errors():
                break
        return result


__all__ = ["GltfValidator", "Step", "is_int", "is_number", "type_of"]
