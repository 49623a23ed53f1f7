# gltfcheck validator result
# Ordered accumulator of severity-tagged, path-scoped findings.
#
# Ordering: merge() appends the merged result after the entries already present,
# so a parent's own checks always precede the checks of the entities it references.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .context import ValidatorContext


class Severity(Enum):
    """Severity of a single finding"""
    ERROR = "error"
    WARNING = "warning"


class IssueKind(Enum):
    """Classification of findings"""
    MISSING_REFERENCE = "missing_reference"
    MISSING_REQUIRED_FIELD = "missing_required_field"
    MALFORMED_MAPPING = "malformed_mapping"
    INVALID_VALUE = "invalid_value"
    TYPE_SHAPE = "type_shape"
    UNSUPPORTED_DEFAULT = "unsupported_default"


@dataclass(frozen=True)
class ValidationIssue:
    severity: Severity
    message: str
    path: str
    kind: IssueKind = IssueKind.INVALID_VALUE

    def __str__(self) -> str:
        label = self.severity.name.ljust(7)
        where = self.path or "<document>"
        return f"{label}{where}: {self.message} ({self.kind.value})"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "path": self.path,
            "kind": self.kind.value,
        }


def _render(context: Optional[ValidatorContext]) -> str:
    return context.path if context is not None else ""


def _by_path(issue: ValidationIssue) -> str:
    return issue.path


class ValidatorResult:
    """Findings of one validation call. Zero entries means the checked part is clean."""

    def __init__(self) -> None:
        self._issues: List[ValidationIssue] = []

    def add_error(
        self,
        message: str,
        context: Optional[ValidatorContext],
        kind: IssueKind = IssueKind.INVALID_VALUE,
    ) -> None:
        self._issues.append(ValidationIssue(Severity.ERROR, message, _render(context), kind))

    def add_warning(
        self,
        message: str,
        context: Optional[ValidatorContext],
        kind: IssueKind = IssueKind.TYPE_SHAPE,
    ) -> None:
        self._issues.append(ValidationIssue(Severity.WARNING, message, _render(context), kind))

    def merge(self, other: "ValidatorResult") -> "ValidatorResult":
        if other is not self:
            self._issues.extend(other._issues)
        return self

    def has_errors(self) -> bool:
        return any(i.severity is Severity.ERROR for i in self._issues)

    def has_warnings(self) -> bool:
        return any(i.severity is Severity.WARNING for i in self._issues)

    @property
    def is_valid(self) -> bool:
        return not self.has_errors()

    @property
    def issues(self) -> Tuple[ValidationIssue, ...]:
        return tuple(self._issues)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self._issues if i.severity is Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self._issues if i.severity is Severity.WARNING]

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self):
        return iter(self._issues)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidatorResult):
            return NotImplemented
        return self._issues == other._issues

    def __repr__(self) -> str:
        return f"ValidatorResult(errors={len(self.errors)}, warnings={len(self.warnings)})"

    def to_display_string(self) -> str:
        """
        Render all findings for humans: errors first, then warnings, each group
        sorted by path. Findings at the same path keep the order the checks ran.
        """
        if not self._issues:
            return "No issues found"
        lines = [str(i) for i in sorted(self.errors, key=_by_path)]
        lines += [str(i) for i in sorted(self.warnings, key=_by_path)]
        lines.append(f"{len(self.errors)} error(s), {len(self.warnings)} warning(s)")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.is_valid,
            "errors": [i.to_dict() for i in self.errors],
            "warnings": [i.to_dict() for i in self.warnings],
        }


__all__ = [
    "Severity",
    "IssueKind",
    "ValidationIssue",
    "ValidatorResult",
]
