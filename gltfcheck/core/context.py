# gltfcheck validator context
# Immutable breadcrumb trail describing where in the entity graph a check happens,
# e.g. "techniques[t1].uniform u_color.technique.parameters[color]".

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

SEPARATOR = "."


@dataclass(frozen=True)
class ValidatorContext:
    """
    One node of a linked path. Extending a context allocates a new node that
    references its parent; existing nodes are never modified, so a context can
    be shared freely between sibling checks and threads.
    """
    parent: Optional["ValidatorContext"] = None
    segment: str = ""

    @staticmethod
    def root() -> "ValidatorContext":
        return ValidatorContext()

    def with_segment(self, segment: str) -> "ValidatorContext":
        return ValidatorContext(parent=self, segment=segment)

    def segments(self) -> List[str]:
        parts: List[str] = []
        node: Optional[ValidatorContext] = self
        while node is not None:
            if node.segment:
                parts.append(node.segment)
            node = node.parent
        parts.reverse()
        return parts

    @property
    def path(self) -> str:
        return SEPARATOR.join(self.segments())

    def __str__(self) -> str:
        return self.path


def extend(context: Optional[ValidatorContext], segment: str) -> ValidatorContext:
    """Extend an optional context; None stands for the root."""
    base = context if context is not None else ValidatorContext.root()
    return base.with_segment(segment)
