# gltfcheck entity graph accessors
# Read-only lookups over identifier-keyed collections, plus the id generation
# convention shared with entity-synthesis tooling.
#
# Every validator resolves externally supplied identifiers through
# resolve_or_report_missing() so that a miss always produces a diagnostic.

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, TypeVar

from .context import ValidatorContext
from .errors import ValidatorInternalError
from .result import IssueKind, ValidatorResult

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _check_collection(collection: Any, kind: str) -> Mapping[str, Any]:
    if collection is None:
        return {}
    if not isinstance(collection, Mapping):
        raise ValidatorInternalError(
            f"Collection for {kind} must be a mapping, got: {type(collection).__name__}"
        )
    return collection


def _has_key(entries: Mapping[str, Any], entity_id: Any) -> bool:
    try:
        return entity_id in entries
    except TypeError:
        # unhashable ids (lists, objects) can never name an entry
        return False


def resolve_or_report_missing(
    collection: Optional[Mapping[str, T]],
    entity_id: str,
    context: Optional[ValidatorContext],
    result: ValidatorResult,
    kind: str = "entity",
) -> Optional[T]:
    """
    Return the entity named by entity_id, or record a missing-reference error
    in result and return None. A None collection counts as empty.

    Raises:
        ValidatorInternalError if the collection is not a mapping at all, or
        holds None as the entity for entity_id.
    """
    entries = _check_collection(collection, kind)
    if _has_key(entries, entity_id):
        entity = entries[entity_id]
        if entity is None:
            raise ValidatorInternalError(f"The {kind} entry for ID {entity_id} is None")
        return entity
    result.add_error(
        f"The {kind} ID {entity_id} does not exist",
        context,
        kind=IssueKind.MISSING_REFERENCE,
    )
    return None


def contains(collection: Optional[Mapping[str, Any]], entity_id: Any) -> bool:
    return _has_key(_check_collection(collection, "entity"), entity_id)


def get_size(collection: Optional[Mapping[str, Any]]) -> int:
    return len(_check_collection(collection, "entity"))


def generate_id(preferred: str, collection: Optional[Mapping[str, Any]]) -> str:
    """
    Return preferred if it is unused in collection, otherwise preferred suffixed
    with the smallest unused non-negative integer.
    """
    entries = _check_collection(collection, "entity")
    if preferred not in entries:
        return preferred
    counter = 0
    while f"{preferred}{counter}" in entries:
        counter += 1
    return f"{preferred}{counter}"


def add_entity(gltf: Any, collection_name: str, entity_id: str, entity: Any) -> str:
    """Insert entity under entity_id; refuses to overwrite an existing entry."""
    collection = getattr(gltf, collection_name, None)
    if collection is None:
        collection = {}
        setattr(gltf, collection_name, collection)
    _check_collection(collection, collection_name)
    if entity_id in collection:
        raise ValueError(f"{collection_name} already contains an entry with ID {entity_id}")
    collection[entity_id] = entity
    logger.debug("Added %s[%s]", collection_name, entity_id)
    return entity_id


def add_with_generated_id(gltf: Any, collection_name: str, prefix: str, entity: Any) -> str:
    """Insert entity under an id derived from prefix and the collection size."""
    collection = getattr(gltf, collection_name, None)
    preferred = f"{prefix}{get_size(collection)}"
    return add_entity(gltf, collection_name, generate_id(preferred, collection), entity)


__all__ = [
    "resolve_or_report_missing",
    "contains",
    "get_size",
    "generate_id",
    "add_entity",
    "add_with_generated_id",
]
