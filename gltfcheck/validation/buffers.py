# gltfcheck buffer, buffer view and accessor validators

from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import (
    ACCESSOR_COMPONENT_TYPES,
    ACCESSOR_TYPE_SIZES,
    BUFFER_TYPES,
    BUFFER_VIEW_TARGETS,
)
from ..core.context import ValidatorContext
from ..core.model import Accessor, BufferView, GlTF
from ..core.result import IssueKind, ValidatorResult
from .base import GltfValidator, is_int

logger = logging.getLogger(__name__)


class BufferValidator(GltfValidator):
    """A class for validating buffers"""

    def validate_buffer(self, buffer_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(buffer_id, "buffer", current_context, result):
            return result
        context = self._enter(current_context, "buffers", buffer_id)
        buffer = self._resolve(self.gltf.buffers, buffer_id, context, result, "buffer")
        if buffer is None:
            return result

        if not self._require_field(buffer.uri, "buffer.uri", context, result):
            return result
        if buffer.byte_length is not None:
            if not self._check_non_negative_int(buffer.byte_length, "buffer.byteLength", context, result):
                return result
        if buffer.type is not None and buffer.type not in BUFFER_TYPES:
            result.add_warning(
                f"The buffer.type {buffer.type!r} is not one of {sorted(BUFFER_TYPES)}",
                context,
                kind=IssueKind.TYPE_SHAPE,
            )
        return result


class BufferViewValidator(GltfValidator):
    """A class for validating buffer views"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.buffer_validator = BufferValidator(gltf)

    def validate_buffer_view(
        self, buffer_view_id: Optional[str], current_context: Optional[ValidatorContext] = None
    ) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(buffer_view_id, "bufferView", current_context, result):
            return result
        context = self._enter(current_context, "bufferViews", buffer_view_id)
        view = self._resolve(self.gltf.buffer_views, buffer_view_id, context, result, "bufferView")
        if view is None:
            return result

        if not self._require_id(view.buffer, "buffer", context, result):
            return result
        if not self._require_field(view.byte_offset, "bufferView.byteOffset", context, result):
            return result
        if not self._check_non_negative_int(view.byte_offset, "bufferView.byteOffset", context, result):
            return result
        if view.byte_length is not None:
            if not self._check_non_negative_int(view.byte_length, "bufferView.byteLength", context, result):
                return result
        if view.target is not None:
            if not self._check_enum(view.target, BUFFER_VIEW_TARGETS, "bufferView.target", context, result):
                return result

        self._run_steps(result, [lambda: self.buffer_validator.validate_buffer(view.buffer, context)])
        if result.has_errors():
            return result

        return result.merge(self._validate_range(view, context))

    def _validate_range(self, view: BufferView, context: ValidatorContext) -> ValidatorResult:
        result = ValidatorResult()
        buffer = self.gltf.buffers[view.buffer]
        if not is_int(buffer.byte_length):
            return result
        end = view.byte_offset + (view.byte_length or 0)
        if end > buffer.byte_length:
            result.add_error(
                f"The bufferView ends at byte {end}, but buffer {view.buffer} "
                f"only has {buffer.byte_length} bytes",
                context,
                kind=IssueKind.INVALID_VALUE,
            )
        return result


class AccessorValidator(GltfValidator):
    """A class for validating accessors"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.buffer_view_validator = BufferViewValidator(gltf)

    def validate_accessor(
        self, accessor_id: Optional[str], current_context: Optional[ValidatorContext] = None
    ) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(accessor_id, "accessor", current_context, result):
            return result
        context = self._enter(current_context, "accessors", accessor_id)
        accessor = self._resolve(self.gltf.accessors, accessor_id, context, result, "accessor")
        if accessor is None:
            return result

        if not self._validate_fields(accessor, context, result):
            return result

        self._run_steps(result, [
            lambda: self.buffer_view_validator.validate_buffer_view(accessor.buffer_view, context),
        ])
        if result.has_errors():
            return result

        self._validate_bounds(accessor, context, result)
        return result

    def _validate_fields(self, accessor: Accessor, context: ValidatorContext, result: ValidatorResult) -> bool:
        if not self._require_id(accessor.buffer_view, "bufferView", context, result):
            return False
        if not self._require_field(accessor.byte_offset, "accessor.byteOffset", context, result):
            return False
        if not self._check_non_negative_int(accessor.byte_offset, "accessor.byteOffset", context, result):
            return False
        if not self._require_field(accessor.component_type, "accessor.componentType", context, result):
            return False
        if not self._check_enum(accessor.component_type, ACCESSOR_COMPONENT_TYPES, "accessor.componentType", context, result):
            return False
        if not self._require_field(accessor.count, "accessor.count", context, result):
            return False
        if not is_int(accessor.count) or accessor.count < 1:
            result.add_error(f"The accessor.count must be >= 1, got: {accessor.count!r}", context)
            return False
        if not self._require_field(accessor.type, "accessor.type", context, result):
            return False
        if not self._check_enum(accessor.type, ACCESSOR_TYPE_SIZES, "accessor.type", context, result):
            return False
        if accessor.byte_stride is not None:
            if not is_int(accessor.byte_stride) or not 0 <= accessor.byte_stride <= 255:
                result.add_error(f"The accessor.byteStride must be in [0, 255], got: {accessor.byte_stride!r}", context)
                return False
        return True

    @staticmethod
    def _validate_bounds(accessor: Accessor, context: ValidatorContext, result: ValidatorResult) -> None:
        expected = ACCESSOR_TYPE_SIZES[accessor.type]
        for name, values in (("min", accessor.min), ("max", accessor.max)):
            if values is not None and len(values) != expected:
                result.add_warning(
                    f"The accessor.{name} has {len(values)} elements, but type {accessor.type} has {expected} components",
                    context,
                    kind=IssueKind.TYPE_SHAPE,
                )
