# gltfcheck image, sampler and texture validators

from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import (
    SAMPLER_MAG_FILTERS,
    SAMPLER_MIN_FILTERS,
    SAMPLER_WRAP_MODES,
    TEXTURE_FORMATS,
    TEXTURE_TARGETS,
    TEXTURE_TYPES,
)
from ..core.context import ValidatorContext
from ..core.model import GlTF
from ..core.result import IssueKind, ValidatorResult
from .base import GltfValidator

logger = logging.getLogger(__name__)


class ImageValidator(GltfValidator):
    """A class for validating images"""

    def validate_image(self, image_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(image_id, "image", current_context, result):
            return result
        context = self._enter(current_context, "images", image_id)
        image = self._resolve(self.gltf.images, image_id, context, result, "image")
        if image is None:
            return result
        if not image.uri:
            # Payload may still be supplied by an extension (e.g. binary glTF)
            result.add_warning("The image.uri is empty", context, kind=IssueKind.TYPE_SHAPE)
        return result


class SamplerValidator(GltfValidator):
    """A class for validating samplers"""

    def validate_sampler(self, sampler_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(sampler_id, "sampler", current_context, result):
            return result
        context = self._enter(current_context, "samplers", sampler_id)
        sampler = self._resolve(self.gltf.samplers, sampler_id, context, result, "sampler")
        if sampler is None:
            return result

        checks = (
            (sampler.mag_filter, SAMPLER_MAG_FILTERS, "sampler.magFilter"),
            (sampler.min_filter, SAMPLER_MIN_FILTERS, "sampler.minFilter"),
            (sampler.wrap_s, SAMPLER_WRAP_MODES, "sampler.wrapS"),
            (sampler.wrap_t, SAMPLER_WRAP_MODES, "sampler.wrapT"),
        )
        for value, allowed, name in checks:
            if value is not None and not self._check_enum(value, allowed, name, context, result):
                return result
        return result


class TextureValidator(GltfValidator):
    """A class for validating textures"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.image_validator = ImageValidator(gltf)
        self.sampler_validator = SamplerValidator(gltf)

    def validate_texture(self, texture_id: Optional[str], current_context: Optional[ValidatorContext] = None) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(texture_id, "texture", current_context, result):
            return result
        context = self._enter(current_context, "textures", texture_id)
        texture = self._resolve(self.gltf.textures, texture_id, context, result, "texture")
        if texture is None:
            return result

        if not self._require_id(texture.source, "image", context, result):
            return result
        if not self._require_id(texture.sampler, "sampler", context, result):
            return result
        checks = (
            (texture.format, TEXTURE_FORMATS, "texture.format"),
            (texture.internal_format, TEXTURE_FORMATS, "texture.internalFormat"),
            (texture.target, TEXTURE_TARGETS, "texture.target"),
            (texture.type, TEXTURE_TYPES, "texture.type"),
        )
        for value, allowed, name in checks:
            if value is not None and not self._check_enum(value, allowed, name, context, result):
                return result

        return self._run_steps(result, [
            lambda: self.image_validator.validate_image(texture.source, context),
            lambda: self.sampler_validator.validate_sampler(texture.sampler, context),
        ])
