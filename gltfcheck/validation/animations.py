# gltfcheck animation validator
# Checks the structural wiring of an animation: parameters -> accessors,
# samplers -> parameters, channels -> samplers and target nodes. Keyframe values
# themselves are not inspected.

from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import ANIMATION_INTERPOLATIONS, ANIMATION_PATHS
from ..core.context import ValidatorContext
from ..core.model import Animation, AnimationChannel, AnimationSampler, GlTF
from ..core.result import IssueKind, ValidatorResult
from .base import GltfValidator
from .buffers import AccessorValidator

logger = logging.getLogger(__name__)


class AnimationValidator(GltfValidator):
    """A class for validating animations"""

    def __init__(self, gltf: GlTF) -> None:
        super().__init__(gltf)
        self.accessor_validator = AccessorValidator(gltf)

    def validate_animation(
        self, animation_id: Optional[str], current_context: Optional[ValidatorContext] = None
    ) -> ValidatorResult:
        result = ValidatorResult()
        if not self._require_id(animation_id, "animation", current_context, result):
            return result
        context = self._enter(current_context, "animations", animation_id)
        animation = self._resolve(self.gltf.animations, animation_id, context, result, "animation")
        if animation is None:
            return result

        parameters = animation.parameters or {}
        if not self._check_null_entries(parameters, "animation parameter", "accessor", context, result):
            return result

        steps = [self._parameter_step(name, accessor_id, context) for name, accessor_id in parameters.items()]
        steps.append(lambda: self._validate_samplers(animation, context))
        steps.append(lambda: self._validate_channels(animation, context))
        return self._run_steps(result, steps)

    def _parameter_step(self, name: str, accessor_id: str, context: ValidatorContext):
        parameter_context = context.with_segment(f"parameters[{name}]")
        return lambda: self.accessor_validator.validate_accessor(accessor_id, parameter_context)

    def _validate_samplers(self, animation: Animation, context: ValidatorContext) -> ValidatorResult:
        result = ValidatorResult()
        for sampler_id, sampler in (animation.samplers or {}).items():
            self._validate_sampler(animation, sampler, context.with_segment(f"samplers[{sampler_id}]"), result)
            if result.has_errors():
                return result
        return result

    def _validate_sampler(
        self, animation: Animation, sampler: AnimationSampler, context: ValidatorContext, result: ValidatorResult
    ) -> None:
        for slot in ("input", "output"):
            parameter = getattr(sampler, slot)
            if not self._require_id(parameter, f"{slot} parameter", context, result):
                return
            if self._resolve(animation.parameters, parameter, context, result, "animation parameter") is None:
                return
        if sampler.interpolation is not None:
            self._check_enum(sampler.interpolation, ANIMATION_INTERPOLATIONS, "sampler.interpolation", context, result)

    def _validate_channels(self, animation: Animation, context: ValidatorContext) -> ValidatorResult:
        result = ValidatorResult()
        for index, channel in enumerate(animation.channels or []):
            self._validate_channel(animation, channel, context.with_segment(f"channels[{index}]"), result)
            if result.has_errors():
                return result
        return result

    def _validate_channel(
        self, animation: Animation, channel: AnimationChannel, context: ValidatorContext, result: ValidatorResult
    ) -> None:
        if not self._require_id(channel.sampler, "animation sampler", context, result):
            return
        if self._resolve(animation.samplers, channel.sampler, context, result, "animation sampler") is None:
            return
        target = channel.target
        if target is None:
            result.add_error("The channel.target is null", context, kind=IssueKind.MISSING_REQUIRED_FIELD)
            return
        if not self._require_id(target.id, "target node", context, result):
            return
        if self._resolve(self.gltf.nodes, target.id, context.with_segment("target"), result, "node") is None:
            return
        if not self._require_field(target.path, "channel.target.path", context, result):
            return
        self._check_enum(target.path, ANIMATION_PATHS, "channel.target.path", context, result)
