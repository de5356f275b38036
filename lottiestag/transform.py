"""
Transforms of layers, shape groups and repeaters.
"""

from typing import Optional

from pydantic import Field

from .animated import (
    Animated,
    AnimatedScalar,
    AnimatedVector,
    default_scalar,
    default_vector,
)
from .base import LottieModel


def _is_constant(prop: Optional[Animated], *identity) -> bool:
    if prop is None:
        return True
    if prop.animated:
        return False
    value = prop.initial_value
    if isinstance(value, tuple):
        return tuple(value) == identity
    return (value,) == identity


class Transform(LottieModel):
    """
    Transform of a layer ("ks") or of a shape group ("tr" shape).

    Scale and opacity are percentages, rotation and skew are degrees.
    """

    anchor: Optional[AnimatedVector] = Field(default=None, alias='a')
    position: Optional[AnimatedVector] = Field(default=None, alias='p')
    scale: AnimatedVector = Field(default_factory=default_vector(100.0, 100.0), alias='s')
    rotation: AnimatedScalar = Field(default_factory=default_scalar(0.0), alias='r')
    opacity: AnimatedScalar = Field(default_factory=default_scalar(100.0), alias='o')
    skew: Optional[AnimatedScalar] = Field(default=None, alias='sk')
    skew_axis: Optional[AnimatedScalar] = Field(default=None, alias='sa')
    # Mirrors the owning layer's "ao" flag, not encoded here
    auto_orient: bool = Field(default=False, exclude=True)

    def is_identity(self) -> bool:
        """True if the transform is constant and leaves geometry and opacity unchanged."""
        return (
            _is_constant(self.anchor, 0.0, 0.0)
            and _is_constant(self.position, 0.0, 0.0)
            and _is_constant(self.scale, 100.0, 100.0)
            and _is_constant(self.rotation, 0.0)
            and _is_constant(self.opacity, 100.0)
            and _is_constant(self.skew, 0.0)
        )


class RepeaterTransform(LottieModel):
    """Per-copy transform of a repeater, with opacity ramping from start to end."""

    anchor: AnimatedVector = Field(default_factory=default_vector(), alias='a')
    position: AnimatedVector = Field(alias='p')
    scale: AnimatedVector = Field(alias='s')
    rotation: AnimatedScalar = Field(alias='r')
    start_opacity: AnimatedScalar = Field(alias='so')
    end_opacity: AnimatedScalar = Field(alias='eo')
    skew: Optional[AnimatedScalar] = Field(default=None, alias='sk')
    skew_axis: Optional[AnimatedScalar] = Field(default=None, alias='sa')
