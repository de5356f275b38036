"""
Paint shapes: solid and gradient fills and strokes.

Gradient colors are stored the way the format writes them, a flat list of
numbers: point_count groups of (offset, r, g, b), optionally followed by
(offset, alpha) pairs for opacity stops. color_stops() unpacks them.
"""

from typing import ClassVar, NamedTuple, Optional

import numpy as np
from pydantic import Field, model_validator

from ..animated import AnimatedColor, AnimatedFloats, AnimatedScalar, AnimatedVector
from ..base import LottieModel
from ..color import Rgb, Rgba
from ..enums import FillRule, GradientType, LineCap, LineJoin, StrokeDashType
from .base import BaseShape


class StrokeDash(LottieModel):
    """One entry of a stroke's dash pattern."""
    dash_type: StrokeDashType = Field(alias='n')
    length: AnimatedScalar = Field(alias='v')
    name: Optional[str] = Field(default=None, alias='nm')


class GradientStop(NamedTuple):
    offset: float
    color: Rgba


class GradientColors(LottieModel):
    """Animated gradient color list ("g")."""

    point_count: int = Field(alias='p', ge=0)
    colors: AnimatedFloats = Field(alias='k')

    @model_validator(mode='after')
    def _check_point_count(self) -> 'GradientColors':
        needed = self.point_count * 4
        for keyframe in self.colors.keyframes:
            if len(keyframe.start_value) < needed:
                raise ValueError(
                    f"gradient declares {self.point_count} color stops but holds "
                    f"only {len(keyframe.start_value)} values"
                )
        return self

    def color_stops(self, keyframe: int = 0) -> list[GradientStop]:
        """
        Unpack the color stops of one keyframe.

        Opacity stops, when present, are interpolated at each color stop's
        offset and become the stop's alpha.

        :param keyframe: Index of the keyframe to unpack
        :return: One GradientStop per color point
        """
        values = np.asarray(self.colors.keyframes[keyframe].start_value, dtype=np.float64)
        color_count = self.point_count * 4
        points = values[:color_count].reshape(self.point_count, 4)
        alphas = values[color_count:]
        if alphas.size >= 2 and alphas.size % 2 == 0:
            opacity_stops = alphas.reshape(-1, 2)
            opacity = np.interp(points[:, 0], opacity_stops[:, 0], opacity_stops[:, 1])
        else:
            opacity = np.ones(self.point_count)
        return [
            GradientStop(float(offset), Rgba.from_floats(r, g, b, alpha))
            for (offset, r, g, b), alpha in zip(points, opacity)
        ]


class Fill(BaseShape):
    """Solid color fill."""

    shape_type: ClassVar[str] = "fl"
    display_name: ClassVar[str] = "Fill"

    opacity: AnimatedScalar = Field(alias='o')
    color: AnimatedColor = Field(alias='c')
    fill_rule: FillRule = Field(default=FillRule.NON_ZERO, alias='r')

    @classmethod
    def transparent(cls) -> 'Fill':
        """A fill that paints nothing."""
        return cls(
            opacity=AnimatedScalar.constant(0.0),
            color=AnimatedColor.constant(Rgb(0, 0, 0)),
            fill_rule=FillRule.NON_ZERO,
        )


class Stroke(BaseShape):
    """Solid color stroke."""

    shape_type: ClassVar[str] = "st"
    display_name: ClassVar[str] = "Stroke"

    line_cap: LineCap = Field(alias='lc')
    line_join: LineJoin = Field(alias='lj')
    miter_limit: float = Field(alias='ml')
    opacity: AnimatedScalar = Field(alias='o')
    width: AnimatedScalar = Field(alias='w')
    dashes: list[StrokeDash] = Field(default_factory=list, alias='d')
    color: AnimatedColor = Field(alias='c')


class GradientFill(BaseShape):
    shape_type: ClassVar[str] = "gf"
    display_name: ClassVar[str] = "Gradient Fill"

    opacity: AnimatedScalar = Field(alias='o')
    fill_rule: FillRule = Field(default=FillRule.NON_ZERO, alias='r')
    start: AnimatedVector = Field(alias='s')
    end: AnimatedVector = Field(alias='e')
    gradient_type: GradientType = Field(alias='t')
    colors: GradientColors = Field(alias='g')
    # Radial gradients only
    highlight_length: Optional[AnimatedScalar] = Field(default=None, alias='h')
    highlight_angle: Optional[AnimatedScalar] = Field(default=None, alias='a')


class GradientStroke(BaseShape):
    shape_type: ClassVar[str] = "gs"
    display_name: ClassVar[str] = "Gradient Stroke"

    line_cap: LineCap = Field(alias='lc')
    line_join: LineJoin = Field(alias='lj')
    miter_limit: float = Field(alias='ml')
    opacity: AnimatedScalar = Field(alias='o')
    width: AnimatedScalar = Field(alias='w')
    dashes: list[StrokeDash] = Field(default_factory=list, alias='d')
    start: AnimatedVector = Field(alias='s')
    end: AnimatedVector = Field(alias='e')
    gradient_type: GradientType = Field(alias='t')
    colors: GradientColors = Field(alias='g')
    highlight_length: Optional[AnimatedScalar] = Field(default=None, alias='h')
    highlight_angle: Optional[AnimatedScalar] = Field(default=None, alias='a')
