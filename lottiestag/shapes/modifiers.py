"""
Modifier shapes: transform, repeater, trim and the path deformers.

Modifiers hold no geometry of their own, they alter the shapes that precede
them in the same group.
"""

from typing import ClassVar

from pydantic import Field

from ..animated import AnimatedScalar, AnimatedVector
from ..enums import Composite, LineJoin, MergeModeField, TrimMultipleShape
from ..transform import RepeaterTransform, Transform
from .base import BaseShape


class ShapeTransform(BaseShape, Transform):
    """Transform of the enclosing group."""
    shape_type: ClassVar[str] = "tr"
    display_name: ClassVar[str] = "Transform"


class Repeater(BaseShape):
    """Repeats the preceding shapes copies times, each with transform applied once more."""

    shape_type: ClassVar[str] = "rp"
    display_name: ClassVar[str] = "Repeater"

    copies: AnimatedScalar = Field(alias='c')
    offset: AnimatedScalar = Field(alias='o')
    composite: Composite = Field(alias='m')
    transform: RepeaterTransform = Field(alias='tr')


class Trim(BaseShape):
    """Trim paths, start/end/offset are percentages and degrees."""

    shape_type: ClassVar[str] = "tm"
    display_name: ClassVar[str] = "Trim Paths"

    start: AnimatedScalar = Field(alias='s')
    end: AnimatedScalar = Field(alias='e')
    offset: AnimatedScalar = Field(alias='o')
    multiple_shape: TrimMultipleShape = Field(alias='m')


class RoundedCorners(BaseShape):
    shape_type: ClassVar[str] = "rd"
    display_name: ClassVar[str] = "Rounded Corners"

    radius: AnimatedScalar = Field(alias='r')


class PuckerBloat(BaseShape):
    shape_type: ClassVar[str] = "pb"
    display_name: ClassVar[str] = "Pucker / Bloat"

    amount: AnimatedScalar = Field(alias='a')


class Twist(BaseShape):
    shape_type: ClassVar[str] = "tw"
    display_name: ClassVar[str] = "Twist"

    angle: AnimatedScalar = Field(alias='a')
    center: AnimatedVector = Field(alias='c')


class Merge(BaseShape):
    shape_type: ClassVar[str] = "mm"
    display_name: ClassVar[str] = "Merge Paths"

    mode: MergeModeField = Field(alias='mm')


class OffsetPath(BaseShape):
    shape_type: ClassVar[str] = "op"
    display_name: ClassVar[str] = "Offset Path"

    amount: AnimatedScalar = Field(alias='a')
    line_join: LineJoin = Field(alias='lj')
    miter_limit: float = Field(alias='ml')


class ZigZag(BaseShape):
    """Zig zag, frequency is ridges per segment."""

    shape_type: ClassVar[str] = "zz"
    display_name: ClassVar[str] = "Zig Zag"

    frequency: AnimatedScalar = Field(alias='r')
    amplitude: AnimatedScalar = Field(alias='s')
    point_type: AnimatedScalar = Field(alias='pt')
