"""
Geometry primitives: rectangle, ellipse, poly-star and free-form path.
"""

from typing import ClassVar, Optional

from pydantic import Field

from ..animated import AnimatedPath, AnimatedScalar, AnimatedVector
from ..enums import PolyStarType, ShapeDirection
from .base import BaseShape


class Rectangle(BaseShape):
    """Rectangle centered at position, with optional corner roundness."""

    shape_type: ClassVar[str] = "rc"
    display_name: ClassVar[str] = "Rectangle"

    direction: ShapeDirection = Field(default=ShapeDirection.CLOCKWISE, alias='d')
    position: AnimatedVector = Field(alias='p')
    size: AnimatedVector = Field(alias='s')
    radius: AnimatedScalar = Field(alias='r')


class Ellipse(BaseShape):
    shape_type: ClassVar[str] = "el"
    display_name: ClassVar[str] = "Ellipse"

    direction: ShapeDirection = Field(default=ShapeDirection.CLOCKWISE, alias='d')
    position: AnimatedVector = Field(alias='p')
    size: AnimatedVector = Field(alias='s')


class PolyStar(BaseShape):
    """
    Star or regular polygon.

    Polygons have no inner radius or inner roundness, both are None then.
    """

    shape_type: ClassVar[str] = "sr"
    display_name: ClassVar[str] = "PolyStar"

    direction: ShapeDirection = Field(default=ShapeDirection.CLOCKWISE, alias='d')
    position: AnimatedVector = Field(alias='p')
    outer_radius: AnimatedScalar = Field(alias='or')
    outer_roundness: AnimatedScalar = Field(alias='os')
    inner_radius: Optional[AnimatedScalar] = Field(default=None, alias='ir')
    inner_roundness: Optional[AnimatedScalar] = Field(default=None, alias='is')
    rotation: AnimatedScalar = Field(alias='r')
    points: AnimatedScalar = Field(alias='pt')
    star_type: PolyStarType = Field(alias='sy')

    @property
    def is_star(self) -> bool:
        return self.star_type == PolyStarType.STAR


class Path(BaseShape):
    """Free-form bezier path, the value is a list of beziers."""

    shape_type: ClassVar[str] = "sh"
    display_name: ClassVar[str] = "Path"

    direction: ShapeDirection = Field(default=ShapeDirection.CLOCKWISE, alias='d')
    path: AnimatedPath = Field(alias='ks')
