"""
Shape union.

Shapes are decoded by their "ty" discriminant into one of:

    Geometry:   Rectangle (rc), Ellipse (el), PolyStar (sr), Path (sh)
    Paint:      Fill (fl), Stroke (st), GradientFill (gf), GradientStroke (gs)
    Tree:       Group (gr), ShapeTransform (tr), Repeater (rp)
    Modifiers:  Trim (tm), RoundedCorners (rd), PuckerBloat (pb), Twist (tw),
                Merge (mm), OffsetPath (op), ZigZag (zz)

Group contents are ShapeLayer wrappers, so groups nest.
"""

from .base import BaseShape, get_shape_class, registered_shape_types
from .primitives import Ellipse, Path, PolyStar, Rectangle
from .paint import (
    Fill,
    GradientColors,
    GradientFill,
    GradientStop,
    GradientStroke,
    Stroke,
    StrokeDash,
)
from .modifiers import (
    Merge,
    OffsetPath,
    PuckerBloat,
    Repeater,
    RoundedCorners,
    ShapeTransform,
    Trim,
    Twist,
    ZigZag,
)
from .group import Group, Shape, ShapeLayer, walk_shape_layers

__all__ = [
    # Base
    "BaseShape",
    "Shape",
    "ShapeLayer",
    "get_shape_class",
    "registered_shape_types",
    "walk_shape_layers",
    # Geometry
    "Rectangle",
    "Ellipse",
    "PolyStar",
    "Path",
    # Paint
    "Fill",
    "Stroke",
    "GradientFill",
    "GradientStroke",
    "GradientColors",
    "GradientStop",
    "StrokeDash",
    # Tree and modifiers
    "Group",
    "ShapeTransform",
    "Repeater",
    "Trim",
    "RoundedCorners",
    "PuckerBloat",
    "Twist",
    "Merge",
    "OffsetPath",
    "ZigZag",
]
