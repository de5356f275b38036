"""
lottiestag - decoder for Lottie vector animations

Turns the loosely typed animation JSON into a typed, read-only document:
animated properties with paired keyframes, coerced primitives and a validated
layer and shape tree.

Example:
    >>> import lottiestag
    >>> doc = lottiestag.decode(open('animation.json', 'rb').read())
    >>> doc.duration()
"""

from .errors import DecodeError, DecodeErrorKind
from .coerce import (
    FloatList,
    IntBool,
    Scalar,
    array_from_array_or_number,
    array_from_vec,
    bool_from_int,
    int_from_bool,
    vec_from_array,
)
from .geometry import Bezier, BezierList, Vector2D
from .color import Rgb, Rgba
from .animated import (
    Animated,
    AnimatedColor,
    AnimatedPath,
    AnimatedScalar,
    AnimatedVector,
    Easing,
    KeyFrame,
)
from .enums import (
    Composite,
    FillRule,
    FontPathOrigin,
    GradientType,
    LineCap,
    LineJoin,
    MergeMode,
    PolyStarType,
    ShapeDirection,
    StrokeDashType,
    TrimMultipleShape,
)
from .transform import RepeaterTransform, Transform
from .shapes import BaseShape, Group, Shape, ShapeLayer
from .layers import (
    AudioContent,
    EmptyContent,
    ImageContent,
    Layer,
    LayerContent,
    PrecompositionRef,
    ShapeContent,
    SolidColor,
    TextContent,
)
from .document import Document, Font, FontList, ImageAsset, Marker, Precomposition
from .codec import decode, decode_layer, encode, parse

__all__ = [
    # Decoding
    "decode",
    "decode_layer",
    "encode",
    "parse",
    "DecodeError",
    "DecodeErrorKind",
    # Primitives
    "IntBool",
    "FloatList",
    "Scalar",
    "bool_from_int",
    "int_from_bool",
    "array_from_array_or_number",
    "vec_from_array",
    "array_from_vec",
    "Vector2D",
    "Bezier",
    "BezierList",
    "Rgb",
    "Rgba",
    # Animation
    "Animated",
    "AnimatedScalar",
    "AnimatedVector",
    "AnimatedColor",
    "AnimatedPath",
    "KeyFrame",
    "Easing",
    # Options
    "Composite",
    "FillRule",
    "FontPathOrigin",
    "GradientType",
    "LineCap",
    "LineJoin",
    "MergeMode",
    "PolyStarType",
    "ShapeDirection",
    "StrokeDashType",
    "TrimMultipleShape",
    # Tree
    "Transform",
    "RepeaterTransform",
    "BaseShape",
    "Group",
    "Shape",
    "ShapeLayer",
    "Layer",
    "LayerContent",
    "PrecompositionRef",
    "SolidColor",
    "ImageContent",
    "EmptyContent",
    "ShapeContent",
    "TextContent",
    "AudioContent",
    # Document
    "Document",
    "Precomposition",
    "ImageAsset",
    "Font",
    "FontList",
    "Marker",
]

__version__ = "0.1.0"
