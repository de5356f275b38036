"""
Geometry primitives: 2D vectors and cubic bezier paths.
"""

from typing import Annotated, Any, NamedTuple

import numpy as np
from pydantic import BeforeValidator, Field, PlainSerializer, model_validator
from pydantic_core import core_schema

from .base import LottieModel
from .coerce import array_from_vec, vec_from_array


class Vector2D(NamedTuple):
    """
    A 2D vector.

    Decodes from [x, y] or [x, y, z]; the z component is dropped since the
    model is 2D. Encodes to [x, y].
    """
    x: float
    y: float

    @classmethod
    def from_value(cls, value: Any) -> 'Vector2D':
        if isinstance(value, (list, tuple)) and len(value) in (2, 3):
            if all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
                return cls(float(value[0]), float(value[1]))
        raise ValueError(f"expected a vector [x, y], got {value!r}")

    def to_value(self) -> list[float]:
        return [self.x, self.y]

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_value,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_value, info_arg=False
            ),
        )


# Array of [x, y] pairs
VectorList = Annotated[
    list[Vector2D],
    BeforeValidator(vec_from_array),
    PlainSerializer(array_from_vec, return_type=list),
]


class Bezier(LottieModel):
    """
    A cubic bezier path.

    Three parallel lists of equal length: node positions and, per node, the
    offsets of its incoming and outgoing control handles.
    """

    closed: bool = Field(default=False, alias='c')
    vertices: VectorList = Field(alias='v')
    in_tangents: VectorList = Field(alias='i')
    out_tangents: VectorList = Field(alias='o')

    @model_validator(mode='after')
    def _check_lengths(self) -> 'Bezier':
        counts = {len(self.vertices), len(self.in_tangents), len(self.out_tangents)}
        if len(counts) != 1:
            raise ValueError(
                f"vertex and tangent lists differ in length: v={len(self.vertices)}, "
                f"i={len(self.in_tangents)}, o={len(self.out_tangents)}"
            )
        return self

    def to_array(self) -> np.ndarray:
        """
        Return the nodes as a float array of shape (n, 3, 2).

        Per node: position, incoming tangent, outgoing tangent.
        """
        if not self.vertices:
            return np.zeros((0, 3, 2), dtype=np.float64)
        return np.stack(
            [
                np.asarray(self.vertices, dtype=np.float64),
                np.asarray(self.in_tangents, dtype=np.float64),
                np.asarray(self.out_tangents, dtype=np.float64),
            ],
            axis=1,
        )


def bezier_list_from_value(value: Any) -> Any:
    """A constant path stores a lone bezier object, keyframes store a list."""
    if isinstance(value, (dict, Bezier)):
        return [value]
    return value


# Value type of animated paths
BezierList = Annotated[list[Bezier], BeforeValidator(bezier_list_from_value)]
