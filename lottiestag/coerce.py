"""
Primitive coercions.

The format economizes on its encodings: booleans are written as 0/1, some
numbers may be a bare value or a one element array and coordinate lists are
arrays of two element arrays. The functions here map those encodings to
canonical Python values and back. The annotated types wire them into the
pydantic models.
"""

from numbers import Real
from typing import Annotated, Any, Sequence

from pydantic import BeforeValidator, PlainSerializer


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def bool_from_int(value: Any) -> bool:
    """
    Decode an integer flag: 0 is False, any other integer is True.

    Real booleans are passed through unchanged.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    raise ValueError(f"expected an integer flag, got {value!r}")


def int_from_bool(value: bool) -> int:
    """Encode a boolean as the 0/1 integer flag."""
    return 1 if value else 0


def array_from_array_or_number(value: Any) -> list[float]:
    """Accept a bare number or an array of numbers, always return a list."""
    if _is_number(value):
        return [float(value)]
    if isinstance(value, (list, tuple)):
        if not all(_is_number(item) for item in value):
            raise ValueError(f"expected an array of numbers, got {value!r}")
        return [float(item) for item in value]
    raise ValueError(f"expected a number or an array of numbers, got {value!r}")


def scalar_from_value(value: Any) -> Any:
    """Unwrap a one element array holding a number, keyframes store scalars that way."""
    if isinstance(value, (list, tuple)) and len(value) == 1 and _is_number(value[0]):
        return value[0]
    return value


def vec_from_array(value: Any) -> list[tuple[float, float]]:
    """
    Decode an array of [x, y] pairs into a list of 2D tuples.

    Order and element count are preserved.
    """
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"expected an array of coordinate pairs, got {value!r}")
    points = []
    for item in value:
        if (
            not isinstance(item, (list, tuple))
            or len(item) != 2
            or not all(_is_number(component) for component in item)
        ):
            raise ValueError(f"expected a coordinate pair [x, y], got {item!r}")
        points.append((float(item[0]), float(item[1])))
    return points


def array_from_vec(points: Sequence[Sequence[float]]) -> list[list[float]]:
    """Encode a list of 2D points as an array of [x, y] pairs."""
    return [[float(point[0]), float(point[1])] for point in points]


# 0/1 integer flag
IntBool = Annotated[
    bool,
    BeforeValidator(bool_from_int),
    PlainSerializer(int_from_bool, return_type=int),
]

# Number or array of numbers, normalized to a list
FloatList = Annotated[list[float], BeforeValidator(array_from_array_or_number)]

# Number, optionally wrapped in a one element array
Scalar = Annotated[float, BeforeValidator(scalar_from_value)]
