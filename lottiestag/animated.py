"""
Animated properties.

Every animatable field of the format is written as {"a": flag, "k": ...}:

- a == 0: k is the constant value itself
- a == 1: k is an array of keyframes, each with a start value "s" and a
  start frame "t"

Both encodings decode into the same shape, an Animated[T] holding a non-empty
list of KeyFrame[T] intervals. Keyframes only carry their start in the
source; the end value and end frame of each keyframe are taken from the
keyframe that follows it. The last keyframe has no end (None).

A constant property holds exactly one keyframe whose start and end value are
the constant and whose frames are both 0.

T is any type pydantic can decode from the raw value: Scalar, Vector2D, Rgb,
BezierList or FloatList.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import Field, model_serializer, model_validator
from pydantic_core import PydanticCustomError

from .base import LottieModel
from .coerce import FloatList, IntBool, Scalar, bool_from_int
from .color import Rgb
from .geometry import BezierList, Vector2D

T = TypeVar('T')


class Easing(LottieModel):
    """Bezier handle of a keyframe's easing curve, one list per axis."""
    x: FloatList
    y: FloatList


class KeyFrame(LottieModel, Generic[T]):
    """
    One interpolation interval of an animated property.

    end_value and end_frame are not part of the encoding, they are derived
    from the following keyframe when the property is decoded.
    """

    start_value: T = Field(alias='s')
    end_value: Optional[T] = Field(default=None, exclude=True)
    start_frame: float = Field(default=0.0, alias='t')
    end_frame: Optional[float] = Field(default=None, exclude=True)
    easing_out: Optional[Easing] = Field(default=None, alias='o')
    easing_in: Optional[Easing] = Field(default=None, alias='i')
    hold: IntBool = Field(default=False, alias='h')

    @property
    def duration(self) -> Optional[float]:
        """Frames covered by this interval, None for the final keyframe."""
        if self.end_frame is None:
            return None
        return self.end_frame - self.start_frame

    def with_values(self, start: Any, end: Any) -> 'KeyFrame':
        """Copy of this keyframe with other values but the same timing and easing."""
        return KeyFrame(
            start_value=start,
            end_value=end,
            start_frame=self.start_frame,
            end_frame=self.end_frame,
            easing_out=self.easing_out,
            easing_in=self.easing_in,
            hold=self.hold,
        )


def _is_keyframe_list(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) == 1
        and isinstance(value[0], dict)
        and 's' in value[0]
    )


class Animated(LottieModel, Generic[T]):
    """
    A property that is either constant or keyframed.

    Example:
        >>> opacity = Animated[Scalar].from_dict({'a': 0, 'k': 100})
        >>> opacity.initial_value
        100.0
    """

    animated: IntBool = Field(default=False, alias='a')
    keyframes: list[KeyFrame[T]] = Field(alias='k')

    @model_validator(mode='before')
    @classmethod
    def _normalize_keyframes(cls, data: Any) -> Any:
        """Bring both encodings of "k" into keyframe form."""
        if not isinstance(data, dict) or 'k' not in data:
            return data
        value = data['k']
        if not bool_from_int(data.get('a', 0)):
            # Older files wrap constants in a single keyframe
            keyframes = value if _is_keyframe_list(value) else [{'s': value}]
            return {**data, 'k': keyframes}

        if not isinstance(value, list) or not value:
            raise PydanticCustomError(
                'malformed_keyframes', 'animated property has no keyframes'
            )
        for position, keyframe in enumerate(value):
            if not isinstance(keyframe, dict) or 's' not in keyframe:
                raise PydanticCustomError(
                    'malformed_keyframes',
                    'keyframe {position} has no start value',
                    {'position': position},
                )
        return data

    @model_validator(mode='after')
    def _pair_keyframes(self) -> 'Animated':
        """Turn the decoded keyframe points into intervals."""
        if not self.keyframes:
            raise PydanticCustomError(
                'malformed_keyframes', 'animated property has no keyframes'
            )
        if not self.animated:
            if len(self.keyframes) != 1:
                raise PydanticCustomError(
                    'malformed_keyframes', 'a constant property holds exactly one keyframe'
                )
            only = self.keyframes[0]
            # Easing means nothing without a following keyframe
            self.keyframes = [only.model_copy(update={
                'end_value': only.start_value,
                'start_frame': 0.0,
                'end_frame': 0.0,
                'easing_out': None,
                'easing_in': None,
                'hold': False,
            })]
            return self

        # Start frames are taken as given, ordering is not checked.
        # Keyframes are copied, instances passed in may belong to another property.
        keyframes = self.keyframes
        paired = [
            current.model_copy(update={
                'end_value': following.start_value,
                'end_frame': following.start_frame,
            })
            for current, following in zip(keyframes, keyframes[1:])
        ]
        paired.append(keyframes[-1].model_copy(update={'end_value': None, 'end_frame': None}))
        self.keyframes = paired
        return self

    @model_serializer(mode='wrap')
    def _encode(self, handler: Any, info: Any) -> dict[str, Any]:
        """Write a constant back as its bare value."""
        data = handler(self)
        if self.animated:
            return data
        by_alias = bool(info.by_alias)
        key = 'k' if by_alias else 'keyframes'
        value = data[key][0]['s' if by_alias else 'start_value']
        # A constant path is a lone bezier object, not a list
        if isinstance(value, list) and len(value) == 1 and isinstance(value[0], dict):
            value = value[0]
        data[key] = value
        return data

    @classmethod
    def constant(cls, value: Any) -> 'Animated':
        """Create a non-animated property holding value."""
        return cls.model_validate({'a': 0, 'k': value})

    @property
    def initial_value(self) -> T:
        """Value at the first keyframe."""
        return self.keyframes[0].start_value


AnimatedScalar = Animated[Scalar]
AnimatedVector = Animated[Vector2D]
AnimatedColor = Animated[Rgb]
AnimatedPath = Animated[BezierList]
AnimatedFloats = Animated[FloatList]


def default_scalar(value: float = 0.0):
    """Factory for a constant scalar default."""
    return lambda: AnimatedScalar.constant(value)


def default_vector(x: float = 0.0, y: float = 0.0):
    """Factory for a constant vector default."""
    return lambda: AnimatedVector.constant(Vector2D(x, y))
