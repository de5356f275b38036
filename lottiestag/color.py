"""
Color primitives.

Rgb is what fills and strokes animate: decoded from 0.0-1.0 float channels,
stored as 0-255 bytes. Rgba is used where the format writes a hex string
(solid layers) and for gradient stops.
"""

import math
import string
from typing import Any, NamedTuple

from pydantic_core import core_schema


def _channel_from_float(value: float) -> int:
    # Truncate, not round, then saturate to a byte
    return max(0, min(255, int(value * 255.0)))


def _channel_to_float(channel: int) -> float:
    """Smallest float at or above channel / 255 that truncates back to channel."""
    value = channel / 255.0
    while _channel_from_float(value) < channel and value < 1.0:
        value = math.nextafter(value, math.inf)
    return value


def _is_channel(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= 255


class Rgb(NamedTuple):
    """An opaque color with 0-255 channels."""
    r: int
    g: int
    b: int

    @classmethod
    def from_floats(cls, r: float, g: float, b: float) -> 'Rgb':
        """Create from 0.0-1.0 channels, scaling to 0-255 and truncating."""
        return cls(_channel_from_float(r), _channel_from_float(g), _channel_from_float(b))

    @classmethod
    def from_value(cls, value: Any) -> 'Rgb':
        """Decode [r, g, b] or [r, g, b, a] floats; alpha is ignored."""
        if isinstance(value, Rgb):
            return value
        if isinstance(value, (list, tuple)) and len(value) in (3, 4):
            if all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
                return cls.from_floats(*value[:3])
        raise ValueError(f"expected a color [r, g, b], got {value!r}")

    def to_value(self) -> list[float]:
        return [_channel_to_float(self.r), _channel_to_float(self.g), _channel_to_float(self.b)]

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_value,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_value, info_arg=False
            ),
        )


class Rgba(NamedTuple):
    """A color with alpha, 0-255 channels."""
    r: int
    g: int
    b: int
    a: int = 255

    @classmethod
    def from_hex(cls, text: str) -> 'Rgba':
        """
        Parse '#RRGGBB' or '#RRGGBBAA'.

        The leading '#' is optional and digits are case-insensitive. A missing
        alpha is opaque.
        """
        digits = text[1:] if text.startswith("#") else text
        if len(digits) not in (6, 8) or any(c not in string.hexdigits for c in digits):
            raise ValueError(f"invalid hex color: {text!r}")
        return cls(*(int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)))

    def to_hex(self) -> str:
        """Format as lowercase '#rrggbb', or '#rrggbbaa' when not opaque."""
        text = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.a != 255:
            text += f"{self.a:02x}"
        return text

    @classmethod
    def from_floats(cls, r: float, g: float, b: float, a: float = 1.0) -> 'Rgba':
        return cls(
            _channel_from_float(r),
            _channel_from_float(g),
            _channel_from_float(b),
            _channel_from_float(a),
        )

    @property
    def rgb(self) -> Rgb:
        return Rgb(self.r, self.g, self.b)

    @classmethod
    def from_value(cls, value: Any) -> 'Rgba':
        if isinstance(value, Rgba):
            return value
        if isinstance(value, str):
            return cls.from_hex(value)
        if isinstance(value, (list, tuple)) and len(value) in (3, 4):
            if all(_is_channel(v) for v in value):
                return cls(*value)
        raise ValueError(f"expected a hex color string, got {value!r}")

    def __str__(self) -> str:
        return self.to_hex()

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.from_value,
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.to_hex, info_arg=False
            ),
        )
