"""
Small enumerated options of shapes and fonts.

All numeric options start at 1 except FontPathOrigin. Values outside an
enumeration fail the decode, with one exception: MergeMode collapses unknown
modes to MergeMode.UNSUPPORTED so that files written by newer tools still
decode.
"""

import logging
from enum import Enum, IntEnum
from typing import Annotated, Any

from pydantic import BeforeValidator

logger = logging.getLogger(__name__)


class PolyStarType(IntEnum):
    STAR = 1
    POLYGON = 2


class FillRule(IntEnum):
    NON_ZERO = 1
    EVEN_ODD = 2


class LineCap(IntEnum):
    BUTT = 1
    ROUND = 2
    SQUARE = 3


class LineJoin(IntEnum):
    MITER = 1
    ROUND = 2
    BEVEL = 3


class GradientType(IntEnum):
    LINEAR = 1
    RADIAL = 2


class Composite(IntEnum):
    """Whether repeater copies stack above or below the original."""
    ABOVE = 1
    BELOW = 2


class TrimMultipleShape(IntEnum):
    INDIVIDUALLY = 1
    SIMULTANEOUSLY = 2


class ShapeDirection(IntEnum):
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


class FontPathOrigin(IntEnum):
    LOCAL = 0
    CSS_URL = 1
    SCRIPT_URL = 2
    FONT_URL = 3


class StrokeDashType(str, Enum):
    """Role of an entry in a stroke's dash pattern."""
    DASH = "d"
    GAP = "g"
    OFFSET = "o"


class MergeMode(IntEnum):
    """
    Boolean operator of a merge paths modifier.

    Any value this decoder does not know decodes to UNSUPPORTED.
    """
    UNSUPPORTED = 0
    NORMAL = 1
    ADD = 2
    SUBTRACT = 3
    INTERSECT = 4
    EXCLUDE_INTERSECTIONS = 5

    @classmethod
    def _missing_(cls, value: object) -> 'MergeMode':
        logger.warning(f"Unsupported merge mode {value!r}, decoding as UNSUPPORTED")
        return cls.UNSUPPORTED

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Map raw integers to a member, letting pydantic reject other types."""
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        return value


MergeModeField = Annotated[MergeMode, BeforeValidator(MergeMode.coerce)]
