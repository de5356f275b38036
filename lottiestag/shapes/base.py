"""
Base class for all shape variants.

Each variant declares its discriminant in the class variable shape_type and
registers itself on definition; the shape union in group.py is built from
that registry.
"""

from typing import ClassVar, Dict, Type

from ..base import LottieModel


class BaseShape(LottieModel):
    """
    Base class for the shape union.

    Subclasses set:
    - shape_type: The "ty" discriminant, e.g. 'rc'
    - display_name: Human readable name
    """

    # Class variables (not serialized)
    shape_type: ClassVar[str] = "base"
    display_name: ClassVar[str] = "Shape"

    # Registry of shape classes by shape_type
    _registry: ClassVar[Dict[str, Type['BaseShape']]] = {}

    def __init_subclass__(cls, **kwargs):
        """Register shape subclass in registry."""
        super().__init_subclass__(**kwargs)
        if cls.shape_type != "base":
            BaseShape._registry[cls.shape_type] = cls

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(ty={self.shape_type!r})"


def get_shape_class(shape_type: str) -> Type[BaseShape]:
    """
    Get the shape class registered for a discriminant.

    Args:
        shape_type: The "ty" value, e.g. 'rc' or 'gr'

    Raises:
        KeyError: If no shape is registered for the discriminant
    """
    return BaseShape._registry[shape_type]


def registered_shape_types() -> list[str]:
    """All known discriminants in registration order."""
    return list(BaseShape._registry)
