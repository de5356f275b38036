"""
Groups, the shape-layer wrapper and the shape union.

A group holds shape layers, each pairing a name and hidden flag with one
shape; that shape may itself be a group. The union is dispatched on the
explicit "ty" discriminant, unknown discriminants fail the decode.
"""

from typing import Annotated, Any, ClassVar, Iterable, Iterator, Optional, Union

from pydantic import Discriminator, Field, PrivateAttr, Tag, model_serializer, model_validator

from ..base import LottieModel
from .base import BaseShape
# Imported for registration, every variant must exist before the union is built
from . import modifiers, paint, primitives  # noqa: F401


class Group(BaseShape):
    """Ordered list of shape layers, rendered bottom to top."""

    shape_type: ClassVar[str] = "gr"
    display_name: ClassVar[str] = "Group"

    shapes: list['ShapeLayer'] = Field(alias='it')
    property_count: Optional[int] = Field(default=None, alias='np')


def _shape_tag(value: Any) -> Optional[str]:
    """Discriminator of the shape union for raw dicts and decoded shapes."""
    if isinstance(value, dict):
        tag = value.get('ty')
        return None if tag is None else str(tag)
    return getattr(value, 'shape_type', None)


def _build_shape_union() -> Any:
    members = tuple(
        Annotated[shape_class, Tag(shape_type)]
        for shape_type, shape_class in BaseShape._registry.items()
    )
    return Annotated[Union[members], Discriminator(_shape_tag)]


Shape = _build_shape_union()


class ShapeLayer(LottieModel):
    """
    Named, hideable wrapper around exactly one shape.

    In the format the wrapper's keys and the shape's keys share one record;
    decoding splits them and encoding merges them back.
    """

    name: Optional[str] = Field(default=None, alias='nm')
    hidden: bool = Field(default=False, alias='hd')
    shape: Shape
    # Sequential handle set by Document after decode, never read from or
    # written to the source
    _id: int = PrivateAttr(default=0)

    @model_validator(mode='before')
    @classmethod
    def _split_shape(cls, data: Any) -> Any:
        if isinstance(data, dict) and 'shape' not in data:
            wrapper = {key: data[key] for key in ('nm', 'hd') if key in data}
            wrapper['shape'] = data
            return wrapper
        return data

    @model_serializer(mode='wrap')
    def _merge_shape(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        shape = data.pop('shape')
        return {'ty': self.shape.shape_type, **data, **shape}

    @property
    def id(self) -> int:
        return self._id


Group.model_rebuild(force=True)
ShapeLayer.model_rebuild(force=True)


def walk_shape_layers(shape_layers: Iterable[ShapeLayer]) -> Iterator[ShapeLayer]:
    """Yield shape layers depth-first, each group before its children."""
    for shape_layer in shape_layers:
        yield shape_layer
        if isinstance(shape_layer.shape, Group):
            yield from walk_shape_layers(shape_layer.shape.shapes)
