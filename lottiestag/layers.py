"""
Layers and their content.

A layer record carries no single tag for its content; the content variant is
inferred from which keys are present. The checks in CONTENT_PRECEDENCE run
in order and the first match wins, a record matching none is Empty:

    1. shapes             -> ShapeContent
    2. t                  -> TextContent
    3. sc + sw + sh       -> SolidColor
    4. au                 -> AudioContent
    5. refId + w + h      -> PrecompositionRef
    6. refId              -> ImageContent
    7. (nothing)          -> EmptyContent

Encoding writes the content keys back into the layer record together with the
format's numeric layer type "ty"; "ty" is not read when decoding.
"""

from typing import Annotated, Any, Callable, ClassVar, Optional, Union

from pydantic import Discriminator, Field, PrivateAttr, Tag, model_serializer, model_validator

from .animated import AnimatedScalar
from .base import LottieModel
from .coerce import IntBool
from .color import Rgba
from .shapes import ShapeLayer
from .transform import Transform


class LayerContent(LottieModel):
    """Base class of the layer content variants."""
    content_kind: ClassVar[str] = "base"
    # Numeric layer type written on encode
    layer_type: ClassVar[int] = -1


class PrecompositionRef(LayerContent):
    """Placeholder for a precomposition, referenced by asset id (not resolved)."""

    content_kind: ClassVar[str] = "precomposition"
    layer_type: ClassVar[int] = 0

    ref_id: str = Field(alias='refId')
    width: int = Field(alias='w')
    height: int = Field(alias='h')
    time_remapping: Optional[AnimatedScalar] = Field(default=None, alias='tm')


class SolidColor(LayerContent):
    content_kind: ClassVar[str] = "solid"
    layer_type: ClassVar[int] = 1

    color: Rgba = Field(alias='sc')
    width: float = Field(alias='sw')
    height: float = Field(alias='sh')


class ImageContent(LayerContent):
    content_kind: ClassVar[str] = "image"
    layer_type: ClassVar[int] = 2

    ref_id: str = Field(alias='refId')


class EmptyContent(LayerContent):
    """Null layer, usually a parent for other layers."""
    content_kind: ClassVar[str] = "empty"
    layer_type: ClassVar[int] = 3


class ShapeContent(LayerContent):
    content_kind: ClassVar[str] = "shape"
    layer_type: ClassVar[int] = 4

    shapes: list[ShapeLayer] = Field(alias='shapes')


class TextContent(LayerContent):
    """Text layer, the text document is kept as raw data."""
    content_kind: ClassVar[str] = "text"
    layer_type: ClassVar[int] = 5

    document: dict[str, Any] = Field(alias='t')


class AudioContent(LayerContent):
    content_kind: ClassVar[str] = "audio"
    layer_type: ClassVar[int] = 6

    settings: dict[str, Any] = Field(alias='au')
    ref_id: Optional[str] = Field(default=None, alias='refId')


CONTENT_PRECEDENCE: tuple[tuple[str, Callable[[dict], bool]], ...] = (
    ('shape', lambda data: 'shapes' in data),
    ('text', lambda data: 't' in data),
    ('solid', lambda data: all(key in data for key in ('sc', 'sw', 'sh'))),
    ('audio', lambda data: 'au' in data),
    ('precomposition', lambda data: all(key in data for key in ('refId', 'w', 'h'))),
    ('image', lambda data: 'refId' in data),
)


def infer_content_kind(value: Any) -> Optional[str]:
    """Pick the content variant of a raw layer record."""
    if isinstance(value, LayerContent):
        return value.content_kind
    if not isinstance(value, dict):
        return None
    for kind, matches in CONTENT_PRECEDENCE:
        if matches(value):
            return kind
    return EmptyContent.content_kind


_CONTENT_CLASSES: tuple[type[LayerContent], ...] = (
    PrecompositionRef,
    SolidColor,
    ImageContent,
    EmptyContent,
    ShapeContent,
    TextContent,
    AudioContent,
)

Content = Annotated[
    Union[tuple(Annotated[cls, Tag(cls.content_kind)] for cls in _CONTENT_CLASSES)],
    Discriminator(infer_content_kind),
]


class Layer(LottieModel):
    """
    One timeline entry.

    parent_index refers to the index of a sibling layer; it is kept as a key
    and not resolved. id is a sequential handle assigned by the document.
    """

    is_3d: IntBool = Field(default=False, alias='ddd')
    hidden: bool = Field(default=False, alias='hd')
    index: Optional[int] = Field(default=None, alias='ind')
    parent_index: Optional[int] = Field(default=None, alias='parent')
    auto_orient: IntBool = Field(default=False, alias='ao')
    start_frame: float = Field(alias='ip')
    end_frame: float = Field(alias='op')
    start_time: float = Field(alias='st')
    name: Optional[str] = Field(default=None, alias='nm')
    transform: Optional[Transform] = Field(default=None, alias='ks')
    content: Content
    # Sequential handle set by Document after decode, never read from or
    # written to the source
    _id: int = PrivateAttr(default=0)

    @model_validator(mode='before')
    @classmethod
    def _collect_content(cls, data: Any) -> Any:
        """Content keys live in the layer record itself."""
        if isinstance(data, dict) and 'content' not in data:
            return {**data, 'content': dict(data)}
        return data

    @model_validator(mode='after')
    def _mirror_auto_orient(self) -> 'Layer':
        if self.transform is not None:
            self.transform = self.transform.model_copy(update={'auto_orient': self.auto_orient})
        return self

    @model_serializer(mode='wrap')
    def _flatten_content(self, handler: Any) -> dict[str, Any]:
        data = handler(self)
        content = data.pop('content')
        return {'ty': self.content.layer_type, **data, **content}

    @property
    def id(self) -> int:
        return self._id

    @property
    def kind(self) -> str:
        """Content variant name, e.g. 'shape' or 'precomposition'."""
        return self.content.content_kind

