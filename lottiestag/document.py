"""
Document - the decoded animation.

A document contains:
- Timing (in/out frame, frame rate) and canvas size
- Top-level layers
- Assets: precompositions (own layer lists) and images
- Fonts and markers

Precomposition references are kept as asset ids; linking them to the asset
list is left to the consumer.
"""

import itertools
from typing import Annotated, Any, ClassVar, Iterator, Optional, Union

from pydantic import Discriminator, Field, Tag, model_validator

from .base import LottieModel
from .coerce import IntBool
from .enums import FontPathOrigin
from .layers import Layer, ShapeContent
from .shapes import walk_shape_layers


class Font(LottieModel):
    """Typeface descriptor, no font loading happens here."""

    ascent: Optional[float] = Field(default=None)
    family: str = Field(alias='fFamily')
    name: str = Field(alias='fName')
    style: str = Field(alias='fStyle')
    path: Optional[str] = Field(default=None, alias='fPath')
    weight: Optional[str] = Field(default=None, alias='fWeight')
    origin: FontPathOrigin = Field(default=FontPathOrigin.LOCAL)
    font_class: Optional[str] = Field(default=None, alias='fClass')


class FontList(LottieModel):
    fonts: list[Font] = Field(default_factory=list, alias='list')


class Marker(LottieModel):
    """Named time range on the timeline."""
    comment: str = Field(default='', alias='cm')
    time: float = Field(alias='tm')
    duration: float = Field(default=0.0, alias='dr')


class Precomposition(LottieModel):
    """Reusable sub-timeline, referenced by layers through its id."""

    asset_kind: ClassVar[str] = "precomposition"

    id: str
    layers: list[Layer]
    name: Optional[str] = Field(default=None, alias='nm')
    frame_rate: Optional[float] = Field(default=None, alias='fr', gt=0)


class ImageAsset(LottieModel):
    """Image file referenced by image layers; the file itself is not loaded."""

    asset_kind: ClassVar[str] = "image"

    id: str
    width: Optional[float] = Field(default=None, alias='w')
    height: Optional[float] = Field(default=None, alias='h')
    directory: str = Field(default='', alias='u')
    path: str = Field(alias='p')
    embedded: IntBool = Field(default=False, alias='e')


def _asset_kind(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        return Precomposition.asset_kind if 'layers' in value else ImageAsset.asset_kind
    return getattr(value, 'asset_kind', None)


Asset = Annotated[
    Union[
        Annotated[Precomposition, Tag(Precomposition.asset_kind)],
        Annotated[ImageAsset, Tag(ImageAsset.asset_kind)],
    ],
    Discriminator(_asset_kind),
]


class Document(LottieModel):
    """
    Root of a decoded animation.

    Example:
        >>> from lottiestag import decode
        >>> doc = decode('{"ip": 0, "op": 30, "fr": 30, "w": 100, "h": 100, "layers": []}')
        >>> doc.duration()
        1.0
    """

    name: Optional[str] = Field(default=None, alias='nm')
    version: Optional[str] = Field(default=None, alias='v')
    start_frame: float = Field(alias='ip')
    end_frame: float = Field(alias='op')
    frame_rate: float = Field(alias='fr', gt=0)
    width: int = Field(alias='w')
    height: int = Field(alias='h')
    layers: list[Layer]
    assets: list[Asset] = Field(default_factory=list)
    fonts: FontList = Field(default_factory=FontList)
    markers: list[Marker] = Field(default_factory=list)

    @model_validator(mode='after')
    def _assign_ids(self) -> 'Document':
        """Number all layers and all shape layers sequentially."""
        layer_ids = itertools.count()
        shape_ids = itertools.count()
        for layer in self.all_layers():
            layer._id = next(layer_ids)
            if isinstance(layer.content, ShapeContent):
                for shape_layer in walk_shape_layers(layer.content.shapes):
                    shape_layer._id = next(shape_ids)
        return self

    def duration(self) -> float:
        """
        Length of the animation in seconds.

        :raises ValueError: If the frame rate is not positive
        """
        if self.frame_rate <= 0:
            raise ValueError(f"frame rate must be positive, got {self.frame_rate}")
        return (self.end_frame - self.start_frame) / self.frame_rate

    @property
    def precompositions(self) -> list[Precomposition]:
        return [asset for asset in self.assets if isinstance(asset, Precomposition)]

    def all_layers(self) -> Iterator[Layer]:
        """Top-level layers, then the layers of each precomposition in asset order."""
        yield from self.layers
        for precomposition in self.precompositions:
            yield from precomposition.layers
