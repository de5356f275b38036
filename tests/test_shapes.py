"""
Tests for the shape union.
"""

import logging

import pytest

from lottiestag import (
    DecodeError,
    DecodeErrorKind,
    FillRule,
    GradientType,
    LineCap,
    MergeMode,
    PolyStarType,
    ShapeDirection,
    ShapeLayer,
    StrokeDashType,
)
from lottiestag.color import Rgb, Rgba
from lottiestag.shapes import (
    Ellipse,
    Fill,
    GradientFill,
    GradientStroke,
    Group,
    Merge,
    OffsetPath,
    Path,
    PolyStar,
    PuckerBloat,
    Rectangle,
    Repeater,
    RoundedCorners,
    ShapeTransform,
    Stroke,
    Trim,
    Twist,
    ZigZag,
    get_shape_class,
    registered_shape_types,
    walk_shape_layers,
)


def constant(value):
    return {'a': 0, 'k': value}


GRADIENT = {'p': 2, 'k': constant([0, 1, 0, 0, 1, 0, 0, 1])}

SHAPE_SAMPLES = {
    'rc': {'p': constant([0, 0]), 's': constant([10, 10]), 'r': constant(0)},
    'el': {'p': constant([0, 0]), 's': constant([10, 10])},
    'sr': {
        'p': constant([0, 0]), 'or': constant(10), 'os': constant(0),
        'ir': constant(5), 'is': constant(0), 'r': constant(0),
        'pt': constant(5), 'sy': 1,
    },
    'sh': {'ks': constant({'c': False, 'v': [[0, 0]], 'i': [[0, 0]], 'o': [[0, 0]]})},
    'fl': {'o': constant(100), 'c': constant([1, 1, 1, 1])},
    'st': {
        'lc': 1, 'lj': 1, 'ml': 4, 'o': constant(100),
        'w': constant(1), 'c': constant([0, 0, 0, 1]),
    },
    'gf': {
        'o': constant(100), 's': constant([0, 0]), 'e': constant([10, 0]),
        't': 1, 'g': GRADIENT,
    },
    'gs': {
        'lc': 1, 'lj': 1, 'ml': 4, 'o': constant(100), 'w': constant(1),
        's': constant([0, 0]), 'e': constant([10, 0]), 't': 2, 'g': GRADIENT,
    },
    'gr': {'it': []},
    'tr': {},
    'rp': {
        'c': constant(3), 'o': constant(0), 'm': 1,
        'tr': {
            'p': constant([10, 0]), 's': constant([100, 100]), 'r': constant(0),
            'so': constant(100), 'eo': constant(50),
        },
    },
    'tm': {'s': constant(0), 'e': constant(50), 'o': constant(0), 'm': 1},
    'rd': {'r': constant(4)},
    'pb': {'a': constant(20)},
    'tw': {'a': constant(45), 'c': constant([0, 0])},
    'mm': {'mm': 1},
    'op': {'a': constant(2), 'lj': 2, 'ml': 4},
    'zz': {'r': constant(3), 's': constant(5), 'pt': constant(1)},
}

EXPECTED_CLASSES = {
    'rc': Rectangle, 'el': Ellipse, 'sr': PolyStar, 'sh': Path,
    'fl': Fill, 'st': Stroke, 'gf': GradientFill, 'gs': GradientStroke,
    'gr': Group, 'tr': ShapeTransform, 'rp': Repeater, 'tm': Trim,
    'rd': RoundedCorners, 'pb': PuckerBloat, 'tw': Twist, 'mm': Merge,
    'op': OffsetPath, 'zz': ZigZag,
}


def decode_shape(ty, **overrides):
    return ShapeLayer.from_dict({'ty': ty, **SHAPE_SAMPLES[ty], **overrides})


class TestTagClosure:
    """Every discriminant maps to exactly its variant."""

    def test_registry_is_complete(self):
        assert sorted(registered_shape_types()) == sorted(EXPECTED_CLASSES)
        for ty, shape_class in EXPECTED_CLASSES.items():
            assert get_shape_class(ty) is shape_class

    @pytest.mark.parametrize("ty", sorted(EXPECTED_CLASSES))
    def test_decodes_to_variant(self, ty):
        shape_layer = decode_shape(ty)
        assert type(shape_layer.shape) is EXPECTED_CLASSES[ty]
        assert shape_layer.shape.shape_type == ty

    @pytest.mark.parametrize("ty", sorted(EXPECTED_CLASSES))
    def test_round_trip(self, ty):
        shape_layer = decode_shape(ty, nm=f"{ty} shape")
        encoded = shape_layer.to_dict()
        assert encoded['ty'] == ty
        assert encoded['nm'] == f"{ty} shape"
        assert ShapeLayer.from_dict(encoded) == shape_layer

    def test_unknown_discriminant(self):
        with pytest.raises(DecodeError) as info:
            ShapeLayer.from_dict({'ty': 'xx'})
        assert info.value.kind == DecodeErrorKind.UNKNOWN_DISCRIMINANT

    def test_missing_discriminant(self):
        with pytest.raises(DecodeError) as info:
            ShapeLayer.from_dict({'nm': 'no tag'})
        assert info.value.kind == DecodeErrorKind.SCHEMA

    def test_unknown_discriminant_inside_group(self):
        with pytest.raises(DecodeError) as info:
            ShapeLayer.from_dict({'ty': 'gr', 'it': [SHAPE_SAMPLES['rd'] | {'ty': 'rd'}, {'ty': 'xx'}]})
        assert info.value.kind == DecodeErrorKind.UNKNOWN_DISCRIMINANT
        assert info.value.location == ('it', 1)

    def test_missing_field_is_schema_violation(self):
        with pytest.raises(DecodeError) as info:
            ShapeLayer.from_dict({'ty': 'rc', 'p': constant([0, 0]), 's': constant([1, 1])})
        assert info.value.kind == DecodeErrorKind.SCHEMA
        assert info.value.location == ('r',)


class TestWrapper:
    def test_name_and_hidden(self):
        shape_layer = decode_shape('rd', nm='Corners', hd=True)
        assert shape_layer.name == 'Corners'
        assert shape_layer.hidden is True

    def test_defaults(self):
        shape_layer = decode_shape('rd')
        assert shape_layer.name is None
        assert shape_layer.hidden is False

    def test_id_is_not_encoded(self):
        assert 'id' not in decode_shape('rd').to_dict()


class TestGeometry:
    def test_rectangle(self):
        """Rectangle with explicit clockwise direction and constant properties."""
        shape = ShapeLayer.from_dict({
            'ty': 'rc', 'd': 1,
            'p': {'a': 0, 'k': [0, 0]},
            's': {'a': 0, 'k': [10, 10]},
            'r': {'a': 0, 'k': 0},
        }).shape
        assert isinstance(shape, Rectangle)
        assert shape.direction == ShapeDirection.CLOCKWISE
        assert shape.position.animated is False
        assert shape.size.animated is False
        assert shape.size.initial_value == (10.0, 10.0)

    def test_direction_defaults_when_absent(self):
        assert decode_shape('el').shape.direction == ShapeDirection.CLOCKWISE

    def test_direction_counter_clockwise(self):
        assert decode_shape('el', d=2).shape.direction == ShapeDirection.COUNTER_CLOCKWISE

    @pytest.mark.parametrize("value", [0, 3])
    def test_invalid_direction_fails(self, value):
        with pytest.raises(DecodeError) as info:
            decode_shape('rc', d=value)
        assert info.value.kind == DecodeErrorKind.UNKNOWN_DISCRIMINANT

    def test_polygon_without_inner_radius(self):
        raw = dict(SHAPE_SAMPLES['sr'], sy=2)
        del raw['ir'], raw['is']
        shape = ShapeLayer.from_dict({'ty': 'sr', **raw}).shape
        assert shape.star_type == PolyStarType.POLYGON
        assert shape.is_star is False
        assert shape.inner_radius is None

    def test_invalid_star_type(self):
        with pytest.raises(DecodeError) as info:
            decode_shape('sr', sy=3)
        assert info.value.kind == DecodeErrorKind.UNKNOWN_DISCRIMINANT

    def test_path(self):
        shape = decode_shape('sh').shape
        assert shape.path.initial_value[0].closed is False


class TestPaint:
    def test_fill(self):
        shape = decode_shape('fl').shape
        assert shape.fill_rule == FillRule.NON_ZERO
        assert shape.color.initial_value == Rgb(255, 255, 255)

    def test_fill_rule_present(self):
        assert decode_shape('fl', r=2).shape.fill_rule == FillRule.EVEN_ODD

    def test_fill_rule_invalid_is_not_defaulted(self):
        with pytest.raises(DecodeError) as info:
            decode_shape('fl', r=7)
        assert info.value.kind == DecodeErrorKind.UNKNOWN_DISCRIMINANT

    def test_transparent_fill(self):
        fill = Fill.transparent()
        assert fill.opacity.initial_value == 0.0
        assert fill.color.initial_value == Rgb(0, 0, 0)
        assert fill.fill_rule == FillRule.NON_ZERO

    def test_stroke_dashes(self):
        shape = decode_shape('st', lc=3, d=[
            {'n': 'd', 'v': constant(4)},
            {'n': 'g', 'v': constant(2)},
            {'n': 'o', 'v': constant(1)},
        ]).shape
        assert shape.line_cap == LineCap.SQUARE
        assert [dash.dash_type for dash in shape.dashes] == [
            StrokeDashType.DASH, StrokeDashType.GAP, StrokeDashType.OFFSET
        ]
        assert shape.dashes[0].length.initial_value == 4.0

    def test_stroke_without_dashes(self):
        assert decode_shape('st').shape.dashes == []

    def test_unknown_dash_role(self):
        with pytest.raises(DecodeError) as info:
            decode_shape('st', d=[{'n': 'x', 'v': constant(1)}])
        assert info.value.kind == DecodeErrorKind.UNKNOWN_DISCRIMINANT

    @pytest.mark.parametrize("field, value", [('lc', 4), ('lj', 0)])
    def test_invalid_line_options(self, field, value):
        with pytest.raises(DecodeError) as info:
            decode_shape('st', **{field: value})
        assert info.value.kind == DecodeErrorKind.UNKNOWN_DISCRIMINANT

    def test_gradient_stops(self):
        shape = decode_shape('gf').shape
        assert shape.gradient_type == GradientType.LINEAR
        stops = shape.colors.color_stops()
        assert [stop.offset for stop in stops] == [0.0, 1.0]
        assert stops[0].color == Rgba(255, 0, 0, 255)
        assert stops[1].color == Rgba(0, 0, 255, 255)

    def test_gradient_opacity_stops(self):
        colors = {'p': 2, 'k': constant([0, 1, 1, 1, 1, 0, 0, 0, 0, 1, 1, 0.5])}
        stops = decode_shape('gs', g=colors).shape.colors.color_stops()
        assert stops[0].color.a == 255
        assert stops[1].color.a == 127

    def test_gradient_too_few_values(self):
        with pytest.raises(DecodeError) as info:
            decode_shape('gf', g={'p': 3, 'k': constant([0, 1, 0, 0])})
        assert info.value.kind == DecodeErrorKind.SCHEMA

    def test_radial_highlight(self):
        shape = decode_shape('gf', t=2, h=constant(10), a=constant(45)).shape
        assert shape.gradient_type == GradientType.RADIAL
        assert shape.highlight_length.initial_value == 10.0
        assert shape.highlight_angle.initial_value == 45.0


class TestModifiers:
    def test_repeater(self):
        shape = decode_shape('rp').shape
        assert shape.copies.initial_value == 3.0
        assert shape.transform.start_opacity.initial_value == 100.0
        assert shape.transform.end_opacity.initial_value == 50.0
        assert shape.transform.anchor.initial_value == (0.0, 0.0)

    def test_transform_defaults(self):
        shape = decode_shape('tr').shape
        assert shape.scale.initial_value == (100.0, 100.0)
        assert shape.opacity.initial_value == 100.0
        assert shape.is_identity()

    def test_merge_mode_known(self):
        assert decode_shape('mm', mm=3).shape.mode == MergeMode.SUBTRACT

    @pytest.mark.parametrize("value", [9, 0, 42])
    def test_merge_mode_fallback(self, value, caplog):
        """Unknown merge modes decode to the UNSUPPORTED sentinel."""
        with caplog.at_level(logging.WARNING, logger='lottiestag.enums'):
            shape = decode_shape('mm', mm=value).shape
        assert shape.mode == MergeMode.UNSUPPORTED
        if value != 0:
            assert 'Unsupported merge mode' in caplog.text

    def test_merge_mode_wrong_type(self):
        with pytest.raises(DecodeError):
            decode_shape('mm', mm='add')

    def test_zig_zag(self):
        shape = decode_shape('zz').shape
        assert shape.frequency.initial_value == 3.0
        assert shape.amplitude.initial_value == 5.0


class TestGroups:
    def test_nested_groups(self):
        raw = {
            'ty': 'gr', 'nm': 'outer', 'np': 2,
            'it': [
                {'ty': 'gr', 'nm': 'inner', 'it': [{'ty': 'rd', 'nm': 'leaf', 'r': constant(1)}]},
                {'ty': 'tr', 'nm': 'transform'},
            ],
        }
        outer = ShapeLayer.from_dict(raw)
        assert isinstance(outer.shape, Group)
        assert outer.shape.property_count == 2
        inner = outer.shape.shapes[0]
        assert isinstance(inner.shape, Group)
        assert isinstance(inner.shape.shapes[0].shape, RoundedCorners)
        names = [shape_layer.name for shape_layer in walk_shape_layers([outer])]
        assert names == ['outer', 'inner', 'leaf', 'transform']
        assert ShapeLayer.from_dict(outer.to_dict()) == outer

    def test_group_requires_items(self):
        with pytest.raises(DecodeError) as info:
            ShapeLayer.from_dict({'ty': 'gr'})
        assert info.value.kind == DecodeErrorKind.SCHEMA
