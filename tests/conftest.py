"""
Pytest fixtures for lottiestag tests
"""

import copy

import pytest


def _constant(value):
    return {'a': 0, 'k': value}


SQUARE_PATH = {
    'c': True,
    'v': [[0, 0], [10, 0], [10, 10], [0, 10]],
    'i': [[0, 0], [0, 0], [0, 0], [0, 0]],
    'o': [[0, 0], [0, 0], [0, 0], [0, 0]],
}


_SAMPLE_DOCUMENT = {
    'v': '5.7.4',
    'nm': 'Sample',
    'ip': 0,
    'op': 60,
    'fr': 30,
    'w': 512,
    'h': 256,
    'ddd': 0,
    'layers': [
        {
            'ddd': 0,
            'ind': 1,
            'ty': 4,
            'nm': 'Shapes',
            'parent': 3,
            'ao': 0,
            'ip': 0,
            'op': 60,
            'st': 0,
            'ks': {
                'a': _constant([0, 0, 0]),
                'p': {
                    'a': 1,
                    'k': [
                        {
                            's': [0, 0, 0],
                            't': 0,
                            'o': {'x': 0.33, 'y': 0},
                            'i': {'x': [0.67], 'y': [1]},
                        },
                        {'s': [100, 50, 0], 't': 30},
                    ],
                },
                's': _constant([100, 100, 100]),
                'r': _constant(0),
                'o': _constant(100),
            },
            'shapes': [
                {
                    'ty': 'gr',
                    'nm': 'Box',
                    'np': 3,
                    'it': [
                        {
                            'ty': 'rc',
                            'nm': 'Rect',
                            'd': 1,
                            'p': _constant([0, 0]),
                            's': _constant([40, 20]),
                            'r': _constant(4),
                        },
                        {
                            'ty': 'sh',
                            'nm': 'Square',
                            'ks': _constant(copy.deepcopy(SQUARE_PATH)),
                        },
                        {
                            'ty': 'fl',
                            'nm': 'Fill',
                            'o': _constant(100),
                            'c': _constant([1, 0, 0, 1]),
                            'r': 1,
                        },
                        {
                            'ty': 'st',
                            'nm': 'Stroke',
                            'lc': 2,
                            'lj': 1,
                            'ml': 4,
                            'o': _constant(100),
                            'w': _constant(2),
                            'c': _constant([0, 0, 1, 1]),
                            'd': [
                                {'n': 'd', 'nm': 'dash', 'v': _constant(5)},
                                {'n': 'g', 'nm': 'gap', 'v': _constant(3)},
                            ],
                        },
                        {
                            'ty': 'tr',
                            'p': _constant([10, 10]),
                            'a': _constant([0, 0]),
                            's': _constant([100, 100]),
                            'r': _constant(0),
                            'o': _constant(100),
                        },
                    ],
                },
            ],
        },
        {
            'ddd': 0,
            'ind': 2,
            'ty': 1,
            'nm': 'Background',
            'ip': 0,
            'op': 60,
            'st': 0,
            'sc': '#336699',
            'sw': 512,
            'sh': 256,
        },
        {
            'ddd': 0,
            'ind': 3,
            'ty': 3,
            'nm': 'Null',
            'ip': 0,
            'op': 60,
            'st': 0,
            'hd': True,
        },
        {
            'ddd': 0,
            'ind': 4,
            'ty': 0,
            'nm': 'Nested',
            'refId': 'comp_0',
            'w': 512,
            'h': 256,
            'ip': 0,
            'op': 60,
            'st': 10,
        },
    ],
    'assets': [
        {
            'id': 'comp_0',
            'nm': 'Inner',
            'fr': 24,
            'layers': [
                {
                    'ddd': 0,
                    'ind': 1,
                    'ty': 4,
                    'nm': 'Inner shapes',
                    'ip': 0,
                    'op': 24,
                    'st': 0,
                    'shapes': [
                        {
                            'ty': 'el',
                            'nm': 'Dot',
                            'p': _constant([5, 5]),
                            's': _constant([10, 10]),
                        },
                    ],
                },
            ],
        },
        {'id': 'image_0', 'w': 64, 'h': 64, 'u': 'images/', 'p': 'img_0.png', 'e': 0},
    ],
    'fonts': {
        'list': [
            {
                'fFamily': 'Roboto',
                'fName': 'Roboto-Regular',
                'fStyle': 'Regular',
                'ascent': 75,
                'origin': 0,
            },
        ],
    },
    'markers': [{'cm': 'intro', 'tm': 0, 'dr': 15}],
}


@pytest.fixture
def sample_document_data() -> dict:
    """
    A document exercising every layer family used in practice.

    :return: Fresh copy of the raw document, safe to modify
    """
    return copy.deepcopy(_SAMPLE_DOCUMENT)


@pytest.fixture
def minimal_document_data() -> dict:
    """One second at 30 fps, no layers."""
    return {'ip': 0, 'op': 30, 'fr': 30, 'w': 100, 'h': 100, 'layers': []}


@pytest.fixture
def square_path() -> dict:
    return copy.deepcopy(SQUARE_PATH)
