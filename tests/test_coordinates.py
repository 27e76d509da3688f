import pytest

from aw_action.coerce import (
    complete_coordinates, complete_scale, hemisphere_value, absolute_coordinates,
    relative_coordinates, altitude, world_coordinates, to_boolean, clamp_unit,
)
from conftest import vec


@pytest.mark.parametrize('values, expected', [
    ([5.0], vec(0.0, 5.0, 0.0)),
    ([1.0, 2.0], vec(1.0, 2.0, 0.0)),
    ([1.0, 2.0, 3.0], vec(1.0, 2.0, 3.0)),
    ([], vec(0.0, 0.0, 0.0)),
    ([1.0, 2.0, 3.0, 4.0], vec(0.0, 0.0, 0.0)),
])
def test_complete_coordinates(values, expected):
    assert complete_coordinates(values) == expected


@pytest.mark.parametrize('values, expected', [
    ([2.0], vec(2.0, 2.0, 2.0)),
    ([2.0, 3.0], vec(2.0, 3.0, 1.0)),
    ([2.0, 3.0, 4.0], vec(2.0, 3.0, 4.0)),
    ([0.0], vec(0.1, 0.1, 0.1)),
    ([-1.0, 0.2], vec(0.1, 0.2, 1.0)),
    ([1.0, 2.0, 3.0, 4.0], vec(1.0, 2.0, 3.0)),
])
def test_complete_scale(values, expected):
    assert complete_scale(values) == expected


@pytest.mark.parametrize('letter, expected', [
    ('N', 3.0), ('n', 3.0), ('E', 3.0), ('e', 3.0),
    ('S', -3.0), ('s', -3.0), ('W', -3.0), ('w', -3.0),
])
def test_hemisphere_value(letter, expected):
    assert hemisphere_value(3.0, letter) == expected


def test_coordinate_records():
    assert absolute_coordinates(1.5, -2.0) == {
        'coordinateType': 'absolute', 'NS': 1.5, 'EW': -2.0,
    }
    assert relative_coordinates(-1.0, 4.0) == {
        'coordinateType': 'relative', 'x': -1.0, 'y': 4.0,
    }


def test_altitude_sign_makes_it_relative():
    assert altitude('', 10.0) == {'altitudeType': 'absolute', 'value': 10.0}
    assert altitude('+', 10.0) == {'altitudeType': 'relative', 'value': 10.0}
    assert altitude('-', 10.0) == {'altitudeType': 'relative', 'value': -10.0}


def test_world_coordinates_defaults():
    coords = relative_coordinates(1.0, 1.0)
    assert world_coordinates(coords) == {
        'coordinates': coords, 'altitude': None, 'direction': None,
    }


def test_to_boolean():
    assert to_boolean('yes') is True
    assert to_boolean('no') is False
    with pytest.raises(ValueError):
        to_boolean('maybe')


def test_clamp_unit():
    assert clamp_unit(-0.5) == 0.0
    assert clamp_unit(0.3) == 0.3
    assert clamp_unit(2.0) == 1.0
