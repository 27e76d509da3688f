"""
Vector completion for move/rotate/scale and world-coordinate resolution for
teleport/warp.
"""
from aw_action.coerce.constants import SCALE_MIN


def vector3(x, y, z):
    return {'x': x, 'y': y, 'z': z}


def complete_coordinates(values):
    """
    Expand 1-3 distances into a full vector.

    One value is the vertical axis: ``[v] -> (0, v, 0)``. Two values fill x and
    y, three fill everything. Any other count gives the zero vector.
    """
    if len(values) == 1:
        return vector3(0.0, values[0], 0.0)
    elif len(values) == 2:
        return vector3(values[0], values[1], 0.0)
    elif len(values) == 3:
        return vector3(values[0], values[1], values[2])
    return vector3(0.0, 0.0, 0.0)


def clamp_scale(value, minimum=SCALE_MIN):
    return max(value, minimum)


def complete_scale(values):
    """
    Expand 1-3 scale factors into a full vector, flooring each at 0.1.

    One value scales uniformly, two leave z at 1.
    """
    clamped = [clamp_scale(v) for v in values]
    if len(clamped) == 1:
        return vector3(clamped[0], clamped[0], clamped[0])
    elif len(clamped) == 2:
        return vector3(clamped[0], clamped[1], 1.0)
    return vector3(clamped[0], clamped[1], clamped[2])


# ── World coordinates ─────────────────────────────────────────────────

def hemisphere_value(value, hemisphere):
    """South and west are negative; the letter is case-insensitive."""
    if hemisphere.upper() in ('S', 'W'):
        return -value
    return value


def absolute_coordinates(north_south, east_west):
    return {
        'coordinateType': 'absolute',
        'NS': north_south,
        'EW': east_west,
    }


def relative_coordinates(x, y):
    return {
        'coordinateType': 'relative',
        'x': x,
        'y': y,
    }


def altitude(sign, value):
    """An explicit sign makes the altitude relative to the current one."""
    if sign:
        return {
            'altitudeType': 'relative',
            'value': -value if sign == '-' else value,
        }
    return {
        'altitudeType': 'absolute',
        'value': value,
    }


def world_coordinates(coordinates, altitude=None, direction=None):
    return {
        'coordinates': coordinates,
        'altitude': altitude,
        'direction': direction,
    }
