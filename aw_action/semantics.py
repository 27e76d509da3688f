"""
Semantic actions: one conversion per grammar rule.

Every action receives the values emitted by its rule's sub-expressions (captured
text, or the results of nested rules) and emits exactly one value: a scalar,
a ``(field, value)`` pair for the command resolver, or a finished record.
"""
from functools import partial

from pe.actions import Call, Constant

from aw_action.coerce import (
    to_boolean, to_integer, to_float, clamp_unit,
    complete_coordinates, complete_scale, hemisphere_value,
    absolute_coordinates, relative_coordinates, altitude, world_coordinates,
    resolve_color,
)
from aw_action.data_model import RawAction, CommandType
from aw_action.resolver import (
    resolve_command, resolve_animate, resolve_examine, resolve_teleport,
    resolve_warp, resolve_invalid,
)


def _identity(value):
    return value


def _pair(key, convert=_identity):
    """Action emitting ``(key, convert(value))``."""
    return Call(lambda value: (key, convert(value)))


def _status(key, positive):
    """``loop`` / ``noloop`` style switches: True when the positive word was used."""
    return Call(lambda word: (key, word == positive))


def _lower(text):
    return text.lower()


def _vector(key, complete):
    return Call(lambda *values: (key, complete(values)))


def _hemisphere(value, letter):
    return hemisphere_value(value, letter)


def _altitude(sign, value):
    return ('altitude', altitude(sign, value))


def _world_coordinates(coordinates, *extras):
    return world_coordinates(coordinates, **dict(extras))


def _actions(*actions):
    return list(actions)


def _action(trigger, *commands):
    return RawAction(trigger=trigger, commands=list(commands))


# Commands whose record is the generic fold of their arguments.
GENERIC_COMMANDS = [
    c for c in CommandType
    if c not in (CommandType.ANIMATE, CommandType.EXAMINE, CommandType.TELEPORT,
                 CommandType.WARP, CommandType.INVALID)
]


def build_actions():
    """Map rule name -> pe Action for every rule that converts its match."""
    actions = {
        # Structure
        'start': Call(_identity),
        'actions': Call(_actions),
        'action': Call(_action),
        'trigger': Call(_identity),
        'command': Call(_identity),

        # Numbers
        'integer': Call(to_integer),
        'float': Call(to_float),
        'signed_float': Call(to_float),
        'force_signed_float': Call(to_float),

        # Positional arguments
        'resource_target': _pair('resource'),
        'name_argument': _pair('targetName', _lower),
        'boolean_argument': _pair('value', to_boolean),
        'color_argument': _pair('color', resolve_color),
        'opacity_value': _pair('value', clamp_unit),
        'intensity_value': _pair('intensity', clamp_unit),
        'text_argument': _pair('text'),
        'seq_name': _pair('seq'),
        'move_distances': _vector('distance', complete_coordinates),
        'rotate_distances': _vector('speed', complete_coordinates),
        'scale_factor': _vector('factor', complete_scale),

        # Status switches
        'animate_mask_status': _status('maskStatus', 'mask'),
        'loop_status': _status('loop', 'loop'),
        'sync_status': _status('sync', 'sync'),
        'reset_status': _status('reset', 'reset'),
        'overlap_status': Constant(('overlap', True)),

        # Named parameters
        'name_parameter': _pair('targetName', _lower),
        'tag_parameter': _pair('tag'),
        'mask_parameter': _pair('mask'),
        'size_parameter': _pair('size'),
        'time_parameter': _pair('time'),
        'wait_parameter': _pair('wait'),
        'update_parameter': _pair('update'),
        'radius_parameter': _pair('radius'),
        'brightness_parameter': _pair('brightness'),
        'angle_parameter': _pair('angle'),
        'pitch_parameter': _pair('pitch'),
        'color_parameter': _pair('color', resolve_color),
        'bcolor_parameter': _pair('bcolor', resolve_color),
        'light_type_parameter': _pair('type', _lower),
        'fx_parameter': _pair('fx', _lower),
        'url_target_parameter': _pair('target', _lower),

        # Animate positional tail
        'animate_name': _pair('targetName', _lower),
        'animate_texture': _pair('texture'),
        'animate_frames': Call(lambda *frames: ('frames', list(frames))),

        # World coordinates
        'ns_coordinate': Call(_hemisphere),
        'ew_coordinate': Call(_hemisphere),
        'absolute_coordinates': Call(absolute_coordinates),
        'relative_coordinates': Call(relative_coordinates),
        'altitude': Call(_altitude),
        'direction': _pair('direction'),
        'world_coordinates': Call(_world_coordinates),
        'world_name': Call(_identity),

        # Commands with their own record layout
        'animate_command': Call(resolve_animate),
        'examine_command': Call(resolve_examine),
        'teleport_command': Call(resolve_teleport),
        'warp_command': Call(resolve_warp),
        'invalid_command': Call(resolve_invalid),
    }
    for command_type in GENERIC_COMMANDS:
        actions[f'{command_type.value}_command'] = Call(
            partial(resolve_command, command_type.value))
    return actions
