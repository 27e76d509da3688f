"""
Command resolution: fold a command's parsed arguments into a single record.

Each argument the semantic actions produce is either a ``(field, value)`` pair
or something the fold ignores. A field may be set only once per command; a
second assignment rejects the whole command and the resolver returns ``None``.
"""
import logging

from aw_action.data_model import ANIMATE_DEFAULTS, CommandType

LOGGER = logging.getLogger(__name__)

# Field produced by a bare resource token; renamed to the command type.
RESOURCE_FIELD = 'resource'


def _is_pair(argument):
    return isinstance(argument, tuple) and len(argument) == 2


def fold_arguments(command, arguments):
    """
    Assign every ``(field, value)`` pair of ``arguments`` onto ``command``.

    Returns False as soon as a field would be assigned twice. ``command`` is
    left partially filled in that case and must be thrown away.
    """
    for argument in arguments:
        if not _is_pair(argument):
            continue
        key, value = argument
        if key == RESOURCE_FIELD:
            key = command['commandType']
        if key in command:
            LOGGER.debug("Discarding %r command: %r set more than once",
                         command['commandType'], key)
            return False
        command[key] = value
    return True


def resolve_command(command_type, *arguments):
    """Generic ``keyword argument*`` command."""
    command = {'commandType': command_type}
    if not fold_arguments(command, arguments):
        return None
    return command


def resolve_animate(*arguments):
    """
    ``animate [tag=N] [mask|nomask] <name> <texture> [images frames delay [frame ...]]``

    The options are folded like any other command; the positional tail fills
    the frame fields, falling back to a single static frame.
    """
    command = {'commandType': CommandType.ANIMATE.value}
    if not fold_arguments(command, arguments):
        return None

    frames = command.pop('frames', [])
    for key, default in ANIMATE_DEFAULTS.items():
        command.setdefault(key, default)
    if len(frames) > 0:
        command['imageCount'] = frames[0]
    if len(frames) > 1:
        command['frameCount'] = frames[1]
    if len(frames) > 2:
        command['frameDelay'] = frames[2]
    command['frameList'] = list(frames[3:])
    return command


def resolve_examine():
    return {'commandType': CommandType.EXAMINE.value}


def resolve_warp(coordinates):
    command = {'commandType': CommandType.WARP.value}
    command.update(coordinates)
    return command


def resolve_teleport(*parts):
    """
    ``teleport [world] [coordinates [altitude] [direction]]``

    Parts are the optional world name (a string) and the optional world
    coordinates (a dict with ``coordinates``, ``altitude`` and ``direction``).
    """
    command = {'commandType': CommandType.TELEPORT.value}
    for part in parts:
        if isinstance(part, str):
            command['worldName'] = part
        else:
            command.update(part)
    return command


def resolve_invalid(text):
    return {'commandType': CommandType.INVALID.value, 'commandText': text}
