import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Bytes that show up in property dumps and are never part of an action string.
UNWANTED_CHARS = ('\x7f', '\x80')

# Commands kept by the merge layer even when they carry no fields.
ZERO_ARGUMENT_COMMANDS = frozenset({'examine', 'sign'})

# Fields that describe a command without being part of its payload.
NON_PAYLOAD_FIELDS = frozenset({'commandType', 'commandText'})

# Commands keyed only by their type when merging (last one wins).
SINGLETON_COMMANDS = frozenset({'name'})


class Trigger(str, enum.Enum):
    CREATE = 'create'
    ACTIVATE = 'activate'
    BUMP = 'bump'
    ADONE = 'adone'
    END = 'end'


class CommandType(str, enum.Enum):
    # Order matters: the grammar tries commands in this order.
    TEXTURE = 'texture'
    ANIMATE = 'animate'
    SOUND = 'sound'
    CORONA = 'corona'
    COLOR = 'color'
    EXAMINE = 'examine'
    SOLID = 'solid'
    NAME = 'name'
    VISIBLE = 'visible'
    MOVE = 'move'
    ROTATE = 'rotate'
    SCALE = 'scale'
    LIGHT = 'light'
    NOISE = 'noise'
    OPACITY = 'opacity'
    AMBIENT = 'ambient'
    DIFFUSE = 'diffuse'
    SPECULAR = 'specular'
    PICTURE = 'picture'
    MEDIA = 'media'
    SAY = 'say'
    SEQ = 'seq'
    SIGN = 'sign'
    TELEPORT = 'teleport'
    WARP = 'warp'
    URL = 'url'
    INVALID = 'invalid'


LIGHT_TYPES = ('point', 'spot')
LIGHT_EFFECTS = ('blink', 'fadein', 'fadeout', 'fire', 'flicker', 'flash', 'pulse')

# Defaults for the positional tail of ``animate``.
ANIMATE_DEFAULTS = {
    'maskStatus': False,
    'imageCount': 1,
    'frameCount': 1,
    'frameDelay': 0,
}


@dataclass
class RawAction:
    """One ``trigger command, command, ...`` group, before merging."""
    trigger: str
    commands: List[Optional[Dict[str, Any]]] = field(default_factory=list)


ActionMap = Dict[str, List[Dict[str, Any]]]
