"""
PEG grammar for action strings, built with pe's operator API.

    actions  <- (action (";"+ action)*)? ";"*
    action   <- trigger command (","+ command)* ","?
    command  <- texture_command / animate_command / ... / url_command
              / invalid_command

Whitespace may precede every token of the structural rules, command arguments
included; lexical tokens (numbers, names, ``key=value`` parameters,
coordinates such as ``2.5N``) never contain whitespace.

Ordered choice decides ambiguities: the first command alternative that matches
*and* is followed by a delimiter wins, otherwise the text up to the next
delimiter falls through to ``invalid_command``. Command keywords are
case-insensitive; argument keywords are not, apart from the parameters built
with ``_ci_param``.
"""
import re

from pe._grammar import Grammar
from pe.operators import Capture as Cap
from pe.operators import Choice as Ch
from pe.operators import Dot as DOT
from pe.operators import Literal as Lit
from pe.operators import Nonterminal as NT
from pe.operators import Not
from pe.operators import Optional as Opt
from pe.operators import Plus, Regex
from pe.operators import Sequence as Seq
from pe.operators import Star
from pe.packrat import PackratParser

from aw_action.data_model import CommandType, Trigger, LIGHT_TYPES, LIGHT_EFFECTS
from aw_action.semantics import build_actions

START = 'start'

# Every character up to and including the space counts as whitespace.
WS = Regex(r'[\x00- ]*')

# ── Token patterns ────────────────────────────────────────────────────

FLOAT_PAT = r'(?:[0-9]*\.[0-9]+|[0-9]+)'
# [^\W_] is a unicode letter or digit
RESOURCE_PAT = r'(?:[^\W_]|[./:_\-+%?=\[\]&~!@*()])+'
BASIC_RESOURCE_PAT = r'[\w.\-]+'
OBJECT_NAME_PAT = r'[\w\-]+'
COLOR_CODE_PAT = r'[^\W_]+'

OBJECT_NAME = Cap(Regex(OBJECT_NAME_PAT))
COLOR_CODE = Cap(Regex(COLOR_CODE_PAT))
QUOTED_TEXT = Seq(Lit('"'), Cap(Regex(r'[^"]*')), Opt(Lit('"')))
UNQUOTED_TEXT = Cap(Regex(r'[^;, ]+'))

# A command only counts when the next non-space character is a delimiter
# (or there is nothing left).
COMMAND_END = Not(Seq(WS, Regex(r'[^;,]')))


def _ci(word):
    return '(?i:' + re.escape(word) + ')'


def keyword(word):
    """Case-insensitive keyword."""
    return Regex(_ci(word))


def _one_of(words, case_insensitive=False):
    pattern = '|'.join(re.escape(w) for w in words)
    return Regex('(?i:' + pattern + ')' if case_insensitive else pattern)


def _param(name, value):
    """``name=value`` with a case-sensitive name."""
    return Seq(Lit(name + '='), value)


def _ci_param(name, value):
    return Seq(Regex(_ci(name) + '='), value)


def _list_of(item, separator):
    """``item (separator+ item)*`` with whitespace before every token."""
    return Seq(item, Star(Seq(Plus(Seq(WS, Lit(separator))), WS, item)))


def _spaced(rule):
    """``rule (ws rule)*``"""
    return Seq(NT(rule), Star(Seq(WS, NT(rule))))


# Argument alternatives per generic command, tried in order.
COMMAND_ARGUMENTS = {
    CommandType.TEXTURE: ['mask_parameter', 'tag_parameter', 'name_parameter', 'resource_target'],
    CommandType.SOUND: ['name_parameter', 'loop_status', 'resource_target'],
    CommandType.CORONA: ['mask_parameter', 'size_parameter', 'name_parameter', 'resource_target'],
    CommandType.COLOR: ['name_parameter', 'color_argument'],
    CommandType.SOLID: ['boolean_argument', 'name_argument'],
    CommandType.NAME: ['name_argument'],
    CommandType.VISIBLE: ['boolean_argument', 'name_argument'],
    CommandType.MOVE: ['move_distances', 'loop_status', 'sync_status', 'reset_status',
                       'name_parameter', 'time_parameter', 'wait_parameter'],
    CommandType.ROTATE: ['rotate_distances', 'sync_status', 'time_parameter', 'loop_status',
                         'reset_status', 'wait_parameter', 'name_parameter'],
    CommandType.SCALE: ['scale_factor', 'sync_status', 'time_parameter', 'loop_status',
                        'reset_status', 'wait_parameter', 'name_parameter'],
    CommandType.LIGHT: ['light_type_parameter', 'color_parameter', 'brightness_parameter',
                        'radius_parameter', 'name_parameter', 'fx_parameter',
                        'time_parameter', 'angle_parameter', 'pitch_parameter'],
    CommandType.NOISE: ['overlap_status', 'resource_target'],
    CommandType.OPACITY: ['opacity_value', 'tag_parameter', 'name_parameter'],
    CommandType.AMBIENT: ['intensity_value', 'tag_parameter', 'name_parameter'],
    CommandType.DIFFUSE: ['intensity_value', 'tag_parameter', 'name_parameter'],
    CommandType.SPECULAR: ['intensity_value', 'tag_parameter', 'name_parameter'],
    CommandType.PICTURE: ['update_parameter', 'name_parameter', 'resource_target'],
    CommandType.MEDIA: ['name_parameter', 'radius_parameter', 'resource_target'],
    CommandType.SAY: ['text_argument'],
    CommandType.SEQ: ['loop_status', 'name_parameter', 'seq_name'],
    CommandType.SIGN: ['color_parameter', 'bcolor_parameter', 'name_parameter', 'text_argument'],
    CommandType.URL: ['url_target_parameter', 'resource_target'],
}


def _generic_command(command_type, arguments):
    """``keyword argument*``"""
    return Seq(keyword(command_type.value),
               Star(Seq(WS, Ch(*[NT(a) for a in arguments]))))


def build_rules():
    rules = {}

    # ── Structure ──
    rules['start'] = Seq(NT('actions'), WS, Not(DOT()))
    rules['actions'] = Seq(Opt(Seq(WS, _list_of(NT('action'), ';'))),
                           Star(Seq(WS, Lit(';'))))
    rules['action'] = Seq(NT('trigger'), WS, _list_of(NT('command'), ','),
                          Opt(Seq(WS, Lit(','))))
    rules['trigger'] = Cap(_one_of([t.value for t in Trigger], case_insensitive=True))

    command_order = [c for c in CommandType if c != CommandType.INVALID]
    rules['command'] = Ch(
        *[Seq(NT(f'{c.value}_command'), COMMAND_END) for c in command_order],
        NT('invalid_command'),
    )

    # ── Numbers ──
    rules['integer'] = Cap(Regex(r'[0-9]+'))
    rules['float'] = Cap(Regex(FLOAT_PAT))
    rules['signed_float'] = Cap(Regex(r'[+\-]?' + FLOAT_PAT))
    rules['force_signed_float'] = Cap(Regex(r'[+\-]' + FLOAT_PAT))

    # ── Positional arguments ──
    rules['resource_target'] = Cap(Regex(RESOURCE_PAT))
    rules['name_argument'] = OBJECT_NAME
    rules['boolean_argument'] = Cap(_one_of(['on', 'true', 'yes', 'off', 'false', 'no']))
    rules['color_argument'] = COLOR_CODE
    rules['opacity_value'] = NT('signed_float')
    rules['intensity_value'] = NT('signed_float')
    rules['text_argument'] = Ch(QUOTED_TEXT, UNQUOTED_TEXT)
    rules['seq_name'] = Cap(Regex(BASIC_RESOURCE_PAT))
    rules['move_distances'] = _spaced('signed_float')
    rules['rotate_distances'] = _spaced('signed_float')
    rules['scale_factor'] = _spaced('signed_float')

    # ── Status switches ──
    rules['animate_mask_status'] = Cap(_one_of(['mask', 'nomask']))
    rules['loop_status'] = Cap(_one_of(['loop', 'noloop']))
    rules['sync_status'] = Cap(_one_of(['sync', 'nosync']))
    rules['reset_status'] = Cap(_one_of(['reset', 'noreset']))
    rules['overlap_status'] = Lit('overlap')

    # ── Named parameters ──
    rules['name_parameter'] = _param('name', OBJECT_NAME)
    rules['tag_parameter'] = _param('tag', NT('integer'))
    rules['mask_parameter'] = _ci_param('mask', Cap(Regex(RESOURCE_PAT)))
    rules['size_parameter'] = _param('size', NT('float'))
    rules['time_parameter'] = _param('time', NT('float'))
    rules['wait_parameter'] = _param('wait', NT('float'))
    rules['update_parameter'] = _param('update', NT('integer'))
    rules['radius_parameter'] = _ci_param('radius', NT('float'))
    rules['brightness_parameter'] = _ci_param('brightness', NT('float'))
    rules['angle_parameter'] = _param('angle', NT('float'))
    rules['pitch_parameter'] = _param('pitch', NT('float'))
    rules['color_parameter'] = _ci_param('color', COLOR_CODE)
    rules['bcolor_parameter'] = _ci_param('bcolor', COLOR_CODE)
    rules['light_type_parameter'] = _ci_param('type', Cap(_one_of(LIGHT_TYPES, case_insensitive=True)))
    rules['fx_parameter'] = _ci_param('fx', Cap(_one_of(LIGHT_EFFECTS, case_insensitive=True)))
    rules['url_target_parameter'] = _ci_param('target', Cap(keyword('aw_3d')))

    # ── World coordinates ──
    rules['ns_coordinate'] = Seq(NT('float'), Cap(Regex(r'[NnSs]')))
    rules['ew_coordinate'] = Seq(NT('float'), Cap(Regex(r'[EeWw]')))
    rules['absolute_coordinates'] = Seq(NT('ns_coordinate'), WS, NT('ew_coordinate'))
    rules['relative_coordinates'] = Seq(NT('force_signed_float'), WS, NT('force_signed_float'))
    rules['altitude'] = Seq(Cap(Regex(r'[+\-]?')), NT('float'), Regex(r'[Aa]'))
    rules['direction'] = NT('integer')
    rules['world_coordinates'] = Seq(
        Ch(NT('absolute_coordinates'), NT('relative_coordinates')),
        Opt(Seq(WS, NT('altitude'))),
        Opt(Seq(WS, NT('direction'))),
    )
    # A world name never starts like a coordinate.
    rules['world_name'] = Cap(Regex(r'(?![0-9+\-.])[^;," \x00-\x1f]+'))

    # ── Commands ──
    for command_type, arguments in COMMAND_ARGUMENTS.items():
        rules[f'{command_type.value}_command'] = _generic_command(command_type, arguments)

    rules['animate_name'] = OBJECT_NAME
    rules['animate_texture'] = Cap(Regex(BASIC_RESOURCE_PAT))
    rules['animate_frames'] = _spaced('integer')
    rules['animate_command'] = Seq(
        keyword('animate'),
        Star(Seq(WS, Ch(NT('tag_parameter'), NT('animate_mask_status')))),
        WS, NT('animate_name'),
        WS, NT('animate_texture'),
        Opt(Seq(WS, NT('animate_frames'))),
    )
    rules['examine_command'] = keyword('examine')
    rules['teleport_command'] = Seq(
        keyword('teleport'),
        Opt(Seq(WS, NT('world_name'))),
        Opt(Seq(WS, NT('world_coordinates'))),
    )
    rules['warp_command'] = Seq(keyword('warp'), WS, NT('world_coordinates'))
    rules['invalid_command'] = Cap(Regex(r'[^;,]*'))

    return rules


def build_parser():
    """Compile the grammar and its semantic actions into a packrat parser."""
    grammar = Grammar(build_rules(), actions=build_actions(), start=START)
    return PackratParser(grammar)
