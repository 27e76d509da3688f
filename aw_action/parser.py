"""
Public entry points: turn an action string into a trigger -> commands map.

    parse_action_string('create color red, solid off')
    # {'create': [{'commandType': 'color', 'color': {'r': 255, 'g': 0, 'b': 0}},
    #             {'commandType': 'solid', 'value': False}]}

A grammar mismatch is never raised to the caller: ``parse`` returns an empty
map and ``debug`` returns a human-readable diagnostic.
"""
import functools
import logging

import pe

from aw_action.data_model import UNWANTED_CHARS, ActionMap
from aw_action.grammar import build_parser
from aw_action.merge import merge_actions

LOGGER = logging.getLogger(__name__)

NO_MATCH_MESSAGE = 'action string does not match the grammar'


def clean_action_string(text):
    """Strip the stray control bytes that property dumps leave behind."""
    if not isinstance(text, str):
        raise TypeError(f"action string must be str, not {type(text).__name__}")
    for char in UNWANTED_CHARS:
        text = text.replace(char, '')
    return text


def format_parse_error(text, error):
    """
    Render a pe.ParseError as ``Line L, col C:`` followed by the offending
    line, a caret under the failure position and pe's message (the expected
    tokens). Positions are 1-based.
    """
    lineno = error.lineno or 0
    offset = error.offset or 0
    lines = text.split('\n')
    line = lines[lineno] if lineno < len(lines) else ''
    gutter = f'> {lineno + 1} | '
    caret = ' ' * (len(gutter) + offset) + '^'
    message = error.message or NO_MATCH_MESSAGE
    return f'Line {lineno + 1}, col {offset + 1}:\n{gutter}{line}\n{caret}\n{message}'


class ActionParser:
    """
    Compiled action string grammar.

    The packrat parser is built once per instance and only read afterwards,
    so one instance can be shared between threads.
    """

    def __init__(self):
        self._parser = build_parser()

    def _match(self, text):
        """Return the raw list of RawAction, raising pe.ParseError on mismatch."""
        match = self._parser.match(text)
        if match is None:
            raise pe.ParseError(NO_MATCH_MESSAGE,
                                lineno=0, offset=0)
        return match.value()

    def parse(self, text) -> ActionMap:
        """
        Args:
            text: action string as stored on an object

        Returns:
            dict mapping lowercase trigger -> list of command dicts, empty if
            the string does not match the grammar
        """
        text = clean_action_string(text)
        try:
            actions = self._match(text)
        except pe.ParseError as exc:
            LOGGER.debug("Action string %r does not parse: %s", text, exc)
            return {}
        return merge_actions(actions)

    def debug(self, text):
        """Diagnostic for a grammar mismatch, '' when the string matches."""
        text = clean_action_string(text)
        try:
            self._match(text)
        except pe.ParseError as exc:
            return format_parse_error(text, exc)
        return ''


@functools.lru_cache(maxsize=None)
def shared_parser():
    return ActionParser()


def parse_action_string(text):
    return shared_parser().parse(text)


def debug_action_string(text):
    return shared_parser().debug(text)
