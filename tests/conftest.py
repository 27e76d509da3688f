"""Shared test helpers for aw-action tests."""
from aw_action.data_model import RawAction
from aw_action.parser import ActionParser

# Building the grammar is the expensive part; every test module reuses one.
PARSER = ActionParser()


def parse(text):
    return PARSER.parse(text)


def commands(text, trigger='create'):
    """Merged command list of one trigger, [] if the trigger is absent."""
    return PARSER.parse(text).get(trigger, [])


def single_command(text, trigger='create'):
    """The only command of ``trigger``; fails the test if there is not exactly one."""
    found = commands(text, trigger)
    assert len(found) == 1, found
    return found[0]


def raw(trigger, *commands):
    return RawAction(trigger=trigger, commands=list(commands))


def rgb(r, g, b):
    return {'r': r, 'g': g, 'b': b}


def vec(x, y, z):
    return {'x': x, 'y': y, 'z': z}
