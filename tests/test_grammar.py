import pytest
from pe.actions import Call, Constant

from aw_action.data_model import CommandType
from aw_action.grammar import build_rules, COMMAND_ARGUMENTS
from aw_action.semantics import build_actions
from conftest import commands, single_command


def test_every_action_has_a_rule():
    rules = build_rules()
    assert set(build_actions()) <= set(rules)


def test_every_command_has_a_rule():
    rules = build_rules()
    for command_type in CommandType:
        assert f'{command_type.value}_command' in rules


def test_generic_argument_rules_exist():
    rules = build_rules()
    for arguments in COMMAND_ARGUMENTS.values():
        for argument in arguments:
            assert argument in rules


@pytest.mark.parametrize('text', [
    'create colour red',
    'create texture',
    'create warp',
    'create 12345',
])
def test_unrecognized_or_empty_commands_vanish(text):
    assert commands(text) == []


def test_command_must_end_at_delimiter():
    # "solid off !!" is not a solid command, so it falls through to invalid
    assert commands('create solid off !!, color red') == [
        {'commandType': 'color', 'color': {'r': 255, 'g': 0, 'b': 0}},
    ]


def test_argument_keywords_are_case_sensitive():
    # NAME= is not a name parameter, so the token is the resource itself
    assert single_command('create texture NAME=foo')['texture'] == 'NAME=foo'


def test_some_parameters_are_case_insensitive():
    assert single_command('create light TYPE=point RADIUS=5')['type'] == 'point'
    assert single_command('create texture wood MASK=woodm')['mask'] == 'woodm'


def test_world_name_cannot_start_with_digit():
    assert commands('bump teleport 9lives', 'bump') == []


def test_actions_are_pe_builtins():
    actions = build_actions()
    assert all(isinstance(action, (Call, Constant)) for action in actions.values())
    assert isinstance(actions['overlap_status'], Constant)
