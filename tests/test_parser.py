import pe
import pytest

from aw_action.parser import (
    ActionParser, clean_action_string, parse_action_string, debug_action_string,
    shared_parser, format_parse_error, NO_MATCH_MESSAGE,
)
from conftest import PARSER, parse, commands, rgb


def test_multiple_textures_with_tags():
    result = parse('create texture derp.jpg tag=0, texture derp2.jpg tag=1')
    assert result == {
        'create': [
            {'commandType': 'texture', 'texture': 'derp.jpg', 'tag': 0},
            {'commandType': 'texture', 'texture': 'derp2.jpg', 'tag': 1},
        ],
    }


def test_same_tag_texture_replaced_by_last():
    result = parse('create texture a.jpg tag=0, texture b.jpg tag=0')
    assert result == {'create': [{'commandType': 'texture', 'texture': 'b.jpg', 'tag': 0}]}


def test_several_triggers():
    result = parse('create color red; activate solid off; bump examine')
    assert list(result) == ['create', 'activate', 'bump']
    assert result['create'] == [{'commandType': 'color', 'color': rgb(255, 0, 0)}]
    assert result['activate'] == [{'commandType': 'solid', 'value': False}]
    assert result['bump'] == [{'commandType': 'examine'}]


def test_all_triggers_recognized():
    result = parse('create examine; activate examine; bump examine; adone examine; end examine')
    assert list(result) == ['create', 'activate', 'bump', 'adone', 'end']


def test_trigger_case_insensitive():
    assert parse('CREATE color red') == parse('create color red')
    assert 'activate' in parse('AcTiVaTe examine')


def test_command_keyword_case_insensitive():
    assert commands('create COLOR red') == [{'commandType': 'color', 'color': rgb(255, 0, 0)}]


def test_first_trigger_wins():
    result = parse('create color red; create color blue, solid off')
    assert result == {'create': [{'commandType': 'color', 'color': rgb(255, 0, 0)}]}


def test_empty_group_does_not_claim_trigger():
    # nothing survives in the first group, so no key is inserted for it
    result = parse('create solid; create color red')
    assert result == {'create': [{'commandType': 'color', 'color': rgb(255, 0, 0)}]}


def test_last_command_wins_at_first_position():
    result = commands('create color red, solid off, color blue')
    assert result == [
        {'commandType': 'color', 'color': rgb(0, 0, 255)},
        {'commandType': 'solid', 'value': False},
    ]


def test_name_command_is_singleton():
    result = commands('create name foo, name bar')
    assert result == [{'commandType': 'name', 'targetName': 'bar'}]


def test_distinct_targets_are_kept():
    result = commands('create solid off, solid box yes')
    assert result == [
        {'commandType': 'solid', 'value': False},
        {'commandType': 'solid', 'targetName': 'box', 'value': True},
    ]


def test_zero_argument_allow_list():
    assert parse('activate examine') == {'activate': [{'commandType': 'examine'}]}
    assert parse('activate sign') == {'activate': [{'commandType': 'sign'}]}
    assert parse('activate solid') == {}


def test_duplicate_field_rejects_command():
    assert parse('create move time=1 time=2') == {}
    assert commands('create move 1 time=1 time=2, color red') == [
        {'commandType': 'color', 'color': rgb(255, 0, 0)},
    ]


def test_garbage_command_does_not_abort():
    result = parse('create this is nonsense, color red; activate whatever')
    assert result == {'create': [{'commandType': 'color', 'color': rgb(255, 0, 0)}]}


def test_unparseable_string_is_empty():
    assert parse('hello world') == {}
    # no partial result for the good prefix
    assert parse('create color red; hello') == {}


@pytest.mark.parametrize('text', ['', '   ', ';', ' ; ; '])
def test_empty_strings(text):
    assert parse(text) == {}
    assert PARSER.debug(text) == ''


def test_whitespace_and_delimiters():
    expected = {'create': [{'commandType': 'color', 'color': rgb(255, 0, 0)},
                           {'commandType': 'solid', 'value': False}]}
    assert parse('  create   color   red ,, solid off ,  ;;  ') == expected
    assert parse('create\tcolor red,\nsolid off') == expected


def test_unwanted_characters_are_stripped():
    assert clean_action_string('crea\x7fte col\x80or red') == 'create color red'
    assert parse('create\x7f color red\x80') == {
        'create': [{'commandType': 'color', 'color': rgb(255, 0, 0)}],
    }


@pytest.mark.parametrize('value', [None, 42, b'create color red', ['create']])
def test_non_string_input_raises(value):
    with pytest.raises(TypeError):
        PARSER.parse(value)
    with pytest.raises(TypeError):
        PARSER.debug(value)


def test_debug_reports_position():
    message = PARSER.debug('create color red; hello')
    lines = message.split('\n')
    assert lines[0].startswith('Line 1, col ')
    assert lines[1] == '> 1 | create color red; hello'
    assert lines[2].rstrip().endswith('^')
    # the position is reported once, followed by what the grammar expected
    assert message.count('Line ') == 1
    assert len(lines) >= 4
    assert lines[3].strip()


def test_format_parse_error_layout():
    error = pe.ParseError('expected ";"', lineno=0, offset=4)
    assert format_parse_error('abcdefg', error) == (
        'Line 1, col 5:\n'
        '> 1 | abcdefg\n'
        '          ^\n'
        'expected ";"'
    )


def test_format_parse_error_without_message():
    error = pe.ParseError(lineno=0, offset=0)
    assert format_parse_error('x', error).endswith('\n' + NO_MATCH_MESSAGE)


def test_debug_empty_on_match_even_when_commands_are_dropped():
    assert PARSER.debug('create color red') == ''
    assert PARSER.debug('create bogus, move time=1 time=2') == ''


def test_parse_is_idempotent_across_calls():
    text = 'create color red, texture wood.jpg; bump teleport 1N 2W'
    assert PARSER.parse(text) == PARSER.parse(text)


def test_module_level_helpers_share_one_parser():
    assert shared_parser() is shared_parser()
    assert parse_action_string('create color red') == parse('create color red')
    assert debug_action_string('create color red') == ''
    assert debug_action_string('nope') != ''


def test_independent_instances_agree():
    other = ActionParser()
    text = 'create sign "Welcome!" color=white bcolor=black'
    assert other.parse(text) == PARSER.parse(text)
