"""
Merge a raw parse (one RawAction per trigger group, in source order) into the
final trigger -> commands map.

- Triggers are case-insensitive; the first group for a trigger wins and later
  groups with the same trigger are ignored entirely.
- Within a group, rejected (``None``) commands and commands without payload
  are dropped, except for the zero-argument allow-list.
- ``name`` commands are keyed by type alone, everything else by
  ``(type, targetName, tag)``. The last command for a key wins, at the position
  where that key first appeared.
"""
import logging

from aw_action.data_model import (
    ZERO_ARGUMENT_COMMANDS, NON_PAYLOAD_FIELDS, SINGLETON_COMMANDS,
)

LOGGER = logging.getLogger(__name__)


def has_payload(command):
    return any(key not in NON_PAYLOAD_FIELDS for key in command)


def command_key(command):
    command_type = command['commandType']
    if command_type in SINGLETON_COMMANDS:
        return (command_type,)
    return (command_type, command.get('targetName', ''), command.get('tag', ''))


def merge_commands(commands):
    """Deduplicate one trigger's command list. Input records are not modified."""
    merged = {}
    for command in commands:
        if command is None:
            continue
        command = dict(command, commandType=command['commandType'].lower())
        if command['commandType'] not in ZERO_ARGUMENT_COMMANDS and not has_payload(command):
            LOGGER.debug("Dropping %r command without arguments", command['commandType'])
            continue
        merged[command_key(command)] = command
    return list(merged.values())


def merge_actions(actions):
    """
    Args:
        actions: iterable of RawAction

    Returns:
        dict mapping lowercase trigger -> non-empty list of command dicts
    """
    result = {}
    for action in actions:
        trigger = action.trigger.lower()
        if not trigger or trigger in result:
            continue
        commands = merge_commands(action.commands)
        if commands:
            result[trigger] = commands
    return result
