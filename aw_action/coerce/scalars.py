"""Keyword, number and range coercions shared by the semantic actions."""
from aw_action.coerce.constants import UNIT_MIN, UNIT_MAX

ENABLED_WORDS = ('on', 'true', 'yes')
DISABLED_WORDS = ('off', 'false', 'no')


def to_boolean(word):
    if word in ENABLED_WORDS:
        return True
    if word in DISABLED_WORDS:
        return False
    raise ValueError(f"Not a boolean keyword: {word!r}")


def to_integer(digits):
    return int(digits)


def to_float(text):
    """Parse ``12``, ``.5``, ``1.25`` with an optional leading sign."""
    return float(text)


def clamp(value, minimum, maximum):
    return min(max(value, minimum), maximum)


def clamp_unit(value):
    """Opacity and light intensities live in [0.0, 1.0]."""
    return clamp(value, UNIT_MIN, UNIT_MAX)
