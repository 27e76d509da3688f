"""
Color resolution: preset names, hexadecimal codes and a string-hash fallback.
"""
import re

import numpy as np

from aw_action.coerce.constants import (
    AW_PRESET_COLORS, ULLONG_MAX, CHANNEL_MIN, CHANNEL_MAX,
)

_HEX_PREFIX = re.compile(r'^[a-f0-9]+')


def rgb(red, green, blue):
    """Build an RGB record with every channel clamped to [0, 255]."""
    return {
        'r': max(CHANNEL_MIN, min(int(red), CHANNEL_MAX)),
        'g': max(CHANNEL_MIN, min(int(green), CHANNEL_MAX)),
        'b': max(CHANNEL_MIN, min(int(blue), CHANNEL_MAX)),
    }


def _channel(value, shift):
    # value is never negative here, so Python's modulo already lands in [0, 255]
    return (value >> shift) % 256


def hex_to_rgb(hex_digits):
    """
    Interpret a run of hex digits as an unsigned integer color.

    Anything that does not fit in an unsigned 64-bit integer is white.
    """
    value = int(hex_digits, 16)
    if value > ULLONG_MAX:
        return rgb(255, 255, 255)
    return rgb(_channel(value, 16), _channel(value, 8), _channel(value, 0))


def string_hash32(text):
    """
    ``hash = code + ((hash << 5) - hash)`` over the UTF-16 code units of
    ``text``, wrapping at 32 bits.

    The recurrence is ``hash = 31 * hash + code``, so the result is the
    polynomial ``sum(code[i] * 31 ** (n - 1 - i))`` evaluated in uint32.
    Returns the unsigned 32-bit pattern.
    """
    codes = np.frombuffer(text.encode('utf-16-le'), dtype='<u2').astype(np.uint32)
    exponents = np.arange(codes.size)[::-1].astype(np.uint32)
    powers = np.power(np.uint32(31), exponents, dtype=np.uint32)
    return int(np.sum(codes * powers, dtype=np.uint32))


def hash_to_rgb(text):
    """Deterministic fallback color for names that are neither preset nor hex."""
    value = string_hash32(text)
    return {
        'r': (value & 0xFF0000) >> 16,
        'g': (value & 0x00FF00) >> 8,
        'b': value & 0x0000FF,
    }


def resolve_color(color, presets=AW_PRESET_COLORS):
    """
    Resolve a color token to an RGB record.

    Lookup order (case-insensitive): preset name, leading hexadecimal digits,
    string hash.

    Args:
        color: raw color token, e.g. ``'red'``, ``'ff0000'`` or ``'foo'``
        presets: name -> (r, g, b) table, the AW palette by default

    Returns:
        dict with integer ``r``, ``g`` and ``b`` keys
    """
    color = color.lower()
    if color in presets:
        return rgb(*presets[color])

    match = _HEX_PREFIX.match(color)
    if match:
        return hex_to_rgb(match.group(0))

    return hash_to_rgb(color)
