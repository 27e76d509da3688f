"""Pure coercion helpers: booleans, numbers, vectors, world coordinates, colors."""
from .constants import AW_PRESET_COLORS, WEB_PRESET_COLORS, ULLONG_MAX, SCALE_MIN
from .scalars import to_boolean, to_integer, to_float, clamp, clamp_unit
from .coordinates import (complete_coordinates, complete_scale, hemisphere_value,
                          absolute_coordinates, relative_coordinates, altitude,
                          world_coordinates)
from .colors import rgb, resolve_color, hex_to_rgb, hash_to_rgb, string_hash32
