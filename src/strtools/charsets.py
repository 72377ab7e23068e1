"""Named character sets used as sampling alphabets.

The combined sets are plain concatenations of their parts. Nothing is
deduplicated, so every set keeps its characters in the documented order.
"""

__docformat__ = 'google'

__all__ = [
    # Constants
    'ALPHA',
    'ALPHA_AND_DIGITS',
    'ALPHA_LOWER',
    'ALPHA_LOWER_AND_DIGITS',
    'ALPHA_UPPER',
    'ALPHA_UPPER_AND_DIGITS',
    'DIGITS',
    'HEX_LOWER',
    'CHARACTER_SETS',
    # Functions
    'character_set'
]

from types import MappingProxyType
from typing import Mapping

## Building blocks
DIGITS: str = '0123456789'
"""Decimal digits '0' through '9'."""

ALPHA_LOWER: str = 'abcdefghijklmnopqrstuvwxyz'
"""Lowercase Latin letters."""

ALPHA_UPPER: str = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
"""Uppercase Latin letters."""

## Combined
ALPHA: str = ALPHA_UPPER + ALPHA_LOWER
"""Uppercase then lowercase Latin letters."""

ALPHA_AND_DIGITS: str = ALPHA + DIGITS

ALPHA_LOWER_AND_DIGITS: str = ALPHA_LOWER + DIGITS

ALPHA_UPPER_AND_DIGITS: str = ALPHA_UPPER + DIGITS
"""Uppercase letters then digits.

Default alphabet of `strtools.strings.random_string`."""

HEX_LOWER: str = DIGITS + 'abcdef'
"""Lowercase hexadecimal digits."""

CHARACTER_SETS: Mapping[str, str] = MappingProxyType({
    'ALPHA': ALPHA,
    'ALPHA_AND_DIGITS': ALPHA_AND_DIGITS,
    'ALPHA_LOWER': ALPHA_LOWER,
    'ALPHA_LOWER_AND_DIGITS': ALPHA_LOWER_AND_DIGITS,
    'ALPHA_UPPER': ALPHA_UPPER,
    'ALPHA_UPPER_AND_DIGITS': ALPHA_UPPER_AND_DIGITS,
    'DIGITS': DIGITS,
    'HEX_LOWER': HEX_LOWER
})
"""Read-only mapping of character set names to their characters."""

def character_set(name: str) -> str:
    """
    Look up a character set by name.

    Args:
        name: Name of the set, case-insensitive

    Returns:
        The characters of the named set

    Raises:
        KeyError: If no set has that name

    Example:
        >>> character_set('hex_lower')
        '0123456789abcdef'
        >>> character_set('DIGITS')
        '0123456789'
    """
    try:
        return CHARACTER_SETS[name.upper()]
    except KeyError:
        raise KeyError(f"Unknown character set '{name}', expected one of: {', '.join(CHARACTER_SETS)}") from None
