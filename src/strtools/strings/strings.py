"""Stateless string helpers.

This module provides functions for indenting multi-line text, checking and
normalizing prefixes and suffixes, converting arbitrary values to strings
without raising, generating random strings, converting hex strings to
base 36 and building capital camel case names.

Functions that receive bad input degrade to a sentinel (`''` or `None`)
instead of raising.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'tab_pad_new_lines',
    'pad_new_lines',
    'starts_with',
    'ends_with',
    'remove_trailing',
    'ensure_begins_with',
    'ensure_ends_with',
    'as_string',
    'random_string',
    'hex_to_base36',
    'to_capital_camel_case',
    'get_length_if_greater_than'
]

import logging
import random
from decimal import Decimal
from fractions import Fraction
from collections.abc import Mapping, Sequence, Set
from typing import Iterable, Optional
from strtools.charsets import ALPHA_UPPER_AND_DIGITS, HEX_LOWER
from strtools.dump import dump

logger = logging.getLogger(__name__)

SCALAR_TYPES = (int, float, complex, Decimal, Fraction)
COLLECTION_TYPES = (Sequence, Set, Mapping)
TEXT_TYPES = (str, bytes, bytearray)
BASE36_DIGITS = HEX_LOWER + 'ghijklmnopqrstuvwxyz'

def _has_own_str(value) -> bool:
    return type(value).__str__ is not object.__str__

def _to_string_method(value):
    method = getattr(value, 'to_string', None)
    return method if callable(method) else None

def _is_empty(value) -> bool:
    try:
        return not value
    except Exception:
        # array-likes refuse to be truth-tested
        return False

def _text(value) -> str:
    if isinstance(value, str):
        return value
    if not isinstance(value, SCALAR_TYPES + COLLECTION_TYPES + TEXT_TYPES) and value is not None \
            and not _has_own_str(value) and _to_string_method(value) is None:
        return f'{type(value).__name__} does not implement __str__()'
    return as_string(value)

def _coerce(value) -> str:
    return value if isinstance(value, str) else as_string(value)

def _ucfirst(string: str) -> str:
    return string[:1].upper() + string[1:]

def pad_new_lines(value, repetitions: int, pad_characters: str = ' ') -> str:
    """
    Insert padding after every newline in a value's text.

    Args:
        value: A string, or any value convertible with `as_string`
        repetitions: Number of copies of `pad_characters` to insert
        pad_characters: Text inserted after each newline

    Returns:
        Padded text. Objects with no string form yield a message naming their type.

    Example:
        >>> pad_new_lines('a\\nb', 2)
        'a\\n  b'
        >>> pad_new_lines('a\\nb\\nc', 1, '> ')
        'a\\n> b\\n> c'
    """
    return _text(value).replace('\n', '\n' + pad_characters * repetitions)

def tab_pad_new_lines(value, tab_count: int) -> str:
    """
    Indent every line after the first by `tab_count` tabs.

    Example:
        >>> tab_pad_new_lines('first\\nsecond', 1)
        'first\\n\\tsecond'
    """
    return pad_new_lines(value, tab_count, '\t')

def starts_with(haystack: str, needle: str) -> bool:
    """
    Check if a string starts with another. An empty needle always matches.

    Example:
        >>> starts_with('township', 'town')
        True
        >>> starts_with('town', 'township')
        False
    """
    haystack, needle = _coerce(haystack), _coerce(needle)
    return haystack[:len(needle)] == needle

def ends_with(haystack: str, needle: str) -> bool:
    """
    Check if a string ends with another. An empty needle always matches.

    Example:
        >>> ends_with('township', 'ship')
        True
    """
    haystack, needle = _coerce(haystack), _coerce(needle)
    return len(needle) == 0 or haystack[-len(needle):] == needle

def remove_trailing(character: str, string: str) -> str:
    """
    Remove every trailing occurrence of a character.

    Stripping only starts when the last character of `string` equals
    `character`. It then strips any trailing characters found in `character`.

    Args:
        character: Character to remove
        string: String to modify

    Returns:
        String without the trailing characters

    Example:
        >>> remove_trailing('x', 'abcxxx')
        'abc'
        >>> remove_trailing('/', 'path/to/dir//')
        'path/to/dir'
        >>> remove_trailing('x', '')
        ''
    """
    character, string = _coerce(character), _coerce(string)
    while string and string[-1] == character:
        string = string.rstrip(character)
    return string

def ensure_begins_with(haystack: str, needle: str) -> str:
    """
    Prefix `haystack` with `needle` unless it already begins with it.

    Only the first character of each string is compared, so `haystack` is
    returned unchanged whenever its first character equals the first
    character of `needle`, even if the rest of `needle` differs.

    Args:
        haystack: String to check
        needle: Prefix to ensure

    Returns:
        `needle` if `haystack` is empty, else `haystack` with `needle` prepended when
        the first characters differ

    Example:
        >>> ensure_begins_with('path', '/')
        '/path'
        >>> ensure_begins_with('/path', '/')
        '/path'
        >>> ensure_begins_with('', 'foo')
        'foo'
        >>> ensure_begins_with('bar', 'baz')
        'bar'
    """
    haystack, needle = _coerce(haystack), _coerce(needle)
    if not haystack:
        return needle
    if not needle or haystack[0] == needle[0]:
        return haystack
    return needle + haystack

def ensure_ends_with(haystack: str, needle: str) -> str:
    """
    Append `needle` to `haystack` unless it already ends with it.

    Like `ensure_begins_with`, only the last character of each string is compared.

    Example:
        >>> ensure_ends_with('path', '/')
        'path/'
        >>> ensure_ends_with('path/', '/')
        'path/'
    """
    haystack, needle = _coerce(haystack), _coerce(needle)
    if not haystack:
        return needle
    if not needle or haystack[-1] == needle[-1]:
        return haystack
    return haystack + needle

def as_string(value, max_length: Optional[int] = None) -> str:
    """
    Safely convert a value of any type into a string.

    Conversion rules, in order:
        1. Empty values (`None`, `False`, `0`, `''`, empty collections) become `''`
        2. Strings are returned as they are
        3. Numbers use `str()`, bytes are decoded as UTF-8
        4. Sequences, sets and mappings are dumped as YAML (see `strtools.dump`)
        5. Objects use their own `__str__`, or failing that a `to_string()` method
        6. Anything else becomes its type name

    A conversion that raises also falls back to the type name.

    Args:
        value: Any value
        max_length: Optional non-negative limit on the length of the result

    Returns:
       str: The string form of `value`, truncated to `max_length` characters

    Example:
        >>> as_string(None)
        ''
        >>> as_string(42)
        '42'
        >>> as_string(42, 1)
        '4'
        >>> as_string([1, 2])
        '- 1\\n- 2'
        >>> as_string(object())
        'object'
    """
    if _is_empty(value):
        return ''

    type_name = type(value).__name__
    try:
        if isinstance(value, str):
            text = value
        elif isinstance(value, (bytes, bytearray)):
            text = bytes(value).decode('utf-8', errors='replace')
        elif isinstance(value, SCALAR_TYPES):
            text = str(value)
        elif isinstance(value, COLLECTION_TYPES):
            text = dump(value)
        elif _has_own_str(value):
            text = str(value)
        elif _to_string_method(value) is not None:
            text = _to_string_method(value)()
        else:
            text = type_name
        if not isinstance(text, str):
            text = type_name
    except Exception as e:
        logger.debug('Could not convert %s to a string, using its type name: %r', type_name, e)
        text = type_name

    if isinstance(max_length, int) and not isinstance(max_length, bool) and max_length >= 0:
        return text[:max_length]
    return text

def random_string(length: int, character_set: str = ALPHA_UPPER_AND_DIGITS, rng: Optional[random.Random] = None) -> str:
    """
    Generate a random string from a character set.

    The set is shuffled, then `length` characters are drawn from it with
    replacement. Not suitable for security or cryptographic purposes, such as
    tokens or passwords; use `secrets` for those.

    Args:
        length: Number of characters to generate
        character_set: Characters to draw from, see `strtools.charsets`
        rng: Random source with `shuffle` and `randrange`, e.g. a seeded
            `random.Random`. Defaults to the process-wide `random` module.

    Returns:
        str: A string of exactly `length` characters, or `''` if `length` is not
        positive or `character_set` is empty

    Example:
        >>> len(random_string(10))
        10
        >>> random_string(0)
        ''
    """
    rng = rng or random
    if not isinstance(length, int) or length <= 0 or not character_set:
        return ''
    characters = list(character_set)
    rng.shuffle(characters)
    return ''.join(characters[rng.randrange(len(characters))] for _ in range(length))

def _to_base36(number: int) -> str:
    digits = []
    while True:
        number, remainder = divmod(number, 36)
        digits.append(BASE36_DIGITS[remainder])
        if number == 0:
            return ''.join(reversed(digits))

def hex_to_base36(hex_string: str) -> Optional[str]:
    """
    Convert a hex string to base 36, four characters at a time.

    Each complete four-character chunk is converted on its own and the results
    are concatenated. A trailing chunk shorter than four characters is dropped.
    The result is not the base 36 form of the whole hex number. Characters that
    are not hex digits are ignored within a chunk.

    Args:
        hex_string: Hexadecimal digits, either case

    Returns:
        Lowercase base 36 text, or None if `hex_string` is empty

    Example:
        >>> hex_to_base36('FFFF')
        '1ekf'
        >>> hex_to_base36('0000FFFF')
        '01ekf'
        >>> hex_to_base36('ffff12')
        '1ekf'
        >>> hex_to_base36('') is None
        True
    """
    hex_string = _coerce(hex_string)
    if not hex_string:
        return None

    chunks = [hex_string[i:i + 4] for i in range(0, len(hex_string), 4)]
    result = []
    for chunk in filter(lambda c: len(c) == 4, chunks):
        hex_digits = ''.join(c for c in chunk.lower() if c in HEX_LOWER)
        result.append(_to_base36(int(hex_digits or '0', 16)))
    return ''.join(result)

def to_capital_camel_case(string: str, split_characters: Iterable[str] = ('.', '_')) -> Optional[str]:
    """
    Convert a dotted or underscored name to capital camel case.

    The string is split on each split character in turn, and each split works
    on the result of the previous one. Empty segments are dropped and the first
    letter of every segment longer than one character is capitalized. The rest
    of each segment is left as it is.

    Args:
        string: Name to convert
        split_characters: Characters that separate words, applied in order

    Returns:
        Capital camel case name, or None if `string` is empty

    Example:
        >>> to_capital_camel_case('my_field_name')
        'MyFieldName'
        >>> to_capital_camel_case('my.field_name')
        'MyFieldName'
        >>> to_capital_camel_case('a_b_c')
        'Abc'
        >>> to_capital_camel_case('a', [])
        'A'
    """
    if not string:
        return None

    split_characters = list(split_characters or [])
    if not split_characters:
        return _ucfirst(string)

    camel_case = string
    for split_character in split_characters:
        if not camel_case:
            return None
        if not split_character or split_character not in camel_case:
            continue
        parts = filter(None, camel_case.split(split_character))
        camel_case = ''.join(_ucfirst(part) if len(part) > 1 else part for part in parts)
    return _ucfirst(camel_case)

def get_length_if_greater_than(value, minimum_length: int) -> int:
    """
    Track the longest value in a series.

    Pass each value along with the longest length seen so far. Values without
    a length are measured by the length of `as_string(value)`.

    Example:
        >>> get_length_if_greater_than('hello', 3)
        5
        >>> get_length_if_greater_than('hi', 10)
        10
        >>> width = 0
        >>> for town in ['Bath', 'Portland', 'Lee']:
        ...     width = get_length_if_greater_than(town, width)
        >>> width
        8
    """
    try:
        length = len(value)
    except TypeError:
        length = len(as_string(value))
    return length if length > minimum_length else minimum_length
