"""String manipulation helpers.

This module provides functions for indenting text, normalizing prefixes and
suffixes, safe stringification, random strings and name conversions.
"""

from .strings import __all__
from .strings import *

__all__ = __all__
