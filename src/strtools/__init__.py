"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging
from . import charsets
from . import dump
from . import strings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'charsets',
    'dump',
    'strings'
]
