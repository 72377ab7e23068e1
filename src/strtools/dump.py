"""Human-readable rendering of sequences and mappings.

Collections are rendered as block-style YAML. Anything PyYAML's safe
representer does not know is written as a plain string, so dumping a
collection never fails because of what it contains.
"""

__docformat__ = 'google'

__all__ = [
    'dump'
]

from collections.abc import Mapping, Sequence, Set
import yaml

class ReadableDumper(yaml.SafeDumper):
    """
    `yaml.SafeDumper` that writes tuples and sets as plain lists, bytes as text
    and unknown objects as their string form.

    @private
    """

def _represent_sequence(dumper, data):
    return dumper.represent_list(list(data))

def _represent_bytes(dumper, data):
    return dumper.represent_str(bytes(data).decode('utf-8', errors='replace'))

def _represent_other(dumper, data):
    if isinstance(data, Mapping):
        return dumper.represent_dict(data)
    if isinstance(data, (Set, Sequence)) and not isinstance(data, str):
        return _represent_sequence(dumper, data)
    from strtools.strings import as_string
    return dumper.represent_str(as_string(data))

ReadableDumper.add_representer(tuple, _represent_sequence)
ReadableDumper.add_representer(set, _represent_sequence)
ReadableDumper.add_representer(frozenset, _represent_sequence)
ReadableDumper.add_representer(bytes, _represent_bytes)
ReadableDumper.add_representer(bytearray, _represent_bytes)
ReadableDumper.add_multi_representer(dict, ReadableDumper.represent_dict)
ReadableDumper.add_multi_representer(list, _represent_sequence)
ReadableDumper.add_multi_representer(str, ReadableDumper.represent_str)
ReadableDumper.add_representer(None, _represent_other)

def dump(value) -> str:
    """
    Render a value as block-style YAML.

    Mapping keys keep their insertion order.

    Args:
        value: Sequence or mapping to render, nested to any depth

    Returns:
        str: YAML text without the trailing newline

    Example:
        >>> print(dump({'name': 'Portland', 'codes': (1, 2)}))
        name: Portland
        codes:
        - 1
        - 2
        >>> dump([1, 2])
        '- 1\\n- 2'
    """
    text = yaml.dump(
        value,
        Dumper=ReadableDumper,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True
    )
    if text.endswith('\n...\n'):
        text = text[:-4]
    return text.rstrip('\n')
