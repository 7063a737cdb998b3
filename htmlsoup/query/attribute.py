"""
List-aware attribute matching.

Some HTML attributes hold a whitespace-separated list of tokens rather than
a single value (``class="foo bar"``). For those, a value pattern only needs
to match one token; for every other attribute it must match the whole
value.
"""

import re
from typing import FrozenSet, Tuple

from .pattern import Pattern

# Attributes that are token lists on every element
GLOBAL_LIST_ATTRIBUTES: FrozenSet[str] = frozenset({'class', 'accesskey', 'dropzone'})

# (element, attribute) pairs that are token lists
ELEMENT_LIST_ATTRIBUTES: FrozenSet[Tuple[str, str]] = frozenset({
    ('a', 'rel'),
    ('a', 'rev'),
    ('link', 'rel'),
    ('link', 'rev'),
    ('tr', 'headers'),
    ('th', 'headers'),
    ('form', 'accept-charset'),
    ('object', 'archive'),
    ('area', 'rel'),
    ('icon', 'sizes'),
    ('iframe', 'sandbox'),
    ('output', 'for'),
})

# One character of HTML's ASCII whitespace
_TOKEN_SEPARATOR = re.compile('[ \t\n\f\r]')


def is_list_attribute(tag_name: str, attr_name: str) -> bool:
    """
    Check whether an attribute holds a token list on the given element.

    Both names are compared case-insensitively.
    """
    tag_name = tag_name.lower()
    attr_name = attr_name.lower()
    return attr_name in GLOBAL_LIST_ATTRIBUTES or (tag_name, attr_name) in ELEMENT_LIST_ATTRIBUTES


def match_token_list(pattern: Pattern, value: str) -> bool:
    """
    Check whether any whitespace-separated token of ``value`` matches.

    Every separator character splits, so adjacent or leading separators
    yield empty tokens and an empty value is the single empty token;
    wildcards therefore still match ``class=""``.
    """
    return any(pattern.matches(token) for token in _TOKEN_SEPARATOR.split(value))


def list_aware_match(element, name_pattern: Pattern, value_pattern: Pattern) -> bool:
    """
    Match an element's attributes against a name and a value pattern.

    The element matches if at least one attribute's name satisfies
    ``name_pattern`` and its value satisfies ``value_pattern``, where token
    list attributes are matched token by token.

    Args:
        element: The element to test
        name_pattern: Pattern applied to attribute names
        value_pattern: Pattern applied to attribute values or tokens

    Returns:
        True if some attribute matches
    """
    tag_name = element.tag_name
    for attr in element.attributes:
        if not name_pattern.matches(attr.name):
            continue
        if is_list_attribute(tag_name, attr.name):
            if match_token_list(value_pattern, attr.value):
                return True
        elif value_pattern.matches(attr.value):
            return True
    return False
