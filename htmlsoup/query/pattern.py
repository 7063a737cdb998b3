"""
Patterns: single-method predicates over strings.

Anything with a ``matches(haystack) -> bool`` method can be passed wherever
a query accepts a tag, attribute name, attribute value or class. The
built-in kinds cover literal strings, the ``True``/``False`` wildcards and
regular expressions; ``as_pattern`` turns plain Python values into them.

Example:

    class Prefix:
        def __init__(self, prefix):
            self.prefix = prefix

        def matches(self, haystack):
            return haystack.startswith(self.prefix)

    soup.tag(Prefix("h")).find_all()   # h1, h2, ..., head, header, html
"""

import re
from typing import Any, Callable, Protocol, Union, runtime_checkable


@runtime_checkable
class Pattern(Protocol):
    """A predicate over strings, used to match names and values."""

    def matches(self, haystack: str) -> bool:
        ...


class Literal:
    """Matches a string exactly."""

    __slots__ = ('value',)

    def __init__(self, value: str):
        self.value = value

    def matches(self, haystack: str) -> bool:
        return self.value == haystack

    def __repr__(self) -> str:
        return f"Literal({self.value!r})"


class BoolPattern:
    """``True`` matches everything, ``False`` matches nothing."""

    __slots__ = ('value',)

    def __init__(self, value: bool):
        self.value = bool(value)

    def matches(self, haystack: str) -> bool:
        return self.value

    def __repr__(self) -> str:
        return f"BoolPattern({self.value!r})"


class RegexPattern:
    """
    Matches when a regular expression is found anywhere in the string.

    The search is unanchored; use ``^`` and ``$`` to pin it.
    """

    __slots__ = ('regex',)

    def __init__(self, regex: Union[str, re.Pattern], flags: int = 0):
        if isinstance(regex, str):
            regex = re.compile(regex, flags)
        self.regex = regex

    def matches(self, haystack: str) -> bool:
        return self.regex.search(haystack) is not None

    def __repr__(self) -> str:
        return f"RegexPattern({self.regex.pattern!r})"


class FunctionPattern:
    """Adapts a plain callable ``f(haystack) -> bool`` to a Pattern."""

    __slots__ = ('func',)

    def __init__(self, func: Callable[[str], Any]):
        self.func = func

    def matches(self, haystack: str) -> bool:
        return bool(self.func(haystack))

    def __repr__(self) -> str:
        return f"FunctionPattern({self.func!r})"


# Shared wildcard used by attr_name() and attr_value()
ANY = BoolPattern(True)


def regex(expression: str, flags: int = 0) -> RegexPattern:
    """
    Build a regular-expression pattern.

    Args:
        expression: The regular expression source
        flags: ``re`` flags, e.g. ``re.IGNORECASE``

    Returns:
        A RegexPattern using unanchored search semantics
    """
    return RegexPattern(expression, flags)


def as_pattern(value: Any) -> Pattern:
    """
    Convert a query argument into a Pattern.

    Args:
        value: A string, a bool, a compiled regular expression, an object
            with a ``matches`` method, or a callable taking a string

    Returns:
        The corresponding Pattern

    Raises:
        TypeError: If the value cannot be used as a pattern
    """
    # bool before anything else: True/False are wildcards, not callables
    if isinstance(value, bool):
        return ANY if value else BoolPattern(False)
    if isinstance(value, str):
        return Literal(value)
    if isinstance(value, re.Pattern):
        return RegexPattern(value)
    if callable(getattr(value, 'matches', None)):
        return value
    if callable(value):
        return FunctionPattern(value)
    raise TypeError(f"Cannot use {type(value).__name__} as a pattern: {value!r}")
