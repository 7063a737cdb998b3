"""
Query predicates over DOM nodes.

A query is anything with a ``matches(node) -> bool`` method. The builder
combines tag and attribute queries into a ``QueryStack``, which matches a
node only when every query in it does.
"""

from typing import Iterator, Optional

from .attribute import list_aware_match
from .pattern import Pattern


class Query:
    """Base class for node predicates."""

    __slots__ = ()

    def matches(self, node) -> bool:
        raise NotImplementedError


class EmptyQuery(Query):
    """Matches every node, including text, comments and the document itself."""

    __slots__ = ()

    def matches(self, node) -> bool:
        return True

    def __repr__(self) -> str:
        return "EmptyQuery()"


class TagQuery(Query):
    """Matches elements whose tag name satisfies a pattern."""

    __slots__ = ('pattern',)

    def __init__(self, pattern: Pattern):
        self.pattern = pattern

    def matches(self, node) -> bool:
        if not node.is_element():
            return False
        return self.pattern.matches(node.tag_name)

    def __repr__(self) -> str:
        return f"TagQuery({self.pattern!r})"


class AttrQuery(Query):
    """
    Matches elements carrying an attribute whose name and value satisfy two patterns.

    Token list attributes such as ``class`` or ``rel`` match when any single
    token satisfies the value pattern.
    """

    __slots__ = ('key', 'value')

    def __init__(self, key: Pattern, value: Pattern):
        self.key = key
        self.value = value

    def matches(self, node) -> bool:
        if not node.is_element():
            return False
        return list_aware_match(node, self.key, self.value)

    def __repr__(self) -> str:
        return f"AttrQuery({self.key!r}, {self.value!r})"


EMPTY_QUERY = EmptyQuery()


class QueryStack(Query):
    """
    Conjunction of queries.

    Stacks are immutable linked cells: ``push`` is constant time and returns
    a new stack that shares the existing one, so an iterator built from a
    stack is unaffected by queries added to the builder afterwards.
    """

    __slots__ = ('query', 'next')

    def __init__(self, query: Query = EMPTY_QUERY, next: Optional['QueryStack'] = None):
        self.query = query
        self.next = next

    def push(self, query: Query) -> 'QueryStack':
        """Return a new stack that also requires ``query``."""
        return QueryStack(query, self)

    def matches(self, node) -> bool:
        # Short-circuits on the first query that fails
        stack = self
        while stack is not None:
            if not stack.query.matches(node):
                return False
            stack = stack.next
        return True

    def __iter__(self) -> Iterator[Query]:
        stack = self
        while stack is not None:
            if stack.query is not EMPTY_QUERY:
                yield stack.query
            stack = stack.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"QueryStack({list(self)!r})"
