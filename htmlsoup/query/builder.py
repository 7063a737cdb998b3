"""
QueryBuilder: the chainable query surface.

A builder starts at a root node, accumulates predicates and options, and
runs the query with ``find()`` (first match or None) or ``find_all()``
(lazy iterator of matches in document order).

Example:

    soup = Soup('<div id="foo">BAR</div><div id="baz">QUUX</div>')
    div = soup.tag("div").attr("id", "foo").find()
    for link in div.tag("a").class_("external").limit(10).find_all():
        print(link.get("href"))
"""

from typing import Any, Iterator, Optional

from .pattern import ANY, as_pattern
from .predicates import AttrQuery, Query, QueryStack, TagQuery
from .traversal import NodeWalker


class QueryBuilder:
    """
    Builds and runs a query over the subtree rooted at a node.

    Every predicate method adds a requirement and returns the builder, so
    calls chain. Running a query does not consume the builder; the same
    builder can be run again and yields the same results.
    """

    def __init__(self, root):
        """
        Initialize a new QueryBuilder.

        Args:
            root: The node whose subtree is searched (the root itself included)
        """
        self.root = root
        self._queries = QueryStack()
        self._limit: Optional[int] = None
        self._recursive = True
        self._max_depth: Optional[int] = None

    def _push(self, query: Query) -> 'QueryBuilder':
        self._queries = self._queries.push(query)
        return self

    def tag(self, tag: Any) -> 'QueryBuilder':
        """
        Require elements whose tag name matches ``tag``.

        Args:
            tag: A pattern (string, bool, compiled regex, callable or Pattern)

        Returns:
            This builder
        """
        return self._push(TagQuery(as_pattern(tag)))

    def attr(self, name: Any, value: Any) -> 'QueryBuilder':
        """
        Require an attribute whose name matches ``name`` and value matches ``value``.

        Token list attributes (``class``, ``rel`` on links, ...) match when
        any one token matches ``value``.

        Args:
            name: Pattern for the attribute name
            value: Pattern for the attribute value

        Returns:
            This builder
        """
        return self._push(AttrQuery(as_pattern(name), as_pattern(value)))

    def attr_name(self, name: Any) -> 'QueryBuilder':
        """Require an attribute with a matching name, whatever its value."""
        return self._push(AttrQuery(as_pattern(name), ANY))

    def attr_value(self, value: Any) -> 'QueryBuilder':
        """Require any attribute with a matching value."""
        return self._push(AttrQuery(ANY, as_pattern(value)))

    def class_(self, value: Any) -> 'QueryBuilder':
        """Require a class token matching ``value``. Shorthand for ``attr("class", value)``."""
        return self.attr("class", value)

    def limit(self, limit: int) -> 'QueryBuilder':
        """
        Cap the number of results.

        Args:
            limit: Maximum number of nodes ``find_all()`` yields

        Returns:
            This builder

        Raises:
            TypeError: If the limit is not an int
            ValueError: If the limit is negative
        """
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise TypeError(f"limit must be an int, got {type(limit).__name__}")
        if limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self._limit = limit
        return self

    def recursive(self, recursive: bool) -> 'QueryBuilder':
        """
        Choose between searching the whole subtree and only the root plus its children.

        Args:
            recursive: False restricts the search to the root and its direct children

        Returns:
            This builder
        """
        self._recursive = bool(recursive)
        return self

    def max_depth(self, depth: Optional[int]) -> 'QueryBuilder':
        """
        Cap how many levels below the root the search descends.

        ``max_depth(0)`` examines only the root, ``max_depth(1)`` the root and
        its children. ``None`` removes the cap. Independent of ``limit``.

        Raises:
            ValueError: If the depth is negative
        """
        if depth is not None:
            if isinstance(depth, bool) or not isinstance(depth, int):
                raise TypeError(f"max_depth must be an int or None, got {type(depth).__name__}")
            if depth < 0:
                raise ValueError(f"max_depth must be non-negative, got {depth}")
        self._max_depth = depth
        return self

    @property
    def depth_bound(self) -> Optional[int]:
        """The effective depth cap, combining ``recursive`` and ``max_depth``."""
        bound = self._max_depth
        if not self._recursive:
            bound = 1 if bound is None else min(bound, 1)
        return bound

    @property
    def queries(self) -> QueryStack:
        """The conjunction of predicates added so far."""
        return self._queries

    def find(self):
        """
        Run the query and return the first match.

        Returns:
            The first matching node in document order, or None
        """
        limit = 1 if self._limit is None else min(self._limit, 1)
        walker = NodeWalker(self.root, self._queries, self.depth_bound, limit)
        return next(walker, None)

    def find_all(self) -> Iterator:
        """
        Run the query lazily.

        Returns:
            An iterator over matching nodes in document order, honoring
            ``limit``. Predicates added to the builder afterwards do not
            affect an iterator that was already created.
        """
        return NodeWalker(self.root, self._queries, self.depth_bound, self._limit)

    def __iter__(self) -> Iterator:
        return self.find_all()

    def __repr__(self) -> str:
        return (f"QueryBuilder(root={self.root!r}, queries={self._queries!r}, "
                f"limit={self._limit!r}, recursive={self._recursive!r}, "
                f"max_depth={self._max_depth!r})")


class QueryBuilderMixin:
    """
    Adds the QueryBuilder starter methods to the implementing type.

    Implementers provide ``_query_root()``, the node a new query starts from.
    """

    def _query_root(self):
        raise NotImplementedError

    def query(self) -> QueryBuilder:
        """Start an empty query rooted here."""
        return QueryBuilder(self._query_root())

    def tag(self, tag: Any) -> QueryBuilder:
        """Start a query for elements whose tag name matches ``tag``."""
        return self.query().tag(tag)

    def attr(self, name: Any, value: Any) -> QueryBuilder:
        """Start a query for elements with a matching attribute name/value pair."""
        return self.query().attr(name, value)

    def attr_name(self, name: Any) -> QueryBuilder:
        """Start a query for elements with an attribute named ``name``."""
        return self.query().attr_name(name)

    def attr_value(self, value: Any) -> QueryBuilder:
        """Start a query for elements with any attribute valued ``value``."""
        return self.query().attr_value(value)

    def class_(self, value: Any) -> QueryBuilder:
        """Start a query for elements with a class token matching ``value``."""
        return self.query().class_(value)

    def limit(self, limit: int) -> QueryBuilder:
        """Start a query capped at ``limit`` results."""
        return self.query().limit(limit)

    def recursive(self, recursive: bool) -> QueryBuilder:
        """Start a query with recursion set to ``recursive``."""
        return self.query().recursive(recursive)

    def max_depth(self, depth: Optional[int]) -> QueryBuilder:
        """Start a query that descends at most ``depth`` levels."""
        return self.query().max_depth(depth)

    def find(self):
        """Return the first node of the subtree (the root itself)."""
        return self.query().find()

    def find_all(self) -> Iterator:
        """Iterate over every node of the subtree, in document order."""
        return self.query().find_all()
