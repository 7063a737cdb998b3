"""
Query engine for htmlsoup.
This package provides patterns, node predicates, the lazy tree walker and
the chainable QueryBuilder.
"""

from .pattern import Pattern, Literal, BoolPattern, RegexPattern, FunctionPattern, regex, as_pattern
from .predicates import Query, EmptyQuery, TagQuery, AttrQuery, QueryStack
from .traversal import NodeWalker, ChildIterator, AncestorIterator
from .builder import QueryBuilder, QueryBuilderMixin

__all__ = [
    'Pattern', 'Literal', 'BoolPattern', 'RegexPattern', 'FunctionPattern', 'regex', 'as_pattern',
    'Query', 'EmptyQuery', 'TagQuery', 'AttrQuery', 'QueryStack',
    'NodeWalker', 'ChildIterator', 'AncestorIterator',
    'QueryBuilder', 'QueryBuilderMixin',
]
