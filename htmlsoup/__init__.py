"""
htmlsoup: query and navigate parsed HTML documents.

    from htmlsoup import Soup

    soup = Soup(html)
    title = soup.tag("title").find()
    for link in soup.tag("a").class_("sister").find_all():
        print(link.get("href"), link.text)
"""

from .version import __version__
from .errors import SoupError, ParseError, FetchError, ConfigError
from .dom import (
    Node, NodeType, Element, Attr, Text, Comment, Document, DocumentType, ProcessingInstruction,
)
from .query import (
    Pattern, Literal, BoolPattern, RegexPattern, FunctionPattern, regex, as_pattern,
    QueryBuilder, NodeWalker, ChildIterator, AncestorIterator,
)
from .soup import Soup
from .utils.config import Config

__author__ = 'htmlsoup developers'
__description__ = 'Chainable queries over html5lib-parsed HTML documents.'

__all__ = [
    'Soup', 'Config',
    'SoupError', 'ParseError', 'FetchError', 'ConfigError',
    'Node', 'NodeType', 'Element', 'Attr', 'Text', 'Comment', 'Document', 'DocumentType',
    'ProcessingInstruction',
    'Pattern', 'Literal', 'BoolPattern', 'RegexPattern', 'FunctionPattern', 'regex', 'as_pattern',
    'QueryBuilder', 'NodeWalker', 'ChildIterator', 'AncestorIterator',
]
