"""
DOM implementation for htmlsoup.
This package provides the read-only node tree that html5lib output is
converted into.
"""

from .node import Node, NodeType
from .element import Element
from .attr import Attr
from .text import CharacterData, Text
from .comment import Comment
from .document import Document, DocumentType, ProcessingInstruction
from .tree_builder import parse_document

__all__ = [
    'Node', 'NodeType', 'Element', 'Attr', 'CharacterData', 'Text', 'Comment', 'Document',
    'DocumentType', 'ProcessingInstruction', 'parse_document',
]
