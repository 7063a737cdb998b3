"""
Node implementation for the htmlsoup DOM.
This module implements the base node shared by every variant of the parsed tree.
"""

from enum import IntEnum
from typing import Dict, List, Optional
import weakref

from ..query.builder import QueryBuilderMixin
from ..query.traversal import AncestorIterator, ChildIterator, NodeWalker


class NodeType(IntEnum):
    """Node types, numbered as in the DOM standard."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    PROCESSING_INSTRUCTION_NODE = 7
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_TYPE_NODE = 10


class Node(QueryBuilderMixin):
    """
    Base Node implementation for the DOM.

    A node owns its children and keeps only a weak reference to its parent,
    so a subtree never keeps the tree above it alive. Every node is also a
    query root: ``node.tag("a").find_all()`` searches the subtree below it.
    """

    # Name reported by ``name`` for non-element variants
    sentinel_name = "[node]"

    def __init__(self, node_type: NodeType):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
        """
        self.node_type = node_type

        # Node relationships
        self._parent_ref: Optional[weakref.ref] = None
        self.child_nodes: List['Node'] = []

        # Node properties
        self.node_name: str = "#node"
        self.node_value: Optional[str] = None

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Only the tree builder calls this; queries never modify the tree.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        child._parent_ref = weakref.ref(self)
        self.child_nodes.append(child)
        return child

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.child_nodes) > 0

    # Variant predicates
    def is_document(self) -> bool:
        return self.node_type == NodeType.DOCUMENT_NODE

    def is_doctype(self) -> bool:
        return self.node_type == NodeType.DOCUMENT_TYPE_NODE

    def is_text(self) -> bool:
        return self.node_type == NodeType.TEXT_NODE

    def is_comment(self) -> bool:
        return self.node_type == NodeType.COMMENT_NODE

    def is_processing_instruction(self) -> bool:
        return self.node_type == NodeType.PROCESSING_INSTRUCTION_NODE

    def is_element(self) -> bool:
        return self.node_type == NodeType.ELEMENT_NODE

    @property
    def name(self) -> str:
        """The element's local name, or a bracketed sentinel such as ``[text]``."""
        return self.sentinel_name

    @property
    def parent(self) -> Optional['Node']:
        """
        Get the parent node.

        The link is weak: nodes do not keep the tree above them alive. Hold
        on to the Soup (or Document) while navigating upwards, otherwise
        ``Soup(html).tag("b").find().parent`` is already None.

        Returns:
            The parent node, or None for the root or when the tree above
            this node has been released
        """
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def children(self) -> ChildIterator:
        """Iterate over the direct children of this node in document order."""
        return ChildIterator(self)

    @property
    def parents(self) -> AncestorIterator:
        """Iterate over the parent, grandparent, ... up to the document root."""
        return AncestorIterator(self)

    @property
    def text(self) -> str:
        """
        Get the text of this node and all its descendants.

        Text nodes are concatenated verbatim, in document order, with no
        separator.
        """
        return "".join(node.node_value or "" for node in NodeWalker(self) if node.is_text())

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get an attribute value. Only elements carry attributes."""
        return default

    @property
    def attrs(self) -> Dict[str, str]:
        """Attributes sorted by name. Only elements carry attributes."""
        return {}

    def display(self) -> str:
        """
        Render this node as an HTML fragment.

        Variants without a textual rendering produce an empty string.
        """
        return ""

    def _query_root(self) -> 'Node':
        return self

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name}>"
